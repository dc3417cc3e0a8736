"""Use Case: Copy URL to Clipboard.

Best-effort: a clipboard failure is reported in the result, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from bpaste.domain.errors import ClipboardError
from bpaste.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CopyResult:
    """Outcome of a write-back; ``error`` is set when ``copied`` is false."""

    url: str
    copied: bool
    error: Optional[str] = None


class CopyUrlUseCase:
    """Copy the uploaded item's URL to the clipboard."""

    def __init__(self, clipboard: ClipboardPort) -> None:
        self._clipboard = clipboard

    def execute(self, url: str) -> CopyResult:
        try:
            self._clipboard.copy(url)
        except ClipboardError as exc:
            logger.debug("Clipboard write-back failed: %s", exc)
            return CopyResult(url=url, copied=False, error=str(exc))
        return CopyResult(url=url, copied=True)
