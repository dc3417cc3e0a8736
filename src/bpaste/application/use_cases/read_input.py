"""Use Case: Read Input.

Turns the selected input source into ``FileContent``. Files are only
checked here and read later; stdin and clipboard are read into memory.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from bpaste.domain.errors import InputError
from bpaste.domain.models.content import (
    FileContent,
    FileReference,
    InMemoryBytes,
    InputKind,
    InputSource,
)
from bpaste.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
UNKNOWN_FILENAME = "unknown"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReadInputUseCase:
    """Read content from a file, stdin or the clipboard."""

    def __init__(
        self,
        clipboard: ClipboardPort,
        stdin: Optional[BinaryIO] = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._clipboard = clipboard
        self._stdin = stdin
        self._clock = clock

    def execute(self, source: InputSource) -> FileContent:
        """Produce the content for *source*.

        Raises:
            InputError: Missing file, directory, or empty stdin/clipboard.
            ClipboardError: The clipboard cannot be read.
        """
        if source.kind is InputKind.FILE:
            content = self._from_file(source.path or "")
        elif source.kind is InputKind.STDIN:
            content = self._from_stdin()
        else:
            content = self._from_clipboard()
        logger.debug("Read %d bytes from %s", content.length(), source.kind.value)
        return content

    def _timestamped(self, prefix: str) -> str:
        return f"{prefix}-{self._clock().strftime(TIMESTAMP_FORMAT)}"

    def _from_file(self, path_str: str) -> FileContent:
        path = Path(path_str)
        if not path.exists():
            raise InputError(f"File '{path_str}' not found")
        if path.is_dir():
            raise InputError(f"'{path_str}' is a directory, not a file")
        return FileContent(content=FileReference(path), filename=path.name or UNKNOWN_FILENAME)

    def _from_stdin(self) -> FileContent:
        stream = self._stdin if self._stdin is not None else sys.stdin.buffer
        data = stream.read()
        if not data:
            raise InputError("No input provided via stdin")
        return FileContent(content=InMemoryBytes(data), filename=self._timestamped("stdin"))

    def _from_clipboard(self) -> FileContent:
        text = self._clipboard.paste()
        if not text:
            raise InputError("Clipboard is empty")
        return FileContent(
            content=InMemoryBytes(text.encode("utf-8")),
            filename=self._timestamped("clipboard"),
        )
