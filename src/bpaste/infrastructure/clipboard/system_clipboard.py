"""System clipboard — implements ClipboardPort using subprocess."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys

from bpaste.domain.errors import ClipboardError
from bpaste.domain.ports.clipboard_port import ClipboardPort

# (copy command, paste command) pairs, in order of preference.
_WAYLAND_TOOLS = [
    (["wl-copy"], ["wl-paste", "--no-newline"]),
]
_X11_TOOLS = [
    (["xclip", "-selection", "clipboard"], ["xclip", "-selection", "clipboard", "-o"]),
    (["xsel", "--clipboard", "--input"], ["xsel", "--clipboard", "--output"]),
]


def _detect_backend() -> tuple[list[str], list[str]]:
    """Return the clipboard commands appropriate for this OS.

    Returns:
        ``(copy_cmd, paste_cmd)`` CLI token lists
        (e.g. ``(['pbcopy'], ['pbpaste'])``).

    Raises:
        ClipboardError: No supported clipboard tool found.
    """
    if sys.platform == "darwin":
        return ["pbcopy"], ["pbpaste"]

    if sys.platform.startswith("linux"):
        candidates = list(_X11_TOOLS)
        if os.environ.get("WAYLAND_DISPLAY"):
            candidates = _WAYLAND_TOOLS + candidates
        for copy_cmd, paste_cmd in candidates:
            if shutil.which(copy_cmd[0]) and shutil.which(paste_cmd[0]):
                return copy_cmd, paste_cmd
        raise ClipboardError("No clipboard tool found. Install xclip, xsel or wl-clipboard.")

    if sys.platform == "win32":
        return ["clip"], ["powershell", "-NoProfile", "-Command", "Get-Clipboard -Raw"]

    raise ClipboardError(f"Unsupported platform: {sys.platform}")


class SystemClipboard(ClipboardPort):
    """Clipboard adapter using OS-level subprocess commands."""

    def paste(self) -> str:
        """Read the clipboard via subprocess."""
        _, cmd = _detect_backend()
        try:
            result = subprocess.run(cmd, check=True, capture_output=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"Failed to read clipboard: {exc}") from exc
        return result.stdout.decode("utf-8", errors="replace")

    def copy(self, text: str) -> None:
        """Copy text to system clipboard via subprocess."""
        cmd, _ = _detect_backend()
        try:
            subprocess.run(
                cmd,
                input=text.encode("utf-8"),
                check=True,
                capture_output=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"Clipboard copy failed: {exc}") from exc
