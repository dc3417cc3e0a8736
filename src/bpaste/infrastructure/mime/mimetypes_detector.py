"""MIME detection — implements MimeDetectorPort.

Files with a known extension are typed with ``mimetypes``; everything else
is sniffed from its leading bytes.
"""

from __future__ import annotations

import mimetypes

from bpaste.domain.errors import InputError
from bpaste.domain.models.content import FileContent, FileReference
from bpaste.domain.ports.mime_detector import MimeDetectorPort

TEXT_PLAIN = "text/plain"
OCTET_STREAM = "application/octet-stream"

_SNIFF_BYTES = 8192


def sniff_bytes(data: bytes) -> str:
    """Guess a MIME type from raw content."""
    sample = data[:_SNIFF_BYTES]
    if b"\x00" in sample:
        return OCTET_STREAM
    try:
        sample.decode("utf-8")
    except UnicodeDecodeError as exc:
        # A multi-byte sequence cut off at the sample boundary is still text.
        truncated = len(sample) == _SNIFF_BYTES and exc.reason == "unexpected end of data"
        if not truncated:
            return OCTET_STREAM
    return TEXT_PLAIN


class MimetypesDetector(MimeDetectorPort):
    """Detect content types by extension, falling back to a byte sniff."""

    def detect(self, file_content: FileContent) -> str:
        content = file_content.content
        if not isinstance(content, FileReference):
            return sniff_bytes(content.read_all())

        guessed, _ = mimetypes.guess_type(content.path.name)
        if guessed:
            return guessed
        try:
            with content.path.open("rb") as fh:
                head = fh.read(_SNIFF_BYTES)
        except OSError as exc:
            raise InputError(f"Failed to read file '{content.path}': {exc.strerror}") from exc
        return sniff_bytes(head)
