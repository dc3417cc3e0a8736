"""Input sources and the content read from them.

``FileContent.content`` is one of two variants sharing the same
``length()`` / ``read_all()`` surface:

* ``InMemoryBytes``: stdin and clipboard data, which have no backing path.
* ``FileReference``: a path on disk, read lazily at upload time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from bpaste.domain.errors import InputError

STDIN_MARKER = "-"


class InputKind(str, Enum):
    """Where the content to upload comes from."""

    FILE = "file"
    STDIN = "stdin"
    CLIPBOARD = "clipboard"


@dataclass(frozen=True)
class InputSource:
    """The single input source selected for this run."""

    kind: InputKind
    path: Optional[str] = None

    @classmethod
    def from_argument(cls, argument: Optional[str]) -> InputSource:
        """Select the source from the positional CLI argument.

        No argument means clipboard, ``-`` means stdin, anything else is a
        file path.
        """
        if argument is None:
            return cls(InputKind.CLIPBOARD)
        if argument == STDIN_MARKER:
            return cls(InputKind.STDIN)
        return cls(InputKind.FILE, path=argument)


@dataclass(frozen=True)
class InMemoryBytes:
    data: bytes

    def length(self) -> int:
        return len(self.data)

    def read_all(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class FileReference:
    path: Path

    def length(self) -> int:
        try:
            return self.path.stat().st_size
        except OSError as exc:
            raise InputError(f"Cannot stat '{self.path}': {exc.strerror}") from exc

    def read_all(self) -> bytes:
        try:
            return self.path.read_bytes()
        except OSError as exc:
            raise InputError(f"Failed to read file '{self.path}': {exc.strerror}") from exc


Content = Union[InMemoryBytes, FileReference]


@dataclass(frozen=True)
class FileContent:
    """Content to upload plus the filename announced to the server."""

    content: Content
    filename: str

    def length(self) -> int:
        return self.content.length()

    def read_all(self) -> bytes:
        return self.content.read_all()
