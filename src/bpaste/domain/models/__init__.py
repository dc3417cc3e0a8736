"""Domain models — public API."""

from bpaste.domain.models.config import DEFAULT_BASE_URL, DEFAULT_MAX_FILE_SIZE, Config
from bpaste.domain.models.content import (
    Content,
    FileContent,
    FileReference,
    InMemoryBytes,
    InputKind,
    InputSource,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_FILE_SIZE",
    "Config",
    "Content",
    "FileContent",
    "FileReference",
    "InMemoryBytes",
    "InputKind",
    "InputSource",
]
