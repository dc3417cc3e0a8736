"""Port: MIME detector — name the media type of content to upload."""

from abc import ABC, abstractmethod

from bpaste.domain.models.content import FileContent


class MimeDetectorPort(ABC):
    """Contract for content-type detection."""

    @abstractmethod
    def detect(self, file_content: FileContent) -> str:
        """Return a MIME type such as ``text/plain``."""
        ...
