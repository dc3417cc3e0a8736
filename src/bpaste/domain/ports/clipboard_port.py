"""Port: Clipboard — read and write the system clipboard."""

from abc import ABC, abstractmethod


class ClipboardPort(ABC):
    """Contract for clipboard operations."""

    @abstractmethod
    def paste(self) -> str:
        """Return the current text contents of the clipboard.

        Raises:
            ClipboardError: If the clipboard cannot be accessed or read.
        """
        ...

    @abstractmethod
    def copy(self, text: str) -> None:
        """Copy the given text to the system clipboard.

        Raises:
            ClipboardError: If no clipboard backend is available.
        """
        ...
