"""Domain errors — custom exceptions for bpaste.

These exceptions are raised by domain services and adapters and caught by
the presentation layer. They carry no infrastructure dependencies.
"""


class BpasteError(Exception):
    """Base exception for all bpaste errors."""


class ConfigError(BpasteError):
    """Raised when configuration is invalid or missing."""


class InputError(BpasteError):
    """Raised when the input source cannot provide content to upload."""


class SizeLimitError(BpasteError):
    """Raised when content exceeds the configured maximum size."""


class ProtocolError(BpasteError):
    """Raised when the paste service answers with an unusable response."""


class ClipboardError(BpasteError):
    """Raised when clipboard operations fail."""
