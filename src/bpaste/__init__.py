"""Upload files, stdin or clipboard content to a bepasty server."""

__version__ = "0.1.0"
