"""Infrastructure layer — external framework adapters."""

from bpaste.infrastructure.clipboard.system_clipboard import SystemClipboard
from bpaste.infrastructure.config.environment_source import EnvironmentConfigSource
from bpaste.infrastructure.http.requests_transport import RequestsTransport
from bpaste.infrastructure.mime.mimetypes_detector import MimetypesDetector

__all__ = [
    "EnvironmentConfigSource",
    "MimetypesDetector",
    "RequestsTransport",
    "SystemClipboard",
]
