"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from typing import BinaryIO, Optional

from bpaste.domain.ports.clipboard_port import ClipboardPort
from bpaste.domain.ports.config_source import ConfigSourcePort
from bpaste.domain.ports.http_transport import HttpTransportPort
from bpaste.domain.ports.mime_detector import MimeDetectorPort

from bpaste.infrastructure.clipboard.system_clipboard import SystemClipboard
from bpaste.infrastructure.config.environment_source import EnvironmentConfigSource
from bpaste.infrastructure.http.requests_transport import RequestsTransport
from bpaste.infrastructure.mime.mimetypes_detector import MimetypesDetector

from bpaste.application.config_resolver import ConfigResolver
from bpaste.application.use_cases.copy_url import CopyUrlUseCase
from bpaste.application.use_cases.read_input import ReadInputUseCase
from bpaste.application.use_cases.upload_content import UploadContentUseCase


class Container:
    """Simple dependency injection container.

    Wires infrastructure implementations to domain ports and provides
    pre-configured use cases. Every adapter can be replaced, which is how
    the tests run without a network, clipboard or real environment.

    Usage::

        container = Container()
        config = container.config_resolver().resolve(CliOverrides())
        content = container.read_input().execute(InputSource.from_argument("notes.txt"))
        url = container.upload_content().execute(config, content)
    """

    def __init__(
        self,
        config_source: Optional[ConfigSourcePort] = None,
        clipboard: Optional[ClipboardPort] = None,
        transport: Optional[HttpTransportPort] = None,
        mime_detector: Optional[MimeDetectorPort] = None,
        stdin: Optional[BinaryIO] = None,
    ) -> None:
        self._config_source = config_source or EnvironmentConfigSource()
        self._clipboard = clipboard or SystemClipboard()
        self._transport = transport or RequestsTransport()
        self._mime_detector = mime_detector or MimetypesDetector()
        self._stdin = stdin

    # -- Port accessors ------------------------------------------------------

    @property
    def config_source(self) -> ConfigSourcePort:
        return self._config_source

    @property
    def clipboard(self) -> ClipboardPort:
        return self._clipboard

    @property
    def transport(self) -> HttpTransportPort:
        return self._transport

    # -- Use Case factories --------------------------------------------------

    def config_resolver(self) -> ConfigResolver:
        """Create the layered config resolver."""
        return ConfigResolver(source=self._config_source)

    def read_input(self) -> ReadInputUseCase:
        """Create a use case for reading file, stdin or clipboard input."""
        return ReadInputUseCase(clipboard=self._clipboard, stdin=self._stdin)

    def upload_content(self) -> UploadContentUseCase:
        """Create a use case for uploading content."""
        return UploadContentUseCase(transport=self._transport, mime_detector=self._mime_detector)

    def copy_url(self) -> CopyUrlUseCase:
        """Create a use case for copying the result URL to the clipboard."""
        return CopyUrlUseCase(clipboard=self._clipboard)
