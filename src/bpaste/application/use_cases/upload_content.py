"""Use Case: Upload Content.

Encodes ``FileContent`` for the paste service's REST API and sends it in
a single POST::

    POST {base_url}/apis/rest/items
    Authorization: Basic base64("username:" + api_key)
    Content-Range: bytes 0-{length - 1}/{length}
    Content-Filename: {filename}
    Content-Type: {mime type}

    base64(content)

The server answers with ``Content-Location: .../{item_id}``; the item is
then reachable at ``{base_url}/{item_id}``.
"""

from __future__ import annotations

import base64
import logging

from bpaste.domain.errors import InputError, ProtocolError, SizeLimitError
from bpaste.domain.models.config import Config
from bpaste.domain.models.content import FileContent
from bpaste.domain.ports.http_transport import HttpTransportPort
from bpaste.domain.ports.mime_detector import MimeDetectorPort

logger = logging.getLogger(__name__)

AUTH_USERNAME = "username"


def content_range(length: int) -> str:
    """``Content-Range`` value covering *length* bytes.

    Raises:
        ValueError: *length* is below 1; an empty range cannot be expressed.
    """
    if length < 1:
        raise ValueError(f"Cannot build a byte range for {length} bytes")
    return f"bytes 0-{length - 1}/{length}"


def basic_auth(api_key: str) -> str:
    """``Authorization`` value for the API key."""
    token = base64.b64encode(f"{AUTH_USERNAME}:{api_key}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def item_url(base_url: str, content_location: str) -> str:
    """Public URL of the item named by a ``Content-Location`` header.

    Raises:
        ProtocolError: The header has no final path segment.
    """
    item_id = content_location.strip().split("/")[-1]
    if not item_id:
        raise ProtocolError(f"Invalid Content-Location header: '{content_location}'")
    return f"{base_url}/{item_id}"


def build_headers(config: Config, filename: str, length: int, mime_type: str) -> dict[str, str]:
    """Request headers for an upload of *length* bytes."""
    try:
        filename.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise InputError(f"Filename '{filename}' cannot be sent in an HTTP header") from exc
    return {
        "Authorization": basic_auth(config.api_key),
        "Content-Range": content_range(length),
        "Content-Filename": filename,
        "Content-Type": mime_type,
    }


class UploadContentUseCase:
    """Upload content and return the URL of the created item."""

    def __init__(self, transport: HttpTransportPort, mime_detector: MimeDetectorPort) -> None:
        self._transport = transport
        self._mime_detector = mime_detector

    def execute(self, config: Config, file_content: FileContent) -> str:
        """Upload *file_content* to the service described by *config*.

        Returns:
            The item URL, ``{base_url}/{item_id}``.

        Raises:
            SizeLimitError: Content is larger than ``config.max_file_size``.
            InputError: Content is empty or cannot be read.
            ProtocolError: Transport failure, non-2xx status, or a missing
                ``Content-Location`` header.
        """
        length = file_content.length()
        if length > config.max_file_size:
            raise SizeLimitError(
                f"File size ({length} bytes) exceeds maximum limit of "
                f"{config.max_file_size} bytes"
            )
        if length == 0:
            raise InputError(f"'{file_content.filename}' is empty; nothing to upload")

        mime_type = self._mime_detector.detect(file_content)
        logger.debug("Detected MIME type: %s", mime_type)
        headers = build_headers(config, file_content.filename, length, mime_type)

        data = file_content.read_all()
        if len(data) != length:
            raise InputError(f"'{file_content.filename}' changed while it was being read")
        body = base64.b64encode(data)

        response = self._transport.post(config.items_url, headers, body)
        if not response.ok:
            raise ProtocolError(f"Upload failed with status: {response.status_code}")

        location = response.header("Content-Location")
        if location is None:
            raise ProtocolError("No Content-Location header found in response")
        return item_url(config.base_url, location)
