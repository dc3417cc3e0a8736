"""HTTP transport — implements HttpTransportPort via requests."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import requests

from bpaste.domain.errors import ProtocolError
from bpaste.domain.ports.http_transport import HttpResponse, HttpTransportPort

logger = logging.getLogger(__name__)


class RequestsTransport(HttpTransportPort):
    """Send a single POST with ``requests``; no retries.

    Args:
        timeout: Seconds to wait for the server, or ``None`` for the
            library default (wait indefinitely).
        session: Optional session to send through.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._timeout = timeout
        self._session = session

    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> HttpResponse:
        sender = self._session if self._session is not None else requests
        logger.debug("POST %s (%d bytes)", url, len(body))
        try:
            resp = sender.post(url, headers=dict(headers), data=body, timeout=self._timeout)
        except requests.RequestException as exc:
            raise ProtocolError(f"Request to {url} failed: {exc}") from exc
        return HttpResponse(status_code=resp.status_code, headers=dict(resp.headers))
