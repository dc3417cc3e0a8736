"""Port: HTTP transport — send a single POST request."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class HttpResponse:
    """The parts of a response the uploader looks at."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


class HttpTransportPort(ABC):
    """Contract for the network call made by the uploader."""

    @abstractmethod
    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> HttpResponse:
        """POST *body* to *url* and return the response.

        Raises:
            ProtocolError: If the request could not be completed.
        """
        ...
