"""Resolved runtime configuration.

``Config`` is built exactly once per run by the config resolver and is
immutable afterwards. Invalid combinations are rejected at construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_MAX_FILE_SIZE = 4096

_ALLOWED_SCHEMES = ("http://", "https://")


class Config(BaseModel):
    """Validated connection settings for the paste service.

    Field order matters: validation errors are reported in this order.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False, description="Static API key sent as Basic auth.")
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL of the paste service.",
    )
    max_file_size: int = Field(
        default=DEFAULT_MAX_FILE_SIZE,
        description="Largest accepted upload, in bytes.",
    )

    @field_validator("api_key")
    @classmethod
    def _api_key_present(cls, value: str) -> str:
        if not value:
            raise ValueError("API key not provided (CLI/env/config); cannot proceed")
        return value

    @field_validator("base_url")
    @classmethod
    def _base_url_scheme(cls, value: str) -> str:
        if not value.startswith(_ALLOWED_SCHEMES):
            raise ValueError(f"Base URL must start with http:// or https:// (got '{value}')")
        # Item URLs are built as f"{base_url}/{path}".
        return value.rstrip("/")

    @field_validator("max_file_size")
    @classmethod
    def _max_file_size_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Maximum file size must be greater than 0")
        return value

    @property
    def items_url(self) -> str:
        """Endpoint that accepts new items."""
        return f"{self.base_url}/apis/rest/items"
