"""Layered configuration resolution.

Each field takes the first value present in, from highest to lowest
precedence: command-line flag, environment variable, config file key,
built-in default.

==================  ======================  ===============  ==========================
Field               Environment variable    File key         Default
==================  ======================  ===============  ==========================
``base_url``        ``BPASTE_API_BASE_URL``   ``base_url``       ``http://localhost:8000``
``api_key``         ``BPASTE_API_KEY``        ``api_key``        none (required)
``max_file_size``   ``BPASTE_MAX_FILE_SIZE``  ``max_file_size``  ``4096``
==================  ======================  ===============  ==========================

The config file itself is ``--config-path``, else ``BPASTE_CONFIG_PATH``,
else the first file found by XDG discovery.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from pydantic import ValidationError

from bpaste.application.error_messages import first_error_message
from bpaste.domain.errors import ConfigError
from bpaste.domain.models.config import DEFAULT_BASE_URL, DEFAULT_MAX_FILE_SIZE, Config
from bpaste.domain.ports.config_source import ConfigSourcePort
from bpaste.domain.sizes import try_parse_size

logger = logging.getLogger(__name__)

ENV_BASE_URL = "BPASTE_API_BASE_URL"
ENV_API_KEY = "BPASTE_API_KEY"
ENV_MAX_FILE_SIZE = "BPASTE_MAX_FILE_SIZE"
ENV_CONFIG_PATH = "BPASTE_CONFIG_PATH"

KEY_BASE_URL = "base_url"
KEY_API_KEY = "api_key"
KEY_MAX_FILE_SIZE = "max_file_size"

_KNOWN_KEYS = frozenset({KEY_BASE_URL, KEY_API_KEY, KEY_MAX_FILE_SIZE})


@dataclass(frozen=True)
class CliOverrides:
    """Values given on the command line; ``None`` means not given."""

    base_url: Optional[str] = None
    api_key: Optional[str] = None
    max_file_size: Optional[int] = None
    config_path: Optional[str] = None


def _first_present(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value is not None:
            return value
    return None


def _size_or_default(raw: str, origin: str) -> int:
    parsed = try_parse_size(raw)
    if parsed is None:
        logger.debug("Unparseable size %r from %s; using default %d", raw, origin, DEFAULT_MAX_FILE_SIZE)
        return DEFAULT_MAX_FILE_SIZE
    return parsed


def _resolve_max_file_size(
    overrides: CliOverrides,
    environment: Mapping[str, str],
    file_layer: Mapping[str, str],
) -> int:
    # A present but malformed value yields the default, not the next layer.
    if overrides.max_file_size is not None:
        return overrides.max_file_size
    if ENV_MAX_FILE_SIZE in environment:
        return _size_or_default(environment[ENV_MAX_FILE_SIZE], ENV_MAX_FILE_SIZE)
    if KEY_MAX_FILE_SIZE in file_layer:
        return _size_or_default(file_layer[KEY_MAX_FILE_SIZE], f"config key {KEY_MAX_FILE_SIZE}")
    return DEFAULT_MAX_FILE_SIZE


def config_path_for(overrides: CliOverrides, environment: Mapping[str, str]) -> Optional[str]:
    """Explicit config file path, or ``None`` when discovery should run."""
    return overrides.config_path or environment.get(ENV_CONFIG_PATH) or None


def resolve_config(
    overrides: CliOverrides,
    environment: Mapping[str, str],
    file_layer: Optional[Mapping[str, str]] = None,
) -> Config:
    """Merge the four layers into a validated :class:`Config`.

    Args:
        overrides: Command-line values.
        environment: Environment variables.
        file_layer: Parsed config file, or ``None`` if there is none.

    Returns:
        The resolved configuration.

    Raises:
        ConfigError: The merged values are invalid. Checks run in order:
            API key present, base URL scheme, positive maximum size.
    """
    file_layer = file_layer or {}
    for key in sorted(set(file_layer) - _KNOWN_KEYS):
        logger.debug("Ignoring unknown config key %r", key)

    base_url = _first_present(
        overrides.base_url,
        environment.get(ENV_BASE_URL),
        file_layer.get(KEY_BASE_URL),
        DEFAULT_BASE_URL,
    )
    api_key = _first_present(
        overrides.api_key,
        environment.get(ENV_API_KEY),
        file_layer.get(KEY_API_KEY),
        "",
    )
    max_file_size = _resolve_max_file_size(overrides, environment, file_layer)

    try:
        return Config(api_key=api_key, base_url=base_url, max_file_size=max_file_size)
    except ValidationError as exc:
        raise ConfigError(first_error_message(exc)) from exc


class ConfigResolver:
    """Resolve :class:`Config` from CLI overrides and a config source."""

    def __init__(self, source: ConfigSourcePort) -> None:
        self._source = source

    def resolve(self, overrides: CliOverrides) -> Config:
        environment = self._source.environ()
        file_layer = self._source.load_file_layer(config_path_for(overrides, environment))
        config = resolve_config(overrides, environment, file_layer)
        logger.debug("Max file size: %d bytes", config.max_file_size)
        return config
