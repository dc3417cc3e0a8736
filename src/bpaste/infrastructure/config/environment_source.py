"""Process config source — implements ConfigSourcePort.

Reads the real process environment and the config file found on disk.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from bpaste.domain.errors import ConfigError
from bpaste.domain.ports.config_source import ConfigSourcePort
from bpaste.infrastructure.config.config_file import discover_config_path, parse_config_file

logger = logging.getLogger(__name__)


class EnvironmentConfigSource(ConfigSourcePort):
    """Config layers backed by ``os.environ`` and the filesystem.

    Parameters
    ----------
    environ : Mapping[str, str] | None
        Override the environment (useful for testing).
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ

    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def load_file_layer(self, path: Optional[str]) -> Optional[dict[str, str]]:
        config_path = Path(path).expanduser() if path else discover_config_path()
        if config_path is None:
            return None

        try:
            return parse_config_file(config_path)
        except ConfigError as exc:
            logger.warning("Ignoring config file %s: %s", config_path, exc)
            return None
