"""Config file reading and the process config source."""

from bpaste.infrastructure.config.config_file import (
    discover_config_path,
    parse_config_file,
    parse_config_text,
)
from bpaste.infrastructure.config.environment_source import EnvironmentConfigSource

__all__ = [
    "EnvironmentConfigSource",
    "discover_config_path",
    "parse_config_file",
    "parse_config_text",
]
