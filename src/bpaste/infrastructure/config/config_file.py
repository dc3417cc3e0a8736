"""Config file reader: ``key = value`` format and XDG discovery.

Format: one ``key = value`` pair per line. Blank lines and lines whose
first non-blank character is ``#`` are ignored. The line is split on the
first ``=``, so values may contain ``=`` themselves.

Discovery order (first existing file wins):

1. ``$XDG_CONFIG_HOME/bpaste/bpaste.conf`` (fallback ``~/.config``)
2. ``<dir>/bpaste/bpaste.conf`` for each entry of ``$XDG_CONFIG_DIRS``
   (fallback ``/etc/xdg``)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from platformdirs.unix import Unix

from bpaste.domain.errors import ConfigError

logger = logging.getLogger(__name__)

_APP_NAME = "bpaste"
_CONFIG_FILENAME = "bpaste.conf"


def candidate_paths() -> list[Path]:
    """Return every location searched for a config file, in order."""
    dirs = Unix(appname=_APP_NAME, multipath=True)
    candidates = [Path(dirs.user_config_dir) / _CONFIG_FILENAME]
    for entry in dirs.site_config_dir.split(os.pathsep):
        # An empty XDG_CONFIG_DIRS entry turns into a bare app name.
        if not entry or entry == _APP_NAME:
            continue
        candidates.append(Path(entry) / _CONFIG_FILENAME)
    return candidates


def discover_config_path() -> Optional[Path]:
    """Return the first existing config file, or ``None``."""
    for path in candidate_paths():
        if path.is_file():
            logger.debug("Using config file %s", path)
            return path
    return None


def parse_config_text(text: str, source: str = "<string>") -> dict[str, str]:
    """Parse config file contents into a key/value mapping.

    Args:
        text: Raw file contents.
        source: Name used in error messages.

    Returns:
        Mapping of keys to values, both stripped of surrounding whitespace.

    Raises:
        ConfigError: A non-comment line has no ``=``. Nothing is returned
            in that case; a broken file never partially applies.
    """
    values: dict[str, str] = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ConfigError(f"Malformed line {lineno} in {source}: '{line}'")
        values[key.strip()] = value.strip()
    return values


def parse_config_file(path: Path) -> dict[str, str]:
    """Read and parse the config file at *path*.

    Raises:
        ConfigError: The file cannot be read or contains a malformed line.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read config file '{path}': {exc}") from exc
    return parse_config_text(text, source=str(path))
