"""Port: Configuration source — environment and config-file layers."""

from abc import ABC, abstractmethod
from typing import Mapping, Optional


class ConfigSourcePort(ABC):
    """Contract for the raw layers the config resolver merges.

    Keeps process-global state (environment, filesystem) out of the
    resolver so it can be exercised with injected fake layers.
    """

    @abstractmethod
    def environ(self) -> Mapping[str, str]:
        """Return the environment variables visible to this run."""
        ...

    @abstractmethod
    def load_file_layer(self, path: Optional[str]) -> Optional[dict[str, str]]:
        """Return the parsed config file, or ``None`` if there is none.

        Args:
            path: Explicit config path, or ``None`` to run discovery.

        A file that cannot be read or parsed is reported and treated as
        absent; it never partially applies.
        """
        ...
