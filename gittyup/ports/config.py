"""Configuration provider port.

Defines the interface for loading and accessing application configuration.
"""

from pathlib import Path
from typing import Protocol

from gittyup.domain.config import GittyUpConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, local_path: Path | None = None) -> GittyUpConfig:
        """Load configuration, optionally overlaying a local config file.

        Args:
            local_path: Path to a repository-specific config file, if any.

        Returns:
            GittyUpConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
