"""TOML-based configuration provider.

Config loading priority (highest to lowest):
1. Local: <repo>/.gittyup.toml or an explicitly given file
2. Global: ~/.config/gittyup/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from gittyup.domain.config import GittyUpConfig
from gittyup.shared.config_io import get_global_config_path, load_config

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Implements config cascade:
    1. Load global config if present
    2. Load local config if present
    3. Local values override global values (key-level merge per section)
    4. Missing values fall back to built-in defaults

    Gracefully handles missing or invalid configs with warnings.
    """

    def load(self, local_path: Path | None = None) -> GittyUpConfig:
        """Load configuration with global fallback.

        Args:
            local_path: Repository-specific config file, if any.

        Returns:
            GittyUpConfig instance with merged global/local values or defaults
        """
        global_path = get_global_config_path()

        config = GittyUpConfig.default()

        if global_path.exists():
            try:
                config = load_config(global_path, config)
                logger.debug("Loaded global config from %s", global_path)
            except (FileNotFoundError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to parse global config at %s: %s. Ignoring global config.",
                    global_path,
                    e,
                )

        if local_path is not None and local_path.exists():
            try:
                config = load_config(local_path, config)
                logger.debug("Loaded local config from %s", local_path)
            except (FileNotFoundError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to parse %s: %s. Using global/default configuration.",
                    local_path,
                    e,
                )

        return config
