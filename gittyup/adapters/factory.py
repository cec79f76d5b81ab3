"""Factory classes for configuration and repository instantiation.

This module centralizes the creation of repository façades and their
dependencies, keeping the CLI layer free from direct adapter construction.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gittyup.domain.config import GittyUpConfig
    from gittyup.ports.config import ConfigProvider
    from gittyup.ports.logger import DebugLogger
    from gittyup.ports.vcs import LocalVCS, RemoteVCS


class ConfigFactory:
    """Factory for creating configuration providers."""

    def create_config_provider(self) -> ConfigProvider:
        from gittyup.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()


class RepositoryFactory:
    """Factory for creating repository façades from configuration.

    Args:
        config: GittyUpConfig with git, remote and stash settings.
        logger: Debug sink passed to every executor; defaults to module loggers.
    """

    def __init__(self, config: GittyUpConfig, logger: DebugLogger | None = None) -> None:
        self._config = config
        self._logger = logger

    def create_local_repository(self, path: Path) -> LocalVCS:
        from gittyup.adapters.git_cmd import LocalRepository

        return LocalRepository(
            path,
            logger=self._logger,
            timeout=self._config.git_timeout,
            git_executable=self._config.git.executable,
            stash_message=self._config.stash.message,
        )

    def create_remote_repository(self, url: str) -> RemoteVCS:
        from gittyup.adapters.git_cmd import RemoteRepository

        return RemoteRepository(
            url,
            logger=self._logger,
            timeout=self._config.remote_timeout,
            git_executable=self._config.git.executable,
            loose_branch_match=self._config.remote.loose_branch_match,
        )
