"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of GittyUpConfig to/from TOML format.
"""

import os
import platform
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from gittyup.domain.config import DEFAULT_STASH_MESSAGE, GittyUpConfig

LOCAL_CONFIG_NAME = ".gittyup.toml"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/gittyup/config.toml or ~/.config/gittyup/config.toml
    - Windows: %APPDATA%/gittyup/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "gittyup" / "config.toml"
        return Path.home() / ".config" / "gittyup" / "config.toml"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "gittyup" / "config.toml"
        return Path.home() / ".config" / "gittyup" / "config.toml"


def get_local_config_path(repo_path: Path) -> Path:
    """Get the path of the repository-specific config file (may not exist)."""
    return repo_path / LOCAL_CONFIG_NAME


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def load_config(path: Path, base: GittyUpConfig | None = None) -> GittyUpConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file
        base: Config supplying values the file leaves out (defaults if None)

    Returns:
        GittyUpConfig with the file's values laid over ``base``

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed or a value is invalid
        TypeError: If a section has unknown keys or a value has the wrong type
    """
    data = load_config_data(path)
    return GittyUpConfig.from_partial(base or GittyUpConfig.default(), data)


def config_to_data(config: GittyUpConfig) -> dict[str, Any]:
    """Convert a GittyUpConfig into TOML-serializable sections."""
    return {
        "git": {
            "executable": config.git.executable,
            "timeout": config.git.timeout,
        },
        "remote": {
            "timeout": config.remote.timeout,
            "loose_branch_match": config.remote.loose_branch_match,
        },
        "stash": {
            "message": config.stash.message,
        },
    }


def save_config(config: GittyUpConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: GittyUpConfig to save
        path: Destination path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(config_to_data(config), f)


def create_default_config_file(path: Path) -> None:
    """Create a default config file with sensible defaults and comments.

    Args:
        path: Destination path
    """
    # We use a template string to preserve comments and formatting
    template = f"""\
# gittyup configuration
# Created by: gittyup config init

[git]
# git executable (name on PATH or absolute path)
executable = "git"

# Seconds a single git command may run (0 = no limit)
timeout = 60.0

[remote]
# Seconds a single ls-remote may run (0 = no limit)
timeout = 30.0

# Match remote branches by substring instead of the exact refs/heads/<name>.
# Similar names collide in this mode (main vs main-backup).
loose_branch_match = false

[stash]
# Message recorded with every stash entry
message = "{DEFAULT_STASH_MESSAGE}"
"""

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        f.write(template)
