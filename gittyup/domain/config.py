"""Config domain models for gittyup.

Configuration is stored in TOML files and controls how git is invoked: which
executable to run, how long a single invocation may take, and a few
behavioural defaults for the repository façades.
"""

from dataclasses import dataclass, field, replace
from typing import Any

DEFAULT_STASH_MESSAGE = "Temporary stash while saving tuts configuration"


def _check_type(name: str, value: Any, expected: type) -> None:
    # bool is an int subclass; only accept it where a bool is expected
    if not isinstance(value, expected) or (expected is not bool and isinstance(value, bool)):
        raise TypeError(f"{name} must be {expected.__name__}, got {type(value).__name__}")


def _check_timeout(timeout: Any) -> None:
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise TypeError(f"timeout must be a number, got {type(timeout).__name__}")
    if timeout < 0:
        raise ValueError(f"timeout cannot be negative, got {timeout}")


@dataclass(frozen=True)
class GitConfig:
    """Configuration for local git invocations.

    Attributes:
        executable: Name or path of the git executable.
        timeout: Seconds a single invocation may run (0 disables the limit).

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If executable is empty or timeout is negative.
    """

    executable: str = "git"
    timeout: float = 60.0

    def __post_init__(self) -> None:
        """Validate git config after initialization."""
        _check_type("executable", self.executable, str)
        if not self.executable:
            raise ValueError("executable must not be empty")
        _check_timeout(self.timeout)


@dataclass(frozen=True)
class RemoteConfig:
    """Configuration for remote (ls-remote) queries.

    Attributes:
        timeout: Seconds a single ls-remote may run (0 disables the limit).
        loose_branch_match: Match branches by substring instead of exact ref.
    """

    timeout: float = 30.0
    loose_branch_match: bool = False

    def __post_init__(self) -> None:
        """Validate remote config after initialization."""
        _check_timeout(self.timeout)
        _check_type("loose_branch_match", self.loose_branch_match, bool)


@dataclass(frozen=True)
class StashConfig:
    """Configuration for stash operations.

    Attributes:
        message: Message recorded with every stash entry.
    """

    message: str = DEFAULT_STASH_MESSAGE

    def __post_init__(self) -> None:
        """Validate stash config after initialization."""
        _check_type("message", self.message, str)
        if not self.message.strip():
            raise ValueError("stash message must not be blank")


@dataclass(frozen=True)
class GittyUpConfig:
    """Complete gittyup configuration.

    Attributes:
        git: Local invocation configuration
        remote: Remote query configuration
        stash: Stash configuration
    """

    git: GitConfig = field(default_factory=GitConfig)
    remote: RemoteConfig = field(default_factory=RemoteConfig)
    stash: StashConfig = field(default_factory=StashConfig)

    @staticmethod
    def default() -> "GittyUpConfig":
        """Create a config with all default values."""
        return GittyUpConfig(
            git=GitConfig(),
            remote=RemoteConfig(),
            stash=StashConfig(),
        )

    @staticmethod
    def from_partial(base: "GittyUpConfig", data: dict[str, Any]) -> "GittyUpConfig":
        """Overlay partial config data onto an existing config.

        Only keys present in ``data`` replace values of ``base``; each section
        is re-validated after the merge.

        Args:
            base: Config providing the values that are not overridden.
            data: Raw config data, as loaded from TOML.

        Returns:
            New GittyUpConfig with the overrides applied.

        Raises:
            ValueError: If a section is not a table or a value is invalid.
            TypeError: If a section contains unknown keys or a value has the
                wrong type.
        """
        sections = {}
        for name in ("git", "remote", "stash"):
            overrides = data.get(name, {})
            if not isinstance(overrides, dict):
                raise ValueError(f"[{name}] must be a table, got {type(overrides).__name__}")
            sections[name] = replace(getattr(base, name), **overrides)
        return GittyUpConfig(**sections)

    @property
    def git_timeout(self) -> float | None:
        """Local invocation timeout, or None when disabled."""
        return self.git.timeout or None

    @property
    def remote_timeout(self) -> float | None:
        """Remote invocation timeout, or None when disabled."""
        return self.remote.timeout or None
