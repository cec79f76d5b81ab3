"""Git adapters built on the git command-line interface."""

from gittyup.adapters.git_cmd.errors import GitCommandError, GitTimeoutError
from gittyup.adapters.git_cmd.executor import CommandExecutor, CommandResult
from gittyup.adapters.git_cmd.local_repository import LocalRepository
from gittyup.adapters.git_cmd.remote_repository import RemoteRepository

__all__ = [
    "CommandExecutor",
    "CommandResult",
    "GitCommandError",
    "GitTimeoutError",
    "LocalRepository",
    "RemoteRepository",
]
