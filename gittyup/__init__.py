"""gittyup - a typed façade over the git command line.

Drives a locally cloned working copy through :class:`LocalRepository` and
queries remote repositories through :class:`RemoteRepository`.
"""

import logging

from gittyup.adapters.git_cmd import (
    CommandExecutor,
    CommandResult,
    GitCommandError,
    GitTimeoutError,
    LocalRepository,
    RemoteRepository,
)
from gittyup.domain.exceptions import (
    BranchNotFoundError,
    GitOutputParseError,
    GittyUpDomainError,
    InvalidRefError,
    InvalidShaError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BranchNotFoundError",
    "CommandExecutor",
    "CommandResult",
    "GitCommandError",
    "GitOutputParseError",
    "GitTimeoutError",
    "GittyUpDomainError",
    "InvalidRefError",
    "InvalidShaError",
    "LocalRepository",
    "RemoteRepository",
]
