"""Domain exceptions for gittyup.

These exceptions represent precondition violations and unexpected tool output.
Failures reported by git itself are raised as
:class:`gittyup.adapters.git_cmd.errors.GitCommandError` instead.
"""


class GittyUpDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class BranchNotFoundError(GittyUpDomainError):
    """Raised when an operation requires a local branch that does not exist."""

    def __init__(self, branch: str, hint: str | None = None) -> None:
        super().__init__(
            f"Cannot move to {branch}, the branch does not exist!", hint=hint
        )
        self.branch = branch


class InvalidRefError(GittyUpDomainError):
    """Raised when a revision argument could be mistaken for an option."""

    pass


class GitOutputParseError(GittyUpDomainError):
    """Raised when git output does not have the expected shape."""

    pass


class InvalidShaError(GitOutputParseError):
    """Raised when a commit identifier is not 40 hexadecimal characters."""

    def __init__(self, sha: str) -> None:
        super().__init__(f'Invalid commit sha: "{sha}"')
        self.sha = sha
