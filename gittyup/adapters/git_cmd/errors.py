"""Classified failures raised when a git invocation exits unsuccessfully."""

# Token git prints for every conflicting path during merge and cherry-pick.
CONFLICT_MARKER = "CONFLICT"


class GitCommandError(Exception):
    """Git exited with a non-zero status.

    Attributes:
        message: Full error message, including the failing command line.
        command: Command line that failed (shell-quoted for display).
        returncode: Exit status, or None when the process never finished.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    @property
    def is_conflict(self) -> bool:
        """Does this failure represent a merge conflict?

        This is a heuristic: the message is searched for the literal,
        case-sensitive token ``CONFLICT``. A False result means the failure
        is not provably a conflict.
        """
        return CONFLICT_MARKER in self.message

    @property
    def is_timeout(self) -> bool:
        """Did the invocation exceed its time limit?"""
        return False


class GitTimeoutError(GitCommandError):
    """Git did not finish within the configured timeout."""

    def __init__(self, message: str, command: str = "", timeout: float | None = None) -> None:
        super().__init__(message, command=command)
        self.timeout = timeout

    @property
    def is_timeout(self) -> bool:
        return True
