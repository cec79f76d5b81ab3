"""Command executor: the single point where git processes are spawned.

Commands are passed as argument lists and never go through a shell, so values
taken from callers (paths, branch names, messages) need no shell escaping.
"""

import logging
import os
import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gittyup.adapters.git_cmd.errors import GitCommandError, GitTimeoutError
from gittyup.ports.logger import DebugLogger

# Parsers match English status strings, so git must not be localized.
_STABLE_ENV = {"LC_ALL": "C"}


# Bytes that are not UTF-8 (patches of Latin-1 files, say) become lone
# surrogates so they are written back unchanged when passed as stdin.
_ENCODING_ERRORS = "surrogateescape"


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors=_ENCODING_ERRORS) if data else ""


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors=_ENCODING_ERRORS)


def _printable(text: str) -> str:
    """Replace escaped bytes so the text can be shown on any terminal."""
    return _encode(text).decode("utf-8", errors="replace")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single invocation.

    Attributes:
        args: Argument list that was executed.
        returncode: Process exit status.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return shlex.join(self.args)


class CommandExecutor:
    """Runs commands and turns unexpected failures into GitCommandError.

    Args:
        cwd: Working directory for every invocation (None for the current one).
        logger: Receives ``Executing: <command line>`` before each run.
            Defaults to this module's logger.
        timeout: Seconds each invocation may run; None means no limit.
        env: Extra environment variables for the child processes.
    """

    def __init__(
        self,
        cwd: Path | str | None = None,
        logger: DebugLogger | None = None,
        timeout: float | None = None,
        env: dict[str, str] | None = None,
    ) -> None:
        self.cwd = Path(cwd) if cwd is not None else None
        self.logger: DebugLogger = (
            logger if logger is not None else logging.getLogger(__name__)
        )
        self.timeout = timeout
        self._env = {**os.environ, **_STABLE_ENV, **(env or {})}

    def execute(
        self,
        args: Sequence[str],
        stdin: str | None = None,
        throw_on_failure: bool = True,
        extra_message: str | None = None,
    ) -> CommandResult:
        """Run a command and capture its output.

        Args:
            args: Full argument list, executable first.
            stdin: Text written to the process's standard input, in full,
                before waiting for it to exit.
            throw_on_failure: Raise on non-zero exit status. When False the
                caller inspects the returned result itself.
            extra_message: Prefix for the error message when raising.

        Returns:
            CommandResult with exit status and decoded output. Bytes that
            are not UTF-8 survive as surrogate escapes, so output fed back
            through ``stdin`` reaches the process byte for byte.

        Raises:
            GitCommandError: If the command fails and throw_on_failure is True,
                or if the executable cannot be started.
            GitTimeoutError: If the command exceeds the timeout.
        """
        argv = tuple(str(arg) for arg in args)
        command_line = shlex.join(argv)
        self.logger.debug("Executing: %s", command_line)

        try:
            completed = subprocess.run(
                argv,
                cwd=self.cwd,
                input=_encode(stdin) if stdin is not None else None,
                capture_output=True,
                timeout=self.timeout,
                env=self._env,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise GitTimeoutError(
                _with_prefix(
                    extra_message,
                    f'Error executing "{command_line}": timed out after {self.timeout} seconds',
                ),
                command=command_line,
                timeout=self.timeout,
            ) from e
        except FileNotFoundError as e:
            raise GitCommandError(
                _with_prefix(
                    extra_message,
                    f'Error executing "{command_line}": {e.strerror or e}',
                ),
                command=command_line,
            ) from e

        result = CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=_decode(completed.stdout),
            stderr=_decode(completed.stderr),
        )

        if not result.success and throw_on_failure:
            # Some failures (merge conflicts) report on stdout, not stderr
            output = result.stderr or result.stdout
            raise GitCommandError(
                _with_prefix(
                    extra_message, f'Error executing "{command_line}": {_printable(output)}'
                ),
                command=command_line,
                returncode=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )

        return result


def _with_prefix(extra_message: str | None, message: str) -> str:
    return f"{extra_message} {message}" if extra_message else message
