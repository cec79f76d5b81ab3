"""CLI error handling with actionable hints.

Provides consistent error formatting and the error conversion decorator shared
by all gittyup CLI commands.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from gittyup.adapters.git_cmd.errors import GitCommandError
from gittyup.domain.exceptions import GittyUpDomainError

F = TypeVar("F", bound=Callable[..., Any])


class GittyUpCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise GittyUpCliError(
            "Not a git repository",
            hint="Pass --repo with the path of a cloned working copy",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present."""
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def handle_cli_errors(command_name: str) -> Callable[[F], F]:
    """Decorator to convert library errors into CLI errors.

    GittyUpCliError propagates unchanged. Domain errors keep their hint; git
    failures get a hint that depends on their classification.

    Args:
        command_name: Name of the command for error messages.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except GittyUpCliError:
                raise
            except GittyUpDomainError as e:
                raise GittyUpCliError(e.message, hint=e.hint) from e
            except GitCommandError as e:
                if e.is_conflict:
                    hint = "Resolve the conflicts, then commit"
                elif e.is_timeout:
                    hint = "Increase [git] timeout in the config file"
                else:
                    hint = "Run with --verbose to see the git commands"
                raise GittyUpCliError(
                    f"{command_name} failed: {e.message.strip()}", hint=hint
                ) from e

        return wrapper  # type: ignore[return-value]

    return decorator
