"""CLI output assertion helpers for reducing test brittleness.

These helpers prioritize semantic assertions (exit codes) over exact string
matching, so cosmetic wording changes do not break the CLI tests.

Available helpers:
- assert_command_success/failed: Exit code validation
- assert_output_contains: Substring matching
- assert_error_message: Error and hint detection
"""

import re

from click.testing import Result


def assert_command_success(result: Result, *, context: str = "") -> None:
    """Assert that a CLI command succeeded.

    Checks exit code is 0 and provides helpful error message on failure.

    Args:
        result: Click test runner Result object.
        context: Optional context string for error messages.

    Example:
        result = runner.invoke(cli, ["branch"], obj={})
        assert_command_success(result, context="gittyup branch")
    """
    ctx = f" ({context})" if context else ""
    assert result.exit_code == 0, (
        f"Command failed{ctx}:\n"
        f"  Exit code: {result.exit_code}\n"
        f"  Output: {result.output[:500]}"
    )


def assert_command_failed(
    result: Result,
    *,
    expected_code: int = 1,
    context: str = "",
) -> None:
    """Assert that a CLI command failed with expected exit code.

    Args:
        result: Click test runner Result object.
        expected_code: Expected non-zero exit code (default: 1).
        context: Optional context string for error messages.
    """
    ctx = f" ({context})" if context else ""
    assert result.exit_code == expected_code, (
        f"Expected command to fail{ctx} with code {expected_code}, "
        f"but got {result.exit_code}:\n"
        f"  Output: {result.output[:500]}"
    )


def assert_output_contains(
    result: Result,
    *substrings: str,
    case_sensitive: bool = True,
    context: str = "",
) -> None:
    """Assert that output contains all specified substrings.

    Args:
        result: Click test runner Result object.
        *substrings: One or more substrings that must appear in output.
        case_sensitive: Whether to do case-sensitive matching.
        context: Optional context string for error messages.
    """
    ctx = f" ({context})" if context else ""
    output = result.output if case_sensitive else result.output.lower()

    for substring in substrings:
        check = substring if case_sensitive else substring.lower()
        assert check in output, (
            f"Substring not found{ctx}:\n"
            f"  Expected: {substring!r}\n"
            f"  Output: {result.output[:500]}"
        )


def assert_error_message(result: Result, *, hint: str | None = None) -> None:
    """Assert that output contains an error indication.

    Optionally checks for a specific hint in the output.

    Args:
        result: Click test runner Result object (should have non-zero exit code).
        hint: Optional substring that should appear as a hint.

    Example:
        result = runner.invoke(cli, ["config", "init"], obj={})
        assert_command_failed(result)
        assert_error_message(result, hint="--force")
    """
    has_error = re.search(r"error", result.output, re.IGNORECASE) is not None
    assert has_error, (
        f"Expected error message in output:\n"
        f"  Output: {result.output[:500]}"
    )

    if hint:
        assert hint in result.output, (
            f"Expected hint '{hint}' in error output:\n"
            f"  Output: {result.output[:500]}"
        )
