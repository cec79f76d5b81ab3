"""Parsers for git's plain-text output.

Each function turns one output contract into structured values. They are
pure so they can be tested without a repository.
"""

import re

from gittyup.domain.exceptions import GitOutputParseError, InvalidShaError

HEADS_PREFIX = "refs/heads/"

# Separators used in custom --pretty formats (see LOG_SHA_MESSAGE_FORMAT)
# and in -z output
FIELD_SEPARATOR = "\x00"
RECORD_SEPARATOR = "\x1e"
LOG_SHA_MESSAGE_FORMAT = "format:%H%x00%B%x1e"

_SHA_RE = re.compile(r"[0-9a-fA-F]{40}")


def validate_sha(sha: str) -> str:
    """Check that a commit identifier is exactly 40 hexadecimal characters.

    Args:
        sha: Candidate identifier, already stripped.

    Returns:
        The identifier unchanged.

    Raises:
        InvalidShaError: If the identifier has any other shape.
    """
    if not _SHA_RE.fullmatch(sha):
        raise InvalidShaError(sha)
    return sha


def parse_current_branch(output: str) -> str | None:
    """Find the checked out branch in ``git branch`` output.

    The current branch is listed as ``* name``.

    Returns:
        Branch name, or None if no line carries the marker.
    """
    for line in output.splitlines():
        if line.startswith("*"):
            # skip the marker and the space after it
            return line[2:]
    return None


def parse_branch_names(output: str) -> list[str]:
    """Extract branch names from ``git branch`` output.

    The name is the last whitespace-delimited token of each line.
    """
    names = []
    for line in output.splitlines():
        tokens = line.split()
        if tokens:
            names.append(tokens[-1])
    return names


def parse_lines(output: str) -> list[str]:
    """Split output into non-empty lines (one sha or path per line)."""
    return [line for line in output.strip().splitlines() if line.strip()]


def parse_numstat(output: str) -> list[str]:
    """Extract file paths from ``git apply --numstat -z`` output.

    Each record looks like ``added<TAB>removed<TAB>path`` and ends with a NUL.
    Paths are written verbatim, without git's quoting, so they may contain
    tabs, newlines or non-ASCII characters. Binary files report ``-`` for
    both counts.

    Returns:
        Paths in the order git listed them.

    Raises:
        GitOutputParseError: If a record does not split into three fields.
    """
    paths = []
    for record in output.split(FIELD_SEPARATOR):
        if not record.strip():
            continue
        parts = record.split("\t", 2)
        if len(parts) != 3 or not parts[2]:
            raise GitOutputParseError(f"Cannot parse record: {record!r}")
        paths.append(parts[2])
    return paths


def parse_log_messages(output: str) -> list[tuple[str, str]]:
    """Split log output produced with LOG_SHA_MESSAGE_FORMAT.

    Returns:
        (sha, message) pairs in log order; messages keep their inner newlines.
    """
    commits = []
    for record in output.split(RECORD_SEPARATOR):
        record = record.lstrip("\n")
        if not record:
            continue
        sha, _, message = record.partition(FIELD_SEPARATOR)
        commits.append((sha.strip(), message))
    return commits


def parse_ls_remote(output: str) -> list[tuple[str, str]]:
    """Parse ``git ls-remote`` output into (sha, ref) pairs.

    Raises:
        GitOutputParseError: If a line is not ``sha<TAB>ref``.
    """
    refs = []
    for line in output.splitlines():
        if not line.strip():
            continue
        sha, sep, ref = line.partition("\t")
        if not sep:
            raise GitOutputParseError(f"Cannot parse line: {line}")
        refs.append((sha.strip(), ref.strip()))
    return refs


def short_branch_name(ref: str) -> str | None:
    """Strip the heads namespace from a ref, or None if it is not a branch."""
    if not ref.startswith(HEADS_PREFIX):
        return None
    return ref[len(HEADS_PREFIX):]
