"""Local repository façade: actions and queries on a cloned working copy."""

import logging
import shlex
from collections.abc import Sequence
from pathlib import Path

from gittyup.adapters.git_cmd.executor import CommandExecutor, CommandResult
from gittyup.adapters.git_cmd.parsing import (
    LOG_SHA_MESSAGE_FORMAT,
    parse_branch_names,
    parse_current_branch,
    parse_lines,
    parse_log_messages,
    parse_numstat,
    validate_sha,
)
from gittyup.domain.config import DEFAULT_STASH_MESSAGE
from gittyup.domain.exceptions import BranchNotFoundError, InvalidRefError
from gittyup.ports.logger import DebugLogger

logger = logging.getLogger(__name__)

# Indicators printed by `git status` when nothing is pending (new and old wording)
_CLEAN_MARKERS = ("working tree clean", "working directory clean")


def _check_ref(value: str, what: str = "revision") -> str:
    """Reject revision arguments git would read as options."""
    if not value or value.startswith("-"):
        raise InvalidRefError(f"Invalid {what}: {value!r}")
    return value


class LocalRepository:
    """Helps take action and get information about a locally cloned repository.

    Args:
        path: Working copy root; every command runs with it as working directory.
        executor: Executor to run commands with. Built from the remaining
            arguments when omitted.
        logger: Debug sink for executed command lines.
        timeout: Seconds a single git invocation may run.
        git_executable: Name or path of the git binary.
        stash_message: Message recorded by :meth:`stash`.
    """

    def __init__(
        self,
        path: Path | str,
        executor: CommandExecutor | None = None,
        logger: DebugLogger | None = None,
        timeout: float | None = None,
        git_executable: str = "git",
        stash_message: str = DEFAULT_STASH_MESSAGE,
    ) -> None:
        self._path = Path(path)
        self._executor = (
            executor
            if executor is not None
            else CommandExecutor(cwd=self._path, logger=logger, timeout=timeout)
        )
        self._git_executable = git_executable
        self._stash_message = stash_message

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"LocalRepository({str(self._path)!r})"

    def _git(
        self,
        *args: str,
        stdin: str | None = None,
        throw_on_failure: bool = True,
        extra_message: str | None = None,
    ) -> CommandResult:
        return self._executor.execute(
            [self._git_executable, *args],
            stdin=stdin,
            throw_on_failure=throw_on_failure,
            extra_message=extra_message,
        )

    # Branches

    def get_current_branch(self) -> str | None:
        """Returns the name of the branch we're on right now, if any."""
        return parse_current_branch(self._git("branch").stdout)

    def does_branch_exist(self, branch: str) -> bool:
        return branch in parse_branch_names(self._git("branch").stdout)

    def move_to_branch(self, branch: str, create_if_missing: bool = False) -> None:
        """Moves to the given branch, creating it if allowed.

        Raises:
            BranchNotFoundError: If the branch does not exist and
                create_if_missing is False. Nothing is checked out.
        """
        _check_ref(branch, "branch name")
        if self.does_branch_exist(branch):
            self._git("checkout", branch)
        elif create_if_missing:
            self._git("checkout", "-b", branch)
        else:
            raise BranchNotFoundError(
                branch, hint="Pass create_if_missing=True to create it"
            )

    def create_and_move_to_branch(self, branch: str, from_branch: str | None = None) -> None:
        args = ["checkout", "-b", _check_ref(branch, "branch name")]
        if from_branch:
            args.append(_check_ref(from_branch, "start point"))
        self._git(*args)

    def merge(
        self,
        branch: str,
        message: str | None = None,
        allow_fast_forward: bool = True,
    ) -> None:
        """Merge a branch into the current branch.

        A conflicting merge raises GitCommandError whose ``is_conflict`` is
        True; the working copy is left mid-merge for the caller to resolve.
        """
        args = ["merge", _check_ref(branch, "branch name")]
        if message:
            args += ["-m", message]
        if not allow_fast_forward:
            args.append("--no-ff")
        self._git(*args)

    def delete_branch(self, branch: str, force: bool = False) -> None:
        """Delete a branch; ``force`` also deletes unmerged branches."""
        self._git("branch", "-D" if force else "-d", _check_ref(branch, "branch name"))

    def set_branch_description(self, branch: str, description: str) -> None:
        self._git("config", f"branch.{_check_ref(branch, 'branch name')}.description", description)

    def get_branch_description(self, branch: str) -> str:
        """Retrieves the raw git branch description."""
        result = self._git(
            "config",
            "--get",
            f"branch.{_check_ref(branch, 'branch name')}.description",
            extra_message=f'Error reading "{branch}" branch description.',
        )
        return result.stdout.strip()

    def read_file_contents_from_branch(self, path: str, branch: str) -> str | None:
        """Read a file from a branch without switching to that branch.

        Returns:
            None if the branch does not exist, an empty string if the file
            does not exist on that branch, otherwise the file contents.
        """
        if not self.does_branch_exist(branch):
            return None

        result = self._git("show", f"{_check_ref(branch)}:{path}", throw_on_failure=False)
        # an unsuccessful show just means the file doesn't exist there
        return result.stdout if result.success else ""

    # Staging and committing

    def add_file(self, path: str, force: bool = False) -> None:
        """Adds a file to git, including a deleted file."""
        self.add_files([path], force=force)

    def add_files(self, paths: Sequence[str], force: bool = False) -> None:
        """Adds files to git in one invocation, including deleted files."""
        args = ["add", "--all"]
        if force:
            args.append("-f")
        self._git(*args, "--", *paths)

    def remove(self, path: str) -> None:
        """git rm PATH"""
        self._git("rm", "--", path)

    def commit(self, message: str) -> None:
        self._git("commit", "-m", message)

    def stash(self) -> None:
        self._git("stash", "push", "-m", self._stash_message)

    def stash_pop(self) -> None:
        self._git("stash", "pop")

    def is_file_modified(self, path: str) -> bool:
        """Is this file modified or new?

        Untracked files do not show up in a diff, so a file that exists on
        disk without being tracked counts as modified too. That check runs
        first and needs no HEAD, so it also works before the first commit.
        """
        if (self._path / path).exists() and self._is_untracked(path):
            return True
        return self.are_there_uncommitted_changes(path)

    def _is_untracked(self, path: str) -> bool:
        result = self._git("ls-files", "--others", "--exclude-standard", "--", path)
        return bool(parse_lines(result.stdout))

    def add_and_commit_file(self, path: str, message: str) -> bool:
        """Adds and commits the file if it has changes.

        Returns:
            True if a commit was actually made.
        """
        if not self.is_file_modified(path):
            return False

        self.add_file(path)
        self.commit(message)
        return True

    # History

    def get_last_commit_sha(self, branch: str | None = None) -> str:
        return self.get_sha_from_log(branch)

    def get_sha_from_log(self, branch: str | None = None, offset: int = 0) -> str:
        """Returns a sha for the given branch, any number of commits back.

        Args:
            branch: Branch (or any revision); HEAD when omitted.
            offset: How many commits back along first parents (0 = tip).

        Raises:
            InvalidShaError: If git does not return a 40-character hex sha.
        """
        if offset < 0:
            raise ValueError(f"offset cannot be negative, got {offset}")
        revision = _check_ref(branch) if branch else "HEAD"
        result = self._git("rev-parse", f"{revision}~{int(offset)}")
        return validate_sha(result.stdout.strip())

    def get_commit_shas_between(self, sha_a: str, sha_b: str) -> list[str]:
        """Shas reachable from sha_b but not sha_a, newest first.

        Both arguments may be any revision (sha, branch name, tag).
        """
        result = self._git(
            "log",
            f"{_check_ref(sha_a)}..{_check_ref(sha_b)}",
            "--pretty=format:%H",
        )
        return parse_lines(result.stdout)

    def get_last_commit_shas(self, branch: str, limit: int = 10) -> list[str]:
        result = self._git(
            "log",
            _check_ref(branch),
            "--pretty=format:%H",
            "-n",
            str(int(limit)),
        )
        return parse_lines(result.stdout)

    def find_sha_by_message(self, needle: str, head_sha: str, until_sha: str) -> str | None:
        """Searches from head_sha back to until_sha for a commit whose message
        contains needle.

        Args:
            needle: Substring to look for in commit messages.
            head_sha: Most recent commit, where the search starts.
            until_sha: Older commit where the search stops (excluded).

        Returns:
            The first matching sha in log order, or None.
        """
        result = self._git(
            "log",
            f"{_check_ref(until_sha)}..{_check_ref(head_sha)}",
            f"--pretty={LOG_SHA_MESSAGE_FORMAT}",
        )
        for sha, message in parse_log_messages(result.stdout):
            if needle in message:
                return sha
        return None

    def get_commit_message(self, sha: str) -> str:
        result = self._git("log", "--format=%B", "-n", "1", _check_ref(sha))
        return result.stdout.strip()

    def cherry_pick(self, sha: str) -> None:
        self._git("cherry-pick", _check_ref(sha))

    # Diffs and patches

    def diff(self, start: str, end: str | None = None) -> str:
        """Binary-safe diff from start to the working tree, or to end."""
        revision = _check_ref(start)
        if end:
            revision = f"{revision}..{_check_ref(end)}"
        return self._git("diff", "--binary", revision).stdout

    def apply_diff(self, diff: str) -> list[str]:
        """Apply a patch and report the files it touched.

        Returns:
            Patched paths in numstat order.

        Raises:
            GitCommandError: If the patch does not apply.
            GitOutputParseError: If the numstat output cannot be parsed.
        """
        self._git("apply", stdin=diff)

        # gives us details on the files that were patched; -z keeps paths unquoted
        result = self._git("apply", "--numstat", "-z", stdin=diff)
        return parse_numstat(result.stdout)

    # Working tree state

    def is_working_directory_clean(self, path: str | None = None) -> bool:
        """Is the working directory totally clean?

        Never raises for a non-zero status; only the report text matters.
        """
        args = ["status"]
        if path:
            args += ["--", path]
        output = self._git(*args, throw_on_failure=False).stdout
        return any(marker in output for marker in _CLEAN_MARKERS)

    def are_there_uncommitted_changes(self, path: str | None = None) -> bool:
        """Are there staged or unstaged changes to tracked files?"""
        # HEAD shows staged and unstaged changes
        return self._has_changed_names("diff", "HEAD", "--name-only", path=path)

    def are_there_staged_changes(self, path: str | None = None) -> bool:
        return self._has_changed_names("diff", "--cached", "--name-only", path=path)

    def _has_changed_names(self, *args: str, path: str | None) -> bool:
        if path:
            args = (*args, "--", path)
        return bool(parse_lines(self._git(*args).stdout))

    def execute(self, command: str | Sequence[str]) -> str:
        """Simply run this command and return its output. Use sparingly.

        Args:
            command: Full command line, e.g. ``"git log -1"``. Strings are split
                with shell syntax but never run through a shell. A leading
                ``git`` runs the configured git executable.
        """
        args = shlex.split(command) if isinstance(command, str) else list(command)
        if not args:
            raise ValueError("command must not be empty")
        if args[0] == "git":
            args[0] = self._git_executable
        logger.debug("Raw command requested in %s", self._path)
        return self._executor.execute(args).stdout
