"""Remote repository façade: read-only queries against a repository that is
not cloned locally, answered from ``git ls-remote``."""

import logging

from gittyup.adapters.git_cmd.errors import GitCommandError
from gittyup.adapters.git_cmd.executor import CommandExecutor, CommandResult
from gittyup.adapters.git_cmd.parsing import (
    HEADS_PREFIX,
    parse_ls_remote,
    short_branch_name,
    validate_sha,
)
from gittyup.domain.exceptions import InvalidRefError
from gittyup.ports.logger import DebugLogger

logger = logging.getLogger(__name__)


class RemoteRepository:
    """Helps perform a few tasks on a repository that is not cloned locally.

    Args:
        url: Anything ``git ls-remote`` accepts as a repository.
        executor: Executor to run commands with. Built from the remaining
            arguments when omitted; it never sets a working directory.
        logger: Debug sink for executed command lines.
        timeout: Seconds a single ls-remote may run.
        git_executable: Name or path of the git binary.
        loose_branch_match: Default matching mode for get_last_commit_sha.
    """

    def __init__(
        self,
        url: str,
        executor: CommandExecutor | None = None,
        logger: DebugLogger | None = None,
        timeout: float | None = None,
        git_executable: str = "git",
        loose_branch_match: bool = False,
    ) -> None:
        if not url or url.startswith("-"):
            raise InvalidRefError(f"Invalid repository url: {url!r}")
        self._url = url
        self._executor = (
            executor
            if executor is not None
            else CommandExecutor(logger=logger, timeout=timeout)
        )
        self._git_executable = git_executable
        self._loose_branch_match = loose_branch_match

    @property
    def url(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"RemoteRepository({self._url!r})"

    def _ls_remote(self, *options: str) -> CommandResult:
        return self._executor.execute(
            [self._git_executable, "ls-remote", *options, self._url]
        )

    def list_references(self) -> list[tuple[str, str]]:
        """All references of the remote as (sha, ref) pairs, in listing order."""
        return parse_ls_remote(self._ls_remote().stdout)

    def get_last_commit_sha(self, branch: str, loose: bool | None = None) -> str:
        """Get the sha at the tip of a remote branch.

        Args:
            branch: Short branch name, e.g. ``main``.
            loose: Match the first reference whose line contains ``branch``
                anywhere instead of exactly ``refs/heads/<branch>``. Similar
                names collide in this mode (``main`` can match
                ``refs/heads/main-backup``). Defaults to the mode chosen at
                construction.

        Raises:
            GitCommandError: If ls-remote fails or no reference matches.
            InvalidShaError: If the listed sha is malformed.
        """
        if loose is None:
            loose = self._loose_branch_match

        result = self._ls_remote()
        wanted = f"{HEADS_PREFIX}{branch}"
        for sha, ref in parse_ls_remote(result.stdout):
            matched = branch in f"{sha}\t{ref}" if loose else ref == wanted
            if matched:
                if loose and ref != wanted:
                    logger.debug("Loose match for %r picked %s", branch, ref)
                return validate_sha(sha)

        # ls-remote can exit 0 with nothing useful on stdout
        raise GitCommandError(
            f"Could not determine last sha for branch {branch!r}: {result.stderr.strip()}",
            command=result.command_line,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    def get_all_branches(self) -> list[str]:
        """Returns the short names of all branches, in listing order."""
        refs = parse_ls_remote(self._ls_remote("--heads").stdout)
        names = (short_branch_name(ref) for _, ref in refs)
        return [name for name in names if name is not None]
