"""Version Control System (VCS) port interfaces.

Defines the abstract interfaces host applications program against when
driving a local working copy or querying a remote repository.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class LocalVCS(Protocol):
    """Protocol for operations on a locally cloned working copy."""

    @property
    def path(self) -> Path: ...

    def get_current_branch(self) -> str | None:
        """Get the name of the checked out branch.

        Returns:
            Branch name, or None when no branch is checked out.
        """
        ...

    def does_branch_exist(self, branch: str) -> bool: ...

    def move_to_branch(self, branch: str, create_if_missing: bool = False) -> None:
        """Check out a branch.

        Raises:
            BranchNotFoundError: If the branch is missing and may not be created.
            GitCommandError: If git fails.
        """
        ...

    def create_and_move_to_branch(self, branch: str, from_branch: str | None = None) -> None: ...

    def merge(
        self,
        branch: str,
        message: str | None = None,
        allow_fast_forward: bool = True,
    ) -> None:
        """Merge a branch into the current branch.

        Raises:
            GitCommandError: If the merge fails; check ``is_conflict``.
        """
        ...

    def read_file_contents_from_branch(self, path: str, branch: str) -> str | None: ...

    def add_file(self, path: str, force: bool = False) -> None: ...

    def add_files(self, paths: Sequence[str], force: bool = False) -> None: ...

    def remove(self, path: str) -> None: ...

    def commit(self, message: str) -> None: ...

    def stash(self) -> None: ...

    def stash_pop(self) -> None: ...

    def set_branch_description(self, branch: str, description: str) -> None: ...

    def get_branch_description(self, branch: str) -> str: ...

    def get_last_commit_sha(self, branch: str | None = None) -> str: ...

    def get_sha_from_log(self, branch: str | None = None, offset: int = 0) -> str:
        """Resolve a commit sha ``offset`` commits behind a branch tip.

        Raises:
            InvalidShaError: If git does not produce a 40-character hex sha.
        """
        ...

    def get_commit_shas_between(self, sha_a: str, sha_b: str) -> list[str]: ...

    def get_last_commit_shas(self, branch: str, limit: int = 10) -> list[str]: ...

    def cherry_pick(self, sha: str) -> None: ...

    def diff(self, start: str, end: str | None = None) -> str: ...

    def find_sha_by_message(self, needle: str, head_sha: str, until_sha: str) -> str | None: ...

    def get_commit_message(self, sha: str) -> str: ...

    def delete_branch(self, branch: str, force: bool = False) -> None: ...

    def is_working_directory_clean(self, path: str | None = None) -> bool: ...

    def are_there_uncommitted_changes(self, path: str | None = None) -> bool: ...

    def are_there_staged_changes(self, path: str | None = None) -> bool: ...

    def apply_diff(self, diff: str) -> list[str]:
        """Apply a patch to the working tree.

        Returns:
            Paths touched by the patch, in numstat order.

        Raises:
            GitCommandError: If git cannot apply the patch.
            GitOutputParseError: If the numstat output is malformed.
        """
        ...

    def is_file_modified(self, path: str) -> bool: ...

    def add_and_commit_file(self, path: str, message: str) -> bool: ...

    def execute(self, command: str | Sequence[str]) -> str: ...


class RemoteVCS(Protocol):
    """Protocol for read-only queries against a repository that is not cloned."""

    @property
    def url(self) -> str: ...

    def get_last_commit_sha(self, branch: str, loose: bool | None = None) -> str:
        """Get the sha at the tip of a remote branch.

        Raises:
            GitCommandError: If ls-remote fails or the branch is not listed.
        """
        ...

    def get_all_branches(self) -> list[str]: ...

    def list_references(self) -> list[tuple[str, str]]: ...
