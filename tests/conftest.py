"""Pytest configuration and shared fixtures."""

import subprocess
from pathlib import Path

import pytest

from gittyup.adapters.git_cmd import LocalRepository

# ============================================================================
# Config Isolation
# ============================================================================
# Point the global config lookup at an empty directory so a developer's
# ~/.config/gittyup/config.toml never leaks into test results.


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect XDG_CONFIG_HOME to a fresh temporary directory."""
    config_home = tmp_path_factory.mktemp("config_home")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


# ============================================================================
# Git Repository Helpers
# ============================================================================
# These helpers consolidate git setup code to avoid duplication across tests.


def run_git(path: Path, *args: str) -> str:
    """Run a git command in ``path`` and return its stdout.

    Raises:
        subprocess.CalledProcessError: If the command fails.
    """
    result = subprocess.run(
        ["git", *args],
        cwd=path,
        check=True,
        capture_output=True,
        text=True,
        timeout=10,
    )
    return result.stdout


def init_git_repo(
    path: Path,
    user_name: str = "Test User",
    user_email: str = "test@example.com",
    branch: str = "main",
) -> None:
    """Initialize a git repository with user configuration.

    Args:
        path: Directory to initialize as a git repository.
        user_name: Git user.name configuration value.
        user_email: Git user.email configuration value.
        branch: Name of the initial branch.
    """
    run_git(path, "init")
    run_git(path, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
    run_git(path, "config", "user.name", user_name)
    run_git(path, "config", "user.email", user_email)
    run_git(path, "config", "commit.gpgsign", "false")


def git_add_and_commit(path: Path, message: str = "Initial commit") -> str:
    """Stage everything and create a commit.

    Returns:
        Sha of the new commit.
    """
    run_git(path, "add", "--all")
    run_git(path, "commit", "-m", message)
    return run_git(path, "rev-parse", "HEAD").strip()


def create_test_files(path: Path, files: dict[str, str]) -> None:
    """Create multiple files in a directory.

    Args:
        path: Base directory for file creation.
        files: Mapping of relative file paths to file contents.
               Parent directories are created automatically.
    """
    for file_path, content in files.items():
        full_path = path / file_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content)


def create_git_repo(
    path: Path,
    files: dict[str, str] | None = None,
    commit_message: str = "Initial commit",
) -> Path:
    """Create a git repository, optionally with an initial commit of ``files``.

    Returns:
        Path to the repository root.
    """
    path.mkdir(parents=True, exist_ok=True)
    init_git_repo(path)

    if files:
        create_test_files(path, files)
        git_add_and_commit(path, message=commit_message)

    return path


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a repository on ``main`` with one commit of two files."""
    return create_git_repo(
        tmp_path / "repo",
        files={"file1.txt": "Hello world\n", "file2.py": "print('hello')\n"},
    )


@pytest.fixture
def repository(git_repo: Path) -> LocalRepository:
    """LocalRepository bound to the ``git_repo`` fixture."""
    return LocalRepository(git_repo, timeout=30)
