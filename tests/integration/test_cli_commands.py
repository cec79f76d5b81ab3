"""Integration tests for CLI commands using click.testing.CliRunner.

Tests the complete CLI flow end-to-end against real repositories to verify
exit codes, output and error hints.
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from gittyup.entrypoints.cli import cli
from tests.conftest import git_add_and_commit, run_git
from tests.helpers import (
    assert_command_failed,
    assert_command_success,
    assert_error_message,
    assert_output_contains,
)

@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()

def invoke(runner: CliRunner, repo: Path, *args: str):
    return runner.invoke(cli, ["--repo", str(repo), *args], obj={})

class TestBranchCommand:
    """Tests for 'gittyup branch'."""

    def test_prints_current_branch(self, runner: CliRunner, git_repo: Path) -> None:
        result = invoke(runner, git_repo, "branch")

        assert_command_success(result)
        assert result.output.strip() == "main"

    def test_missing_repository_path(self, runner: CliRunner, tmp_path: Path) -> None:
        result = invoke(runner, tmp_path / "missing", "branch")

        assert_command_failed(result)
        assert_error_message(result, hint="--repo")

class TestLastShaCommand:
    """Tests for 'gittyup last-sha'."""

    def test_head_sha(self, runner: CliRunner, git_repo: Path) -> None:
        result = invoke(runner, git_repo, "last-sha")

        assert_command_success(result)
        assert result.output.strip() == run_git(git_repo, "rev-parse", "HEAD").strip()

    def test_branch_sha(self, runner: CliRunner, git_repo: Path) -> None:
        main_sha = run_git(git_repo, "rev-parse", "HEAD").strip()
        run_git(git_repo, "checkout", "-q", "-b", "next")
        (git_repo / "n.txt").write_text("n\n")
        git_add_and_commit(git_repo, "Next")

        result = invoke(runner, git_repo, "last-sha", "main")

        assert_command_success(result)
        assert result.output.strip() == main_sha

    def test_unknown_branch_fails_with_hint(self, runner: CliRunner, git_repo: Path) -> None:
        result = invoke(runner, git_repo, "last-sha", "nope")

        assert_command_failed(result)
        assert_error_message(result, hint="--verbose")
        assert_output_contains(result, "last-sha failed")

    def test_remote_sha(self, runner: CliRunner, git_repo: Path) -> None:
        result = runner.invoke(cli, ["last-sha", "main", "--remote", str(git_repo)], obj={})

        assert_command_success(result)
        assert result.output.strip() == run_git(git_repo, "rev-parse", "main").strip()

    def test_remote_requires_branch(self, runner: CliRunner, git_repo: Path) -> None:
        result = runner.invoke(cli, ["last-sha", "--remote", str(git_repo)], obj={})

        assert_command_failed(result)
        assert_output_contains(result, "A branch name is required")

    def test_option_like_remote_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["last-sha", "main", "--remote=--upload-pack=touch x"], obj={}
        )

        assert_command_failed(result)
        assert_output_contains(result, "Invalid repository url")

class TestLogShasCommand:
    """Tests for 'gittyup log-shas'."""

    def test_newest_first_with_limit(self, runner: CliRunner, git_repo: Path) -> None:
        (git_repo / "a.txt").write_text("a\n")
        second = git_add_and_commit(git_repo, "Second")
        (git_repo / "b.txt").write_text("b\n")
        third = git_add_and_commit(git_repo, "Third")

        result = invoke(runner, git_repo, "log-shas", "main", "-n", "2")

        assert_command_success(result)
        assert result.output.splitlines() == [third, second]

    def test_limit_must_be_positive(self, runner: CliRunner, git_repo: Path) -> None:
        result = invoke(runner, git_repo, "log-shas", "main", "--limit", "0")
        assert_command_failed(result, expected_code=2)

class TestRemoteBranchesCommand:
    """Tests for 'gittyup remote-branches'."""

    def test_lists_branches(self, runner: CliRunner, git_repo: Path) -> None:
        run_git(git_repo, "branch", "step-2")

        result = runner.invoke(cli, ["remote-branches", str(git_repo)], obj={})

        assert_command_success(result)
        assert result.output.splitlines() == ["main", "step-2"]

    def test_unreachable_remote(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["remote-branches", str(tmp_path / "nowhere")], obj={})

        assert_command_failed(result)
        assert_output_contains(result, "remote-branches failed")

class TestStatusCommand:
    """Tests for 'gittyup status'."""

    def test_clean_repository(self, runner: CliRunner, git_repo: Path) -> None:
        result = invoke(runner, git_repo, "status")

        assert_command_success(result)
        assert result.output.splitlines() == [
            "Clean: yes",
            "Uncommitted changes: no",
            "Staged changes: no",
        ]

    def test_staged_change(self, runner: CliRunner, git_repo: Path) -> None:
        (git_repo / "file1.txt").write_text("changed\n")
        run_git(git_repo, "add", "file1.txt")

        result = invoke(runner, git_repo, "status")

        assert_command_success(result)
        assert_output_contains(result, "Clean: no", "Uncommitted changes: yes", "Staged changes: yes")

    def test_limited_to_path(self, runner: CliRunner, git_repo: Path) -> None:
        (git_repo / "file1.txt").write_text("changed\n")

        result = invoke(runner, git_repo, "status", "file2.py")

        assert_command_success(result)
        assert_output_contains(result, "Uncommitted changes: no")

class TestConfigIntegration:
    """Tests for configuration reaching the git invocations."""

    def test_bad_executable_from_local_config(self, runner: CliRunner, git_repo: Path) -> None:
        (git_repo / ".gittyup.toml").write_text('[git]\nexecutable = "no-such-git-binary"\n')

        result = invoke(runner, git_repo, "branch")

        assert_command_failed(result)
        assert_output_contains(result, "no-such-git-binary")

    def test_config_option_overrides_repo_file(
        self, runner: CliRunner, git_repo: Path, tmp_path: Path
    ) -> None:
        (git_repo / ".gittyup.toml").write_text('[git]\nexecutable = "no-such-git-binary"\n')
        custom = tmp_path / "custom.toml"
        custom.write_text('[git]\nexecutable = "git"\n')

        result = runner.invoke(
            cli, ["--repo", str(git_repo), "--config", str(custom), "branch"], obj={}
        )

        assert_command_success(result)

class TestVerbose:
    """Tests for --verbose logging."""

    def test_git_commands_are_logged(
        self, runner: CliRunner, git_repo: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="gittyup"):
            result = runner.invoke(
                cli, ["--verbose", "--repo", str(git_repo), "branch"], obj={}
            )

        assert_command_success(result)
        assert "Executing: git branch" in caplog.text
