"""gittyup CLI entrypoint.

Command-line interface for inspecting working copies and remotes through the
same façades host applications use.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from gittyup.core.errors import GittyUpCliError, handle_cli_errors
from gittyup.version import __version__

if TYPE_CHECKING:
    from gittyup.domain.config import GittyUpConfig
    from gittyup.ports.vcs import LocalVCS, RemoteVCS


def _load_config(ctx: click.Context) -> GittyUpConfig:
    """Load configuration for the current invocation.

    Uses the --config file when given, otherwise <repo>/.gittyup.toml.
    """
    from gittyup.adapters.factory import ConfigFactory
    from gittyup.shared.config_io import get_local_config_path

    local_path = ctx.obj.get("config_path") or get_local_config_path(ctx.obj["repo"])
    return ConfigFactory().create_config_provider().load(local_path)


def _local_repository(ctx: click.Context) -> LocalVCS:
    from gittyup.adapters.factory import RepositoryFactory

    repo_path: Path = ctx.obj["repo"]
    if not repo_path.is_dir():
        raise GittyUpCliError(
            f"Repository path does not exist: {repo_path}",
            hint="Pass --repo with the path of a cloned working copy",
        )
    return RepositoryFactory(_load_config(ctx)).create_local_repository(repo_path)


def _remote_repository(ctx: click.Context, url: str) -> RemoteVCS:
    from gittyup.adapters.factory import RepositoryFactory

    return RepositoryFactory(_load_config(ctx)).create_remote_repository(url)


@click.group()
@click.version_option(version=__version__, prog_name="gittyup")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log every git command that is executed.",
)
@click.option(
    "--repo",
    "-C",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Working copy to operate on.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of <repo>/.gittyup.toml.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, repo: Path, config_path: Path | None) -> None:
    """gittyup - drive git working copies and query remotes."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["repo"] = repo
    ctx.obj["config_path"] = config_path
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


@cli.command()
@click.pass_context
@handle_cli_errors("branch")
def branch(ctx: click.Context) -> None:
    """Print the checked out branch."""
    current = _local_repository(ctx).get_current_branch()
    if current is None:
        raise GittyUpCliError("Not on any branch", hint="Check out a branch first")
    click.echo(current)


@cli.command(name="last-sha")
@click.argument("branch_name", required=False, default=None)
@click.option("--remote", "remote_url", default=None, help="Query this remote URL instead.")
@click.option(
    "--loose",
    is_flag=True,
    help="Match remote branches by substring (similar names can collide).",
)
@click.pass_context
@handle_cli_errors("last-sha")
def last_sha(
    ctx: click.Context, branch_name: str | None, remote_url: str | None, loose: bool
) -> None:
    """Print the sha at the tip of BRANCH_NAME (HEAD when omitted)."""
    if remote_url:
        if not branch_name:
            raise GittyUpCliError(
                "A branch name is required with --remote",
                hint="gittyup last-sha main --remote <url>",
            )
        remote = _remote_repository(ctx, remote_url)
        click.echo(remote.get_last_commit_sha(branch_name, loose=loose or None))
        return
    click.echo(_local_repository(ctx).get_last_commit_sha(branch_name))


@cli.command(name="log-shas")
@click.argument("branch_name")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=10, show_default=True)
@click.pass_context
@handle_cli_errors("log-shas")
def log_shas(ctx: click.Context, branch_name: str, limit: int) -> None:
    """Print the most recent commit shas on BRANCH_NAME, newest first."""
    for sha in _local_repository(ctx).get_last_commit_shas(branch_name, limit=limit):
        click.echo(sha)


@cli.command(name="remote-branches")
@click.argument("url")
@click.pass_context
@handle_cli_errors("remote-branches")
def remote_branches(ctx: click.Context, url: str) -> None:
    """List the branches of the repository at URL without cloning it."""
    for name in _remote_repository(ctx, url).get_all_branches():
        click.echo(name)


@cli.command()
@click.argument("path", required=False, default=None)
@click.pass_context
@handle_cli_errors("status")
def status(ctx: click.Context, path: str | None) -> None:
    """Summarize pending changes, optionally limited to PATH."""
    repository = _local_repository(ctx)

    checks = [
        ("Clean", repository.is_working_directory_clean(path)),
        ("Uncommitted changes", repository.are_there_uncommitted_changes(path)),
        ("Staged changes", repository.are_there_staged_changes(path)),
    ]
    for label, value in checks:
        click.echo(f"{label}: {'yes' if value else 'no'}")


@cli.group()
def config() -> None:
    """Manage gittyup configuration files.

    gittyup uses a two-tier configuration system:
    - Local: <repo>/.gittyup.toml (repo-specific settings)
    - Global: ~/.config/gittyup/config.toml (user defaults)

    Local settings override global settings. Missing values use built-in defaults.
    """
    pass


def _display_path_status(path: Path, label: str) -> None:
    """Display a config path with its existence status."""
    status = "exists" if path.exists() else "not created"
    color = "green" if path.exists() else "yellow"
    click.echo(f"{label}{path}")
    click.echo(f"  Status: {click.style(status, fg=color)}")


def _display_config_summary(config: GittyUpConfig) -> None:
    """Display a summary of config settings."""
    click.echo("  [git]")
    click.echo(f"    executable = {config.git.executable}")
    click.echo(f"    timeout = {config.git.timeout}")
    click.echo("  [remote]")
    click.echo(f"    timeout = {config.remote.timeout}")
    click.echo(f"    loose_branch_match = {str(config.remote.loose_branch_match).lower()}")
    click.echo("  [stash]")
    click.echo(f"    message = {config.stash.message}")


@config.command(name="show")
@click.pass_context
@handle_cli_errors("config show")
def config_show(ctx: click.Context) -> None:
    """Show configuration file locations and effective settings."""
    from gittyup.shared.config_io import get_global_config_path, get_local_config_path

    local_path = ctx.obj.get("config_path") or get_local_config_path(ctx.obj["repo"])
    _display_path_status(get_global_config_path(), "Global config: ")
    _display_path_status(local_path, "Local config:  ")

    click.echo("\nEffective configuration (merged global + local):")
    _display_config_summary(_load_config(ctx))


@config.command(name="path")
@click.option("--global", "-g", "show_global", is_flag=True, help="Show only global config path")
@click.option("--local", "-l", "show_local", is_flag=True, help="Show only local config path")
@click.pass_context
@handle_cli_errors("config path")
def config_path(ctx: click.Context, show_global: bool, show_local: bool) -> None:
    """Print config file path(s) for use in scripts."""
    from gittyup.shared.config_io import get_global_config_path, get_local_config_path

    global_path = get_global_config_path()
    local_path = ctx.obj.get("config_path") or get_local_config_path(ctx.obj["repo"])

    if show_global:
        click.echo(global_path)
        return
    if show_local:
        click.echo(local_path)
        return

    click.echo(f"global:{global_path}")
    click.echo(f"local:{local_path}")


@config.command(name="init")
@click.option("--global", "-g", "init_global", is_flag=True, help="Create the global config file")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
@handle_cli_errors("config init")
def config_init(ctx: click.Context, init_global: bool, force: bool) -> None:
    """Create a config file populated with the defaults."""
    from gittyup.shared.config_io import (
        create_default_config_file,
        get_global_config_path,
        get_local_config_path,
    )

    if init_global:
        target = get_global_config_path()
    else:
        target = ctx.obj.get("config_path") or get_local_config_path(ctx.obj["repo"])

    if target.exists() and not force:
        raise GittyUpCliError(
            f"Config file already exists: {target}",
            hint="Use --force to overwrite it",
        )

    create_default_config_file(target)
    click.echo(f"Created {target}")


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
