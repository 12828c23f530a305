"""
Click-based CLI for git-browse.

This module provides the ``git-browse`` command: open the web page of the
repository a directory belongs to, optionally at a branch or commit.

Usage:
    from gitbrowse.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .. import __version__
from ..core.bootstrap import bootstrap
from ..core.container import get_container
from ..core.exceptions import GitBrowseException
from ..core.interfaces.browser import IBrowserLauncher
from ..core.interfaces.logger import ILogger
from ..core.models.target import TargetSelection
from ..core.settings import load_settings
from ..services.resolution import ResolutionPipeline
from .context import BrowseContext
from .decorators import require_git


@click.command("git-browse", context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
)
@click.option("-r", "--remote", metavar="NAME", help="Remote to open (default: origin, else the first remote).")
@click.option("-c", "--commit", metavar="REV", help="Open a specific revision. HEAD opens the current commit.")
@click.option("--head", is_flag=True, help="Open the commit HEAD points at.")
@click.option("--no-branch", is_flag=True, help="Open the repository root instead of the current branch.")
@click.option("-p", "--print", "print_only", is_flag=True, help="Print the URL instead of opening it.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug diagnostics to stderr.")
@click.version_option(version=__version__, prog_name="git-browse")
@click.pass_context
def cli(
    ctx: click.Context,
    path: Path | None,
    remote: str | None,
    commit: str | None,
    head: bool,
    no_branch: bool,
    print_only: bool,
    verbose: bool,
) -> None:
    """git-browse - open a repository's web page

    Finds the remote of the repository at PATH (default: the current
    directory), turns its URL into the hosting platform's web URL and opens
    it in the default browser, at the current branch unless told otherwise.

    \b
    Examples:
        git-browse                  Current branch of the current repo
        git-browse --no-branch      Repository front page
        git-browse -c v1.2.0        A tag, branch or commit
        git-browse --head           The commit HEAD points at
        git-browse -r upstream -p   Print the URL of another remote
    """
    if commit and head:
        raise click.UsageError("--commit and --head cannot be used together.")

    overrides = {"logging": {"level": "debug", "console": True}} if verbose else {}
    try:
        settings = load_settings(start_dir=str(path or Path.cwd()), **overrides)
    except GitBrowseException as e:
        raise _to_click_error(e) from e
    bootstrap(settings)

    logger = get_container().resolve(ILogger)  # type: ignore[type-abstract]
    if settings.config_error:
        logger.warning("Ignoring config file: %s", settings.config_error)

    ctx.obj = BrowseContext.create(cwd=path, settings=settings)
    selection = TargetSelection.from_flags(commit=commit, head=head, no_branch=no_branch)

    open_remote(ctx.obj, remote=remote, selection=selection, print_only=print_only)


@require_git
def open_remote(
    ctx: BrowseContext,
    remote: str | None,
    selection: TargetSelection,
    print_only: bool = False,
) -> None:
    """Resolve the remote's web URL and open (or print) it."""
    repo_root = str(ctx.repo_root)
    remote = remote or ctx.settings.remote.name

    try:
        raw_url = ctx.vcs.get_remote_url(repo_root, remote)
        pipeline = ResolutionPipeline(ssh_config_paths=ctx.settings.ssh.config_paths)
        url = pipeline.resolve(raw_url, selection, ctx.vcs.facts(repo_root), base_dir=ctx.repo_root)
    except GitBrowseException as e:
        raise _to_click_error(e) from e

    if print_only or not ctx.settings.browser.launch:
        click.echo(url)
        return

    click.echo(f"Opening {url}")
    launcher = get_container().resolve(IBrowserLauncher)  # type: ignore[type-abstract]
    if not launcher.launch(url):
        click.echo(f"Could not open web browser. Here is the URL: {url}")


def _to_click_error(e: GitBrowseException) -> click.ClickException:
    """Wrap a terminal error so Click prints it and exits with its exit code."""
    error = click.ClickException(str(e))
    error.exit_code = e.exit_code
    return error


__all__ = [
    "BrowseContext",
    "cli",
    "open_remote",
]
