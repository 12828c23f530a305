"""
Click decorators for git-browse commands.

Provides requirement decorators that validate preconditions before
command execution:
- require_git: Ensures we're in a git repository
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ..core.exceptions import NotARepositoryError, VCSError, VCSUnavailableError

if TYPE_CHECKING:
    from .context import BrowseContext

F = TypeVar("F", bound=Callable[..., Any])


def require_git(f: F) -> F:
    """Decorator to require a git repository.

    The wrapped function fails with a helpful error message if git is
    missing or the context does not point inside a git work tree.

    Usage:
        @require_git
        def open_remote(ctx: BrowseContext, ...):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx_maybe: Any = args[0] if args else kwargs.get("ctx")

        if ctx_maybe is None:
            raise click.ClickException("Internal error: BrowseContext not available.")
        ctx: BrowseContext = ctx_maybe

        if not ctx.has_repo:
            error: VCSError
            if not ctx.vcs.is_available():
                error = VCSUnavailableError("git is not installed or not on PATH.")
            else:
                error = NotARepositoryError(
                    f"Not in a git repository: {ctx.cwd}\n"
                    "git-browse must be run inside a git work tree (or given a path to one)."
                )
            raise click.ClickException(error.message) from error

        return f(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
