"""
Target segment resolution.

Decides which ref, if any, the opened page should show. The answer is a
single path segment for the ``/tree/<segment>`` URL, or None for the
repository's front page.
"""

from __future__ import annotations

from ...core.di import resolve_or_default
from ...core.interfaces.logger import ILogger
from ...core.interfaces.vcs import IRepoFacts
from ...core.models.target import TargetKind, TargetSelection


class TargetSegmentResolver:
    """
    Resolves a TargetSelection against a repository.

    Decision order (first match wins):
    1. ``--head`` or ``--commit HEAD``: the full HEAD commit hash
    2. ``--commit REV``: REV verbatim
    3. Branch inference suppressed: nothing
    4. Branch inference: the upstream branch name of the checked-out
       branch, falling back to the local branch name
    """

    def __init__(self, logger: ILogger | None = None) -> None:
        from ..logging import NullLogger

        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    def resolve_segment(self, selection: TargetSelection, repo: IRepoFacts) -> str | None:
        """
        Resolve the path segment for a target selection.

        Args:
            selection: What the user asked to open
            repo: Introspection handle for the repository

        Returns:
            Segment to append after ``/tree/``, or None for the repository root
        """
        if selection.wants_head_commit:
            commit = repo.get_head_commit_id()
            if commit is None:
                self._logger.warning("Could not resolve HEAD, opening the repository root")
            return commit

        if selection.kind == TargetKind.REVISION:
            return selection.revision

        if selection.kind == TargetKind.CURRENT_BRANCH:
            return self._current_branch(repo)

        return None

    def _current_branch(self, repo: IRepoFacts) -> str | None:
        branch = repo.get_checked_out_branch()
        if branch is None:
            self._logger.debug("No branch checked out, opening the repository root")
            return None

        upstream = repo.get_remote_tracking_branch(branch)
        if upstream is None:
            self._logger.debug("Branch %s has no upstream, using its local name", branch)
            return branch

        self._logger.debug("Branch %s tracks %s", branch, upstream)
        return upstream
