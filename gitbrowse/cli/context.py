"""
Click context extension for the git-browse CLI.

Provides BrowseContext dataclass that holds the data the command needs:
where it was pointed, which repository that is, and the loaded settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..core.container import get_container
from ..core.interfaces.vcs import IVCSProvider
from ..core.settings import GitBrowseSettings


@dataclass
class BrowseContext:
    """Context passed through the Click command via ctx.obj.

    Attributes:
        cwd: Directory the command was pointed at
        repo_root: Path to the repository root (None if not in a repo)
        vcs: VCS provider used to inspect the repository
        settings: Loaded settings
    """

    cwd: Path
    repo_root: Path | None
    vcs: IVCSProvider
    settings: GitBrowseSettings = field(default_factory=GitBrowseSettings)

    @classmethod
    def create(
        cls,
        cwd: Path | None = None,
        settings: GitBrowseSettings | None = None,
        vcs: IVCSProvider | None = None,
    ) -> BrowseContext:
        """Create a BrowseContext for a directory.

        Args:
            cwd: Directory to inspect (defaults to Path.cwd())
            settings: Loaded settings (defaults when None)
            vcs: VCS provider override (defaults to the registered git provider)

        Returns:
            Configured BrowseContext instance
        """
        if cwd is None:
            cwd = Path.cwd()
        if vcs is None:
            vcs = get_container().get_vcs_provider("git")

        root = vcs.get_repo_root(str(cwd))

        return cls(
            cwd=cwd,
            repo_root=Path(root) if root else None,
            vcs=vcs,
            settings=settings or GitBrowseSettings(),
        )

    @property
    def has_repo(self) -> bool:
        """Check if we're in a repository."""
        return self.repo_root is not None
