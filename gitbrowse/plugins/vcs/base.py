"""
Base VCS provider.

Defines the interface for version control system providers.
"""

from abc import abstractmethod

from ...core.interfaces.vcs import IRepoFacts, IVCSProvider


class BaseVCSProvider(IVCSProvider):
    """
    Abstract base class for VCS providers.

    Implements the Strategy pattern for version control operations.
    Adds the default-remote rule shared by all providers.
    """

    DEFAULT_REMOTE = "origin"

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the VCS name (e.g., 'git')."""
        pass

    @abstractmethod
    def get_repo_root(self, path: str | None = None) -> str | None:
        pass

    @abstractmethod
    def list_remotes(self, repo_root: str) -> list[str]:
        pass

    @abstractmethod
    def get_remote_url(self, repo_root: str, remote: str | None = None) -> str:
        pass

    @abstractmethod
    def facts(self, repo_root: str) -> IRepoFacts:
        pass

    def default_remote(self, remotes: list[str]) -> str | None:
        """
        Pick the remote to use when none was named.

        Args:
            remotes: Remote names in configuration order

        Returns:
            ``origin`` if configured, else the first remote, else None
        """
        if self.DEFAULT_REMOTE in remotes:
            return self.DEFAULT_REMOTE
        return remotes[0] if remotes else None
