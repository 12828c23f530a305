"""
Version control system provider interface definitions.

Enables pluggable VCS backends following the Open/Closed Principle.
The URL resolution pipeline only ever sees ``IRepoFacts``; everything
else is used by the CLI to locate the repository and its remote.
"""

from abc import ABC, abstractmethod


class IRepoFacts(ABC):
    """
    Read-only introspection of a single repository.

    Every method returns None instead of raising when the fact is not
    available (detached HEAD, unborn branch, no upstream configured).
    """

    @abstractmethod
    def get_checked_out_branch(self) -> str | None:
        """
        Name of the checked-out local branch.

        Returns:
            Branch short name, or None when HEAD is detached
        """
        pass

    @abstractmethod
    def get_remote_tracking_branch(self, branch: str) -> str | None:
        """
        Upstream branch configured for a local branch.

        Args:
            branch: Local branch short name

        Returns:
            Upstream branch name without the remote prefix, or None
        """
        pass

    @abstractmethod
    def get_head_commit_id(self) -> str | None:
        """
        Full commit hash HEAD points at.

        Returns:
            Hex commit id, or None when HEAD cannot be resolved
        """
        pass


class IVCSProvider(ABC):
    """
    Interface for version control system operations.

    Implementations handle VCS-specific operations while
    conforming to this common interface.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        VCS identifier.

        Examples: 'git', 'hg'
        """
        pass

    @abstractmethod
    def get_repo_root(self, path: str | None = None) -> str | None:
        """
        Find the repository root from path.

        Args:
            path: Directory to start searching from (default: cwd)

        Returns:
            Path to repo root, or None if not in a repository
        """
        pass

    @abstractmethod
    def list_remotes(self, repo_root: str) -> list[str]:
        """
        List configured remote names.

        Args:
            repo_root: Path to repository root

        Returns:
            Remote names in configuration order
        """
        pass

    @abstractmethod
    def get_remote_url(self, repo_root: str, remote: str | None = None) -> str:
        """
        Get the URL of a remote.

        Args:
            repo_root: Path to repository root
            remote: Remote name, or None for the default remote

        Returns:
            The remote URL exactly as configured

        Raises:
            NoRemotesError: If the repository has no remotes
            RemoteNotFoundError: If the named remote does not exist
        """
        pass

    @abstractmethod
    def facts(self, repo_root: str) -> IRepoFacts:
        """
        Get an introspection handle for a repository.

        Args:
            repo_root: Path to repository root
        """
        pass

    def is_available(self) -> bool:
        """
        Check if this VCS is available on the system.

        Returns:
            True if the VCS tool is installed
        """
        return True
