"""
Git VCS provider.

Implements VCS operations for Git repositories by running the ``git``
executable.
"""

import os
import subprocess

from ...core.exceptions import (
    NoRemotesError,
    RemoteNotFoundError,
    VCSError,
    VCSUnavailableError,
)
from ...core.interfaces.vcs import IRepoFacts
from .base import BaseVCSProvider


def _git(args: list[str], cwd: str) -> str:
    """Run a git command and return its stripped stdout.

    Raises:
        subprocess.CalledProcessError: git exited non-zero
        VCSUnavailableError: git is not installed
        VCSError: git printed something that is not UTF-8
    """
    try:
        out = subprocess.check_output(["git", *args], cwd=cwd, stderr=subprocess.DEVNULL)
    except FileNotFoundError as e:
        raise VCSUnavailableError("git executable not found", repo_path=cwd, cause=e) from e
    try:
        return out.decode().strip()
    except UnicodeDecodeError as e:
        raise VCSError(
            f"git {args[0]} printed output that is not valid UTF-8", repo_path=cwd, cause=e
        ) from e


class GitRepoFacts(IRepoFacts):
    """Branch and commit introspection for one git repository."""

    def __init__(self, repo_root: str) -> None:
        self.repo_root = repo_root

    def get_checked_out_branch(self) -> str | None:
        """Short name of the checked-out branch, None when HEAD is detached."""
        try:
            branch = _git(["symbolic-ref", "--quiet", "--short", "HEAD"], self.repo_root)
        except subprocess.CalledProcessError:
            return None
        return branch or None

    def get_remote_tracking_branch(self, branch: str) -> str | None:
        """
        Upstream branch name of a local branch, as named on the remote.

        Reads ``branch.<name>.merge`` so that ``feature/x`` tracking
        ``origin/feature/x`` yields ``feature/x``.
        """
        try:
            merge = _git(["config", "--get", f"branch.{branch}.merge"], self.repo_root)
        except subprocess.CalledProcessError:
            return None
        if not merge:
            return None
        return merge.removeprefix("refs/heads/")

    def get_head_commit_id(self) -> str | None:
        """Full hash of the HEAD commit, None on an unborn branch."""
        try:
            commit = _git(["rev-parse", "--verify", "--quiet", "HEAD"], self.repo_root)
        except subprocess.CalledProcessError:
            return None
        return commit or None


class GitVCSProvider(BaseVCSProvider):
    """
    Git version control provider.

    Provides Git-specific implementations for locating the repository,
    reading its remotes, and introspecting branches and commits.
    """

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        """Check if git is installed."""
        try:
            subprocess.run(["git", "--version"], capture_output=True, check=True)
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False

    def get_repo_root(self, path: str | None = None) -> str | None:
        """Get the git repository root directory."""
        try:
            cmd = ["git", "rev-parse", "--show-toplevel"]
            if path:
                out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL, cwd=path)
            else:
                out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL)
            return os.fsdecode(out).strip() or None
        except (subprocess.CalledProcessError, OSError):
            return None

    def list_remotes(self, repo_root: str) -> list[str]:
        """List remote names in configuration order."""
        try:
            out = _git(["remote"], repo_root)
        except subprocess.CalledProcessError:
            return []
        return [line.strip() for line in out.splitlines() if line.strip()]

    def get_remote_url(self, repo_root: str, remote: str | None = None) -> str:
        """Get the fetch URL of a remote (``url.<base>.insteadOf`` applied)."""
        remotes = self.list_remotes(repo_root)
        if not remotes:
            raise NoRemotesError("No remotes defined in repository", repo_path=repo_root)

        name = remote or self.default_remote(remotes)
        if name not in remotes:
            raise RemoteNotFoundError(
                f"No such remote: {name}",
                remote=name,
                available=remotes,
                repo_path=repo_root,
            )

        try:
            return _git(["remote", "get-url", name], repo_root)
        except subprocess.CalledProcessError as e:
            raise RemoteNotFoundError(
                f"Could not read remote information for {name}",
                remote=name,
                repo_path=repo_root,
                cause=e,
            ) from e

    def facts(self, repo_root: str) -> GitRepoFacts:
        """Get branch/commit introspection for a repository."""
        return GitRepoFacts(repo_root)
