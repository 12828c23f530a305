"""
Custom exception hierarchy for git-browse.

Every terminal condition the CLI can report is a typed exception carrying
a human-readable message, optional debugging context, and a suggested
exit code. Non-fatal conditions (SSH config lookups, browser launch) are
not modelled as exceptions; they degrade to a fallback and are logged.
"""

from __future__ import annotations


class GitBrowseException(Exception):
    """
    Base exception for all git-browse errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, URLs, remote names)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(GitBrowseException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(ConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Remote URL Errors
# =============================================================================


class RemoteUrlError(GitBrowseException):
    """
    Base class for remote URLs that cannot be turned into a web URL.

    These are terminal: retrying with the same remote yields the same result.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        remote_url: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if remote_url is not None:
            ctx["remote_url"] = remote_url
        self.remote_url = remote_url
        super().__init__(message, context=ctx, cause=cause)


class LocalRemoteError(RemoteUrlError):
    """The remote points at a local filesystem path; there is no web page for it."""

    def __init__(self, remote_url: str, *, cause: Exception | None = None) -> None:
        super().__init__("Remote is a local path", remote_url=remote_url, cause=cause)


class UnknownRemoteFormatError(RemoteUrlError):
    """The remote URL is empty or not recognized as any supported shape."""

    def __init__(self, remote_url: str | None, *, cause: Exception | None = None) -> None:
        super().__init__("Don't know remote format", remote_url=remote_url, cause=cause)


class UnsupportedProtocolError(RemoteUrlError):
    """
    The remote URL parsed, but its scheme has no known web-hosting mapping.

    Raised for ``file://`` and custom transport schemes.
    """

    def __init__(
        self,
        remote_url: str,
        *,
        scheme: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = {"scheme": scheme} if scheme is not None else None
        super().__init__(
            "Protocol not supported", remote_url=remote_url, context=ctx, cause=cause
        )
        self.scheme = scheme


# =============================================================================
# VCS Errors
# =============================================================================


class VCSError(GitBrowseException):
    """Base class for version-control access errors."""

    def __init__(
        self,
        message: str,
        *,
        repo_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if repo_path:
            ctx["repo_path"] = repo_path
        super().__init__(message, context=ctx, cause=cause)


class VCSUnavailableError(VCSError):
    """The version-control executable is not installed or not on PATH."""

    recoverable: bool = False


class NotARepositoryError(VCSError):
    """The given path is not inside a repository work tree."""

    recoverable: bool = False


class NoRemotesError(VCSError):
    """The repository has no remotes configured."""

    recoverable: bool = False


class RemoteNotFoundError(VCSError):
    """
    The requested remote does not exist.

    The configured remotes are listed in the context to help the user pick one.
    """

    def __init__(
        self,
        message: str,
        *,
        remote: str,
        available: list[str] | None = None,
        repo_path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx: dict = {"remote": remote}
        if available is not None:
            ctx["available"] = ", ".join(available)
        super().__init__(message, repo_path=repo_path, context=ctx, cause=cause)
