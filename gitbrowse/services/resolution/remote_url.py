"""
Remote URL normalization.

Turns a remote URL as stored in the repository configuration into the
HTTPS URL of the repository's web page:

    git@github.com:acme/widgets.git     -> https://github.com/acme/widgets
    ssh://work/acme/widgets.git         -> https://<HostName of "work">/acme/widgets
    git://example.org/project.git       -> https://example.org/project
    https://gitlab.com/group/project    -> unchanged

The raw string is classified once into a ``ClassifiedRemote``; the rewrite
then only depends on its ``kind``.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

from ...core.di import resolve_or_default
from ...core.exceptions import (
    LocalRemoteError,
    UnknownRemoteFormatError,
    UnsupportedProtocolError,
)
from ...core.interfaces.logger import ILogger
from ...core.models.url import ClassifiedRemote, NormalizedUrl, RemoteKind
from ...utils.git_url import (
    ensure_absolute_path,
    has_scheme,
    split_netloc,
    split_scp,
    strip_vcs_suffix,
)
from .ssh_hosts import SshHostResolver

WEB_SCHEME = "https"

SCHEME_KINDS = {
    "http": RemoteKind.WEB,
    "https": RemoteKind.WEB,
    "ssh": RemoteKind.SSH,
    "git": RemoteKind.GIT,
}

# Kinds whose host may be an alias from the SSH client configuration
SSH_KINDS = (RemoteKind.SSH, RemoteKind.SCP)


def is_local_path(raw: str, base_dir: Path | None = None) -> bool:
    """
    Check whether a remote URL names an existing filesystem path.

    Relative paths are resolved against ``base_dir`` (the repository root)
    as well as the current directory, mirroring how git resolves them.
    """
    try:
        path = Path(raw).expanduser()
        if path.exists():
            return True
        return base_dir is not None and not path.is_absolute() and (base_dir / path).exists()
    except (OSError, ValueError, RuntimeError):
        # Over-long names, NUL bytes and unknown ~user cannot be local paths
        return False


def classify_remote_url(raw: str | None, base_dir: Path | None = None) -> ClassifiedRemote:
    """
    Classify a raw remote URL into one of the supported forms.

    Args:
        raw: Remote URL exactly as configured
        base_dir: Directory relative local paths are resolved against

    Returns:
        ClassifiedRemote with the URL's parts

    Raises:
        UnknownRemoteFormatError: Empty, or not a recognizable URL
        LocalRemoteError: The remote is a path on this machine
        UnsupportedProtocolError: The scheme has no web equivalent
    """
    if raw is None or not raw.strip():
        raise UnknownRemoteFormatError(raw)

    if is_local_path(raw, base_dir):
        raise LocalRemoteError(raw)

    if not has_scheme(raw):
        return _classify_scp(raw)

    try:
        parts = urlsplit(raw)
    except ValueError as e:
        raise UnknownRemoteFormatError(raw, cause=e) from e

    # urlsplit lowercases the scheme and drops an empty query or fragment
    scheme = raw.split("://", 1)[0]
    kind = SCHEME_KINDS.get(scheme.lower())
    if kind is None:
        raise UnsupportedProtocolError(raw, scheme=scheme.lower())

    userinfo, host, port = split_netloc(parts.netloc)
    if not host:
        raise UnknownRemoteFormatError(raw)

    return ClassifiedRemote(
        kind=kind,
        raw=raw,
        scheme=scheme,
        host=host,
        path=parts.path,
        userinfo=userinfo,
        port=port,
        query=parts.query if "?" in raw.partition("#")[0] else None,
        fragment=parts.fragment if "#" in raw else None,
    )


def _classify_scp(raw: str) -> ClassifiedRemote:
    """Classify scheme-less ``[user[:password]@]host:path`` shorthand."""
    scp = split_scp(raw)
    if scp is None:
        raise UnknownRemoteFormatError(raw)

    userinfo, host, path = scp
    return ClassifiedRemote(
        kind=RemoteKind.SCP,
        raw=raw,
        scheme="ssh",
        host=host,
        path=ensure_absolute_path(path),
        userinfo=userinfo,
    )


class RemoteUrlNormalizer:
    """
    Converts remote URLs into browsable HTTPS URLs.

    Usage:
        normalizer = RemoteUrlNormalizer(SshHostResolver())
        url = normalizer.normalize("git@github.com:acme/widgets.git")
        str(url)  # "https://github.com/acme/widgets"
    """

    def __init__(
        self,
        host_resolver: SshHostResolver | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the normalizer.

        Args:
            host_resolver: Resolver for SSH host aliases
            logger: Logger instance. If None, resolves from DI container.
        """
        from ..logging import NullLogger

        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        self._host_resolver = host_resolver or SshHostResolver(logger=self._logger)

    def normalize(self, raw: str | None, base_dir: Path | None = None) -> NormalizedUrl:
        """
        Normalize a remote URL.

        Args:
            raw: Remote URL exactly as configured
            base_dir: Directory relative local paths are resolved against

        Returns:
            The repository's web URL

        Raises:
            UnknownRemoteFormatError: Empty, or not a recognizable URL
            LocalRemoteError: The remote is a path on this machine
            UnsupportedProtocolError: The scheme has no web equivalent
        """
        remote = classify_remote_url(raw, base_dir)
        self._logger.debug("Classified remote %s as %s", remote.raw, remote.kind)

        if remote.kind == RemoteKind.WEB:
            return NormalizedUrl(
                scheme=remote.scheme,
                host=remote.host,
                path=remote.path,
                userinfo=remote.userinfo,
                port=remote.port,
                query=remote.query,
                fragment=remote.fragment,
            )

        host = remote.host
        if remote.kind in SSH_KINDS:
            host = self._host_resolver.resolve_host(host)

        # A username alone (git@...) is the transport login, not a web login
        return NormalizedUrl(
            scheme=WEB_SCHEME,
            host=host,
            path=strip_vcs_suffix(remote.path),
            userinfo=self._credentials(remote),
        )

    @staticmethod
    def _credentials(remote: ClassifiedRemote) -> str | None:
        if remote.has_credentials:
            return f"{remote.username}:{remote.password}"
        return None
