"""
Remote URL resolution pipeline.

Wires the normalizer, the target segment resolver and the URL composer
into the single call the CLI needs:

    url = ResolutionPipeline().resolve(raw_remote_url, selection, repo_facts)
"""

from __future__ import annotations

from pathlib import Path

from ...core.di import resolve_or_default
from ...core.interfaces.logger import ILogger
from ...core.interfaces.vcs import IRepoFacts
from ...core.models.target import TargetSelection
from ...core.models.url import NormalizedUrl
from .remote_url import RemoteUrlNormalizer
from .ssh_hosts import SshHostResolver
from .target import TargetSegmentResolver

TREE_SEGMENT = "tree"


def compose(base: NormalizedUrl, segment: str | None) -> str:
    """
    Append a ``/tree/<segment>`` view to a repository URL.

    Args:
        base: The repository's web URL
        segment: Branch name or commit id, or None for the repository root

    Returns:
        The serialized URL
    """
    if segment is None:
        return base.to_string()

    path = base.path.rstrip("/")
    return base.with_path(f"{path}/{TREE_SEGMENT}/{segment}").to_string()


class ResolutionPipeline:
    """
    Turns a remote URL plus a target selection into the URL to open.

    Follows constructor injection so each stage can be swapped in tests.
    """

    def __init__(
        self,
        normalizer: RemoteUrlNormalizer | None = None,
        segment_resolver: TargetSegmentResolver | None = None,
        ssh_config_paths: list[str] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            normalizer: Remote URL normalizer
            segment_resolver: Target segment resolver
            ssh_config_paths: SSH config candidates for the default normalizer
            logger: Logger instance. If None, resolves from DI container.
        """
        from ..logging import NullLogger

        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        self._normalizer = normalizer or RemoteUrlNormalizer(
            SshHostResolver(ssh_config_paths, logger=self._logger), logger=self._logger
        )
        self._segment_resolver = segment_resolver or TargetSegmentResolver(logger=self._logger)

    def resolve(
        self,
        raw_remote_url: str | None,
        selection: TargetSelection,
        repo: IRepoFacts,
        base_dir: Path | None = None,
    ) -> str:
        """
        Resolve the URL to open.

        Args:
            raw_remote_url: Remote URL exactly as configured
            selection: What the user asked to open
            repo: Introspection handle for the repository
            base_dir: Directory relative local remotes are resolved against

        Returns:
            Final URL string

        Raises:
            UnknownRemoteFormatError: Empty, or not a recognizable URL
            LocalRemoteError: The remote is a path on this machine
            UnsupportedProtocolError: The scheme has no web equivalent
        """
        base = self._normalizer.normalize(raw_remote_url, base_dir)
        segment = self._segment_resolver.resolve_segment(selection, repo)
        url = compose(base, segment)
        self._logger.debug("Resolved %s -> %s", raw_remote_url, url)
        return url
