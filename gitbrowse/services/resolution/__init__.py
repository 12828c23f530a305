"""
Remote URL resolution services.

Converts a repository remote into the web URL to open:
- SshHostResolver: SSH config alias lookup
- RemoteUrlNormalizer: remote URL -> HTTPS URL
- TargetSegmentResolver: branch/commit selection -> path segment
- compose / ResolutionPipeline: the assembled URL
"""

from .pipeline import ResolutionPipeline, compose
from .remote_url import RemoteUrlNormalizer, classify_remote_url
from .ssh_hosts import HostLookupResult, SshHostResolver
from .target import TargetSegmentResolver

__all__ = [
    "HostLookupResult",
    "RemoteUrlNormalizer",
    "ResolutionPipeline",
    "SshHostResolver",
    "TargetSegmentResolver",
    "classify_remote_url",
    "compose",
]
