"""
Pydantic models for git-browse.
"""

from .base import GitBrowseBaseModel, ImmutableModel
from .config import BrowserConfig, LoggingConfig, RemoteConfig, SshConfig
from .target import TargetKind, TargetSelection
from .url import ClassifiedRemote, NormalizedUrl, RemoteKind

__all__ = [
    "BrowserConfig",
    "ClassifiedRemote",
    "GitBrowseBaseModel",
    "ImmutableModel",
    "LoggingConfig",
    "NormalizedUrl",
    "RemoteConfig",
    "RemoteKind",
    "SshConfig",
    "TargetKind",
    "TargetSelection",
]
