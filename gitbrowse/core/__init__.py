"""
Core infrastructure for git-browse.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for the pluggable collaborators
- Custom exception hierarchy
- Settings loading
"""

from .bootstrap import bootstrap, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigError,
    ConfigFileError,
    GitBrowseException,
    LocalRemoteError,
    NoRemotesError,
    NotARepositoryError,
    RemoteNotFoundError,
    RemoteUrlError,
    UnknownRemoteFormatError,
    UnsupportedProtocolError,
    VCSError,
    VCSUnavailableError,
)
from .settings import GitBrowseSettings, load_settings

__all__ = [
    "ConfigError",
    "ConfigFileError",
    "GitBrowseException",
    "GitBrowseSettings",
    "LocalRemoteError",
    "NoRemotesError",
    "NotARepositoryError",
    "RemoteNotFoundError",
    "RemoteUrlError",
    "ServiceContainer",
    "UnknownRemoteFormatError",
    "UnsupportedProtocolError",
    "VCSError",
    "VCSUnavailableError",
    "bootstrap",
    "get_container",
    "load_settings",
    "reset",
]
