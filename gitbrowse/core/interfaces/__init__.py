"""
Interface definitions for git-browse services.

Each interface is an ABC so implementations can be swapped in the
service container (real git vs. test doubles, real browser vs. recorder).
"""

from .browser import IBrowserLauncher
from .logger import ILogger
from .vcs import IRepoFacts, IVCSProvider

__all__ = [
    "IBrowserLauncher",
    "ILogger",
    "IRepoFacts",
    "IVCSProvider",
]
