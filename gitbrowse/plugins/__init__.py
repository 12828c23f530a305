"""
git-browse plugin architecture.

This package contains implementations of the collaborators with side effects:
- vcs: Version control providers (Git)
- browser: Browser launchers

New providers are added by registering them with the service container.
"""

from . import browser, vcs

__all__ = ["browser", "vcs"]
