"""
Browser launcher plugins.
"""

from .launcher import ClickBrowserLauncher

__all__ = ["ClickBrowserLauncher"]
