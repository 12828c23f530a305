"""
Browser launcher interface.

Keeps the OS browser integration behind an interface so the CLI can be
tested without opening windows.
"""

from abc import ABC, abstractmethod


class IBrowserLauncher(ABC):
    """Interface for opening URLs in the user's browser."""

    @abstractmethod
    def launch(self, url: str) -> bool:
        """
        Open a URL in the default web browser.

        Args:
            url: The URL to open

        Returns:
            True if the browser was launched, False otherwise
        """
        pass
