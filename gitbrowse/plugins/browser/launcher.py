"""
Browser launcher using click.launch.

click.launch hands the URL to the platform opener (``xdg-open``, ``open``,
``start``) and returns its exit status.
"""

import click

from ...core.di import resolve_or_default
from ...core.interfaces.browser import IBrowserLauncher
from ...core.interfaces.logger import ILogger


class ClickBrowserLauncher(IBrowserLauncher):
    """Production implementation that opens URLs in the system browser."""

    def __init__(self, logger: ILogger | None = None) -> None:
        from ...services.logging import NullLogger

        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    def launch(self, url: str) -> bool:
        """Launch URL in the default web browser.

        Args:
            url: The URL to open in the browser

        Returns:
            True if the platform opener reported success
        """
        try:
            status = click.launch(url)
        except OSError as e:
            self._logger.warning("Could not start the browser: %s", e)
            return False

        if status != 0:
            self._logger.warning("Browser opener exited with status %s", status)
            return False
        return True
