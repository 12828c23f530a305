"""
Application bootstrap for git-browse.

Initializes the DI container with all services and plugins.
This module should be called once at application startup.
"""

from .container import ServiceContainer, get_container
from .interfaces.browser import IBrowserLauncher
from .interfaces.logger import ILogger
from .settings import GitBrowseSettings

_initialized = False


def bootstrap(settings: GitBrowseSettings | None = None) -> ServiceContainer:
    """
    Bootstrap the git-browse application.

    Initializes the DI container with:
    - Core services (logger, browser launcher)
    - VCS providers

    Args:
        settings: Loaded settings; defaults are used when None

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, settings or GitBrowseSettings())
    _register_plugins(container)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: GitBrowseSettings) -> None:
    """Register core application services."""
    from ..plugins.browser import ClickBrowserLauncher
    from ..services.logging import GitBrowseLogger

    def create_logger() -> ILogger:
        return GitBrowseLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    container.register_singleton(IBrowserLauncher, factory=ClickBrowserLauncher)  # type: ignore[type-abstract]


def _register_plugins(container: ServiceContainer) -> None:
    """Register the built-in VCS providers."""
    from ..plugins.vcs import GitVCSProvider

    container.register_vcs_provider("git", GitVCSProvider)


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False
