"""
Dependency injection container for git-browse.

Built on dependency-injector providers:
- Services are keyed by their interface and held as singletons
  (a ready instance, or a factory called on first use)
- VCS providers are keyed by name and built fresh for every lookup,
  so each command gets its own provider
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

from .interfaces.vcs import IVCSProvider

T = TypeVar("T")

DEFAULT_VCS = "git"


class ServiceContainer:
    """
    Process-wide registry of git-browse services.

    Usage:
        container = get_container()
        container.register_singleton(ILogger, factory=make_logger)
        logger = container.resolve(ILogger)
        git = container.get_vcs_provider("git")
    """

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._services: dict[type, providers.Provider] = {}
        self._vcs: dict[str, providers.Factory] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Return the shared container, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared container; the next lookup starts empty."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register the single implementation of an interface.

        Args:
            interface: Interface the service is looked up by
            implementation: Ready-made instance
            factory: Callable building the instance on first resolve

        Raises:
            ValueError: Neither an implementation nor a factory was given
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")
        self._services[interface] = provider

    def try_resolve(self, interface: type[T]) -> T | None:
        """Return the service for an interface, or None when unregistered."""
        provider = self._services.get(interface)
        return provider() if provider is not None else None

    def resolve(self, interface: type[T]) -> T:
        """
        Return the service for an interface.

        Raises:
            KeyError: Nothing is registered for the interface
        """
        if interface not in self._services:
            raise KeyError(f"No provider registered for: {interface}")
        return self._services[interface]()

    # -------------------------------------------------------------------------
    # VCS providers
    # -------------------------------------------------------------------------

    def register_vcs_provider(self, name: str, provider_class: type[IVCSProvider]) -> None:
        """Register a VCS provider class under a name such as 'git'."""
        self._vcs[name] = providers.Factory(provider_class)

    def get_vcs_provider(self, name: str = DEFAULT_VCS) -> IVCSProvider:
        """
        Build the VCS provider registered under a name.

        Raises:
            KeyError: No provider has that name
        """
        if name not in self._vcs:
            raise KeyError(f"No VCS provider registered: {name}")
        return self._vcs[name]()


def get_container() -> ServiceContainer:
    """Shortcut for ServiceContainer.get_instance()."""
    return ServiceContainer.get_instance()
