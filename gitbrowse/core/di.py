"""
Lazy service lookup.

Services take their collaborators as optional constructor arguments and
fall back to the container, then to a built-in default. That keeps them
usable as a library and in unit tests without running bootstrap().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Return the registered service for ``interface``, else ``default_factory()``.

    Example:
        >>> from gitbrowse.core.interfaces.logger import ILogger
        >>> from gitbrowse.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    from .container import get_container

    instance = get_container().try_resolve(interface)
    if instance is not None:
        return instance
    return default_factory()
