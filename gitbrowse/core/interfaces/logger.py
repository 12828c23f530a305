"""
Logger interface.

Diagnostics (alias lookups, ignored config files, browser failures) go
through ILogger so they honour the logging settings. The URL itself and
error messages are user output and are printed by the CLI with
``click.echo``.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Leveled diagnostic logging with printf-style arguments."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass
