"""
Diagnostic logging for git-browse.

``GitBrowseLogger`` writes through a stdlib logger named ``gitbrowse``:
warnings (SSH config trouble, browser failures, ignored config files) go to
stderr by default, and ``--verbose`` lowers the threshold to debug. An
optional rotating file keeps a history in ~/.gitbrowse/gitbrowse.log.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger

CONSOLE_FORMAT = "git-browse: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class GitBrowseLogger(ILogger):
    """ILogger backed by stdlib logging, with stderr and file handlers."""

    LOG_FILE_PATH = Path.home() / ".gitbrowse" / "gitbrowse.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "gitbrowse",
        level: str = "warning",
        console_enabled: bool = True,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Configure the named stdlib logger.

        Handlers left over from an earlier instance with the same name are
        removed first, so re-creating the logger never duplicates output.

        Args:
            name: stdlib logger name
            level: Threshold for every handler (debug, info, warning, error)
            console_enabled: Write to stderr
            file_enabled: Write to the rotating log file
            log_file: Log file location (default: ~/.gitbrowse/gitbrowse.log)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        self._log_file = log_file or self.LOG_FILE_PATH
        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

        threshold = self._to_level(level)
        if console_enabled:
            self._console_handler = self._add_handler(
                logging.StreamHandler(sys.stderr), logging.Formatter(CONSOLE_FORMAT), threshold
            )
        if file_enabled:
            self._log_file.parent.mkdir(parents=True, exist_ok=True)
            self._file_handler = self._add_handler(
                RotatingFileHandler(
                    self._log_file,
                    maxBytes=self.MAX_FILE_SIZE,
                    backupCount=self.BACKUP_COUNT,
                ),
                logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT),
                threshold,
            )

    @classmethod
    def _to_level(cls, level: str) -> int:
        return cls.LEVEL_MAP.get(level.lower(), logging.WARNING)

    def _add_handler(
        self, handler: logging.Handler, formatter: logging.Formatter, level: int
    ) -> logging.Handler:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        self._logger.addHandler(handler)
        return handler

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)


class NullLogger(ILogger):
    """Discards everything; used before bootstrap and in tests."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass
