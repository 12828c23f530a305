"""
git-browse settings.

Settings are merged by pydantic-settings from, highest priority first:

1. Values passed to ``load_settings`` (the CLI uses this for ``--verbose``)
2. ``GITBROWSE_<SECTION>__<FIELD>`` environment variables
3. The nearest TOML config file:
   ``.gitbrowse.toml`` or ``pyproject.toml`` with a ``[tool.gitbrowse]``
   table, searched from the start directory upwards, then
   ``$XDG_CONFIG_HOME/gitbrowse/config.toml``
4. Model defaults

A config file that cannot be read or parsed is skipped with a warning;
only values of the wrong type are fatal.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigError, ConfigFileError
from .models.config import BrowserConfig, LoggingConfig, RemoteConfig, SshConfig

PROJECT_CONFIG_NAME = ".gitbrowse.toml"
PYPROJECT_NAME = "pyproject.toml"
PYPROJECT_TOOL_KEY = "gitbrowse"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def user_config_path() -> Path:
    """Per-user config file, under ``$XDG_CONFIG_HOME`` or ``~/.config``."""
    base = os.environ.get("XDG_CONFIG_HOME") or "~/.config"
    return Path(base).expanduser() / "gitbrowse" / "config.toml"


def _read_toml(path: Path) -> dict[str, Any]:
    """Parse a config file, unwrapping ``[tool.gitbrowse]`` for pyproject.toml."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if path.name == PYPROJECT_NAME:
        return data.get("tool", {}).get(PYPROJECT_TOOL_KEY, {})
    return data


def _has_tool_table(pyproject: Path) -> bool:
    try:
        with open(pyproject, "rb") as f:
            return PYPROJECT_TOOL_KEY in tomllib.load(f).get("tool", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        _get_logger().debug("Skipping %s: %s", pyproject, e)
        return False


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Locate the config file that applies to a directory.

    The nearest directory wins; within one directory ``.gitbrowse.toml``
    is preferred over ``pyproject.toml``. A pyproject.toml without a
    ``[tool.gitbrowse]`` table does not count.

    Args:
        start_dir: Directory to search from (default: cwd)

    Returns:
        Path of the config file, or None
    """
    start = Path(start_dir).resolve() if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        dotfile = directory / PROJECT_CONFIG_NAME
        if dotfile.exists():
            return dotfile
        pyproject = directory / PYPROJECT_NAME
        if pyproject.exists() and _has_tool_table(pyproject):
            return pyproject

    user_config = user_config_path()
    return user_config if user_config.exists() else None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source reading the TOML config file.

    The file is located and parsed once. After loading, ``path`` holds the
    file used and ``error`` a ConfigFileError if it could not be used.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.path: Path | None = None
        self.error: ConfigFileError | None = None

    def load(self) -> dict[str, Any]:
        if self._data is None:
            self._data = self._load()
        return self._data

    def _load(self) -> dict[str, Any]:
        self.path = self._config_path or find_config_file(self._start_dir)
        if self.path is None:
            return {}

        try:
            return _read_toml(self.path)
        except tomllib.TOMLDecodeError as e:
            self.error = ConfigFileError(
                f"Failed to parse config file: {e}", file_path=str(self.path), cause=e
            )
        except OSError as e:
            self.error = ConfigFileError(
                f"Failed to read config file: {e}", file_path=str(self.path), cause=e
            )

        _get_logger().warning("%s", self.error)
        return {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.load().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self.load()


# load_settings() hands the file location to settings_customise_sources here,
# since pydantic-settings gives that hook no per-call arguments.
_current_config_path: Path | None = None
_current_start_dir: str | None = None


class GitBrowseSettings(BaseSettings):
    """All git-browse settings, one attribute per config section."""

    model_config = {
        "env_prefix": "GITBROWSE_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    remote: RemoteConfig = RemoteConfig()
    ssh: SshConfig = SshConfig()
    browser: BrowserConfig = BrowserConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use init values, then the environment, then the TOML file."""
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return init_settings, env_settings, toml_source

    @property
    def config_file(self) -> str | None:
        """Config file that was found, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the config file was skipped, if it was."""
        return self._config_error


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> GitBrowseSettings:
    """Load settings for a directory.

    Args:
        config_path: Use this config file instead of searching for one
        start_dir: Directory the config file search starts from
        **overrides: Section values that beat every other source,
            e.g. ``logging={"level": "debug"}``

    Returns:
        Merged GitBrowseSettings

    Raises:
        ConfigError: A setting has a value of the wrong type or shape
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir
    try:
        try:
            settings = GitBrowseSettings(**overrides)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}", cause=e) from e
    finally:
        _current_config_path = None
        _current_start_dir = None

    # A second read of the same file tells us which file it was and whether it loaded
    source = TomlConfigSource(GitBrowseSettings, config_path, start_dir)
    source.load()
    if source.path is not None:
        settings._config_file = str(source.path)
    if source.error is not None:
        settings._config_error = str(source.error)
    return settings
