"""
Configuration models.

Provides Pydantic models for git-browse configuration sections.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from .base import GitBrowseBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_SSH_CONFIG_PATHS = ["~/.ssh/config", "/etc/ssh/ssh_config"]


class ConfigBaseModel(GitBrowseBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class RemoteConfig(ConfigBaseModel):
    """Remote selection section."""

    name: str | None = None

    @field_validator("name")
    @classmethod
    def blank_name_is_unset(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


class SshConfig(ConfigBaseModel):
    """SSH host alias lookup section.

    ``config_paths`` are tried in order; the first one that exists is used.
    """

    config_paths: list[str] = Field(default_factory=lambda: list(DEFAULT_SSH_CONFIG_PATHS))


class BrowserConfig(ConfigBaseModel):
    """Browser launch section."""

    launch: bool = True


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = True
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def lowercase_level(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v
