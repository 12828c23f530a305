"""
Model base classes.

URL and target models are strict and immutable: they are built once from
parsed input and only ever copied. Config sections relax strictness (see
``models.config``) because TOML and environment values arrive as strings.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GitBrowseBaseModel(BaseModel):
    """Strict base: no type coercion, unknown fields rejected, enums stored as values."""

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ImmutableModel(GitBrowseBaseModel):
    """Frozen variant; derive new values with ``model_copy``."""

    model_config = ConfigDict(frozen=True)
