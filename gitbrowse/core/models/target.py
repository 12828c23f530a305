"""
Target selection model.

Describes what the opened page should point at: an explicit revision,
the HEAD commit, the checked-out branch, or just the repository root.
"""

from __future__ import annotations

from enum import Enum

from pydantic import model_validator

from .base import ImmutableModel

HEAD = "HEAD"


class TargetKind(str, Enum):
    """Kinds of page the browser can be pointed at."""

    REVISION = "revision"
    HEAD = "head"
    CURRENT_BRANCH = "current_branch"
    NONE = "none"


class TargetSelection(ImmutableModel):
    """Closed choice of what to open, built from CLI flags.

    Use the constructors (``revision``, ``head``, ``current_branch``, ``none``)
    or ``from_flags`` rather than instantiating directly.
    """

    kind: TargetKind
    revision: str | None = None

    @model_validator(mode="after")
    def revision_only_for_revision_kind(self) -> TargetSelection:
        if self.kind == TargetKind.REVISION:
            if not self.revision:
                raise ValueError("an explicit revision target needs a revision")
        elif self.revision is not None:
            raise ValueError(f"target {self.kind!s} does not take a revision")
        return self

    @classmethod
    def explicit(cls, revision: str) -> TargetSelection:
        return cls(kind=TargetKind.REVISION, revision=revision)

    @classmethod
    def head(cls) -> TargetSelection:
        return cls(kind=TargetKind.HEAD)

    @classmethod
    def current_branch(cls) -> TargetSelection:
        return cls(kind=TargetKind.CURRENT_BRANCH)

    @classmethod
    def none(cls) -> TargetSelection:
        return cls(kind=TargetKind.NONE)

    @classmethod
    def from_flags(
        cls,
        commit: str | None = None,
        head: bool = False,
        no_branch: bool = False,
    ) -> TargetSelection:
        """Build a selection from the CLI flags.

        An explicit commit wins over ``--head``, which wins over branch
        inference. ``no_branch`` only suppresses branch inference.
        """
        if commit:
            return cls.explicit(commit)
        if head:
            return cls.head()
        if no_branch:
            return cls.none()
        return cls.current_branch()

    @property
    def wants_head_commit(self) -> bool:
        """True for ``--head`` and for an explicit revision spelled ``HEAD``."""
        return self.kind == TargetKind.HEAD or (
            self.kind == TargetKind.REVISION and self.revision == HEAD
        )
