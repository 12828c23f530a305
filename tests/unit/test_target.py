"""
Unit tests for target selection and segment resolution.

Uses an in-memory IRepoFacts so each decision rule can be exercised
without a repository.
"""

import pytest
from pydantic import ValidationError

from gitbrowse.core.interfaces.vcs import IRepoFacts
from gitbrowse.core.models.target import TargetKind, TargetSelection
from gitbrowse.services.resolution.target import TargetSegmentResolver

HEAD_SHA = "3f786850e387550fdab836ed7e6dc881de23001b"


class FakeRepoFacts(IRepoFacts):
    """Repository facts backed by plain attributes."""

    def __init__(self, branch=None, upstreams=None, head=HEAD_SHA):
        self.branch = branch
        self.upstreams = upstreams or {}
        self.head = head
        self.calls: list[str] = []

    def get_checked_out_branch(self):
        self.calls.append("branch")
        return self.branch

    def get_remote_tracking_branch(self, branch):
        self.calls.append("upstream")
        return self.upstreams.get(branch)

    def get_head_commit_id(self):
        self.calls.append("head")
        return self.head


class TestTargetSelection:
    """Tests for the TargetSelection model."""

    def test_from_flags_default_is_current_branch(self):
        assert TargetSelection.from_flags().kind == TargetKind.CURRENT_BRANCH

    def test_from_flags_commit_wins(self):
        selection = TargetSelection.from_flags(commit="v1.0", head=True, no_branch=True)
        assert selection.kind == TargetKind.REVISION
        assert selection.revision == "v1.0"

    def test_from_flags_head_wins_over_no_branch(self):
        assert TargetSelection.from_flags(head=True, no_branch=True).kind == TargetKind.HEAD

    def test_from_flags_no_branch(self):
        assert TargetSelection.from_flags(no_branch=True).kind == TargetKind.NONE

    def test_revision_required_for_explicit(self):
        with pytest.raises(ValidationError):
            TargetSelection(kind=TargetKind.REVISION)

    def test_revision_rejected_for_other_kinds(self):
        with pytest.raises(ValidationError):
            TargetSelection(kind=TargetKind.HEAD, revision="abc")

    def test_immutable(self):
        selection = TargetSelection.explicit("main")
        with pytest.raises(ValidationError):
            selection.revision = "other"

    @pytest.mark.parametrize(
        ("selection", "expected"),
        [
            (TargetSelection.head(), True),
            (TargetSelection.explicit("HEAD"), True),
            (TargetSelection.explicit("head"), False),
            (TargetSelection.explicit("main"), False),
            (TargetSelection.current_branch(), False),
            (TargetSelection.none(), False),
        ],
    )
    def test_wants_head_commit(self, selection, expected):
        assert selection.wants_head_commit is expected


class TestTargetSegmentResolver:
    """Tests for TargetSegmentResolver.resolve_segment."""

    @pytest.fixture
    def resolver(self):
        return TargetSegmentResolver()

    def test_head_flag_uses_commit_id(self, resolver):
        repo = FakeRepoFacts(branch="main")
        assert resolver.resolve_segment(TargetSelection.head(), repo) == HEAD_SHA

    def test_explicit_head_uses_commit_id(self, resolver):
        repo = FakeRepoFacts(branch="main")
        assert resolver.resolve_segment(TargetSelection.explicit("HEAD"), repo) == HEAD_SHA

    def test_unresolvable_head(self, resolver):
        repo = FakeRepoFacts(head=None)
        assert resolver.resolve_segment(TargetSelection.head(), repo) is None

    def test_explicit_revision_verbatim(self, resolver):
        repo = FakeRepoFacts(branch="main")
        assert resolver.resolve_segment(TargetSelection.explicit("v1.2.0"), repo) == "v1.2.0"
        assert repo.calls == []

    def test_none_skips_repository(self, resolver):
        repo = FakeRepoFacts(branch="main")
        assert resolver.resolve_segment(TargetSelection.none(), repo) is None
        assert repo.calls == []

    def test_current_branch_prefers_upstream(self, resolver):
        repo = FakeRepoFacts(branch="local-x", upstreams={"local-x": "feature/x"})
        assert resolver.resolve_segment(TargetSelection.current_branch(), repo) == "feature/x"

    def test_current_branch_falls_back_to_local_name(self, resolver):
        repo = FakeRepoFacts(branch="feature/x")
        assert resolver.resolve_segment(TargetSelection.current_branch(), repo) == "feature/x"

    def test_detached_head(self, resolver):
        repo = FakeRepoFacts(branch=None)
        assert resolver.resolve_segment(TargetSelection.current_branch(), repo) is None
        assert "upstream" not in repo.calls
