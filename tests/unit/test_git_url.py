"""
Unit tests for git URL utilities.

Tests scheme detection, SCP shorthand splitting, authority splitting and
path clean-up.
"""

import pytest

from gitbrowse.utils.git_url import (
    ensure_absolute_path,
    has_scheme,
    split_netloc,
    split_scp,
    split_userinfo,
    strip_vcs_suffix,
)


class TestHasScheme:
    """Tests for has_scheme function."""

    @pytest.mark.parametrize(
        "url",
        [
            "ssh://git@github.com/user/repo.git",
            "https://github.com/user/repo",
            "git://example.org/project.git",
            "git+ssh://host/repo",
            "ftp://example.org/repo",
        ],
    )
    def test_scheme_urls(self, url):
        """URLs with scheme:// are detected."""
        assert has_scheme(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:user/repo.git",
            "myalias:team/repo",
            "/srv/git/repo.git",
            "",
        ],
    )
    def test_scheme_less_urls(self, url):
        """SCP shorthand and paths have no scheme."""
        assert has_scheme(url) is False


class TestSplitScp:
    """Tests for split_scp function."""

    def test_user_host_path(self):
        """Standard GitHub shorthand splits into three parts."""
        assert split_scp("git@github.com:user/repo.git") == ("git", "github.com", "user/repo.git")

    def test_alias_without_user(self):
        """An alias without a user has no userinfo."""
        assert split_scp("myalias:team/repo") == (None, "myalias", "team/repo")

    def test_user_and_password(self):
        """A password stays part of the userinfo."""
        assert split_scp("user:pw@host.example:repo") == ("user:pw", "host.example", "repo")

    def test_bracketed_ipv6_host(self):
        """IPv6 literals keep their brackets."""
        assert split_scp("git@[::1]:repo.git") == ("git", "[::1]", "repo.git")

    def test_absolute_path(self):
        """The path is returned as written."""
        assert split_scp("host:/srv/repo.git") == (None, "host", "/srv/repo.git")

    @pytest.mark.parametrize("url", ["not a url", "/local/path", "relative/path", "git@github.com"])
    def test_not_scp(self, url):
        """Strings without host:path shape are rejected."""
        assert split_scp(url) is None


class TestSplitUserinfo:
    """Tests for split_userinfo function."""

    def test_none(self):
        assert split_userinfo(None) == (None, None)

    def test_username_only(self):
        assert split_userinfo("git") == ("git", None)

    def test_username_and_password(self):
        assert split_userinfo("user:secret") == ("user", "secret")

    def test_empty_password_is_no_password(self):
        """``user:`` carries no password."""
        assert split_userinfo("user:") == ("user", None)

    def test_values_not_decoded(self):
        """Percent-encoding is preserved."""
        assert split_userinfo("us%40er:p%3Aw") == ("us%40er", "p%3Aw")


class TestSplitNetloc:
    """Tests for split_netloc function."""

    def test_host_only(self):
        assert split_netloc("example.com") == (None, "example.com", None)

    def test_full_authority(self):
        assert split_netloc("user:pw@example.com:8443") == ("user:pw", "example.com", "8443")

    def test_keeps_host_case(self):
        assert split_netloc("GitHub.com") == (None, "GitHub.com", None)

    def test_ipv6_with_port(self):
        assert split_netloc("[::1]:22") == (None, "[::1]", "22")

    def test_ipv6_without_port(self):
        assert split_netloc("git@[fe80::1]") == ("git", "[fe80::1]", None)

    def test_at_sign_in_password(self):
        """The last @ separates userinfo from host."""
        assert split_netloc("user:p@ss@host") == ("user:p@ss", "host", None)


class TestStripVcsSuffix:
    """Tests for strip_vcs_suffix function."""

    def test_strips_suffix(self):
        assert strip_vcs_suffix("/user/repo.git") == "/user/repo"

    def test_strips_suffix_before_trailing_slash(self):
        assert strip_vcs_suffix("/user/repo.git/") == "/user/repo"

    def test_no_suffix_unchanged(self):
        assert strip_vcs_suffix("/user/repo") == "/user/repo"

    def test_trailing_slash_kept_without_suffix(self):
        assert strip_vcs_suffix("/user/repo/") == "/user/repo/"

    def test_suffix_only_inside_name(self):
        """``.git`` in the middle of a path is left alone."""
        assert strip_vcs_suffix("/user/repo.github") == "/user/repo.github"


class TestEnsureAbsolutePath:
    """Tests for ensure_absolute_path function."""

    def test_relative(self):
        assert ensure_absolute_path("user/repo") == "/user/repo"

    def test_absolute(self):
        assert ensure_absolute_path("/user/repo") == "/user/repo"

    def test_empty(self):
        assert ensure_absolute_path("") == ""
