"""
URL domain models.

A remote URL goes through two shapes on its way to the browser:

1. ``ClassifiedRemote`` - the raw remote string split into parts and tagged
   with the form it was written in (web URL, ``ssh://``, ``git://`` or SCP
   shorthand).
2. ``NormalizedUrl`` - the browsable URL that gets extended with a
   ``/tree/<ref>`` segment and handed to the browser.
"""

from __future__ import annotations

from enum import Enum

from ...utils.git_url import split_userinfo
from .base import ImmutableModel


class RemoteKind(str, Enum):
    """The closed set of remote URL forms git-browse knows how to rewrite."""

    WEB = "web"  # http:// or https://, already browsable
    SSH = "ssh"  # ssh://[user[:password]@]host[:port]/path
    GIT = "git"  # git://host[:port]/path
    SCP = "scp"  # [user[:password]@]host:path


class ClassifiedRemote(ImmutableModel):
    """A remote URL split into its parts.

    ``userinfo`` is kept exactly as written (still percent-encoded), so it
    can be re-emitted without re-quoting.
    ``query`` and ``fragment`` are None when absent and "" when the URL ends
    in a bare ``?`` or ``#``.
    """

    kind: RemoteKind
    raw: str
    scheme: str
    host: str
    path: str = ""
    userinfo: str | None = None
    port: str | None = None
    query: str | None = None
    fragment: str | None = None

    @property
    def username(self) -> str | None:
        return split_userinfo(self.userinfo)[0]

    @property
    def password(self) -> str | None:
        return split_userinfo(self.userinfo)[1]

    @property
    def has_credentials(self) -> bool:
        """True only when both a username and a password are present."""
        return self.username is not None and self.password is not None


class NormalizedUrl(ImmutableModel):
    """A browsable URL.

    Immutable: ``with_path`` returns a new value instead of mutating.
    """

    scheme: str
    host: str
    path: str = ""
    userinfo: str | None = None
    port: str | None = None
    query: str | None = None
    fragment: str | None = None

    @property
    def netloc(self) -> str:
        netloc = self.host
        if self.port is not None:
            netloc = f"{netloc}:{self.port}"
        if self.userinfo is not None:
            netloc = f"{self.userinfo}@{netloc}"
        return netloc

    def with_path(self, path: str) -> NormalizedUrl:
        """Return a copy of this URL with ``path`` replaced."""
        return self.model_copy(update={"path": path})

    def to_string(self) -> str:
        url = f"{self.scheme}://{self.netloc}{self.path}"
        if self.query is not None:
            url = f"{url}?{self.query}"
        if self.fragment is not None:
            url = f"{url}#{self.fragment}"
        return url

    def __str__(self) -> str:
        return self.to_string()
