"""
Git URL utilities.

Low-level string helpers for the remote URL forms git accepts: URLs with
a scheme, and the scheme-less SCP shorthand ``[user@]host:path``.
"""

import re

VCS_SUFFIX = ".git"

# scheme://... (RFC 3986 scheme characters)
_SCHEME_RE = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*)://")

# [user[:password]@]host:path, host may be a bracketed IPv6 literal
_SCP_RE = re.compile(
    r"^(?:(?P<userinfo>[^@/]+)@)?(?P<host>\[[^\]/]+\]|[^@:/\[\]]+):(?P<path>.*)$"
)


def has_scheme(url: str) -> bool:
    """
    Check if URL starts with a ``scheme://`` separator.

    Examples:
        ssh://git@github.com/user/repo.git -> True
        git@github.com:user/repo.git       -> False

    Args:
        url: Git remote URL

    Returns:
        True if the URL carries an explicit scheme
    """
    return _SCHEME_RE.match(url) is not None


def split_scp(url: str) -> tuple[str | None, str, str] | None:
    """
    Split SCP shorthand into userinfo, host and path.

    Examples:
        git@github.com:user/repo.git -> ("git", "github.com", "user/repo.git")
        myalias:team/repo            -> (None, "myalias", "team/repo")

    Args:
        url: Remote URL without a scheme

    Returns:
        (userinfo, host, path), or None if the URL is not SCP shorthand
    """
    match = _SCP_RE.match(url)
    if not match:
        return None
    return match.group("userinfo"), match.group("host"), match.group("path")


def split_userinfo(userinfo: str | None) -> tuple[str | None, str | None]:
    """
    Split ``user[:password]`` into its parts.

    Values are returned as written (no percent-decoding).

    Returns:
        (username, password); either may be None
    """
    if userinfo is None:
        return None, None
    username, sep, password = userinfo.partition(":")
    return (username or None), (password or None)


def split_netloc(netloc: str) -> tuple[str | None, str, str | None]:
    """
    Split a URL authority into userinfo, host and port.

    The host keeps its original case and IPv6 brackets, so that joining
    the parts back together reproduces ``netloc`` exactly.

    Examples:
        user:pw@example.com:8443 -> ("user:pw", "example.com", "8443")
        [::1]:22                 -> (None, "[::1]", "22")

    Returns:
        (userinfo, host, port); userinfo and port may be None
    """
    userinfo: str | None = None
    if "@" in netloc:
        userinfo, _, hostport = netloc.rpartition("@")
    else:
        hostport = netloc

    host, port = hostport, None
    if hostport.startswith("["):
        end = hostport.find("]")
        if end != -1 and hostport[end + 1 :].startswith(":"):
            host, port = hostport[: end + 1], hostport[end + 2 :]
    elif ":" in hostport:
        host, _, port = hostport.partition(":")
    return userinfo, host, port


def strip_vcs_suffix(path: str) -> str:
    """
    Remove a trailing ``.git`` (optionally followed by slashes) from a path.

    Examples:
        /user/repo.git  -> /user/repo
        /user/repo.git/ -> /user/repo
        /user/repo      -> /user/repo
    """
    trimmed = path.rstrip("/")
    if trimmed.endswith(VCS_SUFFIX):
        return trimmed.removesuffix(VCS_SUFFIX)
    return path


def ensure_absolute_path(path: str) -> str:
    """Prefix a URL path with ``/`` unless it is empty or already absolute."""
    if path and not path.startswith("/"):
        return f"/{path}"
    return path
