"""
git-browse - open the web page of a git repository's remote.
"""

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("git-browse")
except Exception:
    __version__ = "0.1.0"
