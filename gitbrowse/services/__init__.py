"""
Service layer for git-browse.

Services contain the URL resolution logic; collaborators with side
effects (git, the browser) live under gitbrowse.plugins.
"""
