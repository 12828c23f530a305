"""
Shared pytest fixtures for git-browse tests.

This module provides:
- isolated_env: Keeps user config, env vars and ssh config out of tests (autouse)
- reset_container: Fresh DI container for every test (autouse)
- git: Helper to run git commands in a directory
- git_repo: Creates an isolated git repository with one commit on ``main``
"""

import os
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from gitbrowse.core.bootstrap import reset


def _run_git(*args: str, cwd: Path) -> str:
    """Run a git command and return its stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Isolate tests from the developer's machine.

    - XDG_CONFIG_HOME points at an empty directory (no user config file)
    - GITBROWSE_* variables are cleared
    - SSH alias lookup is disabled unless a test configures it

    Returns:
        The empty config home
    """
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))

    for key in list(os.environ):
        if key.startswith("GITBROWSE_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("GITBROWSE_SSH__CONFIG_PATHS", "[]")

    # Keep git from reading the developer's global config
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(config_home / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    return config_home


@pytest.fixture(autouse=True)
def reset_container():
    """Reset the DI container before and after each test."""
    reset()
    yield
    reset()


@pytest.fixture
def git() -> Callable[..., str]:
    """
    Provide a helper to run git commands.

    Usage:
        git("remote", "add", "origin", url, cwd=repo)
    """
    return _run_git


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """
    Create a temporary git repository.

    Sets up:
    - Repository with ``main`` checked out
    - Committer identity
    - One commit containing README.md

    Returns:
        Path to the temporary repository root
    """
    repo = tmp_path / "repo"
    repo.mkdir()

    _run_git("init", cwd=repo)
    _run_git("symbolic-ref", "HEAD", "refs/heads/main", cwd=repo)
    _run_git("config", "user.email", "test@example.com", cwd=repo)
    _run_git("config", "user.name", "Test User", cwd=repo)

    (repo / "README.md").write_text("# widgets\n")
    _run_git("add", "README.md", cwd=repo)
    _run_git("commit", "-m", "Initial commit", cwd=repo)

    return repo
