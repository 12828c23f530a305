"""
SSH host alias resolution.

Remotes are often written against an alias from ~/.ssh/config
(``Host work`` / ``HostName github.com``). The web UI lives on the real
host, so aliases are looked up before building the HTTPS URL.

Lookups never fail the pipeline: a missing, unreadable or unparsable
config file, or a host with no ``HostName`` override, leaves the host
unchanged. The config is parsed fresh on every call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import paramiko

from ...core.di import resolve_or_default
from ...core.interfaces.logger import ILogger
from ...core.models.config import DEFAULT_SSH_CONFIG_PATHS


@dataclass
class HostLookupResult:
    """Result of looking a host up in an SSH config file.

    Exactly one of ``hostname`` or ``error`` is meaningful: ``error`` is set
    when a config file existed but could not be used. Both are None when
    there was no config file, or it had nothing to say about the host.
    """

    hostname: str | None = None
    config_path: Path | None = None
    error: str | None = None


def expand_config_path(path: str) -> Path:
    """Expand ``~`` and environment variables, then make the path absolute."""
    return Path(os.path.abspath(os.path.expanduser(os.path.expandvars(path))))


class SshHostResolver:
    """
    Resolves SSH host aliases to real hostnames.

    Usage:
        resolver = SshHostResolver()
        resolver.resolve_host("work")  # -> "github.com" with a matching alias
    """

    def __init__(
        self,
        config_paths: list[str] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            config_paths: Candidate SSH config files, tried in order.
                Defaults to the user config, then the system config.
            logger: Logger instance. If None, resolves from DI container.
        """
        self._config_paths = (
            list(config_paths) if config_paths is not None else list(DEFAULT_SSH_CONFIG_PATHS)
        )
        from ..logging import NullLogger

        self._logger = logger or resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]

    def find_config_file(self) -> Path | None:
        """Return the first candidate config file that exists."""
        for candidate in self._config_paths:
            path = expand_config_path(candidate)
            if path.exists():
                return path
        return None

    def lookup(self, host: str) -> HostLookupResult:
        """
        Look a host up in the first existing SSH config file.

        Args:
            host: Host or alias as written in the remote URL

        Returns:
            HostLookupResult; never raises
        """
        config_path = self.find_config_file()
        if config_path is None:
            return HostLookupResult()

        try:
            with open(config_path, encoding="utf-8") as f:
                config = paramiko.SSHConfig()
                config.parse(f)
        except (OSError, UnicodeDecodeError) as e:
            return HostLookupResult(
                config_path=config_path,
                error=f"Could not read ssh config file at {config_path}: {e}",
            )
        except paramiko.SSHException as e:
            return HostLookupResult(
                config_path=config_path,
                error=f"Could not parse config file at {config_path}: {e}",
            )

        try:
            entry = config.lookup(host)
        except (paramiko.SSHException, ValueError) as e:
            return HostLookupResult(
                config_path=config_path,
                error=f"Could not look up {host!r} in {config_path}: {e}",
            )

        hostname = entry.get("hostname")
        if not hostname or hostname == host:
            return HostLookupResult(config_path=config_path)
        return HostLookupResult(hostname=hostname, config_path=config_path)

    def resolve_host(self, host: str) -> str:
        """
        Resolve an SSH alias to its ``HostName``.

        Args:
            host: Host or alias as written in the remote URL

        Returns:
            The configured HostName, or ``host`` unchanged
        """
        result = self.lookup(host)
        if result.error:
            self._logger.warning("%s", result.error)
            return host
        if result.hostname is None:
            self._logger.debug("No ssh alias for %s, using it as is", host)
            return host

        self._logger.debug(
            "Resolved ssh alias %s -> %s via %s", host, result.hostname, result.config_path
        )
        return result.hostname
