"""Executable resolution for ssh and scp."""

import logging
from collections.abc import Callable

from sshexec.config import SSH_PATH_ENV_VAR, get_search_path
from sshexec.discovery import DiscoveryStrategy, default_discovery, find_command
from sshexec.errors import CommandNotFoundError, ResolutionError
from sshexec.models import Tool

log = logging.getLogger(__name__)


class Resolver:
    """Determine which executable to run for a tool.

    An override search path (``MUTAGEN_SSH_PATH`` by default) takes strict
    precedence: when set, the tool must be found in that single directory and
    the platform discovery strategy is never consulted. When unset or empty,
    the outcome is exactly that of the discovery strategy. Nothing is cached;
    every call re-resolves.
    """

    def __init__(
        self,
        discovery: DiscoveryStrategy | None = None,
        search_path_lookup: Callable[[], str | None] = get_search_path,
    ) -> None:
        self.discovery = discovery if discovery is not None else default_discovery()
        self._search_path_lookup = search_path_lookup

    def resolve(self, tool: Tool) -> str:
        """Return the name or path to invoke for ``tool``."""
        tool = Tool(tool)
        search_path = self._search_path_lookup()
        try:
            if search_path:
                log.debug("resolving %s via %s=%s", tool.value, SSH_PATH_ENV_VAR, search_path)
                return find_command(tool.value, [search_path])
            log.debug("resolving %s via %s", tool.value, type(self.discovery).__name__)
            return self.discovery.find(tool.value)
        except CommandNotFoundError as e:
            raise ResolutionError(tool.value, e) from e
