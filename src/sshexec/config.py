"""Configuration for sshexec."""

import logging
import os
from collections.abc import Mapping

from sshexec.models import SshConfig

log = logging.getLogger(__name__)

# Shared by ssh and scp.
SSH_PATH_ENV_VAR = "MUTAGEN_SSH_PATH"


def load_config(environ: Mapping[str, str] | None = None) -> SshConfig:
    """Build an SshConfig from the environment.

    The environment is read on every call so that the override can be toggled
    without restarting the process. An empty value is treated as unset.
    """
    env = os.environ if environ is None else environ
    search_path = env.get(SSH_PATH_ENV_VAR) or None
    if search_path is not None:
        log.debug("%s=%s", SSH_PATH_ENV_VAR, search_path)
    return SshConfig(search_path=search_path)


def get_search_path() -> str | None:
    """Return the override search path, if any."""
    return load_config().search_path
