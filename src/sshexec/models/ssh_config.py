"""Configuration model for sshexec."""

from pydantic import BaseModel


class SshConfig(BaseModel):
    """Runtime configuration for executable resolution."""

    search_path: str | None = None
