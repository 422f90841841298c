"""Model package for sshexec."""

from sshexec.models.process_descriptor import ProcessDescriptor
from sshexec.models.ssh_config import SshConfig
from sshexec.models.tool import Tool

__all__ = [
    "ProcessDescriptor",
    "SshConfig",
    "Tool",
]
