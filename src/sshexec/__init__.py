"""Resolve and prepare ssh/scp invocations."""

from sshexec.arguments import compression_argument, timeout_argument
from sshexec.command import build_command, scp_command, ssh_command
from sshexec.errors import CommandNotFoundError, ProcessCancelledError, ResolutionError
from sshexec.models import ProcessDescriptor, SshConfig, Tool
from sshexec.resolver import Resolver

__version__ = "0.1.0"

__all__ = [
    "CommandNotFoundError",
    "ProcessCancelledError",
    "ProcessDescriptor",
    "ResolutionError",
    "Resolver",
    "SshConfig",
    "Tool",
    "build_command",
    "compression_argument",
    "scp_command",
    "ssh_command",
    "timeout_argument",
]
