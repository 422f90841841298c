"""Construction of unstarted ssh and scp processes."""

import logging
import threading

from sshexec.models import ProcessDescriptor, Tool
from sshexec.resolver import Resolver

log = logging.getLogger(__name__)


def build_command(
    tool: Tool,
    cancel_event: threading.Event | None = None,
    *args: str,
    resolver: Resolver | None = None,
) -> ProcessDescriptor:
    """Prepare (but do not start) a command for ``tool`` with ``args``.

    Arguments are passed through verbatim. If ``cancel_event`` is given, the
    process started from the descriptor is killed once the event is set.
    Raises ResolutionError if the executable cannot be identified.
    """
    resolver = resolver if resolver is not None else Resolver()
    executable = resolver.resolve(tool)
    log.debug("prepared %s with %d args", executable, len(args))
    return ProcessDescriptor(executable=executable, args=list(args), cancel_event=cancel_event)


def ssh_command(
    cancel_event: threading.Event | None = None,
    *args: str,
    resolver: Resolver | None = None,
) -> ProcessDescriptor:
    return build_command(Tool.SSH, cancel_event, *args, resolver=resolver)


def scp_command(
    cancel_event: threading.Event | None = None,
    *args: str,
    resolver: Resolver | None = None,
) -> ProcessDescriptor:
    return build_command(Tool.SCP, cancel_event, *args, resolver=resolver)
