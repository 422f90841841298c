"""Start prepared processes, honouring their cancel event."""

import logging
import subprocess
import threading

from sshexec.errors import ProcessCancelledError
from sshexec.models import ProcessDescriptor

log = logging.getLogger(__name__)

WATCH_INTERVAL_SECONDS = 0.1
WATCHER_THREAD_NAME = "sshexec-cancel-watcher"


def _kill_on_cancel(process: subprocess.Popen, cancel_event: threading.Event) -> None:
    # Exits as soon as the process has finished, whether or not the event fires.
    while process.poll() is None:
        if cancel_event.wait(WATCH_INTERVAL_SECONDS):
            if process.poll() is None:
                log.debug("cancel event set, killing pid %d", process.pid)
                process.kill()
            return


def start(descriptor: ProcessDescriptor, **popen_kwargs) -> subprocess.Popen:
    """Start ``descriptor`` and return the running process.

    Extra keyword arguments go to subprocess.Popen. When the descriptor has a
    cancel event, the process is killed as soon as the event is set.
    """
    if descriptor.cancellable and descriptor.cancel_event.is_set():
        raise ProcessCancelledError(f"not starting {descriptor.executable}: cancelled")

    process = subprocess.Popen(descriptor.argv, **popen_kwargs)
    log.debug("started %s (pid %d)", descriptor.executable, process.pid)

    if descriptor.cancellable:
        watcher = threading.Thread(
            target=_kill_on_cancel,
            args=(process, descriptor.cancel_event),
            name=WATCHER_THREAD_NAME,
            daemon=True,
        )
        watcher.start()
    return process
