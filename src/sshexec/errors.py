"""Exceptions raised by sshexec."""

from collections.abc import Sequence

from sshexec.config import SSH_PATH_ENV_VAR


class CommandNotFoundError(LookupError):
    """An executable could not be located in any of the searched directories."""

    def __init__(self, name: str, searched: Sequence[str] = ()) -> None:
        self.name = name
        self.searched = list(searched)
        if self.searched:
            message = f"'{name}' not found in: {', '.join(self.searched)}"
        else:
            message = f"'{name}' not found"
        super().__init__(message)


class ResolutionError(Exception):
    """The executable for a tool could not be identified.

    Retrying will not help until the installation or the environment changes.
    """

    def __init__(self, tool: str, cause: BaseException) -> None:
        self.tool = tool
        self.cause = cause
        super().__init__(f"unable to identify '{tool}' command: {cause}")

    @property
    def hint(self) -> str:
        return (
            f"install {self.tool}, or point {SSH_PATH_ENV_VAR} at the directory "
            f"containing it (unset {SSH_PATH_ENV_VAR} to use the default locations)"
        )


class ProcessCancelledError(RuntimeError):
    """A process was not started because its cancel event was already set."""
