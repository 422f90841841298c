"""Unstarted process model."""

import threading
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProcessDescriptor:
    """A resolved command that has not been started yet."""

    executable: str
    args: list[str] = field(default_factory=list)
    cancel_event: threading.Event | None = None

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]

    @property
    def cancellable(self) -> bool:
        return self.cancel_event is not None
