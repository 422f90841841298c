"""Tool identity model."""

from enum import Enum


class Tool(str, Enum):
    """External transfer utilities that can be resolved.

    The value is the canonical executable name.
    """

    SSH = "ssh"
    SCP = "scp"
