"""Stream handling model for the child process."""

from enum import Enum


class StreamMode(str, Enum):
    """How the child's standard streams are connected to the launcher."""

    INHERIT = "inherit"
    PIPE = "pipe"
