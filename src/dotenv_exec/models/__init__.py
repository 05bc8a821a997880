"""Model package for dotenv_exec."""

from dotenv_exec.models.dotenv_options import DEFAULT_ENCODING, DotenvOptions
from dotenv_exec.models.launch_config import DEFAULT_DOTENV_PATH, LaunchConfig
from dotenv_exec.models.stream_mode import StreamMode

__all__ = [
    "DEFAULT_DOTENV_PATH",
    "DEFAULT_ENCODING",
    "DotenvOptions",
    "LaunchConfig",
    "StreamMode",
]
