"""Locate, spawn and supervise the target program."""

from dotenv_exec.process.resolve import resolve_executable
from dotenv_exec.process.supervise import supervise

__all__ = [
    "resolve_executable",
    "supervise",
]
