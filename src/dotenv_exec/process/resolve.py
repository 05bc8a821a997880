"""Executable lookup for the target program."""

import logging
import os
import shutil

from dotenv_exec.errors import ExecutableNotFound

log = logging.getLogger(__name__)


def _has_separator(candidate: str) -> bool:
    return os.path.sep in candidate or (
        os.path.altsep is not None and os.path.altsep in candidate
    )


def resolve_executable(program: str, path: str | None = None) -> str:
    """Resolve a program name or path to a runnable command path.

    Names containing a path separator must point at an executable file. Bare
    names are searched on PATH (or on path, when given) the way a shell does.
    """
    if _has_separator(program):
        if os.path.isfile(program) and os.access(program, os.X_OK):
            return program
        raise ExecutableNotFound(program)

    found = shutil.which(program, path=path)
    if not found:
        raise ExecutableNotFound(program)
    log.debug("resolved %s to %s", program, found)
    return found
