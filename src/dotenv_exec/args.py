"""Command-line parsing for the launcher.

Flags are consumed left to right and parsing stops at the first token that is
not a flag, or right after ``--``. Everything from there on is the program and
its arguments, passed through untouched.
"""

import os
from collections.abc import Mapping

from dotenv_exec.config import get_config_path
from dotenv_exec.errors import IllegalArgument, MissingFlagValue, MissingProgram
from dotenv_exec.models import LaunchConfig

FILE_FLAGS = ("--file", "-f")
REPLACE_FLAGS = ("--replace", "-r")
END_OF_FLAGS = "--"

USAGE = "[--file|-f <path>] [--replace|-r] [--] <program> [args...]"


def parse_args(argv: list[str], environ: Mapping[str, str] | None = None) -> LaunchConfig:
    """Parse launcher arguments into a LaunchConfig."""
    environ = os.environ if environ is None else environ
    dotenv_path = get_config_path(environ)
    replace = False

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in FILE_FLAGS:
            if i + 1 >= len(argv):
                raise MissingFlagValue(arg)
            i += 1
            dotenv_path = argv[i]
        elif arg in REPLACE_FLAGS:
            replace = True
        elif arg == END_OF_FLAGS:
            i += 1
            break
        elif arg.startswith("-"):
            raise IllegalArgument(arg)
        else:
            break
        i += 1

    if i >= len(argv):
        raise MissingProgram()

    return LaunchConfig(
        dotenv_path=dotenv_path,
        replace=replace,
        program=argv[i],
        program_args=tuple(argv[i + 1:]),
    )
