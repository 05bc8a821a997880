"""Errors raised by the launcher.

Every error is fatal: it propagates to :func:`dotenv_exec.cli.main`, which
reports it and exits non-zero. A child's own non-zero exit status is not an
error and never appears here.
"""


class LaunchError(Exception):
    """Base class for launcher failures."""


class ArgumentError(LaunchError):
    """The command line could not be parsed."""


class MissingFlagValue(ArgumentError):
    def __init__(self, flag: str) -> None:
        super().__init__(f"missing value for argument: {flag}")
        self.flag = flag


class IllegalArgument(ArgumentError):
    def __init__(self, token: str) -> None:
        super().__init__(f"illegal argument: {token}")
        self.token = token


class MissingProgram(ArgumentError):
    def __init__(self) -> None:
        super().__init__("not enough arguments: missing program to run")


class OptionsParseError(LaunchError):
    """A DOTENV_CONFIG_* variable holds a value that cannot be used."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"illegal value for {name}: {value!r} (expected {expected})")
        self.name = name
        self.value = value


class DotenvReadOrParseFailure(LaunchError):
    """The dotenv file could not be read or contains unparsable lines."""


class ExecutableNotFound(LaunchError):
    def __init__(self, program: str) -> None:
        super().__init__(f"executable file not found in $PATH: {program}")
        self.program = program


class SpawnFailure(LaunchError):
    """The child process could not be started."""


class WaitFailure(LaunchError):
    """Something other than a clean exit happened while waiting for the child."""
