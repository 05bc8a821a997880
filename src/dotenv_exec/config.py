"""Configuration for dotenv_exec, read from DOTENV_CONFIG_* variables."""

import os
from collections.abc import Mapping

from pydantic import ValidationError

from dotenv_exec.errors import OptionsParseError
from dotenv_exec.models import DEFAULT_DOTENV_PATH, DotenvOptions

CONFIG_PATH_VAR = "DOTENV_CONFIG_PATH"

# Option field -> environment variable.
OPTION_VARS = {
    "override": "DOTENV_CONFIG_OVERRIDE",
    "strict": "DOTENV_CONFIG_STRICT",
    "debug": "DOTENV_CONFIG_DEBUG",
    "encoding": "DOTENV_CONFIG_ENCODING",
}

EXPECTED = {
    "override": "true, false, 1 or 0",
    "strict": "true, false, 1 or 0",
    "debug": "true, false, 1 or 0",
    "encoding": "a known codec name",
}


def get_config_path(environ: Mapping[str, str] | None = None) -> str:
    """Return the default dotenv path from env, falling back to .env."""
    environ = os.environ if environ is None else environ
    return environ.get(CONFIG_PATH_VAR) or DEFAULT_DOTENV_PATH


def load_options(environ: Mapping[str, str] | None = None) -> DotenvOptions:
    """Build dotenv options from the environment.

    Unset and empty variables keep their defaults. Any other value that does
    not validate raises OptionsParseError naming the offending variable.
    """
    environ = os.environ if environ is None else environ
    raw = {
        field: environ[name]
        for field, name in OPTION_VARS.items()
        if environ.get(name)
    }
    try:
        return DotenvOptions(**raw)
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        raise OptionsParseError(OPTION_VARS[field], raw[field], EXPECTED[field]) from e
