"""Apply a dotenv file to the launcher or to the child's environment.

Parsing the dotenv format is left to python-dotenv. This module reads the
file, rejects it early in strict mode, and applies the result in one of two
ways:

* load mode mutates ``os.environ`` once, before the child is spawned. Any
  code running in this process afterwards observes the loaded variables.
* replace mode leaves ``os.environ`` alone and builds a fresh mapping that is
  handed to the child as its whole environment.
"""

import io
import logging
import os
from collections.abc import Mapping

from dotenv import load_dotenv
from dotenv.main import DotEnv
from dotenv.parser import parse_stream
from dotenv.variables import parse_variables

from dotenv_exec.errors import DotenvReadOrParseFailure
from dotenv_exec.models import DotenvOptions, LaunchConfig

log = logging.getLogger(__name__)


def read_dotenv(path: str, options: DotenvOptions) -> str | None:
    """Return the text of the dotenv file at path.

    In strict mode an unreadable file or an unparsable statement raises
    DotenvReadOrParseFailure. Otherwise a missing file returns None and bad
    statements are left for python-dotenv to skip and warn about.
    """
    try:
        with open(path, encoding=options.encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        if options.strict:
            raise DotenvReadOrParseFailure(f"cannot read dotenv file {path}: {e}") from e
        log.warning("ignoring dotenv file %s: %s", path, e)
        return None

    if options.strict:
        for binding in parse_stream(io.StringIO(text)):
            if binding.error:
                statement = binding.original.string.strip()
                raise DotenvReadOrParseFailure(
                    f"{path}:{binding.original.line}: cannot parse statement {statement!r}"
                )
    log.debug("read %d chars from %s", len(text), path)
    return text


def load_into_current_process(path: str, options: DotenvOptions) -> bool:
    """Load the dotenv file into os.environ. Returns whether a file was applied."""
    text = read_dotenv(path, options)
    if text is None:
        return False
    load_dotenv(stream=io.StringIO(text), override=options.override)
    log.debug("loaded %s into the process environment (override=%s)", path, options.override)
    return True


def _expand_file_values(
    text: str, base: Mapping[str, str], override: bool
) -> dict[str, str | None]:
    """Return the file's values with ${VAR} references expanded against base.

    Each value sees base plus the file values defined before it. File values
    win over base only when override is set, the same precedence load_dotenv
    applies against the process environment.
    """
    values: dict[str, str | None] = {}
    for key, value in DotEnv(None, stream=io.StringIO(text), interpolate=False).parse():
        if value is not None:
            if override:
                lookup = {**base, **values}
            else:
                lookup = {**values, **base}
            value = "".join(atom.resolve(lookup) for atom in parse_variables(value))
        values[key] = value
    return values


def resolve_environment(
    path: str, base: Mapping[str, str], options: DotenvOptions
) -> dict[str, str]:
    """Return base combined with the dotenv file's variables.

    base is never mutated, and ${VAR} references are expanded against it
    rather than against os.environ. Keys declared without a value are
    skipped, and keys already in base keep their value unless
    options.override is set.
    """
    env = dict(base)
    text = read_dotenv(path, options)
    if text is None:
        return env

    for key, value in _expand_file_values(text, base, options.override).items():
        if value is None:
            continue
        if key in env and not options.override:
            log.debug("%s is already defined and was not overwritten", key)
            continue
        env[key] = value
    return env


def prepare_environment(config: LaunchConfig, options: DotenvOptions) -> dict[str, str] | None:
    """Apply the dotenv file for the configured mode.

    Returns the child's exclusive environment in replace mode, or None in load
    mode, where the child inherits the freshly mutated process environment.
    """
    if config.replace:
        log.debug("replace mode: resolving %s for the child only", config.dotenv_path)
        return resolve_environment(config.dotenv_path, dict(os.environ), options)

    log.debug("load mode: applying %s to the process environment", config.dotenv_path)
    load_into_current_process(config.dotenv_path, options)
    return None
