"""Command-line interface for dotenv-exec."""

import logging
import sys

from dotenv_exec.args import USAGE, parse_args
from dotenv_exec.config import load_options
from dotenv_exec.environment import prepare_environment
from dotenv_exec.errors import ArgumentError, LaunchError
from dotenv_exec.models import StreamMode
from dotenv_exec.process import resolve_executable, supervise

log = logging.getLogger("dotenv_exec")

EXIT_FAILURE = 1


def _launch(argv: list[str], stream_mode: StreamMode) -> int:
    config = parse_args(argv)
    options = load_options()

    logging.basicConfig(
        level=logging.DEBUG if options.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
    log.debug("config=%s options=%s", config, options)

    # Resolved against the inherited PATH, before the dotenv file is applied.
    executable = resolve_executable(config.program)
    env = prepare_environment(config, options)
    return supervise(executable, config.program_args, env=env, stream_mode=stream_mode)


def main(argv: list[str] | None = None, stream_mode: StreamMode = StreamMode.INHERIT) -> int:
    """Run the launcher and return the exit code to terminate with.

    A child's own exit status is returned unchanged. Any launcher failure is
    reported on stderr and mapped to EXIT_FAILURE.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return _launch(args, stream_mode)
    except ArgumentError as e:
        print(f"Error: {e}\nusage: dotenv-exec {USAGE}", file=sys.stderr)
        return EXIT_FAILURE
    except LaunchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


def entrypoint() -> None:
    """Console script entrypoint; the child inherits the launcher's streams."""
    raise SystemExit(main())


def piped_entrypoint() -> None:
    """Console script entrypoint; child output is relayed through pipes."""
    raise SystemExit(main(stream_mode=StreamMode.PIPE))
