"""Spawn the target program and wait for it to finish.

Two stream modes are supported. With ``StreamMode.INHERIT`` the child shares
the launcher's stdin, stdout and stderr. With ``StreamMode.PIPE`` the child's
stdout and stderr are read from pipes by two relay threads that copy every
chunk to the launcher's own streams as soon as it arrives. Both relays are
joined before the exit status is returned, so output written right before the
child exits is never lost.

Relays run until their pipe reaches end of file, not until the child exits.
If the child leaves a background process holding its stdout or stderr open,
the launcher keeps relaying and waits until that process closes the pipe
too.
"""

import logging
import signal
import subprocess
import sys
import threading
from typing import BinaryIO

from dotenv_exec.errors import SpawnFailure, WaitFailure
from dotenv_exec.models import StreamMode

log = logging.getLogger(__name__)

RELAY_CHUNK_SIZE = 64 * 1024


class StreamRelay:
    """Copy one byte stream to another on a background thread."""

    def __init__(self, name: str, source: BinaryIO, sink: BinaryIO) -> None:
        self.name = name
        self.error: OSError | ValueError | None = None
        self._source = source
        self._sink = sink
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def join(self) -> None:
        self._thread.join()

    def _run(self) -> None:
        try:
            while True:
                chunk = self._source.read(RELAY_CHUNK_SIZE)
                if not chunk:
                    break
                self._sink.write(chunk)
                self._sink.flush()
        except (OSError, ValueError) as e:
            self.error = e
        finally:
            # Closing the read end makes further child writes fail with EPIPE.
            self._source.close()


def _describe_signal(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


def supervise(
    executable: str,
    args: list[str] | tuple[str, ...] = (),
    env: dict[str, str] | None = None,
    stream_mode: StreamMode = StreamMode.INHERIT,
    stdout: BinaryIO | None = None,
    stderr: BinaryIO | None = None,
) -> int:
    """Run executable with args and return its exit code.

    env, when given, is the child's whole environment; None inherits the
    launcher's. stdout and stderr are the relay sinks used in pipe mode and
    default to the launcher's own binary streams.
    """
    argv = [executable, *args]
    piped = stream_mode is StreamMode.PIPE
    log.debug("spawning %s (streams=%s)", argv, stream_mode.value)

    try:
        proc = subprocess.Popen(
            argv,
            env=env,
            stdout=subprocess.PIPE if piped else None,
            stderr=subprocess.PIPE if piped else None,
            bufsize=0,
        )
    except (OSError, ValueError) as e:
        raise SpawnFailure(f"cannot start {executable}: {e}") from e

    relays: list[StreamRelay] = []
    if piped:
        relays = [
            StreamRelay("stdout-relay", proc.stdout, stdout or sys.stdout.buffer),
            StreamRelay("stderr-relay", proc.stderr, stderr or sys.stderr.buffer),
        ]
        for relay in relays:
            relay.start()

    try:
        returncode = proc.wait()
    finally:
        for relay in relays:
            relay.join()

    for relay in relays:
        if relay.error is not None:
            raise WaitFailure(f"{relay.name} failed: {relay.error}") from relay.error

    if returncode < 0:
        raise WaitFailure(f"{executable} terminated by {_describe_signal(-returncode)}")
    log.debug("%s exited with status %d", executable, returncode)
    return returncode
