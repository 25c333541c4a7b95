"""
Drive an interactive child process over its stdin and stdout.

The child runs in a new process session, so pause/resume/terminate reach
every process it starts (a real solver is usually launched through mpirun
or a shell script).
"""

import os
import signal
import subprocess
from pathlib import Path
from typing import Dict, Optional, Sequence

from fakevasp.config import SENTINEL_NAME
from fakevasp.errors import SessionError
from fakevasp.logger import get_logger
from fakevasp.stopcar import write_stopcar

logger = get_logger(__name__)


class InteractiveSession:
    """A child process we talk to line by line."""

    def __init__(
        self,
        command: Sequence[str],
        cwd: Optional[Path] = None,
        env: Optional[Dict[str, str]] = None,
    ):
        self.command = list(command)
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.env = env
        self._process: Optional[subprocess.Popen] = None

    @property
    def pid(self) -> Optional[int]:
        return self._process.pid if self._process else None

    def spawn(self) -> "InteractiveSession":
        if self._process is not None:
            raise SessionError(f"Session already spawned (pid {self.pid})")

        self._process = subprocess.Popen(
            self.command,
            cwd=self.cwd,
            env=self.env,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            text=True,
            bufsize=1,
            start_new_session=True,
        )
        logger.info(f"Started child process in new session: {self.pid}")
        return self

    def _require_process(self) -> subprocess.Popen:
        if self._process is None:
            raise SessionError("Session not spawned yet")
        return self._process

    def interact(self, input: str, read_pattern: str) -> str:
        """
        Write `input` to the child's stdin, then read its stdout up to and
        including the first line containing `read_pattern`.

        An empty `input` writes nothing, which is how the initial output of
        the child is collected.

        Raises:
            SessionError: if stdout closes before the pattern is found.
        """
        process = self._require_process()

        if input:
            logger.trace(f"Writing {len(input)} bytes to child stdin")
            try:
                process.stdin.write(input)
                process.stdin.flush()
            except BrokenPipeError as e:
                raise SessionError(f"Child {process.pid} closed its stdin") from e

        logger.debug(f"Reading stdout until pattern: {read_pattern!r}")
        lines = []
        for line in process.stdout:
            lines.append(line)
            if read_pattern in line:
                logger.debug(f"Found pattern: {read_pattern!r}")
                return "".join(lines)

        raise SessionError(
            f"Expected pattern not found: {read_pattern!r} "
            f"(read {len(lines)} lines before stdout closed)"
        )

    def _signal_group(self, sig: signal.Signals) -> None:
        # the pid stays ours until poll() reaps it, and it is also the group id
        process = self._require_process()
        if process.poll() is not None:
            raise SessionError(
                f"Child {process.pid} already exited with status {process.returncode}"
            )
        logger.debug(f"Sending {sig.name} to session {process.pid}")
        os.killpg(process.pid, sig)

    def pause(self) -> None:
        self._signal_group(signal.SIGSTOP)

    def resume(self) -> None:
        self._signal_group(signal.SIGCONT)

    def terminate(self) -> None:
        process = self._require_process()
        if process.poll() is not None:
            return
        self._signal_group(signal.SIGTERM)
        # a stopped group only acts on SIGTERM once continued
        if process.poll() is None:
            os.killpg(process.pid, signal.SIGCONT)

    def close_input(self) -> None:
        process = self._require_process()
        if not process.stdin.closed:
            process.stdin.close()

    def wait(self, timeout: Optional[float] = None) -> int:
        process = self._require_process()
        return process.wait(timeout=timeout)

    def request_stop(self, input: str = "\n", timeout: Optional[float] = None) -> int:
        """
        Write the sentinel into the child's working directory, nudge it with
        one more line, and return its exit status.

        Raises:
            SessionError: if the child's stdin was already closed.
            subprocess.TimeoutExpired: if the child is still running after
                `timeout` seconds.
        """
        process = self._require_process()
        if process.stdin.closed:
            raise SessionError(f"Cannot send stop request: stdin of {process.pid} is closed")

        write_stopcar(self.cwd, SENTINEL_NAME)
        try:
            # writes the line, drains stdout and waits, all within `timeout`
            process.communicate(input=input, timeout=timeout)
        except BrokenPipeError:
            logger.warning(f"Child {process.pid} closed stdin before the stop request")
            process.wait(timeout=timeout)
        return process.returncode

    def __enter__(self) -> "InteractiveSession":
        return self.spawn()

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._process is None:
            return
        if self._process.poll() is None:
            self.terminate()
            self._process.wait()
        for stream in (self._process.stdin, self._process.stdout):
            if stream and not stream.closed:
                stream.close()
