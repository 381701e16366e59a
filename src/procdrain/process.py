"""Spawn a child process and capture both of its output streams."""

import codecs
import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from procdrain.drain import DrainResult, StreamDrain
from procdrain.errors import SpawnError, WaitError


@dataclass
class Result:
    returncode: int
    stdout: DrainResult
    stderr: DrainResult


class ChildProcess:
    """Handle on a spawned child.

    The exit code is only available as the return value of wait(); there is
    no accessor that could be read before the child has terminated.
    """

    def __init__(self, popen: subprocess.Popen):
        self._popen = popen

    @property
    def pid(self) -> int:
        return self._popen.pid

    @property
    def stdin(self):
        return self._popen.stdin

    @property
    def stdout(self):
        return self._popen.stdout

    @property
    def stderr(self):
        return self._popen.stderr

    def wait(self) -> int:
        """Block until the child terminates and return its exit code.

        A child killed by signal N reports -N.
        """
        try:
            return self._popen.wait()
        except (InterruptedError, KeyboardInterrupt) as e:
            raise WaitError(self.pid, e) from e

    def __repr__(self) -> str:
        return f"ChildProcess(pid={self.pid}, args={self._popen.args!r})"


def _check_command(command: Sequence[str]) -> list[str]:
    # A single string would be split by nobody and run as one program name
    if isinstance(command, str):
        raise TypeError("command must be a sequence of arguments, not a string")
    args = list(command)
    if not args:
        raise ValueError("command must not be empty")
    return args


def spawn(
    command: Sequence[str], env: dict[str, str] | None = None, cwd: str | None = None
) -> ChildProcess:
    """Start a child with piped stdin, stdout and stderr. Never uses a shell.

    Raises SpawnError if the executable is missing, not executable, or the OS
    refuses to create the process.
    """
    args = _check_command(command)
    merged_env = None
    if env is not None:
        merged_env = {**os.environ, **env}

    try:
        popen = subprocess.Popen(
            args,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=merged_env,
            cwd=cwd,
            shell=False,
        )
    except OSError as e:
        raise SpawnError(args, e) from e
    return ChildProcess(popen)


def run(
    command: Sequence[str],
    env: dict[str, str] | None = None,
    cwd: str | None = None,
    encoding: str | None = None,
) -> Result:
    """Run a command to completion and capture stdout and stderr.

    Both streams are drained concurrently, so a child producing more output
    than a pipe buffer holds on either stream cannot stall. SpawnError and
    WaitError propagate; read failures are reported on the per-stream
    DrainResult instead. An unknown encoding raises LookupError before
    anything is spawned.
    """
    if encoding is not None:
        codecs.lookup(encoding)
    child = spawn(command, env=env, cwd=cwd)
    child.stdin.close()

    drains = [
        StreamDrain(child.stdout, "stdout", encoding=encoding),
        StreamDrain(child.stderr, "stderr", encoding=encoding),
    ]
    for d in drains:
        d.start()

    returncode = child.wait()

    # The pipes reach EOF once the child is gone, but the drains may still be
    # copying the tail of the output.
    for d in drains:
        d.join()

    stdout, stderr = (d.result for d in drains)
    return Result(returncode=returncode, stdout=stdout, stderr=stderr)
