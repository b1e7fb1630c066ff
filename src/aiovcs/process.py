"""Async runner for external commands.

Every call spawns exactly one child process with ``asyncio`` subprocess
support, so waiting on ``git`` never blocks the event loop.  Both output
streams are drained incrementally while the child runs; the buffered
stderr is attached to every error for diagnostics.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from pathlib import Path

from .exceptions import ProcessExitError, ProcessSpawnError, ProcessTimeoutError
from .models.process import CommandResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
"""Seconds a command may run before it is killed."""

_CHUNK_SIZE = 4096


async def _drain(stream: asyncio.StreamReader | None, buffer: bytearray) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        buffer.extend(chunk)


async def _kill(proc: asyncio.subprocess.Process) -> None:
    """Kill *proc* if it is still running and reap it."""
    if proc.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
    await proc.wait()


def _decode(buffer: bytearray) -> str:
    return buffer.decode("utf-8", errors="replace")


def _error_message(command_line: str, reason: str, stderr: str) -> str:
    return f"Error while running {command_line}: {reason}. stderr: {stderr}"


class ProcessRunner:
    """Runs commands inside a fixed working directory with a fixed timeout.

    The constructor accepts plain values; no environment variables are read.
    Children inherit the caller's environment unchanged.
    """

    def __init__(self, cwd: Path, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.cwd = cwd
        self.timeout = timeout

    async def execute(self, command: str, args: list[str]) -> CommandResult:
        """Run *command* and return its result whatever the exit status.

        Raises :class:`ProcessSpawnError` if the command cannot be started and
        :class:`ProcessTimeoutError` if it outlives the timeout.  If the
        calling task is cancelled the child is killed and reaped before the
        cancellation propagates.
        """
        args = list(args)
        command_line = " ".join([command, *args])
        stdout = bytearray()
        stderr = bytearray()

        logger.debug("Running %s in %s", command_line, self.cwd)
        try:
            proc = await asyncio.create_subprocess_exec(
                command,
                *args,
                cwd=str(self.cwd),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise ProcessSpawnError(
                _error_message(command_line, str(exc), ""),
                command=command,
                args=args,
            ) from exc

        try:
            async with asyncio.timeout(self.timeout):
                await asyncio.gather(
                    _drain(proc.stdout, stdout),
                    _drain(proc.stderr, stderr),
                )
                exit_code = await proc.wait()
        except TimeoutError:
            logger.warning("Killing %s after %ss", command_line, self.timeout)
            await _kill(proc)
            stderr_text = _decode(stderr)
            raise ProcessTimeoutError(
                _error_message(command_line, f"Timed out after {self.timeout}s", stderr_text),
                command=command,
                args=args,
                stderr=stderr_text,
                timeout=self.timeout,
            ) from None
        except BaseException:
            logger.debug("Killing %s after cancellation", command_line)
            await _kill(proc)
            raise

        logger.debug("%s exited with code %d", command_line, exit_code)
        return CommandResult(
            command=command,
            args=args,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
            exit_code=exit_code,
        )

    async def run(self, command: str, args: list[str]) -> CommandResult:
        """Run *command* and return its result, raising on a nonzero exit."""
        result = await self.execute(command, args)
        if not result.ok:
            raise ProcessExitError(
                _error_message(
                    result.command_line,
                    f"Exited with code {result.exit_code}",
                    result.stderr,
                ),
                command=command,
                args=result.args,
                stderr=result.stderr,
                exit_code=result.exit_code,
            )
        return result
