"""Exception hierarchy for aiovcs."""

from __future__ import annotations


class VCSError(Exception):
    """Base exception for all aiovcs errors."""


class ProcessError(VCSError):
    """An external command could not be run to a successful exit.

    Every keyword has a default so that ``BaseException.__reduce__``, which
    replays only the message, can rebuild the error when it is pickled.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str = "",
        args: list[str] | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.arguments = list(args or [])
        self.stderr = stderr


class ProcessExitError(ProcessError):
    """The command exited with a nonzero status."""

    def __init__(
        self,
        message: str,
        *,
        command: str = "",
        args: list[str] | None = None,
        stderr: str = "",
        exit_code: int | None = None,
    ) -> None:
        super().__init__(message, command=command, args=args, stderr=stderr)
        self.exit_code = exit_code


class ProcessSpawnError(ProcessError):
    """The command could not be started."""


class ProcessTimeoutError(ProcessSpawnError):
    """The command was killed after exceeding its timeout."""

    def __init__(
        self,
        message: str,
        *,
        command: str = "",
        args: list[str] | None = None,
        stderr: str = "",
        timeout: float | None = None,
    ) -> None:
        super().__init__(message, command=command, args=args, stderr=stderr)
        self.timeout = timeout


class UnimplementedError(VCSError, NotImplementedError):
    """A VCS operation has no implementation for this backend."""
