"""Exception types for procdrain."""


class ProcdrainError(Exception):
    """Base exception for procdrain."""


class SpawnError(ProcdrainError):
    """Raised when the child process cannot be located or launched."""

    def __init__(self, command: list[str], cause: BaseException):
        self.command = command
        self.cause = cause
        super().__init__(f"Could not run {command[0]!r}: {cause}")


class WaitError(ProcdrainError):
    """Raised when waiting for the child is interrupted before it terminates."""

    def __init__(self, pid: int, cause: BaseException):
        self.pid = pid
        self.cause = cause
        super().__init__(f"Interrupted while waiting for PID {pid}: {cause!r}")


class DrainError(ProcdrainError):
    """A read failure on one output stream.

    Recorded on the DrainResult of that stream, never raised by run().
    """

    def __init__(self, stream: str, cause: BaseException):
        self.stream = stream
        self.cause = cause
        super().__init__(f"{stream}: {cause}")
