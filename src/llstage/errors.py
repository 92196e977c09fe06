"""Error taxonomy for llstage.

Every staging component raises a subclass of StageError. Each error carries a
kind tag plus the contextual fields needed to report it (path, underlying
cause), so callers can branch on either the class or the kind.
"""

from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    """Category of a staging failure."""

    INVALID_INPUT = "invalid_input"
    IO = "io"
    EXECUTION = "execution"


class StageError(Exception):
    """Base class for all staging errors."""

    kind: ErrorKind = ErrorKind.IO

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        """Initialize staging error.

        Args:
            message: Human-readable description of the failure
            path: File path the failure relates to, if any
            cause: Underlying exception, if any
        """
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidInputError(StageError):
    """Raised for malformed or inconsistent caller arguments."""

    kind = ErrorKind.INVALID_INPUT


class StageIOError(StageError):
    """Raised when a filesystem operation fails."""

    kind = ErrorKind.IO


class ExecutionError(StageError):
    """Raised when an external toolchain process cannot run or fails."""

    kind = ErrorKind.EXECUTION

    def __init__(
        self,
        message: str,
        command: Optional[List[str]] = None,
        returncode: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, path=None, cause=cause)
        self.command = list(command) if command else []
        self.returncode = returncode
