"""llstage - pre-compile staging for the llgo build driver."""

from llstage.errors import (
    ErrorKind,
    ExecutionError,
    InvalidInputError,
    StageError,
    StageIOError,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "StageError",
    "InvalidInputError",
    "StageIOError",
    "ExecutionError",
]
