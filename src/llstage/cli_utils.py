"""CLI utility functions for llstage.

This module provides common utilities used across CLI commands including:
- Logging setup
- Error handling and formatting
"""

import logging
import sys

from llstage.errors import ErrorKind, StageError

# Exit status per error kind
EXIT_CODES = {
    ErrorKind.INVALID_INPUT: 2,
    ErrorKind.IO: 1,
    ErrorKind.EXECUTION: 1,
}


def configure_logging(verbose: bool = False) -> None:
    """Route library logging to stderr.

    Args:
        verbose: Whether to show debug messages
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message to stderr.

        Args:
            title: Error title (e.g., "Invalid input", "I/O error")
            message: Error message details
        """
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}", file=sys.stderr)
        print(message, file=sys.stderr)

    @staticmethod
    def handle_stage_error(error: StageError) -> None:
        """Report a staging error and exit with its kind's status code.

        Args:
            error: The StageError to handle
        """
        titles = {
            ErrorKind.INVALID_INPUT: "Error: Invalid input",
            ErrorKind.IO: "Error: I/O failure",
            ErrorKind.EXECUTION: "Error: Command failed",
        }
        message = str(error)
        if error.path and error.path not in message:
            message = f"{message} ({error.path})"
        ErrorFormatter.print_error(titles[error.kind], message)
        sys.exit(EXIT_CODES[error.kind])

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        print(
            f"{ErrorFormatter.YELLOW}✗ Interrupted{ErrorFormatter.RESET}",
            file=sys.stderr,
        )
        sys.exit(130)  # Standard exit code for SIGINT
