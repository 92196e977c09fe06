"""Command Runner.

Runs external toolchain commands with stdout captured and stderr passed
through to the calling process, so compiler diagnostics reach the user
unchanged.
"""

import logging
import shlex
import subprocess
from typing import List, Sequence

from ..errors import ExecutionError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Executes external commands and captures their standard output."""

    def __init__(self, verbose: bool = False):
        """Initialize command runner.

        Args:
            verbose: Whether to echo each command line before running it
        """
        self.verbose = verbose

    def run(self, cmd: Sequence[str]) -> str:
        """Run a command and return its standard output.

        Args:
            cmd: Command name followed by its arguments

        Returns:
            Captured standard output as text

        Raises:
            ExecutionError: If the command cannot be started or exits non-zero
        """
        argv: List[str] = [str(arg) for arg in cmd]
        if self.verbose:
            logger.info(shlex.join(argv))

        try:
            result = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=None,  # inherit the parent stderr
                text=True,
            )
        except OSError as e:
            raise ExecutionError(
                f"Failed to run {argv[0]}", command=argv, cause=e
            ) from e

        if result.returncode != 0:
            raise ExecutionError(
                f"{argv[0]} exited with status {result.returncode}",
                command=argv,
                returncode=result.returncode,
            )

        return result.stdout
