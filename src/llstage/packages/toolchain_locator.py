"""Toolchain library location.

Linking against libgo and friends needs gcc's runtime support library
directory on the search path. Its location depends on the installed gcc
version and platform, so it is asked of gcc at build time.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..build.command_runner import CommandRunner
from ..errors import ExecutionError

logger = logging.getLogger(__name__)

DEFAULT_COMPILER = "gcc"


def find_gcclib(
    compiler: str = DEFAULT_COMPILER,
    runner: Optional[CommandRunner] = None,
) -> Path:
    """Find the library directory for the gcc found in $PATH.

    Args:
        compiler: C compiler executable to query
        runner: Command runner (defaults to a quiet CommandRunner)

    Returns:
        Directory containing the compiler's libgcc

    Raises:
        ExecutionError: If the compiler cannot be run, fails, or prints nothing
    """
    if runner is None:
        runner = CommandRunner()

    cmd = [compiler, "--print-libgcc-file-name"]
    libfile = runner.run(cmd).strip()
    if not libfile:
        raise ExecutionError(f"{compiler} did not report a libgcc path", command=cmd)

    libdir = Path(libfile).parent
    logger.debug("libgcc directory: %s", libdir)
    return libdir


def gcclib_link_flags(
    compiler: str = DEFAULT_COMPILER,
    runner: Optional[CommandRunner] = None,
) -> List[str]:
    """Get linker search flags for the compiler's runtime library directory.

    Returns:
        ["-L<libdir>"]
    """
    return [f"-L{find_gcclib(compiler, runner)}"]
