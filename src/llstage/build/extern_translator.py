"""gccgo extern annotation translation.

gccgo marks externally implemented functions with a ``//extern name`` comment
on the line preceding the declaration. llgo spells the same thing
``// #llgo name: name``. This module rewrites the former into the latter so
that sources written for gccgo can be built with llgo.
"""

import logging
import os
import re
from pathlib import Path
from typing import Union

from ..errors import StageIOError

logger = logging.getLogger(__name__)

GCCGO_EXTERN_RE = re.compile(rb"^//extern ", re.MULTILINE)
LLGO_NAME_PREFIX = b"// #llgo name: "

# Mode applied to every rewritten file
TRANSLATED_FILE_MODE = 0o644


def translate_gccgo_externs_text(data: bytes) -> bytes:
    """Rewrite gccgo extern annotations in a buffer.

    Args:
        data: Source file contents

    Returns:
        Contents with every line-leading "//extern " replaced by "// #llgo name: "
    """
    return GCCGO_EXTERN_RE.sub(lambda _match: LLGO_NAME_PREFIX, data)


def translate_gccgo_externs(filename: Union[str, Path]) -> int:
    """Rewrite a file in place so gccgo externs use llgo's syntax.

    The file is read fully, transformed, and written back with mode 0644
    regardless of its previous permissions.

    Args:
        filename: Path to the Go source file

    Returns:
        Number of annotations rewritten

    Raises:
        StageIOError: If the file cannot be read or written
    """
    path = str(filename)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise StageIOError(f"Failed to read {path}", path=path, cause=e) from e

    translated, count = GCCGO_EXTERN_RE.subn(lambda _match: LLGO_NAME_PREFIX, data)

    try:
        with open(path, "wb") as f:
            f.write(translated)
        os.chmod(path, TRANSLATED_FILE_MODE)
    except OSError as e:
        raise StageIOError(f"Failed to write {path}", path=path, cause=e) from e

    logger.debug("Translated %d gccgo extern(s) in %s", count, path)
    return count
