"""Artifact relocation.

Moves build outputs into their final location. A plain rename is tried first;
when it fails (typically because source and destination live on different
filesystems) the file is copied and the source removed. A destination of
``-`` streams the artifact to standard output instead.

Fallback ordering:
    1. Open source, create destination
    2. Copy source permission bits onto destination
    3. Stream bytes
    4. Remove source

A failure at any step is raised immediately. A partially written destination
is not removed and the source is left in place.
"""

import logging
import os
import shutil
import stat
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

from tqdm import tqdm

from ..errors import StageIOError

logger = logging.getLogger(__name__)

# Destination sentinel meaning "write to standard output"
STDOUT = "-"

CHUNK_SIZE = 64 * 1024

PathLike = Union[str, Path]


def move_file(
    src: PathLike,
    dst: PathLike,
    echo: bool = False,
    show_progress: bool = False,
) -> None:
    """Move src to dst, catering for filesystem differences.

    Args:
        src: Path of the artifact to move
        dst: Destination path, or "-" to write the artifact to stdout
        echo: Whether to log the equivalent shell command first
        show_progress: Whether to show a progress bar for copy fallbacks

    Raises:
        StageIOError: If any filesystem operation fails
    """
    src = str(src)
    dst = str(dst)

    if echo:
        if dst == STDOUT:
            logger.info("cat %s", src)
        else:
            logger.info("mv %s %s", src, dst)

    if dst == STDOUT:
        _cat_file(src)
        return

    try:
        os.rename(src, dst)
        return
    except OSError as e:
        # rename may fail if the paths are on different filesystems
        logger.debug("rename %s -> %s failed (%s), copying instead", src, dst, e)

    _copy_and_remove(src, dst, show_progress)


def _cat_file(src: str) -> None:
    """Stream a file to standard output, leaving it in place."""
    out = getattr(sys.stdout, "buffer", None)
    if out is None:
        raise StageIOError(
            f"Cannot copy {src} to stdout: stream does not accept bytes", path=src
        )

    try:
        with open(src, "rb") as fin:
            shutil.copyfileobj(fin, out, CHUNK_SIZE)
            out.flush()
    except OSError as e:
        raise StageIOError(f"Failed to copy {src} to stdout", path=src, cause=e) from e


def _copy_and_remove(src: str, dst: str, show_progress: bool) -> None:
    """Copy src to dst with src's permission bits, then remove src."""
    try:
        fin = open(src, "rb")
    except OSError as e:
        raise StageIOError(f"Failed to open {src}", path=src, cause=e) from e

    with fin:
        try:
            fout = open(dst, "wb")
        except OSError as e:
            raise StageIOError(f"Failed to create {dst}", path=dst, cause=e) from e

        # Closing flushes buffered output, so it can fail like any write
        try:
            with fout:
                try:
                    mode = stat.S_IMODE(os.fstat(fin.fileno()).st_mode)
                    os.chmod(dst, mode)
                except OSError as e:
                    raise StageIOError(
                        f"Failed to copy permissions onto {dst}", path=dst, cause=e
                    ) from e

                _stream(fin, fout, os.fstat(fin.fileno()).st_size, src, show_progress)
        except OSError as e:
            raise StageIOError(
                f"Failed to copy {src} to {dst}", path=dst, cause=e
            ) from e

    try:
        os.remove(src)
    except OSError as e:
        raise StageIOError(f"Failed to remove {src}", path=src, cause=e) from e


def _stream(
    fin: BinaryIO,
    fout: BinaryIO,
    total: int,
    name: str,
    show_progress: bool,
) -> None:
    progress_bar: Optional[tqdm] = None
    if show_progress and total > 0:
        progress_bar = tqdm(
            total=total,
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            desc=f"Copying {os.path.basename(name)}",
        )

    try:
        while True:
            chunk = fin.read(CHUNK_SIZE)
            if not chunk:
                break
            fout.write(chunk)
            if progress_bar:
                progress_bar.update(len(chunk))
    finally:
        if progress_bar:
            progress_bar.close()
