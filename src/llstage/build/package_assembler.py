"""
Package synthesis for explicitly named Go files.

This module handles:
- Validating a loose list of .go files (suffix, not a directory, one directory)
- Building a synthetic directory listing limited to exactly those files
- Resolving that listing as if it were a normal package directory

Building "these exact files" is then indistinguishable from building a whole
package directory for everything downstream of the resolver.
"""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from ..config.build_context import BuildContext
from ..errors import InvalidInputError, StageIOError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """Metadata for one entry of a directory listing."""

    name: str
    size: int
    mode: int
    is_dir: bool = False

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "FileEntry":
        return cls(
            name=name,
            size=st.st_size,
            mode=st.st_mode,
            is_dir=stat.S_ISDIR(st.st_mode),
        )


class DirectoryLister(Protocol):
    """Provides the directory contents seen during package resolution."""

    def read_dir(self, path: str) -> Sequence[FileEntry]:
        ...


class OSDirectoryLister:
    """Lists a real directory on disk."""

    def read_dir(self, path: str) -> Sequence[FileEntry]:
        entries: List[FileEntry] = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    entries.append(FileEntry.from_stat(entry.name, entry.stat()))
        except OSError as e:
            raise StageIOError(f"Failed to list {path}", path=path, cause=e) from e
        return sorted(entries, key=lambda e: e.name)


class SyntheticDirectoryListing:
    """Fixed, in-memory directory contents.

    Whatever directory is asked for, only the entries given at construction
    are reported. Other files physically present are never seen.
    """

    def __init__(self, entries: Iterable[FileEntry]):
        self.entries: Tuple[FileEntry, ...] = tuple(entries)

    def read_dir(self, path: str) -> Sequence[FileEntry]:
        return self.entries

    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]


@dataclass(frozen=True)
class PackageDescriptor:
    """A resolved package: its directory and member source files."""

    dir: str
    go_files: Tuple[str, ...]
    all_files: bool = False  # Build-constraint filtering was disabled
    ignored_go_files: Tuple[str, ...] = ()
    test_go_files: Tuple[str, ...] = ()

    def source_paths(self) -> List[Path]:
        """Get absolute paths of the member source files."""
        return [Path(self.dir) / name for name in self.go_files]

    def to_dict(self) -> dict:
        return {
            "dir": self.dir,
            "go_files": list(self.go_files),
            "all_files": self.all_files,
            "ignored_go_files": list(self.ignored_go_files),
            "test_go_files": list(self.test_go_files),
        }


class PackageResolver(Protocol):
    """Turns a directory listing into a PackageDescriptor."""

    def import_dir(
        self, dir: str, lister: DirectoryLister, context: BuildContext
    ) -> PackageDescriptor:
        ...


def files_package(
    files: Sequence[Union[str, Path]],
    context: Optional[BuildContext] = None,
    resolver: Optional[PackageResolver] = None,
    cwd: Optional[str] = None,
) -> PackageDescriptor:
    """Create a package for building a collection of Go files.

    The files must all live in one directory so that local imports resolve
    consistently. Resolution sees only the named files and runs with
    build-constraint filtering disabled.

    Args:
        files: Paths of the .go files making up the package
        context: Build context (defaults to BuildContext.default())
        resolver: Package resolver (defaults to DirectoryPackageResolver)
        cwd: Directory relative paths are resolved against (defaults to os.getcwd())

    Returns:
        PackageDescriptor produced by the resolver

    Raises:
        InvalidInputError: If the file list is empty, a path is not a source
            file, a path is a directory, or the files span several directories
        StageIOError: If a file cannot be stat'ed
    """
    if context is None:
        context = BuildContext.default()
    if resolver is None:
        from .package_resolver import DirectoryPackageResolver

        resolver = DirectoryPackageResolver()

    paths = [str(f) for f in files]
    if not paths:
        raise InvalidInputError("no Go files named")

    for f in paths:
        if not f.endswith(context.source_suffix):
            raise InvalidInputError(
                f"named files must be {context.source_suffix} files", path=f
            )

    # Synthesize a directory that only shows the named files, to make it
    # look like this is a standard package or command directory.
    entries: List[FileEntry] = []
    pkg_dir = ""
    for f in paths:
        try:
            st = os.stat(f)
        except OSError as e:
            raise StageIOError(f"Failed to stat {f}", path=f, cause=e) from e
        if stat.S_ISDIR(st.st_mode):
            raise InvalidInputError(
                f"{f} is a directory, should be a Go file", path=f
            )

        dir1, name = os.path.split(f)
        # "a.go", "./a.go" and "x/../a.go" all name the same directory
        dir1 = os.path.normpath(dir1 or os.curdir)
        if not entries:
            pkg_dir = dir1
        elif pkg_dir != dir1:
            raise InvalidInputError(
                f"named files must all be in one directory; have {pkg_dir} and {dir1}",
                path=f,
            )
        entries.append(FileEntry.from_stat(name, st))

    listing = SyntheticDirectoryListing(entries)

    if not os.path.isabs(pkg_dir):
        if cwd is None:
            try:
                cwd = os.getcwd()
            except OSError as e:
                raise StageIOError(
                    "Failed to get working directory", cause=e
                ) from e
        pkg_dir = os.path.normpath(os.path.join(cwd, pkg_dir))

    logger.debug("Resolving %d named file(s) in %s", len(entries), pkg_dir)
    return resolver.import_dir(pkg_dir, listing, context.with_all_files())
