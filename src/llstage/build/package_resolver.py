"""
Default package resolver.

Classifies the entries of a (possibly synthetic) directory listing into the
files that make up a Go package. Only file names are inspected; file
contents are never read.

Classification rules:
- Directories and files without the source suffix are skipped
- Names starting with "_" or "." are ignored
- *_test.go files are recorded as test files
- Unless the context uses all files, filename constraints such as
  foo_linux.go, foo_arm64.go or foo_darwin_amd64.go must match the target
"""

import logging
from typing import List

from ..config.build_context import KNOWN_ARCH, KNOWN_OS, BuildContext
from ..errors import InvalidInputError
from .package_assembler import DirectoryLister, PackageDescriptor

logger = logging.getLogger(__name__)


class DirectoryPackageResolver:
    """Resolves a directory listing into a PackageDescriptor."""

    def import_dir(
        self, dir: str, lister: DirectoryLister, context: BuildContext
    ) -> PackageDescriptor:
        """Resolve the package in a directory.

        Args:
            dir: Absolute package directory
            lister: Provider of the directory contents
            context: Target and filtering policy

        Returns:
            PackageDescriptor for the directory

        Raises:
            InvalidInputError: If no buildable source files remain
        """
        go_files: List[str] = []
        ignored: List[str] = []
        tests: List[str] = []

        for entry in lister.read_dir(dir):
            if entry.is_dir or not entry.name.endswith(context.source_suffix):
                continue
            name = entry.name
            if name.startswith("_") or name.startswith("."):
                ignored.append(name)
                continue
            if not context.use_all_files and not self.good_os_arch_file(name, context):
                logger.debug("Excluding %s: build constraints not satisfied", name)
                ignored.append(name)
                continue
            if name[: -len(context.source_suffix)].endswith("_test"):
                tests.append(name)
            else:
                go_files.append(name)

        if not go_files and not tests:
            raise InvalidInputError(f"no buildable Go source files in {dir}", path=dir)

        return PackageDescriptor(
            dir=dir,
            go_files=tuple(go_files),
            all_files=context.use_all_files,
            ignored_go_files=tuple(ignored),
            test_go_files=tuple(tests),
        )

    @staticmethod
    def good_os_arch_file(name: str, context: BuildContext) -> bool:
        """Check a file name's _GOOS / _GOARCH / _GOOS_GOARCH suffix.

        Args:
            name: File name, e.g. "sys_linux_amd64.go"
            context: Target to match against

        Returns:
            True if the name carries no constraint or the constraint matches
        """
        stem = name
        if stem.endswith(context.source_suffix):
            stem = stem[: -len(context.source_suffix)]
        i = stem.find("_")
        if i < 0:
            return True
        parts = stem[i:].split("_")
        if parts and parts[-1] == "test":
            parts = parts[:-1]

        n = len(parts)
        if n >= 2 and parts[-2] in KNOWN_OS and parts[-1] in KNOWN_ARCH:
            return context.matches_tag(parts[-2]) and context.matches_tag(parts[-1])
        if n >= 1 and parts[-1] in KNOWN_OS:
            return context.matches_tag(parts[-1])
        if n >= 1 and parts[-1] in KNOWN_ARCH:
            return context.matches_tag(parts[-1])
        return True
