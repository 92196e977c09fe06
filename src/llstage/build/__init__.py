"""
Staging components for llstage.

This module provides the file-level preparation steps around compilation:
- Package synthesis from explicitly named Go files
- Artifact relocation across filesystems
- gccgo extern annotation translation
- External command execution
"""

from .command_runner import CommandRunner
from .extern_translator import translate_gccgo_externs, translate_gccgo_externs_text
from .package_assembler import (
    DirectoryLister,
    FileEntry,
    OSDirectoryLister,
    PackageDescriptor,
    PackageResolver,
    SyntheticDirectoryListing,
    files_package,
)
from .package_resolver import DirectoryPackageResolver
from .relocator import STDOUT, move_file

__all__ = [
    "CommandRunner",
    "translate_gccgo_externs",
    "translate_gccgo_externs_text",
    "DirectoryLister",
    "FileEntry",
    "OSDirectoryLister",
    "PackageDescriptor",
    "PackageResolver",
    "SyntheticDirectoryListing",
    "files_package",
    "DirectoryPackageResolver",
    "STDOUT",
    "move_file",
]
