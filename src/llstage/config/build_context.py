"""
Immutable build configuration.

A BuildContext describes the target a package is being resolved for (GOOS,
GOARCH, compiler, extra build tags) and the file-filtering policy applied
during resolution. Components receive it explicitly and derive modified
copies instead of mutating shared state.

Usage:
    # Host defaults, honouring GOOS/GOARCH/LLGO_BUILD_TAGS
    context = BuildContext.default()

    # Same target, build-constraint filtering disabled
    all_files = context.with_all_files()
"""

import os
import platform
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

from .env import env_fields

# Operating systems and architectures recognized in filename constraints
# (e.g. foo_linux.go, foo_arm64.go, foo_darwin_amd64.go).
KNOWN_OS = (
    "aix",
    "android",
    "darwin",
    "dragonfly",
    "freebsd",
    "illumos",
    "ios",
    "js",
    "linux",
    "netbsd",
    "openbsd",
    "plan9",
    "solaris",
    "wasip1",
    "windows",
)

KNOWN_ARCH = (
    "386",
    "amd64",
    "arm",
    "arm64",
    "loong64",
    "mips",
    "mips64",
    "mips64le",
    "mipsle",
    "ppc64",
    "ppc64le",
    "riscv64",
    "s390x",
    "wasm",
)

# platform.machine() values mapped to GOARCH names
_MACHINE_TO_ARCH = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


@dataclass(frozen=True)
class BuildContext:
    """Target description and file-filtering policy for package resolution."""

    goos: str
    goarch: str
    compiler: str = "llgo"
    build_tags: Tuple[str, ...] = ()
    use_all_files: bool = False  # Disables build-constraint filtering
    source_suffix: str = ".go"

    @classmethod
    def default(cls, environ: Optional[Mapping[str, str]] = None) -> "BuildContext":
        """Create a context for the host, overridable via the environment.

        Reads GOOS and GOARCH to override the detected host target, and
        LLGO_BUILD_TAGS as a whitespace-separated list of extra build tags.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            BuildContext for the current host
        """
        if environ is None:
            environ = os.environ

        goos = environ.get("GOOS") or cls.host_os()
        goarch = environ.get("GOARCH") or cls.host_arch()
        tags = tuple(env_fields("LLGO_BUILD_TAGS", environ))
        return cls(goos=goos, goarch=goarch, build_tags=tags)

    @staticmethod
    def host_os() -> str:
        """Get the GOOS name of the host operating system."""
        return platform.system().lower()

    @staticmethod
    def host_arch() -> str:
        """Get the GOARCH name of the host machine."""
        machine = platform.machine().lower()
        return _MACHINE_TO_ARCH.get(machine, machine)

    def with_all_files(self) -> "BuildContext":
        """Return a copy of this context with use_all_files enabled."""
        return replace(self, use_all_files=True)

    def matches_tag(self, tag: str) -> bool:
        """Check whether a build constraint tag is satisfied by this context.

        Args:
            tag: Constraint token (GOOS, GOARCH, compiler or build tag)

        Returns:
            True if the tag is satisfied
        """
        if tag in (self.goos, self.goarch, self.compiler):
            return True
        # unix is satisfied by every Unix-like GOOS
        if tag == "unix":
            return self.goos not in ("windows", "plan9", "js", "wasip1")
        return tag in self.build_tags
