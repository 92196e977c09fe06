"""Toolchain discovery for llstage."""

from .toolchain_locator import DEFAULT_COMPILER, find_gcclib, gcclib_link_flags

__all__ = [
    "DEFAULT_COMPILER",
    "find_gcclib",
    "gcclib_link_flags",
]
