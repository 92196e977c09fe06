"""
Command-line interface for llstage.

This module provides the `llstage` CLI tool, a thin driver over the staging
components used by the llgo build pipeline.
"""

import argparse
import json
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from llstage import __version__
from llstage.build import CommandRunner, files_package, move_file, translate_gccgo_externs
from llstage.cli_utils import ErrorFormatter, configure_logging
from llstage.config import BuildContext
from llstage.errors import StageError
from llstage.packages import DEFAULT_COMPILER, find_gcclib


@dataclass
class PackageArgs:
    """Arguments for the package command."""

    files: List[str] = field(default_factory=list)
    verbose: bool = False


@dataclass
class MoveArgs:
    """Arguments for the mv command."""

    src: str
    dst: str
    progress: bool = False
    verbose: bool = False


@dataclass
class TranslateArgs:
    """Arguments for the translate-externs command."""

    files: List[str] = field(default_factory=list)
    verbose: bool = False


@dataclass
class GcclibArgs:
    """Arguments for the gcclib command."""

    cc: str = DEFAULT_COMPILER
    verbose: bool = False


def package_command(args: PackageArgs) -> None:
    """Print the package synthesized from the named Go files as JSON.

    Examples:
        llstage package main.go util.go
    """
    package = files_package(args.files, context=BuildContext.default())
    print(json.dumps(package.to_dict(), indent=2))


def move_command(args: MoveArgs) -> None:
    """Move a build artifact into place.

    Examples:
        llstage mv work/a.out bin/hello
        llstage mv work/a.out -          # write to stdout
    """
    move_file(args.src, args.dst, echo=args.verbose, show_progress=args.progress)


def translate_command(args: TranslateArgs) -> None:
    """Rewrite gccgo //extern annotations in place."""
    for filename in args.files:
        count = translate_gccgo_externs(filename)
        if args.verbose:
            print(f"{filename}: {count} extern(s) translated", file=sys.stderr)


def gcclib_command(args: GcclibArgs) -> None:
    """Print gcc's runtime library directory."""
    print(find_gcclib(args.cc, CommandRunner(verbose=args.verbose)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llstage",
        description="Pre-compile staging for the llgo build driver",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"llstage {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo commands and show debug output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    package_parser = subparsers.add_parser(
        "package",
        help="Describe the package formed by the named Go files",
    )
    package_parser.add_argument("files", nargs="+", help="Go source files")

    mv_parser = subparsers.add_parser(
        "mv",
        help="Move a build artifact, copying across filesystems if needed",
    )
    mv_parser.add_argument("src", help="Artifact to move")
    mv_parser.add_argument("dst", help="Destination path, or - for stdout")
    mv_parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar when the artifact has to be copied",
    )

    translate_parser = subparsers.add_parser(
        "translate-externs",
        help="Rewrite gccgo //extern annotations to llgo syntax",
    )
    translate_parser.add_argument("files", nargs="+", help="Go source files")

    gcclib_parser = subparsers.add_parser(
        "gcclib",
        help="Print the runtime library directory of the C compiler",
    )
    gcclib_parser.add_argument(
        "--cc",
        default=DEFAULT_COMPILER,
        help=f"C compiler to query (default: {DEFAULT_COMPILER})",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """llstage - pre-compile staging for llgo."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    configure_logging(parsed_args.verbose)

    try:
        if parsed_args.command == "package":
            package_command(
                PackageArgs(files=parsed_args.files, verbose=parsed_args.verbose)
            )
        elif parsed_args.command == "mv":
            move_command(
                MoveArgs(
                    src=parsed_args.src,
                    dst=parsed_args.dst,
                    progress=parsed_args.progress,
                    verbose=parsed_args.verbose,
                )
            )
        elif parsed_args.command == "translate-externs":
            translate_command(
                TranslateArgs(files=parsed_args.files, verbose=parsed_args.verbose)
            )
        elif parsed_args.command == "gcclib":
            gcclib_command(GcclibArgs(cc=parsed_args.cc, verbose=parsed_args.verbose))
    except StageError as e:
        ErrorFormatter.handle_stage_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()


if __name__ == "__main__":
    main()
