"""Command-line argument parsing for dir2tree.

This module defines the command-line interface for dir2tree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dir2tree import __version__
from dir2tree.exclusion_rules.ignore_rules import DEFAULT_EXCLUDES, KNOWN_IGNORE_FILES


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dir2tree's options.
    """
    description = f"""
    dir2tree: Print a directory tree with file sizes, exclusions, and ignore-file support.

    Entries are hidden when their exact name is given with -e/--exclude or when they match
    a rule from an ignore file in the root directory. Rules containing * or ? are wildcards
    matched against the whole name; other rules must match the name exactly.

    Ignore files read by default:
      {" ".join(KNOWN_IGNORE_FILES)}

    Always hidden unless -a/--all is given:
      {" ".join(DEFAULT_EXCLUDES)}

    Exception patterns (-x/--except) override every exclusion. A pattern starting with
    "regex:" is a regular expression matched anywhere in the name; a pattern with * or ?
    is a wildcard; anything else must match the name exactly.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      dir2tree

      # Hide build output and dependencies by exact name
      dir2tree /path/to/project -e node_modules dist

      # Only honor .gitignore, not the other known ignore files
      dir2tree -i .gitignore /path/to/project

      # Show version control directories too
      dir2tree -a /path/to/project

      # Keep one file that an ignore rule like *.env would hide
      dir2tree -x example.env /path/to/project
      dir2tree -x "regex:^keep_" /path/to/project

      # Save the tree to a file, or copy it to the clipboard
      dir2tree -o tree.txt /path/to/project
      dir2tree -c /path/to/project

      # Print counts and total size to stderr
      dir2tree -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dir2tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2tree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to render (default: current directory).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="NAME",
        nargs="+",
        action="extend",
        default=[],
        help="Names of files or directories to hide. Only exact names match.",
    )
    parser.add_argument(
        "-i",
        "--ignore-file",
        metavar="FILE",
        action="append",
        help=(
            "Basename of an ignore file in the root directory to read (can be specified multiple "
            "times). When given, only the named files are read."
        ),
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show version control and OS artifacts that are hidden by default.",
    )
    parser.add_argument(
        "-x",
        "--except",
        dest="exceptions",
        metavar="PATTERN",
        action="append",
        default=[],
        help="Always show entries matching PATTERN (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-c",
        "--clipboard",
        action="store_true",
        help="Copy the uncolored tree to the clipboard.",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize the tree (default: auto, only when writing to a terminal).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")
    if args.output and args.color == "always":
        raise ValueError("--color=always cannot be combined with -o/--output")
