"""Command-line interface for dir2tree.

This module provides the command-line entry point. It parses arguments, renders the
tree to stdout or a file, and optionally copies the uncolored tree to the clipboard.

Signal Handling Notes:
    - SIGPIPE: Handled when output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including a missing root directory)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Render the current directory
    $ dir2tree

    # Render a project, keeping a file that an ignore rule would hide
    $ dir2tree /path/to/project -x keep.secret
"""

import argparse
import sys
from typing import Mapping

import pyperclip
from humanfriendly.terminal import terminal_supports_colors

from dir2tree.cli.argparser import create_parser, validate_args
from dir2tree.cli.safe_writer import SafeWriter
from dir2tree.cli.signal_handler import setup_signal_handling, signal_handler
from dir2tree.dir2tree import Dir2Tree, format_pattern_errors
from dir2tree.size_format import human_size


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping with directories, files, total_size and unreadable counts.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    value, unit = human_size(counts["total_size"])
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Total size: {value} {unit}",
    ]
    if counts["unreadable"]:
        result.append(f"Unreadable directories: {counts['unreadable']}")
    return "\n".join(result)


def use_colors(args: argparse.Namespace) -> bool:
    """Decide whether the live output is colorized."""
    if args.output or args.color == "never":
        return False
    if args.color == "always":
        return True
    return terminal_supports_colors(sys.stdout)


def copy_to_clipboard(text: str) -> bool:
    """Copy ``text`` to the system clipboard.

    Returns:
        True on success. Failures are reported on stderr as a warning.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        print(f"Warning: Could not copy to clipboard: {e}", file=sys.stderr)
        return False
    return True


def main() -> None:
    """Main entry point for the dir2tree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        args = parser.parse_args()

        # Perform additional validation beyond what argparse supports directly
        validate_args(args)

        analyzer = Dir2Tree(
            args.directory,
            excludes=args.exclude,
            ignore_files=args.ignore_file,
            show_all=args.all,
            exceptions=args.exceptions,
            use_colors=use_colors(args),
        )

        for warning in format_pattern_errors(analyzer.pattern_errors):
            print(warning, file=sys.stderr)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                state = analyzer.render(safe_writer)

                if args.summary:
                    counts = {
                        "directories": state.directory_count,
                        "files": state.file_count,
                        "total_size": state.total_size,
                        "unreadable": state.unreadable_count,
                    }
                    count_output_str = format_counts(counts)

                    if args.summary in ("stdout", "file"):
                        safe_writer.write("\n" + count_output_str + "\n")
                    elif args.summary == "stderr":
                        print(count_output_str, file=sys.stderr)

                if args.clipboard:
                    copy_to_clipboard(state.getvalue())

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
