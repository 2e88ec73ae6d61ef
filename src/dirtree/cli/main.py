"""Command-line interface for dirtree.

This module provides the ``dirtree`` command, which prints the tree of a
directory to stdout or to a file. It handles argument parsing, output
redirection and signal management for graceful interruption.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g. ``dirtree | head``) on Unix-like systems
    - SIGINT: Handled for a clean exit on Ctrl+C
    In both cases the walk stops at the next write and the process exits with the
    conventional status code.

Exit Codes:
    0: Successful completion (also for --help and --version)
    1: Runtime error, including a target that is missing or not a directory
    2: Command-line syntax error (unknown option, malformed --depth, ...)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Tree of the current directory
    $ dirtree

    # Two levels deep, ASCII connectors
    $ dirtree -d 2 -A /path/to/dir
"""

import re
import sys
from pathlib import Path
from typing import Optional

from dirtree.cli.argparser import build_config, create_parser, validate_args
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.exceptions import ResolutionError, TargetNotADirectoryError
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.file_system_tree.tree_renderer import TreeRenderer


def format_summary(directory_count: int, file_count: int) -> str:
    """Format the traversal counts into a human-readable string.

    Example:
        >>> print(format_summary(3, 12))
        Directories: 3
        Files: 12
    """
    return f"Directories: {directory_count}\nFiles: {file_count}"


def own_executable_pattern(root: Path, program: Optional[str] = None) -> Optional[str]:
    """Build an anchored pattern matching the running executable inside root.

    When the ``dirtree`` executable itself lives in the directory being shown
    (e.g. listing a virtualenv's ``bin``), it is treated like any other piece of
    clutter. Python source files (``python path/to/main.py``) are never hidden.

    Args:
        root: The directory being rendered.
        program: Path of the running program. Defaults to ``sys.argv[0]``.

    Returns:
        A root-anchored gitignore pattern, or None if the program is not under root.
    """
    program = sys.argv[0] if program is None else program
    if not program:
        return None

    try:
        program_path = Path(program).resolve(strict=True)
        relative = program_path.relative_to(Path(root).resolve(strict=True))
    except (OSError, RuntimeError, ValueError):
        return None

    if program_path.suffix == ".py" or not program_path.is_file():
        return None

    # Escape glob metacharacters so the name matches literally
    return "/" + re.sub(r"([*?\[\]\\])", r"\\\1", relative.as_posix())


def main() -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution, or an invalid target directory
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated by -e/-i while the command line is parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        config = build_config(args)
        if config.skip_common:
            pattern = own_executable_pattern(args.directory)
            if pattern is not None:
                exclusion_rules.add_rule(pattern)

        renderer = TreeRenderer(config, exclusion_rules if exclusion_rules.has_rules() else None)

        # Validate the target before any output (or output file) is produced
        try:
            lines = renderer.stream_lines(args.directory)
        except (ResolutionError, TargetNotADirectoryError):
            print(f"Error: '{args.directory}' is not a directory or doesn't exist.", file=sys.stderr)
            sys.exit(1)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                for line in lines:
                    safe_writer.write(line + "\n")

                if args.summary:
                    summary = format_summary(renderer.directory_count, renderer.file_count)
                    if args.summary in ("stdout", "file"):
                        safe_writer.write("\n" + summary + "\n")
                    else:
                        print(summary, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    status = signal_handler.exit_status()
    if status is not None:
        sys.exit(status)


if __name__ == "__main__":
    main()
