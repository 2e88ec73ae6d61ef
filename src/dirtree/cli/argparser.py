"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirtree import __version__
from dirtree.config import Configuration, add_skip_directory, add_skip_file, init_config
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.types import TreeFormat


def depth_type(value: str) -> int:
    """Parse a --depth value.

    Any integer is accepted; zero and negative values mean "no limit". Anything
    that is not an integer is rejected instead of being read as unlimited.

    Raises:
        argparse.ArgumentTypeError: If value is not an integer.

    Example:
        >>> depth_type("3")
        3
        >>> depth_type("deep")
        Traceback (most recent call last):
            ...
        argparse.ArgumentTypeError: invalid depth 'deep': expected an integer
    """
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth '{value}': expected an integer")


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling pattern exclusions.

    The returned action updates the given exclusion rules object as arguments
    are processed, preserving the order in which -e and -i options appear on
    the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action that feeds -e/--exclude files and -i/--ignore patterns into the rules object."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                try:
                    exclusion_rules.load_rules(Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            recorded.append(values)
            setattr(namespace, self.dest, recorded)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: display a directory hierarchy as a tree.

    Entries are listed in name order beneath their parent directory and joined
    with tree connectors. Common clutter (version control metadata, dependency
    and cache directories, OS bookkeeping files) and hidden entries are skipped
    unless -a/--all is given. Symbolic links are shown but never followed.
    """

    epilog = """
    Examples:
      # Show the tree for the current directory
      dirtree

      # Show the tree for a specific directory, at most two levels deep
      dirtree -d 2 /path/to/project

      # Show everything, including hidden entries and common clutter
      dirtree -a /path/to/project

      # Force ASCII connectors (useful for logs and old terminals)
      dirtree -A /path/to/project

      # Skip extra directory or file names
      dirtree --skip-dir build --skip-file README.md /path/to/project

      # Exclude by gitignore-style patterns, given directly or from files
      dirtree -i "*.pyc" -i "dist/" /path/to/project
      dirtree -e .gitignore /path/to/project

      # Write to a file and print counts to stderr
      dirtree -o tree.txt -s stderr /path/to/project

      # Display version information and exit
      dirtree -V
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to display (default: current directory).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=depth_type,
        default=-1,
        metavar="LEVEL",
        help="Maximum depth to display; 0 or less means no limit (default: no limit).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show hidden entries and disable skipping of common directories/files.",
    )

    format_group = parser.add_mutually_exclusive_group()
    format_group.add_argument(
        "-u",
        "--unicode",
        dest="tree_format",
        action="store_const",
        const=TreeFormat.UNICODE,
        help="Draw the tree with Unicode box-drawing characters.",
    )
    format_group.add_argument(
        "-A",
        "--ascii",
        dest="tree_format",
        action="store_const",
        const=TreeFormat.ASCII,
        help="Draw the tree with plain ASCII characters.",
    )

    parser.add_argument(
        "--skip-dir",
        action="append",
        default=[],
        metavar="NAME",
        help="Additional directory name to skip (can be specified multiple times; ignored with -a).",
    )
    parser.add_argument(
        "--skip-file",
        action="append",
        default=[],
        metavar="NAME",
        help="Additional file name to skip (can be specified multiple times; ignored with -a).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a file of gitignore-style patterns to exclude (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern to exclude, e.g. '*.log', 'build/' or '!keep.log'. Can be specified "
            "multiple times; patterns apply in command-line order, mixed with -e/--exclude."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print directory and file counts. Valid destinations: stderr, stdout, file (requires -o)",
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


def build_config(args: argparse.Namespace) -> Configuration:
    """Turn parsed arguments into a traversal configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        A Configuration reflecting the options given.
    """
    config = init_config()
    config.max_depth = args.depth
    if args.all:
        config.skip_common = False
        config.skip_hidden = False
    if args.tree_format is not None:
        config.format = args.tree_format
    for name in args.skip_dir:
        add_skip_directory(config, name)
    for name in args.skip_file:
        add_skip_file(config, name)
    return config
