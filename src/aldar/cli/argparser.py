"""Command-line argument parsing for aldar.

This module defines the command-line interface for aldar, handling argument
parsing, validation, and translation of the parsed options into the filter and
glyph configuration used by the tree walker.
"""

import argparse
from pathlib import Path

from aldar import __version__
from aldar.filter_rules.filter_spec import FilterSpec
from aldar.filter_rules.pattern_set import PatternSet
from aldar.glyphs import GlyphSet, get_glyph_set


def level_type(value: str) -> int:
    """Parse a depth limit, accepting -1 for unlimited.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer of at least -1.
    """
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level: {value!r} is not an integer")
    if level < -1:
        raise argparse.ArgumentTypeError(f"invalid level: {level} (use -1 for unlimited)")
    return level


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with aldar's options.
    """
    description = """
    aldar: list the contents of directories in a tree-like format.

    Starting at PATH (the current directory by default), aldar descends the
    directory hierarchy depth first and prints one line per entry, drawing the
    branches with Unicode box-drawing characters (or ASCII with -A). Directories
    are listed before files. A summary line with the number of directories and
    files follows the tree.

    Patterns given with -I and -E use gitignore syntax. Include patterns are
    matched against file names only and never hide directories; an exclude
    pattern matching a directory removes its whole subtree.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      aldar

      # Include hidden files, two levels deep
      aldar -a -L 2 /path/to/project

      # Only Python files, skipping virtual environments
      aldar -I "*.py" -E ".venv" -E "__pycache__" /path/to/project

      # Reuse an existing .gitignore as exclude patterns
      aldar -X .gitignore /path/to/project

      # Sizes in human readable units, ASCII branches, written to a file
      aldar -H -A -o tree.txt /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="aldar",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"aldar {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Working directory of this command (default: current directory).",
    )
    parser.add_argument("-a", "--all", dest="show_hidden", action="store_true", help="List also hidden files.")
    parser.add_argument("-d", "--dirs-only", dest="dirs_only", action="store_true", help="List directories only.")
    parser.add_argument(
        "-I",
        "--include-pattern",
        dest="include_patterns",
        metavar="PATTERN",
        action="append",
        default=[],
        help="List only those files that match the pattern given (can be specified multiple times).",
    )
    parser.add_argument(
        "-E",
        "--exclude-pattern",
        dest="exclude_patterns",
        metavar="PATTERN",
        action="append",
        default=[],
        help=(
            "Do not list files or directories that match the given pattern "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-X",
        "--exclude-from",
        dest="exclude_files",
        metavar="FILE",
        type=Path,
        action="append",
        default=[],
        help="Read exclude patterns from a gitignore-style file (can be specified multiple times).",
    )
    parser.add_argument(
        "-i", "--ignore-case", dest="ignore_case", action="store_true", help="Ignore case when pattern matching."
    )
    parser.add_argument(
        "-L",
        "--level",
        dest="max_level",
        metavar="LEVEL",
        type=level_type,
        default=-1,
        help="Descend only LEVEL directories deep; 0 lists the top level only (default: -1, unlimited).",
    )
    parser.add_argument(
        "-f",
        "--fullpath",
        dest="print_fullpath",
        action="store_true",
        help="Print the path of each entry relative to the working directory.",
    )
    parser.add_argument(
        "-s", "--size", dest="show_size", action="store_true", help="Print the size in bytes of each entry."
    )
    parser.add_argument(
        "-H",
        "--human-readable",
        dest="human_readable",
        action="store_true",
        help="Print the size in a more human readable way (implies -s).",
    )
    parser.add_argument(
        "-q",
        "--replace-nonprintable",
        dest="replace_nonprintable",
        action="store_true",
        help="Print non-printable characters as '?'.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output to file instead of stdout.",
    )
    parser.add_argument(
        "-A", "--ascii", dest="ascii_glyphs", action="store_true", help="Print ASCII only indentation lines."
    )
    parser.add_argument("-n", "--no-colors", dest="no_colors", action="store_true", help="Turn colorization off.")
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn"],
        default="ignore",
        help="How to report directories that cannot be read (default: ignore).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle and applies
    implied options.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
        FileNotFoundError: If the root path doesn't exist.
        NotADirectoryError: If the root path isn't a directory.
    """
    if args.human_readable:
        args.show_size = True

    root = Path(args.path)
    if not root.exists():
        raise FileNotFoundError(f"Root path does not exist: {args.path}")
    if not root.is_dir():
        raise NotADirectoryError(f"Root path is not a directory: {args.path}")

    if args.output is not None and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")


def build_filter_spec(args: argparse.Namespace) -> FilterSpec:
    """Compile the filter configuration from parsed arguments.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The FilterSpec for the run.

    Raises:
        InvalidPatternError: If any pattern cannot be compiled.
        ConfigurationError: If a pattern file cannot be read.
    """
    include = PatternSet(args.include_patterns, ignore_case=args.ignore_case)

    exclude = PatternSet(args.exclude_patterns, ignore_case=args.ignore_case)
    if args.exclude_files:
        exclude.load_patterns(args.exclude_files)

    return FilterSpec(include, exclude, show_hidden=args.show_hidden, dirs_only=args.dirs_only)


def select_glyphs(args: argparse.Namespace) -> GlyphSet:
    """Pick the glyph set requested on the command line."""
    return get_glyph_set(ascii_only=args.ascii_glyphs)
