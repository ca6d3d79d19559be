"""Command-line interface for aldar.

This module provides the command-line interface for aldar, which prints the
contents of a directory as an indented tree. It handles argument parsing,
configuration errors, output redirection and interruption.

Key Features:
    - Unicode or ASCII tree drawing
    - Hidden file, include and exclude pattern filtering
    - Depth limiting
    - Size annotation in bytes or binary units
    - Colorized directories and executables on terminals
    - Output redirection to a file

Exit Codes:
    0: Successful completion
    1: Configuration or runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Unreadable directories are skipped without affecting the exit code.

Example:
    # Tree of a project, two levels deep, with sizes
    $ aldar -L 2 -H /path/to/project

    # Display version information
    $ aldar --version
"""

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from aldar.cli.argparser import build_filter_spec, create_parser, select_glyphs, validate_args
from aldar.cli.safe_writer import SafeWriter
from aldar.colors import colors_supported
from aldar.exceptions import ConfigurationError
from aldar.file_system_tree.permission_action import PermissionAction
from aldar.file_system_tree.tree_walker import TreeWalker


def format_errors(errors: Sequence[Tuple[str, str]]) -> List[str]:
    """Format skipped-directory records as warning lines.

    Example:
        >>> format_errors([("/srv/private", "Permission denied")])
        ['Warning: cannot read directory /srv/private: Permission denied']
    """
    return [f"Warning: cannot read directory {path}: {message}" for path, message in errors]


def build_walker(args: argparse.Namespace, colorize: bool) -> TreeWalker:
    """Create the tree walker described by parsed arguments.

    Raises:
        ConfigurationError: If the filter configuration is invalid.
    """
    return TreeWalker(
        args.path,
        filter_spec=build_filter_spec(args),
        glyphs=select_glyphs(args),
        max_level=args.max_level,
        print_fullpath=args.print_fullpath,
        show_size=args.show_size,
        human_readable=args.human_readable,
        replace_nonprintable=args.replace_nonprintable,
        colorize=colorize,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the aldar command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Configuration or runtime error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)
        permission_action = PermissionAction(args.permission_action)
        colorize = not args.no_colors and args.output is None and colors_supported()

        # All configuration is validated before the output target is touched
        walker = build_walker(args, colorize)
        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                for line in walker.walk():
                    safe_writer.write_line(line)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

        if permission_action == PermissionAction.WARN:
            for warning in format_errors(walker.stats.errors):
                print(warning, file=sys.stderr)

    except KeyboardInterrupt:
        sys.exit(130)
    except (ConfigurationError, ValueError, OSError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
