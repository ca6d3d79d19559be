"""ANSI colorization of entry names by classification."""

import os
import sys
from typing import Optional, TextIO

from aldar.file_system_tree.file_entry import FileEntry

RESET = "\033[0m"
DIRECTORY_COLOR = "\033[1;34m"
EXECUTABLE_COLOR = "\033[1;32m"


def colorize_name(name: str, entry: FileEntry, enabled: bool = True) -> str:
    """Decorate a display name according to the kind of entry it belongs to.

    Directories are rendered bold blue and executable files bold green; every other
    entry is returned unchanged. The function is pure apart from the metadata reads
    performed by ``entry``.

    Args:
        name: The text to decorate, usually the entry's display name.
        entry: The classified entry the name belongs to.
        enabled: When False the name is returned untouched.

    Returns:
        The decorated name.
    """
    if not enabled:
        return name
    if entry.is_dir:
        return f"{DIRECTORY_COLOR}{name}{RESET}"
    if entry.is_executable:
        return f"{EXECUTABLE_COLOR}{name}{RESET}"
    return name


def colors_supported(stream: Optional[TextIO] = None) -> bool:
    """Check whether a stream should receive ANSI color sequences.

    Colors are used only for interactive terminals, and never when the ``NO_COLOR``
    environment variable is set.

    Args:
        stream: Stream to check. Defaults to ``sys.stdout``.

    Returns:
        True if color sequences should be emitted.
    """
    if os.environ.get("NO_COLOR"):
        return False
    stream = stream if stream is not None else sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False
