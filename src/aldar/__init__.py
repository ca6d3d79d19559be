"""Directory tree visualization utilities.

This package renders a directory hierarchy as an indented, glyph-decorated
text tree, with support for pattern filtering, depth limiting, size annotation
and colorized classification of entries.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("aldar")
except PackageNotFoundError:
    __version__ = "unknown"
