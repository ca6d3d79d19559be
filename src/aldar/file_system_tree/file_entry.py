"""Classification of raw directory entries encountered during traversal."""

import os
import stat
from pathlib import Path
from typing import Optional

from aldar.types import EntryKind

PLACEHOLDER_NAME = "?"

_IS_WINDOWS = os.name == "nt"
_DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"


def is_representable(name: str) -> bool:
    """Check whether a name can be shown as text.

    Names decoded from undecodable bytes carry lone surrogates and cannot be encoded
    back to UTF-8 for display.

    Example:
        >>> is_representable("main.py")
        True
        >>> is_representable("bad\\udcff")
        False
    """
    if not name:
        return False
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def replace_nonprintable(name: str) -> str:
    """Replace every non-printable character of a name with '?'.

    Example:
        >>> replace_nonprintable("tab\\there")
        'tab?here'
    """
    return "".join(char if char.isprintable() else PLACEHOLDER_NAME for char in name)


class FileEntry:
    """A classified view of one ``os.DirEntry``.

    Answers whether the entry is a directory, hidden or executable, how large it is,
    and how it should be named for display. Every fact is read from the filesystem on
    demand (``os.DirEntry`` caches its own stat results for the lifetime of the entry)
    and none of the queries raise: metadata failures degrade to conservative defaults.

    Symbolic links are never followed. A link pointing at a directory is classified
    as a file, which keeps traversal free of link cycles.

    Attributes:
        name (str): The bare file name.
        path (str): The entry's path as produced by ``os.scandir``.

    Example:
        >>> import os, tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     os.mkdir(os.path.join(tmp, "docs"))
        ...     [entry] = [FileEntry(e) for e in os.scandir(tmp)]
        ...     (entry.name, entry.is_dir, entry.kind)
        ('docs', True, <EntryKind.DIRECTORY: 'directory'>)
    """

    def __init__(self, dir_entry: "os.DirEntry[str]") -> None:
        """Wrap a raw directory entry.

        Args:
            dir_entry: An entry produced by ``os.scandir``.
        """
        self._entry = dir_entry
        self.name = dir_entry.name
        self.path = dir_entry.path

    def _stat(self) -> Optional[os.stat_result]:
        try:
            return self._entry.stat(follow_symlinks=False)
        except OSError:
            return None

    @property
    def is_dir(self) -> bool:
        try:
            return self._entry.is_dir(follow_symlinks=False)
        except OSError:
            return False

    @property
    def kind(self) -> EntryKind:
        return EntryKind.DIRECTORY if self.is_dir else EntryKind.FILE

    @property
    def is_hidden(self) -> bool:
        """Whether the entry is hidden by platform convention.

        On POSIX a leading dot hides an entry. On Windows the hidden attribute bit
        is consulted as well.
        """
        if self.name.startswith("."):
            return True
        if _IS_WINDOWS:
            stat_info = self._stat()
            attributes = getattr(stat_info, "st_file_attributes", 0) if stat_info else 0
            return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)
        return False

    @property
    def is_executable(self) -> bool:
        """Whether the entry is an executable file.

        Directories are never executable. On POSIX any execute permission bit counts;
        on Windows the extension is checked against ``PATHEXT``.
        """
        if self.is_dir:
            return False
        if _IS_WINDOWS:
            extensions = os.environ.get("PATHEXT", _DEFAULT_PATHEXT).lower().split(";")
            return os.path.splitext(self.name)[1].lower() in extensions
        stat_info = self._stat()
        if stat_info is None:
            return False
        return bool(stat_info.st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))

    @property
    def size(self) -> int:
        """Size in bytes, or 0 if metadata is unavailable."""
        stat_info = self._stat()
        return stat_info.st_size if stat_info is not None else 0

    def full_rel_path(self, base: str) -> str:
        """Compute the entry's path relative to a canonical base directory.

        The entry path is canonicalized, the base prefix is stripped together with one
        leading separator. If canonicalization fails or the canonical path does not
        live under ``base`` (for instance a symlink pointing elsewhere), the bare file
        name is returned instead, or '?' if the name itself cannot be shown.

        Args:
            base: Canonical path of the directory the walk started from.

        Returns:
            The relative path for display.
        """
        try:
            canonical = str(Path(self.path).resolve(strict=True))
        except (OSError, RuntimeError):
            return self._fallback_name()

        if not canonical.startswith(base):
            return self._fallback_name()
        relative = canonical[len(base) :]
        if relative.startswith(os.sep):
            relative = relative[len(os.sep) :]
        elif relative and not base.endswith(os.sep):
            # base was a sibling sharing a textual prefix, e.g. /srv/app vs /srv/application
            return self._fallback_name()

        if not is_representable(relative):
            return self._fallback_name()
        return relative

    def _fallback_name(self) -> str:
        return self.name if is_representable(self.name) else PLACEHOLDER_NAME

    def display_name(self, base: Optional[str] = None) -> str:
        """Name shown for the entry in the rendered tree.

        Args:
            base: When given, show the path relative to this canonical directory.

        Returns:
            The display name, or '?' if it cannot be represented.
        """
        if base is not None:
            return self.full_rel_path(base)
        return self._fallback_name()

    def __repr__(self) -> str:
        return f"FileEntry(path={self.path!r}, kind={self.kind.value})"
