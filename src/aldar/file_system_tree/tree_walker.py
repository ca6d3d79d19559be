"""Depth-first traversal that renders a directory hierarchy as a text tree.

This module provides the TreeWalker class, which ties together entry
classification, filtering, sibling ordering, indentation and size formatting
to emit the tree one line at a time.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from aldar.colors import colorize_name
from aldar.file_system_tree.file_entry import FileEntry, replace_nonprintable
from aldar.file_system_tree.indent_stack import IndentStack
from aldar.file_system_tree.sort_policy import sort_entries
from aldar.filter_rules.filter_spec import FilterSpec
from aldar.glyphs import UNICODE_GLYPHSET, GlyphSet
from aldar.size_format import size_segment
from aldar.types import EntryKind, PathType

UNLIMITED_LEVEL = -1


class RunStats:
    """Counters collected during one walk.

    Attributes:
        directories_visited (int): Directories rendered, excluding the root.
        files_visited (int): Files rendered.
        errors (List[Tuple[str, str]]): ``(path, message)`` for every directory that
            could not be listed and was skipped.
    """

    def __init__(self) -> None:
        self.directories_visited = 0
        self.files_visited = 0
        self.errors: List[Tuple[str, str]] = []

    def summary(self) -> str:
        """Summary line printed after the tree.

        Example:
            >>> stats = RunStats()
            >>> stats.directories_visited, stats.files_visited = 1, 2
            >>> stats.summary()
            '1 directories, 2 files'
        """
        return f"{self.directories_visited} directories, {self.files_visited} files"

    def __repr__(self) -> str:
        return (
            f"RunStats(directories_visited={self.directories_visited}, "
            f"files_visited={self.files_visited}, errors={len(self.errors)})"
        )


class TreeWalker:
    """Recursive depth-first renderer of a directory tree.

    The walker visits the root at depth 0. For every directory it lists the children,
    keeps those accepted by the filter, orders them directories first and renders one
    line per child. A child directory is descended into while the depth limit allows,
    with an indentation frame pushed for exactly the duration of its subtree.

    A directory that cannot be listed (permission denied, transient I/O failure)
    contributes no children; the failure is recorded in ``stats.errors`` and the walk
    continues with its siblings. Output is produced lazily, so lines can be written
    as soon as they are rendered.

    Each rendered entry line has the form ``<prefix>[ [<size>]] <name>``. The first
    line is the root path as given and the last two are a blank line and the summary.

    Attributes:
        root (Path): Directory the walk starts from.
        filter_spec (FilterSpec): Entry acceptance policy.
        glyphs (GlyphSet): Active glyph set.
        max_level (int): Deepest directory level to expand, or -1 for unlimited.
        stats (RunStats): Counters of the most recent walk.

    Example:
        >>> walker = TreeWalker("src", max_level=1)  # doctest: +SKIP
        >>> for line in walker.walk():  # doctest: +SKIP
        ...     print(line)
        src
        └── aldar
            ├── cli
            └── glyphs.py
        <BLANKLINE>
        2 directories, 1 files
    """

    def __init__(
        self,
        root: PathType = ".",
        *,
        filter_spec: Optional[FilterSpec] = None,
        glyphs: GlyphSet = UNICODE_GLYPHSET,
        max_level: int = UNLIMITED_LEVEL,
        print_fullpath: bool = False,
        show_size: bool = False,
        human_readable: bool = False,
        replace_nonprintable: bool = False,
        colorize: bool = False,
    ) -> None:
        """Initialize a TreeWalker.

        Args:
            root: Directory to render. Can be any path-like object.
            filter_spec: Entry acceptance policy. Defaults to hiding hidden entries only.
            glyphs: Glyph set used to draw branches.
            max_level: Deepest level to expand; -1 expands everything, 0 lists only the
                root's children.
            print_fullpath: Show each entry's path relative to the root instead of its name.
            show_size: Prefix each name with its size column.
            human_readable: Use binary units in the size column.
            replace_nonprintable: Show non-printable characters in names as '?'.
            colorize: Decorate directory and executable names with ANSI colors.

        Raises:
            ValueError: If max_level is below -1.
        """
        if max_level < UNLIMITED_LEVEL:
            raise ValueError(f"max_level must be -1 (unlimited) or non-negative, got {max_level}")

        self.root_display = os.fspath(root)
        self.root = Path(root)
        self.filter_spec = filter_spec if filter_spec is not None else FilterSpec()
        self.glyphs = glyphs
        self.max_level = max_level
        self.print_fullpath = print_fullpath
        self.show_size = show_size
        self.human_readable = human_readable
        self.replace_nonprintable = replace_nonprintable
        self.colorize = colorize
        self.stats = RunStats()
        self.indent = IndentStack(glyphs)
        self._base: Optional[str] = None

    def walk(self) -> Iterator[str]:
        """Render the tree one line at a time.

        Every call starts a fresh run with new statistics and an empty indent stack.

        Yields:
            The root line, one line per accepted entry, a blank line and the summary.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        if not self.root.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_display}")
        if not self.root.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_display}")

        self.stats = RunStats()
        self.indent = IndentStack(self.glyphs)
        self._base = str(self.root.resolve()) if self.print_fullpath else None

        yield self.root_display
        yield from self._visit(self.root, "", 0)
        yield ""
        yield self.stats.summary()

    def list_children(self, directory: Path, rel_path: str) -> List[Tuple[FileEntry, str]]:
        """Fetch the filtered and sorted children of a directory.

        Args:
            directory: Directory to list.
            rel_path: Its root-relative, forward-slash path ('' for the root).

        Returns:
            Pairs of (entry, root-relative path) in rendering order. Empty if the
            directory is excluded as a whole or cannot be listed.
        """
        if self.filter_spec.prunes_directory(rel_path):
            return []

        try:
            with os.scandir(directory) as iterator:
                entries = [FileEntry(dir_entry) for dir_entry in iterator]
        except OSError as e:
            self.stats.errors.append((str(directory), e.strerror or str(e)))
            return []

        children = []
        for entry in sort_entries(entries):
            child_rel_path = f"{rel_path}/{entry.name}" if rel_path else entry.name
            if self.filter_spec.accepts(entry, child_rel_path):
                children.append((entry, child_rel_path))
        return children

    def render_line(self, entry: FileEntry, is_last: bool) -> str:
        """Render the line for one entry at the current depth."""
        prefix = self.indent.prefix(is_last)

        name = entry.display_name(self._base)
        if self.replace_nonprintable:
            name = replace_nonprintable(name)
        name = colorize_name(name, entry, self.colorize)

        size = size_segment(entry.size, self.human_readable) if self.show_size else ""
        return f"{prefix}{size} {name}"

    def _should_descend(self, depth: int) -> bool:
        return self.max_level == UNLIMITED_LEVEL or depth < self.max_level

    def _visit(self, directory: Path, rel_path: str, depth: int) -> Iterator[str]:
        children = self.list_children(directory, rel_path)

        for index, (entry, child_rel_path) in enumerate(children):
            is_last = index == len(children) - 1
            yield self.render_line(entry, is_last)

            if entry.kind is EntryKind.FILE:
                self.stats.files_visited += 1
                continue

            self.stats.directories_visited += 1
            if self._should_descend(depth):
                with self.indent.frame(is_last):
                    yield from self._visit(Path(entry.path), child_rel_path, depth + 1)
