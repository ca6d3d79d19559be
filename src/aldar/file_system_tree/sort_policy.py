"""Ordering of sibling entries within one directory listing."""

from typing import Iterable, List, Tuple

from aldar.file_system_tree.file_entry import FileEntry


def sort_key(entry: FileEntry) -> Tuple[bool, str]:
    """Key placing directories before files, then ordering by full path."""
    return (not entry.is_dir, entry.path)


def sort_entries(entries: Iterable[FileEntry]) -> List[FileEntry]:
    """Return sibling entries in rendering order.

    Any directory sorts before any file regardless of name. Entries of the same kind
    are ordered lexicographically by their full path, which is unique within one
    listing, so the order is total.

    Args:
        entries: Entries of a single directory.

    Returns:
        A new, sorted list.
    """
    return sorted(entries, key=sort_key)
