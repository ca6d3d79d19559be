"""Indentation state for drawing tree branches at arbitrary depth."""

from contextlib import contextmanager
from typing import Iterator, List

from aldar.glyphs import GlyphSet


class IndentStack:
    """Stack of per-depth indentation fragments.

    One fragment is pushed for every directory the walker descends into and popped
    when that directory's subtree is complete, so the stack depth always equals the
    recursion depth. A rendered line's prefix is the concatenation of all fragments
    followed by the branch glyph matching the entry's position among its siblings.

    Fragment widths are derived from the glyph set measured once at construction:
    a last sibling contributes blank padding as wide as the ``last`` glyph plus one
    space, any other sibling contributes the ``pipe`` glyph padded to the width of
    the ``item`` glyph plus one space.

    Attributes:
        glyphs (GlyphSet): The active glyph set.

    Example:
        >>> from aldar.glyphs import UNICODE_GLYPHSET
        >>> stack = IndentStack(UNICODE_GLYPHSET)
        >>> stack.prefix(is_last=False)
        '├──'
        >>> with stack.frame(is_last=False):
        ...     stack.prefix(is_last=True)
        '│   └──'
        >>> stack.depth
        0
    """

    def __init__(self, glyphs: GlyphSet) -> None:
        self.glyphs = glyphs
        self._last_fragment = " " * (glyphs.last_width + 1)
        self._pipe_fragment = glyphs.pipe + " " * (glyphs.item_width + 1 - len(glyphs.pipe))
        self._frames: List[str] = []

    @property
    def depth(self) -> int:
        return len(self._frames)

    def push(self, is_last: bool) -> None:
        """Open a frame for a directory being descended into.

        Args:
            is_last: Whether the directory is the last entry of its parent's listing.
        """
        self._frames.append(self._last_fragment if is_last else self._pipe_fragment)

    def pop(self) -> str:
        """Close the innermost frame.

        Returns:
            The fragment that was removed.

        Raises:
            IndexError: If no frame is open.
        """
        if not self._frames:
            raise IndexError("pop from empty IndentStack")
        return self._frames.pop()

    @contextmanager
    def frame(self, is_last: bool) -> Iterator[None]:
        """Push a frame for the duration of a ``with`` block and always pop it."""
        self.push(is_last)
        try:
            yield
        finally:
            self.pop()

    def prefix(self, is_last: bool) -> str:
        """Build the prefix for a line at the current depth.

        Args:
            is_last: Whether the entry is the last of its parent's filtered listing.

        Returns:
            The open fragments followed by the terminal branch glyph.
        """
        branch = self.glyphs.last if is_last else self.glyphs.item
        return "".join(self._frames) + branch
