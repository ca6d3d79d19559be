"""Glyph sets used to draw the branches of a rendered tree."""

from typing import Any


class GlyphSet:
    """Immutable triple of tree-drawing tokens.

    A glyph set provides the three decorations needed to draw a tree: the vertical
    continuation shown for ancestors that still have siblings below them, the branch
    shown before a non-last sibling, and the branch shown before the last sibling.
    The character widths of the branches are measured once here, so the indentation
    engine never re-measures them per entry.

    Attributes:
        name (str): Short identifier of the glyph set.
        pipe (str): Vertical continuation token.
        item (str): Branch token for a sibling that is not last.
        last (str): Branch token for the last sibling.
        item_width (int): Character count of ``item``.
        last_width (int): Character count of ``last``.

    Example:
        >>> UNICODE_GLYPHSET.item
        '├──'
        >>> ASCII_GLYPHSET.last
        '`--'
        >>> UNICODE_GLYPHSET.last_width
        3
    """

    __slots__ = ("_name", "_pipe", "_item", "_last", "_item_width", "_last_width")

    def __init__(self, name: str, pipe: str, item: str, last: str) -> None:
        """Initialize a GlyphSet.

        Args:
            name: Short identifier of the glyph set.
            pipe: Vertical continuation token.
            item: Branch token for a non-last sibling.
            last: Branch token for the last sibling.

        Raises:
            ValueError: If any token is empty, spans several lines, or is not printable.
        """
        for label, token in (("pipe", pipe), ("item", item), ("last", last)):
            if not token or not token.isprintable():
                raise ValueError(f"Glyph {label!r} must be a non-empty printable token, got {token!r}")
        if len(pipe) > len(item):
            raise ValueError("Glyph 'pipe' cannot be wider than glyph 'item'")

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_pipe", pipe)
        object.__setattr__(self, "_item", item)
        object.__setattr__(self, "_last", last)
        object.__setattr__(self, "_item_width", len(item))
        object.__setattr__(self, "_last_width", len(last))

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def pipe(self) -> str:
        return self._pipe

    @property
    def item(self) -> str:
        return self._item

    @property
    def last(self) -> str:
        return self._last

    @property
    def item_width(self) -> int:
        return self._item_width

    @property
    def last_width(self) -> int:
        return self._last_width

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GlyphSet):
            return False
        return (self.pipe, self.item, self.last) == (other.pipe, other.item, other.last)

    def __hash__(self) -> int:
        return hash((self.pipe, self.item, self.last))

    def __repr__(self) -> str:
        return f"GlyphSet(name={self.name!r}, pipe={self.pipe!r}, item={self.item!r}, last={self.last!r})"


UNICODE_GLYPHSET = GlyphSet("unicode", "│", "├──", "└──")

ASCII_GLYPHSET = GlyphSet("ascii", "|", "|--", "`--")


def get_glyph_set(ascii_only: bool = False) -> GlyphSet:
    """Select the active glyph set for a run.

    Args:
        ascii_only: Use the ASCII fallback instead of Unicode box-drawing characters.

    Returns:
        One of the two built-in glyph sets.

    Example:
        >>> get_glyph_set(ascii_only=True) is ASCII_GLYPHSET
        True
    """
    return ASCII_GLYPHSET if ascii_only else UNICODE_GLYPHSET
