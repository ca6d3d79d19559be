"""Unit tests for the glyph sets."""

import pytest

from aldar.glyphs import ASCII_GLYPHSET, UNICODE_GLYPHSET, GlyphSet, get_glyph_set


def test_unicode_glyphset_tokens():
    """Test the Unicode box-drawing tokens."""
    assert UNICODE_GLYPHSET.pipe == "│"
    assert UNICODE_GLYPHSET.item == "├──"
    assert UNICODE_GLYPHSET.last == "└──"


def test_ascii_glyphset_tokens():
    """Test the ASCII fallback tokens."""
    assert ASCII_GLYPHSET.pipe == "|"
    assert ASCII_GLYPHSET.item == "|--"
    assert ASCII_GLYPHSET.last == "`--"


def test_widths_are_measured_in_characters():
    """Test that widths count characters, not encoded bytes."""
    assert UNICODE_GLYPHSET.item_width == 3
    assert UNICODE_GLYPHSET.last_width == 3
    wide = GlyphSet("wide", "┃", "┣━━━", "┗━━━━")
    assert wide.item_width == 4
    assert wide.last_width == 5


def test_get_glyph_set():
    """Test selecting the active glyph set."""
    assert get_glyph_set() is UNICODE_GLYPHSET
    assert get_glyph_set(ascii_only=True) is ASCII_GLYPHSET


def test_glyphset_is_immutable():
    """Test that glyph tokens cannot be replaced after construction."""
    with pytest.raises(AttributeError):
        UNICODE_GLYPHSET.pipe = "|"


@pytest.mark.parametrize(
    "pipe, item, last",
    [
        ("", "|--", "`--"),
        ("|", "|-\n-", "`--"),
        ("||||", "|--", "`--"),
    ],
)
def test_glyphset_rejects_invalid_tokens(pipe, item, last):
    """Test that empty, multi-line or misaligned tokens are rejected."""
    with pytest.raises(ValueError):
        GlyphSet("bad", pipe, item, last)


def test_glyphset_equality():
    """Test that glyph sets compare by their tokens."""
    assert GlyphSet("copy", "|", "|--", "`--") == ASCII_GLYPHSET
    assert ASCII_GLYPHSET != UNICODE_GLYPHSET
    assert len({ASCII_GLYPHSET, GlyphSet("copy", "|", "|--", "`--")}) == 1
