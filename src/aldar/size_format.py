"""Formatting of byte counts for the optional size column of the tree."""

from typing import List, Tuple

PLAIN_WIDTH = 11
HUMAN_WIDTH = 8

# Largest unit first so the first threshold reached wins
UNITS: List[Tuple[str, int]] = [
    ("PB", 1 << 50),
    ("TB", 1 << 40),
    ("GB", 1 << 30),
    ("MB", 1 << 20),
    ("KB", 1 << 10),
]

BYTE_UNIT = "B"


def _exponential(value: float, unit: str, width: int) -> str:
    """Render ``value`` in exponential notation, reducing precision until it fits.

    Falls back to zero decimal places if even that exceeds ``width``.
    """
    for precision in (2, 1, 0):
        text = f"{value:.{precision}e}{unit}"
        if len(text) <= width:
            return text
    return text


def _human_value(size: int) -> Tuple[float, str]:
    for unit, threshold in UNITS:
        if size >= threshold:
            return size / threshold, unit
    return float(size), ""


def format_size(size: int, human_readable: bool = False) -> str:
    """Convert a byte count to a fixed-width bracketed display string.

    In plain mode the decimal byte count is right-aligned in an 11-character field.
    In human-readable mode the largest binary unit (KB = 2**10 up to PB = 2**50) whose
    threshold the raw byte count reaches is selected; whole values are shown without
    decimals and anything else with two, right-aligned in an 8-character field. Text
    too wide for its field switches to exponential notation followed by a unit.

    Args:
        size: Number of bytes. Negative values are treated as zero.
        human_readable: Select the unit-based representation.

    Returns:
        The size enclosed in square brackets, without surrounding spaces.

    Example:
        >>> format_size(123)
        '[        123]'
        >>> format_size(1023, human_readable=True)
        '[    1023]'
        >>> format_size(1024, human_readable=True)
        '[     1KB]'
        >>> format_size(1536, human_readable=True)
        '[  1.50KB]'
        >>> format_size(123456789012)
        '[  1.23e+11B]'
    """
    size = max(int(size), 0)

    if not human_readable:
        text = str(size)
        if len(text) > PLAIN_WIDTH:
            text = _exponential(float(size), BYTE_UNIT, PLAIN_WIDTH)
        return f"[{text:>{PLAIN_WIDTH}}]"

    value, unit = _human_value(size)
    if value.is_integer():
        text = f"{int(value)}{unit}"
    else:
        text = f"{value:.2f}{unit}"
    if len(text) > HUMAN_WIDTH:
        text = _exponential(value, unit or BYTE_UNIT, HUMAN_WIDTH)
    return f"[{text:>{HUMAN_WIDTH}}]"


def size_segment(size: int, human_readable: bool = False) -> str:
    """Return the size column as it appears in a rendered line, with its leading space.

    Example:
        >>> size_segment(10)
        ' [         10]'
    """
    return " " + format_size(size, human_readable)
