"""Filtering rules deciding which entries appear in the tree."""

from .filter_spec import FilterSpec
from .pattern_set import PatternSet

__all__ = [
    "FilterSpec",
    "PatternSet",
]
