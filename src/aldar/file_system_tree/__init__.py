"""Directory traversal and tree rendering.

This package classifies directory entries, orders siblings, tracks the per-depth
indentation of the rendered tree, and drives the depth-first walk that emits one
line per entry.
"""
