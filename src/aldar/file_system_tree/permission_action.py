"""Permission action enum for reporting unreadable directories during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """How unreadable subtrees are surfaced once traversal has finished.

    Unreadable directories never abort a walk; they are skipped and recorded in the
    run statistics either way.

    Values:
        IGNORE: Skip inaccessible directories silently (default behavior)
        WARN: Skip them and report each one on stderr after the tree is printed
    """

    IGNORE = "ignore"
    WARN = "warn"
