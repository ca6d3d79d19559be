from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds distinguished during traversal.

    Symbolic links are not followed, so a link is always classified as a FILE
    even when its target is a directory.

    Attributes:
        FILE: Regular file (or anything that is not a directory)
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
