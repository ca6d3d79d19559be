"""Case-aware sets of gitignore-style patterns."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from aldar.exceptions import ConfigurationError, InvalidPatternError
from aldar.types import PathType


class PatternSet:
    """A compiled set of gitignore-style patterns used to include or exclude entries.

    Patterns follow standard .gitignore syntax via the pathspec library: basic globs
    (``*``, ``?``, ``[abc]``), directory-only patterns ending in ``/``, negation with
    ``!``, and ``**`` matching. A pattern without a slash matches a name at any depth,
    so ``*.txt`` matches both ``a.txt`` and ``docs/a.txt``.

    Every pattern is compiled as soon as it is added, so a malformed pattern is
    reported during configuration rather than while walking the tree. With
    ``ignore_case`` both the patterns and the candidate paths are case-folded.

    Attributes:
        ignore_case (bool): Whether matching ignores case.
        spec (GitIgnoreSpec): Compiled pattern matcher.

    Example:
        >>> patterns = PatternSet(["*.log", "node_modules/"])
        >>> patterns.matches("server.log")
        True
        >>> patterns.matches("node_modules/")
        True
        >>> patterns.matches("src/main.py")
        False
        >>> PatternSet(["*.TXT"], ignore_case=True).matches("notes.txt")
        True

    Note:
        Paths given to matches() must be relative to the walk's root and use forward
        slashes; directories carry a trailing slash.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None, ignore_case: bool = False) -> None:
        """Initialize a PatternSet.

        Args:
            patterns: Patterns to compile immediately.
            ignore_case: Match without regard to case.

        Raises:
            InvalidPatternError: If any pattern cannot be compiled.
        """
        self.ignore_case = ignore_case
        self.spec = GitIgnoreSpec.from_lines([])
        self._patterns: List[str] = []
        self._folded: List[str] = []

        if patterns is not None:
            for pattern in patterns:
                self.add_pattern(pattern)

    @property
    def patterns(self) -> List[str]:
        """The source patterns in the order they were added."""
        return list(self._patterns)

    def has_patterns(self) -> bool:
        return bool(self._patterns)

    def _fold(self, text: str) -> str:
        return text.casefold() if self.ignore_case else text

    def add_pattern(self, pattern: str) -> None:
        """Compile and add a single pattern.

        Args:
            pattern: A gitignore-style pattern, e.g. "*.pyc", "build/" or "!keep.log".

        Raises:
            InvalidPatternError: If the pattern is blank, is a comment, or is rejected
                by the pattern compiler.

        Example:
            >>> patterns = PatternSet()
            >>> patterns.add_pattern("")
            Traceback (most recent call last):
            ...
            aldar.exceptions.InvalidPatternError: Invalid pattern '': pattern is empty
        """
        if not pattern.strip():
            raise InvalidPatternError(pattern, "pattern is empty")
        if pattern.lstrip().startswith("#"):
            raise InvalidPatternError(pattern, "pattern is a comment and matches nothing")

        try:
            compiled = GitIgnoreSpec.from_lines([self._fold(pattern)]).patterns
        except ValueError as e:
            raise InvalidPatternError(pattern, str(e)) from e

        if not compiled or all(p.include is None for p in compiled):
            raise InvalidPatternError(pattern, "pattern matches nothing")

        # Recompile the whole set so the matcher sees patterns in insertion order
        self._folded.append(self._fold(pattern))
        self._patterns.append(pattern)
        self.spec = GitIgnoreSpec.from_lines(self._folded)

    def load_patterns(self, pattern_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load patterns from one or more gitignore-style files.

        Blank lines and comment lines are skipped; every other line is compiled with
        add_pattern().

        Args:
            pattern_files: Path(s) to pattern files.

        Raises:
            ConfigurationError: If a file does not exist or cannot be read.
            InvalidPatternError: If any line holds a malformed pattern.
        """
        if isinstance(pattern_files, (str, PathLike)):
            pattern_files = [pattern_files]

        for pattern_file in pattern_files:
            path = Path(pattern_file)
            if not path.is_file():
                raise ConfigurationError(f"Pattern file not found: {path}")
            try:
                lines = path.read_text(encoding="utf-8").splitlines()
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigurationError(f"Cannot read pattern file {path}: {e}") from e

            for line in lines:
                if not line.strip() or line.lstrip().startswith("#"):
                    continue
                self.add_pattern(line)

    def matches(self, path: str) -> bool:
        """Check a root-relative path against the compiled patterns.

        Later patterns override earlier ones, so a negated pattern can re-include a
        path matched before it.

        Args:
            path: Root-relative, forward-slash path; directories end with '/'.

        Returns:
            True if the path is matched by the set.
        """
        return bool(self.spec.match_file(self._fold(path)))

    def matches_name(self, name: str) -> bool:
        """Check a bare file name against the compiled patterns.

        The name is matched on its own, without its parent directories, so a pattern
        naming a directory never admits the files below it.

        Example:
            >>> patterns = PatternSet(["docs", "*.md"])
            >>> patterns.matches_name("README.md")
            True
            >>> patterns.matches("docs/setup.py"), patterns.matches_name("setup.py")
            (True, False)
        """
        return self.matches(name)
