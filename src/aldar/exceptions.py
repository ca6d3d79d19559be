class ConfigurationError(Exception):
    """
    Base exception for fatal configuration problems detected before traversal begins.

    Configuration errors are reported once by the command-line interface, which then
    exits with a non-zero status. They are never raised from inside the traversal loop.

    Example:
        >>> error = ConfigurationError("Rules file not found: missing.ignore")
        >>> str(error)
        'Rules file not found: missing.ignore'
    """

    pass


class InvalidPatternError(ConfigurationError):
    """
    Exception raised when an include or exclude pattern cannot be compiled.

    Patterns are compiled once when the filter configuration is built, so a malformed
    pattern aborts the run before any directory is listed.

    Attributes:
        pattern (str): The offending pattern, exactly as supplied.
        reason (str): Why the pattern was rejected.

    Example:
        >>> error = InvalidPatternError("", "pattern is empty")
        >>> str(error)
        "Invalid pattern '': pattern is empty"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the rejected pattern.

        Args:
            pattern (str): The pattern that failed to compile.
            reason (str): Description of the failure.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class OutputTargetError(ConfigurationError):
    """
    Exception raised when the requested output file cannot be created.

    Attributes:
        path (str): Path of the output file.
        reason (str): Description of the failure, usually the OS error message.

    Example:
        >>> error = OutputTargetError("/no/such/dir/out.txt", "No such file or directory")
        >>> str(error)
        'Cannot write output file /no/such/dir/out.txt: No such file or directory'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write output file {path}: {reason}")
