class PatternParseError(Exception):
    """
    Exception raised when an exception pattern cannot be compiled.

    Only ``regex:`` patterns can fail to parse; exact and wildcard patterns always
    succeed. The error is meant to be reported and the offending pattern dropped,
    not to abort the run.

    Attributes:
        pattern (str): The raw pattern string as given by the caller.
        message (str): The message produced by the regular expression compiler.

    Example:
        >>> error = PatternParseError("regex:[", "unterminated character set at position 0")
        >>> error.pattern
        'regex:['
        >>> str(error)
        "Invalid exception pattern 'regex:[': unterminated character set at position 0"
    """

    def __init__(self, pattern: str, message: str) -> None:
        """
        Initialize the exception with the offending pattern and the compiler message.

        Args:
            pattern (str): The raw pattern string, including any ``regex:`` prefix.
            message (str): The underlying parser message.
        """
        self.pattern = pattern
        self.message = message
        super().__init__(f"Invalid exception pattern '{pattern}': {message}")
