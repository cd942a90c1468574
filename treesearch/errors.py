"""Exceptions raised by treesearch."""


class SearchError(Exception):
    """Base class for errors that abort a search."""


class InvalidRootError(SearchError):
    """Raised when a search root does not resolve to a directory."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"Not a directory: {root}")


class InvalidPatternError(SearchError):
    """Raised when the search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
