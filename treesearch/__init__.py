"""treesearch - Recursive, symlink-aware, deduplicated search of directory trees."""

__version__ = "0.1.0"

from treesearch.errors import InvalidPatternError, InvalidRootError, SearchError
from treesearch.search import FileType, Traverser, find_by_name

__all__ = [
    "find_by_name",
    "Traverser",
    "FileType",
    "SearchError",
    "InvalidRootError",
    "InvalidPatternError",
]
