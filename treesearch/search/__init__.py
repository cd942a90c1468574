"""Search module for directory traversal."""

from .filesystem import EntryKind, FileIdentity, classify, list_entries
from .models import FileType
from .progress import ProgressReporter, SearchStats
from .traverser import Traverser, find_by_name

__all__ = [
    "Traverser",
    "find_by_name",
    "FileType",
    "FileIdentity",
    "EntryKind",
    "classify",
    "list_entries",
    "ProgressReporter",
    "SearchStats",
]
