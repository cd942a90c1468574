"""Symlink-aware, deduplicating search over directory trees."""

import logging
import os
import re
from collections import deque
from collections.abc import Iterable, Sequence

from treesearch.errors import InvalidPatternError, InvalidRootError
from treesearch.search.filesystem import (
    Entry,
    EntryKind,
    FileIdentity,
    directory_identity,
    list_entries,
)
from treesearch.search.models import FileType
from treesearch.search.progress import ProgressReporter, SearchStats

logger = logging.getLogger(__name__)

PathArg = str | os.PathLike[str]


class Traverser:
    """Walks directory trees breadth-first and collects paths matching a pattern.

    Symlinked directories are followed; each directory is scanned at most
    once, keyed by its device and inode, so symlink cycles terminate. A file
    reachable through several hard or symbolic links is reported once, under
    whichever of its paths matched last.

    The pattern is searched against the whole joined path (parent directory
    plus entry name), not the bare entry name. A pattern can therefore match
    a component of a root or an ancestor directory.
    """

    def __init__(self, progress: ProgressReporter | None = None):
        self.progress = progress
        self.stats = SearchStats()

    def search(
        self,
        roots: Sequence[PathArg],
        pattern: str | re.Pattern[str],
        file_type: FileType | str = FileType.ANY,
    ) -> list[str]:
        """Search ``roots`` for paths matching ``pattern``.

        Args:
            roots: Directories (or symlinks to directories) to search.
            pattern: Regular expression, or a compiled pattern.
            file_type: ``dir``, ``file`` or ``any``.

        Returns:
            Matching paths, one per filesystem object, sorted as strings.

        Raises:
            InvalidPatternError: If ``pattern`` does not compile.
            InvalidRootError: If any root is not a directory.
        """
        regex = compile_pattern(pattern)
        file_type = FileType(file_type)
        directories = _validate_roots(roots)

        self.stats = SearchStats()
        if self.progress:
            self.progress.reset()
        visited: dict[FileIdentity, str] = {}
        matches: dict[FileIdentity, str] = {}
        worklist = deque(directories)

        while worklist:
            directory = worklist.popleft()

            identity = directory_identity(directory)
            if identity is None:
                logger.warning("No longer a directory, skipping: %s", directory)
                self.stats.skipped_directories += 1
                continue
            if identity in visited:
                logger.debug("Already visited %s as %s", directory, visited[identity])
                continue
            visited[identity] = directory

            entries = list_entries(directory)
            subdirs = [e for e in entries if e.kind is EntryKind.DIRECTORY]
            worklist.extend(e.path for e in subdirs if e.identity not in visited)

            current = Entry(path=directory, kind=EntryKind.DIRECTORY, identity=identity)
            for candidate in _candidates(current, entries, subdirs, file_type):
                if regex.search(candidate.path):
                    matches[candidate.identity] = candidate.path

            self.stats.directories_scanned += 1
            self.stats.entries_seen += len(entries)
            self.stats.matches = len(matches)
            if self.progress:
                self.progress.report_if_needed(self.stats, directory)

        self.stats.finish()

        logger.debug(
            "Searched %d directories, %d matches in %.2fs",
            self.stats.directories_scanned,
            self.stats.matches,
            self.stats.elapsed_seconds,
        )
        return sorted(set(matches.values()))


def find_by_name(
    roots: Sequence[PathArg],
    pattern: str | re.Pattern[str],
    file_type: FileType | str = FileType.ANY,
) -> list[str]:
    """Recursively search ``roots`` for files and/or directories matching ``pattern``.

    Examples::

        # directories ending in ".git" under /usr/local/share
        find_by_name(["/usr/local/share"], r".git$", "dir")

        # files with "needle" in their path under two roots
        find_by_name(["/usr/local/haystack", "/etc"], "needle", "file")
    """
    return Traverser().search(roots, pattern, file_type)


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def _validate_roots(roots: Iterable[PathArg]) -> list[str]:
    directories = [os.fspath(root) for root in roots]
    for directory in directories:
        if directory_identity(directory) is None:
            raise InvalidRootError(directory)
    return directories


def _candidates(
    current: Entry,
    entries: list[Entry],
    subdirs: list[Entry],
    file_type: FileType,
) -> list[Entry]:
    if file_type is FileType.DIR:
        return [current, *subdirs]
    if file_type is FileType.FILE:
        return [e for e in entries if e.kind is EntryKind.REGULAR_FILE]
    return [current, *(e for e in entries if e.kind is not EntryKind.OTHER)]
