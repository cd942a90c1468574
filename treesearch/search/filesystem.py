"""Filesystem primitives used by the traverser."""

import logging
import os
import stat
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    """What a path resolves to after following symlinks."""

    DIRECTORY = "directory"
    REGULAR_FILE = "regular_file"
    OTHER = "other"


class FileIdentity(NamedTuple):
    """Identifies a filesystem object regardless of the path used to reach it."""

    device_major: int
    device_minor: int
    inode: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentity":
        major, minor = _split_device(stat_result.st_dev)
        return cls(device_major=major, device_minor=minor, inode=stat_result.st_ino)


class Entry(NamedTuple):
    path: str
    kind: EntryKind
    identity: FileIdentity | None


def classify(path: str) -> Entry:
    """Stat ``path`` once (following symlinks) and return its kind and identity.

    Broken symlinks, entries that vanished and entries we may not stat all
    come back as ``EntryKind.OTHER`` with no identity.
    """
    try:
        stat_result = os.stat(path)
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return Entry(path=path, kind=EntryKind.OTHER, identity=None)

    return Entry(
        path=path,
        kind=_kind_from_mode(stat_result.st_mode),
        identity=FileIdentity.from_stat(stat_result),
    )


def directory_identity(path: str) -> FileIdentity | None:
    """Return the identity of ``path`` if it currently resolves to a directory."""
    entry = classify(path)
    if entry.kind is not EntryKind.DIRECTORY:
        return None
    return entry.identity


def list_entries(directory: str) -> list[Entry]:
    """Classify every immediate child of ``directory``.

    Child paths are built with ``os.path.join`` on the directory string as
    given, so callers see exactly the path that was matched. A directory that
    cannot be listed is treated as empty.
    """
    try:
        with os.scandir(directory) as entries:
            names = [entry.name for entry in entries]
    except PermissionError:
        logger.debug("Permission denied listing directory: %s", directory)
        return []
    except OSError as e:
        logger.debug("Error listing directory %s: %s", directory, e)
        return []

    return [classify(os.path.join(directory, name)) for name in names]


def _kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.REGULAR_FILE
    return EntryKind.OTHER


def _split_device(st_dev: int) -> tuple[int, int]:
    # os.major/os.minor only exist on Unix
    if hasattr(os, "major"):
        return os.major(st_dev), os.minor(st_dev)
    return st_dev, 0
