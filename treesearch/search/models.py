"""Search option models."""

from enum import Enum


class FileType(Enum):
    """Which kinds of filesystem objects are eligible to match."""

    DIR = "dir"
    FILE = "file"
    ANY = "any"
