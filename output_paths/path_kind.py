"""Filesystem kind classification for user supplied paths."""

import os
from enum import Enum
from pathlib import Path

_SEPARATORS = {sep for sep in ("/", os.sep, os.altsep) if sep}


class PathKind(Enum):
    """What a raw path refers to on disk."""

    FILE = "file"
    DIRECTORY = "directory"
    ABSENT = "absent"


def has_trailing_separator(path: str | Path) -> bool:
    """Check if the user typed the path with a trailing separator."""
    # Path() drops the trailing separator, so only raw strings can carry it.
    text = os.fspath(path)
    return len(text) > 1 and text[-1] in _SEPARATORS


def classify_path(path: str | Path) -> PathKind:
    """Probe the filesystem once and report the kind of entry at ``path``."""
    p = Path(path)
    if p.is_dir():
        return PathKind.DIRECTORY
    if p.exists():
        return PathKind.FILE
    return PathKind.ABSENT
