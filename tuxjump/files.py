"""File-system helpers for the user and data directories.

Game data is looked up in two places: the user's own directory, which is
searched first, and the shared data directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Optional, Union

__all__ = ["faccessible", "fwriteable", "fcreatedir", "dsubdirs", "dfiles"]

PathLike = Union[str, "os.PathLike[str]"]

DIR_MODE = 0o755


def faccessible(path: PathLike) -> bool:
    """Return whether ``path`` exists and is a regular file."""
    try:
        return Path(path).is_file()
    except OSError:
        return False


def fwriteable(path: PathLike) -> bool:
    """Return whether ``path`` can be opened for writing.

    The file is created if missing and truncated if present.
    """
    try:
        with open(path, "w"):
            pass
    except OSError:
        return False
    return True


def fcreatedir(user_dir: PathLike, data_dir: PathLike, relative_dir: str) -> bool:
    """Create ``relative_dir`` in the user directory, or else in the data directory.

    Returns whether either directory was created.
    """
    for base in (user_dir, data_dir):
        try:
            os.mkdir(Path(base) / relative_dir, DIR_MODE)
        except OSError:
            continue
        return True
    return False


def _entries(directory: Path) -> Iterator[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return
    yield from entries


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def dsubdirs(
    user_dir: PathLike,
    data_dir: PathLike,
    rel_path: str,
    expected_file: Optional[str] = None,
) -> List[str]:
    """Return the names of sub-directories of ``rel_path`` in both directories.

    With ``expected_file``, only sub-directories holding that file count,
    and a data sub-directory is left out when the user directory already
    has the same sub-directory with that file. Missing directories are
    treated as empty.
    """
    user_path = Path(user_dir) / rel_path
    data_path = Path(data_dir) / rel_path
    names: List[str] = []

    for entry in _entries(user_path):
        if not _is_dir(entry):
            continue
        if expected_file is not None and not faccessible(user_path / entry.name / expected_file):
            continue
        names.append(entry.name)

    for entry in _entries(data_path):
        if not _is_dir(entry):
            continue
        if expected_file is not None:
            if not faccessible(data_path / entry.name / expected_file):
                continue
            if faccessible(user_path / entry.name / expected_file):
                continue
        names.append(entry.name)

    return names


def dfiles(
    user_dir: PathLike,
    data_dir: PathLike,
    rel_path: str,
    glob: Optional[str] = None,
    exception: Optional[str] = None,
) -> List[str]:
    """Return the names of regular files in ``rel_path`` of both directories.

    A name must contain ``glob`` when given and must not contain
    ``exception`` when given. Files from the user directory come first.
    """
    names: List[str] = []
    for base in (Path(user_dir), Path(data_dir)):
        for entry in _entries(base / rel_path):
            if not _is_file(entry):
                continue
            if exception is not None and exception in entry.name:
                continue
            if glob is not None and glob not in entry.name:
                continue
            names.append(entry.name)
    return names