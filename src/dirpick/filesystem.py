"""Filesystem access for dirpick.

Thin wrappers over os.scandir and pathlib. Listing never raises: entries
that cannot be inspected are reported back as error strings.
"""

import os
from pathlib import Path

from dirpick.models import DirectoryCandidate


def expand_path(path: str | os.PathLike) -> Path:
    """Expand ~ and environment variables in path."""
    return Path(os.path.expanduser(os.path.expandvars(os.fspath(path))))


def path_exists(path: str | os.PathLike) -> bool:
    """Check whether a path exists."""
    return expand_path(path).exists()


def is_directory(path: str | os.PathLike) -> bool:
    """Check whether a path is an existing directory."""
    return expand_path(path).is_dir()


def list_directories(path: str | os.PathLike) -> tuple[list[DirectoryCandidate], list[str]]:
    """
    List the immediate subdirectories of a path.

    Args:
        path: Directory to list

    Returns:
        Tuple of (candidates sorted by name, error messages)
    """
    root = expand_path(path)
    candidates: list[DirectoryCandidate] = []
    errors: list[str] = []

    try:
        with os.scandir(root) as entries:
            for entry in entries:
                try:
                    if not entry.is_dir():
                        continue
                    candidates.append(
                        DirectoryCandidate(name=entry.name, full_path=os.path.abspath(entry.path))
                    )
                except (PermissionError, OSError) as e:
                    errors.append(f"Skipped {entry.name}: {e}")
    except (PermissionError, OSError) as e:
        errors.append(f"Cannot read {root}: {e}")
        return [], errors

    candidates.sort(key=lambda c: c.name.casefold())
    return candidates, errors


def probe_has_entries(path: str | os.PathLike) -> bool:
    """
    Check whether a directory contains at least one entry.

    Only the first entry is read, so this stays cheap on large folders.

    Raises:
        OSError: If the directory cannot be read
    """
    with os.scandir(expand_path(path)) as entries:
        return next(entries, None) is not None


def create_directory(path: str | os.PathLike) -> Path:
    """
    Create a single directory.

    Raises:
        FileExistsError: If something already exists at path
        OSError: If the directory cannot be created
    """
    target = expand_path(path)
    target.mkdir(parents=False, exist_ok=False)
    return target
