"""Candidate filtering for directory selection."""

import logging
from fnmatch import fnmatchcase
from typing import Callable, Iterable, Sequence

from dirpick.filesystem import probe_has_entries
from dirpick.models import DirectoryCandidate
from dirpick.validator import is_windows

logger = logging.getLogger(__name__)


def matches_any(name: str, patterns: Iterable[str], case_sensitive: bool = True) -> bool:
    """
    Check a name against glob-style patterns.

    Args:
        name: Directory name
        patterns: Patterns such as "build*" or ".?*"
        case_sensitive: Compare case-sensitively

    Returns:
        True if any pattern matches
    """
    if not case_sensitive:
        name = name.casefold()

    for pattern in patterns:
        if not case_sensitive:
            pattern = pattern.casefold()
        if fnmatchcase(name, pattern):
            return True
    return False


def filter_directories(
    candidates: Sequence[DirectoryCandidate],
    exclude_patterns: Iterable[str] = (),
    exclude_empty: bool = False,
    platform: str | None = None,
    probe: Callable[[str], bool] = probe_has_entries,
    on_warning: Callable[[str], None] | None = None,
) -> list[DirectoryCandidate]:
    """
    Filter candidates by exclusion patterns and emptiness, keeping order.

    Args:
        candidates: Directories to filter
        exclude_patterns: Glob patterns matched against the directory name
        exclude_empty: Drop directories without any entry
        platform: Platform identifier; matching is case-insensitive on Windows
        probe: Callable returning whether a path has entries
        on_warning: Optional callback(message) for skipped directories

    Returns:
        Candidates that passed, with has_entries filled in when probed
    """
    patterns = [p for p in exclude_patterns if p]
    case_sensitive = not is_windows(platform)
    warn = on_warning or logger.warning

    kept: list[DirectoryCandidate] = []
    for candidate in candidates:
        if patterns and matches_any(candidate.name, patterns, case_sensitive):
            continue

        if exclude_empty:
            has_entries = candidate.has_entries
            if has_entries is None:
                try:
                    has_entries = probe(candidate.full_path)
                except (PermissionError, OSError) as e:
                    warn(f"Skipping {candidate.name}: cannot read contents ({e})")
                    continue
                candidate = candidate.model_copy(update={"has_entries": has_entries})
            if not has_entries:
                continue

        kept.append(candidate)

    return kept
