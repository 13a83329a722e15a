"""Directory name validation for dirpick.

Validation is pure: it never touches the filesystem, so a name can be
checked for any platform from any platform.
"""

import re
import sys

from dirpick.models import NameFailure, NameValidationResult

# Separators are rejected everywhere, whatever the host accepts
PATH_SEPARATORS = frozenset({"/", "\\"})

WINDOWS_INVALID_CHARS = frozenset('<>:"/\\|?*') | frozenset(chr(i) for i in range(32))
POSIX_INVALID_CHARS = frozenset({"\0"}) | PATH_SEPARATORS

RESERVED_REFERENCES = frozenset({".", ".."})

RESERVED_DEVICE_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

_RESERVED_PREFIX = re.compile(
    r"^(CON|PRN|AUX|NUL|COM[1-9]|LPT[1-9])(\.|:|\s)",
    re.IGNORECASE,
)


def is_windows(platform: str | None = None) -> bool:
    """Check whether a platform identifier (default: the host) is Windows."""
    platform = sys.platform if platform is None else platform
    return platform.lower().startswith("win")


def invalid_characters(platform: str | None = None) -> frozenset[str]:
    """Characters that may not appear in a folder name on the platform."""
    return WINDOWS_INVALID_CHARS if is_windows(platform) else POSIX_INVALID_CHARS


def is_reserved_device_name(name: str) -> bool:
    """Check a name against the Windows reserved device names."""
    stem = name.rstrip(". ").upper()
    if stem in RESERVED_DEVICE_NAMES:
        return True
    return _RESERVED_PREFIX.match(name) is not None


def validate_name(proposed: str | None, platform: str | None = None) -> NameValidationResult:
    """
    Validate a proposed directory name.

    Args:
        proposed: Name typed by the user or supplied by the caller
        platform: Platform identifier such as "win32" or "linux" (default: host)

    Returns:
        NameValidationResult with the trimmed name when accepted
    """
    name = (proposed or "").strip()

    if not name:
        return _rejected(NameFailure.EMPTY)

    # Device names come first so "con:" reports the device, not the colon
    if is_windows(platform) and is_reserved_device_name(name):
        return _rejected(NameFailure.RESERVED_DEVICE_NAME)

    forbidden = invalid_characters(platform) | PATH_SEPARATORS
    if any(ch in forbidden for ch in name):
        return _rejected(NameFailure.INVALID_CHARACTERS)

    if name in RESERVED_REFERENCES:
        return _rejected(NameFailure.RESERVED_REFERENCE)

    return NameValidationResult(accepted=True, canonical_name=name)


def _rejected(reason: NameFailure) -> NameValidationResult:
    return NameValidationResult(accepted=False, failure_reason=reason)
