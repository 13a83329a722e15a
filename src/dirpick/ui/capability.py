"""Terminal capability probes.

Each probe runs at most once per CapabilityState; reset() forces the next
read to probe again.
"""

import logging
import os
import sys
from typing import Callable, Optional

from dirpick.exceptions import CapabilityError

logger = logging.getLogger(__name__)


def _has_tty() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def probe_rich_prompts() -> bool:
    """Check that styled prompts can take over the terminal."""
    if not _has_tty():
        return False
    if os.environ.get("TERM") == "dumb":
        return False

    from prompt_toolkit.output import create_output

    try:
        create_output()
    except Exception as e:
        raise CapabilityError(f"cannot open terminal output: {e}") from e
    return True


def probe_grid_picker() -> bool:
    """Check that a full-screen picker can run."""
    if os.environ.get("CI"):
        return False
    return _has_tty()


class CapabilityState:
    """Memoized result of a capability probe."""

    def __init__(self, probe: Callable[[], bool], name: str = "capability"):
        self._probe = probe
        self.name = name
        self._available: Optional[bool] = None

    @property
    def available(self) -> bool:
        """Probe result; a probe that raises counts as unavailable."""
        if self._available is None:
            try:
                self._available = bool(self._probe())
            except Exception as e:
                logger.debug("%s probe failed: %s", self.name, e)
                self._available = False
            logger.debug("%s available: %s", self.name, self._available)
        return self._available

    def reset(self) -> None:
        """Forget the memoized result."""
        self._available = None

    def override(self, value: Optional[bool]) -> None:
        """Pin the result (None goes back to probing)."""
        self._available = value


RICH_PROMPTS = CapabilityState(probe_rich_prompts, "rich prompts")
GRID_PICKER = CapabilityState(probe_grid_picker, "grid picker")
