"""Environment configuration for dirpick.

Values are read from the environment each time ``from_env`` is called so a
long-running process (or a test) can change them between prompts.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from dirpick.models import UIPreference

ENV_AUTOMATION = "DIRPICK_AUTOMATION"
ENV_MENU_SELECTION = "DIRPICK_MENU_SELECTION"
ENV_MENU_YESNO = "DIRPICK_MENU_YESNO"
ENV_SKIP_GRID = "DIRPICK_SKIP_GRID"
ENV_UI = "DIRPICK_UI"

TRUTHY_TOKENS = frozenset({"1", "true", "y", "yes"})


def is_truthy(value: Optional[str]) -> bool:
    """Check a configuration token against the accepted truthy spellings."""
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_TOKENS


def parse_indices(raw: Optional[str]) -> list[int]:
    """
    Parse a comma-separated list of integer indices.

    Tokens that are not integers are dropped. Order and duplicates are kept;
    range checks belong to whoever knows the option count.

    Args:
        raw: Value such as "2,0,1"

    Returns:
        Parsed indices in the order given
    """
    if not raw:
        return []

    indices = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            indices.append(int(token))
        except ValueError:
            continue
    return indices


class AutomationConfig(BaseModel):
    """Answers used instead of prompting when automation is enabled."""

    enabled: bool = Field(False, description="Resolve prompts without user interaction")
    menu_selection: list[int] = Field(
        default_factory=list, description="Zero-based indices for single/multiple menus"
    )
    menu_yes_no: Optional[bool] = Field(None, description="Answer for yes/no prompts")

    @property
    def yes_no_answer(self) -> bool:
        """Answer for yes/no prompts, defaulting to yes when unset."""
        return True if self.menu_yes_no is None else self.menu_yes_no

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AutomationConfig":
        """Build the configuration from environment variables."""
        env = os.environ if environ is None else environ

        raw_yes_no = env.get(ENV_MENU_YESNO)
        if raw_yes_no is None or not raw_yes_no.strip():
            menu_yes_no = None
        else:
            menu_yes_no = is_truthy(raw_yes_no)

        return cls(
            enabled=is_truthy(env.get(ENV_AUTOMATION)),
            menu_selection=parse_indices(env.get(ENV_MENU_SELECTION)),
            menu_yes_no=menu_yes_no,
        )


class Settings(BaseModel):
    """Presentation settings."""

    ui: UIPreference = Field(UIPreference.AUTO, description="Preferred menu UI")
    skip_grid: bool = Field(False, description="Never use the grid-style picker")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ

        raw_ui = (env.get(ENV_UI) or "").strip().lower()
        try:
            ui = UIPreference(raw_ui) if raw_ui else UIPreference.AUTO
        except ValueError:
            ui = UIPreference.AUTO

        return cls(ui=ui, skip_grid=is_truthy(env.get(ENV_SKIP_GRID)))
