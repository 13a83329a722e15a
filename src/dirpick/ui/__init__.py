"""Menu presentation for dirpick."""

from dirpick.ui.capability import GRID_PICKER, RICH_PROMPTS, CapabilityState
from dirpick.ui.plain import PlainMenu, PromptState
from dirpick.ui.presenter import FallbackMenu, MenuPresenter, resolve_strategy
from dirpick.ui.styled import QuestionaryMenu

__all__ = [
    "CapabilityState",
    "FallbackMenu",
    "GRID_PICKER",
    "MenuPresenter",
    "PlainMenu",
    "PromptState",
    "QuestionaryMenu",
    "RICH_PROMPTS",
    "resolve_strategy",
]
