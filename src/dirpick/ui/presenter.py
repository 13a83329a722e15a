"""Menu presentation with strategy resolution and fallback."""

import logging
from typing import Any, Callable, Optional

from rich.console import Console

from dirpick import display
from dirpick.models import MenuMode, MenuResult, MenuSpec, UIPreference, UIStrategy
from dirpick.ui.base import MenuStrategy
from dirpick.ui.capability import RICH_PROMPTS, CapabilityState
from dirpick.ui.plain import PlainMenu
from dirpick.ui.styled import QuestionaryMenu

logger = logging.getLogger(__name__)


def resolve_strategy(
    preference: UIPreference,
    capability: CapabilityState,
    on_warning: Callable[[str], None] | None = None,
) -> UIStrategy:
    """
    Decide which strategy renders menus.

    Args:
        preference: Caller preference
        capability: Rich prompt availability
        on_warning: Callback(message) when a rich request cannot be honoured

    Returns:
        UIStrategy.RICH or UIStrategy.PLAIN
    """
    if preference == UIPreference.PLAIN:
        return UIStrategy.PLAIN

    if capability.available:
        return UIStrategy.RICH

    if preference == UIPreference.RICH and on_warning:
        on_warning("Rich prompts are not available in this terminal; using plain menus")
    return UIStrategy.PLAIN


class FallbackMenu:
    """Run menus on a primary strategy, redispatching to a fallback on failure."""

    def __init__(
        self,
        primary: MenuStrategy,
        fallback: MenuStrategy,
        on_warning: Callable[[str], None] | None = None,
    ):
        self.primary = primary
        self.fallback = fallback
        self.on_warning = on_warning or display.show_warning

    def select_one(self, spec: MenuSpec) -> Optional[str]:
        return self._call("select_one", spec)

    def select_many(self, spec: MenuSpec) -> list[str]:
        return self._call("select_many", spec)

    def confirm(self, spec: MenuSpec) -> bool:
        return self._call("confirm", spec)

    def ask_text(self, prompt: str) -> Optional[str]:
        return self._call("ask_text", prompt)

    def _call(self, method: str, *args: Any) -> Any:
        try:
            return getattr(self.primary, method)(*args)
        except Exception as e:
            logger.debug("Primary menu %s failed", method, exc_info=True)
            self.on_warning(f"Rich prompt failed ({e}); switching to plain menu")
            return getattr(self.fallback, method)(*args)


class MenuPresenter:
    """Present menus on the strategy the preference and terminal allow."""

    def __init__(
        self,
        preference: UIPreference = UIPreference.AUTO,
        console: Console | None = None,
        plain: MenuStrategy | None = None,
        rich: MenuStrategy | None = None,
        capability: CapabilityState | None = None,
        on_warning: Callable[[str], None] | None = None,
    ):
        self.preference = preference
        self.plain = plain or PlainMenu(console=console or display.err_console)
        self.rich = rich or QuestionaryMenu()
        self.capability = capability or RICH_PROMPTS
        self.on_warning = on_warning or display.show_warning
        self._warned = False

    def strategy(self) -> MenuStrategy:
        """Strategy for the next prompt."""
        resolved = resolve_strategy(self.preference, self.capability, self._warn_once)
        if resolved == UIStrategy.PLAIN:
            return self.plain
        return FallbackMenu(self.rich, self.plain, self.on_warning)

    def present(self, spec: MenuSpec) -> MenuResult:
        """
        Show a menu and return the answer.

        Returns:
            Option or None (single), list of options (multiple), bool (yes/no)
        """
        strategy = self.strategy()
        if spec.mode == MenuMode.SINGLE:
            return strategy.select_one(spec)
        if spec.mode == MenuMode.MULTIPLE:
            return strategy.select_many(spec)
        return strategy.confirm(spec)

    def ask_text(self, prompt: str) -> Optional[str]:
        """Read free text, None if left blank."""
        return self.strategy().ask_text(prompt)

    def _warn_once(self, message: str) -> None:
        if not self._warned:
            self._warned = True
            self.on_warning(message)
