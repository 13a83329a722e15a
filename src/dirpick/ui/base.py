"""Base protocol for menu strategies."""

from typing import Optional, Protocol

from dirpick.models import MenuSpec


class MenuStrategy(Protocol):
    """Protocol for menu implementations.

    Both the rich and the plain strategy implement it, which lets the
    fallback wrapper swap one for the other call by call.
    """

    def select_one(self, spec: MenuSpec) -> Optional[str]:
        """Show a single-select menu, return the option or None if cancelled."""
        ...

    def select_many(self, spec: MenuSpec) -> list[str]:
        """Show a multi-select menu, return the chosen options (empty if cancelled)."""
        ...

    def confirm(self, spec: MenuSpec) -> bool:
        """Show a yes/no prompt, return True for yes."""
        ...

    def ask_text(self, prompt: str) -> Optional[str]:
        """Read a line of text, return None if left blank."""
        ...
