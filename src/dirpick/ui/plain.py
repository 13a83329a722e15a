"""Plain-text console menus.

Each prompt runs a small state machine (PROMPTING -> VALIDATING ->
SUCCEEDED / CANCELLED) over an injectable line reader, so the same code
serves a real console and scripted input in tests.
"""

import os
import re
from enum import Enum, auto
from typing import Any, Callable, Optional

from rich.console import Console
from rich.markup import escape

from dirpick.models import MenuSpec

CANCEL_TOKEN = "q"
YES_TOKENS = frozenset({"y", "yes"})
NO_TOKENS = frozenset({"n", "no"})

_NUMBER = re.compile(r"^\d{1,18}$")
_RANGE = re.compile(r"^(\d{1,18})\s*-\s*(\d{1,18})$")


class PromptState(Enum):
    """States for the prompt state machine."""

    PROMPTING = auto()
    VALIDATING = auto()
    SUCCEEDED = auto()
    CANCELLED = auto()


def is_cancel(raw: str) -> bool:
    """Check whether input is the cancel token."""
    return raw.strip().lower() == CANCEL_TOKEN


def parse_single_choice(raw: str, count: int) -> Optional[int]:
    """
    Parse a 1-based menu number.

    Returns:
        Zero-based index, or None if the input is not a number in 1..count
    """
    stripped = raw.strip()
    if not _NUMBER.match(stripped):
        return None
    number = int(stripped)
    if 1 <= number <= count:
        return number - 1
    return None


def parse_multi_choice(raw: str, count: int) -> tuple[list[int], list[str]]:
    """
    Parse comma-separated numbers and inclusive ranges such as "1-3,5".

    A range written high-to-low ("5-2") is read as the ascending range.
    A range reaching outside 1..count is rejected as a whole token.

    Args:
        raw: User input
        count: Number of options

    Returns:
        Tuple of (zero-based valid indices sorted ascending, rejected tokens)
    """
    valid: set[int] = set()
    rejected: list[str] = []

    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue

        if _NUMBER.match(token):
            start = end = int(token)
        else:
            match = _RANGE.match(token)
            if not match:
                rejected.append(token)
                continue
            start, end = int(match.group(1)), int(match.group(2))
            if start > end:
                start, end = end, start

        if start < 1 or end > count:
            if token not in rejected:
                rejected.append(token)
        # Clamped, so the expansion never exceeds the option count
        valid.update(range(max(start, 1) - 1, min(end, count)))

    return sorted(valid), rejected


def parse_yes_no(raw: str) -> Optional[bool]:
    """Parse a yes/no answer, None if it is neither."""
    answer = raw.strip().lower()
    if answer in YES_TOKENS:
        return True
    if answer in NO_TOKENS:
        return False
    return None


def screen_clearing_supported(console: Console) -> bool:
    """Whether clearing the screen makes sense (interactive terminal, not CI)."""
    if os.environ.get("CI"):
        return False
    return console.is_terminal


class PlainMenu:
    """Numbered text menus read line by line."""

    def __init__(
        self,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        clear_screen: bool | None = None,
    ):
        """
        Args:
            console: Console to render on
            read_line: Callable(prompt) -> line; defaults to console.input
            clear_screen: Force screen clearing on/off (default: detect)
        """
        self.console = console or Console()
        self._read_line = read_line
        self._clear_screen = clear_screen

    # ─────────────────────────────────────────────────────────────────────────
    # Menus
    # ─────────────────────────────────────────────────────────────────────────

    def select_one(self, spec: MenuSpec) -> Optional[str]:
        """Show a numbered list and return the chosen option, None on cancel."""
        count = len(spec.options)

        def validate(raw: str) -> tuple[PromptState, Any, Optional[str]]:
            if is_cancel(raw):
                return PromptState.CANCELLED, None, None
            index = parse_single_choice(raw, count)
            if index is None:
                return PromptState.PROMPTING, None, f"Invalid selection, valid range 1-{count}"
            return PromptState.SUCCEEDED, index, None

        state, index = self._drive(
            lambda: self._render_options(spec),
            "\n[bold cyan]Select:[/bold cyan] ",
            validate,
        )
        if state == PromptState.CANCELLED:
            return None
        return spec.options[index]

    def select_many(self, spec: MenuSpec) -> list[str]:
        """Show a numbered list accepting "1,3" or "2-4"; return options in menu order."""
        count = len(spec.options)

        def validate(raw: str) -> tuple[PromptState, Any, Optional[str]]:
            if is_cancel(raw):
                return PromptState.CANCELLED, [], None
            indices, rejected = parse_multi_choice(raw, count)
            if rejected:
                return (
                    PromptState.PROMPTING,
                    None,
                    f"Invalid selection: {', '.join(rejected)}. Valid range 1-{count}",
                )
            if not indices:
                return PromptState.PROMPTING, None, f"Invalid selection, valid range 1-{count}"
            return PromptState.SUCCEEDED, indices, None

        def render() -> None:
            self._render_options(spec)
            self.console.print("[dim]Separate numbers with commas, use 2-4 for ranges[/dim]")

        state, indices = self._drive(render, "\n[bold cyan]Select:[/bold cyan] ", validate)
        if state == PromptState.CANCELLED:
            return []
        return [spec.options[i] for i in indices]

    def confirm(self, spec: MenuSpec) -> bool:
        """Ask until the answer is y or n."""

        def validate(raw: str) -> tuple[PromptState, Any, Optional[str]]:
            answer = parse_yes_no(raw)
            if answer is None:
                return PromptState.PROMPTING, None, "Please answer y or n"
            return PromptState.SUCCEEDED, answer, None

        _, answer = self._drive(
            lambda: None,
            f"\n[yellow]{escape(spec.title)}[/yellow] [dim](y/n)[/dim] ",
            validate,
            clear=False,
        )
        return answer

    def ask_text(self, prompt: str) -> Optional[str]:
        """Read one line of text."""
        raw = self._read(f"\n[bold cyan]{escape(prompt)}:[/bold cyan] ").strip()
        return raw or None

    # ─────────────────────────────────────────────────────────────────────────
    # State machine
    # ─────────────────────────────────────────────────────────────────────────

    def _drive(
        self,
        render: Callable[[], None],
        prompt: str,
        validate: Callable[[str], tuple[PromptState, Any, Optional[str]]],
        clear: bool = True,
    ) -> tuple[PromptState, Any]:
        """Prompt until validate reports SUCCEEDED or CANCELLED."""
        clear = clear and self._should_clear()
        state = PromptState.PROMPTING
        raw = ""
        value: Any = None

        while state not in (PromptState.SUCCEEDED, PromptState.CANCELLED):
            if state == PromptState.PROMPTING:
                if clear:
                    self.console.clear()
                render()
                raw = self._read(prompt)
                state = PromptState.VALIDATING
            else:
                state, value, error = validate(raw)
                if error:
                    self._reject(error, pause=clear)

        return state, value

    def _render_options(self, spec: MenuSpec) -> None:
        self.console.print(f"\n[bold]{escape(spec.title)}[/bold]\n")
        for i, option in enumerate(spec.options):
            if i == spec.default_selection:
                self.console.print(
                    f" [green]>[/green] {i + 1}. {escape(option)} [green](default)[/green]"
                )
            else:
                self.console.print(f"   {i + 1}. {escape(option)}")
        self.console.print(f"\n   {escape('[Q]')} {escape(spec.cancel_label)}")

    def _reject(self, message: str, pause: bool) -> None:
        self.console.print(f"[yellow]{escape(message)}[/yellow]")
        if pause:
            # The next render clears the screen
            self._read("[dim]Press Enter to continue...[/dim]")

    def _read(self, prompt: str) -> str:
        if self._read_line is not None:
            return self._read_line(prompt)
        return self.console.input(prompt)

    def _should_clear(self) -> bool:
        if self._clear_screen is not None:
            return self._clear_screen
        return screen_clearing_supported(self.console)
