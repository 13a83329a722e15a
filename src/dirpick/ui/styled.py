"""Styled prompts using questionary."""

from typing import Optional

import questionary
from questionary import Style

from dirpick.exceptions import PresentationError
from dirpick.models import MenuSpec

MENU_STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:cyan bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
    ]
)

_CANCEL = -1


class QuestionaryMenu:
    """Arrow-key menus with styling.

    Prompts use unsafe_ask so Ctrl+C raises KeyboardInterrupt instead of
    looking like an empty answer.
    """

    def __init__(self, style: Style | None = None):
        self.style = style or MENU_STYLE

    def select_one(self, spec: MenuSpec) -> Optional[str]:
        """Show a select list with a trailing cancel entry."""
        choices = [questionary.Choice(option, value=i) for i, option in enumerate(spec.options)]
        default = choices[spec.default_selection] if spec.has_default else None
        choices.append(questionary.Separator())
        choices.append(questionary.Choice(spec.cancel_label, value=_CANCEL))

        answer = questionary.select(
            spec.title,
            choices=choices,
            default=default,
            style=self.style,
        ).unsafe_ask()

        if answer is None or answer == _CANCEL:
            return None
        return spec.options[answer]

    def select_many(self, spec: MenuSpec) -> list[str]:
        """Show a checkbox list; the result follows menu order."""
        choices = [
            questionary.Choice(option, value=i, checked=(i == spec.default_selection))
            for i, option in enumerate(spec.options)
        ]

        answer = questionary.checkbox(
            spec.title,
            choices=choices,
            style=self.style,
            instruction="(Space to toggle, Enter to confirm)",
        ).unsafe_ask()

        if not answer:
            return []
        return [spec.options[i] for i in sorted(answer)]

    def confirm(self, spec: MenuSpec) -> bool:
        """Ask a yes/no question."""
        answer = questionary.confirm(
            spec.title,
            default=spec.default_answer,
            style=self.style,
        ).unsafe_ask()

        if answer is None:
            raise PresentationError("confirm prompt returned no answer", strategy="rich")
        return bool(answer)

    def ask_text(self, prompt: str) -> Optional[str]:
        """Read a line of text."""
        answer = questionary.text(prompt, style=self.style).unsafe_ask()
        if answer is None:
            return None
        return answer.strip() or None
