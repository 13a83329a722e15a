"""Non-interactive menu resolution.

When automation is enabled every prompt is answered from AutomationConfig
instead of the console, so scripted runs never block on input.
"""

from dirpick.config import AutomationConfig
from dirpick.models import MenuMode, MenuResult, MenuSpec


def resolve_indices(spec: MenuSpec, requested: list[int]) -> list[int]:
    """
    Reduce requested indices to valid, unique ones in request order.

    Falls back to the default selection, then to the first option, when
    nothing requested is usable.
    """
    count = len(spec.options)
    seen: set[int] = set()
    valid: list[int] = []
    for index in requested:
        if 0 <= index < count and index not in seen:
            seen.add(index)
            valid.append(index)

    if valid:
        return valid
    if spec.default_selection is not None and 0 <= spec.default_selection < count:
        return [spec.default_selection]
    if count:
        return [0]
    return []


def resolve_automated(spec: MenuSpec, config: AutomationConfig) -> MenuResult:
    """
    Answer a menu from configuration.

    Args:
        spec: Menu to answer
        config: Automation answers

    Returns:
        Selected option (single), selected options in requested order
        (multiple), or the configured answer (yes/no)
    """
    if spec.mode == MenuMode.YES_NO:
        return config.yes_no_answer

    indices = resolve_indices(spec, config.menu_selection)

    if spec.mode == MenuMode.SINGLE:
        return spec.options[indices[0]] if indices else None

    return [spec.options[i] for i in indices]
