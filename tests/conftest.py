"""Shared fixtures for dirpick tests."""

from io import StringIO

import pytest
from rich.console import Console

from dirpick.config import (
    ENV_AUTOMATION,
    ENV_MENU_SELECTION,
    ENV_MENU_YESNO,
    ENV_SKIP_GRID,
    ENV_UI,
)
from dirpick.ui.capability import GRID_PICKER, RICH_PROMPTS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without automation settings or capability results."""
    for name in (ENV_AUTOMATION, ENV_MENU_SELECTION, ENV_MENU_YESNO, ENV_SKIP_GRID, ENV_UI, "CI"):
        monkeypatch.delenv(name, raising=False)

    RICH_PROMPTS.override(False)
    GRID_PICKER.override(False)
    yield
    RICH_PROMPTS.reset()
    GRID_PICKER.reset()


@pytest.fixture
def scripted_input():
    """Build a line reader that replays the given lines, then hits EOF."""

    def factory(*lines: str):
        remaining = list(lines)
        prompts: list[str] = []

        def read_line(prompt: str) -> str:
            prompts.append(prompt)
            if not remaining:
                raise EOFError("scripted input exhausted")
            return remaining.pop(0)

        read_line.prompts = prompts
        read_line.remaining = remaining
        return read_line

    return factory


@pytest.fixture
def output_console():
    """Console writing to a buffer; read it back with .file.getvalue()."""
    return Console(file=StringIO(), force_terminal=False, width=120)


@pytest.fixture
def folders(tmp_path):
    """Base folder with Folder1 (one file), Folder2 (empty) and Folder3 (one subfolder)."""
    base = tmp_path / "base"
    (base / "Folder1").mkdir(parents=True)
    (base / "Folder1" / "notes.txt").write_text("hello")
    (base / "Folder2").mkdir()
    (base / "Folder3" / "inner").mkdir(parents=True)
    (base / "readme.md").write_text("not a folder")
    return base
