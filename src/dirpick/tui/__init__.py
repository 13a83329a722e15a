"""Grid-style picker for dirpick."""

from dirpick.tui.app import DirectoryGridApp, run_grid_picker

__all__ = ["DirectoryGridApp", "run_grid_picker"]
