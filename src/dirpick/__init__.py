"""dirpick - pick and create directories from scripts or the terminal."""

__version__ = "0.1.0"

from dirpick.automation import resolve_automated
from dirpick.config import AutomationConfig, Settings
from dirpick.filters import filter_directories
from dirpick.models import (
    CreationOutcome,
    CreationStatus,
    DirectoryCandidate,
    MenuMode,
    MenuSpec,
    NameFailure,
    NameValidationResult,
    UIPreference,
    UIStrategy,
)
from dirpick.orchestrator import SelectionOrchestrator
from dirpick.ui import MenuPresenter
from dirpick.validator import validate_name


def pick_directories(base_path, **kwargs):
    """Pick subdirectories of base_path; see SelectionOrchestrator.pick_directories."""
    return SelectionOrchestrator().pick_directories(base_path, **kwargs)


def create_directory(parent, name=None, dry_run=False):
    """Create a folder under parent; see SelectionOrchestrator.create_directory."""
    return SelectionOrchestrator().create_directory(parent, name=name, dry_run=dry_run)


__all__ = [
    "AutomationConfig",
    "CreationOutcome",
    "CreationStatus",
    "DirectoryCandidate",
    "MenuMode",
    "MenuPresenter",
    "MenuSpec",
    "NameFailure",
    "NameValidationResult",
    "SelectionOrchestrator",
    "Settings",
    "UIPreference",
    "UIStrategy",
    "create_directory",
    "filter_directories",
    "pick_directories",
    "resolve_automated",
    "validate_name",
]
