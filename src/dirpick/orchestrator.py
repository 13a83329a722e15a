"""End-to-end pick and create operations.

The orchestrator owns the retry loops and decides, per prompt, whether the
answer comes from automation, the grid picker or the menu presenter.
Expected conditions (missing paths, invalid names, cancellations) are
reported and returned as empty results; only caller bugs raise.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Sequence

from dirpick import display
from dirpick.automation import resolve_automated
from dirpick.config import AutomationConfig, Settings
from dirpick.filesystem import create_directory as make_directory
from dirpick.filesystem import expand_path, is_directory, list_directories, path_exists
from dirpick.filters import filter_directories
from dirpick.models import (
    CreationOutcome,
    CreationStatus,
    DirectoryCandidate,
    MenuMode,
    MenuResult,
    MenuSpec,
)
from dirpick.ui.capability import GRID_PICKER, CapabilityState
from dirpick.ui.presenter import MenuPresenter
from dirpick.validator import validate_name

logger = logging.getLogger(__name__)

DEFAULT_PICK_ATTEMPTS = 3
NAME_PROMPT_ATTEMPTS = 5

GridPicker = Callable[[str, Sequence[DirectoryCandidate], bool], list[str]]


def _clip(title: str, limit: int = 200) -> str:
    return title if len(title) <= limit else title[: limit - 3] + "..."


def _default_grid_picker(
    title: str, candidates: Sequence[DirectoryCandidate], multiple: bool
) -> list[str]:
    from dirpick.tui import run_grid_picker

    return run_grid_picker(title, candidates, multiple=multiple)


class SelectionOrchestrator:
    """Pick and create directories interactively or from automation config."""

    def __init__(
        self,
        presenter: MenuPresenter | None = None,
        automation: AutomationConfig | None = None,
        settings: Settings | None = None,
        grid_picker: GridPicker | None = None,
        grid_capability: CapabilityState | None = None,
        platform: str | None = None,
        on_warning: Callable[[str], None] | None = None,
    ):
        """
        Args:
            presenter: Menu presenter (default: built from settings)
            automation: Fixed automation config (default: read from env per prompt)
            settings: Fixed settings (default: read from env per operation)
            grid_picker: Callable(title, candidates, multiple) -> names
            grid_capability: Availability of the grid picker
            platform: Platform identifier for name rules and pattern matching
            on_warning: Callback(message) for reported conditions
        """
        self._automation = automation
        self._settings = settings
        self.on_warning = on_warning or display.show_warning
        self.presenter = presenter or MenuPresenter(
            preference=self.settings.ui, on_warning=self.on_warning
        )
        self.grid_picker = grid_picker or _default_grid_picker
        self.grid_capability = grid_capability or GRID_PICKER
        self.platform = platform

    # ─────────────────────────────────────────────────────────────────────────
    # Configuration
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def automation(self) -> AutomationConfig:
        """Automation config, re-read from the environment unless fixed."""
        return self._automation if self._automation is not None else AutomationConfig.from_env()

    @property
    def settings(self) -> Settings:
        """Presentation settings, re-read from the environment unless fixed."""
        return self._settings if self._settings is not None else Settings.from_env()

    def ask(self, spec: MenuSpec) -> MenuResult:
        """Answer a menu from automation when enabled, else by prompting."""
        config = self.automation
        if config.enabled:
            answer = resolve_automated(spec, config)
            logger.debug("Automated answer for %r: %r", spec.title, answer)
            return answer
        return self.presenter.present(spec)

    # ─────────────────────────────────────────────────────────────────────────
    # Pick directories
    # ─────────────────────────────────────────────────────────────────────────

    def pick_directories(
        self,
        base_path: str | os.PathLike,
        exclude_patterns: Sequence[str] = (),
        exclude_empty: bool = False,
        multiple: bool = False,
        retry_on_cancel: bool = False,
        max_attempts: int = DEFAULT_PICK_ATTEMPTS,
        title: str | None = None,
    ) -> list[Path]:
        """
        Let the user pick subdirectories of base_path.

        Args:
            base_path: Directory whose children are offered
            exclude_patterns: Glob patterns of names to hide
            exclude_empty: Hide directories without any entry
            multiple: Allow several directories
            retry_on_cancel: Offer to try again when nothing was picked
            max_attempts: Upper bound on attempts, including failed prompts
            title: Menu title

        Returns:
            Full paths of the picked directories (empty if none)

        Raises:
            ValueError: If max_attempts is below 1
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        base = expand_path(base_path)
        if not is_directory(base):
            self.on_warning(f"Folder not found: {base}")
            return []

        candidates, errors = list_directories(base)
        for error in errors:
            self.on_warning(error)

        candidates = filter_directories(
            candidates,
            exclude_patterns=exclude_patterns,
            exclude_empty=exclude_empty,
            platform=self.platform,
            on_warning=self.on_warning,
        )
        if not candidates:
            self.on_warning(f"No folders to choose from in {base}")
            return []

        by_name = {c.name: c for c in candidates}
        title = title or (f"Select folders in {base}" if multiple else f"Select a folder in {base}")

        for attempt in range(1, max_attempts + 1):
            try:
                names = self._choose(title, candidates, multiple)
                if names:
                    return [by_name[name].path for name in names if name in by_name]

                if not retry_on_cancel or attempt == max_attempts:
                    break
                again = self.ask(MenuSpec(title="No folder selected. Try again?", mode=MenuMode.YES_NO))
                if not again:
                    break
            except Exception as e:
                logger.debug("Selection attempt %d failed", attempt, exc_info=True)
                self.on_warning(f"Selection failed (attempt {attempt}/{max_attempts}): {e}")

        return []

    def _choose(
        self, title: str, candidates: Sequence[DirectoryCandidate], multiple: bool
    ) -> list[str]:
        names = [c.name for c in candidates]
        mode = MenuMode.MULTIPLE if multiple else MenuMode.SINGLE
        spec = MenuSpec(title=_clip(title), options=names, mode=mode)

        config = self.automation
        if config.enabled:
            answer = resolve_automated(spec, config)
            return self._as_names(answer)

        if not self.settings.skip_grid and self.grid_capability.available:
            try:
                return list(self.grid_picker(title, candidates, multiple))
            except Exception as e:
                logger.debug("Grid picker failed", exc_info=True)
                self.on_warning(f"Grid picker failed ({e}); using menu instead")

        return self._as_names(self.presenter.present(spec))

    @staticmethod
    def _as_names(answer: MenuResult) -> list[str]:
        if answer is None or isinstance(answer, bool):
            return []
        if isinstance(answer, str):
            return [answer]
        return list(answer)

    # ─────────────────────────────────────────────────────────────────────────
    # Create directory
    # ─────────────────────────────────────────────────────────────────────────

    def create_directory(
        self,
        parent: str | os.PathLike,
        name: str | None = None,
        dry_run: bool = False,
    ) -> CreationOutcome:
        """
        Create a new directory under parent.

        Args:
            parent: Existing directory to create in
            name: Folder name; prompted for when None
            dry_run: Validate and report without creating anything

        Returns:
            CreationOutcome describing what happened
        """
        outcome = self._create(expand_path(parent), name, dry_run)
        display.show_creation_outcome(outcome)
        return outcome

    def _create(self, parent: Path, name: Optional[str], dry_run: bool) -> CreationOutcome:
        if not is_directory(parent):
            return CreationOutcome(
                status=CreationStatus.PARENT_NOT_FOUND,
                path=str(parent),
                message=f"Parent folder not found: {parent}",
                dry_run=dry_run,
            )

        if name is None:
            name = self.prompt_directory_name(parent)
            if name is None:
                return CreationOutcome(status=CreationStatus.CANCELLED, dry_run=dry_run)

        result = validate_name(name, self.platform)
        if not result.accepted:
            return CreationOutcome(
                status=CreationStatus.INVALID_NAME,
                message=f"{result.message}: '{name.strip()}'",
                failure_reason=result.failure_reason,
                dry_run=dry_run,
            )

        target = parent / result.canonical_name
        if path_exists(target):
            return CreationOutcome(
                status=CreationStatus.ALREADY_EXISTS, path=str(target), dry_run=dry_run
            )

        if dry_run:
            return CreationOutcome(status=CreationStatus.CREATED, path=str(target), dry_run=True)

        try:
            created = make_directory(target)
        except FileExistsError:
            return CreationOutcome(status=CreationStatus.ALREADY_EXISTS, path=str(target))
        except PermissionError as e:
            return CreationOutcome(
                status=CreationStatus.FAILED, path=str(target), message=f"Permission denied: {e}"
            )
        except OSError as e:
            return CreationOutcome(
                status=CreationStatus.FAILED, path=str(target), message=f"OS error: {e}"
            )

        return CreationOutcome(status=CreationStatus.CREATED, path=str(created))

    def prompt_directory_name(
        self, parent: Path, max_attempts: int = NAME_PROMPT_ATTEMPTS
    ) -> Optional[str]:
        """
        Ask for a new folder name until one is valid and confirmed.

        Returns:
            The canonical name, or None if cancelled, attempts ran out or
            the prompt itself failed (e.g. stdin closed)
        """
        if self.automation.enabled:
            self.on_warning("No folder name given and automation mode cannot prompt for one")
            return None

        for attempt in range(1, max_attempts + 1):
            try:
                raw = self.presenter.ask_text("Name for the new folder (blank to cancel)")
                if raw is None:
                    return None

                result = validate_name(raw, self.platform)
                if not result.accepted:
                    self.on_warning(f"{result.message} ({attempt}/{max_attempts})")
                    continue

                name = result.canonical_name
                if path_exists(parent / name):
                    self.on_warning(
                        f"Folder already exists: {parent / name} ({attempt}/{max_attempts})"
                    )
                    continue

                if self.ask(MenuSpec(title=_clip(f"Use '{name}'?"), mode=MenuMode.YES_NO)):
                    return name
            except Exception as e:
                # A failed read (EOF, closed terminal) will fail again; stop here
                logger.debug("Name prompt attempt %d failed", attempt, exc_info=True)
                self.on_warning(f"Could not read a folder name: {str(e) or type(e).__name__}")
                return None

        self.on_warning("Too many attempts; no folder created")
        return None
