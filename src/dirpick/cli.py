"""CLI interface for dirpick."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.logging import RichHandler

from dirpick import __version__
from dirpick.config import Settings
from dirpick.display import console, err_console, print_paths, show_selection, show_validation_result
from dirpick.models import UIPreference
from dirpick.orchestrator import DEFAULT_PICK_ATTEMPTS, SelectionOrchestrator
from dirpick.ui.presenter import MenuPresenter
from dirpick.validator import validate_name

# Create Typer app
app = typer.Typer(
    name="dirpick",
    help="Pick or create directories with rich, grid or plain-text menus",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"dirpick version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send diagnostic logging to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostic logging."),
) -> None:
    """dirpick - interactive directory selection and creation."""
    setup_logging(verbose)


def _orchestrator(ui: Optional[UIPreference], no_grid: bool = False) -> SelectionOrchestrator:
    settings = Settings.from_env()
    update = {}
    if ui is not None:
        update["ui"] = ui
    if no_grid:
        update["skip_grid"] = True
    if update:
        settings = settings.model_copy(update=update)

    presenter = MenuPresenter(preference=settings.ui)
    return SelectionOrchestrator(presenter=presenter, settings=settings)


@app.command()
def pick(
    base: Path = typer.Argument(..., help="Folder whose subfolders are offered"),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-x", help="Glob pattern of folder names to hide (repeatable)"
    ),
    exclude_empty: bool = typer.Option(False, "--exclude-empty", help="Hide empty folders"),
    multiple: bool = typer.Option(False, "--multiple", "-m", help="Allow picking several folders"),
    retry: bool = typer.Option(False, "--retry", help="Offer to try again when nothing is picked"),
    attempts: int = typer.Option(
        DEFAULT_PICK_ATTEMPTS, "--attempts", min=1, help="Maximum selection attempts"
    ),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Menu title"),
    ui: Optional[UIPreference] = typer.Option(None, "--ui", help="Menu style"),
    no_grid: bool = typer.Option(False, "--no-grid", help="Never use the grid picker"),
    summary: bool = typer.Option(False, "--summary", help="Show a table of the picked folders"),
) -> None:
    """Pick one or more subfolders and print their full paths."""
    orchestrator = _orchestrator(ui, no_grid)

    try:
        paths = orchestrator.pick_directories(
            base,
            exclude_patterns=exclude or [],
            exclude_empty=exclude_empty,
            multiple=multiple,
            retry_on_cancel=retry,
            max_attempts=attempts,
            title=title,
        )
    except KeyboardInterrupt:
        err_console.print("\n[dim]Cancelled[/dim]")
        raise typer.Exit(130)

    if summary:
        show_selection(paths)

    if not paths:
        raise typer.Exit(1)

    print_paths(paths)


@app.command()
def create(
    parent: Path = typer.Argument(..., help="Folder to create the new folder in"),
    name: Optional[str] = typer.Argument(None, help="New folder name (prompted for if omitted)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate without creating anything"),
    ui: Optional[UIPreference] = typer.Option(None, "--ui", help="Menu style"),
) -> None:
    """Create a new folder after validating its name."""
    orchestrator = _orchestrator(ui)

    try:
        outcome = orchestrator.create_directory(parent, name=name, dry_run=dry_run)
    except KeyboardInterrupt:
        err_console.print("\n[dim]Cancelled[/dim]")
        raise typer.Exit(130)

    if not outcome.created:
        raise typer.Exit(1)

    print_paths([Path(outcome.path)])


@app.command()
def check(
    name: str = typer.Argument(..., help="Folder name to check"),
    platform: Optional[str] = typer.Option(
        None, "--platform", "-p", help="Check against another platform (e.g. win32, linux)"
    ),
) -> None:
    """Check whether a folder name is valid."""
    result = validate_name(name, platform)
    show_validation_result(result)

    if not result.accepted:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
