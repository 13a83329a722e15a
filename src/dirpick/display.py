"""Rich terminal display for dirpick."""

from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dirpick.models import CreationOutcome, CreationStatus, NameValidationResult

console = Console()
err_console = Console(stderr=True)


def show_warning(message: str) -> None:
    """Report a non-fatal condition."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def show_error(message: str) -> None:
    """Report a failed operation."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def show_info(message: str) -> None:
    """Report progress or a neutral outcome."""
    err_console.print(f"[dim]{escape(message)}[/dim]")


def show_success(message: str) -> None:
    """Report a successful operation."""
    err_console.print(f"[green]✓[/green] {escape(message)}")


def show_selection(paths: Sequence[Path]) -> None:
    """Display the directories that were picked."""
    if not paths:
        err_console.print("[yellow]No folders selected[/yellow]")
        return

    table = Table(title="Selected Folders", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Folder", style="cyan")
    table.add_column("Path")

    for i, path in enumerate(paths, 1):
        table.add_row(str(i), escape(path.name), escape(str(path)))

    err_console.print(table)


def show_validation_result(result: NameValidationResult) -> None:
    """Display the result of a name check."""
    if result.accepted:
        show_success(result.message)
    else:
        show_error(result.message)


def show_creation_outcome(outcome: CreationOutcome) -> None:
    """Display the result of a create-directory operation."""
    target = outcome.path or ""

    if outcome.status == CreationStatus.CREATED:
        if outcome.dry_run:
            err_console.print(
                Panel(
                    f"Would create: [bold]{escape(target)}[/bold]",
                    title="[yellow]DRY RUN[/yellow]",
                    border_style="yellow",
                )
            )
        else:
            show_success(f"Created {target}")
    elif outcome.status == CreationStatus.ALREADY_EXISTS:
        show_warning(f"Folder already exists: {target}")
    elif outcome.status == CreationStatus.CANCELLED:
        show_info("Cancelled")
    else:
        show_error(outcome.message or f"Could not create {target}")


def print_paths(paths: Sequence[Path]) -> None:
    """Write paths to stdout, one per line, for use by scripts."""
    for path in paths:
        console.print(str(path), markup=False, highlight=False, soft_wrap=True)
