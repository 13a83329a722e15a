"""Grid-style directory picker built on Textual."""

from typing import Optional, Sequence

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import DataTable, Footer, Header, Static

from dirpick.models import DirectoryCandidate

MARK = "[green]✓[/green]"


def ordered_selection(names: Sequence[str], selected: set[str]) -> list[str]:
    """Selected names in grid order."""
    return [name for name in names if name in selected]


class DirectoryGridApp(App[Optional[list[str]]]):
    """Full-screen table for picking directories."""

    TITLE = "dirpick"

    BINDINGS = [
        Binding("space", "toggle_select", "Select"),
        Binding("a", "select_all", "Select All"),
        Binding("u", "deselect_all", "Deselect All"),
        Binding("escape", "cancel", "Cancel"),
        Binding("q", "cancel", "Cancel"),
    ]

    def __init__(
        self,
        title: str,
        candidates: Sequence[DirectoryCandidate],
        multiple: bool = False,
    ):
        super().__init__()
        self.sub_title = title
        self.candidates = list(candidates)
        self.multiple = multiple
        self.selected: set[str] = set()

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.candidates]

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-container"):
            yield DataTable(id="directory-table")
            yield Static("", id="selection-info")
        yield Footer()

    def on_mount(self) -> None:
        """Fill the table."""
        table = self.query_one("#directory-table", DataTable)
        table.cursor_type = "row"
        table.add_column("", key="mark", width=3)
        table.add_column("Folder", key="name")
        table.add_column("Path", key="path")

        for candidate in self.candidates:
            table.add_row(
                "",
                escape(candidate.name),
                escape(candidate.full_path),
                key=candidate.name,
            )

        table.focus()
        self._update_info()

    def _cursor_name(self) -> Optional[str]:
        table = self.query_one("#directory-table", DataTable)
        if not self.candidates:
            return None
        return self.candidates[table.cursor_row].name

    def action_toggle_select(self) -> None:
        """Toggle the highlighted row."""
        if not self.multiple:
            return
        name = self._cursor_name()
        if name is None:
            return
        if name in self.selected:
            self.selected.discard(name)
        else:
            self.selected.add(name)
        self._refresh_marks()

    def action_select_all(self) -> None:
        if self.multiple:
            self.selected = set(self.names)
            self._refresh_marks()

    def action_deselect_all(self) -> None:
        if self.multiple:
            self.selected.clear()
            self._refresh_marks()

    def action_cancel(self) -> None:
        self.exit(None)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter accepts: the highlighted row, or the marked rows in multi mode."""
        name = event.row_key.value
        if self.multiple and self.selected:
            self.exit(ordered_selection(self.names, self.selected))
        else:
            self.exit([name])

    def _refresh_marks(self) -> None:
        table = self.query_one("#directory-table", DataTable)
        for name in self.names:
            table.update_cell(name, "mark", MARK if name in self.selected else "")
        self._update_info()

    def _update_info(self) -> None:
        info = self.query_one("#selection-info", Static)
        if self.multiple:
            info.update(
                f"[bold]{len(self.selected)}[/bold] selected  "
                "[dim]Space to mark, Enter to accept, Esc to cancel[/dim]"
            )
        else:
            info.update("[dim]Enter to choose, Esc to cancel[/dim]")


def run_grid_picker(
    title: str,
    candidates: Sequence[DirectoryCandidate],
    multiple: bool = False,
) -> list[str]:
    """Run the grid picker.

    Args:
        title: Shown in the header
        candidates: Directories to offer
        multiple: Allow marking several rows

    Returns:
        Chosen directory names (empty if cancelled)
    """
    app = DirectoryGridApp(title, candidates, multiple=multiple)
    result = app.run()
    return list(result or [])
