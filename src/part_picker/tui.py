"""Terminal UI for Part Picker."""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DataTable, Footer, Header, Input, Label, Static
from textual.worker import get_current_worker

from .catalog_store import CatalogStore, EmptyImportError, ItemNotFoundError
from .clipboard import ClipboardError, copy_text
from .sheet_reader import DecodeError, read_rows
from .table_ingester import ImportResult


class PromptScreen(ModalScreen[str | None]):
    """Modal dialog asking for a single line of text."""

    DEFAULT_CSS = """
    PromptScreen {
        align: center middle;
    }

    #prompt-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: round $primary;
        background: $surface;
    }

    #prompt-actions {
        align-horizontal: right;
        height: auto;
        margin-top: 1;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, title: str, value: str = "", placeholder: str = ""):
        super().__init__()
        self.title_text = title
        self.initial_value = value
        self.placeholder = placeholder

    def compose(self) -> ComposeResult:
        with Vertical(id="prompt-dialog"):
            yield Label(self.title_text)
            yield Input(value=self.initial_value, placeholder=self.placeholder, id="prompt-input")
            with Horizontal(id="prompt-actions"):
                yield Button("Cancel", id="cancel")
                yield Button("OK", id="submit", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel":
            self.dismiss(None)
        elif event.button.id == "submit":
            self._submit()

    def _submit(self) -> None:
        value = self.query_one("#prompt-input", Input).value.strip()
        if not value:
            self.app.bell()
            return
        self.dismiss(value)


class CategoryButton(Button):
    """Button that switches the active category."""

    def __init__(self, category: str, active: bool):
        super().__init__(Text(category), variant="primary" if active else "default")
        self.category = category


class PartPickerTUI(App[None]):
    """Interactive terminal UI for searching and selecting parts."""

    TITLE = "Part Picker"
    SUB_TITLE = "Select parts → comma-separated line"

    DEFAULT_CSS = """
    #search {
        height: 3;
    }

    #categories {
        height: 3;
    }

    CategoryButton {
        min-width: 8;
        margin-right: 1;
    }

    DataTable {
        height: 1fr;
    }

    #chips {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }

    #output {
        height: auto;
        padding: 0 1;
        border: round $accent;
    }

    #status {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $boost;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("space", "toggle_selected", "Toggle"),
        Binding("plus", "increment", "+1"),
        Binding("minus", "decrement", "-1"),
        Binding("n", "edit_quantity", "Quantity"),
        Binding("o", "open_file", "Open File"),
        Binding("c", "clear_all", "Clear All"),
        Binding("y", "copy_output", "Copy"),
        Binding("slash", "focus_search", "Search"),
    ]

    def __init__(
        self,
        store: CatalogStore,
        initial_file: Path | None = None,
        clipboard_enabled: bool = True,
    ):
        super().__init__()
        self.store = store
        self.initial_file = initial_file
        self.clipboard_enabled = clipboard_enabled
        self._visible_ids: list[UUID] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Search parts (spaces ignored)", id="search")
        yield Horizontal(id="categories")
        yield DataTable(id="parts-table")
        yield Static(id="chips")
        yield Static(id="output")
        yield Static(
            "space:toggle  +/-:qty  n:set qty  o:open  c:clear  y:copy  /:search  q:quit",
            id="status",
        )
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#parts-table", DataTable)
        table.cursor_type = "row"
        table.add_columns("", "Category", "Name", "Qty")

        self.refresh_all()
        table.focus()

        if self.initial_file is not None:
            self.load_file(self.initial_file)

    def refresh_all(self) -> None:
        self._refresh_categories()
        self._refresh_table()
        self._refresh_selection()

    def _refresh_categories(self) -> None:
        container = self.query_one("#categories", Horizontal)
        container.remove_children()
        container.mount_all(
            CategoryButton(category, active=category == self.store.active_category)
            for category in self.store.categories()
        )

    def _refresh_table(self) -> None:
        table = self.query_one("#parts-table", DataTable)
        previous_row = table.cursor_row
        table.clear(columns=False)
        self._visible_ids = []

        for item in self.store.visible_items():
            quantity = self.store.quantity_of(item.id)
            self._visible_ids.append(item.id)
            table.add_row(
                "✓" if quantity else "○",
                Text(item.category),
                Text(item.name),
                str(quantity) if quantity else "-",
                key=str(item.id),
            )

        if self._visible_ids:
            row = previous_row if 0 <= previous_row < len(self._visible_ids) else 0
            table.move_cursor(row=row, column=0)

    def _refresh_selection(self) -> None:
        chips = self.store.chips()
        self.query_one("#chips", Static).update(
            Text("  ".join(chips)) if chips else "Nothing selected"
        )
        output = self.store.render()
        self.query_one("#output", Static).update(Text(output or " "))

    def _selected_id(self) -> UUID | None:
        table = self.query_one("#parts-table", DataTable)
        row = table.cursor_row
        if row is None or row < 0 or row >= len(self._visible_ids):
            return None
        return self._visible_ids[row]

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Static).update(Text(message))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search":
            return
        self.store.set_query(event.value)
        self._refresh_table()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not isinstance(event.button, CategoryButton):
            return
        self.store.set_category(event.button.category)
        self._refresh_categories()
        self._refresh_table()

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def action_toggle_selected(self) -> None:
        item_id = self._selected_id()
        if item_id is None:
            self._set_status("No part selected")
            return
        self._apply(lambda: self.store.toggle(item_id))

    def action_increment(self) -> None:
        self._adjust(1)

    def action_decrement(self) -> None:
        self._adjust(-1)

    def _adjust(self, delta: int) -> None:
        item_id = self._selected_id()
        if item_id is None:
            self._set_status("No part selected")
            return
        current = self.store.quantity_of(item_id) or 0
        self._apply(lambda: self.store.set_quantity(item_id, current + delta))

    def action_edit_quantity(self) -> None:
        item_id = self._selected_id()
        if item_id is None:
            self._set_status("No part selected")
            return

        current = self.store.quantity_of(item_id) or 1
        self.push_screen(
            PromptScreen("Quantity", value=str(current)),
            lambda value, selected_id=item_id: self._handle_quantity(selected_id, value),
        )

    def _handle_quantity(self, item_id: UUID, value: str | None) -> None:
        if value is None:
            self._set_status("Quantity unchanged")
            return
        self._apply(lambda: self.store.set_quantity(item_id, value))

    def _apply(self, operation) -> None:
        try:
            result = operation()
        except ItemNotFoundError as exc:
            self._set_status(str(exc))
            return
        self._refresh_table()
        self._refresh_selection()
        self._set_status(result["message"])

    def action_clear_all(self) -> None:
        result = self.store.clear_all()
        self._refresh_table()
        self._refresh_selection()
        self._set_status(result["message"])

    def action_copy_output(self) -> None:
        if not self.clipboard_enabled:
            self._set_status("Clipboard is disabled in the config")
            return
        try:
            copied = copy_text(self.store.render())
        except ClipboardError as exc:
            self._set_status(str(exc))
            return
        self._set_status("Copied!" if copied else "Nothing to copy")

    def action_open_file(self) -> None:
        self.push_screen(
            PromptScreen("Open spreadsheet (.xlsx, .xls, .csv)", placeholder="~/parts.xlsx"),
            self._handle_open,
        )

    def _handle_open(self, value: str | None) -> None:
        if value is None:
            self._set_status("Open canceled")
            return
        self.load_file(Path(value).expanduser())

    @work(thread=True, exclusive=True, group="import")
    def load_file(self, path: Path) -> None:
        """Decode and ingest a file off the UI thread.

        Only the most recently started import is applied.
        """
        worker = get_current_worker()
        self.call_from_thread(self._set_status, f"Reading {path.name}...")
        try:
            result = self.store.ingest(read_rows(path))
        except DecodeError as exc:
            if not worker.is_cancelled:
                self.call_from_thread(self._set_status, str(exc))
            return
        except Exception as exc:
            if not worker.is_cancelled:
                self.call_from_thread(self._set_status, f"Import failed: {exc}")
            return

        if not worker.is_cancelled:
            self.call_from_thread(self._apply_import, result, path.name)

    def _apply_import(self, result: ImportResult, source: str) -> None:
        try:
            outcome = self.store.apply_import(result, source)
        except EmptyImportError as exc:
            self._set_status(str(exc))
            return

        self.query_one("#search", Input).value = ""
        self.refresh_all()
        self._set_status(outcome["message"])
