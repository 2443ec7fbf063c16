"""CLI entry point for Part Picker."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from .catalog_store import (
    CatalogStore,
    EmptyImportError,
    ItemNotFoundError,
    create_catalog_store,
)
from .clipboard import ClipboardError, copy_text
from .config import ConfigManager
from .output_formatter import OutputFormatter
from .sheet_reader import DecodeError

app = typer.Typer(
    name="parts",
    help="Pick parts from a spreadsheet and build a comma-separated order line",
    no_args_is_help=True,
)

console = Console()

# Global state for formatter and config (set by callback)
formatter: OutputFormatter = OutputFormatter()
config: ConfigManager | None = None


def get_config() -> ConfigManager:
    """Get or create ConfigManager instance."""
    global config
    if config is None:
        config = ConfigManager()
    return config


def load_store(file: Path) -> CatalogStore:
    """Create a store and import FILE into it.

    Reports decode and empty-import failures and exits.
    """
    store = create_catalog_store(get_config(), load_catalog_file=False)
    try:
        store.import_file(file)
    except DecodeError as e:
        formatter.error(str(e), error_code="DECODE_FAILED")
        raise typer.Exit(code=1)
    except EmptyImportError as e:
        formatter.warning(str(e), warning_code="EMPTY_IMPORT")
        raise typer.Exit(code=0)
    return store


def parse_pick(pick: str) -> tuple[str, str | None]:
    """Split ``NAME=QTY`` into name and raw quantity."""
    name, sep, quantity = pick.rpartition("=")
    if not sep:
        return pick.strip(), None
    return name.strip(), quantity.strip()


@app.callback()
def main(
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON for programmatic use")
    ] = False,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to a config TOML file")
    ] = None,
) -> None:
    """Part Picker CLI - search, select and serialize parts lists."""
    global formatter, config

    formatter = OutputFormatter(json_mode=json_output)
    config = ConfigManager(config_path=config_path)


@app.command()
def show(
    file: Annotated[Path, typer.Argument(help="Spreadsheet (.xlsx, .xls or .csv)")],
    query: Annotated[
        str | None, typer.Option("--query", "-q", help="Search text (spaces and case ignored)")
    ] = None,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only show this category")
    ] = None,
) -> None:
    """List the parts in a spreadsheet."""
    store = load_store(file)
    try:
        items = store.filter(query=query or "", category=category or store.all_label)
        formatter.output(store.to_dict(items))
    except Exception as e:
        formatter.error(str(e))
        raise typer.Exit(code=1)


@app.command()
def categories(
    file: Annotated[Path, typer.Argument(help="Spreadsheet (.xlsx, .xls or .csv)")],
) -> None:
    """List the categories found in a spreadsheet."""
    store = load_store(file)
    formatter.output({"success": True, "data": {"categories": store.categories()}})


@app.command()
def render(
    file: Annotated[Path, typer.Argument(help="Spreadsheet (.xlsx, .xls or .csv)")],
    pick: Annotated[
        list[str] | None,
        typer.Option("--pick", "-p", help="Select NAME, or NAME=QTY for a quantity"),
    ] = None,
    drop: Annotated[
        list[str] | None, typer.Option("--drop", "-d", help="Deselect NAME")
    ] = None,
    no_hints: Annotated[
        bool, typer.Option("--no-hints", help="Ignore the quantity column")
    ] = False,
    copy: Annotated[bool, typer.Option("--copy", help="Copy the output to the clipboard")] = False,
) -> None:
    """Build the comma-separated output line for a selection."""
    store = load_store(file)

    try:
        if no_hints:
            store.clear_all()

        for raw in pick or []:
            name, quantity = parse_pick(raw)
            item = store.find_by_name(name)
            if item is None:
                raise ItemNotFoundError(name)
            store.set_quantity(item.id, quantity if quantity is not None else 1)

        for name in drop or []:
            item = store.find_by_name(name.strip())
            if item is None:
                raise ItemNotFoundError(name)
            if store.quantity_of(item.id) is not None:
                store.toggle(item.id)
    except ItemNotFoundError as e:
        formatter.error(str(e), error_code="ITEM_NOT_FOUND")
        raise typer.Exit(code=1)

    output = store.render()
    data = {"output": output, "chips": store.chips(), "copied": False}

    copy_error = None
    if copy and get_config().get("clipboard.enabled", True):
        try:
            data["copied"] = copy_text(output)
        except ClipboardError as e:
            copy_error = e
            data["copy_error"] = str(e)

    formatter.output({"success": True, "data": data})
    if copy_error is not None and not formatter.json_mode:
        formatter.warning(str(copy_error), warning_code="CLIPBOARD_FAILED")


@app.command()
def tui(
    file: Annotated[
        Path | None, typer.Argument(help="Spreadsheet to open at start")
    ] = None,
) -> None:
    """Launch the interactive terminal UI."""
    from .tui import PartPickerTUI

    cfg = get_config()
    try:
        store = create_catalog_store(cfg, load_catalog_file=file is None)
    except (DecodeError, EmptyImportError) as e:
        console.print(f"[yellow]⚠[/yellow] {escape(str(e))}; starting with the sample catalog")
        store = create_catalog_store(cfg, load_catalog_file=False)

    PartPickerTUI(store, initial_file=file, clipboard_enabled=cfg.clipboard.enabled).run()


if __name__ == "__main__":
    app()
