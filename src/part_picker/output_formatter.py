"""Output formatting for CLI and programmatic use."""

import json
from typing import Any
from uuid import UUID

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


class JSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for output."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, UUID):
            return str(obj)
        return super().default(obj)


class OutputFormatter:
    """Formats output for both Rich terminal and JSON modes."""

    def __init__(self, json_mode: bool = False):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
        """
        self.json_mode = json_mode
        self.console = Console()

    def output(self, data: dict[str, Any], message: str = "") -> None:
        """Output data in appropriate format.

        Args:
            data: Data to output
            message: Optional message for Rich mode
        """
        if self.json_mode:
            self._output_json(data)
        else:
            self._output_rich(data, message)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON to stdout."""
        print(json.dumps(data, cls=JSONEncoder, indent=2, ensure_ascii=False))

    def _output_rich(self, data: dict[str, Any], message: str) -> None:
        """Output with Rich formatting."""
        if message:
            self.console.print(f"[green]✓[/green] {escape(message)}")

        payload = data.get("data", {})
        if "catalog" in payload:
            self._render_catalog(data)
        elif "categories" in payload and "total_items" not in payload:
            self._render_categories(data)
        elif "output" in payload:
            self._render_output(data)

    def _render_catalog(self, data: dict) -> None:
        """Render the catalog with Rich."""
        catalog = data["data"]["catalog"]
        items = catalog["items"]

        if not items:
            self.console.print("[dim]No matching items[/dim]")
            return

        table = Table(title="Parts", show_header=True, header_style="bold cyan")
        table.add_column("", justify="center")
        table.add_column("Category", style="yellow")
        table.add_column("Name", style="cyan", no_wrap=False)
        table.add_column("Qty", style="magenta", justify="right")

        for item in items:
            quantity = item.get("quantity")
            table.add_row(
                "[green]✓[/green]" if quantity else "○",
                escape(item["category"]),
                escape(item["name"]),
                str(quantity) if quantity else "-",
            )

        self.console.print(table)
        self.console.print(f"\nTotal items: {catalog['total_items']}")
        if catalog.get("output"):
            self.console.print(f"Output: {catalog['output']}", markup=False, highlight=False)

    def _render_categories(self, data: dict) -> None:
        """Render the category list."""
        for category in data["data"]["categories"]:
            self.console.print(f"• {category}", markup=False)

    def _render_output(self, data: dict) -> None:
        """Render the output line and the selected chips."""
        payload = data["data"]
        chips = payload.get("chips") or []

        if chips:
            self.console.print(
                Panel(escape("  ".join(chips)), title="Selected", border_style="cyan"),
            )
        else:
            self.console.print("[dim]Nothing selected[/dim]")

        # Plain print so the line can be piped without markup or wrapping.
        print(payload["output"])

    def error(self, message: str, error_code: str | None = None) -> None:
        """Output error message.

        Args:
            message: Error message
            error_code: Optional error code
        """
        if self.json_mode:
            output = {"success": False, "error": message}
            if error_code:
                output["error_code"] = error_code
            print(json.dumps(output, ensure_ascii=False))
        else:
            self.console.print(f"[red]✗ Error:[/red] {escape(message)}", highlight=False)

    def warning(self, message: str, warning_code: str | None = None) -> None:
        """Output warning message.

        Args:
            message: Warning message
            warning_code: Optional warning code
        """
        if self.json_mode:
            output = {"warning": message}
            if warning_code:
                output["warning_code"] = warning_code
            print(json.dumps(output, ensure_ascii=False))
        else:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", highlight=False)
