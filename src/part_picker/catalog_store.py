"""In-memory catalog and selection management."""

import math
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any
from uuid import UUID

from .config import ConfigManager
from .item_normalizer import coerce_quantity, matches_query, parse_label
from .models import ALL_CATEGORIES, SAMPLE_LABELS, UNCATEGORIZED, Catalog, Item
from .serializer import format_chip, render_selection
from .sheet_reader import read_rows
from .table_ingester import NAME_HEADERS, QTY_HEADERS, ImportResult, ingest_rows


class ItemNotFoundError(Exception):
    """Raised when an item id is not in the current catalog."""

    def __init__(self, item_id: UUID | str):
        self.item_id = item_id
        super().__init__(f"Item with ID '{item_id}' not found")


class EmptyImportError(Exception):
    """Raised when a decoded source yields no usable items."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(
            f"No items to import from '{source}'. "
            "Put labels like '[Category] Name' in the first column"
        )


def sample_items(default_category: str = UNCATEGORIZED) -> list[Item]:
    """Build the built-in sample catalog."""
    items = []
    for label in SAMPLE_LABELS:
        category, name = parse_label(label, default_category=default_category)
        items.append(Item(name=name, category=category))
    return items


class CatalogStore:
    """Owns the current catalog, its selection and the filter state.

    One store backs one interactive session. Importing replaces the items
    and the selection together; nothing is merged with a previous import.
    """

    def __init__(
        self,
        items: Sequence[Item] | None = None,
        default_category: str = UNCATEGORIZED,
        all_label: str = ALL_CATEGORIES,
        name_headers: Iterable[str] = NAME_HEADERS,
        quantity_headers: Iterable[str] = QTY_HEADERS,
    ):
        """Initialize the store.

        Args:
            items: Starting items. Uses the sample catalog if not provided.
            default_category: Category for labels without a tag
            all_label: Name of the pseudo-category matching everything
            name_headers: Header words identifying the name column
            quantity_headers: Header words identifying the quantity column
        """
        self.default_category = default_category
        self.all_label = all_label
        self.name_headers = frozenset(name_headers)
        self.quantity_headers = frozenset(quantity_headers)
        self.catalog = Catalog(
            items=list(items) if items is not None else sample_items(default_category)
        )
        self.query = ""
        self.active_category = all_label

    @property
    def items(self) -> list[Item]:
        return self.catalog.items

    @property
    def selection(self) -> dict[UUID, int]:
        return self.catalog.selection

    def _resolve(self, item_id: UUID | str) -> Item:
        if isinstance(item_id, str):
            try:
                item_id = UUID(item_id)
            except ValueError:
                raise ItemNotFoundError(item_id) from None

        item = self.catalog.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def replace_catalog(
        self,
        items: Sequence[Item],
        default_selection: Mapping[UUID, int] | None = None,
    ) -> dict:
        """Swap in a new item list and selection, resetting the filters.

        Args:
            items: New items, in display order
            default_selection: Initial quantities by item id

        Returns:
            Dict with success status and catalog summary
        """
        ids = {item.id for item in items}
        selection = {}
        for item_id, quantity in (default_selection or {}).items():
            if item_id not in ids or not math.isfinite(quantity):
                continue
            whole = math.floor(quantity)
            if whole > 0:
                selection[item_id] = whole

        self.catalog = Catalog(items=list(items), selection=selection)
        self.query = ""
        self.active_category = self.all_label

        return {
            "success": True,
            "message": f"Loaded {len(items)} items",
            "data": {
                "total_items": len(items),
                "selected": len(selection),
                "categories": self.categories(),
            },
        }

    def ingest(self, rows: Sequence[Sequence[Any] | None]) -> ImportResult:
        """Run ingestion with this store's vocabularies and labels."""
        return ingest_rows(
            rows,
            name_headers=self.name_headers,
            quantity_headers=self.quantity_headers,
            default_category=self.default_category,
        )

    def import_rows(self, rows: Sequence[Sequence[Any] | None], source: str = "input") -> dict:
        """Ingest rows and replace the catalog with the result.

        Raises:
            EmptyImportError: If no rows produced an item. The store is unchanged.
        """
        return self.apply_import(self.ingest(rows), source)

    def apply_import(self, result: ImportResult, source: str = "input") -> dict:
        """Commit an already ingested result.

        Raises:
            EmptyImportError: If the result has no items
        """
        if result.is_empty:
            raise EmptyImportError(source)
        outcome = self.replace_catalog(result.catalog_items(), result.default_selection())
        outcome["message"] = f"Imported {len(result.items)} items from {source}"
        return outcome

    def import_file(self, path: Path | str) -> dict:
        """Decode a spreadsheet file and import its first sheet.

        Raises:
            DecodeError: If the file cannot be read. The store is unchanged.
            EmptyImportError: If the file has no usable rows.
        """
        path = Path(path)
        rows = read_rows(path)
        return self.import_rows(rows, source=path.name)

    def toggle(self, item_id: UUID | str) -> dict:
        """Select an item with quantity 1, or deselect it if already selected.

        Raises:
            ItemNotFoundError: If the item is not in the catalog
        """
        item = self._resolve(item_id)

        if item.id in self.selection:
            del self.selection[item.id]
            return {
                "success": True,
                "message": f"Deselected {item.name}",
                "data": {"item": item.model_dump(mode="json"), "quantity": None},
            }

        self.selection[item.id] = 1
        return {
            "success": True,
            "message": f"Selected {item.name}",
            "data": {"item": item.model_dump(mode="json"), "quantity": 1},
        }

    def set_quantity(self, item_id: UUID | str, value: Any) -> dict:
        """Select an item with a quantity coerced to a positive integer.

        Raises:
            ItemNotFoundError: If the item is not in the catalog
        """
        item = self._resolve(item_id)
        quantity = coerce_quantity(value)
        self.selection[item.id] = quantity

        return {
            "success": True,
            "message": f"Set {item.name} to {quantity}",
            "data": {"item": item.model_dump(mode="json"), "quantity": quantity},
        }

    def clear_all(self) -> dict:
        """Empty the selection, keeping the items."""
        cleared = len(self.selection)
        self.selection.clear()
        return {
            "success": True,
            "message": f"Cleared {cleared} selected items",
            "data": {"cleared_count": cleared},
        }

    def quantity_of(self, item_id: UUID) -> int | None:
        """Selected quantity for an item, or None if not selected."""
        return self.selection.get(item_id)

    def filter(self, query: str | None = None, category: str | None = None) -> list[Item]:
        """Items in the category whose name contains the query.

        Both arguments default to the store's current filter state.
        """
        query = self.query if query is None else query
        category = self.active_category if category is None else category

        return [
            item
            for item in self.items
            if (category == self.all_label or item.category == category)
            and matches_query(item.name, query)
        ]

    def visible_items(self) -> list[Item]:
        """Items matching the current query and category."""
        return self.filter()

    def set_query(self, query: str) -> None:
        self.query = query or ""

    def set_category(self, category: str) -> None:
        """Switch the active category; unknown categories reset to all."""
        self.active_category = category if category in self.categories() else self.all_label

    def categories(self) -> list[str]:
        """The pseudo-category followed by distinct categories in first-seen order."""
        seen: dict[str, None] = {}
        for item in self.items:
            seen.setdefault(item.category, None)
        return [self.all_label, *seen]

    def find_by_name(self, name: str) -> Item | None:
        """First item with exactly this name."""
        for item in self.items:
            if item.name == name:
                return item
        return None

    def selected_items(self) -> list[tuple[Item, int]]:
        """Selected items with their quantities, in catalog order."""
        return [(item, self.selection[item.id]) for item in self.items if item.id in self.selection]

    def chips(self) -> list[str]:
        """On-screen labels for the selected items."""
        return [format_chip(item.name, quantity) for item, quantity in self.selected_items()]

    def render(self) -> str:
        """The selection as the comma-joined output line."""
        return render_selection(self.items, self.selection)

    def to_dict(self, items: Sequence[Item] | None = None) -> dict:
        """Result dict describing the catalog (or a filtered view of it)."""
        shown = self.items if items is None else items
        return {
            "success": True,
            "data": {
                "catalog": {
                    "items": [
                        {
                            **item.model_dump(mode="json"),
                            "quantity": self.selection.get(item.id),
                        }
                        for item in shown
                    ],
                    "total_items": len(shown),
                    "categories": self.categories(),
                    "output": self.render(),
                }
            },
        }


def create_catalog_store(
    config: ConfigManager | None = None, load_catalog_file: bool = True
) -> CatalogStore:
    """Create a store using config labels and header words.

    Starts from the configured catalog file when one is set and
    load_catalog_file is True, otherwise from the sample catalog.

    Raises:
        DecodeError: If the configured catalog file cannot be read
        EmptyImportError: If the configured catalog file has no items
    """
    cfg = config or ConfigManager()
    store = CatalogStore(
        default_category=cfg.labels.uncategorized,
        all_label=cfg.labels.all,
        name_headers=cfg.headers.name_vocabulary,
        quantity_headers=cfg.headers.quantity_vocabulary,
    )
    if load_catalog_file and cfg.data.catalog_file is not None:
        store.import_file(cfg.data.catalog_file)
    return store
