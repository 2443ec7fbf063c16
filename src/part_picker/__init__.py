"""Part Picker - Search a spreadsheet of parts and serialize a selection."""

from .catalog_store import (
    CatalogStore,
    EmptyImportError,
    ItemNotFoundError,
    create_catalog_store,
)
from .clipboard import ClipboardError, copy_text
from .config import ConfigManager
from .item_normalizer import coerce_quantity, matches_query, normalize_search, parse_label
from .models import ALL_CATEGORIES, UNCATEGORIZED, Catalog, ImportedItem, Item
from .output_formatter import OutputFormatter
from .serializer import format_chip, render_selection
from .sheet_reader import DecodeError, read_rows, read_rows_from_bytes
from .table_ingester import ImportResult, ingest_rows

__version__ = "0.1.0"

__all__ = [
    "ALL_CATEGORIES",
    "Catalog",
    "CatalogStore",
    "ClipboardError",
    "coerce_quantity",
    "ConfigManager",
    "copy_text",
    "create_catalog_store",
    "DecodeError",
    "EmptyImportError",
    "format_chip",
    "ImportedItem",
    "ImportResult",
    "ingest_rows",
    "Item",
    "ItemNotFoundError",
    "matches_query",
    "normalize_search",
    "OutputFormatter",
    "parse_label",
    "read_rows",
    "read_rows_from_bytes",
    "render_selection",
    "UNCATEGORIZED",
]
