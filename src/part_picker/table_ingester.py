"""Mapping of raw spreadsheet rows onto catalog items."""

import math
from collections.abc import Iterable, Sequence
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from .item_normalizer import parse_label, to_number
from .models import UNCATEGORIZED, ImportedItem, Item

NAME_HEADERS = frozenset({"name", "part", "partname", "item", "품명", "이름", "부품", "부품명"})
QTY_HEADERS = frozenset({"qty", "quantity", "수량"})


def cell_text(value: Any) -> str:
    """Render a raw cell as trimmed text."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


class ImportResult(BaseModel):
    """Items produced by one ingestion pass."""

    items: list[ImportedItem] = Field(default_factory=list)
    has_header: bool = False
    name_column: int = 0
    quantity_column: int = -1

    @property
    def is_empty(self) -> bool:
        return not self.items

    def catalog_items(self) -> list[Item]:
        """Items without their quantity hints, in row order."""
        return [item.to_item() for item in self.items]

    def default_selection(self) -> dict[UUID, int]:
        """Selection built from the quantity hints."""
        return {
            item.id: item.default_quantity
            for item in self.items
            if item.default_quantity and item.default_quantity > 0
        }


def _find_column(headers: list[str], vocabulary: Iterable[str]) -> int:
    words = {word.lower() for word in vocabulary}
    for index, header in enumerate(headers):
        if header in words:
            return index
    return -1


def _cell(row: Sequence[Any] | None, index: int) -> Any:
    if row is None or index < 0 or index >= len(row):
        return None
    return row[index]


def _quantity_hint(value: Any) -> int | None:
    number = to_number(value)
    if number is None or not math.isfinite(number) or number <= 0:
        return None
    hint = math.floor(number)
    return hint if hint > 0 else None


def ingest_rows(
    rows: Sequence[Sequence[Any] | None],
    name_headers: Iterable[str] = NAME_HEADERS,
    quantity_headers: Iterable[str] = QTY_HEADERS,
    default_category: str = UNCATEGORIZED,
) -> ImportResult:
    """Turn a grid of raw cells into items.

    Row 0 is a header when any of its cells names a name or quantity
    column (case-insensitive). Without a header, every row is data and
    the first column holds the labels.

    Args:
        rows: Row-major grid of raw cell values
        name_headers: Header words identifying the name column
        quantity_headers: Header words identifying the quantity column
        default_category: Category for labels without a tag

    Returns:
        ImportResult with items in row order
    """
    if not rows:
        return ImportResult()

    headers = [cell_text(value).lower() for value in (rows[0] or [])]
    name_index = _find_column(headers, name_headers)
    qty_index = _find_column(headers, quantity_headers)

    has_header = name_index != -1 or qty_index != -1
    if not has_header:
        name_index = 0

    items: list[ImportedItem] = []
    for row in rows[1 if has_header else 0 :]:
        category, name = parse_label(
            cell_text(_cell(row, name_index)), default_category=default_category
        )
        if not name:
            continue

        item = ImportedItem(name=name, category=category)
        if qty_index != -1:
            item.default_quantity = _quantity_hint(_cell(row, qty_index))
        items.append(item)

    return ImportResult(
        items=items,
        has_header=has_header,
        name_column=name_index,
        quantity_column=qty_index,
    )
