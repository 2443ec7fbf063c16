"""Rendering of a selection into the single-line output string."""

import re
from collections.abc import Iterable, Mapping
from uuid import UUID

from .models import Item

_WHITESPACE = re.compile(r"[\s\ufeff]+")

ENTRY_SEPARATOR = ","
QUANTITY_MARK = "x"
DISPLAY_QUANTITY_MARK = "×"


def format_entry(name: str, quantity: int) -> str:
    """Format one output entry: ``name`` or ``namexN``."""
    if quantity == 1:
        return name
    return f"{name}{QUANTITY_MARK}{quantity}"


def render_selection(items: Iterable[Item], selection: Mapping[UUID, int]) -> str:
    """Render selected items, in catalog order, as ``name,namexN``.

    All whitespace is removed from the result, including spaces inside
    names. An empty selection renders as an empty string.
    """
    entries = [
        format_entry(item.name, selection[item.id])
        for item in items
        if selection.get(item.id, 0) > 0
    ]
    return _WHITESPACE.sub("", ENTRY_SEPARATOR.join(entries))


def format_chip(name: str, quantity: int) -> str:
    """On-screen label for a selected item."""
    if quantity == 1:
        return name
    return f"{name}{DISPLAY_QUANTITY_MARK}{quantity}"
