"""Tests for output rendering."""

from part_picker.models import Item
from part_picker.serializer import format_chip, format_entry, render_selection


class TestFormatEntry:
    """Tests for single entries."""

    def test_quantity_one_omitted(self):
        """Quantity 1 renders the bare name."""
        assert format_entry("강아지", 1) == "강아지"

    def test_quantity_suffix(self):
        """Other quantities use an x suffix in base 10."""
        assert format_entry("고양이", 3) == "고양이x3"
        assert format_entry("Bolt", 1000) == "Boltx1000"


class TestRenderSelection:
    """Tests for the full output line."""

    def test_documented_example(self):
        """Two items in catalog order, quantity suffix only when > 1."""
        puppy = Item(name="강아지", category="동물")
        cat = Item(name="고양이", category="동물")
        assert render_selection([puppy, cat], {cat.id: 3, puppy.id: 1}) == "강아지,고양이x3"

    def test_unselected_skipped(self):
        """Items without a selection entry are left out."""
        a, b, c = Item(name="A"), Item(name="B"), Item(name="C")
        assert render_selection([a, b, c], {c.id: 2, a.id: 1}) == "A,Cx2"

    def test_non_positive_skipped(self):
        """Non-positive quantities count as unselected."""
        a, b = Item(name="A"), Item(name="B")
        assert render_selection([a, b], {a.id: 0, b.id: 1}) == "B"

    def test_whitespace_removed(self):
        """All whitespace is stripped from the result."""
        a = Item(name="Hex Bolt\tM4")
        b = Item(name=" 고 양 이 ")
        assert render_selection([a, b], {a.id: 2, b.id: 1}) == "HexBoltM4x2,고양이"

    def test_byte_order_mark_removed(self):
        """A BOM left over from a CSV export does not reach the output."""
        a = Item(name="\ufeffNut")
        assert render_selection([a], {a.id: 1}) == "Nut"

    def test_empty_selection(self):
        """Nothing selected renders an empty string."""
        assert render_selection([Item(name="A")], {}) == ""
        assert render_selection([], {}) == ""

    def test_selection_of_missing_items_ignored(self):
        """Entries for items not in the list are not rendered."""
        a, other = Item(name="A"), Item(name="Other")
        assert render_selection([a], {other.id: 4}) == ""


class TestFormatChip:
    """Tests for display chips."""

    def test_chip(self):
        """Chips use the multiplication sign and keep spaces."""
        assert format_chip("Hex Bolt", 1) == "Hex Bolt"
        assert format_chip("Hex Bolt", 4) == "Hex Bolt×4"
