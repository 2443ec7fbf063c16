"""Tests for mapping raw rows onto items."""

from part_picker.models import UNCATEGORIZED
from part_picker.table_ingester import cell_text, ingest_rows


class TestHeaderDetection:
    """Tests for locating the name and quantity columns."""

    def test_korean_headers(self, sample_rows):
        """품명/수량 headers are recognized and row 0 is skipped."""
        result = ingest_rows(sample_rows)
        assert result.has_header is True
        assert result.name_column == 0
        assert result.quantity_column == 1
        assert [item.name for item in result.items] == ["상추", "강아지"]

    def test_header_case_insensitive(self):
        """English headers match regardless of case and padding."""
        result = ingest_rows([["#", " PartName ", "QTY"], [1, "Bolt", 4]])
        assert result.name_column == 1
        assert result.quantity_column == 2
        assert result.items[0].name == "Bolt"
        assert result.items[0].default_quantity == 4

    def test_first_matching_column_wins(self):
        """When two columns match, the leftmost one is used."""
        result = ingest_rows([["item", "name"], ["Left", "Right"]])
        assert result.name_column == 0
        assert result.items[0].name == "Left"

    def test_no_header_uses_first_column(self):
        """Without a recognized header every row is data."""
        result = ingest_rows([["[동물] 강아지", "x"], ["고양이", "y"]])
        assert result.has_header is False
        assert [item.name for item in result.items] == ["강아지", "고양이"]
        assert all(item.default_quantity is None for item in result.items)

    def test_quantity_header_only(self):
        """A quantity header without a name header yields no names."""
        result = ingest_rows([["수량", "label"], [2, "Bolt"]])
        assert result.has_header is True
        assert result.is_empty

    def test_custom_vocabulary(self):
        """Extra header words can be supplied."""
        result = ingest_rows(
            [["모델명", "개수"], ["A-100", "5"]],
            name_headers={"모델명"},
            quantity_headers={"개수"},
        )
        assert result.items[0].name == "A-100"
        assert result.items[0].default_quantity == 5


class TestRows:
    """Tests for per-row parsing."""

    def test_categories_and_hints(self, sample_rows):
        """Categories come from tags and only positive quantities become hints."""
        result = ingest_rows(sample_rows)
        lettuce, puppy = result.items
        assert (lettuce.category, lettuce.default_quantity) == ("식물", 2)
        assert (puppy.category, puppy.default_quantity) == ("동물", None)
        assert result.default_selection() == {lettuce.id: 2}

    def test_empty_names_skipped(self):
        """Rows whose label is empty are dropped."""
        result = ingest_rows([["name"], [""], [None], ["  "], ["Bolt"]])
        assert [item.name for item in result.items] == ["Bolt"]

    def test_short_and_missing_rows(self):
        """Short rows and missing rows read as empty cells."""
        result = ingest_rows([["qty", "name"], [3], None, [None, "Nut"]])
        assert [item.name for item in result.items] == ["Nut"]
        assert result.items[0].default_quantity is None

    def test_quantity_parsing(self):
        """Quantities are floored; non-numeric, zero, negative and infinite are ignored."""
        rows = [
            ["name", "qty"],
            ["A", "2.7"],
            ["B", "abc"],
            ["C", 0],
            ["D", -1],
            ["E", "inf"],
            ["F", 0.5],
            ["G", 3.0],
            ["H", "1_0"],
        ]
        hints = {item.name: item.default_quantity for item in ingest_rows(rows).items}
        assert hints == {
            "A": 2,
            "B": None,
            "C": None,
            "D": None,
            "E": None,
            "F": None,
            "G": 3,
            "H": None,
        }

    def test_duplicate_names_distinct_ids(self):
        """Duplicate labels become separate items."""
        result = ingest_rows([["Bolt"], ["Bolt"]])
        assert len(result.items) == 2
        assert result.items[0].id != result.items[1].id

    def test_numeric_labels(self):
        """Numeric cells become text without a trailing .0."""
        result = ingest_rows([[1001.0], [2002]])
        assert [item.name for item in result.items] == ["1001", "2002"]
        assert result.items[0].category == UNCATEGORIZED

    def test_default_category(self):
        """Untagged labels use the given default category."""
        result = ingest_rows([["Bolt"]], default_category="기타")
        assert result.items[0].category == "기타"

    def test_catalog_items_drop_hints(self, sample_rows):
        """Catalog items keep ids but lose the quantity hint."""
        result = ingest_rows(sample_rows)
        plain = result.catalog_items()
        assert [item.id for item in plain] == [item.id for item in result.items]
        assert not hasattr(plain[0], "default_quantity")


class TestEmpty:
    """Tests for inputs that produce nothing."""

    def test_empty_grid(self):
        """No rows, no items."""
        result = ingest_rows([])
        assert result.is_empty
        assert result.default_selection() == {}

    def test_header_only(self):
        """A header with no data rows produces nothing."""
        assert ingest_rows([["품명", "수량"]]).is_empty

    def test_all_blank(self):
        """Rows that are all blank produce nothing."""
        assert ingest_rows([[None, None], ["", ""]]).is_empty


class TestCellText:
    """Tests for cell rendering."""

    def test_values(self):
        """None, floats, ints and text render as trimmed text."""
        assert cell_text(None) == ""
        assert cell_text(3.0) == "3"
        assert cell_text(3.25) == "3.25"
        assert cell_text(7) == "7"
        assert cell_text("  Bolt ") == "Bolt"
