"""Shared test fixtures for Part Picker."""

import openpyxl
import pytest

from part_picker.catalog_store import CatalogStore
from part_picker.models import Item


@pytest.fixture
def items():
    """A small catalog across two categories."""
    return [
        Item(name="강아지", category="동물"),
        Item(name="고양이", category="동물"),
        Item(name="상추", category="식물"),
        Item(name="Hex Bolt M4", category="Hardware"),
    ]


@pytest.fixture
def store(items):
    """A CatalogStore holding the small catalog."""
    return CatalogStore(items=items)


@pytest.fixture
def sample_rows():
    """Raw rows with a header and a quantity column."""
    return [
        ["품명", "수량"],
        ["[식물] 상추", "2"],
        ["[동물] 강아지", ""],
    ]


@pytest.fixture
def xlsx_file(tmp_path):
    """An .xlsx workbook with a header row and quantities."""
    path = tmp_path / "parts.xlsx"
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["No", "Part", "Qty"])
    ws.append([1, "[동물] 강아지", 2])
    ws.append([2, "[동물] 고양이", None])
    ws.append([3, "[식물] 토마토", 1.5])
    ws.append([4, None, 3])
    wb.save(path)
    return path


@pytest.fixture
def csv_file(tmp_path):
    """A headerless .csv file."""
    path = tmp_path / "parts.csv"
    path.write_text("[식물] 상추\n[식물] 토마토\n다람쥐\n", encoding="utf-8")
    return path


@pytest.fixture
def config_path(tmp_path):
    """Path to a config file that does not exist, forcing defaults."""
    return tmp_path / "missing.toml"
