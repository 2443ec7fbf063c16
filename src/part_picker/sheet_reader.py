"""Decoding of spreadsheet files into rows of raw cells.

Only the first sheet of a workbook is read. Supported formats are
``.xlsx`` (openpyxl), ``.xls`` (xlrd) and ``.csv``.
"""

import csv
import io
import zipfile
from pathlib import Path
from typing import Any

import openpyxl
import xlrd
from openpyxl.utils.exceptions import InvalidFileException

SUPPORTED_EXTENSIONS = (".xlsx", ".xls", ".csv")

# Tried in order when decoding CSV bytes.
CSV_ENCODINGS = ("utf-8-sig", "cp949")


class DecodeError(Exception):
    """Raised when a source cannot be read as a supported spreadsheet."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(
            f"Could not read '{source}': {reason}. Use a .xlsx, .xls or .csv file"
        )


def read_rows(path: Path | str) -> list[list[Any]]:
    """Read the first sheet of a spreadsheet file.

    Args:
        path: Path to a .xlsx, .xls or .csv file

    Returns:
        Rows of raw cell values

    Raises:
        DecodeError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise DecodeError(path.name, e.strerror or str(e)) from e
    return read_rows_from_bytes(data, path.name)


def read_rows_from_bytes(data: bytes, filename: str) -> list[list[Any]]:
    """Decode spreadsheet bytes, choosing the format from the file name."""
    suffix = Path(filename).suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise DecodeError(filename, f"unsupported file type '{suffix or filename}'")

    if suffix == ".csv":
        return _read_csv(data, filename)
    if suffix == ".xls":
        return _read_xls(data, filename)
    return _read_xlsx(data, filename)


def _read_xlsx(data: bytes, filename: str) -> list[list[Any]]:
    try:
        wb = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except (zipfile.BadZipFile, InvalidFileException, KeyError, OSError, ValueError) as e:
        raise DecodeError(filename, "not a valid Excel workbook") from e

    try:
        ws = wb.worksheets[0] if wb.worksheets else None
        if ws is None:
            return []
        return [list(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


def _read_xls(data: bytes, filename: str) -> list[list[Any]]:
    try:
        book = xlrd.open_workbook(file_contents=data)
    except xlrd.XLRDError as e:
        raise DecodeError(filename, str(e)) from e
    except (OSError, ValueError, AssertionError) as e:
        raise DecodeError(filename, "not a valid Excel 97-2003 workbook") from e

    if book.nsheets == 0:
        return []
    sheet = book.sheet_by_index(0)
    rows = []
    for r in range(sheet.nrows):
        rows.append([_xls_value(cell) for cell in sheet.row(r)])
    return rows


def _xls_value(cell: Any) -> Any:
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return None
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    return cell.value


def _read_csv(data: bytes, filename: str) -> list[list[Any]]:
    for encoding in CSV_ENCODINGS:
        try:
            text = data.decode(encoding)
            break
        except UnicodeDecodeError:
            continue
    else:
        raise DecodeError(filename, "unrecognized text encoding")

    try:
        return [row for row in csv.reader(io.StringIO(text))]
    except csv.Error as e:
        raise DecodeError(filename, str(e)) from e
