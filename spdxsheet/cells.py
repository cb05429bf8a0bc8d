"""Cell-level access to openpyxl worksheets."""

# Module responsibilities:
# - Translate 0-based (row, column) coordinates to openpyxl's 1-based grid.
# - Distinguish absent cells from present ones without materializing them.
# - Report cell kinds and typed values the way the binder expects them.

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from openpyxl.cell.cell import Cell
from openpyxl.utils.datetime import from_excel
from openpyxl.worksheet.worksheet import Worksheet

from .errors import CellTypeError

CellValue = Union[str, date, datetime]

_NUMERIC_TYPES = {"n", "d"}
_STRING_TYPES = {"s", "str", "inlineStr"}


class CellKind(str, Enum):
    STRING = "string"
    NUMERIC = "numeric"
    OTHER = "other"


def is_empty(value: object) -> bool:
    """Return True for values that end a table or list (None or blank text)."""

    if value is None:
        return True
    return isinstance(value, str) and value == ""


class SheetCells:
    """0-based cell accessor over a single worksheet."""

    def __init__(self, worksheet: Worksheet) -> None:
        self.worksheet = worksheet

    @property
    def max_row(self) -> int:
        """Number of rows spanned by the sheet (0 when empty)."""

        # openpyxl reports max_row == 1 for an empty sheet; check the cell map first.
        if not self.worksheet._cells:
            return 0
        return self.worksheet.max_row

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        # Worksheet.cell() creates missing cells, so absence is checked on the
        # private cell map (openpyxl 3.1.x layout, pinned <4 in pyproject.toml).
        return self.worksheet._cells.get((row + 1, col + 1))

    def create_cell(self, row: int, col: int) -> Cell:
        return self.worksheet.cell(row=row + 1, column=col + 1)

    def get_value(self, row: int, col: int) -> object:
        cell = self.get_cell(row, col)
        return None if cell is None else cell.value

    def set_value(self, row: int, col: int, value: CellValue) -> Cell:
        """Write ``value`` at (row, col), creating the cell on demand."""

        if isinstance(value, datetime) and value.tzinfo is not None:
            raise CellTypeError("Timezone-aware datetimes cannot be stored in a worksheet")
        cell = self.get_cell(row, col) or self.create_cell(row, col)
        cell.value = value
        return cell

    def get_cell_kind(self, cell: Cell) -> CellKind:
        if cell.data_type in _NUMERIC_TYPES:
            return CellKind.NUMERIC
        if cell.data_type in _STRING_TYPES:
            return CellKind.STRING
        return CellKind.OTHER

    def get_string_value(self, cell: Cell) -> str:
        value = cell.value
        if value is None:
            return ""
        if not isinstance(value, str):
            raise CellTypeError(f"Cell {cell.coordinate} does not hold text: {value!r}")
        return value

    def get_date_value(self, cell: Cell) -> Optional[Union[date, datetime]]:
        value = cell.value
        if value is None:
            return None
        if isinstance(value, (date, datetime)):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return from_excel(value, self.worksheet.parent.epoch)
        raise CellTypeError(f"Cell {cell.coordinate} does not hold a date: {value!r}")
