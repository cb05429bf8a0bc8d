"""
RESPONSIBILITIES
- Bind a SheetSchema to one worksheet of an openpyxl workbook.
- Verify header, version and data rows, reporting the first problem found.
- Offer typed scalar accessors on the primary data row and list accessors
  for fields spilling over consecutive rows.
- Create fresh sheets seeded with the header row and current version.
PROCESS OVERVIEW
1. create_sheet() (re)creates the worksheet and writes headers + version.
2. Callers populate fields through set_value()/set_list() or subclass properties.
3. validate() walks the sheet and returns a structured error (or None);
   verify() renders it as a message, ensure_valid() raises it.
4. Once verified, get_value()/get_list() read the fields back.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import ClassVar, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from .cells import CellKind, CellValue, SheetCells, is_empty
from .errors import (
    CellTypeError,
    RowValidationError,
    SheetValidationError,
    StructuralError,
    UnexpectedError,
    VersionError,
)
from .schema import ColumnSpec, ScalarKind, SheetSchema
from .utils.log import get_logger

logger = get_logger("binder")

HEADER_ROW = 0
DATA_ROW = 1


def create_sheet(workbook: Workbook, sheet_name: str, schema: SheetSchema) -> None:
    """Create ``sheet_name`` from ``schema``, replacing any existing sheet.

    The header row receives each column name at its offset and the version
    cell of the primary data row receives ``schema.current_version``.
    """

    index: Optional[int] = None
    if sheet_name in workbook.sheetnames:
        index = workbook.sheetnames.index(sheet_name)
        workbook.remove(workbook[sheet_name])
    worksheet = workbook.create_sheet(title=sheet_name, index=index)

    cells = SheetCells(worksheet)
    for offset, column in enumerate(schema.columns):
        cells.set_value(HEADER_ROW, offset, column.name)
    cells.set_value(DATA_ROW, schema.offset(schema.version_column), schema.current_version)

    logger.info(
        "Sheet created",
        extra={"sheet": sheet_name, "schema": schema.title, "version": schema.current_version},
    )


class BoundSheet:
    """A worksheet paired with the schema describing its layout.

    Subclasses set ``schema``; it may also be passed per instance. The
    worksheet is borrowed from the workbook and may be absent, in which case
    validation reports it and setters refuse to write.
    """

    schema: ClassVar[SheetSchema]

    def __init__(
        self,
        workbook: Workbook,
        sheet_name: str,
        *,
        schema: SheetSchema | None = None,
    ) -> None:
        if schema is not None:
            self.schema = schema
        elif not hasattr(self, "schema"):
            raise TypeError(f"{type(self).__name__} requires a schema")
        self.workbook = workbook
        self.sheet_name = sheet_name
        worksheet: Optional[Worksheet] = (
            workbook[sheet_name] if sheet_name in workbook.sheetnames else None
        )
        self.worksheet = worksheet
        self._cells = SheetCells(worksheet) if worksheet is not None else None

    @classmethod
    def create(cls, workbook: Workbook, sheet_name: str) -> None:
        """Create a fresh sheet laid out for ``cls.schema``."""

        create_sheet(workbook, sheet_name, cls.schema)

    # ------------------------------------------------------------------
    # validation
    # ------------------------------------------------------------------
    def validate(self) -> Optional[SheetValidationError]:
        """Return the first problem found in the sheet, or None when valid."""

        try:
            error = (
                self._check_exists()
                or self._check_headers()
                or self._check_version()
                or self._check_rows()
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception(
                "Unexpected error verifying sheet", extra={"sheet": self.sheet_name}
            )
            return UnexpectedError(
                f"Error in verifying {self.schema.title} worksheet: {exc}", cause=exc
            )
        if error is not None:
            logger.warning(
                "Sheet verification failed",
                extra={"sheet": self.sheet_name, "error": str(error)},
            )
        return error

    def verify(self) -> Optional[str]:
        """Return a diagnostic message for the first problem, or None when valid."""

        error = self.validate()
        return None if error is None else str(error)

    def ensure_valid(self) -> None:
        """Raise the first validation problem found, if any."""

        error = self.validate()
        if error is not None:
            raise error

    def _check_exists(self) -> Optional[SheetValidationError]:
        if self._cells is None:
            return StructuralError(f"Worksheet for {self.schema.title} does not exist")
        return None

    def _check_headers(self) -> Optional[SheetValidationError]:
        for offset, column in enumerate(self.schema.columns):
            value = self._cells.get_value(HEADER_ROW, offset)
            if not isinstance(value, str) or value != column.name:
                return StructuralError(
                    f"Column {column.name} missing for {self.schema.title} worksheet"
                )
        return None

    def _check_version(self) -> Optional[SheetValidationError]:
        value = self._cells.get_value(DATA_ROW, self.schema.offset(self.schema.version_column))
        if is_empty(value):
            return VersionError(
                f"Invalid {self.schema.title} spreadsheet - no spreadsheet version found"
            )
        if not isinstance(value, str):
            return VersionError(
                f"Spreadsheet version cell of {self.schema.title} worksheet is not text"
            )
        version = value.strip()
        if not self.schema.is_supported(version):
            return VersionError(f"Spreadsheet version {version} not supported.")
        return None

    def _check_rows(self) -> Optional[SheetValidationError]:
        presence = self.schema.offset(self.schema.presence_column)
        row = DATA_ROW
        while not is_empty(self._cells.get_value(row, presence)):
            error = self._check_row(row)
            if error is not None:
                return error
            row += 1
        return None

    def _check_row(self, row: int) -> Optional[SheetValidationError]:
        row_number = row + 1
        for offset, column in enumerate(self.schema.columns):
            cell = self._cells.get_cell(row, offset)
            if cell is None or is_empty(cell.value):
                if column.required:
                    return RowValidationError(
                        f"Required cell {column.name} missing for row {row_number} "
                        f"in {self.schema.title} worksheet",
                        column=column.name,
                        row=row_number,
                    )
                continue
            if (
                column.kind is ScalarKind.DATE
                and self._cells.get_cell_kind(cell) is not CellKind.NUMERIC
            ):
                return RowValidationError(
                    f"{column.name} column in row {row_number} of {self.schema.title} "
                    "worksheet is not of type Date",
                    column=column.name,
                    row=row_number,
                )
        return None

    # ------------------------------------------------------------------
    # scalar accessors
    # ------------------------------------------------------------------
    def get_value(self, name: str) -> Optional[CellValue]:
        """Return the typed value of ``name`` on the primary data row."""

        column = self.schema.column(name)
        if self._cells is None:
            return None
        cell = self._cells.get_cell(DATA_ROW, self.schema.offset(name))
        if cell is None or cell.value is None:
            return None
        if column.kind is ScalarKind.DATE:
            return self._cells.get_date_value(cell)
        return self._cells.get_string_value(cell)

    def set_value(self, name: str, value: CellValue) -> None:
        """Write ``value`` to ``name`` on the primary data row."""

        column = self.schema.column(name)
        _check_kind(column, value)
        self._require_cells().set_value(DATA_ROW, self.schema.offset(name), value)

    # ------------------------------------------------------------------
    # list accessors
    # ------------------------------------------------------------------
    def get_list(self, name: str) -> List[str]:
        """Read the contiguous run of values of ``name`` from the primary data row down."""

        self._list_column(name)
        if self._cells is None:
            return []
        offset = self.schema.offset(name)
        values: List[str] = []
        row = DATA_ROW
        while True:
            cell = self._cells.get_cell(row, offset)
            if cell is None or is_empty(cell.value):
                return values
            values.append(self._cells.get_string_value(cell))
            row += 1

    def set_list(self, name: str, values: Sequence[str]) -> None:
        """Write ``values`` one per row in the column of ``name``.

        Cells of that column below the new last value are blanked, so a
        shorter list fully replaces a longer one. Other columns of those rows
        are left alone. Callers must not interleave writes to the same field.
        """

        column = self._list_column(name)
        items = list(values)
        for item in items:
            _check_kind(column, item)
            if item == "":
                raise CellTypeError(f"Column {name} cannot hold blank list entries")
        items = items or [""]

        cells = self._require_cells()
        offset = self.schema.offset(name)
        for idx, item in enumerate(items):
            cells.set_value(DATA_ROW + idx, offset, item)

        for row in range(DATA_ROW + len(items), cells.max_row):
            cell = cells.get_cell(row, offset)
            if cell is not None and not is_empty(cell.value):
                cell.value = ""

    def _list_column(self, name: str) -> ColumnSpec:
        column = self.schema.column(name)
        if not self.schema.is_list_column(name):
            raise KeyError(f"Column {name} is not a list column of the {self.schema.title} schema")
        return column

    def _require_cells(self) -> SheetCells:
        if self._cells is None:
            raise StructuralError(f"Worksheet for {self.schema.title} does not exist")
        return self._cells


def _check_kind(column: ColumnSpec, value: object) -> None:
    if column.kind is ScalarKind.DATE:
        if not isinstance(value, (date, datetime)):
            raise CellTypeError(f"Column {column.name} expects a date, got {type(value).__name__}")
    elif not isinstance(value, str):
        raise CellTypeError(f"Column {column.name} expects text, got {type(value).__name__}")


__all__ = ["BoundSheet", "create_sheet", "HEADER_ROW", "DATA_ROW"]
