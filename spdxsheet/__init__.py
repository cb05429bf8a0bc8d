"""`spdxsheet` binds SPDX metadata records to spreadsheet rows and columns."""

# Module responsibilities:
# - Re-export the schema, binder and origins interfaces so consumers have a stable API surface.
# - Provide package version.

from __future__ import annotations

from .binder import DATA_ROW, HEADER_ROW, BoundSheet, create_sheet
from .config import load_schema
from .errors import (
    CellTypeError,
    ConfigError,
    RowValidationError,
    SheetError,
    SheetValidationError,
    StructuralError,
    UnexpectedError,
    VersionError,
    WorkbookLockedError,
)
from .origins import (
    ORIGINS_SCHEMA,
    OriginsRecord,
    OriginsSheet,
    read_origins,
    write_origins,
)
from .schema import ColumnSpec, ScalarKind, SheetSchema
from .workbook import open_workbook, save_workbook, workbook_lock

__all__ = [
    "BoundSheet",
    "create_sheet",
    "HEADER_ROW",
    "DATA_ROW",
    "load_schema",
    "ColumnSpec",
    "ScalarKind",
    "SheetSchema",
    "ORIGINS_SCHEMA",
    "OriginsSheet",
    "OriginsRecord",
    "read_origins",
    "write_origins",
    "open_workbook",
    "save_workbook",
    "workbook_lock",
    "SheetError",
    "ConfigError",
    "CellTypeError",
    "WorkbookLockedError",
    "SheetValidationError",
    "StructuralError",
    "VersionError",
    "RowValidationError",
    "UnexpectedError",
]

__version__ = "0.1.0"
