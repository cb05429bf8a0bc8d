"""Custom exceptions used across spdxsheet."""

from __future__ import annotations


class SheetError(Exception):
    """Base error for the package."""


class ConfigError(SheetError):
    """Configuration related error."""


class CellTypeError(SheetError, TypeError):
    """Raised when a cell value does not match the column kind."""


class WorkbookLockedError(SheetError):
    """Raised when a target workbook is locked by another writer."""


class SheetValidationError(SheetError):
    """Base type for problems found while verifying a bound sheet.

    Validation hands these back as values; only ``ensure_valid`` raises them.
    """


class StructuralError(SheetValidationError):
    """Sheet absent or header row not matching the schema."""


class VersionError(SheetValidationError):
    """Version cell missing or holding an unsupported version."""


class RowValidationError(SheetValidationError):
    """A data row is missing a required value or holds a mistyped one."""

    def __init__(self, message: str, *, column: str, row: int) -> None:
        super().__init__(message)
        self.column = column
        self.row = row


class UnexpectedError(SheetValidationError):
    """A storage-layer failure met while verifying."""

    def __init__(self, message: str, *, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause
