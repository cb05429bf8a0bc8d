"""Schema definitions binding logical fields to worksheet columns."""

# Module responsibilities:
# - Declare the ordered column layout of a record type in one place.
# - Expose required/optional flags, value kinds and supported versions.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class ScalarKind(str, Enum):
    """Value kind expected in a schema column."""

    STRING = "string"
    DATE = "date"


@dataclass(frozen=True)
class ColumnSpec:
    """A single named column of a sheet schema."""

    name: str
    required: bool = True
    kind: ScalarKind = ScalarKind.STRING


@dataclass(frozen=True)
class SheetSchema:
    """Static, versioned declaration of a sheet layout.

    Column offsets are the positions in ``columns``; the header row holds
    each column's display name at that offset.

    Attributes:
        title: Human readable sheet title used in diagnostics.
        columns: Ordered column declarations.
        supported_versions: Spreadsheet versions this schema can read.
        presence_column: Column whose non-empty value marks a populated row.
        current_version: Version seeded into new sheets; defaults to the
            last supported version.
        version_column: Column holding the spreadsheet version; defaults to
            the first column.
        list_columns: Columns whose values spill over consecutive rows.
    """

    title: str
    columns: Tuple[ColumnSpec, ...]
    supported_versions: Tuple[str, ...]
    presence_column: str
    current_version: Optional[str] = None
    version_column: Optional[str] = None
    list_columns: Tuple[str, ...] = ()
    _offsets: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.columns:
            raise ValueError("Schema requires at least one column")
        if not self.supported_versions:
            raise ValueError("Schema requires at least one supported version")

        offsets: Dict[str, int] = {}
        for idx, column in enumerate(self.columns):
            if column.name in offsets:
                raise ValueError(f"Duplicate column name in schema: {column.name}")
            offsets[column.name] = idx
        object.__setattr__(self, "_offsets", offsets)

        if self.current_version is None:
            object.__setattr__(self, "current_version", self.supported_versions[-1])
        elif self.current_version not in self.supported_versions:
            raise ValueError(
                f"Current version {self.current_version} is not a supported version"
            )
        if self.version_column is None:
            object.__setattr__(self, "version_column", self.columns[0].name)

        named = [self.presence_column, self.version_column, *self.list_columns]
        unknown = [name for name in named if name not in offsets]
        if unknown:
            raise ValueError(f"Schema references unknown columns: {', '.join(unknown)}")
        for name in self.list_columns:
            if self.columns[offsets[name]].kind is not ScalarKind.STRING:
                raise ValueError(f"List column {name} must hold text")

    @property
    def headers(self) -> Tuple[str, ...]:
        return tuple(column.name for column in self.columns)

    def column(self, name: str) -> ColumnSpec:
        """Return the column declaration for ``name`` (``KeyError`` if unknown)."""

        return self.columns[self.offset(name)]

    def offset(self, name: str) -> int:
        """Return the 0-based physical column offset of ``name``."""

        try:
            return self._offsets[name]
        except KeyError:
            raise KeyError(f"Unknown column for {self.title} schema: {name}") from None

    def is_supported(self, version: str) -> bool:
        """Exact membership test; callers trim whitespace beforehand."""

        return version in self.supported_versions

    def is_list_column(self, name: str) -> bool:
        return name in self.list_columns
