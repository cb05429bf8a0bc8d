"""
RESPONSIBILITIES
- Declare the layout of the SPDX Origins worksheet.
- Expose each origins field as a typed property of OriginsSheet.
- Provide OriginsRecord plus the read/write pair that maps it to a sheet.
PROCESS OVERVIEW
1. OriginsSheet.create() lays out headers and seeds the current version.
2. write_origins() (or the properties) populates the primary data row;
   CreatedBy spills over the following rows.
3. verify() gates the sheet; read_origins() then rebuilds the record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, MutableMapping, Optional, Sequence, Union

from .binder import BoundSheet
from .schema import ColumnSpec, ScalarKind, SheetSchema

CURRENT_VERSION = "0.8"

SPREADSHEET_VERSION = "Spreadsheet Version"
SPDX_VERSION = "SPDXVersion"
CREATED_BY = "CreatedBy"
CREATED = "Created"
DATA_LICENSE = "DataLicense"
AUTHOR_COMMENTS = "AuthorComments"

ORIGINS_SCHEMA = SheetSchema(
    title="SPDX Origins",
    columns=(
        ColumnSpec(SPREADSHEET_VERSION),
        ColumnSpec(SPDX_VERSION),
        ColumnSpec(CREATED_BY),
        ColumnSpec(CREATED, kind=ScalarKind.DATE),
        ColumnSpec(DATA_LICENSE),
        ColumnSpec(AUTHOR_COMMENTS, required=False),
    ),
    supported_versions=(CURRENT_VERSION,),
    current_version=CURRENT_VERSION,
    presence_column=SPDX_VERSION,
    version_column=SPREADSHEET_VERSION,
    list_columns=(CREATED_BY,),
)

DateValue = Union[date, datetime]


class OriginsSheet(BoundSheet):
    """Worksheet holding the origins (creation info) of an SPDX document."""

    schema = ORIGINS_SCHEMA

    @property
    def spreadsheet_version(self) -> Optional[str]:
        return self.get_value(SPREADSHEET_VERSION)

    @spreadsheet_version.setter
    def spreadsheet_version(self, version: str) -> None:
        self.set_value(SPREADSHEET_VERSION, version)

    @property
    def spdx_version(self) -> Optional[str]:
        return self.get_value(SPDX_VERSION)

    @spdx_version.setter
    def spdx_version(self, version: str) -> None:
        self.set_value(SPDX_VERSION, version)

    @property
    def created_by(self) -> List[str]:
        """Creators, one per row starting at the primary data row."""

        return self.get_list(CREATED_BY)

    @created_by.setter
    def created_by(self, creators: Union[str, Sequence[str], None]) -> None:
        if creators is None:
            creators = []
        elif isinstance(creators, str):
            creators = [creators]
        self.set_list(CREATED_BY, creators)

    @property
    def created(self) -> Optional[DateValue]:
        return self.get_value(CREATED)

    @created.setter
    def created(self, created: DateValue) -> None:
        self.set_value(CREATED, created)

    @property
    def data_license(self) -> Optional[str]:
        return self.get_value(DATA_LICENSE)

    @data_license.setter
    def data_license(self, license_id: str) -> None:
        self.set_value(DATA_LICENSE, license_id)

    @property
    def author_comments(self) -> Optional[str]:
        return self.get_value(AUTHOR_COMMENTS)

    @author_comments.setter
    def author_comments(self, comments: str) -> None:
        self.set_value(AUTHOR_COMMENTS, comments)


@dataclass(slots=True)
class OriginsRecord:
    """In-memory creation info of an SPDX document."""

    spdx_version: str
    created_by: List[str] = field(default_factory=list)
    created: Optional[DateValue] = None
    data_license: Optional[str] = None
    author_comments: Optional[str] = None

    def to_dict(self) -> MutableMapping[str, object]:
        return {
            "spdx_version": self.spdx_version,
            "created_by": list(self.created_by),
            "created": self.created.isoformat() if self.created else "",
            "data_license": self.data_license or "",
            "author_comments": self.author_comments or "",
        }


def read_origins(sheet: OriginsSheet) -> OriginsRecord:
    """Build an OriginsRecord from a verified origins sheet."""

    return OriginsRecord(
        spdx_version=sheet.spdx_version or "",
        created_by=sheet.created_by,
        created=sheet.created,
        data_license=sheet.data_license,
        author_comments=sheet.author_comments,
    )


def write_origins(sheet: OriginsSheet, record: OriginsRecord) -> None:
    """Store ``record`` on ``sheet``; unset optional values are left untouched."""

    sheet.spdx_version = record.spdx_version
    sheet.created_by = record.created_by
    if record.created is not None:
        sheet.created = record.created
    if record.data_license is not None:
        sheet.data_license = record.data_license
    if record.author_comments is not None:
        sheet.author_comments = record.author_comments


__all__ = [
    "ORIGINS_SCHEMA",
    "CURRENT_VERSION",
    "OriginsSheet",
    "OriginsRecord",
    "read_origins",
    "write_origins",
]
