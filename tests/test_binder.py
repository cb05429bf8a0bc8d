"""Unit tests for sheet creation and field accessors."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from openpyxl import Workbook
from openpyxl.utils.datetime import from_excel

from spdxsheet.binder import BoundSheet, create_sheet
from spdxsheet.errors import CellTypeError, RowValidationError, StructuralError
from spdxsheet.origins import CURRENT_VERSION, OriginsSheet
from spdxsheet.schema import ColumnSpec, ScalarKind, SheetSchema

RELEASES = SheetSchema(
    title="Releases",
    columns=(
        ColumnSpec("Format"),
        ColumnSpec("Name"),
        ColumnSpec("Maintainers"),
        ColumnSpec("Released", kind=ScalarKind.DATE),
        ColumnSpec("Notes", required=False),
    ),
    supported_versions=("1.0", "1.1"),
    presence_column="Name",
    list_columns=("Maintainers",),
)


def test_create_writes_headers_and_version(workbook: Workbook) -> None:
    OriginsSheet.create(workbook, "Origins")
    ws = workbook["Origins"]

    headers = [ws.cell(row=1, column=idx).value for idx in range(1, 7)]
    assert headers == [
        "Spreadsheet Version",
        "SPDXVersion",
        "CreatedBy",
        "Created",
        "DataLicense",
        "AuthorComments",
    ]
    assert ws["A2"].value == CURRENT_VERSION
    assert OriginsSheet(workbook, "Origins").verify() is None


def test_create_replaces_existing_sheet_in_place(workbook: Workbook) -> None:
    workbook.create_sheet("Package")
    stale = workbook.create_sheet("Origins")
    stale["D7"] = "left over"
    workbook.create_sheet("Review")

    OriginsSheet.create(workbook, "Origins")

    assert workbook.sheetnames == ["Package", "Origins", "Review"]
    assert workbook["Origins"]["D7"].value is None
    assert workbook["Origins"]["A1"].value == "Spreadsheet Version"


def test_fresh_sheet_fails_only_on_required_data(workbook: Workbook) -> None:
    OriginsSheet.create(workbook, "Origins")
    sheet = OriginsSheet(workbook, "Origins")
    sheet.spdx_version = "SPDX-1.2"

    error = sheet.validate()

    assert isinstance(error, RowValidationError)
    assert (error.column, error.row) == ("CreatedBy", 2)


def test_string_round_trip(origins: OriginsSheet) -> None:
    origins.data_license = "CC0-1.0"
    origins.author_comments = "Generated from the build manifest"

    assert origins.data_license == "CC0-1.0"
    assert origins.author_comments == "Generated from the build manifest"
    assert origins.spdx_version == "SPDX-1.2"
    assert origins.spreadsheet_version == CURRENT_VERSION


@pytest.mark.parametrize(
    "value", [datetime(2012, 1, 29, 18, 30, 22), date(2013, 5, 1)]
)
def test_date_round_trip(origins: OriginsSheet, value: date) -> None:
    origins.created = value

    assert origins.created == value


def test_numeric_date_cell_is_converted(origins: OriginsSheet) -> None:
    origins.worksheet["D2"] = 40937

    assert origins.created == from_excel(40937)


def test_setters_reject_wrong_types(origins: OriginsSheet) -> None:
    with pytest.raises(CellTypeError):
        origins.created = "2012-01-29"
    with pytest.raises(TypeError):
        origins.data_license = 1
    with pytest.raises(CellTypeError):
        origins.created = datetime(2012, 1, 29, tzinfo=timezone(timedelta(hours=1)))


def test_getter_rejects_mistyped_cell(origins: OriginsSheet) -> None:
    origins.worksheet["D2"] = "yesterday"

    with pytest.raises(CellTypeError):
        _ = origins.created


def test_unknown_field_raises_key_error(origins: OriginsSheet) -> None:
    with pytest.raises(KeyError):
        origins.get_value("Checksum")


def test_absent_sheet_accessors(workbook: Workbook) -> None:
    sheet = OriginsSheet(workbook, "Origins")

    assert sheet.data_license is None
    assert sheet.created_by == []
    with pytest.raises(StructuralError):
        sheet.data_license = "CC0-1.0"


def test_getters_return_none_for_absent_cells(workbook: Workbook) -> None:
    OriginsSheet.create(workbook, "Origins")
    sheet = OriginsSheet(workbook, "Origins")

    assert sheet.created is None
    assert sheet.author_comments is None
    assert sheet.created_by == []


def test_materialized_blank_cell_reads_as_absent(origins: OriginsSheet) -> None:
    origins.worksheet.cell(row=2, column=6)
    origins.worksheet.cell(row=2, column=4).value = None

    assert origins.author_comments is None
    assert origins.created is None


@pytest.mark.parametrize(
    "creators",
    [
        [],
        ["Tool: spdxsheet"],
        ["Tool: spdxsheet", "Person: Jane Doe"],
        ["Tool: a", "Tool: b", "Organization: c", "Person: d"],
    ],
)
def test_list_round_trip(origins: OriginsSheet, creators: list[str]) -> None:
    origins.created_by = creators

    assert origins.created_by == creators


def test_list_rejects_blank_entries(origins: OriginsSheet) -> None:
    with pytest.raises(CellTypeError):
        origins.created_by = ["Tool: a", "", "Person: c"]

    assert origins.created_by == ["Tool: spdxsheet", "Person: Jane Doe"]


def test_list_accessors_require_list_column(origins: OriginsSheet) -> None:
    with pytest.raises(KeyError):
        origins.set_list("SPDXVersion", ["SPDX-1.2", "SPDX-2.0"])
    with pytest.raises(KeyError):
        origins.get_list("DataLicense")

    assert origins.worksheet["B3"].value is None
    assert origins.verify() is None


def test_list_truncation_clears_leftover_rows(origins: OriginsSheet) -> None:
    ws = origins.worksheet
    ws["F3"] = "unrelated"
    origins.created_by = ["a", "b", "c"]

    origins.created_by = ["a"]

    assert origins.created_by == ["a"]
    assert ws["C3"].value == ""
    assert ws["C4"].value == ""
    assert ws["F3"].value == "unrelated"


def test_empty_list_blanks_primary_cell(origins: OriginsSheet) -> None:
    origins.created_by = []

    assert origins.worksheet["C2"].value == ""
    assert origins.worksheet["C3"].value == ""
    assert origins.created_by == []


def test_single_string_assignment(origins: OriginsSheet) -> None:
    origins.created_by = "Tool: spdxsheet"

    assert origins.created_by == ["Tool: spdxsheet"]


def test_list_stops_at_first_gap(origins: OriginsSheet) -> None:
    ws = origins.worksheet
    ws["C2"] = "a"
    ws["C3"] = None
    ws["C4"] = "c"

    assert origins.created_by == ["a"]


def test_custom_schema_binding(workbook: Workbook) -> None:
    create_sheet(workbook, "Releases", RELEASES)
    sheet = BoundSheet(workbook, "Releases", schema=RELEASES)

    assert workbook["Releases"]["A2"].value == "1.1"
    assert sheet.verify() is None

    sheet.set_value("Name", "spdxsheet")
    sheet.set_list("Maintainers", ["alice", "bob"])
    sheet.set_value("Released", date(2024, 3, 1))

    assert sheet.verify() is None
    assert sheet.get_list("Maintainers") == ["alice", "bob"]
    assert sheet.get_value("Notes") is None

    sheet.set_value("Format", "2.0")
    assert sheet.verify() == "Spreadsheet version 2.0 not supported."


def test_bound_sheet_requires_schema(workbook: Workbook) -> None:
    with pytest.raises(TypeError):
        BoundSheet(workbook, "Releases")
