from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from openpyxl import Workbook

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep log files out of the user's home while the package configures logging on import.
os.environ.setdefault("SPDXSHEET_HOME", tempfile.mkdtemp(prefix="spdxsheet-tests-"))

from spdxsheet.origins import OriginsSheet


@pytest.fixture
def workbook() -> Workbook:
    wb = Workbook()
    wb.remove(wb.active)
    return wb


@pytest.fixture
def origins(workbook: Workbook) -> OriginsSheet:
    """A freshly created origins sheet with every required field populated."""

    OriginsSheet.create(workbook, "Origins")
    sheet = OriginsSheet(workbook, "Origins")
    sheet.spdx_version = "SPDX-1.2"
    sheet.created_by = ["Tool: spdxsheet", "Person: Jane Doe"]
    sheet.created = datetime(2012, 1, 29, 12, 0)
    sheet.data_license = "CC0-1.0"
    return sheet
