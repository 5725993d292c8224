from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock
import sys

import pytest

# Ensure project root is on sys.path for absolute imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from sheetsmith.elements import Document


@pytest.fixture
def mock_engine() -> SimpleNamespace:
    """Engine double whose sheets, rows and cells are all the same mocks."""

    workbook = MagicMock()
    sheet = workbook.create_sheet.return_value
    row = sheet.create_row.return_value
    cell = row.create_cell.return_value
    return SimpleNamespace(workbook=workbook, sheet=sheet, row=row, cell=cell)


@pytest.fixture
def document(mock_engine: SimpleNamespace) -> Document:
    return Document(mock_engine.workbook)
