from datetime import datetime

import numpy as np
import pandas as pd

from sheetsmith.elements import build_document
from sheetsmith.frames import add_frame


def _sheet():
    document = build_document()
    return document, document.add_sheet("Data")


def test_add_frame_writes_header_and_records():
    document, sheet = _sheet()
    frame = pd.DataFrame(
        {
            "code": ["A1", "B2"],
            "quantity": [3, np.nan],
            "ordered": [datetime(2024, 1, 5, 8, 0), datetime(2024, 2, 1, 12, 30)],
        }
    )

    written = add_frame(sheet, frame)

    assert written == 3
    assert sheet.row_count == 3
    ws = document.engine.workbook["Data"]
    assert [cell.value for cell in ws[1]] == ["code", "quantity", "ordered"]
    assert ws["A2"].value == "A1"
    assert ws["B2"].value == 3.0
    assert ws["C2"].value == datetime(2024, 1, 5, 8, 0)
    assert ws["B3"].value == ""
    assert ws["B3"].data_type == "s"


def test_add_frame_continues_after_existing_rows():
    document, sheet = _sheet()
    sheet.add_row(populate=lambda row: row.add_cell("Title"))

    written = add_frame(sheet, pd.DataFrame({"flag": [True, False]}), header=False)

    assert written == 2
    ws = document.engine.workbook["Data"]
    assert ws["A1"].value == "Title"
    assert ws["A2"].value is True
    assert ws["A3"].value is False


def test_add_frame_applies_styles():
    document, sheet = _sheet()

    def bold(style):
        style.font = sheet.create_font()
        style.font.bold = True

    header_style = sheet.create_style(bold)

    add_frame(sheet, pd.DataFrame({"n": [1]}), header_style=header_style)

    ws = document.engine.workbook["Data"]
    assert ws["A1"].font.b is True
    assert ws["A2"].font.b is False
