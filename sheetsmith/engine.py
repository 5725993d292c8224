"""openpyxl-backed spreadsheet engine used by the document builders.

The builders only talk to the small surface defined here: workbooks create
sheets, styles and fonts, sheets create rows, rows create cells and cells
receive a value, a formula or a style.  Row and cell indices are 0-based on
this surface and mapped to openpyxl's 1-based coordinates internally.
"""

from __future__ import annotations

import itertools
import logging
import math
from copy import copy
from datetime import datetime
from typing import BinaryIO, List, Optional, Union

from openpyxl import Workbook
from openpyxl.cell.cell import Cell
from openpyxl.styles import Font, NamedStyle
from openpyxl.worksheet.worksheet import Worksheet

from .errors import DuplicateSheetNameError

logger = logging.getLogger(__name__)

CellValue = Union[bool, float, str, datetime]

STYLE_NAME_PREFIX = "sheetsmith"
GENERAL_FORMAT = "General"
NAN_ERROR = "#NUM!"
INFINITY_ERROR = "#DIV/0!"

# Style names are unique across all workbooks of the process.
_style_ids = itertools.count(1)


class EngineCell:
    """A single worksheet cell."""

    def __init__(self, cell: Cell) -> None:
        self.cell = cell

    def set_value(self, value: CellValue) -> None:
        if isinstance(value, datetime) and value.tzinfo is not None:
            # xlsx stores wall-clock time only
            value = value.astimezone().replace(tzinfo=None)
        if isinstance(value, float) and not math.isfinite(value):
            self.cell.value = NAN_ERROR if math.isnan(value) else INFINITY_ERROR
            self.cell.data_type = "e"
            return
        self.cell.value = value
        if isinstance(value, str):
            self.cell.data_type = "s"

    def set_formula(self, formula: str) -> None:
        if not formula.startswith("="):
            formula = "=" + formula
        self.cell.value = formula
        self.cell.data_type = "f"

    def set_style(self, style: NamedStyle) -> None:
        number_format = self.cell.number_format
        workbook = self.cell.parent.parent
        owner = getattr(style, "_wb", None)
        if owner is None or owner is workbook:
            self.cell.style = style
        else:
            # A named style belongs to one workbook; others get a copy.
            if style.name not in workbook.named_styles:
                workbook.add_named_style(_detached_copy(style))
            self.cell.style = style.name
        if style.number_format == GENERAL_FORMAT:
            self.cell.number_format = number_format


class EngineRow:
    """A worksheet row that hands out cells by column index."""

    def __init__(self, worksheet: Worksheet, index: int) -> None:
        self.worksheet = worksheet
        self.index = index
        # Touching the dimension makes openpyxl write the row even when empty.
        self.dimensions = worksheet.row_dimensions[index + 1]

    def create_cell(self, index: int) -> EngineCell:
        return EngineCell(self.worksheet.cell(row=self.index + 1, column=index + 1))


class EngineSheet:
    """A worksheet that hands out rows by row index."""

    def __init__(self, worksheet: Worksheet) -> None:
        self.worksheet = worksheet

    @property
    def name(self) -> str:
        return self.worksheet.title

    def create_row(self, index: int) -> EngineRow:
        return EngineRow(self.worksheet, index)


class EngineWorkbook:
    """Owner of the openpyxl workbook and its style registry."""

    def __init__(self, workbook: Optional[Workbook] = None) -> None:
        if workbook is None:
            workbook = Workbook()
            workbook.remove(workbook.active)
        self.workbook = workbook

    @property
    def sheet_names(self) -> List[str]:
        return list(self.workbook.sheetnames)

    def create_sheet(self, name: Optional[str] = None) -> EngineSheet:
        if name is not None:
            taken = {title.lower() for title in self.workbook.sheetnames}
            if name.lower() in taken:
                raise DuplicateSheetNameError(name)
        worksheet = self.workbook.create_sheet(title=name)
        logger.debug("Created worksheet '%s'", worksheet.title)
        return EngineSheet(worksheet)

    def create_style(self) -> NamedStyle:
        return NamedStyle(name=f"{STYLE_NAME_PREFIX}-{next(_style_ids)}")

    def create_font(self) -> Font:
        return Font()

    def serialize(self, stream: BinaryIO) -> None:
        self.workbook.save(stream)


def _detached_copy(style: NamedStyle) -> NamedStyle:
    return NamedStyle(
        name=style.name,
        font=copy(style.font),
        fill=copy(style.fill),
        border=copy(style.border),
        alignment=copy(style.alignment),
        number_format=style.number_format,
        protection=copy(style.protection),
    )


def create_workbook() -> EngineWorkbook:
    """Return a new, empty engine workbook."""

    return EngineWorkbook()


__all__ = [
    "CellValue",
    "EngineCell",
    "EngineRow",
    "EngineSheet",
    "EngineWorkbook",
    "create_workbook",
]
