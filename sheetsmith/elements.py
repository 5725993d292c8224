"""Nested document builders: documents own sheets, sheets own rows, rows own cells.

Every factory runs its ``populate`` callback inline, passing the new child
builder as the only argument, and returns that child once the callback is
done.  Styles are resolved once, when a child is created, by taking the first
explicit style out of cell, row, sheet and document default.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from openpyxl.styles import Font, NamedStyle

from .content import ContentKind, classify_content
from .engine import EngineRow, EngineSheet, EngineWorkbook, create_workbook

logger = logging.getLogger(__name__)

StyleConfigurer = Callable[[NamedStyle], None]
FontConfigurer = Callable[[Font], None]


class Element:
    """Base for every builder level; shares the engine workbook."""

    def __init__(self, engine: EngineWorkbook) -> None:
        self.engine = engine

    def create_style(self, configure: Optional[StyleConfigurer] = None) -> NamedStyle:
        """Create a new cell style and let ``configure`` set its attributes."""

        style = self.engine.create_style()
        if configure is not None:
            configure(style)
        return style

    def create_font(self, configure: Optional[FontConfigurer] = None) -> Font:
        """Create a new font and let ``configure`` set its attributes."""

        font = self.engine.create_font()
        if configure is not None:
            configure(font)
        return font


class Document(Element):
    """Top-level builder wrapping one engine workbook."""

    def __init__(self, engine: EngineWorkbook, default_style: Optional[NamedStyle] = None) -> None:
        super().__init__(engine)
        self.default_style = default_style

    def add_sheet(
        self,
        name: Optional[str] = None,
        style: Optional[NamedStyle] = None,
        populate: Optional[Callable[["Sheet"], Any]] = None,
    ) -> "Sheet":
        """Append a sheet, optionally named, and fill it with ``populate``.

        A name already used in the workbook makes the engine raise
        :class:`~sheetsmith.errors.DuplicateSheetNameError`.
        """

        sheet = Sheet(
            self.engine,
            self.engine.create_sheet(name),
            style=style if style is not None else self.default_style,
        )
        if populate is not None:
            populate(sheet)
        return sheet

    def __repr__(self) -> str:
        return f"Document(sheets={self.engine.sheet_names!r})"


class Sheet(Element):
    """Builder for one worksheet; rows are numbered from 0 in creation order."""

    def __init__(
        self,
        engine: EngineWorkbook,
        engine_sheet: EngineSheet,
        style: Optional[NamedStyle] = None,
    ) -> None:
        super().__init__(engine)
        self.engine_sheet = engine_sheet
        self.style = style
        self._next_row_index = 0

    @property
    def name(self) -> str:
        return self.engine_sheet.name

    @property
    def row_count(self) -> int:
        return self._next_row_index

    def add_row(
        self,
        style: Optional[NamedStyle] = None,
        populate: Optional[Callable[["Row"], Any]] = None,
    ) -> "Row":
        index = self._next_row_index
        self._next_row_index += 1
        logger.debug("Adding row %d to sheet '%s'", index, self.name)
        row = Row(
            self.engine,
            self.engine_sheet.create_row(index),
            index,
            style=style if style is not None else self.style,
        )
        if populate is not None:
            populate(row)
        return row


class Row(Element):
    """Builder for one row; cells are numbered from 0 in creation order."""

    def __init__(
        self,
        engine: EngineWorkbook,
        engine_row: EngineRow,
        index: int,
        style: Optional[NamedStyle] = None,
    ) -> None:
        super().__init__(engine)
        self.engine_row = engine_row
        self.index = index
        self.style = style
        self._next_cell_index = 0

    @property
    def cell_count(self) -> int:
        return self._next_cell_index

    def add_cell(self, content: Any, style: Optional[NamedStyle] = None) -> None:
        """Write ``content`` into the next cell of this row.

        Supported content:

        - :class:`~sheetsmith.content.Formula`
        - ``bool``
        - any real number or ``Decimal`` (stored as float)
        - ``datetime`` (naive values are read in local time)
        - ``date`` (midnight local time)

        Everything else is written as ``str(content)``.
        """

        index = self._next_cell_index
        self._next_cell_index += 1
        write_cell(self.engine_row, index, content, style if style is not None else self.style)


def write_cell(engine_row: EngineRow, index: int, content: Any, style: Optional[NamedStyle]) -> None:
    """Create the cell at ``index`` and store its content and style."""

    converted = classify_content(content)
    cell = engine_row.create_cell(index)
    if converted.kind is ContentKind.FORMULA:
        cell.set_formula(converted.value)
    else:
        cell.set_value(converted.value)
    if style is not None:
        cell.set_style(style)


def build_document(
    populate: Optional[Callable[[Document], Any]] = None,
    default_style: Optional[NamedStyle] = None,
) -> Document:
    """Create a new workbook and fill it with ``populate``.

    ``default_style`` applies to every cell that gets no style from its sheet,
    row or own call.  Use :meth:`Element.create_style` on a document built
    without one to make styles first, then pass them down explicitly.
    """

    document = Document(create_workbook(), default_style)
    if populate is not None:
        populate(document)
    return document


workbook = build_document


__all__ = [
    "Document",
    "Element",
    "Row",
    "Sheet",
    "build_document",
    "workbook",
    "write_cell",
]
