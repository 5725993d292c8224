"""sheetsmith: declarative builders for xlsx workbooks.

Documents are built top-down: a document creates sheets, a sheet creates rows
and a row writes cells.  Indices are assigned in creation order and styles are
inherited from the closest enclosing builder that was given one.  openpyxl
does the actual encoding.
"""

from .config import (
    DocumentConfig,
    OutputConfig,
    StyleConfig,
    build_configured_document,
    load_config,
    register_styles,
)
from .content import CellContent, ContentKind, Formula, classify_content
from .elements import Document, Row, Sheet, build_document, workbook
from .errors import DuplicateSheetNameError, SheetsmithError, UnsupportedContentTypeError
from .frames import add_frame
from .io import document_to_bytes, export_document, persist

__all__ = [
    "CellContent",
    "ContentKind",
    "Document",
    "DocumentConfig",
    "DuplicateSheetNameError",
    "Formula",
    "OutputConfig",
    "Row",
    "Sheet",
    "SheetsmithError",
    "StyleConfig",
    "UnsupportedContentTypeError",
    "add_frame",
    "build_configured_document",
    "build_document",
    "classify_content",
    "document_to_bytes",
    "export_document",
    "load_config",
    "persist",
    "register_styles",
    "workbook",
]
