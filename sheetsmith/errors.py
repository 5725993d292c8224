"""Exception types raised by the sheetsmith builders and engine adapter."""

from __future__ import annotations


class SheetsmithError(Exception):
    """Base class for all sheetsmith errors."""


class DuplicateSheetNameError(SheetsmithError, ValueError):
    """Raised by the engine when a sheet title is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Sheet '{name}' already exists in the workbook")
        self.name = name


class UnsupportedContentTypeError(SheetsmithError, TypeError):
    """Raised when a cell value has no spreadsheet representation.

    Content classification falls back to text for unknown types, so the
    builders never raise this themselves.
    """


__all__ = [
    "DuplicateSheetNameError",
    "SheetsmithError",
    "UnsupportedContentTypeError",
]
