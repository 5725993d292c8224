"""Helpers for writing pandas dataframes through the row builders."""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np
import pandas as pd
from openpyxl.styles import NamedStyle

from .elements import Row, Sheet

logger = logging.getLogger(__name__)


def add_frame(
    sheet: Sheet,
    frame: pd.DataFrame,
    header: bool = True,
    header_style: Optional[NamedStyle] = None,
    style: Optional[NamedStyle] = None,
) -> int:
    """Append ``frame`` to ``sheet`` below any rows already present.

    An optional header row carries the column names.  Missing values are
    written as empty text so every record fills the same number of cells.
    Returns the number of rows added.
    """

    logger.debug("Writing %d records to sheet '%s'", len(frame), sheet.name)
    written = 0
    if header:
        sheet.add_row(header_style, lambda row: _fill(row, frame.columns))
        written += 1

    for record in frame.itertuples(index=False, name=None):
        sheet.add_row(style, lambda row, record=record: _fill(row, record))
        written += 1
    return written


def _fill(row: Row, values) -> None:
    for value in values:
        row.add_cell(_cell_value(value))


def _cell_value(value: Any) -> Any:
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.generic):
        return value.item()
    return value


__all__ = ["add_frame"]
