"""Classification of cell content into spreadsheet value kinds."""

from __future__ import annotations

import enum
import math
import numbers
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Union

import numpy as np


@dataclass(frozen=True)
class Formula:
    """Marks a string as a spreadsheet formula, e.g. ``Formula("A1 + A2")``."""

    content: str


class ContentKind(str, enum.Enum):
    """Value kinds a cell can hold."""

    FORMULA = "formula"
    BOOLEAN = "boolean"
    NUMBER = "number"
    INSTANT = "instant"
    TEXT = "text"


@dataclass(frozen=True)
class CellContent:
    """Converted cell content ready to be handed to the engine."""

    kind: ContentKind
    value: Union[str, bool, float, datetime]


def classify_content(content: Any) -> CellContent:
    """Convert ``content`` to the representation the engine stores.

    The checks run in a fixed order and the first match wins.  ``bool`` is
    tested before numbers and aware ``datetime`` before ``date`` because of
    Python's subclass relationships.  Naive dates and datetimes are read in
    the machine's local time zone; anything unrecognised becomes text.
    """

    if isinstance(content, Formula):
        return CellContent(ContentKind.FORMULA, content.content)
    if isinstance(content, (bool, np.bool_)):
        return CellContent(ContentKind.BOOLEAN, bool(content))
    if isinstance(content, (numbers.Real, Decimal)):
        return CellContent(ContentKind.NUMBER, _widen(content))
    if isinstance(content, datetime) and content.tzinfo is not None:
        return CellContent(ContentKind.INSTANT, content)
    if isinstance(content, date) and not isinstance(content, datetime):
        return CellContent(ContentKind.INSTANT, datetime.combine(content, time.min).astimezone())
    if isinstance(content, datetime):
        return CellContent(ContentKind.INSTANT, content.astimezone())
    return CellContent(ContentKind.TEXT, str(content))


def _widen(number: Any) -> float:
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


__all__ = ["CellContent", "ContentKind", "Formula", "classify_content"]
