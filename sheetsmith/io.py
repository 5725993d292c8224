"""Persistence helpers for built documents."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Union

from .config import OutputConfig
from .elements import Document

logger = logging.getLogger(__name__)


def persist(document: Document, destination: Union[str, Path]) -> Path:
    """Serialize ``document`` to ``destination``.

    I/O errors propagate unchanged; the file handle is closed either way.
    """

    path = Path(destination).expanduser()
    logger.info("Writing workbook to %s", path)
    with path.open("wb") as handle:
        document.engine.serialize(handle)
    return path


def document_to_bytes(document: Document) -> bytes:
    buffer = io.BytesIO()
    document.engine.serialize(buffer)
    return buffer.getvalue()


def export_document(document: Document, output: OutputConfig) -> Path:
    """Persist ``document`` to the configured output directory."""

    output.directory.mkdir(parents=True, exist_ok=True)
    return persist(document, output.directory / output.filename)


__all__ = ["document_to_bytes", "export_document", "persist"]
