"""Configuration loading utilities for sheetsmith documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml
from openpyxl.styles import Alignment, Font, NamedStyle, PatternFill

from .elements import Document
from .engine import create_workbook

logger = logging.getLogger(__name__)


@dataclass
class FontConfig:
    """Font attributes applied to an engine font."""

    name: Optional[str] = None
    size: Optional[float] = None
    bold: bool = False
    italic: bool = False
    underline: Optional[str] = None
    color: Optional[str] = None

    def apply(self, font: Font) -> None:
        if self.name is not None:
            font.name = self.name
        if self.size is not None:
            font.size = self.size
        font.bold = self.bold
        font.italic = self.italic
        if self.underline is not None:
            font.underline = self.underline
        if self.color is not None:
            font.color = self.color


@dataclass
class FillConfig:
    """Solid background fill."""

    color: str
    pattern: str = "solid"

    def build(self) -> PatternFill:
        return PatternFill(fill_type=self.pattern, start_color=self.color, end_color=self.color)


@dataclass
class AlignmentConfig:
    horizontal: Optional[str] = None
    vertical: Optional[str] = None
    wrap_text: Optional[bool] = None

    def build(self) -> Alignment:
        return Alignment(
            horizontal=self.horizontal,
            vertical=self.vertical,
            wrap_text=self.wrap_text,
        )


@dataclass
class StyleConfig:
    """A named cell style declared in the configuration file."""

    font: Optional[FontConfig] = None
    fill: Optional[FillConfig] = None
    alignment: Optional[AlignmentConfig] = None

    def configure(self, style: NamedStyle, font: Optional[Font] = None) -> None:
        """Copy these settings onto ``style``, using ``font`` for the font part."""

        if self.font is not None and font is not None:
            self.font.apply(font)
            style.font = font
        if self.fill is not None:
            style.fill = self.fill.build()
        if self.alignment is not None:
            style.alignment = self.alignment.build()


@dataclass
class OutputConfig:
    """Where :func:`sheetsmith.io.export_document` writes the workbook."""

    directory: Path = Path("output")
    filename: str = "workbook.xlsx"

    def resolved(self, base_path: Path) -> "OutputConfig":
        return OutputConfig(
            directory=_resolve_path(self.directory, base_path),
            filename=self.filename,
        )


@dataclass
class DocumentConfig:
    """Container for all configuration used to build a document."""

    styles: Dict[str, StyleConfig] = field(default_factory=dict)
    default_style: Optional[str] = None
    output: OutputConfig = field(default_factory=OutputConfig)

    def resolved(self, base_path: Path) -> "DocumentConfig":
        return DocumentConfig(
            styles=self.styles,
            default_style=self.default_style,
            output=self.output.resolved(base_path),
        )


def load_config(path: Path) -> DocumentConfig:
    """Load :class:`DocumentConfig` from a YAML file."""

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file '{config_path}' does not exist")

    logger.info("Loading document configuration from %s", config_path)
    with config_path.open("r", encoding="utf-8") as stream:
        raw_config: Mapping[str, Any] = yaml.safe_load(stream) or {}

    if not isinstance(raw_config, Mapping):
        raise ValueError("Configuration root must be a mapping")

    styles_section = raw_config.get("styles") or {}
    if not isinstance(styles_section, Mapping):
        raise ValueError("'styles' must map style names to style settings")
    styles = {str(name): _parse_style(name, entry) for name, entry in styles_section.items()}

    default_style = raw_config.get("default_style")
    if default_style is not None and default_style not in styles:
        raise ValueError(f"default_style '{default_style}' is not defined under 'styles'")

    output = OutputConfig(**_parse_output_section(raw_config.get("output") or {}))

    config = DocumentConfig(styles=styles, default_style=default_style, output=output)
    return config.resolved(config_path.parent)


def register_styles(builder: Any, config: DocumentConfig) -> Dict[str, NamedStyle]:
    """Create one engine style per configured entry through ``builder``.

    ``builder`` is any document element exposing ``create_style`` and
    ``create_font``.
    """

    registered: Dict[str, NamedStyle] = {}
    for name, style_config in config.styles.items():
        font = builder.create_font() if style_config.font is not None else None
        registered[name] = builder.create_style(
            lambda style, style_config=style_config, font=font: style_config.configure(style, font)
        )
    return registered


def build_configured_document(
    config: DocumentConfig,
    populate: Optional[Callable[[Document, Dict[str, NamedStyle]], Any]] = None,
) -> Document:
    """Build a document whose styles and default style come from ``config``.

    ``populate`` receives the document and the registered styles by name.
    """

    document = Document(create_workbook())
    styles = register_styles(document, config)
    if config.default_style is not None:
        document.default_style = styles[config.default_style]
    if populate is not None:
        populate(document, styles)
    return document


def _parse_style(name: Any, section: Any) -> StyleConfig:
    if section is None:
        return StyleConfig()
    if not isinstance(section, Mapping):
        raise ValueError(f"Style '{name}' must be a mapping")

    font = _parse_dataclass(FontConfig, section.get("font"), f"styles.{name}.font")
    alignment = _parse_dataclass(AlignmentConfig, section.get("alignment"), f"styles.{name}.alignment")

    fill_section = section.get("fill")
    fill = None
    if fill_section is not None:
        if isinstance(fill_section, str):
            fill = FillConfig(color=fill_section)
        else:
            fill = _parse_dataclass(FillConfig, fill_section, f"styles.{name}.fill")

    return StyleConfig(font=font, fill=fill, alignment=alignment)


def _parse_dataclass(cls, section: Any, label: str):
    if section is None:
        return None
    if not isinstance(section, Mapping):
        raise ValueError(f"'{label}' must be a mapping")
    known = {field_info.name for field_info in fields(cls)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"Unknown keys in '{label}': {sorted(unknown)}")
    try:
        return cls(**section)
    except TypeError as exc:
        raise ValueError(f"Invalid '{label}' section: {exc}") from exc


def _parse_output_section(section: Mapping[str, Any]) -> Dict[str, Any]:
    parsed: Dict[str, Any] = {}
    if "directory" in section:
        parsed["directory"] = Path(section["directory"])
    if "filename" in section:
        parsed["filename"] = str(section["filename"])
    return parsed


def _resolve_path(path: Path, base_path: Path) -> Path:
    expanded = Path(path).expanduser()
    if expanded.is_absolute():
        return expanded
    return (base_path / expanded).resolve()


__all__ = [
    "AlignmentConfig",
    "DocumentConfig",
    "FillConfig",
    "FontConfig",
    "OutputConfig",
    "StyleConfig",
    "build_configured_document",
    "load_config",
    "register_styles",
]
