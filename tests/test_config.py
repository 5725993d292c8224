from pathlib import Path

import pytest

from sheetsmith.config import (
    DocumentConfig,
    FontConfig,
    StyleConfig,
    build_configured_document,
    load_config,
    register_styles,
)
from sheetsmith.elements import build_document

CONFIG_TEXT = """
default_style: body
styles:
  body:
    font: {name: Arial, size: 11}
  header:
    font: {bold: true, color: "FFFFFF"}
    fill: {color: "4F81BD"}
    alignment: {horizontal: center, wrap_text: true}
  plain:
output:
  directory: out
  filename: report.xlsx
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "sheetsmith.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config_parses_styles_and_output(tmp_path):
    config = load_config(_write(tmp_path, CONFIG_TEXT))

    assert config.default_style == "body"
    assert set(config.styles) == {"body", "header", "plain"}
    assert config.styles["header"].font.bold is True
    assert config.styles["header"].fill.color == "4F81BD"
    assert config.styles["header"].alignment.horizontal == "center"
    assert config.styles["plain"] == StyleConfig()
    assert config.output.directory == (tmp_path / "out").resolve()
    assert config.output.filename == "report.xlsx"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_unknown_default_style_is_rejected(tmp_path):
    with pytest.raises(ValueError, match="default_style"):
        load_config(_write(tmp_path, "default_style: missing\nstyles: {}\n"))


def test_unknown_font_keys_are_rejected(tmp_path):
    with pytest.raises(ValueError, match="Unknown keys"):
        load_config(_write(tmp_path, "styles:\n  bad:\n    font: {weight: 700}\n"))


def test_empty_file_gives_defaults(tmp_path):
    config = load_config(_write(tmp_path, ""))

    assert config.styles == {}
    assert config.default_style is None
    assert config.output.filename == "workbook.xlsx"


def test_register_styles_creates_engine_styles():
    config = DocumentConfig(styles={"title": StyleConfig(font=FontConfig(bold=True, size=14))})
    document = build_document()

    styles = register_styles(document, config)

    assert styles["title"].font.b is True
    assert styles["title"].font.sz == 14


def test_configured_document_uses_default_and_named_styles(tmp_path):
    config = load_config(_write(tmp_path, CONFIG_TEXT))

    def populate(document, styles):
        def fill(sheet):
            sheet.add_row(styles["header"], lambda row: row.add_cell("Title"))
            sheet.add_row(populate=lambda row: row.add_cell("Body"))

        document.add_sheet("Styled", populate=fill)

    document = build_configured_document(config, populate)

    ws = document.engine.workbook["Styled"]
    assert ws["A1"].font.b is True
    assert ws["A1"].fill.fgColor.rgb.endswith("4F81BD")
    assert ws["A2"].font.name == "Arial"
    assert ws["A2"].font.b is False
