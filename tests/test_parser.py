"""Tests for docs-json loading."""

from pathlib import Path

import pytest

from stencil_docx.exceptions import ParseError
from stencil_docx.models import DocsTag, PropDoc, SlotDoc
from stencil_docx.parser import load_docs, parse_docs


class TestLoadDocs:
    """Test loading the docs-json fixture."""

    def test_components_loaded_in_order(self, fixtures_dir: Path) -> None:
        docs = load_docs(fixtures_dir / "docs.json")

        assert [c.tag for c in docs.components] == ["sqm-hero", "sqm-internal", "sqm-divider"]

    def test_component_fields(self, fixtures_dir: Path) -> None:
        hero = load_docs(fixtures_dir / "docs.json").components[0]

        assert hero.docs == "A full-width hero banner."
        assert hero.docs_tags == [DocsTag("uiName", "Hero")]
        assert hero.props[0] == PropDoc(
            name="backgroundColor",
            attr="background-color",
            type="string",
            docs="Background colour of the banner",
            docs_tags=[DocsTag("uiName", "Background")],
        )
        assert hero.props[1].attr is None
        assert hero.props[1].docs_tags == [DocsTag("undocumented", "")]
        assert hero.slots == [
            SlotDoc("", "Banner content"),
            SlotDoc("footer", "Content below the banner"),
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="File not found"):
            load_docs(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ParseError, match="Failed to parse JSON"):
            load_docs(path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_bytes(b'{"components": [{"tag": "\xff"}]}')

        with pytest.raises(ParseError, match="Failed to read"):
            load_docs(path)

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="Failed to read"):
            load_docs(tmp_path)


class TestParseDocs:
    """Test conversion of raw data."""

    def test_root_must_be_object(self) -> None:
        with pytest.raises(ParseError):
            parse_docs([])

    def test_missing_fields_degrade_to_empty(self) -> None:
        docs = parse_docs(
            {
                "components": [
                    {
                        "tag": "sqm-empty",
                        "docs": None,
                        "props": [{"name": "open", "type": None, "docsTags": None}],
                        "slots": [{"name": "footer"}],
                    }
                ]
            }
        )

        (component,) = docs.components
        assert component.docs == ""
        assert component.docs_tags == []
        assert component.props == [PropDoc(name="open", type="", docs="")]
        assert component.slots == [SlotDoc("footer", "")]

    def test_empty_attr_becomes_none(self) -> None:
        docs = parse_docs({"components": [{"tag": "x", "props": [{"name": "n", "attr": ""}]}]})

        assert docs.components[0].props[0].attribute_name == "n"

    def test_missing_components(self) -> None:
        assert parse_docs({}).components == []
        assert parse_docs({"components": None}).components == []

    def test_wrong_shape_rejected(self) -> None:
        with pytest.raises(ParseError, match="Invalid component metadata"):
            parse_docs({"components": "sqm-hero"})
