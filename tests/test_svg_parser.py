"""Unit tests for svg_shape2path.svg.parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from svg_shape2path.exceptions import SVGParseError
from svg_shape2path.svg.element import split_tag
from svg_shape2path.svg.parser import (
    find_shape_elements,
    parse_svg,
    parse_svg_string,
    tostring,
    write_svg,
)


class TestParsing:
    """Tests for parse_svg and parse_svg_string."""

    def test_parse_string(self, shapes_svg_content: str) -> None:
        tree = parse_svg_string(shapes_svg_content)

        assert split_tag(tree.getroot().tag)[1] == "svg"

    def test_parse_file(self, temp_svg: Path) -> None:
        tree = parse_svg(temp_svg)

        assert split_tag(tree.getroot().tag)[1] == "svg"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SVGParseError, match="SVG file not found"):
            parse_svg(tmp_path / "missing.svg")

    def test_malformed_markup_raises(self, malformed_svg_content: str) -> None:
        with pytest.raises(SVGParseError, match="Failed to parse SVG"):
            parse_svg_string(malformed_svg_content)

    def test_malformed_file_raises(self, tmp_path: Path, malformed_svg_content: str) -> None:
        svg_path = tmp_path / "bad.svg"
        svg_path.write_text(malformed_svg_content, encoding="utf-8")

        with pytest.raises(SVGParseError) as exc_info:
            parse_svg(svg_path)
        assert exc_info.value.details["path"] == str(svg_path)

    def test_entity_declarations_are_refused(self) -> None:
        """Documents declaring entities are rejected by defusedxml."""
        content = (
            '<?xml version="1.0"?>\n'
            '<!DOCTYPE svg [<!ENTITY boom "boom">]>\n'
            '<svg xmlns="http://www.w3.org/2000/svg"><text>&boom;</text></svg>'
        )

        with pytest.raises(SVGParseError, match="Refusing unsafe SVG"):
            parse_svg_string(content)


class TestFindShapeElements:
    def test_finds_shapes_in_document_order(self, shapes_svg_content: str) -> None:
        root = parse_svg_string(shapes_svg_content).getroot()

        names = [split_tag(e.tag)[1] for e in find_shape_elements(root)]

        assert names == [
            "rect",
            "rect",
            "line",
            "polygon",
            "polyline",
            "circle",
            "ellipse",
        ]


class TestSerialization:
    def test_tostring_uses_default_namespace(self, shapes_svg_content: str) -> None:
        """Output keeps the SVG namespace unprefixed."""
        output = tostring(parse_svg_string(shapes_svg_content))

        assert output.startswith("<?xml")
        assert '<svg xmlns="http://www.w3.org/2000/svg"' in output
        assert "ns0:" not in output

    def test_write_svg_creates_parent_dirs(self, tmp_path: Path, shapes_svg_content: str) -> None:
        target = tmp_path / "nested" / "out.svg"

        written = write_svg(parse_svg_string(shapes_svg_content), target)

        assert written == target
        assert target.read_text(encoding="utf-8").count("<rect") == 2
