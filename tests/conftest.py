"""Pytest configuration and shared fixtures for svg-shape2path tests."""

from collections.abc import Callable, Generator
from pathlib import Path
from xml.etree.ElementTree import Element

import pytest

from svg_shape2path.svg.element import SVGItem

SVG_NS = "http://www.w3.org/2000/svg"


@pytest.fixture
def make_item() -> Callable[..., SVGItem]:
    """Return a factory building an SVGItem from a tag and attributes.

    The element is created in the SVG namespace, as it would be after parsing
    a real document.
    """

    def _make(tag: str, **attrs: str) -> SVGItem:
        return SVGItem(Element(f"{{{SVG_NS}}}{tag}", attrs))

    return _make


@pytest.fixture
def shapes_svg_content() -> str:
    """Return an SVG string with one of each basic shape."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <rect x="10" y="20" width="30" height="40" fill="blue"/>
  <rect x="0" y="0" width="10" height="10" rx="2"/>
  <line x1="0" y1="0" x2="10" y2="10" stroke="black"/>
  <g>
    <polygon points="0,0 10,0 10,10"/>
    <polyline points="1,1"/>
  </g>
  <circle cx="5" cy="5" r="3"/>
  <ellipse cx="5" cy="5" rx="4" ry="2"/>
</svg>"""


@pytest.fixture
def temp_svg(tmp_path: Path, shapes_svg_content: str) -> Generator[Path, None, None]:
    """Create a temporary SVG file with basic shapes."""
    svg_path = tmp_path / "shapes.svg"
    svg_path.write_text(shapes_svg_content, encoding="utf-8")
    yield svg_path


@pytest.fixture
def malformed_svg_content() -> str:
    """Return malformed SVG for error testing."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg">
  <rect x="10" y="50" width="5" height="5">
</svg>"""


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests independent of any user configuration file."""
    monkeypatch.delenv("SVG_SHAPE2PATH_CONFIG", raising=False)
    monkeypatch.setattr(
        "svg_shape2path.config.DEFAULT_CONFIG_PATH", tmp_path / "no-config.yaml"
    )

