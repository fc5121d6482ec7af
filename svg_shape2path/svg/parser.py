"""SVG parsing and serialization.

Parsing goes through defusedxml so untrusted documents cannot trigger
entity expansion or external entity resolution.
"""

from __future__ import annotations

from collections.abc import Iterator
from io import StringIO
from pathlib import Path
from xml.etree.ElementTree import Element, ElementTree
from xml.etree.ElementTree import register_namespace as _register_namespace

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from svg_shape2path.exceptions import SVGParseError
from svg_shape2path.svg.element import split_tag

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

SHAPE_TAGS = frozenset({"rect", "line", "polyline", "polygon", "circle", "ellipse"})


def _register_namespaces() -> None:
    """Register common SVG namespaces so output keeps readable prefixes."""
    for prefix, uri in {"": SVG_NS, "xlink": XLINK_NS}.items():
        _register_namespace(prefix, uri)


def parse_svg(path: str | Path) -> ElementTree:
    """Parse an SVG file.

    Args:
        path: Path to the SVG file.

    Returns:
        Parsed ElementTree.

    Raises:
        SVGParseError: If the file is missing, unreadable, or not valid XML.
    """
    path = Path(path)
    if not path.is_file():
        raise SVGParseError(f"SVG file not found: {path}", details={"path": str(path)})

    try:
        return ET.parse(str(path))
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}", details={"path": str(path)}) from e
    except DefusedXmlException as e:
        raise SVGParseError(
            f"Refusing unsafe SVG: {e}", details={"path": str(path)}
        ) from e


def parse_svg_string(svg_content: str) -> ElementTree:
    """Parse SVG markup held in a string.

    Raises:
        SVGParseError: If the markup is not valid XML.
    """
    try:
        root = ET.fromstring(svg_content)
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}") from e
    except DefusedXmlException as e:
        raise SVGParseError(f"Refusing unsafe SVG: {e}") from e
    return ElementTree(root)


def find_shape_elements(root: Element) -> Iterator[Element]:
    """Yield every basic shape element under ``root`` in document order.

    Public helper for callers that want to inspect candidates before
    converting; ``Shape2PathConverter`` walks the tree itself so it can
    detach removed elements from their parents.
    """
    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        if split_tag(element.tag)[1] in SHAPE_TAGS:
            yield element


def tostring(tree: ElementTree) -> str:
    """Serialize a tree to an SVG string with an XML declaration."""
    _register_namespaces()
    buffer = StringIO()
    tree.write(buffer, encoding="unicode", xml_declaration=True)
    return buffer.getvalue()


def write_svg(tree: ElementTree, path: str | Path) -> Path:
    """Write a tree to ``path`` as UTF-8 and return the path."""
    _register_namespaces()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tree.write(path, encoding="utf-8", xml_declaration=True)
    return path
