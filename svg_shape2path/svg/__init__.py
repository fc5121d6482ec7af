"""SVG parsing and manipulation for svg-shape2path.

This subpackage provides:
- Safe SVG parsing with XXE protection (defusedxml)
- Shape element detection (rect, line, polyline, polygon, circle, ellipse)
- The element adapter plugins operate on
- Number coercion and path-data number formatting
- SVG output generation
"""

from svg_shape2path.svg.element import SVGItem
from svg_shape2path.svg.numbers import format_number, parse_number_list, to_number
from svg_shape2path.svg.parser import (
    find_shape_elements,
    parse_svg,
    parse_svg_string,
    tostring,
    write_svg,
)

__all__ = [
    "SVGItem",
    "format_number",
    "parse_number_list",
    "to_number",
    "parse_svg",
    "parse_svg_string",
    "find_shape_elements",
    "tostring",
    "write_svg",
]
