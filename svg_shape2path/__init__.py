"""svg-shape2path: Convert basic SVG shapes to compact path elements.

This library provides the convertShapeToPath optimization with:
- rect, line, polyline and polygon conversion to ``<path d="...">``
- Optional circle and ellipse conversion via two arc commands
- Safe SVG parsing (defusedxml) and a document-level converter
- A click CLI for single files and batches

Example:
    >>> from svg_shape2path import Shape2PathConverter
    >>> converter = Shape2PathConverter(convert_arcs=True)
    >>> converter.convert_file("input.svg", "output.svg")
"""

from svg_shape2path.api import ConversionResult, Shape2PathConverter
from svg_shape2path.config import Config
from svg_shape2path.exceptions import (
    ConfigError,
    ConversionError,
    PluginNotFoundError,
    Shape2PathError,
    SVGParseError,
)
from svg_shape2path.plugins import KeepSignal, get_plugin, list_plugins
from svg_shape2path.plugins.convert_shape_to_path import convert_shape_to_path
from svg_shape2path.svg.element import SVGItem

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Shape2PathConverter",
    "ConversionResult",
    "Config",
    # Plugin
    "convert_shape_to_path",
    "KeepSignal",
    "SVGItem",
    "get_plugin",
    "list_plugins",
    # Exceptions
    "Shape2PathError",
    "SVGParseError",
    "ConfigError",
    "PluginNotFoundError",
    "ConversionError",
    # Metadata
    "__version__",
]
