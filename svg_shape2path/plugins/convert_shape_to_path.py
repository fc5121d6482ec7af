"""convertShapeToPath plugin.

Converts basic shapes (rect, line, polyline, polygon and, optionally,
circle and ellipse) to the more compact path form. Having everything as
paths also lets later stages merge paths with similar attributes.

See https://www.w3.org/TR/SVG/shapes.html for the shape definitions.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from svg_shape2path.svg.element import SVGItem
from svg_shape2path.svg.numbers import format_number as fmt
from svg_shape2path.svg.numbers import parse_number_list

logger = logging.getLogger(__name__)

name = "convertShapeToPath"
plugin_type = "perItem"
active = True
description = "converts basic shapes to more compact path form"
params: dict[str, Any] = {
    "convertArcs": False,
}


class KeepSignal(Enum):
    """What the host should do with an item after the plugin ran."""

    UNCHANGED = "unchanged"
    REMOVE = "remove"
    CONVERTED = "converted"


def _set_path(item: SVGItem, path_data: str, removed: list[str]) -> KeepSignal:
    item.add_attr("d", path_data)
    item.rename_elem("path").remove_attr(removed)
    return KeepSignal.CONVERTED


def _skip(item: SVGItem, reason: str) -> KeepSignal:
    logger.debug("Leaving <%s> unchanged: %s", item.name, reason)
    return KeepSignal.UNCHANGED


def _arc_path(cx: float, cy: float, rx: float, ry: float) -> str:
    # Two half arcs: a single arc command cannot draw a full ellipse
    radii = f"{fmt(rx)} {fmt(ry)} 0 1 0 "
    return (
        f"M{fmt(cx)} {fmt(cy - ry)}"
        f"A{radii}{fmt(cx)} {fmt(cy + ry)}"
        f"A{radii}{fmt(cx)} {fmt(cy - ry)}"
        "Z"
    )


def convert_shape_to_path(
    item: SVGItem, plugin_params: Mapping[str, Any] | None = None
) -> KeepSignal:
    """Convert a basic shape to a path in place.

    Args:
        item: Element to inspect and possibly mutate.
        plugin_params: Plugin params; ``convertArcs`` enables circle and
            ellipse conversion.

    Returns:
        ``CONVERTED`` after the item was rewritten as a path, ``REMOVE`` for a
        degenerate polyline/polygon the host should drop, ``UNCHANGED``
        otherwise.
    """
    convert_arcs = bool(plugin_params and plugin_params.get("convertArcs"))

    if (
        item.is_elem("rect")
        and item.has_attr("width")
        and item.has_attr("height")
        and not item.has_attr("rx")
        and not item.has_attr("ry")
    ):
        x = item.number_attr("x")
        y = item.number_attr("y")
        width = item.number_attr("width")
        height = item.number_attr("height")

        # Values like "100%" coerce to NaN; units must be stripped before
        # this runs.
        if not math.isfinite(x - y + width - height):
            return _skip(item, "non-numeric geometry")

        path_data = (
            f"M{fmt(x)} {fmt(y)}H{fmt(x + width)}V{fmt(y + height)}H{fmt(x)}Z"
        )
        return _set_path(item, path_data, ["x", "y", "width", "height"])

    if item.is_elem("line"):
        x1 = item.number_attr("x1")
        y1 = item.number_attr("y1")
        x2 = item.number_attr("x2")
        y2 = item.number_attr("y2")
        if not math.isfinite(x1 - y1 + x2 - y2):
            return _skip(item, "non-numeric geometry")

        path_data = f"M{fmt(x1)} {fmt(y1)}L{fmt(x2)} {fmt(y2)}"
        return _set_path(item, path_data, ["x1", "y1", "x2", "y2"])

    if item.is_elem("polyline", "polygon") and item.has_attr("points"):
        coords = parse_number_list(item.attr("points") or "")
        if len(coords) < 4:
            return KeepSignal.REMOVE

        path_data = (
            "M"
            + " ".join(fmt(c) for c in coords[:2])
            + "L"
            + " ".join(fmt(c) for c in coords[2:])
            + ("z" if item.is_elem("polygon") else "")
        )
        return _set_path(item, path_data, ["points"])

    if item.is_elem("circle") and convert_arcs:
        cx = item.number_attr("cx")
        cy = item.number_attr("cy")
        r = item.number_attr("r")
        if not math.isfinite(cx - cy + r):
            return _skip(item, "non-numeric geometry")

        return _set_path(item, _arc_path(cx, cy, r, r), ["cx", "cy", "r"])

    if item.is_elem("ellipse") and convert_arcs:
        cx = item.number_attr("cx")
        cy = item.number_attr("cy")
        rx = item.number_attr("rx")
        ry = item.number_attr("ry")
        if not math.isfinite(cx - cy + rx - ry):
            return _skip(item, "non-numeric geometry")

        return _set_path(item, _arc_path(cx, cy, rx, ry), ["cx", "cy", "rx", "ry"])

    return KeepSignal.UNCHANGED


fn = convert_shape_to_path
