"""Element adapter used by per-item plugins.

``SVGItem`` wraps an ElementTree element and exposes the small set of
operations a plugin needs: kind tests, attribute access, and renaming.
Kind tests and renames work on the local tag name so namespaced
(``{http://www.w3.org/2000/svg}rect``) and bare (``rect``) trees behave alike.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from svg_shape2path.svg.numbers import to_number

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element


def split_tag(tag: str) -> tuple[str | None, str]:
    """Split a Clark-notation tag into (namespace, local name)."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return None, tag


class SVGItem:
    """Mutable view of one element in an SVG tree."""

    __slots__ = ("element",)

    def __init__(self, element: Element) -> None:
        self.element = element

    def __repr__(self) -> str:
        return f"SVGItem({self.name!r}, {dict(self.element.attrib)!r})"

    @property
    def name(self) -> str:
        """Local tag name of the element."""
        return split_tag(self.element.tag)[1]

    def is_elem(self, *names: str) -> bool:
        """Return True if the element's local name is one of ``names``."""
        return self.name in names

    def has_attr(self, name: str) -> bool:
        return name in self.element.attrib

    def attr(self, name: str) -> str | None:
        return self.element.get(name)

    def number_attr(self, name: str, default: float = 0.0) -> float:
        """Read an attribute as a number.

        Args:
            name: Unprefixed attribute name.
            default: Value used when the attribute is absent.

        Returns:
            The coerced value; NaN when the text is not a plain number.
        """
        value = self.element.get(name)
        if value is None:
            return default
        return to_number(value)

    def add_attr(self, name: str, value: str) -> SVGItem:
        """Set an unprefixed attribute, replacing any existing value."""
        self.element.set(name, value)
        return self

    def rename_elem(self, name: str) -> SVGItem:
        """Change the element's local name, keeping its namespace."""
        namespace, _ = split_tag(self.element.tag)
        self.element.tag = f"{{{namespace}}}{name}" if namespace else name
        return self

    def remove_attr(self, names: str | Iterable[str]) -> SVGItem:
        """Remove one attribute or several. Missing names are ignored."""
        if isinstance(names, str):
            names = [names]
        for name in names:
            self.element.attrib.pop(name, None)
        return self
