"""Exception hierarchy for svg-shape2path."""

from __future__ import annotations

from typing import Any


class Shape2PathError(Exception):
    """Base error for all svg-shape2path failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class SVGParseError(Shape2PathError):
    """SVG input could not be read or parsed."""


class ConfigError(Shape2PathError):
    """Configuration file or plugin params are invalid."""


class PluginNotFoundError(Shape2PathError):
    """Requested plugin name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown plugin: {name}", details={"plugin": name})
        self.name = name


class ConversionError(Shape2PathError):
    """Document conversion failed."""
