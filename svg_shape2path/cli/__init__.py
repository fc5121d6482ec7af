"""Command-line interface for svg-shape2path."""

from svg_shape2path.cli.main import cli

__all__ = ["cli"]
