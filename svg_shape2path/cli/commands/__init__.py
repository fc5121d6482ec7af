"""CLI commands for svg-shape2path."""

from svg_shape2path.cli.commands.convert import convert
from svg_shape2path.cli.commands.batch import batch
from svg_shape2path.cli.commands.plugins import plugins

__all__ = ["convert", "batch", "plugins"]
