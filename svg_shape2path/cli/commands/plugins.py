"""Plugins command - list available optimization plugins."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from svg_shape2path.plugins import list_plugins

console = Console()


@click.command()
def plugins() -> None:
    """List available plugins and their default params."""
    table = Table(title="Plugins")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", style="green", no_wrap=True)
    table.add_column("Active", style="yellow")
    table.add_column("Params", style="magenta")
    table.add_column("Description", style="dim")

    for plugin in list_plugins():
        params = ", ".join(f"{k}={v}" for k, v in plugin.params.items())
        table.add_row(
            plugin.name,
            plugin.type,
            "yes" if plugin.active else "no",
            params or "-",
            plugin.description,
        )

    console.print(table)
