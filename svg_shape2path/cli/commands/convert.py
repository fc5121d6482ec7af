"""Convert command - convert shapes in a single SVG file."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console

from svg_shape2path import Shape2PathConverter
from svg_shape2path.config import Config

console = Console()


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: <input>_paths.svg)",
)
@click.option(
    "--convert-arcs/--no-convert-arcs",
    default=None,
    help="Also convert circles and ellipses",
)
@click.pass_context
def convert(
    ctx: click.Context,
    input_file: Path,
    output: Path | None,
    convert_arcs: bool | None,
) -> None:
    """Convert basic shapes in INPUT_FILE to paths."""
    obj = ctx.obj or {}
    config: Config = obj.get("config") or Config()
    if convert_arcs is not None:
        config = replace(config, convert_arcs=convert_arcs)

    output_path = output or input_file.with_name(f"{input_file.stem}_paths.svg")

    converter = Shape2PathConverter(config=config)
    result = converter.convert_file(input_file, output_path)

    if not result.success:
        console.print(f"[red]Error:[/red] {'; '.join(result.errors)}")
        raise SystemExit(1)

    console.print(f"[green]Converted[/green] {input_file} -> {output_path}")
    console.print(f"  [blue]Paths created:[/blue] {result.converted}")
    console.print(f"  [blue]Elements removed:[/blue] {result.removed}")
