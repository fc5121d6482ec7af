"""Batch command - convert shapes in multiple SVG files."""

from __future__ import annotations

import concurrent.futures
from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress

from svg_shape2path import ConversionResult, Shape2PathConverter
from svg_shape2path.config import Config

console = Console()


def read_batch_file(batch_file: Path) -> list[Path]:
    """Read input paths from a list file, one per line.

    Blank lines and lines starting with ``#`` are ignored.
    """
    paths: list[Path] = []
    with open(batch_file, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                paths.append(Path(line))
    return paths


@click.command()
@click.argument("inputs", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option("--output-dir", "-o", type=click.Path(path_type=Path), required=True, help="Output directory")
@click.option("--batch-file", type=click.Path(exists=True, path_type=Path), help="File containing list of inputs")
@click.option("--suffix", default="_paths", help="Output filename suffix")
@click.option("-j", "--jobs", type=click.IntRange(min=1), default=4, help="Parallel jobs")
@click.option(
    "--convert-arcs/--no-convert-arcs",
    default=None,
    help="Also convert circles and ellipses",
)
@click.option("--continue-on-error", is_flag=True, help="Continue processing on errors")
@click.pass_context
def batch(
    ctx: click.Context,
    inputs: tuple[Path, ...],
    output_dir: Path,
    batch_file: Path | None,
    suffix: str,
    jobs: int,
    convert_arcs: bool | None,
    continue_on_error: bool,
) -> None:
    """Convert basic shapes to paths in multiple SVG files.

    INPUTS: Paths to SVG files (supports glob patterns via shell).
    """
    obj = ctx.obj or {}
    config: Config = obj.get("config") or Config()
    if convert_arcs is not None:
        config = replace(config, convert_arcs=convert_arcs)

    all_inputs: list[Path] = list(inputs)
    if batch_file:
        all_inputs.extend(read_batch_file(batch_file))

    if not all_inputs:
        console.print("[red]Error:[/red] No input files specified")
        raise SystemExit(1)

    output_dir.mkdir(parents=True, exist_ok=True)

    converter = Shape2PathConverter(config=config)

    results: list[ConversionResult] = []
    failed: list[tuple[Path, str]] = []

    def process_file(input_path: Path) -> ConversionResult:
        output_path = output_dir / f"{input_path.stem}{suffix}.svg"
        return converter.convert_file(input_path, output_path)

    with Progress(console=console) as progress:
        task = progress.add_task("[green]Converting...", total=len(all_inputs))

        with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
            future_to_path = {
                executor.submit(process_file, p): p for p in all_inputs
            }

            for future in concurrent.futures.as_completed(future_to_path):
                input_path = future_to_path[future]
                try:
                    result = future.result()
                    results.append(result)
                    if not result.success:
                        failed.append((input_path, "; ".join(result.errors)))
                except Exception as e:
                    failed.append((input_path, f"{type(e).__name__}: {e}"))
                finally:
                    progress.advance(task)

                if failed and not continue_on_error:
                    for pending in future_to_path:
                        pending.cancel()
                    break

    for input_path, error in failed:
        console.print(f"[red]Error in {input_path}:[/red] {error}")

    success_count = sum(1 for r in results if r.success)
    console.print()
    console.print("[bold]Batch complete:[/bold]")
    console.print(f"  [green]Success:[/green] {success_count}")
    console.print(f"  [red]Failed:[/red] {len(failed)}")
    console.print(f"  [blue]Paths created:[/blue] {sum(r.converted for r in results)}")
    console.print(f"  [blue]Output:[/blue] {output_dir}")

    if failed:
        raise SystemExit(1)
