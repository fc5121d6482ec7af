"""Entry point for the ``svg-shape2path`` command."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_shape2path import __version__
from svg_shape2path.cli.commands import batch, convert, plugins
from svg_shape2path.config import LOG_LEVELS, Config
from svg_shape2path.exceptions import ConfigError
from svg_shape2path.log import setup_logging

console = Console()


@click.group()
@click.version_option(__version__, prog_name="svg-shape2path")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Convert basic SVG shapes to compact path elements."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from None

    if log_level:
        config.log_level = log_level.upper()
    setup_logging(config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = config.log_level


cli.add_command(convert)
cli.add_command(batch)
cli.add_command(plugins)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
