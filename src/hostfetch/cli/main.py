"""hostfetch CLI - Main entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hostfetch import __version__
from hostfetch.collectors.system_info import collect_all
from hostfetch.config.loader import ConfigError, default_config_path, load_config
from hostfetch.config.models import HostfetchConfig
from hostfetch.display.renderer import render

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _setup_logging(debug: bool) -> None:
    """Send hostfetch log records to stderr; DEBUG shows failed sources."""
    package_logger = logging.getLogger("hostfetch")
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


def _load_settings(config_path: Path | None) -> HostfetchConfig:
    """Load the explicit config file, or the default one if present.

    An explicit file that fails to load is fatal; a broken default file
    is ignored so the display still appears.
    """
    if config_path is not None:
        try:
            return load_config(config_path)
        except ConfigError as e:
            err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
            raise SystemExit(1)

    path = default_config_path()
    if not path.exists():
        return HostfetchConfig()
    try:
        return load_config(path)
    except ConfigError as e:
        logger.debug(f"Ignoring default config: {e}")
        return HostfetchConfig()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hostfetch")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a YAML configuration file",
)
@click.option("--flat", is_flag=True, help="Draw the logo in a single color")
@click.option(
    "--color/--no-color",
    default=None,
    help="Force or suppress colors (default: detect terminal)",
)
@click.option("--debug", is_flag=True, help="Log failed information sources to stderr")
@click.pass_context
def cli(ctx, config_path, flat, color, debug):
    """hostfetch - system information beside an ASCII logo."""
    _setup_logging(debug)
    config = _load_settings(config_path)
    ctx.obj = config

    if ctx.invoked_subcommand is not None:
        return

    info = collect_all(timeout=config.command_timeout)
    art_style = "flat" if flat else config.art_style
    use_color = color if color is not None else config.color

    for line in render(info, art_style=art_style, hidden=config.hide):
        click.echo(line, color=use_color)


@cli.command()
@click.pass_obj
def fields(config):
    """List every collected field and its raw value."""
    info = collect_all(timeout=config.command_timeout)

    table = Table(title="System Information")
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    for name, value in info.fields():
        table.add_row(name, escape(value))
    console.print(table)


if __name__ == "__main__":
    cli()
