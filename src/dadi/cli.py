"""dadi CLI - daily journal."""

import logging
import sys

import click

from .adapters.editor import EditorError
from .config import ConfigError, load_config
from .errors import JournalError
from .workflows import collate as collate_days, open_today


@click.group(invoke_without_command=True)
@click.version_option(package_name="dadi")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """dadi - one markdown file per day, carrying sections forward.

    Reads ~/.config/dadi/dadi.conf (or $DADI_CONFIG), a KEY = value file;
    the older YAML config.yml is not read.
    """
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    if ctx.invoked_subcommand is None:
        ctx.invoke(today)


@main.command()
def today():
    """Create today's entry if needed and open it in $EDITOR."""
    try:
        config = load_config()
        open_today(config)
    except (ConfigError, JournalError, EditorError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("days", default=7, type=click.IntRange(min=1))
def collate(days: int):
    """Show collated sections from the previous DAYS days."""
    try:
        config = load_config()
        collate_days(config, days)
    except (ConfigError, JournalError, EditorError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
