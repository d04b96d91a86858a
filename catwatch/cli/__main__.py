"""Main file for catwatch CLI."""

import logging
from importlib import metadata

import click

from .simulate import simulate

LOG_LEVELS = ["error", "warning", "info", "debug"]

_LOGGER = logging.getLogger(__name__)


@click.group()
@click.option("--log-level", type=click.Choice(LOG_LEVELS), default="warning")
def cli(log_level: str) -> None:
    """Create the click CLI group with specified log level."""
    level = getattr(logging, log_level.upper())
    logging.getLogger().setLevel(level)
    _LOGGER.debug("catwatch version: %s", get_version())


@cli.command()
def version() -> None:
    """CLI command to print installed package version."""
    print(get_version())  # noqa: T201 # Valid CLI print


def get_version() -> str:
    """Get the version of the catwatch module."""
    return metadata.version("catwatch")


cli.add_command(simulate)

if __name__ == "__main__":
    cli()
