"""Command-line interface for sfecoder using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import click
from sfecoder import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """sfecoder: Shannon-Fano-Elias coding of symbol sequences."""
    pass


# Register subcommands
from sfecoder.commands.encode import encode  # noqa: E402
from sfecoder.commands.decode import decode  # noqa: E402
from sfecoder.commands.table import table  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(table)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
