"""CLI command printing the code table and metrics for an alphabet.

Examples
--------
  sfecoder table --alphabet alphabet.txt
  sfecoder table --alphabet alphabet.txt --format json
"""

from __future__ import annotations

from pathlib import Path
import json

import click

from sfecoder.commands.common import alphabet_option, format_option
from sfecoder.errors import CodecError
from sfecoder.report import render_report, report_to_dict
from sfecoder.session import describe, load_alphabet


@click.command(name="table")
@alphabet_option
@format_option
def table(alphabet_path: Path, output_format: str) -> None:
    """Show codewords, average length, redundancy and Kraft sum."""

    try:
        alphabet = load_alphabet(alphabet_path)
        code_table, metrics = describe(alphabet)
        if output_format.lower() == "json":
            click.echo(json.dumps(report_to_dict(code_table, metrics), indent=2, ensure_ascii=False))
        else:
            click.echo(render_report(code_table, metrics, show_entropy=True).rstrip("\n"))
    except click.ClickException:
        raise
    except (CodecError, OSError) as e:
        raise click.ClickException(str(e)) from e
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
