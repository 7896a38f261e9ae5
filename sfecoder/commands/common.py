"""Options and output handling shared by the encode/decode commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable
import json

import click

from sfecoder.errors import CodecError
from sfecoder.session import CodingResult, load_alphabet, load_sequence, run, save, save_json


alphabet_option = click.option(
    "alphabet_path",
    "--alphabet",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    required=True,
    help="Alphabet file: one '<symbol> <probability>' pair per line",
)
sequence_option = click.option(
    "sequence_path",
    "--sequence",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    required=True,
    help="Sequence file: whitespace separated symbols or codewords",
)
output_option = click.option(
    "output",
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    required=False,
    help="Save the result to this file (overwritten if present)",
)
format_option = click.option(
    "output_format",
    "--format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)


def coding_options(func: Callable) -> Callable:
    for option in (format_option, output_option, sequence_option, alphabet_option):
        func = option(func)
    return func


def emit_result(result: CodingResult, output: Path | None, output_format: str) -> None:
    """Print ``result`` or save it to ``output``."""

    if output_format.lower() == "json":
        payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        if output is None:
            click.echo(payload)
            return
        save_json(result, output)
        click.echo(f"Results saved: {output}")
        return

    if output is None:
        click.echo(result.text)
        click.echo("")
        click.echo(result.report.rstrip("\n"))
        return
    save(result, output)
    click.echo(result.text)
    click.echo(f"Results saved: {output}")


def run_command(mode: str, alphabet_path: Path, sequence_path: Path, output: Path | None, output_format: str) -> None:
    """Load inputs, run ``mode`` and emit the result, mapping errors for click."""

    try:
        alphabet = load_alphabet(alphabet_path)
        sequence = load_sequence(sequence_path)
        result = run(mode, alphabet, sequence)  # type: ignore[arg-type]
        emit_result(result, output, output_format)
    except click.ClickException:
        raise
    except (CodecError, OSError) as e:
        raise click.ClickException(str(e)) from e
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
