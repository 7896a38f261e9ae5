"""CLI command encoding a symbol sequence into codewords.

Examples
--------
  sfecoder encode --alphabet alphabet.txt --sequence message.txt
  sfecoder encode --alphabet alphabet.txt --sequence message.txt --output encoded.txt
  sfecoder encode --alphabet alphabet.txt --sequence message.txt --format json
"""

from __future__ import annotations

from pathlib import Path

import click

from sfecoder.commands.common import coding_options, run_command


@click.command(name="encode")
@coding_options
def encode(alphabet_path: Path, sequence_path: Path, output: Path | None, output_format: str) -> None:
    """Encode symbols into Shannon-Fano-Elias codewords."""

    run_command("encode", alphabet_path, sequence_path, output, output_format)
