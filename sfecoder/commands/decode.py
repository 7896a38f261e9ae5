"""CLI command decoding codewords back into symbols.

Each token of the sequence file must be a whole codeword; the input is not
treated as a continuous bitstream.

Examples
--------
  sfecoder decode --alphabet alphabet.txt --sequence encoded.txt
  sfecoder decode --alphabet alphabet.txt --sequence encoded.txt --output decoded.txt
"""

from __future__ import annotations

from pathlib import Path

import click

from sfecoder.commands.common import coding_options, run_command


@click.command(name="decode")
@coding_options
def decode(alphabet_path: Path, sequence_path: Path, output: Path | None, output_format: str) -> None:
    """Decode whitespace separated codewords into symbols."""

    run_command("decode", alphabet_path, sequence_path, output, output_format)
