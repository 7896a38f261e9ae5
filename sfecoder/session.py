"""Programmatic surface: load alphabet, load sequence, encode or decode, save.

Every function is independent and keeps no state between calls; a caller
(CLI, GUI, notebook) holds the loaded alphabet, sequence and last result
itself and passes them back in.

Example
-------
>>> from sfecoder.alphabet import Alphabet
>>> from sfecoder.session import run_encode
>>> ab = Alphabet.from_pairs([("+", 0.5), ("-", 0.5)])
>>> run_encode(ab, ["+", "-", "+"]).text
'01 11 01'
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Sequence
import logging

from sfecoder.alphabet import Alphabet
from sfecoder.coding.builder import CodeTable, build_code
from sfecoder.coding.codec import decode_with_table, encode_with_table
from sfecoder.config import Config, SUPPORTED_MODES
from sfecoder.redundancy import Metrics, compute_metrics
from sfecoder.report import render_report, report_to_dict
from sfecoder.textio import format_tokens, read_alphabet, read_sequence, write_json, write_output


_LOGGER = logging.getLogger(__name__)

Mode = Literal["encode", "decode"]


@dataclass(frozen=True)
class CodingResult:
    """Outcome of one encode or decode call.

    Parameters
    ----------
    mode:
        ``"encode"`` or ``"decode"``.
    tokens:
        Output tokens, one per input token (codewords or symbols).
    table:
        Code table built for this call.
    metrics:
        Metrics computed from the same word lengths as ``table``.
    """

    mode: str
    tokens: tuple[str, ...]
    table: CodeTable
    metrics: Metrics

    @property
    def text(self) -> str:
        return format_tokens(self.tokens, Config.OUTPUT_SEPARATOR)

    @property
    def report(self) -> str:
        return render_report(self.table, self.metrics)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"mode": self.mode, "output": list(self.tokens)}
        out.update(report_to_dict(self.table, self.metrics))
        return out


def load_alphabet(path: Path) -> Alphabet:
    return read_alphabet(Path(path))


def load_sequence(path: Path) -> list[str]:
    return read_sequence(Path(path))


def _prepare(alphabet: Alphabet) -> tuple[CodeTable, Metrics]:
    table = build_code(alphabet)
    metrics = compute_metrics(alphabet, table.word_lengths)
    return table, metrics


def run_encode(alphabet: Alphabet, sequence: Sequence[str]) -> CodingResult:
    """Encode ``sequence`` and return output plus table and metrics."""

    table, metrics = _prepare(alphabet)
    tokens = encode_with_table(table, sequence)
    _LOGGER.info("Encoded %d symbols, avg length %.4f", len(tokens), metrics.avg_length)
    return CodingResult(mode="encode", tokens=tuple(tokens), table=table, metrics=metrics)


def run_decode(alphabet: Alphabet, sequence: Sequence[str]) -> CodingResult:
    """Decode ``sequence`` and return output plus table and metrics."""

    table, metrics = _prepare(alphabet)
    tokens = decode_with_table(table, sequence)
    _LOGGER.info("Decoded %d codewords", len(tokens))
    return CodingResult(mode="decode", tokens=tuple(tokens), table=table, metrics=metrics)


def run(mode: Mode, alphabet: Alphabet, sequence: Sequence[str]) -> CodingResult:
    """Dispatch to `run_encode` or `run_decode` by ``mode``."""

    if mode == "encode":
        return run_encode(alphabet, sequence)
    if mode == "decode":
        return run_decode(alphabet, sequence)
    raise ValueError(f"Unknown mode: {mode!r}. Available: {', '.join(SUPPORTED_MODES)}")


def describe(alphabet: Alphabet) -> tuple[CodeTable, Metrics]:
    """Build the code table and metrics without a sequence."""

    return _prepare(alphabet)


def save(result: CodingResult, path: Path) -> None:
    """Write the output blob, a blank line and the report to ``path``."""

    write_output(Path(path), result.text, result.report)


def save_json(result: CodingResult, path: Path) -> None:
    """Write ``result.to_dict()`` as JSON to ``path``."""

    write_json(Path(path), result.to_dict())


__all__ = [
    "CodingResult",
    "describe",
    "load_alphabet",
    "load_sequence",
    "run",
    "run_decode",
    "run_encode",
    "save",
    "save_json",
]
