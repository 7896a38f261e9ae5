"""Reading alphabet / sequence text files and writing results.

Alphabet files hold one ``<symbol> <probability>`` pair per line (spaces or
tabs between them, blank lines ignored). Sequence files hold any number of
whitespace separated tokens per line; each token is either an alphabet
symbol or a binary codeword.

Probabilities must be plain ASCII decimals (``.`` as separator, optional
exponent) whatever the host locale; digit-group underscores and non-ASCII
digits, which ``float`` would otherwise accept, are rejected.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable
import json
import logging
import re

from sfecoder.alphabet import Alphabet, is_valid_code, is_valid_symbol
from sfecoder.config import Config
from sfecoder.errors import (
    DuplicateSymbolError,
    EmptySequenceError,
    FormatError,
    InvalidProbabilityError,
    InvalidSymbolError,
    InvalidTokenError,
)
from sfecoder.utils import ensure_dir


_LOGGER = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[ \t]+")
# ASCII digits, "." separator, optional exponent; no "_" or non-ASCII digits
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _split(line: str) -> list[str]:
    return [part for part in _SEPARATORS.split(line.strip()) if part]


def parse_alphabet(text: str) -> Alphabet:
    """Parse alphabet file contents into an `Alphabet`.

    Raises
    ------
    FormatError
        A non-blank line does not hold exactly two fields.
    InvalidSymbolError, InvalidProbabilityError, DuplicateSymbolError
        For the first offending line.
    ProbabilityRangeError, ProbabilitySumError
        From `Alphabet` validation once all lines are read.
    """

    pairs: list[tuple[str, float]] = []
    seen: set[str] = set()
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        parts = _split(line)
        if len(parts) != 2:
            raise FormatError(line, lineno)
        symbol, prob_str = parts
        if not is_valid_symbol(symbol):
            raise InvalidSymbolError(symbol)
        if not _DECIMAL.fullmatch(prob_str):
            raise InvalidProbabilityError(prob_str)
        probability = float(prob_str)
        if symbol in seen:
            raise DuplicateSymbolError(symbol)
        seen.add(symbol)
        pairs.append((symbol, probability))
    return Alphabet.from_pairs(pairs)


def parse_sequence(text: str, *, source: str | None = None) -> list[str]:
    """Split sequence contents into tokens and validate each one.

    Raises
    ------
    InvalidTokenError
        A token is neither a symbol nor a binary code.
    EmptySequenceError
        No tokens at all.
    """

    tokens: list[str] = []
    for line in text.splitlines():
        for token in _split(line):
            if is_valid_symbol(token) or is_valid_code(token):
                tokens.append(token)
            else:
                raise InvalidTokenError(token, source)
    if not tokens:
        raise EmptySequenceError(source)
    return tokens


def read_alphabet(path: Path) -> Alphabet:
    """Read and validate the alphabet file at ``path``."""

    text = Path(path).read_text(encoding=Config.FILE_ENCODING)
    alphabet = parse_alphabet(text)
    _LOGGER.debug("Loaded alphabet from %s: %s", path, alphabet.pairs())
    return alphabet


def read_sequence(path: Path) -> list[str]:
    """Read and validate the sequence file at ``path``."""

    text = Path(path).read_text(encoding=Config.FILE_ENCODING)
    tokens = parse_sequence(text, source=str(path))
    _LOGGER.debug("Loaded %d tokens from %s", len(tokens), path)
    return tokens


def format_tokens(tokens: Iterable[str], separator: str = Config.OUTPUT_SEPARATOR) -> str:
    return separator.join(tokens)


def write_output(path: Path, output_text: str, report: str) -> None:
    """Write ``output_text``, a blank line and ``report`` to ``path``.

    Existing files are overwritten; parent directories are created.
    """

    path = Path(path)
    ensure_dir(path.parent)
    body = output_text.rstrip("\n") + "\n\n" + report.rstrip("\n") + "\n"
    path.write_text(body, encoding=Config.FILE_ENCODING)
    _LOGGER.debug("Wrote %d characters to %s", len(body), path)


def write_json(path: Path, payload: Any) -> None:
    """Write ``payload`` as indented JSON to ``path``, overwriting it."""

    path = Path(path)
    ensure_dir(path.parent)
    body = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    path.write_text(body, encoding=Config.FILE_ENCODING)
    _LOGGER.debug("Wrote JSON to %s", path)


__all__ = [
    "format_tokens",
    "parse_alphabet",
    "parse_sequence",
    "read_alphabet",
    "read_sequence",
    "write_json",
    "write_output",
]
