"""Probability alphabets for Shannon-Fano-Elias coding.

This module defines the `Alphabet` class: an ordered, validated collection of
``(symbol, probability)`` pairs. Declaration order is preserved because it
fixes both the cumulative distribution used to build codewords and the
positional alignment between symbols and codewords.

Examples
--------
>>> from sfecoder.alphabet import Alphabet
>>> ab = Alphabet.from_pairs([("+", 0.5), ("-", 0.25), ("*", 0.25)])
>>> ab.size
3
>>> ab.index_of("-")
1
>>> list(ab)
[('+', 0.5), ('-', 0.25), ('*', 0.25)]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Self
import math

from sfecoder.config import Config
from sfecoder.errors import (
    DuplicateSymbolError,
    InvalidSymbolError,
    ProbabilityRangeError,
    ProbabilitySumError,
)


def is_valid_symbol(token: str) -> bool:
    """Return True if ``token`` is a single character from the allowed set."""

    return len(token) == 1 and token in Config.ALLOWED_SYMBOLS


def is_valid_code(token: str) -> bool:
    """Return True if ``token`` is a non-empty string of '0'/'1' only."""

    return bool(token) and all(c in Config.CODE_CHARS for c in token)


@dataclass(frozen=True)
class Alphabet:
    """A finite symbol set with a probability per symbol.

    Parameters
    ----------
    symbols:
        Symbols in declaration order. Each is one character from
        ``Config.ALLOWED_SYMBOLS`` and appears once.
    probabilities:
        Probability of each symbol, index-aligned with ``symbols``. Each lies
        in ``[0, 1]`` and together they sum to 1 within
        ``Config.PROBABILITY_TOLERANCE``.

    Raises
    ------
    InvalidSymbolError, DuplicateSymbolError, ProbabilityRangeError,
    ProbabilitySumError
        On construction, so an invalid instance never exists.
    """

    symbols: tuple[str, ...]
    probabilities: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.symbols) != len(self.probabilities):
            raise ValueError(
                f"symbols and probabilities differ in length: {len(self.symbols)} != {len(self.probabilities)}"
            )
        seen: set[str] = set()
        for sym, p in zip(self.symbols, self.probabilities):
            if not is_valid_symbol(sym):
                raise InvalidSymbolError(sym)
            if sym in seen:
                raise DuplicateSymbolError(sym)
            seen.add(sym)
            if not math.isfinite(p) or p < 0.0 or p > 1.0:
                raise ProbabilityRangeError(sym, p)
        total = math.fsum(self.probabilities)
        if abs(total - 1.0) > Config.PROBABILITY_TOLERANCE:
            raise ProbabilitySumError(total)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, float]]) -> Self:
        """Build an alphabet from ordered ``(symbol, probability)`` pairs."""

        items = list(pairs)
        return cls(
            symbols=tuple(sym for sym, _ in items),
            probabilities=tuple(float(p) for _, p in items),
        )

    @property
    def size(self) -> int:
        """Number of symbols in the alphabet."""

        return len(self.symbols)

    def pairs(self) -> list[tuple[str, float]]:
        return list(zip(self.symbols, self.probabilities))

    def index_of(self, symbol: str) -> int:
        """Position of ``symbol`` in declaration order, or -1 if absent."""

        try:
            return self.symbols.index(symbol)
        except ValueError:
            return -1

    def probability_of(self, symbol: str) -> float:
        idx = self.index_of(symbol)
        if idx < 0:
            raise KeyError(symbol)
        return self.probabilities[idx]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.symbols

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(zip(self.symbols, self.probabilities))

    def __len__(self) -> int:
        return len(self.symbols)


__all__ = ["Alphabet", "is_valid_symbol", "is_valid_code"]
