"""Shannon-Fano-Elias codeword construction.

For an alphabet with probabilities ``p`` in declaration order:

1. cumulative probability ``F[i] = sum(p[:i])``
2. midpoint ``M[i] = F[i] + p[i] / 2``
3. word length ``L[i] = ceil(-log2(p[i] / 2))``
4. Kraft check ``sum(2 ** -L) <= 1``
5. codeword = first ``L[i]`` bits of the binary expansion of ``M[i]``
   (truncated, never rounded)

The ``/ 2`` in step 3 is what makes the truncated midpoints prefix-free; the
plain Shannon length ``ceil(-log2 p)`` is deliberately not offered.

Example
-------
>>> from sfecoder.alphabet import Alphabet
>>> from sfecoder.coding.builder import build_code
>>> table = build_code(Alphabet.from_pairs([("+", 0.5), ("-", 0.5)]))
>>> table.codewords
('01', '11')
>>> table.kraft_sum
0.5
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import logging
import math

import numpy as np

from sfecoder.alphabet import Alphabet
from sfecoder.errors import KraftViolation, ZeroProbabilityError


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodeTable:
    """Codewords derived from an alphabet, index-aligned with its symbols.

    Notes
    -----
    - ``avg_length`` is the probability-weighted length of the codewords
      themselves; it must agree with ``Metrics.avg_length``.
    - Instances are regenerated from the alphabet on demand and never
      mutated.
    """

    symbols: tuple[str, ...]
    probabilities: tuple[float, ...]
    codewords: tuple[str, ...]
    word_lengths: tuple[int, ...]
    kraft_sum: float

    @property
    def avg_length(self) -> float:
        lengths = np.fromiter((len(c) for c in self.codewords), dtype=float, count=len(self.codewords))
        return float(np.dot(np.asarray(self.probabilities, dtype=float), lengths))

    @property
    def kraft_ok(self) -> bool:
        return self.kraft_sum <= 1.0

    def codeword_for(self, symbol: str) -> str | None:
        try:
            return self.codewords[self.symbols.index(symbol)]
        except ValueError:
            return None

    def symbol_for(self, codeword: str) -> str | None:
        try:
            return self.symbols[self.codewords.index(codeword)]
        except ValueError:
            return None

    def as_dict(self) -> dict[str, str]:
        """Mapping symbol -> codeword in alphabet order."""

        return dict(zip(self.symbols, self.codewords))

    def is_prefix_free(self) -> bool:
        """True if no codeword is a prefix of another one."""

        for i, ci in enumerate(self.codewords):
            for j, cj in enumerate(self.codewords):
                if i != j and cj.startswith(ci):
                    return False
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "codewords": self.as_dict(),
            "word_lengths": dict(zip(self.symbols, self.word_lengths)),
            "kraft_sum": float(self.kraft_sum),
            "avg_length": self.avg_length,
        }


# Building blocks -----------------------------------------------------------------
def cumulative_probabilities(alphabet: Alphabet) -> list[float]:
    """Return ``F[i] = sum(p[j] for j < i)`` in declaration order (F[0] = 0)."""

    p = np.asarray(alphabet.probabilities, dtype=float)
    if p.size == 0:
        return []
    running = np.cumsum(p)
    return [0.0] + [float(x) for x in running[:-1]]


def midpoint_probabilities(alphabet: Alphabet) -> list[float]:
    """Return ``M[i] = F[i] + p[i] / 2``."""

    cumulative = cumulative_probabilities(alphabet)
    return [f + p / 2 for f, p in zip(cumulative, alphabet.probabilities)]


def word_lengths(alphabet: Alphabet) -> list[int]:
    """Return ``L[i] = ceil(-log2(p[i] / 2))`` for every symbol.

    Raises
    ------
    ZeroProbabilityError
        If a symbol has probability 0 (or one so small that p / 2 underflows
        to 0), which has no finite length.
    """

    for sym, p in alphabet:
        # subnormal p underflows to 0 once halved
        if p / 2.0 <= 0.0:
            raise ZeroProbabilityError(sym)
    p = np.asarray(alphabet.probabilities, dtype=float)
    return [int(x) for x in np.ceil(-np.log2(p / 2.0))]


def kraft_sum(lengths: Sequence[int]) -> float:
    """Return ``sum(2 ** -L)`` over ``lengths``."""

    return math.fsum(2.0 ** -int(n) for n in lengths)


def check_kraft(lengths: Sequence[int]) -> float:
    """Return the Kraft sum of ``lengths`` or raise if it exceeds 1."""

    total = kraft_sum(lengths)
    if total > 1.0:
        raise KraftViolation(total)
    return total


def to_binary_fraction(value: float, length: int) -> str:
    """Return the first ``length`` bits of the binary expansion of ``value``.

    Doubling and subtracting 1 are exact in binary floating point, so the
    expansion of values such as 0.25 or 0.75 is exact as well.
    """

    bits: list[str] = []
    x = float(value)
    for _ in range(length):
        x *= 2.0
        if x >= 1.0:
            bits.append("1")
            x -= 1.0
        else:
            bits.append("0")
    return "".join(bits)


def build_code(alphabet: Alphabet) -> CodeTable:
    """Derive the Shannon-Fano-Elias code table for ``alphabet``.

    Steps:
    1. Word lengths from the probabilities.
    2. Kraft check; nothing is returned on failure.
    3. Midpoints truncated to their word lengths.
    """

    lengths = word_lengths(alphabet)
    total = check_kraft(lengths)
    midpoints = midpoint_probabilities(alphabet)
    codewords = tuple(to_binary_fraction(m, n) for m, n in zip(midpoints, lengths))
    _LOGGER.debug(
        "Built code for %d symbols: kraft=%.6f codewords=%s",
        alphabet.size,
        total,
        codewords,
    )
    return CodeTable(
        symbols=alphabet.symbols,
        probabilities=alphabet.probabilities,
        codewords=codewords,
        word_lengths=tuple(lengths),
        kraft_sum=total,
    )


__all__ = [
    "CodeTable",
    "build_code",
    "check_kraft",
    "cumulative_probabilities",
    "kraft_sum",
    "midpoint_probabilities",
    "to_binary_fraction",
    "word_lengths",
]
