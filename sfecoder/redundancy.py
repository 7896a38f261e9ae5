"""Entropy, average codeword length and redundancy of a code.

Redundancy here is the absolute figure ``R = L_avg - H`` in bits per symbol,
where ``H = -sum p log2 p`` is the source entropy and ``L_avg = sum p L`` the
expected codeword length. For a code satisfying Kraft, ``R >= 0`` up to
floating error.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Sequence

import numpy as np

from sfecoder.alphabet import Alphabet
from sfecoder.coding.builder import kraft_sum


@dataclass(frozen=True)
class Metrics:
    """Code quality figures for one alphabet and its word lengths."""

    entropy: float
    avg_length: float
    redundancy: float
    kraft_sum: float

    @property
    def kraft_ok(self) -> bool:
        return self.kraft_sum <= 1.0

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["kraft_ok"] = self.kraft_ok
        return out


def entropy(probabilities: Sequence[float]) -> float:
    """Return ``-sum p log2 p`` in bits, treating ``0 log2 0`` as 0."""

    p = np.asarray(probabilities, dtype=float)
    p = p[p > 0.0]
    if p.size == 0:
        return 0.0
    return float(-np.sum(p * np.log2(p)))


def average_length(probabilities: Sequence[float], lengths: Sequence[int]) -> float:
    """Return the expected codeword length ``sum p * L``."""

    if len(probabilities) != len(lengths):
        raise ValueError(
            f"Got {len(probabilities)} probabilities but {len(lengths)} word lengths"
        )
    p = np.asarray(probabilities, dtype=float)
    n = np.asarray(lengths, dtype=float)
    return float(np.dot(p, n))


def compute_redundancy(avg_length: float, source_entropy: float) -> float:
    """Return ``avg_length - source_entropy`` (bits per symbol)."""

    return float(avg_length) - float(source_entropy)


def compute_metrics(alphabet: Alphabet, lengths: Sequence[int]) -> Metrics:
    """Compute entropy, average length, redundancy and Kraft sum.

    Parameters
    ----------
    alphabet:
        Source alphabet; its probabilities are taken in declaration order.
    lengths:
        Word length per symbol, index-aligned with ``alphabet.symbols``.
    """

    h = entropy(alphabet.probabilities)
    avg = average_length(alphabet.probabilities, lengths)
    return Metrics(
        entropy=h,
        avg_length=avg,
        redundancy=compute_redundancy(avg, h),
        kraft_sum=kraft_sum(lengths),
    )


__all__ = [
    "Metrics",
    "average_length",
    "compute_metrics",
    "compute_redundancy",
    "entropy",
]
