"""Exception hierarchy for alphabet loading, code construction and lookups.

All domain errors derive from :class:`CodecError`, itself a ``ValueError`` so
callers that only care about "bad input" can catch the built-in type. File
system failures are never wrapped: they surface as the usual ``OSError``
subclasses.

Hierarchy
---------
- CodecError
  - AlphabetError: FormatError, InvalidSymbolError, DuplicateSymbolError,
    InvalidProbabilityError, ProbabilityRangeError, ProbabilitySumError
  - SequenceError: InvalidTokenError, EmptySequenceError
  - CodeConstructionError: KraftViolation, ZeroProbabilityError
  - LookupFailure: UnknownSymbolError, UnknownCodeError
"""

from __future__ import annotations


class CodecError(ValueError):
    """Base class for every error raised by sfecoder."""


# Input validation -------------------------------------------------------------
class AlphabetError(CodecError):
    """The alphabet file or pairs violate an alphabet invariant."""


class FormatError(AlphabetError):
    def __init__(self, line: str, lineno: int | None = None) -> None:
        self.line = line
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"Invalid alphabet line{where}: {line!r}; expected '<symbol> <probability>'")


class InvalidSymbolError(AlphabetError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Invalid symbol: {symbol!r}")


class DuplicateSymbolError(AlphabetError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} occurs more than once in the alphabet")


class InvalidProbabilityError(AlphabetError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid probability: {value!r}")


class ProbabilityRangeError(AlphabetError):
    def __init__(self, symbol: str, probability: float) -> None:
        self.symbol = symbol
        self.probability = probability
        super().__init__(
            f"Probability of symbol {symbol!r} must be in [0, 1], got {probability}"
        )


class ProbabilitySumError(AlphabetError):
    def __init__(self, total: float) -> None:
        self.total = total
        super().__init__(f"Probabilities must sum to 1 (got {total})")


class SequenceError(CodecError):
    """The sequence file holds no usable tokens or an invalid one."""


class InvalidTokenError(SequenceError):
    def __init__(self, token: str, source: str | None = None) -> None:
        self.token = token
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Invalid symbol or code {token!r}{where}")


class EmptySequenceError(SequenceError):
    def __init__(self, source: str | None = None) -> None:
        self.source = source
        what = source if source else "Sequence"
        super().__init__(f"{what} is empty or contains no valid tokens")


# Code construction ------------------------------------------------------------
class CodeConstructionError(CodecError):
    """Codewords cannot be derived from the alphabet."""


class KraftViolation(CodeConstructionError):
    def __init__(self, kraft_sum: float) -> None:
        self.kraft_sum = kraft_sum
        super().__init__(f"Kraft inequality violated: {kraft_sum} > 1; cannot build a prefix code")


class ZeroProbabilityError(CodeConstructionError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} has zero or underflowing probability and no finite codeword length")


# Lookups ----------------------------------------------------------------------
class LookupFailure(CodecError):
    """A token has no counterpart in the code table."""


class UnknownSymbolError(LookupFailure):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Symbol {token!r} not found in the alphabet")


class UnknownCodeError(LookupFailure):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Code {token!r} not found in the code table")


__all__ = [
    "CodecError",
    "AlphabetError",
    "FormatError",
    "InvalidSymbolError",
    "DuplicateSymbolError",
    "InvalidProbabilityError",
    "ProbabilityRangeError",
    "ProbabilitySumError",
    "SequenceError",
    "InvalidTokenError",
    "EmptySequenceError",
    "CodeConstructionError",
    "KraftViolation",
    "ZeroProbabilityError",
    "LookupFailure",
    "UnknownSymbolError",
    "UnknownCodeError",
]
