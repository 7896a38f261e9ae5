"""Token-level encoding and decoding against a Shannon-Fano-Elias table.

Both directions work on already tokenized input: encoding maps each symbol to
the codeword at the same position, decoding requires each token to equal a
codeword exactly. There is no bitstream parsing and no prefix matching.

The first unknown token aborts the whole call; nothing is returned for the
tokens that were mapped before it.
"""

from __future__ import annotations

from typing import Iterable
import logging

from sfecoder.alphabet import Alphabet
from sfecoder.coding.builder import CodeTable, build_code
from sfecoder.errors import UnknownCodeError, UnknownSymbolError


_LOGGER = logging.getLogger(__name__)


def encode_with_table(table: CodeTable, tokens: Iterable[str]) -> list[str]:
    """Map symbols to codewords using a prebuilt ``table``."""

    index_map = {sym: i for i, sym in enumerate(table.symbols)}
    out: list[str] = []
    for token in tokens:
        idx = index_map.get(token)
        if idx is None:
            raise UnknownSymbolError(token)
        out.append(table.codewords[idx])
    return out


def decode_with_table(table: CodeTable, tokens: Iterable[str]) -> list[str]:
    """Map codewords back to symbols using a prebuilt ``table``."""

    code_map = {code: i for i, code in enumerate(table.codewords)}
    out: list[str] = []
    for token in tokens:
        idx = code_map.get(token)
        if idx is None:
            raise UnknownCodeError(token)
        out.append(table.symbols[idx])
    return out


def encode(alphabet: Alphabet, tokens: Iterable[str]) -> list[str]:
    """Encode ``tokens`` (symbols) into codewords for ``alphabet``.

    Raises
    ------
    UnknownSymbolError
        On the first token that is not an alphabet symbol.
    KraftViolation, ZeroProbabilityError
        If the code table cannot be built.
    """

    table = build_code(alphabet)
    out = encode_with_table(table, tokens)
    _LOGGER.debug("Encoded %d tokens", len(out))
    return out


def decode(alphabet: Alphabet, tokens: Iterable[str]) -> list[str]:
    """Decode ``tokens`` (whole codewords) into symbols for ``alphabet``.

    Raises
    ------
    UnknownCodeError
        On the first token that does not exactly equal a codeword.
    KraftViolation, ZeroProbabilityError
        If the code table cannot be built.
    """

    table = build_code(alphabet)
    out = decode_with_table(table, tokens)
    _LOGGER.debug("Decoded %d tokens", len(out))
    return out


__all__ = ["encode", "decode", "encode_with_table", "decode_with_table"]
