"""Shannon-Fano-Elias code construction and token-level encoding/decoding.

Public API:
- CodeTable
- build_code
- encode, decode
- encode_with_table, decode_with_table
"""

from __future__ import annotations

from sfecoder.coding.builder import (
    CodeTable,
    build_code,
    check_kraft,
    cumulative_probabilities,
    kraft_sum,
    midpoint_probabilities,
    to_binary_fraction,
    word_lengths,
)
from sfecoder.coding.codec import (
    decode,
    decode_with_table,
    encode,
    encode_with_table,
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
    "encode",
    "decode",
    "encode_with_table",
    "decode_with_table",
]
