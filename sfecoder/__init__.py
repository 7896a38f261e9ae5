"""
sfecoder: Shannon-Fano-Elias prefix codes for small symbol alphabets.

Builds codewords from symbol probabilities, encodes symbol sequences into
codewords, decodes codewords back into symbols, and reports average length,
redundancy and the Kraft sum.
"""

__all__ = [
    "Alphabet",
    "Config",
    "get_config",
    "__version__",
    # Errors
    "CodecError",
    # Coding (lazy-imported via __getattr__)
    "CodeTable",
    "build_code",
    "encode",
    "decode",
    # Metrics (lazy-imported via __getattr__)
    "Metrics",
    "compute_metrics",
    # Session (lazy-imported via __getattr__)
    "CodingResult",
    "run_encode",
    "run_decode",
    "render_report",
]

__version__ = "0.1.0"

from typing import Any

from sfecoder.alphabet import Alphabet
from sfecoder.config import Config, get_config
from sfecoder.errors import CodecError


def __getattr__(name: str) -> Any:  # lazy attribute access to avoid numpy/jinja2 at import time
    if name in {"CodeTable", "build_code"}:
        from sfecoder.coding import builder as _b

        return getattr(_b, name)
    if name in {"encode", "decode"}:
        from sfecoder.coding import codec as _c

        return getattr(_c, name)
    if name in {"Metrics", "compute_metrics"}:
        from sfecoder import redundancy as _r

        return getattr(_r, name)
    if name in {"CodingResult", "run_encode", "run_decode"}:
        from sfecoder import session as _s

        return getattr(_s, name)
    if name == "render_report":
        from sfecoder.report import render_report as _rr

        return _rr
    raise AttributeError(f"module 'sfecoder' has no attribute {name!r}")
