"""Centralized configuration for the Shannon-Fano-Elias codec.

Defines immutable defaults for the symbol set, numeric tolerances, report
formatting and file handling so that every entry point (library, CLI, tests)
agrees on the same constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Alphabet
    ALLOWED_SYMBOLS: str = "+-*/="
    PROBABILITY_TOLERANCE: float = 1e-9

    # Codeword tokens
    CODE_CHARS: str = "01"

    # Report formatting
    REPORT_PRECISION: int = 4
    OUTPUT_SEPARATOR: str = " "
    TEMPLATE_NAME: str = "report.txt.jinja"

    # Files
    FILE_ENCODING: str = "utf-8"


# Convenience re-exports and constants
ALLOWED_SYMBOLS: str = Config.ALLOWED_SYMBOLS
PROBABILITY_TOLERANCE: float = Config.PROBABILITY_TOLERANCE
SUPPORTED_MODES: list[str] = ["encode", "decode"]


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
