"""Titan language scanner."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from titan.tokens import Token

__version__ = "0.1.0"


def scan(source: str, filename: str = "input.titan") -> list[Token]:
    """Scan Titan source text into a list of tokens."""
    from titan.scanner import tokenize

    return tokenize(source, filename)
