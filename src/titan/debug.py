"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from titan.tokens import Token


def dump_tokens(tokens: list[Token], source: str, *, file: TextIO | None = None) -> None:
    """Print one line per token: span, category, kind and the lexeme it came from."""
    if file is None:
        file = sys.stderr
    file.write(f"Tokens ({len(tokens)})\n")
    width = len(str(len(source)))
    for tok in tokens:
        span = f"{tok.span.start:>{width}}..{tok.span.end:<{width}}"
        lexeme = source[tok.span.start : tok.span.end]
        file.write(f"  {span} {tok.category.value:<10} {tok.kind}  {lexeme!r}\n")
