"""Titan scanner — converts source text into a flat token stream.

Each sub-scanner is a pure function from ``(buffer, position)`` to
``(token, consumed)``. Only ``scan_token`` touches the ScanContext, and only
through ``add_token`` when a lexeme is recognized.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from titan.errors import MalformedNumberError, UnterminatedLiteralError
from titan.tokens import (
    INT32_MAX,
    INT32_MIN,
    KEYWORDS,
    Token,
    TokenType,
    is_digit,
    is_word_char,
    make_token,
    to_single,
)

_SEPARATORS: dict[str, TokenType] = {
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    "(": TokenType.OPENING_BRACKET,
    ")": TokenType.CLOSING_BRACKET,
    "[": TokenType.OPENING_SQUARE_BRACKET,
    "]": TokenType.CLOSING_SQUARE_BRACKET,
    "\t": TokenType.TAB,
}

# operator char -> (single-char type, {next char: two-char type})
_OPERATORS: dict[str, tuple[TokenType, dict[str, TokenType]]] = {
    "+": (TokenType.PLUS, {"+": TokenType.PLUS_PLUS, "=": TokenType.PLUS_EQUALS}),
    "-": (TokenType.MINUS, {"-": TokenType.MINUS_MINUS, "=": TokenType.MINUS_EQUALS}),
    "*": (TokenType.MULTIPLY, {"=": TokenType.MULTIPLY_EQUALS}),
    "/": (TokenType.DIVIDE, {"=": TokenType.DIVIDE_EQUALS}),
    "%": (TokenType.MOD, {}),
    "=": (TokenType.EQUALS, {"=": TokenType.EQUALS_EQUALS}),
    ">": (TokenType.MORE_THAN, {"=": TokenType.MORE_THAN_EQUALS}),
    "<": (TokenType.LESS_THAN, {"=": TokenType.LESS_THAN_EQUALS}),
}

_QUOTED: dict[str, TokenType] = {
    '"': TokenType.STRING,
    "'": TokenType.CHAR,
}


@dataclass
class ScanContext:
    """Mutable state for one scan pass over one source buffer."""

    buffer: str
    source_name: str = "input.titan"
    cursor: int = 0
    tokens: list[Token] = field(default_factory=list)
    end: int = field(init=False)

    def __post_init__(self) -> None:
        self.end = len(self.buffer)

    def char_at(self, index: int) -> str | None:
        return char_at(self.buffer, index)


# ------------------------------------------------------------------
# Character access
# ------------------------------------------------------------------


def char_at(buffer: str, index: int) -> str | None:
    """Return the character at *index*, or None past the end of *buffer*."""
    if 0 <= index < len(buffer):
        return buffer[index]
    return None


# ------------------------------------------------------------------
# Sub-scanners
# ------------------------------------------------------------------


def scan_word(buffer: str, position: int) -> tuple[Token, int]:
    """Scan a keyword or identifier made of a-z and _."""
    current = position + 1
    while is_word_char(char_at(buffer, current)):
        current += 1

    word = buffer[position:current]
    length = current - position
    tt = KEYWORDS.get(word)
    if tt is not None:
        return make_token(tt, position, length), length
    return make_token(TokenType.IDENTIFIER, position, length, word), length


def scan_number(buffer: str, position: int) -> tuple[Token, int]:
    """Scan a numeric literal starting at *position* (the leading '-').

    Any run of digits and dots is accepted; a run containing a dot is a
    DECIMAL_NUMBER, otherwise an INT_NUMBER.

    Raises:
        MalformedNumberError: If the run does not parse, or an integer falls
            outside the signed 32-bit range.
    """
    current = position + 1
    is_decimal = False
    while True:
        ch = char_at(buffer, current)
        if ch == ".":
            is_decimal = True
        elif not is_digit(ch):
            break
        current += 1

    text = buffer[position:current]
    length = current - position

    if is_decimal:
        try:
            number = to_single(float(text))
        except ValueError:
            raise MalformedNumberError(text, position, buffer) from None
        return make_token(TokenType.DECIMAL_NUMBER, position, length, number), length

    try:
        value = int(text)
    except ValueError:
        raise MalformedNumberError(text, position, buffer) from None
    if not INT32_MIN <= value <= INT32_MAX:
        raise MalformedNumberError(text, position, buffer)
    return make_token(TokenType.INT_NUMBER, position, length, value), length


def scan_quoted(buffer: str, position: int) -> tuple[Token, int]:
    """Scan a string or char literal delimited by the quote at *position*.

    The value is the raw text between the delimiters; backslashes are not
    interpreted.

    Raises:
        UnterminatedLiteralError: If no matching delimiter follows.
    """
    delimiter = char_at(buffer, position)
    current = position + 1
    while True:
        ch = char_at(buffer, current)
        if ch is None:
            raise UnterminatedLiteralError(delimiter, position, buffer)
        if ch == delimiter:
            break
        current += 1

    text = buffer[position + 1 : current]
    length = current - position + 1
    return make_token(_QUOTED[delimiter], position, length, text), length


def scan_operator(buffer: str, position: int) -> tuple[Token, int]:
    """Scan a one- or two-character operator, longest match first.

    A '-' directly followed by a digit starts a negative number instead.
    """
    ch = char_at(buffer, position)
    single, followers = _OPERATORS[ch]
    nxt = char_at(buffer, position + 1)

    if nxt in followers:
        return make_token(followers[nxt], position, 2), 2
    if ch == "-" and is_digit(nxt):
        return scan_number(buffer, position)
    return make_token(single, position, 1), 1


# ------------------------------------------------------------------
# Dispatch
# ------------------------------------------------------------------


def add_token(context: ScanContext, token: Token, length: int) -> None:
    """Append *token* and advance the cursor past its lexeme."""
    context.tokens.append(token)
    context.cursor += length


def scan_token(context: ScanContext) -> None:
    """Scan one lexeme at the cursor, or skip one unrecognized character."""
    position = context.cursor
    ch = context.char_at(position)

    if is_word_char(ch):
        token, length = scan_word(context.buffer, position)
    elif ch in _SEPARATORS:
        token, length = make_token(_SEPARATORS[ch], position, 1), 1
    elif ch in _QUOTED:
        token, length = scan_quoted(context.buffer, position)
    elif ch in _OPERATORS:
        token, length = scan_operator(context.buffer, position)
    else:
        # Whitespace, newlines, uppercase, bare digits and unknown symbols
        context.cursor += 1
        return

    add_token(context, token, length)


def scan_tokens(context: ScanContext) -> list[Token]:
    """Scan until the cursor reaches the end of the buffer.

    Tokens scanned before a fatal error remain on ``context.tokens``.
    """
    while context.cursor < context.end:
        scan_token(context)
    return context.tokens


def tokenize(source: str, filename: str = "input.titan") -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return scan_tokens(ScanContext(source, filename))
