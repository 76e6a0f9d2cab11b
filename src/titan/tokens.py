"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

import json
import math
import struct
from dataclasses import dataclass
from enum import Enum, auto


class TokenCategory(Enum):
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    LITERAL = "Literal"
    SEPARATOR = "Separator"
    OPERATION = "Operation"


class TokenType(Enum):
    # Keywords
    FUNC = auto()
    IF = auto()
    WHILE = auto()
    FOR = auto()
    VAR = auto()

    # Operations
    PLUS = auto()  # +
    MINUS = auto()  # -
    DIVIDE = auto()  # /
    MULTIPLY = auto()  # *
    MOD = auto()  # %
    POWER = auto()  # never emitted: '*' always scans as MULTIPLY
    PLUS_PLUS = auto()  # ++
    MINUS_MINUS = auto()  # --
    EQUALS = auto()  # =
    EQUALS_EQUALS = auto()  # ==
    LESS_THAN = auto()  # <
    MORE_THAN = auto()  # >
    LESS_THAN_EQUALS = auto()  # <=
    MORE_THAN_EQUALS = auto()  # >=
    PLUS_EQUALS = auto()  # +=
    MINUS_EQUALS = auto()  # -=
    DIVIDE_EQUALS = auto()  # /=
    MULTIPLY_EQUALS = auto()  # *=

    # Separators
    COMMA = auto()  # ,
    COLON = auto()  # :
    OPENING_BRACKET = auto()  # (
    CLOSING_BRACKET = auto()  # )
    OPENING_SQUARE_BRACKET = auto()  # [
    CLOSING_SQUARE_BRACKET = auto()  # ]
    TAB = auto()  # \t

    # Identifier: value is the word
    IDENTIFIER = auto()

    # Literals: value is the parsed number or the text between delimiters
    INT_NUMBER = auto()
    DECIMAL_NUMBER = auto()
    CHAR = auto()
    STRING = auto()

    @property
    def tag(self) -> str:
        """CamelCase kind name, e.g. ``PlusEquals``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


KEYWORDS: dict[str, TokenType] = {
    "func": TokenType.FUNC,
    "if": TokenType.IF,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "var": TokenType.VAR,
}

_KEYWORD_TYPES = frozenset(KEYWORDS.values())

_SEPARATOR_TYPES = frozenset(
    {
        TokenType.COMMA,
        TokenType.COLON,
        TokenType.OPENING_BRACKET,
        TokenType.CLOSING_BRACKET,
        TokenType.OPENING_SQUARE_BRACKET,
        TokenType.CLOSING_SQUARE_BRACKET,
        TokenType.TAB,
    }
)


def _category_for(tt: TokenType) -> TokenCategory:
    if tt in _KEYWORD_TYPES:
        return TokenCategory.KEYWORD
    if tt in _SEPARATOR_TYPES:
        return TokenCategory.SEPARATOR
    if tt is TokenType.IDENTIFIER:
        return TokenCategory.IDENTIFIER
    if tt in (TokenType.INT_NUMBER, TokenType.DECIMAL_NUMBER):
        return TokenCategory.NUMBER
    if tt in (TokenType.CHAR, TokenType.STRING):
        return TokenCategory.LITERAL
    return TokenCategory.OPERATION


CATEGORIES: dict[TokenType, TokenCategory] = {tt: _category_for(tt) for tt in TokenType}


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source range, as 0-based character offsets."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanner token.

    ``value`` holds the payload for identifiers, numbers, chars and strings,
    and is None for every other type. ``category`` always equals
    ``CATEGORIES[type]``.
    """

    type: TokenType
    category: TokenCategory
    value: str | int | float | None
    span: Span

    @property
    def kind(self) -> str:
        """Kind tag with payload, e.g. ``Identifier("x")`` or ``IntNumber(-42)``."""
        if self.value is None:
            return self.type.tag
        if isinstance(self.value, str):
            return f"{self.type.tag}({json.dumps(self.value, ensure_ascii=False)})"
        if isinstance(self.value, float):
            return f"{self.type.tag}({format_single(self.value)})"
        return f"{self.type.tag}({self.value})"


def make_token(
    tt: TokenType, start: int, length: int, value: str | int | float | None = None
) -> Token:
    """Build a token of type *tt* covering ``length`` characters from *start*."""
    return Token(tt, CATEGORIES[tt], value, Span(start, start + length))


def is_word_char(ch: str | None) -> bool:
    """Return True if ch may appear in a keyword or identifier (a-z and _)."""
    return ch is not None and ("a" <= ch <= "z" or ch == "_")


def is_digit(ch: str | None) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch is not None and "0" <= ch <= "9"


INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def to_single(value: float) -> float:
    """Round a float to IEEE-754 single precision.

    Magnitudes beyond the single-precision range become signed infinity.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


# Magnitudes printed positionally; outside this range exponent form is used
_POSITIONAL_MIN = to_single(1e-4)
_POSITIONAL_MAX = to_single(1e16)


def format_single(value: float) -> str:
    """Shortest decimal text that reads back as the same single-precision value.

    Values with magnitude in [1e-4, 1e16) are written positionally with at
    least one fractional digit (``-1000000.0``), others in exponent form
    (``1e-5``, ``3.4028235e38``).
    """
    if math.isinf(value) or math.isnan(value):
        return repr(value)
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return f"{sign}0.0"

    for precision in range(1, 10):
        text = f"{abs(value):.{precision - 1}e}"
        if to_single(float(sign + text)) == value:
            break
    mantissa, _, exp_text = text.partition("e")
    digits = mantissa.replace(".", "")
    exponent = int(exp_text)

    if not _POSITIONAL_MIN <= abs(value) < _POSITIONAL_MAX:
        fraction = f".{digits[1:]}" if len(digits) > 1 else ""
        return f"{sign}{digits[0]}{fraction}e{exponent}"
    if exponent < 0:
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
    whole = digits[: exponent + 1].ljust(exponent + 1, "0")
    fraction = digits[exponent + 1 :] or "0"
    return f"{sign}{whole}.{fraction}"
