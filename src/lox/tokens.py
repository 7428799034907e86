"""Token types, the keyword table, and character classification helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

LiteralValue = float | str | bool | None


class TokenType(Enum):
    # Single-character
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two characters
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()  # value is the text between the quotes
    NUMBER = auto()  # value is a float

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


# fmt: off
KEYWORDS: dict[str, TokenType] = {
    "and":    TokenType.AND,
    "class":  TokenType.CLASS,
    "else":   TokenType.ELSE,
    "false":  TokenType.FALSE,
    "for":    TokenType.FOR,
    "fun":    TokenType.FUN,
    "if":     TokenType.IF,
    "nil":    TokenType.NIL,
    "or":     TokenType.OR,
    "print":  TokenType.PRINT,
    "return": TokenType.RETURN,
    "super":  TokenType.SUPER,
    "this":   TokenType.THIS,
    "true":   TokenType.TRUE,
    "var":    TokenType.VAR,
    "while":  TokenType.WHILE,
}
# fmt: on


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme with its literal value and 1-based source line."""

    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __str__(self) -> str:
        if self.literal is None:
            literal = "null"
        elif isinstance(self.literal, float):
            literal = format_number(self.literal)
        else:
            literal = self.literal
        return f"{self.type.name} {self.lexeme} {literal}"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True if ch may start an identifier (ASCII letter or underscore)."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_alphanumeric(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_alpha(ch) or is_digit(ch)


def format_number(value: float) -> str:
    """Render a float the way the JVM's ``Double.toString`` does.

    Magnitudes in [1e-3, 1e7) use plain decimal notation with at least one
    fractional digit (``123.0``, ``45.67``); everything else uses
    ``<digit>.<digits>E<exp>`` (``1.0E16``, ``1.5E-5``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"
    if 1e-3 <= abs(value) < 1e7:
        return repr(value)

    # repr gives the shortest round-tripping digits
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    digit_text = "".join(map(str, digits)).rstrip("0") or "0"
    sci_exponent = len(digits) - 1 + exponent
    mantissa = digit_text[0] + "." + (digit_text[1:] or "0")
    return f"{'-' if sign else ''}{mantissa}E{sci_exponent}"
