"""Lox scanner: converts source text into a flat token stream."""

from __future__ import annotations

from lox.errors import ErrorKind, ErrorReporter
from lox.tokens import KEYWORDS, LiteralValue, Token, TokenType, is_alpha, is_alphanumeric, is_digit

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first char -> (type without "=", type with "=")
_ONE_OR_TWO_CHAR = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


class Scanner:
    """Tokenize Lox source text into a list of Token objects.

    Scanning stops at the first reported error: the tokens collected so far
    are returned without an EOF token. Instances are single-use.
    """

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self._source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._line_start = 0  # offset of the first character on the current line
        self._failed = False
        self._used = False

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list."""
        if self._used:
            raise RuntimeError("Scanner instances are single-use")
        self._used = True

        while not self._is_at_end():
            self._start = self._current
            self._scan_token()
            if self._failed:
                return self._tokens

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        if ch == "\n":
            self._line += 1
            self._line_start = self._current
        return ch

    def _peek(self) -> str:
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    def _add_token(self, tt: TokenType, literal: LiteralValue = None) -> None:
        text = self._source[self._start : self._current]
        self._tokens.append(Token(tt, text, literal, self._line))

    def _error(self, kind: ErrorKind, message: str, offset: int | None = None) -> None:
        if offset is None:
            offset = self._current
        column = offset - self._line_start + 1
        self.reporter.error(kind, self._line, column, message)
        self._failed = True

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        if ch in _SINGLE_CHAR:
            self._add_token(_SINGLE_CHAR[ch])
            return

        if ch in _ONE_OR_TWO_CHAR:
            short, long = _ONE_OR_TWO_CHAR[ch]
            self._add_token(long if self._match("=") else short)
            return

        if ch == "/":
            if self._match("/"):
                self._line_comment()
            elif self._match("*"):
                self._block_comment()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch in " \t\r\n":
            # _advance already counted the newline
            return

        if ch == '"':
            self._string()
            return

        if is_digit(ch):
            self._number()
            return

        if is_alpha(ch):
            self._identifier()
            return

        self._error(ErrorKind.UNEXPECTED_CHARACTER, f"Unexpected character '{ch}'", self._start)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _line_comment(self) -> None:
        # The newline is left for the main loop so it still counts.
        while not self._is_at_end() and self._peek() != "\n":
            self._advance()

    def _block_comment(self) -> None:
        depth = 1
        while not self._is_at_end():
            if self._peek() == "*" and self._peek_next() == "/":
                self._advance()
                self._advance()
                depth -= 1
                if depth == 0:
                    return
            elif self._peek() == "/" and self._peek_next() == "*":
                self._advance()
                self._advance()
                depth += 1
            else:
                self._advance()
        self._error(ErrorKind.UNTERMINATED_BLOCK_COMMENT, "Multiline comment doesn't terminate properly")

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self) -> None:
        while not self._is_at_end() and self._peek() != '"':
            self._advance()

        if self._is_at_end():
            self._error(ErrorKind.UNTERMINATED_STRING, "Unexpected end of string")
            return

        # Closing quote
        self._advance()
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A trailing "." with no digit after it belongs to the next token.
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._source[self._start : self._current]))

    def _identifier(self) -> None:
        while is_alphanumeric(self._peek()):
            self._advance()
        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def tokenize(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Convenience function: scan source and return tokens."""
    return Scanner(source, reporter).scan_tokens()
