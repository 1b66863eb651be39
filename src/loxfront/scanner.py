"""Lox scanner: converts source text into a flat token stream."""

from __future__ import annotations

from loxfront.errors import UnexpectedCharError, UnterminatedStringError
from loxfront.tokens import Token, TokenType, is_alnum, is_alpha, is_digit

_SINGLE: dict[str, TokenType] = {
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

# char -> (type alone, type when followed by '=')
_COMPOUND: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


class Scanner:
    """Tokenize Lox source text into a list of Token objects."""

    def __init__(self, source: str, filename: str = "<input>") -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """Scan the full source and return the token list, ending with EOF."""
        while self._pos < len(self._source):
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _emit(self, tt: TokenType, lexeme: str) -> None:
        self._tokens.append(Token(tt, lexeme, None, self._line))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._peek()

        if ch.isspace():  # newlines advance the line counter in _advance
            self._advance()
            return

        if ch in _SINGLE:
            self._advance()
            self._emit(_SINGLE[ch], ch)
            return

        if ch in _COMPOUND:
            alone, with_equal = _COMPOUND[ch]
            self._advance()
            if self._peek() == "=":
                self._advance()
                self._emit(with_equal, ch + "=")
            else:
                self._emit(alone, ch)
            return

        if ch == "/":
            if self._peek(1) == "/":
                self._skip_comment()
            else:
                self._advance()
                self._emit(TokenType.SLASH, "/")
            return

        if ch == '"':
            self._scan_string()
            return

        if is_digit(ch):
            self._scan_number()
            return

        if is_alpha(ch):
            self._scan_identifier()
            return

        raise UnexpectedCharError(ch, self._line, self._col, self._source, self._filename)

    # ------------------------------------------------------------------
    # Token families
    # ------------------------------------------------------------------

    def _skip_comment(self) -> None:
        # Stop before the newline so the line counter sees it
        while self._pos < len(self._source) and self._peek() != "\n":
            self._advance()

    def _scan_string(self) -> None:
        line, col = self._line, self._col
        self._advance()  # opening quote
        start = self._pos

        while self._pos < len(self._source) and self._peek() != '"':
            self._advance()

        if self._pos >= len(self._source):
            raise UnterminatedStringError(line, col, self._source, self._filename)

        content = self._source[start : self._pos]
        self._advance()  # closing quote
        self._tokens.append(Token.from_string(content, line))

    def _scan_number(self) -> None:
        start = self._pos
        while is_digit(self._peek()):
            self._advance()

        # A trailing '.' without digits belongs to the next token
        if self._peek() == "." and is_digit(self._peek(1)):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._tokens.append(Token.from_number(self._source[start : self._pos], self._line))

    def _scan_identifier(self) -> None:
        start = self._pos
        while is_alnum(self._peek()):
            self._advance()
        lexeme = self._source[start : self._pos]
        self._tokens.append(Token.from_identifier_or_keyword(lexeme, self._line))


def scan(source: str, filename: str = "<input>") -> list[Token]:
    """Convenience function: scan source text and return the token list.

    Raises LexError (UnexpectedCharError or UnterminatedStringError) on the
    first malformed character; no partial token list is returned.
    """
    return Scanner(source, filename).scan()
