"""Token types, token records, keyword table, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


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
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()  # lexeme is the content between the quotes
    NUMBER = auto()  # lexeme is the source spelling, literal the float

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


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

# Operator spellings, used when rendering tokens and AST nodes
SYMBOLS: dict[TokenType, str] = {
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACE: "{",
    TokenType.RIGHT_BRACE: "}",
    TokenType.COMMA: ",",
    TokenType.DOT: ".",
    TokenType.MINUS: "-",
    TokenType.PLUS: "+",
    TokenType.SEMICOLON: ";",
    TokenType.SLASH: "/",
    TokenType.STAR: "*",
    TokenType.EQUAL: "=",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.BANG: "!",
    TokenType.BANG_EQUAL: "!=",
    TokenType.LESS: "<",
    TokenType.LESS_EQUAL: "<=",
    TokenType.GREATER: ">",
    TokenType.GREATER_EQUAL: ">=",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token: kind, source spelling, converted value, and line."""

    type: TokenType
    lexeme: str
    literal: float | str | None
    line: int

    @classmethod
    def from_number(cls, lexeme: str, line: int) -> Token:
        return cls(TokenType.NUMBER, lexeme, float(lexeme), line)

    @classmethod
    def from_string(cls, content: str, line: int) -> Token:
        return cls(TokenType.STRING, content, content, line)

    @classmethod
    def from_identifier_or_keyword(cls, lexeme: str, line: int) -> Token:
        return cls(keyword_type(lexeme), lexeme, None, line)

    def __str__(self) -> str:
        literal = "" if self.literal is None else f" {self.literal!r}"
        return f"{self.type.name} {self.lexeme!r}{literal}"


def keyword_type(lexeme: str) -> TokenType:
    """Return the keyword type spelled by lexeme, or IDENTIFIER."""
    return KEYWORDS.get(lexeme, TokenType.IDENTIFIER)


def describe(token: Token) -> str:
    """Human-readable name of a token for error messages."""
    if token.type == TokenType.EOF:
        return "end of input"
    if token.type == TokenType.STRING:
        return f'string "{token.lexeme}"'
    if token.type == TokenType.NUMBER:
        return f"number {token.lexeme}"
    if token.type == TokenType.IDENTIFIER:
        return f"identifier '{token.lexeme}'"
    return f"'{token.lexeme}'"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True if ch may start an identifier (ASCII letter or underscore)."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_alnum(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_alpha(ch) or is_digit(ch)
