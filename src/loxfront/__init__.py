"""Lox expression scanner and parser."""

from __future__ import annotations

from loxfront.ast import (
    Binary,
    Bool,
    Expr,
    Grouping,
    Literal,
    Nil,
    Number,
    String,
    Unary,
    Variable,
)
from loxfront.debug import to_sexpr
from loxfront.errors import (
    ExpectedTokenError,
    LexError,
    LoxError,
    NestingTooDeepError,
    ParseError,
    UnexpectedCharError,
    UnexpectedEndError,
    UnexpectedTokenError,
    UnterminatedStringError,
)
from loxfront.parser import Parser, parse, parse_expression, parse_source
from loxfront.scanner import Scanner, scan
from loxfront.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "Binary",
    "Bool",
    "ExpectedTokenError",
    "Expr",
    "Grouping",
    "LexError",
    "Literal",
    "LoxError",
    "NestingTooDeepError",
    "Nil",
    "Number",
    "ParseError",
    "Parser",
    "Scanner",
    "String",
    "Token",
    "TokenType",
    "Unary",
    "UnexpectedCharError",
    "UnexpectedEndError",
    "UnexpectedTokenError",
    "UnterminatedStringError",
    "Variable",
    "parse",
    "parse_expression",
    "parse_source",
    "scan",
    "to_sexpr",
]
