"""AST node types for parsed Lox expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from loxfront.tokens import TokenType


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric literal."""

    value: float


@dataclass(frozen=True, slots=True)
class String:
    """String literal, quotes excluded."""

    value: str


@dataclass(frozen=True, slots=True)
class Bool:
    """The literal keywords true and false."""

    value: bool


@dataclass(frozen=True, slots=True)
class Nil:
    """The literal keyword nil."""


@dataclass(frozen=True, slots=True)
class Variable:
    """A bare identifier in operand position."""

    name: str


@dataclass(frozen=True, slots=True)
class Unary:
    """Prefix operator application: !operand or -operand."""

    operator: TokenType
    operand: Expr


@dataclass(frozen=True, slots=True)
class Binary:
    """Infix operator application."""

    left: Expr
    operator: TokenType
    right: Expr


@dataclass(frozen=True, slots=True)
class Grouping:
    """Parenthesized expression."""

    inner: Expr


Literal = Union[Number, String, Bool, Nil, Variable]
Expr = Union[Number, String, Bool, Nil, Variable, Unary, Binary, Grouping]
