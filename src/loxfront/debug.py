"""AST and token dumps for --debug and the inspection CLI."""

from __future__ import annotations

import sys
from typing import TextIO

from loxfront.ast import Binary, Bool, Expr, Grouping, Nil, Number, String, Unary, Variable
from loxfront.tokens import SYMBOLS, Token


def format_number(value: float) -> str:
    """Render a number literal the way Lox prints it: integral values drop '.0'."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_sexpr(expr: Expr) -> str:
    """Render an expression in parenthesized prefix form, e.g. (+ 1 (* 2 3))."""
    if isinstance(expr, Binary):
        op = SYMBOLS[expr.operator]
        return f"({op} {to_sexpr(expr.left)} {to_sexpr(expr.right)})"
    if isinstance(expr, Unary):
        return f"({SYMBOLS[expr.operator]} {to_sexpr(expr.operand)})"
    if isinstance(expr, Grouping):
        return f"(group {to_sexpr(expr.inner)})"
    return _literal_text(expr)


def _literal_text(expr: Expr) -> str:
    if isinstance(expr, Number):
        return format_number(expr.value)
    if isinstance(expr, String):
        return f'"{expr.value}"'
    if isinstance(expr, Bool):
        return "true" if expr.value else "false"
    if isinstance(expr, Nil):
        return "nil"
    if isinstance(expr, Variable):
        return expr.name
    raise TypeError(f"not an expression node: {type(expr).__name__}")


def dump_ast(exprs: list[Expr], *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    for expr in exprs:
        _dump_expr(expr, 0, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_expr(expr: Expr, depth: int, f: TextIO) -> None:
    if isinstance(expr, Binary):
        f.write(f"{_indent(depth)}Binary {SYMBOLS[expr.operator]}\n")
        _dump_expr(expr.left, depth + 1, f)
        _dump_expr(expr.right, depth + 1, f)
    elif isinstance(expr, Unary):
        f.write(f"{_indent(depth)}Unary {SYMBOLS[expr.operator]}\n")
        _dump_expr(expr.operand, depth + 1, f)
    elif isinstance(expr, Grouping):
        f.write(f"{_indent(depth)}Grouping\n")
        _dump_expr(expr.inner, depth + 1, f)
    elif isinstance(expr, Nil):
        f.write(f"{_indent(depth)}Nil\n")
    elif isinstance(expr, Variable):
        f.write(f"{_indent(depth)}Variable({expr.name})\n")
    else:
        f.write(f"{_indent(depth)}{type(expr).__name__}({_literal_text(expr)})\n")


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one row per token: line, type, lexeme, and literal if any."""
    for tok in tokens:
        file.write(f"{tok.line:>4} {tok}\n")
