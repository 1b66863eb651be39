"""Lox expression parser: converts a token stream into an AST."""

from __future__ import annotations

from loxfront.ast import Binary, Bool, Expr, Grouping, Nil, Number, String, Unary, Variable
from loxfront.errors import (
    ExpectedTokenError,
    NestingTooDeepError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from loxfront.scanner import scan
from loxfront.tokens import Token, TokenType

# Each level of grouping or prefix operator costs up to seven Python frames
MAX_NESTING = 100


class Parser:
    """Recursive descent parser for Lox expression token streams.

    One method per precedence level, loosest first. Each binary level parses
    an operand at the next tighter level, then folds any following operators
    of its own level to the left.
    """

    def __init__(
        self, tokens: list[Token], source: str = "", filename: str = "<input>"
    ) -> None:
        if not tokens or tokens[-1].type != TokenType.EOF:
            line = tokens[-1].line if tokens else 1
            tokens = [*tokens, Token(TokenType.EOF, "", None, line)]
        self._tokens = tokens
        self._source = source
        self._filename = filename
        self._pos = 0
        self._depth = 0

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _at(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _at_eof(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        if tok.type != TokenType.EOF:
            self._pos += 1
        return tok

    def _expect(self, tt: TokenType, expected: str) -> Token:
        tok = self._peek()
        if tok.type != tt:
            raise ExpectedTokenError(expected, tok, self._source, self._filename)
        return self._advance()

    def _enter(self, tok: Token) -> None:
        self._depth += 1
        if self._depth > MAX_NESTING:
            raise NestingTooDeepError(tok, MAX_NESTING, self._source, self._filename)

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------

    def parse(self) -> list[Expr]:
        """Parse expressions until EOF and return them in source order."""
        exprs: list[Expr] = []
        while not self._at_eof():
            exprs.append(self.parse_expression())
        return exprs

    def parse_expression(self) -> Expr:
        """Parse one expression starting at the current token."""
        return self._equality()

    def parse_single(self) -> Expr:
        """Parse one expression that must span the whole token list."""
        expr = self.parse_expression()
        if not self._at_eof():
            raise UnexpectedTokenError(self._peek(), self._source, self._filename)
        return expr

    # ------------------------------------------------------------------
    # Binary levels
    # ------------------------------------------------------------------

    def _equality(self) -> Expr:
        expr = self._comparison()
        while self._at(*_EQUALITY_OPS):
            op = self._advance().type
            expr = Binary(expr, op, self._comparison())
        return expr

    def _comparison(self) -> Expr:
        expr = self._term()
        while self._at(*_COMPARISON_OPS):
            op = self._advance().type
            expr = Binary(expr, op, self._term())
        return expr

    def _term(self) -> Expr:
        expr = self._factor()
        while self._at(*_TERM_OPS):
            op = self._advance().type
            expr = Binary(expr, op, self._factor())
        return expr

    def _factor(self) -> Expr:
        expr = self._unary()
        while self._at(*_FACTOR_OPS):
            op = self._advance().type
            expr = Binary(expr, op, self._unary())
        return expr

    # ------------------------------------------------------------------
    # Unary and primary
    # ------------------------------------------------------------------

    def _unary(self) -> Expr:
        if self._at(*_UNARY_OPS):
            op = self._advance()
            self._enter(op)
            operand = self._unary()
            self._depth -= 1
            return Unary(op.type, operand)
        return self._primary()

    def _primary(self) -> Expr:
        tok = self._peek()

        if tok.type == TokenType.NUMBER:
            if not isinstance(tok.literal, (int, float)):
                raise UnexpectedTokenError(tok, self._source, self._filename)
            self._advance()
            return Number(float(tok.literal))

        if tok.type == TokenType.STRING:
            self._advance()
            return String(tok.lexeme)

        if tok.type == TokenType.TRUE:
            self._advance()
            return Bool(True)

        if tok.type == TokenType.FALSE:
            self._advance()
            return Bool(False)

        if tok.type == TokenType.NIL:
            self._advance()
            return Nil()

        if tok.type == TokenType.IDENTIFIER:
            self._advance()
            return Variable(tok.lexeme)

        if tok.type == TokenType.LEFT_PAREN:
            self._enter(self._advance())
            inner = self.parse_expression()
            self._expect(TokenType.RIGHT_PAREN, ")")
            self._depth -= 1
            return Grouping(inner)

        if tok.type == TokenType.EOF:
            raise UnexpectedEndError(tok.line, self._source, self._filename)

        raise UnexpectedTokenError(tok, self._source, self._filename)


# Operators per precedence level
_EQUALITY_OPS: tuple[TokenType, ...] = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
_COMPARISON_OPS: tuple[TokenType, ...] = (
    TokenType.LESS,
    TokenType.LESS_EQUAL,
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
)
_TERM_OPS: tuple[TokenType, ...] = (TokenType.MINUS, TokenType.PLUS)
_FACTOR_OPS: tuple[TokenType, ...] = (TokenType.SLASH, TokenType.STAR)
_UNARY_OPS: tuple[TokenType, ...] = (TokenType.BANG, TokenType.MINUS)


def parse(tokens: list[Token], source: str = "", filename: str = "<input>") -> list[Expr]:
    """Parse a token list into a list of top-level expressions.

    source is used only to show context in error messages.
    """
    return Parser(tokens, source, filename).parse()


def parse_expression(
    tokens: list[Token], source: str = "", filename: str = "<input>"
) -> Expr:
    """Parse exactly one expression; any token after it is an error."""
    return Parser(tokens, source, filename).parse_single()


def parse_source(source: str, filename: str = "<input>") -> list[Expr]:
    """Convenience function: scan and parse source text.

    Raises LexError or ParseError on the first failure.
    """
    tokens = scan(source, filename)
    return Parser(tokens, source, filename).parse()
