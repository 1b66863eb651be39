"""Error types with formatted source context."""

from __future__ import annotations

from loxfront.tokens import Token, describe


class LoxError(Exception):
    """Base class for scan and parse failures, with line and source context."""

    def __init__(
        self,
        message: str,
        line: int,
        column: int | None = None,
        source: str = "",
        filename: str = "<input>",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        self.filename = filename
        super().__init__(self.format())

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.splitlines()
        line_idx = self.line - 1

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        location = f"{filename}:{self.line}"
        if self.column is not None:
            location += f":{self.column}"

        result = (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {location}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}"
        )
        if self.column is not None:
            pad = " " * (self.column - 1)
            result += f"\n{blank_gutter} {pad}^"
        return result


class LexError(LoxError):
    """Raised on the first scanning error."""


class UnexpectedCharError(LexError):
    """A character matches none of the recognized lexical classes."""

    def __init__(
        self,
        char: str,
        line: int,
        column: int | None = None,
        source: str = "",
        filename: str = "<input>",
    ) -> None:
        self.char = char
        super().__init__(f"unexpected character {char!r}", line, column, source, filename)


class UnterminatedStringError(LexError):
    """A string literal reaches end of input without a closing quote."""

    def __init__(
        self,
        line: int,
        column: int | None = None,
        source: str = "",
        filename: str = "<input>",
    ) -> None:
        super().__init__("unterminated string", line, column, source, filename)


class ParseError(LoxError):
    """Raised on the first syntax error."""


class UnexpectedTokenError(ParseError):
    """A token appears where no grammar rule expects it."""

    def __init__(self, found: Token, source: str = "", filename: str = "<input>") -> None:
        self.found = found
        super().__init__(
            f"unexpected {describe(found)}", found.line, source=source, filename=filename
        )


class ExpectedTokenError(ParseError):
    """A required token is missing."""

    def __init__(
        self,
        expected: str,
        found: Token,
        source: str = "",
        filename: str = "<input>",
    ) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"expected '{expected}', found {describe(found)}",
            found.line,
            source=source,
            filename=filename,
        )


class UnexpectedEndError(ParseError):
    """Input ends while an operand is still required."""

    def __init__(self, line: int, source: str = "", filename: str = "<input>") -> None:
        super().__init__(
            "unexpected end of input, expected an expression",
            line,
            source=source,
            filename=filename,
        )


class NestingTooDeepError(ParseError):
    """Grouping or prefix operators nest past the parser's depth limit."""

    def __init__(
        self, found: Token, limit: int, source: str = "", filename: str = "<input>"
    ) -> None:
        self.found = found
        self.limit = limit
        super().__init__(
            f"expression nested too deeply (limit {limit})",
            found.line,
            source=source,
            filename=filename,
        )
