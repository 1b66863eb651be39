"""Test scan errors: classification, positions, and formatted context."""

import pytest

from loxfront.errors import LexError, LoxError, UnexpectedCharError, UnterminatedStringError
from loxfront.scanner import scan


class TestUnexpectedChar:
    def test_unknown_character(self):
        with pytest.raises(UnexpectedCharError) as exc_info:
            scan("=%")
        err = exc_info.value
        assert err.char == "%"
        assert err.line == 1
        assert err.column == 2

    def test_is_a_lex_error(self):
        with pytest.raises(LexError):
            scan("@")

    def test_error_on_second_line(self):
        with pytest.raises(UnexpectedCharError) as exc_info:
            scan("1 +\n  2 # 3")
        err = exc_info.value
        assert err.line == 2
        assert err.column == 5

    def test_non_ascii_letter(self):
        with pytest.raises(UnexpectedCharError) as exc_info:
            scan("café")
        assert exc_info.value.char == "é"

    def test_message_names_character(self):
        with pytest.raises(UnexpectedCharError, match="unexpected character '\\$'"):
            scan("$")


class TestUnterminatedString:
    def test_unterminated(self):
        with pytest.raises(UnterminatedStringError):
            scan('"unterminated')

    def test_reports_opening_line(self):
        with pytest.raises(UnterminatedStringError) as exc_info:
            scan('x\n"never\nclosed')
        err = exc_info.value
        assert err.line == 2
        assert err.column == 1

    def test_lone_quote(self):
        with pytest.raises(UnterminatedStringError):
            scan('"')

    def test_first_error_wins(self):
        # The unterminated string swallows the rest, so '%' is never seen
        with pytest.raises(UnterminatedStringError):
            scan('"abc %')


class TestErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(LexError) as exc_info:
            scan("some + text % more")
        formatted = exc_info.value.format()
        assert "some + text % more" in formatted

    def test_format_contains_caret_under_column(self):
        with pytest.raises(LexError) as exc_info:
            scan("ab %")
        formatted = exc_info.value.format()
        assert formatted.splitlines()[-1] == "  |    ^"

    def test_format_contains_error_prefix(self):
        with pytest.raises(LexError) as exc_info:
            scan("%")
        assert exc_info.value.format().startswith("error:")

    def test_format_contains_position(self):
        with pytest.raises(LexError) as exc_info:
            scan("%")
        assert "<input>:1:1" in exc_info.value.format()

    def test_format_with_filename(self):
        with pytest.raises(LexError) as exc_info:
            scan("%", filename="calc.lox")
        assert "calc.lox:1:1" in exc_info.value.format()
        assert "other.lox:1:1" in exc_info.value.format("other.lox")

    def test_str_is_formatted_report(self):
        with pytest.raises(LexError) as exc_info:
            scan("%")
        assert str(exc_info.value) == exc_info.value.format()

    def test_without_column_has_no_caret(self):
        err = LoxError("boom", 2, source="a\nb\n")
        formatted = err.format("f.lox")
        assert "--> f.lox:2\n" in formatted
        assert "2 | b" in formatted
        assert "^" not in formatted

    def test_line_outside_source(self):
        err = LoxError("boom", 9, column=1, source="a")
        assert "9 | " in err.format()
