"""Tests for the LSP server: diagnostic generation."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from loxfront.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///calc.lox") -> None:
        ws.put_text_document(TextDocumentItem(uri=uri, language_id="lox", version=0, text=source))

    return ls, published, put


# ---------------------------------------------------------------------------
# Lex errors point at the offending column
# ---------------------------------------------------------------------------


class TestLexErrors:
    def test_unexpected_character(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("1 + %")
        _validate(ls, "file:///calc.lox")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "'%'" in d.message
        assert d.source == "loxfront"
        # '%' is at column 5 (1-based) -> character 4 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 4
        assert d.range.end.character == 5

    def test_unterminated_string(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put('x\n  "open')
        _validate(ls, "file:///calc.lox")

        d = published[0].diagnostics[0]
        assert "unterminated" in d.message
        assert d.range.start.line == 1
        assert d.range.start.character == 2


# ---------------------------------------------------------------------------
# Parse errors cover the whole line
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unclosed_paren(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("(1 + 2")
        _validate(ls, "file:///calc.lox")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "')'" in d.message
        assert d.range.start.line == 0
        assert d.range.start.character == 0
        assert d.range.end.character == 6

    def test_error_on_second_line(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("1 + 2\n3 * ;")
        _validate(ls, "file:///calc.lox")

        d = published[0].diagnostics[0]
        # Line 2 (1-based) -> LSP line 1 (0-based)
        assert d.range.start.line == 1
        assert "';'" in d.message


    def test_deep_nesting(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("-" * 2000 + "1", uri="file:///deep.lox")
        _validate(ls, "file:///deep.lox")

        d = published[0].diagnostics[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "nested too deeply" in d.message
        assert d.range.start.line == 0

# ---------------------------------------------------------------------------
# Clean document -> empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("(1 + 2) * 3 // ok\n!done")
        _validate(ls, "file:///calc.lox")

        assert len(published) == 1
        assert published[0].uri == "file:///calc.lox"
        assert published[0].diagnostics == []
