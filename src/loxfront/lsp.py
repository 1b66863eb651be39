"""Minimal LSP server for Lox expressions: diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from loxfront import __version__
from loxfront.errors import LexError, LoxError, ParseError
from loxfront.parser import parse_source

server = LanguageServer(
    "loxfront-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _error_range(exc: LoxError) -> Range:
    """Point at the error column when known, otherwise span the whole line."""
    line = exc.line - 1
    lines = exc.source.splitlines()
    line_text = lines[line] if 0 <= line < len(lines) else ""

    if exc.column is not None:
        col = exc.column - 1
        return Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + 1),
        )
    return Range(
        start=Position(line=line, character=0),
        end=Position(line=line, character=len(line_text)),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan and parse the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    try:
        parse_source(source, filename)
    except (LexError, ParseError) as exc:
        diagnostics.append(
            Diagnostic(
                range=_error_range(exc),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="loxfront",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
