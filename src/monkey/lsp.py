"""Minimal LSP server for Monkey: illegal-character diagnostics only."""

from __future__ import annotations

import re

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

from monkey import __version__
from monkey.lexer import located_tokens
from monkey.tokens import TokenType

server = LanguageServer("monkey-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _lsp_position(source: str, offset: int) -> Position:
    """Convert a string offset to an LSP position (UTF-16 columns, \\r\\n/\\r/\\n lines)."""
    line = 0
    line_start = 0
    for match in _LINE_BREAK.finditer(source, 0, offset):
        line += 1
        line_start = match.end()
    character = len(source[line_start:offset].encode("utf-16-le")) // 2
    return Position(line=line, character=character)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per illegal character."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    for tok, pos in located_tokens(source):
        if tok.type != TokenType.ILLEGAL:
            continue
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=_lsp_position(source, pos.offset),
                    end=_lsp_position(source, pos.offset + len(tok.literal)),
                ),
                message=f"illegal character {tok.literal!r}",
                severity=DiagnosticSeverity.Error,
                source="monkey",
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
