"""Minimal LSP server for Titan — scan diagnostics only."""

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

from titan import __version__
from titan.errors import ScanError
from titan.scanner import tokenize

server = LanguageServer("titan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def offset_to_position(source: str, offset: int) -> Position:
    """Convert a character offset into a 0-based LSP line/character position.

    The character is counted in UTF-16 code units, the protocol default.
    """
    line = source.count("\n", 0, offset)
    line_start = source.rfind("\n", 0, offset) + 1
    prefix = source[line_start:offset]
    return Position(line=line, character=len(prefix.encode("utf-16-le")) // 2)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    try:
        tokenize(source, filename)
    except ScanError as exc:
        start = offset_to_position(source, exc.position)
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=start,
                    end=Position(line=start.line, character=start.character + 1),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="titan",
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
