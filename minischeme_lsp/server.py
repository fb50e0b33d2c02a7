from __future__ import annotations

"""
A minimal pygls-based Language Server for minischeme.

Features:
- Text synchronization and document store
- Diagnostics: read errors (unexpected EOF, unmatched ')'), definitions that
  reuse a special-form name
- Hover: builtin and special-form signatures, locally defined symbols
- Completion: special forms, builtins, locals
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
The feature handlers are thin wrappers over pure helpers that build the
lsprotocol objects.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from minischeme import __version__
from minischeme.config import configure_logging
from minischeme_lsp.indexer import (
    BUILTIN_SIGNATURES,
    SPECIAL_FORM_SIGNATURES,
    DocumentIndex,
    build_index,
)

logger = logging.getLogger(__name__)

SOURCE = "minischeme-ls"
DELIMITERS = " \t()\n\r"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class SchemeLanguageServer(LanguageServer):
    CMD_NAME = "minischeme-ls"

    def __init__(self):
        super().__init__(
            self.CMD_NAME,
            __version__,
            text_document_sync_kind=types.TextDocumentSyncKind.Full,
        )
        self.documents: Dict[str, DocumentState] = {}

    def refresh(self, uri: str, text: str) -> DocumentState:
        state = DocumentState(text=text, index=build_index(text))
        self.documents[uri] = state
        self.text_document_publish_diagnostics(
            types.PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics_for(state.index))
        )
        return state


# --- Pure helpers ---

def _point_range(line: int, col: int, length: int = 1) -> types.Range:
    return types.Range(
        start=types.Position(line=line, character=col),
        end=types.Position(line=line, character=col + length),
    )


def diagnostics_for(idx: DocumentIndex) -> List[types.Diagnostic]:
    diags: List[types.Diagnostic] = []

    if idx.error is not None:
        diags.append(
            types.Diagnostic(
                range=_point_range(idx.error.line, idx.error.col),
                message=idx.error.message,
                severity=types.DiagnosticSeverity.Error,
                source=SOURCE,
                code=idx.error.kind,
            )
        )

    for sdef in idx.shadowed_forms:
        diags.append(
            types.Diagnostic(
                range=_point_range(sdef.line, sdef.col, len(sdef.name)),
                message=f"'{sdef.name}' is a special form; this binding is never called in operator position",
                severity=types.DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )

    return diags


def word_at(text: str, pos: types.Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in DELIMITERS:
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in DELIMITERS:
        end += 1
    return line[start:end] or None


def hover_for(state: DocumentState, pos: types.Position) -> Optional[types.Hover]:
    word = word_at(state.text, pos)
    if not word:
        return None

    if word in SPECIAL_FORM_SIGNATURES:
        contents = f"{SPECIAL_FORM_SIGNATURES[word]} (special form)"
    elif word in state.index.symbols:
        sdef = state.index.symbols[word]
        contents = f"{sdef.signature} ({sdef.kind}, defined at {sdef.line + 1}:{sdef.col + 1})"
    elif word in BUILTIN_SIGNATURES:
        contents = BUILTIN_SIGNATURES[word]
    else:
        return None
    return types.Hover(
        contents=types.MarkupContent(kind=types.MarkupKind.PlainText, value=contents)
    )


def completion_items(idx: DocumentIndex) -> List[types.CompletionItem]:
    items: List[types.CompletionItem] = []
    for name, sig in SPECIAL_FORM_SIGNATURES.items():
        items.append(types.CompletionItem(label=name, kind=types.CompletionItemKind.Keyword, detail=sig))
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(types.CompletionItem(label=name, kind=types.CompletionItemKind.Function, detail=sig))
    for name, sdef in idx.symbols.items():
        kind = types.CompletionItemKind.Function if sdef.kind == "function" else types.CompletionItemKind.Variable
        items.append(types.CompletionItem(label=name, kind=kind, detail=sdef.signature))
    return items


def document_symbols(idx: DocumentIndex) -> List[types.DocumentSymbol]:
    symbols: List[types.DocumentSymbol] = []
    for name, sdef in idx.symbols.items():
        rng = _point_range(sdef.line, sdef.col, len(name))
        symbols.append(
            types.DocumentSymbol(
                name=name,
                detail=sdef.signature,
                kind=types.SymbolKind.Function if sdef.kind == "function" else types.SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Server wiring ---

server = SchemeLanguageServer()


@server.feature(types.TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: SchemeLanguageServer, params: types.DidOpenTextDocumentParams):
    ls.refresh(params.text_document.uri, params.text_document.text or "")


@server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: SchemeLanguageServer, params: types.DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        # full sync: the last change carries the whole text
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    ls.refresh(uri, text)


@server.feature(types.TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: SchemeLanguageServer, params: types.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.text_document_publish_diagnostics(types.PublishDiagnosticsParams(uri=uri, diagnostics=[]))


@server.feature(types.TEXT_DOCUMENT_HOVER)
def on_hover(ls: SchemeLanguageServer, params: types.HoverParams) -> Optional[types.Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return hover_for(state, params.position)


@server.feature(types.TEXT_DOCUMENT_COMPLETION, types.CompletionOptions(trigger_characters=["("]))
def on_completion(ls: SchemeLanguageServer, params: types.CompletionParams) -> types.CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items = completion_items(state.index) if state else []
    return types.CompletionList(is_incomplete=False, items=items)


@server.feature(types.TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(
    ls: SchemeLanguageServer, params: types.DocumentSymbolParams
) -> Optional[List[types.DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return document_symbols(state.index)


def main():
    # Run the language server over stdio
    configure_logging()
    logger.info("Starting %s %s", SchemeLanguageServer.CMD_NAME, __version__)
    server.start_io()


if __name__ == "__main__":
    main()
