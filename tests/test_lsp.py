import sys

import pytest
from lsprotocol import types

from minischeme_lsp.indexer import BUILTIN_SIGNATURES, build_index
from minischeme_lsp.server import (
    DocumentState,
    completion_items,
    diagnostics_for,
    document_symbols,
    hover_for,
    word_at,
)


SOURCE = """\
(define limit 10)
(define square
  (lambda (n) (* n n)))
(define (bad) 1)
(square limit)
"""


@pytest.fixture
def state():
    return DocumentState(text=SOURCE, index=build_index(SOURCE))


def test_index_definitions(state):
    symbols = state.index.symbols
    assert set(symbols) == {"limit", "square"}
    assert symbols["limit"].kind == "var"
    assert (symbols["limit"].line, symbols["limit"].col) == (0, 8)
    assert symbols["square"].kind == "function"
    assert symbols["square"].params == ["n"]
    assert symbols["square"].signature == "(square n)"
    assert state.index.error is None
    assert state.index.form_count == 4


def test_index_ignores_nested_defines():
    idx = build_index("(define f (lambda (x) (define inner x)))")
    assert set(idx.symbols) == {"f"}


def test_index_skips_non_symbol_names():
    idx = build_index("(define 5 1) (define #t 2)")
    assert idx.symbols == {}


def test_index_records_read_errors():
    idx = build_index("(define a 1)\n(define b (+ 1 2)")
    assert idx.error is not None
    assert idx.error.kind == "UnexpectedEOF"
    assert (idx.error.line, idx.error.col) == (1, 0)
    # definitions before and inside the broken form are still indexed
    assert set(idx.symbols) == {"a", "b"}


def test_index_records_unmatched_close_paren():
    idx = build_index("(+ 1 2))")
    assert idx.error.kind == "UnmatchedCloseParen"
    assert (idx.error.line, idx.error.col) == (0, 7)


def test_index_reports_excessive_nesting():
    depth = sys.getrecursionlimit() + 100
    idx = build_index("(" * depth + ")" * depth)
    assert idx.error.kind == "RecursionError"
    assert (idx.error.line, idx.error.col) == (0, 0)
    assert diagnostics_for(idx)[0].severity == types.DiagnosticSeverity.Error


def test_diagnostics_for_read_error():
    diags = diagnostics_for(build_index("  )"))
    assert len(diags) == 1
    assert diags[0].severity == types.DiagnosticSeverity.Error
    assert diags[0].code == "UnmatchedCloseParen"
    assert diags[0].range.start == types.Position(line=0, character=2)


def test_diagnostics_for_shadowed_special_form():
    diags = diagnostics_for(build_index("(define if 1)"))
    assert len(diags) == 1
    assert diags[0].severity == types.DiagnosticSeverity.Warning
    assert "special form" in diags[0].message


def test_clean_document_has_no_diagnostics(state):
    assert diagnostics_for(state.index) == []


def test_word_at():
    assert word_at("(square limit)", types.Position(line=0, character=3)) == "square"
    assert word_at("(square limit)", types.Position(line=0, character=10)) == "limit"
    assert word_at("(square limit)", types.Position(line=5, character=0)) is None
    assert word_at("( )", types.Position(line=0, character=1)) is None


def _hover_text(state, line, character):
    hover = hover_for(state, types.Position(line=line, character=character))
    return None if hover is None else hover.contents.value


def test_hover(state):
    assert _hover_text(state, 4, 3) == "(square n) (function, defined at 2:9)"
    assert _hover_text(state, 2, 16) == BUILTIN_SIGNATURES["*"]
    assert _hover_text(state, 2, 4).endswith("(special form)")
    assert _hover_text(state, 2, 14) is None


def test_completion_items(state):
    items = {item.label: item for item in completion_items(state.index)}
    assert items["lambda"].kind == types.CompletionItemKind.Keyword
    assert items["car"].kind == types.CompletionItemKind.Function
    assert items["square"].kind == types.CompletionItemKind.Function
    assert items["limit"].kind == types.CompletionItemKind.Variable


def test_document_symbols(state):
    symbols = {s.name: s for s in document_symbols(state.index)}
    assert symbols["square"].kind == types.SymbolKind.Function
    assert symbols["limit"].kind == types.SymbolKind.Variable
    assert symbols["square"].range.start == types.Position(line=1, character=8)
