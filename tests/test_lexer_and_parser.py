import io

import pytest
from hypothesis import given, strategies as st

from minischeme.errors import UnexpectedEOF, UnmatchedCloseParen
from minischeme.printer import to_string
from minischeme.reader.parser import TokenStream, lex, read, read_all
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair, from_iterable
from minischeme.types.symbol import Symbol


def _kinds(source):
    return [(tok.kind, tok.text) for tok in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("(1(2)3)", [("lparen", "("), ("atom", "1"), ("lparen", "("), ("atom", "2"),
                     ("rparen", ")"), ("atom", "3"), ("rparen", ")")]),
        ("  foo\n\tbar  ", [("atom", "foo"), ("atom", "bar")]),
        ("#t#f", [("atom", "#t#f")]),
        ("a)b", [("atom", "a"), ("rparen", ")"), ("atom", "b")]),
        ("", []),
        ("   \n ", []),
    ]
)
def test_lexer_basic(source, expected):
    assert _kinds(source) == expected


def test_lexer_positions():
    tokens = list(lex("(define x\n  (+ 1 2))"))
    assert [(t.text, t.line, t.col) for t in tokens[:4]] == [
        ("(", 0, 0), ("define", 0, 1), ("x", 0, 8), ("(", 1, 2),
    ]
    plus = tokens[4]
    assert (plus.text, plus.line, plus.col) == ("+", 1, 3)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("0", 0),
        ("#t", True),
        ("#f", False),
        ("foo", Symbol("foo")),
        ("-", Symbol("-")),
        ("-x", Symbol("-x")),
        ("1+", Symbol("1+")),
        ("--1", Symbol("--1")),
        ("#true", Symbol("#true")),
        ("()", Nil),
        ("(a b c)", from_iterable([Symbol("a"), Symbol("b"), Symbol("c")])),
        ("(1 #t x)", from_iterable([1, True, Symbol("x")])),
    ]
)
def test_parser(source, expected):
    result = read(source)
    assert result == expected
    assert type(result) is type(expected)


def test_nested_lists():
    result = read("((a b) (c d))")
    expected = Pair(
        from_iterable([Symbol("a"), Symbol("b")]),
        Pair(from_iterable([Symbol("c"), Symbol("d")]), Nil),
    )
    assert result == expected


def test_read_is_syntactic_only():
    # nothing is looked up or applied while reading
    assert read("(undefined-thing 1 2)") == from_iterable([Symbol("undefined-thing"), 1, 2])


def test_read_leaves_stream_after_expression():
    stream = TokenStream("(1 2) foo(3)  42")
    assert read(stream) == from_iterable([1, 2])
    assert read(stream) == Symbol("foo")
    assert read(stream) == from_iterable([3])
    assert read(stream) == 42
    assert stream.at_eof()


def test_read_from_text_stream():
    stream = TokenStream(io.StringIO("a (b\n c)"))
    assert list(stream.parse_all()) == [Symbol("a"), from_iterable([Symbol("b"), Symbol("c")])]


def test_read_all():
    assert list(read_all("1 2 (3)")) == [1, 2, from_iterable([3])]
    assert list(read_all("   ")) == []


@pytest.mark.parametrize("source", ["", "   ", "(", "(1 2", "((1) 2", "(a (b c)"])
def test_unexpected_eof(source):
    with pytest.raises(UnexpectedEOF):
        read(source)


@pytest.mark.parametrize("source", [")", "  ) 1"])
def test_unmatched_close_paren(source):
    with pytest.raises(UnmatchedCloseParen) as exc:
        read(source)
    assert exc.value.line == 0


def test_unclosed_list_reports_opening_position():
    with pytest.raises(UnexpectedEOF) as exc:
        read("\n  (a (b)")
    assert (exc.value.line, exc.value.col) == (1, 2)


def test_stray_close_paren_after_expression():
    stream = TokenStream("(1) )")
    assert read(stream) == from_iterable([1])
    with pytest.raises(UnmatchedCloseParen):
        read(stream)


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.characters(categories=("Ll", "Lu", "Pd"), include_characters="!?*<>=+_"),
    min_size=1, max_size=10
).map(Symbol)

atom_strat = st.one_of(
    st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1),
    st.booleans(),
    symbol_strat,
)

sexpr_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=5).map(from_iterable),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(sexpr_strat)
def test_print_read_roundtrip(sexpr):
    assert read(to_string(sexpr)) == sexpr


@given(sexpr_strat)
def test_read_print_read_is_stable(sexpr):
    first = read(to_string(sexpr))
    assert read(to_string(first)) == first


@given(st.lists(sexpr_strat, max_size=4))
def test_read_all_sequence(exprs):
    source = "\n".join(to_string(e) for e in exprs)
    assert list(read_all(source)) == exprs
