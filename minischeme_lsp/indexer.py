from __future__ import annotations

"""
Static indexer for minischeme files.

Uses the minischeme tokenizer and reader, never the evaluator, to build:
- definitions: top-level (define name ...) forms, with lambda parameters
- the first read error (unexpected EOF, unmatched ')') with its position

Tokenizing never fails, so a partially typed buffer still yields every
definition that precedes the broken form.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from minischeme.errors import ReadError
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.reader.parser import Token, TokenStream, lex, parse_atom
from minischeme.types.symbol import Symbol


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int
    params: Optional[List[str]] = None

    @property
    def signature(self) -> str:
        if self.params is None:
            return self.name
        return "(" + " ".join([self.name, *self.params]) + ")"


@dataclass
class ReadProblem:
    kind: str  # exception class name, e.g. "UnexpectedEOF"
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    shadowed_forms: List[SymbolDef] = field(default_factory=list)
    error: Optional[ReadProblem] = None
    form_count: int = 0


def _atom(tokens: List[Token], i: int) -> Optional[str]:
    if i < len(tokens) and tokens[i].kind == "atom":
        return tokens[i].text
    return None


def _lambda_params(tokens: List[Token], i: int) -> Optional[List[str]]:
    """Parameter names when tokens[i:] starts with `(lambda (p ...)`."""
    if i + 2 >= len(tokens) or tokens[i].kind != "lparen" or _atom(tokens, i + 1) != "lambda":
        return None
    if tokens[i + 2].kind != "lparen":
        return None
    params: List[str] = []
    j = i + 3
    while j < len(tokens) and tokens[j].kind == "atom":
        params.append(tokens[j].text)
        j += 1
    return params


def _read_definition(tokens: List[Token], i: int) -> Optional[SymbolDef]:
    """A SymbolDef if tokens[i] opens `(define name ...)`."""
    if _atom(tokens, i + 1) != "define":
        return None
    name = _atom(tokens, i + 2)
    if name is None or not isinstance(parse_atom(name), Symbol):
        return None
    name_tok = tokens[i + 2]
    params = _lambda_params(tokens, i + 3)
    return SymbolDef(
        name=name,
        kind="var" if params is None else "function",
        line=name_tok.line,
        col=name_tok.col,
        params=params,
    )


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(lex(text))

    depth = 0
    for i, tok in enumerate(tokens):
        if tok.kind == "lparen":
            if depth == 0:
                sdef = _read_definition(tokens, i)
                if sdef is not None:
                    idx.symbols[sdef.name] = sdef
                    if Symbol(sdef.name) in SPECIAL_FORMS:
                        idx.shadowed_forms.append(sdef)
            depth += 1
        elif tok.kind == "rparen":
            depth = max(depth - 1, 0)

    stream = TokenStream(text)
    try:
        for _ in stream.parse_all():
            idx.form_count += 1
    except ReadError as ex:
        idx.error = ReadProblem(
            kind=type(ex).__name__,
            message=str(ex),
            line=ex.line if ex.line is not None else 0,
            col=ex.col if ex.col is not None else 0,
        )
    except RecursionError:
        # the reader recurses once per open paren
        idx.error = ReadProblem(
            kind="RecursionError",
            message="Expression nested too deeply to read",
            line=0,
            col=0,
        )

    return idx


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ n ...)",
    "-": "(- n m ...)",
    "*": "(* n ...)",
    "abs": "(abs n)",
    "<": "(< a b c ...)",
    ">": "(> a b c ...)",
    "=": "(= a b c ...)",
    "eq?": "(eq? sym1 sym2)",
    "not": "(not bool)",
    "car": "(car pair)",
    "cdr": "(cdr pair)",
    "cons": "(cons x xs)",
    "list": "(list x ...)",
    "null?": "(null? x)",
    "pair?": "(pair? x)",
    "procedure?": "(procedure? x)",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote datum)",
    "and": "(and expr ...)",
    "or": "(or expr ...)",
    "if": "(if test then [else])",
    "define": "(define name expr)",
    "lambda": "(lambda (param ...) body)",
}
