"""Symbols: identifiers read from source and used as environment keys.

Two symbols are equal when their names are equal. Names are interned, so the
comparison done on every variable lookup is usually an identity check.
"""
from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        # the printed form of a symbol is its bare name
        return self.id
