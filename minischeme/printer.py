"""Printed representation of minischeme values.

Integers and symbols print as their text, booleans as #t/#f, the empty list
as (), proper lists as space-separated elements in parentheses, and an
improper tail after a dot: (1 2 . 3).
"""

from __future__ import annotations

from io import StringIO

from minischeme import LispValue
from minischeme.errors import TypeMismatch
from minischeme.types.function import Closure, Primitive
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair
from minischeme.types.symbol import Symbol


def to_string(value: LispValue) -> str:
    with StringIO() as buffer:
        write(value, buffer)
        return buffer.getvalue()


def write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case bool():
            buffer.write("#t" if value else "#f")
        case int():
            buffer.write(str(value))
        case Symbol():
            buffer.write(value.id)
        case NilType():
            buffer.write("()")
        case Pair():
            _write_pair(value, buffer)
        case Primitive() | Closure():
            buffer.write(str(value))
        case _:
            raise TypeMismatch(f"Cannot print {value!r}")


def _write_pair(pair: Pair, buffer: StringIO) -> None:
    buffer.write("(")
    write(pair.car, buffer)
    rest = pair.cdr
    while isinstance(rest, Pair):
        buffer.write(" ")
        write(rest.car, buffer)
        rest = rest.cdr
    if not isinstance(rest, NilType):
        buffer.write(" . ")
        write(rest, buffer)
    buffer.write(")")
