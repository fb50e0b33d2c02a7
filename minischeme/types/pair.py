"""Cons cells and the list helpers built on them.

A proper list is either `Nil` or a `Pair` whose `cdr` is a proper list. The
reader only ever builds proper lists, but a `Pair` may hold any value in its
tail, so every helper that walks a list checks for an improper tail.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from minischeme import SExpression
from minischeme.errors import TypeMismatch
from minischeme.types.nil import Nil


class Pair:
    """An immutable cons cell."""

    __slots__ = ("car", "cdr")
    __match_args__ = ("car", "cdr")

    def __init__(self, car: SExpression, cdr: SExpression):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, name, value):
        raise AttributeError("Pair is immutable")

    def __delattr__(self, name):
        raise AttributeError("Pair is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return values_equal(self, other)

    def __hash__(self) -> int:
        cars, tail = _spine(self)
        return hash((tuple(cars), tail))

    def __iter__(self) -> Iterator[SExpression]:
        return iter_list(self)

    def __repr__(self) -> str:
        cars, tail = _spine(self)
        heads = "".join(f"Pair({car!r}, " for car in cars)
        return f"{heads}{tail!r}" + ")" * len(cars)

    def __str__(self) -> str:
        from minischeme.printer import to_string
        return to_string(self)


def _spine(value: SExpression) -> tuple[list[SExpression], SExpression]:
    """Split a chain of Pairs into its cars and whatever ends it."""
    cars = []
    while isinstance(value, Pair):
        cars.append(value.car)
        value = value.cdr
    return cars, value


def values_equal(a: SExpression, b: SExpression) -> bool:
    """Structural equality that keeps booleans and integers apart (True != 1)."""
    while isinstance(a, Pair) and isinstance(b, Pair):
        if not values_equal(a.car, b.car):
            return False
        a, b = a.cdr, b.cdr
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


def from_iterable(items: Iterable[SExpression], tail: SExpression = Nil) -> SExpression:
    """Build a chain of Pairs holding `items` in order, terminated by `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(value: SExpression) -> Iterator[SExpression]:
    """Yield the elements of a proper list; raise TypeMismatch on an improper tail."""
    while isinstance(value, Pair):
        yield value.car
        value = value.cdr
    if value is not Nil:
        raise TypeMismatch(f"Expected a proper list, found improper tail {value!r}")


def to_list(value: SExpression) -> list[SExpression]:
    return list(iter_list(value))


def is_list(value: SExpression) -> bool:
    while isinstance(value, Pair):
        value = value.cdr
    return value is Nil
