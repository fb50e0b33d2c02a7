"""Function values: host primitives and interpreted closures.

`Function` is the union of the two call conventions. Application dispatches
on which member it holds (see minischeme.evaluation.apply).
"""

from __future__ import annotations

from typing import Callable

from minischeme import SExpression, LispValue
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol


class Primitive:
    """A named host callable taking the evaluated argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"

    def __repr__(self) -> str:
        return f"Primitive({self.name!r})"


class Closure:
    """A first-class lambda with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[Symbol, ...], body: SExpression, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        self.env: Environment = env

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a child of the captured env with params bound to `args`."""
        return self.env.extend(self.params, args)

    def __str__(self) -> str:
        return "#<lambda (" + " ".join(str(p) for p in self.params) + ")>"

    def __repr__(self) -> str:
        return str(self)


Function = Primitive | Closure
