"""Core evaluator for the minischeme interpreter.

Dispatches on the variant of the expression, recognises special forms by
their head keyword before any environment lookup, and otherwise applies the
evaluated head to the left-to-right evaluated arguments. Recursion is plain
Python recursion; there is no trampoline.
"""

from __future__ import annotations

from minischeme import SExpression, LispValue
from minischeme.errors import EmptyApplication, NotCallable, TypeMismatch
from minischeme.evaluation.apply import apply
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.printer import to_string
from minischeme.types.environment import Environment
from minischeme.types.function import Closure, Function, Primitive
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair, iter_list, to_list
from minischeme.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case bool() | int() | Primitive() | Closure():
            return expr

        case Symbol():
            return env.lookup(expr)

        case NilType():
            raise EmptyApplication("Missing function in ()")

        case Pair(head, tail):
            # Special forms receive their argument forms unevaluated.
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](to_list(tail), env, evaluate)

            fn = evaluate(head, env)
            if not isinstance(fn, Function):
                raise NotCallable(f"{to_string(fn)} is not a function")
            args = [evaluate(arg, env) for arg in iter_list(tail)]
            return apply(fn, args, evaluate)

        case _:
            raise TypeMismatch(f"Cannot evaluate {expr!r}")
