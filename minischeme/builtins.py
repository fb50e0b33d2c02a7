"""Built-in primitive functions for the minischeme runtime environment.

Every primitive takes the list of already-evaluated arguments and checks its
own arity and argument types. Integer arguments must be real integers:
booleans are rejected even though Python treats them as ints.
"""
from __future__ import annotations

from minischeme import LispValue
from minischeme.errors import ArityMismatch, EmptyList, TypeMismatch
from minischeme.printer import to_string
from minischeme.types.environment import Environment
from minischeme.types.function import Closure, Primitive
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair, from_iterable
from minischeme.types.symbol import Symbol


def _is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _integers(name: str, args: list[LispValue]) -> list[int]:
    for arg in args:
        if not _is_integer(arg):
            raise TypeMismatch(f"{name}: expected an integer, got {to_string(arg)}")
    return args


def _exactly(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise ArityMismatch(f"{name} requires {count} argument(s), given {len(args)}")


def _at_least(name: str, args: list[LispValue], count: int) -> None:
    if len(args) < count:
        raise ArityMismatch(f"{name} requires at least {count} argument(s), given {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> int:
    """Sum of all arguments; (+) is 0."""
    return sum(_integers("+", args))


def sub(args: list[LispValue]) -> int:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    _at_least("-", args, 1)
    first, *rest = _integers("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(args: list[LispValue]) -> int:
    """Product of all arguments; (*) is 1."""
    result = 1
    for x in _integers("*", args):
        result *= x
    return result


def absolute(args: list[LispValue]) -> int:
    _exactly("abs", args, 1)
    return abs(_integers("abs", args)[0])


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, args: list[LispValue], op) -> bool:
    _at_least(name, args, 2)
    nums = _integers(name, args)
    return all(op(a, b) for a, b in zip(nums, nums[1:]))


def lt(args: list[LispValue]) -> bool:
    return _compare("<", args, lambda a, b: a < b)


def gt(args: list[LispValue]) -> bool:
    return _compare(">", args, lambda a, b: a > b)


def num_eq(args: list[LispValue]) -> bool:
    return _compare("=", args, lambda a, b: a == b)


def is_eq(args: list[LispValue]) -> bool:
    """(eq? a b) on two symbols."""
    _exactly("eq?", args, 2)
    a, b = args
    if not (isinstance(a, Symbol) and isinstance(b, Symbol)):
        raise TypeMismatch(f"eq? expects two symbols, got {to_string(a)} and {to_string(b)}")
    return a == b


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(args: list[LispValue]) -> bool:
    _exactly("not", args, 1)
    if not isinstance(args[0], bool):
        raise TypeMismatch(f"not expects a boolean, got {to_string(args[0])}")
    return not args[0]


# -------------------------------
# List operations
# -------------------------------
def _pair_arg(name: str, args: list[LispValue]) -> Pair:
    _exactly(name, args, 1)
    (value,) = args
    if value is Nil:
        raise EmptyList(f"{name} of empty list")
    if not isinstance(value, Pair):
        raise TypeMismatch(f"{name} expects a pair, got {to_string(value)}")
    return value


def car(args: list[LispValue]) -> LispValue:
    return _pair_arg("car", args).car


def cdr(args: list[LispValue]) -> LispValue:
    return _pair_arg("cdr", args).cdr


def cons(args: list[LispValue]) -> Pair:
    _exactly("cons", args, 2)
    head, tail = args
    return Pair(head, tail)


def list_builtin(args: list[LispValue]) -> LispValue:
    return from_iterable(args)


def is_null(args: list[LispValue]) -> bool:
    _exactly("null?", args, 1)
    return args[0] is Nil


def is_pair(args: list[LispValue]) -> bool:
    _exactly("pair?", args, 1)
    return isinstance(args[0], Pair)


def is_procedure(args: list[LispValue]) -> bool:
    _exactly("procedure?", args, 1)
    return isinstance(args[0], (Primitive, Closure))


PRIMITIVES = {
    '+': add,
    '-': sub,
    '*': mul,
    'abs': absolute,
    '<': lt,
    '>': gt,
    '=': num_eq,
    'eq?': is_eq,
    'not': logical_not,
    'car': car,
    'cdr': cdr,
    'cons': cons,
    'list': list_builtin,
    'null?': is_null,
    'pair?': is_pair,
    'procedure?': is_procedure,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({Symbol(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})


def make_root_environment() -> Environment:
    """A fresh root environment with every primitive installed."""
    env = Environment()
    register(env)
    return env
