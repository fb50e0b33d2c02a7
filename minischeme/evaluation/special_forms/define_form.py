from minischeme import SExpression, LispValue, EvaluatorFn
from minischeme.errors import ArityMismatch, TypeMismatch
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol


def define_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only, shadowing any outer binding. Returns `name`.
    """
    if len(args) != 2:
        raise ArityMismatch(f"define requires two arguments, given {len(args)}")

    name, val_expr = args
    if not isinstance(name, Symbol):
        raise TypeMismatch(f"define expects a symbol to bind, got {name}")
    env.define(name, evaluate_fn(val_expr, env))
    return name
