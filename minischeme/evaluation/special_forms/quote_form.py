from minischeme import SExpression, LispValue, EvaluatorFn
from minischeme.errors import ArityMismatch
from minischeme.types.environment import Environment


def quote_form(
    args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(args) != 1:
        raise ArityMismatch(f"quote expects exactly 1 argument, given {len(args)}")
    return args[0]
