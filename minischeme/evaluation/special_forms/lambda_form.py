from minischeme import SExpression, LispValue, EvaluatorFn
from minischeme.errors import ArityMismatch, TypeMismatch
from minischeme.types.environment import Environment
from minischeme.types.function import Closure
from minischeme.types.pair import is_list, iter_list
from minischeme.types.symbol import Symbol


def lambda_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params ...) body); the body stays unevaluated until a call
    if len(args) != 2:
        raise ArityMismatch(
            f"lambda requires a parameter list and a body, given {len(args)} argument(s)"
        )

    param_list, body = args
    if not is_list(param_list):
        raise TypeMismatch(f"lambda parameters must be a list, got {param_list}")
    params = tuple(iter_list(param_list))
    for p in params:
        if not isinstance(p, Symbol):
            raise TypeMismatch(f"lambda parameter must be a symbol, got {p}")

    return Closure(params, body, env)
