from minischeme import SExpression, LispValue, EvaluatorFn
from minischeme.errors import ArityMismatch
from minischeme.types.environment import Environment
from minischeme.types.nil import Nil


def if_form(
    args: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(args) not in (2, 3):
        raise ArityMismatch(f"if requires 2 or 3 arguments, given {len(args)}")

    # Only #f is false; 0, () and everything else count as true
    if evaluate_fn(args[0], env) is not False:
        return evaluate_fn(args[1], env)
    elif len(args) == 3:
        return evaluate_fn(args[2], env)
    else:
        return Nil  # no else branch
