from minischeme import SExpression, LispValue, EvaluatorFn
from minischeme.types.environment import Environment


def and_form(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until one evaluates
    to #f, which is returned immediately. If none do, returns the value of the
    last operand. With zero operands, returns #t.
    """
    result: LispValue = True
    for expr in args:
        result = evaluate_fn(expr, env)
        if result is False:
            return False
    return result


def or_form(args: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If every operand is #f, or there are none, returns #f.
    """
    for expr in args:
        val = evaluate_fn(expr, env)
        if val is not False:
            return val
    return False
