"""Application engine for minischeme.

Primitives are called directly with the evaluated argument list. Closures get
a fresh frame, parented to the environment they captured, in which the body
is evaluated.
"""

from minischeme import LispValue, EvaluatorFn
from minischeme.errors import NotCallable
from minischeme.types.function import Closure, Primitive


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Bind `args` to the closure's parameters and evaluate its body.

    Raises ArityMismatch when the argument count differs from the parameter count.
    """
    new_env = fn.bind(args)
    return evaluate_fn(fn.body, new_env)


def apply(head: object, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Primitive):
        return head(args)
    else:
        raise NotCallable(f"Cannot apply non-function {head}")
