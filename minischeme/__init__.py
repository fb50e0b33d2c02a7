# Core type aliases for the minischeme data model.
# Values are plain Python objects plus a handful of small classes:
#
#   Integer  -> int (never bool)
#   Boolean  -> bool
#   Symbol   -> minischeme.types.symbol.Symbol
#   Nil      -> minischeme.types.nil.Nil (the empty list)
#   Pair     -> minischeme.types.pair.Pair (immutable cons cell)
#   Function -> minischeme.types.function.Primitive | Closure
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms alias (code and data are the same objects)
SExpression = LispValue

# Evaluator function type, handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
