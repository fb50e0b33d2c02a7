from __future__ import annotations
import logging
from typing import Literal, TextIO

from minischeme import LispValue
from minischeme.builtins import register
from minischeme.config import get_prelude_paths
from minischeme.evaluation.evaluator import evaluate
from minischeme.printer import to_string
from minischeme.reader.parser import TokenStream
from minischeme.types.environment import Environment
from minischeme.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating minischeme code.
    Maintains one root Environment across calls, so definitions persist.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude()
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self) -> None:
        for path in get_prelude_paths():
            logger.debug("Loading prelude %s", path)
            with path.open(encoding="utf-8") as f:
                for expr in TokenStream(f).parse_all():
                    evaluate(expr, self.env)

    def eval_prelude(self, code: str) -> None:
        for expr in TokenStream(code).parse_all():
            evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value (Nil if none)."""
        result: LispValue = Nil
        for expr in TokenStream(code).parse_all():
            result = evaluate(expr, self.env)
        return result

    def eval_stream(self, stream: TextIO | TokenStream, out: TextIO) -> None:
        """Read, evaluate and print each form of `stream` until it is exhausted."""
        tokens = stream if isinstance(stream, TokenStream) else TokenStream(stream)
        while not tokens.at_eof():
            result = evaluate(tokens.parse_expr(), self.env)
            out.write(to_string(result))
            out.write("\n")
