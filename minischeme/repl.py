"""Console driver: evaluate files, or run an interactive read-eval-print loop."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from minischeme.config import configure_logging
from minischeme.errors import SchemeError
from minischeme.evaluation.evaluator import evaluate
from minischeme.interpreter import Interpreter
from minischeme.printer import to_string
from minischeme.reader.parser import TokenStream

logger = logging.getLogger(__name__)

PROMPT = "minischeme> "


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO, prompt: str = PROMPT) -> None:
    """Print-and-continue loop: an error aborts only the form that raised it."""
    tokens = TokenStream(stdin)
    while True:
        stdout.write(prompt)
        stdout.flush()
        try:
            if tokens.at_eof():
                break
            result = evaluate(tokens.parse_expr(), interp.env)
        except (SchemeError, RecursionError) as ex:
            stdout.write(f"error: {ex}\n")
            continue
        stdout.write(to_string(result) + "\n")
    stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minischeme", description="minischeme interpreter")
    parser.add_argument("files", nargs="*", type=Path, help="source files to evaluate in order")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the prelude")
    args = parser.parse_args(argv)

    configure_logging()
    interp = Interpreter(prelude=None if args.no_prelude else 'auto')

    if not args.files:
        repl(interp, sys.stdin, sys.stdout)
        return 0

    for path in args.files:
        logger.debug("Evaluating %s", path)
        try:
            with path.open(encoding="utf-8") as f:
                interp.eval_stream(f, sys.stdout)
        except (SchemeError, RecursionError, OSError) as ex:
            print(f"{path}: error: {ex}", file=sys.stderr)
            return 1
    return 0
