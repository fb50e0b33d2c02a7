from timeit import timeit

from minischeme.interpreter import Interpreter
from minischeme.types.symbol import Symbol
from minischeme.types.environment import Environment
from minischeme.evaluation.evaluator import evaluate
from minischeme.reader.parser import read


def time_read(code: str, rounds: int) -> float:
    """Time the reader alone on `code`."""
    read(code)
    return timeit(lambda: read(code), number=rounds)


def time_eval(code: str, rounds: int, setup: str = "") -> float:
    """Time evaluation only: parse once and repeatedly evaluate the same tree."""
    itp = Interpreter(prelude=None)
    if setup:
        itp.eval(setup)
    expr = read(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


# Micro-benchmark: environment lookup chain

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACT_SETUP = "(define fact (lambda (n) (if (< n 2) 1 (* n (fact (- n 1))))))"
FACT_CODE = "(fact 100)"

SUM_SETUP = "(define sum-n (lambda (n acc) (if (< n 1) acc (sum-n (- n 1) (+ acc n)))))"
SUM_CODE = "(sum-n 100 0)"

NESTED_LIST_CODE = "(" * 50 + "1 2 3" + ")" * 50


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    print("Benchmark: read nested list (depth 50)")
    print(f"  time: {time_read(NESTED_LIST_CODE, 2000):.6f}s")

    for name, code, setup, rounds in [
        ("lambda application", LAMBDA_APPLY_CODE, "", 20000),
        ("recursion (factorial 100)", FACT_CODE, FACT_SETUP, 500),
        ("arithmetic sum 1..100", SUM_CODE, SUM_SETUP, 500),
    ]:
        print(f"Benchmark: {name}")
        print(f"  eval: {time_eval(code, rounds, setup):.6f}s  [rounds={rounds}]")
