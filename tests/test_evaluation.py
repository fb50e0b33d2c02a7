import pytest

from minischeme import errors
from minischeme.evaluation.evaluator import evaluate
from minischeme.reader.parser import read
from minischeme.types.environment import Environment
from minischeme.types.function import Closure, Primitive
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair, from_iterable
from minischeme.types.symbol import Symbol


# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def bare_env():
    """Environment with just enough primitives to exercise the evaluator."""
    env = Environment()
    env.define(Symbol("+"), Primitive("+", sum))
    env.define(Symbol("-"), Primitive("-", lambda args: args[0] - sum(args[1:])))
    env.define(Symbol("x"), 42)
    env.define(Symbol("y"), 100)
    return env


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(bare_env):
    assert evaluate(1, bare_env) == 1
    assert evaluate(-7, bare_env) == -7
    assert evaluate(True, bare_env) is True
    assert evaluate(False, bare_env) is False
    plus = bare_env.lookup(Symbol("+"))
    assert evaluate(plus, bare_env) is plus


def test_symbol_lookup(bare_env):
    assert evaluate(Symbol("x"), bare_env) == 42
    assert evaluate(Symbol("y"), bare_env) == 100
    with pytest.raises(errors.UnboundSymbol):
        evaluate(Symbol("z"), bare_env)


def test_empty_application(bare_env):
    with pytest.raises(errors.EmptyApplication):
        evaluate(Nil, bare_env)


def test_simple_expression(bare_env):
    assert evaluate(read("(+ 1 2)"), bare_env) == 3
    assert evaluate(read("(+ x (- y 58))"), bare_env) == 84


def test_unbound_function(bare_env):
    with pytest.raises(errors.UnboundSymbol):
        evaluate(read("(foo 1 2)"), bare_env)


@pytest.mark.parametrize("source", ["(1 2)", "(#t)", "(x)", "((quote a) 1)"])
def test_not_callable(bare_env, source):
    with pytest.raises(errors.NotCallable):
        evaluate(read(source), bare_env)


def test_improper_argument_list(bare_env):
    expr = Pair(Symbol("+"), Pair(1, 2))
    with pytest.raises(errors.TypeMismatch):
        evaluate(expr, bare_env)


def test_improper_special_form(bare_env):
    expr = Pair(Symbol("quote"), Symbol("a"))
    with pytest.raises(errors.TypeMismatch):
        evaluate(expr, bare_env)


def test_foreign_object_cannot_be_evaluated(bare_env):
    with pytest.raises(errors.TypeMismatch):
        evaluate(1.5, bare_env)


def test_arguments_evaluated_left_to_right(bare_env):
    seen = []

    def record(args):
        seen.append(args[0])
        return args[0]

    bare_env.define(Symbol("rec"), Primitive("rec", record))
    evaluate(read("(+ (rec 1) (rec 2) (rec 3))"), bare_env)
    assert seen == [1, 2, 3]


def test_head_may_be_any_expression(bare_env):
    assert evaluate(read("((lambda (a b) (+ a b)) 3 4)"), bare_env) == 7
    assert evaluate(read("(((lambda () +)) 1 2)"), bare_env) == 3


def test_lambda_returns_closure(bare_env):
    lam = evaluate(read("(lambda (a b) (+ a b))"), bare_env)
    assert isinstance(lam, Closure)
    assert lam.params == (Symbol("a"), Symbol("b"))
    assert lam.env is bare_env
    assert evaluate(Pair(lam, from_iterable([2, 3])), bare_env) == 5


def test_closure_arity_mismatch(bare_env):
    with pytest.raises(errors.ArityMismatch):
        evaluate(read("((lambda (a b) a) 1)"), bare_env)
    with pytest.raises(errors.ArityMismatch):
        evaluate(read("((lambda (a) a) 1 2)"), bare_env)


def test_define_and_lookup(bare_env):
    assert evaluate(read("(define z 5)"), bare_env) == Symbol("z")
    assert evaluate(Symbol("z"), bare_env) == 5


def test_errors_from_primitives_propagate(bare_env):
    def boom(args):
        raise errors.TypeMismatch("boom")

    bare_env.define(Symbol("boom"), Primitive("boom", boom))
    with pytest.raises(errors.TypeMismatch, match="boom"):
        evaluate(read("(+ 1 (boom))"), bare_env)


def test_deep_recursion_hits_host_stack(bare_env):
    evaluate(read("(define loop (lambda (n) (loop n)))"), bare_env)
    with pytest.raises(RecursionError):
        evaluate(read("(loop 1)"), bare_env)
