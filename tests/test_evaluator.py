import math
import pytest

from rpncalc.evaluator import evaluate, reduce
from rpncalc.environment import Environment
from rpncalc.common import (
    EmptyInputError,
    EvalError,
    LexicalError,
    ParseError,
    UnboundVariableError,
)
from rpncalc import tokens as tk


@pytest.fixture
def env():
    return Environment()


@pytest.mark.parametrize("code, expected", [
    ("2", 2.0),
    ("2.0", 2.0),
    ("0", 0.0),
    (".5", 0.5),
    ("10.125", 10.125),
    ("1+1", 2.0),
    ("4-0", 4.0),
    ("0.5*4", 2.0),
    ("9/3", 3.0),
    ("1+2*3-4/2-1", 4.0),
    ("9/((2+1)*6)", 0.5),
    ("8-4-2", 2.0),
    ("8/4/2", 1.0),
    ("sqrt(4)", 2.0),
])
def test_values(env, code, expected):
    v = evaluate(code, env)

    assert v == expected
    assert env['_'] == expected


def test_trig_identity(env):
    v = evaluate("cos(1)*cos(1)+sin(1)*sin(1)", env)

    assert v == pytest.approx(1.0, abs=1e-8)


def test_log_ratio(env):
    v = evaluate("log(4)/log(2)", env)

    assert v == pytest.approx(2.0, abs=1e-8)


def test_binding(env):
    evaluate("test=9/((2+1)*6)", env)

    assert env['test'] == 0.5
    assert env['_'] == 0.5

    v = evaluate("test", env)

    assert v == 0.5
    assert env['_'] == 0.5


def test_bindings_persist(env):
    evaluate("x=3", env)
    evaluate("y=x*2", env)
    v = evaluate("x+y", env)

    assert v == 9.0
    assert list(env) == [('x', 3.0), ('_', 9.0), ('y', 6.0)]


def test_rebinding(env):
    evaluate("x=1", env)
    evaluate("x=x+1", env)

    assert env['x'] == 2.0


def test_result_is_float(env):
    v = evaluate("7", env)

    assert type(v) is float
    assert type(env['_']) is float


def test_ieee_semantics(env):
    assert evaluate("1/0", env) == math.inf
    assert evaluate("0-1/0", env) == -math.inf
    assert math.isnan(evaluate("0/0", env))
    assert math.isnan(evaluate("sqrt(0-1)", env))
    assert evaluate("log(0)", env) == -math.inf
    assert math.isnan(evaluate("log(0-1)", env))
    assert math.isnan(env['_'])


def test_unbound(env):
    with pytest.raises(UnboundVariableError) as e:
        evaluate("neverbound", env)

    assert e.value.name == 'neverbound'
    assert len(env) == 0


def test_empty(env):
    with pytest.raises(EmptyInputError):
        evaluate("", env)

    with pytest.raises(ValueError):
        evaluate("", env)


@pytest.mark.parametrize("code, error", [
    ("erü+1", LexicalError),
    ("01", LexicalError),
    ("0.", LexicalError),
    ("x=1 ", LexicalError),
    ("_=5", LexicalError),
    ("((1)", ParseError),
    ("((1)))", ParseError),
    ("1+", ParseError),
    ("(1)2", ParseError),
    ("x=-1", ParseError),
    ("x=y", UnboundVariableError),
])
def test_failures_leave_env_untouched(env, code, error):
    env.set('_', 42.0)

    with pytest.raises(error):
        evaluate(code, env)

    assert list(env) == [('_', 42.0)]


def test_last_result_is_not_an_identifier(env):
    # `_` is set by every evaluation but is not part of the identifier grammar
    evaluate("1", env)

    with pytest.raises(LexicalError):
        evaluate("_+1", env)


def test_reduce(env):
    env.set('x', 4.0)
    postfix = [tk.identifier('x'), tk.function('sqrt'), tk.number('3'), tk.operator('-')]

    assert reduce(postfix, env) == -1.0
    assert '_' not in env


@pytest.mark.parametrize("postfix", [
    [],
    [tk.operator('+')],
    [tk.number('1'), tk.operator('+')],
    [tk.function('sin')],
    [tk.number('1'), tk.number('2')],
    [tk.number('1'), tk.marker('(')],
])
def test_reduce_malformed(env, postfix):
    with pytest.raises(EvalError):
        reduce(postfix, env)


def test_function_without_parentheses(env):
    v = evaluate("sin.5", env)

    assert v == pytest.approx(math.sin(0.5))


def test_function_without_parentheses_applies_to_the_rest(env):
    # the function stays on the operator stack until the end of input
    v = evaluate("sqrt.25*4", env)

    assert v == 1.0
