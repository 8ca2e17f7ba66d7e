from .common import EmptyInputError, EvalError, UnboundVariableError, trace
from .lexer import tokenize
from .parser import parse
from . import tokens as tk
import numpy as np


# numpy ufuncs follow IEEE-754: 1/0 is inf, sqrt(-1) and 0/0 are nan, log(0) is -inf
OPERATORS = {
    '+': np.add,
    '-': np.subtract,
    '*': np.multiply,
    '/': np.divide,
}

FUNCTIONS = {
    'sqrt': np.sqrt,
    'log': np.log,
    'sin': np.sin,
    'cos': np.cos,
}


def pop(stack, t):
    if not stack:
        raise EvalError(f"malformed postfix expression: missing operand for '{t.lexeme}'")
    return stack.pop()


@trace
def reduce(postfix, env):
    stack = []

    with np.errstate(all='ignore'):
        for t in postfix:
            if t.type == tk.NUMBER:
                stack.append(np.float64(t.value))

            elif t.type == tk.IDENTIFIER:
                value = env.get(t.lexeme)
                if value is None:
                    raise UnboundVariableError(t.lexeme)
                stack.append(np.float64(value))

            elif t.type == tk.OPERATOR:
                arg2 = pop(stack, t)
                arg1 = pop(stack, t)
                stack.append(OPERATORS[t.value](arg1, arg2))

            elif t.type == tk.FUNCTION:
                arg = pop(stack, t)
                stack.append(FUNCTIONS[t.value](arg))

            else:
                raise EvalError(f"unexpected token in postfix expression: {t}")

    if len(stack) != 1:
        raise EvalError(f"malformed postfix expression: {len(stack)} values left")

    return float(stack[0])


def evaluate(expr, env):
    """Evaluate `expr` against `env` and return the result.

    `env` is only touched once the whole expression has been reduced: the
    bound name (for `name=expr`) first, then `_`.
    """
    if not expr:
        raise EmptyInputError()

    name, postfix = parse(tokenize(expr))
    result = reduce(postfix, env)

    if name is not None:
        env.set(name, result)
    env.set('_', result)

    return result
