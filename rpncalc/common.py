from functools import wraps
import os

TRACE = os.environ.get('RPNCALC_TRACE', '') not in ('', '0')

depth = 0


def trace(f):
    if not TRACE:
        return f

    @wraps(f)
    def wrapper(*args, **kwargs):
        global depth

        print(f"{'  '*depth}{f.__name__} <- {args} {kwargs}")
        depth += 1

        try:
            ret = f(*args, **kwargs)
        finally:
            depth -= 1

        print(f"{'  '*depth}{f.__name__} -> {ret}")

        return ret

    return wrapper


class CalcError(Exception):
    pass


class LexicalError(CalcError):
    def __init__(self, position, reason="unexpected character"):
        super().__init__(f"{reason} at index {position}")
        self.position = position
        self.reason = reason


class ParseError(CalcError):
    pass


class EvalError(CalcError):
    pass


class UnboundVariableError(EvalError):
    def __init__(self, name):
        super().__init__(f"unbound variable: {name}")
        self.name = name


class EmptyInputError(CalcError, ValueError):
    def __init__(self):
        super().__init__("cannot evaluate the empty string")


class CommandError(CalcError):
    pass
