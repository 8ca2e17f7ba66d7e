from .common import LexicalError, trace
from . import tokens as tk

# lexer states
START = 'start'
IDENT = 'identifier'
ZERO = 'zero-or-decimal'
INTEGER = 'integer-or-decimal'
DECIMAL = 'decimal-after-point'

SINGLE_CHAR = {
    '+': tk.operator,
    '-': tk.operator,
    '*': tk.operator,
    '/': tk.operator,
    '(': tk.marker,
    ')': tk.marker,
    '=': tk.marker,
}


def is_alpha(c):
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z'


def is_digit(c):
    return '0' <= c <= '9'


def is_alnum(c):
    return is_alpha(c) or is_digit(c)


@trace
def close_token(state, s, start, end, point):
    lexeme = s[start:end]

    if state == IDENT:
        if lexeme in tk.FUNCTIONS:
            return tk.function(lexeme, start)
        return tk.identifier(lexeme, start)

    if state == ZERO:
        return tk.number('0', start)

    if state == INTEGER:
        return tk.number(lexeme, start)

    if state == DECIMAL:
        if end == point + 1:
            raise LexicalError(point, "no digit after point")
        return tk.number(lexeme, start)

    raise LexicalError(start, f"cannot close token in state {state}")


def tokenize(s):
    """Lazily split `s` into tokens.

    Whitespace is not skipped. Each token is produced by walking the states
    from START until a character is seen that cannot continue it; end of
    input closes whatever token is in progress.
    """
    state = START
    start = 0
    point = None
    i = 0
    n = len(s)

    while i < n or state != START:
        c = s[i] if i < n else None

        if state == START:
            start = i
            if c in SINGLE_CHAR:
                i += 1
                yield SINGLE_CHAR[c](c, start)
            elif is_alpha(c):
                state = IDENT
                i += 1
            elif c == '.':
                state = DECIMAL
                point = i
                i += 1
            elif c == '0':
                state = ZERO
                i += 1
            elif is_digit(c):
                state = INTEGER
                i += 1
            else:
                raise LexicalError(i, f"unexpected character {c!r}")
            continue

        if state == IDENT:
            if c is not None and is_alnum(c):
                i += 1
                continue

        elif state == ZERO:
            if c is not None and is_digit(c):
                raise LexicalError(i, "0 cannot be followed by a digit")
            if c == '.':
                state = DECIMAL
                point = i
                i += 1
                continue

        elif state == INTEGER:
            if c is not None and is_alpha(c):
                raise LexicalError(i, "number followed by a letter")
            if c is not None and is_digit(c):
                i += 1
                continue
            if c == '.':
                state = DECIMAL
                point = i
                i += 1
                continue

        elif state == DECIMAL:
            if c is not None and is_digit(c):
                i += 1
                continue

        yield close_token(state, s, start, i, point)
        state = START
