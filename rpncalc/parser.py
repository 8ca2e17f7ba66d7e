from .common import ParseError, trace
from . import tokens as tk

EXPECT_OPERAND = 'operand'
EXPECT_OPERATOR = 'operator'

ROLES = {
    EXPECT_OPERAND: "an operand (number, identifier, function call or left parenthesis)",
    EXPECT_OPERATOR: "an operator or right parenthesis",
}


def check_state(needed, state, token):
    """Raise unless the role `token` fills is the one the parser is in `state` for."""
    if needed != state:
        raise ParseError(f"expected {ROLES[state]} but found '{token.lexeme}'")


@trace
def split_binding(tokens):
    """Strip a leading `name=` and return (name, remaining tokens)."""
    tokens = list(tokens)

    if len(tokens) >= 3 and tokens[1].type == tk.BINDING:
        if tokens[0].type != tk.IDENTIFIER:
            raise ParseError("left side of assignment must be an identifier")
        return tokens[0].lexeme, tokens[2:]

    return None, tokens


@trace
def to_postfix(tokens):
    """Shunting-yard: rearrange infix tokens into postfix order.

    Operators of equal precedence pop each other, so every operator is left
    associative. A function stays on the stack until the parenthesis that
    follows it is closed.
    """
    output = []
    stack = []
    state = EXPECT_OPERAND

    for t in tokens:
        if t.type == tk.BINDING:
            raise ParseError("assignment is only allowed at the start of an expression")

        elif t.type in (tk.NUMBER, tk.IDENTIFIER):
            check_state(EXPECT_OPERAND, state, t)
            output.append(t)
            state = EXPECT_OPERATOR

        elif t.type == tk.FUNCTION:
            check_state(EXPECT_OPERAND, state, t)
            stack.append(t)

        elif t.type == tk.OPERATOR:
            check_state(EXPECT_OPERATOR, state, t)
            while stack and stack[-1].type == tk.OPERATOR and t.precedence <= stack[-1].precedence:
                output.append(stack.pop())
            stack.append(t)
            state = EXPECT_OPERAND

        elif t.type == tk.LPAREN:
            check_state(EXPECT_OPERAND, state, t)
            stack.append(t)

        elif t.type == tk.RPAREN:
            check_state(EXPECT_OPERATOR, state, t)
            while True:
                if not stack:
                    raise ParseError("mismatched parenthesis")
                top = stack.pop()
                if top.type == tk.LPAREN:
                    break
                output.append(top)
            if stack and stack[-1].type == tk.FUNCTION:
                output.append(stack.pop())

        else:
            raise ParseError(f"unexpected token: {t}")

    while stack:
        top = stack.pop()
        if top.type == tk.LPAREN:
            raise ParseError("mismatched parenthesis")
        output.append(top)

    if state == EXPECT_OPERAND:
        raise ParseError("end of input, operand expected")

    return output


def parse(tokens):
    name, tokens = split_binding(tokens)
    return name, to_postfix(tokens)
