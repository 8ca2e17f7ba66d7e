NUMBER = 'number'
IDENTIFIER = 'identifier'
FUNCTION = 'function'
OPERATOR = 'operator'
LPAREN = '('
RPAREN = ')'
BINDING = '='

PRECEDENCE = {
    '+': 0,
    '-': 0,
    '*': 1,
    '/': 1,
}

FUNCTIONS = {'sqrt', 'log', 'sin', 'cos'}


class Token:
    """A lexical unit.

    `type` is one of the tags above. `value` is the float for numbers, the
    symbol for operators and the name for functions; identifiers and the
    structural markers carry nothing beyond their lexeme.
    """

    def __init__(self, type, lexeme, value=None, position=None):
        self.type = type
        self.lexeme = lexeme
        self.value = value
        self.position = position

    @property
    def precedence(self):
        if self.type != OPERATOR:
            return None
        return PRECEDENCE[self.value]

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.lexeme, self.value) == (other.type, other.lexeme, other.value)

    def __hash__(self):
        return hash((self.type, self.lexeme, self.value))

    def __repr__(self):
        if self.value is None:
            return f"Token('{self.type}', '{self.lexeme}')"
        return f"Token('{self.type}', {self.value!r})"


def number(lexeme, position=None):
    return Token(NUMBER, lexeme, float(lexeme), position)


def identifier(name, position=None):
    return Token(IDENTIFIER, name, None, position)


def function(name, position=None):
    return Token(FUNCTION, name, name, position)


def operator(symbol, position=None):
    return Token(OPERATOR, symbol, symbol, position)


def marker(symbol, position=None):
    return Token(symbol, symbol, None, position)
