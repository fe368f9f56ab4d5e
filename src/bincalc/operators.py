"""Operator table shared by the parser and the trace formatter.

Table order matters: lookup takes the first entry of the requested arity
whose text prefixes the cursor, so unary ``-`` is found before binary
``-`` only when a unary operator is expected.
"""

from typing import NamedTuple

from .errors import ParseFault

UNARY = 'unary'
BINARY = 'binary'
SENTINEL = 'sentinel'

WHITESPACE = ' \t\n\r\f\v'


class Operator(NamedTuple):
    precedence: int
    arity: str
    text: str


OPEN_PAREN  = Operator(8, UNARY, '(')
NOT         = Operator(7, UNARY, '~')
NEGATE      = Operator(7, UNARY, '-')
MULTIPLY    = Operator(6, BINARY, '*')
DIVIDE      = Operator(6, BINARY, '/')
MODULUS     = Operator(6, BINARY, '%')
ADD         = Operator(5, BINARY, '+')
SUBTRACT    = Operator(5, BINARY, '-')
LEFT_SHIFT  = Operator(4, BINARY, '<<')
RIGHT_SHIFT = Operator(4, BINARY, '>>')
AND         = Operator(3, BINARY, '&')
XOR         = Operator(2, BINARY, '^')
OR          = Operator(1, BINARY, '|')
CLOSE_PAREN = Operator(0, SENTINEL, ')')
END         = Operator(0, SENTINEL, '')

OPERATORS = (
    OPEN_PAREN, NOT, NEGATE,
    MULTIPLY, DIVIDE, MODULUS,
    ADD, SUBTRACT,
    LEFT_SHIFT, RIGHT_SHIFT,
    AND, XOR, OR,
    CLOSE_PAREN, END,
)


def skip_whitespace(text, pos):
    """Return the first position at or after *pos* that is not whitespace."""
    n = len(text)
    while pos < n and text[pos] in WHITESPACE:
        pos += 1
    return pos


def match_operator(text, pos, arity, sentinel=None):
    """Match an operator of *arity* (or the *sentinel*) at *pos*.

    Args:
        text:     Input line.
        pos:      Cursor; leading whitespace is skipped.
        arity:    UNARY or BINARY.
        sentinel: CLOSE_PAREN or END, whichever may terminate the
                  expression being parsed.

    Returns:
        ``(operator, pos)`` with *pos* just past the operator text.

    Raises:
        ParseFault at the skipped-to cursor if nothing matches.
    """
    pos = skip_whitespace(text, pos)
    for op in OPERATORS:
        if op.arity != arity and op is not sentinel:
            continue
        if op is END:
            if pos == len(text):
                return op, pos
        elif text.startswith(op.text, pos):
            return op, pos + len(op.text)
    if arity == UNARY:
        raise ParseFault(pos, 'Parse error: expected a value')
    if sentinel is CLOSE_PAREN and pos == len(text):
        raise ParseFault(pos, "Parse error: missing ')'")
    raise ParseFault(pos, 'Parse error: expected an operator')
