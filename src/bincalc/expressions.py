"""Expression parser with eager, typed evaluation.

Grammar::

    expr  := value (binop expr)*
    value := literal | unaryop value | '(' expr ')'

Binary operators are resolved by precedence climbing.  Each operator is
applied as soon as its right-hand side has been parsed, so no tree is
kept; the parse functions return the operator that stopped them because
the caller has no other way to see it.

Faults are raised as :mod:`bincalc.errors` exceptions by :func:`compute`;
:func:`evaluate` turns them into an :class:`Evaluation` result.
"""

from typing import NamedTuple, Optional

from .encodings import Encoding
from .errors import BinCalcError, ParseFault
from .evaluator import apply_binary, apply_unary
from .formatter import format_dec, format_hex
from .literals import parse_literal
from .operators import (BINARY, UNARY, OPEN_PAREN, CLOSE_PAREN, END,
                        match_operator, skip_whitespace)

MAX_DEPTH = 100   # nested '(' / unary prefixes per line


# ── Recursive descent parser ─────────────────────────────────────────

class _Parser:
    """Cursor state for one input line."""

    def __init__(self, text, encoding, trace=None, max_depth=MAX_DEPTH):
        self.text = text
        self.pos = 0
        self.encoding = encoding
        self.trace = trace
        self.max_depth = max_depth
        self.depth = 0

    def operator(self, arity, sentinel=None):
        """Consume an operator; return it with its start offset."""
        start = skip_whitespace(self.text, self.pos)
        op, self.pos = match_operator(self.text, start, arity, sentinel)
        return op, start

    def expression(self, sentinel, min_prec=0):
        """Parse and evaluate ``value (binop expr)*``.

        Returns:
            ``(value, op, offset)``: the accumulated value and the first
            operator whose precedence does not exceed *min_prec*, with
            that operator's offset.
        """
        value = self.value()
        op, where = self.operator(BINARY, sentinel)
        while op.precedence > min_prec:
            right, next_op, next_where = self.expression(sentinel,
                                                         op.precedence)
            value = apply_binary(op, value, right, where, self.trace)
            op, where = next_op, next_where
        return value, op, where

    def value(self):
        """Parse and evaluate a literal, a prefixed value or a group."""
        literal, self.pos = parse_literal(self.text, self.pos, self.encoding)
        if literal is not None:
            return literal

        op, where = self.operator(UNARY)
        if self.depth >= self.max_depth:
            raise ParseFault(where, 'Expression nested too deeply')
        self.depth += 1
        try:
            if op is OPEN_PAREN:
                value, _, _ = self.expression(CLOSE_PAREN)
                return value
            return apply_unary(op, self.value(), where, self.trace)
        finally:
            self.depth -= 1


# ── Result types ──────────────────────────────────────────────────────

class FormattedOutput(NamedTuple):
    """Final value in both radixes, plus the trace in evaluation order."""
    decimal: str
    hex: str
    trace: tuple = ()

    def __str__(self):
        return f"{self.decimal} ({self.hex})"


class EvaluationFault(NamedTuple):
    """Why and where evaluation of a line stopped."""
    kind: str
    offset: int
    message: str

    @classmethod
    def from_error(cls, error):
        return cls(error.kind, error.offset, error.message)


class Evaluation(NamedTuple):
    """Outcome of :func:`evaluate`: exactly one field is set."""
    output: Optional[FormattedOutput] = None
    fault: Optional[EvaluationFault] = None

    @property
    def ok(self) -> bool:
        return self.fault is None


# ── Public API ────────────────────────────────────────────────────────

def compute(line, encoding, trace=None, max_depth=MAX_DEPTH):
    """Evaluate an expression to an encoded value.

    Args:
        line:      Expression text (e.g. ``"x0f & ~(1 << 2)"``).
        encoding:  :class:`Encoding` or its short name.
        trace:     Optional list; each operator application appends a
                   trace line to it.
        max_depth: Nesting limit for parentheses and unary prefixes.

    Returns:
        :class:`EncodedValue` in *encoding*.

    Raises:
        ParseFault, RangeFault or ArithmeticFault, each carrying the
        offset into *line* where evaluation stopped.
        ValueError for an unknown encoding name.
    """
    encoding = Encoding.from_name(encoding)
    parser = _Parser(line, encoding, trace, max_depth)
    value, _, _ = parser.expression(END)
    return value


def evaluate(line, encoding, verbose=False):
    """Evaluate one input line, never raising for faults in the line.

    Args:
        line:     Expression text.
        encoding: :class:`Encoding` or its short name.
        verbose:  Collect a trace line for every operator application.

    Returns:
        :class:`Evaluation` holding either a :class:`FormattedOutput` or
        an :class:`EvaluationFault`.
    """
    trace = [] if verbose else None
    try:
        value = compute(line, encoding, trace)
    except BinCalcError as e:
        return Evaluation(fault=EvaluationFault.from_error(e))
    output = FormattedOutput(format_dec(value), format_hex(value),
                             tuple(trace or ()))
    return Evaluation(output=output)
