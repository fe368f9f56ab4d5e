"""Typed operator application.

Integer encodings compute on exact Python ints and wrap the result to
the encoding's width in one place (:meth:`EncodedValue.from_int`), which
gives two's-complement wraparound for every operator.  Division and
modulus truncate toward zero.

Float encodings compute on numpy float32/float64 scalars so rounding
happens at the encoding's own precision; IEEE overflow, division by zero
and invalid operations produce inf/nan silently.
"""

import operator

import numpy as np

from .encodings import EncodedValue
from .errors import ArithmeticFault, EncodingMismatchError, ParseFault
from .formatter import format_binary_step, format_unary_step
from .operators import (NOT, NEGATE, MULTIPLY, DIVIDE, MODULUS, ADD,
                        SUBTRACT, LEFT_SHIFT, RIGHT_SHIFT, AND, XOR, OR)


def _trunc_div(a, b):
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _trunc_mod(a, b):
    return a - b * _trunc_div(a, b)


_INT_UNARY = {
    NOT:    operator.invert,
    NEGATE: operator.neg,
}

_INT_BINARY = {
    MULTIPLY:    operator.mul,
    DIVIDE:      _trunc_div,
    MODULUS:     _trunc_mod,
    ADD:         operator.add,
    SUBTRACT:    operator.sub,
    LEFT_SHIFT:  operator.lshift,
    RIGHT_SHIFT: operator.rshift,
    AND:         operator.and_,
    XOR:         operator.xor,
    OR:          operator.or_,
}

_FLOAT_UNARY = {
    NEGATE: operator.neg,
}

_FLOAT_BINARY = {
    MULTIPLY: operator.mul,
    DIVIDE:   operator.truediv,
    ADD:      operator.add,
    SUBTRACT: operator.sub,
}


def _not_applicable(op, encoding, offset):
    return ParseFault(
        offset, f"Operator '{op.text}' not applicable to {encoding}")


def apply_unary(op, value, offset=0, trace=None):
    """Apply unary *op* to *value*.

    Args:
        op:     NOT or NEGATE.
        value:  Operand.
        offset: Position of the operator, for faults.
        trace:  If a list, the step is appended to it as a trace line.

    Returns:
        EncodedValue in the operand's encoding.

    Raises:
        ParseFault if *op* is not defined for the encoding (``~`` on floats).
    """
    encoding = value.encoding
    if encoding.is_float:
        fn = _FLOAT_UNARY.get(op)
        if fn is None:
            raise _not_applicable(op, encoding, offset)
        with np.errstate(all='ignore'):
            result = EncodedValue(encoding, fn(value.payload))
    else:
        fn = _INT_UNARY.get(op)
        if fn is None:
            raise _not_applicable(op, encoding, offset)
        result = EncodedValue.from_int(encoding, fn(value.item()))

    if trace is not None:
        trace.append(format_unary_step(op, value, result))
    return result


def apply_binary(op, left, right, offset=0, trace=None):
    """Apply binary *op* to two values of the same encoding.

    Args:
        op:     One of the binary operators.
        left:   Left operand.
        right:  Right operand; must share *left*'s encoding.
        offset: Position of the operator, for faults.
        trace:  If a list, the step is appended to it as a trace line.

    Returns:
        EncodedValue in the operands' encoding.

    Raises:
        EncodingMismatchError if the operand encodings differ.
        ParseFault if *op* is not defined for the encoding.
        ArithmeticFault on integer division by zero or a shift amount
        outside ``[0, bits)``.
    """
    if left.encoding is not right.encoding:
        raise EncodingMismatchError(
            offset, f"Mixed encodings not supported "
                    f"({left.encoding} {op.text} {right.encoding})")

    encoding = left.encoding
    if encoding.is_float:
        fn = _FLOAT_BINARY.get(op)
        if fn is None:
            raise _not_applicable(op, encoding, offset)
        with np.errstate(all='ignore'):
            result = EncodedValue(encoding, fn(left.payload, right.payload))
    else:
        fn = _INT_BINARY.get(op)
        if fn is None:
            raise _not_applicable(op, encoding, offset)
        a, b = left.item(), right.item()
        if op in (DIVIDE, MODULUS) and b == 0:
            raise ArithmeticFault(offset, 'Division by zero')
        if op in (LEFT_SHIFT, RIGHT_SHIFT) and not 0 <= b < encoding.bits:
            raise ArithmeticFault(
                offset, f"Shift amount out of range "
                        f"({b} not in 0..{encoding.bits - 1})")
        result = EncodedValue.from_int(encoding, fn(a, b))

    if trace is not None:
        trace.append(format_binary_step(op, left, right, result))
    return result
