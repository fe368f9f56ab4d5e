"""Dual-radix formatting of encoded values.

Every function returns a fresh string, so several values can be
formatted inside one trace line.
"""

import math


def format_dec(value) -> str:
    """Decimal text: signed/unsigned integer, or ``%f`` for floats.

    A NaN with the sign bit set prints as ``-nan``.
    """
    if value.encoding.is_float:
        x = value.item()
        if math.isnan(x) and value.raw >> (value.encoding.bits - 1):
            return '-nan'
        return '%f' % x
    return str(value.item())


def format_hex(value) -> str:
    """Raw bit pattern as ``x`` + fixed-width lowercase hex."""
    return f"x{value.raw:0{value.encoding.hex_digits}x}"


def format_result(value) -> str:
    """Result line: ``255 (xff)``."""
    return f"{format_dec(value)} ({format_hex(value)})"


def format_unary_step(op, operand, result) -> str:
    """Trace line for a unary operator: ``-(5) = -5 (-x05 = xfb)``."""
    return (f"{op.text}({format_dec(operand)}) = {format_dec(result)} "
            f"({op.text}{format_hex(operand)} = {format_hex(result)})")


def format_binary_step(op, left, right, result) -> str:
    """Trace line for a binary operator: ``5 + 3 = 8 (x05 + x03 = x08)``."""
    return (f"{format_dec(left)} {op.text} {format_dec(right)} = "
            f"{format_dec(result)} "
            f"({format_hex(left)} {op.text} {format_hex(right)} = "
            f"{format_hex(result)})")


def format_caret(offset, indent=2) -> str:
    """Caret line pointing at column *offset* of a line shown after an
    *indent*-wide prompt."""
    return ' ' * (indent + offset) + '^'
