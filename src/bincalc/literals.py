"""Width-aware literal lexer.

Handles:
  - Hex bit patterns: ``x`` + hex digits (no ``0x``; ``0x10`` would read
    as the decimal ``0`` followed by junk).  The digits fill the raw bits
    of the encoding, so ``x80`` is -128 under s8 and ``x3f800000`` is 1.0
    under f32.
  - Signed decimal integers, range-checked against the exact width and
    signedness of the encoding.
  - Decimal/scientific floats (plus ``inf``/``nan``) for f32/f64, rounded
    natively to the encoding's precision.

A literal that does not fit raises RangeFault at the literal's first
character.  No literal at all returns ``None`` so the parser can try a
unary operator or ``(`` instead.
"""

import re
from fractions import Fraction

import numpy as np

from .encodings import EncodedValue
from .errors import RangeFault
from .operators import skip_whitespace

HEX_DIGITS = '0123456789abcdefABCDEF'

_RE_INT       = re.compile(r'[+-]?[0-9]+')
_RE_NEG_DIGIT = re.compile(r'-[0-9]')
_RE_FLOAT     = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|inf(?:inity)?|nan)', re.I)

# binary32 limits: largest finite value, the point where rounding reaches
# inf, and a magnitude far below half the smallest subnormal
_F32_MAX        = float(np.finfo(np.float32).max)
_F32_OVERFLOW   = Fraction(2) ** 128 - Fraction(2) ** 103
_F32_NEGLIGIBLE = 1e-50


def parse_literal(text, pos, encoding):
    """Parse a literal for *encoding* at *pos*.

    Args:
        text:     Input line.
        pos:      Cursor; leading whitespace is skipped.
        encoding: Active :class:`Encoding`.

    Returns:
        ``(value, pos)`` past the literal, or ``(None, pos)`` with the
        cursor unchanged when no literal starts here.

    Raises:
        RangeFault if the literal does not fit *encoding*.
    """
    start = skip_whitespace(text, pos)
    if text.startswith('x', start):
        value, end = _parse_hex(text, start, encoding)
    elif encoding.is_float:
        value, end = _parse_float(text, start, encoding)
    else:
        value, end = _parse_int(text, start, encoding)
    if value is None:
        return None, pos
    return value, end


def _parse_hex(text, start, encoding):
    n = len(text)
    j = start + 1
    if j >= n or text[j] not in HEX_DIGITS:
        return None, start

    # Leading zeros don't count against the width
    while j < n and text[j] == '0':
        j += 1
    end = j
    while end < n and text[end] in HEX_DIGITS:
        end += 1
    if end - j > encoding.hex_digits:
        raise RangeFault(start)

    raw = int(text[j:end], 16) if end > j else 0
    return EncodedValue.from_bits(encoding, raw), end


def _parse_int(text, start, encoding):
    if not encoding.is_signed and _RE_NEG_DIGIT.match(text, start):
        raise RangeFault(start)
    mo = _RE_INT.match(text, start)
    if not mo:
        return None, start
    value = int(mo.group())
    if not encoding.min <= value <= encoding.max:
        raise RangeFault(start)
    return EncodedValue(encoding, value), mo.end()


def _parse_float(text, start, encoding):
    mo = _RE_FLOAT.match(text, start)
    if not mo:
        return None, start
    if encoding.dtype == np.float32:
        payload = _to_float32(mo.group())
    else:
        payload = float(mo.group())
    return EncodedValue(encoding, payload), mo.end()


def _to_float32(literal):
    """Round a decimal literal to binary32 in one step.

    Going through float64 first rounds twice, which lands on the wrong
    side of a binary32 midpoint for some inputs.  The float64 result is
    only a starting guess; the nearest binary32 value (ties to even) is
    picked by comparing exact rationals.
    """
    wide = float(literal)
    with np.errstate(over='ignore'):
        narrow = np.float32(wide)
    if not np.isfinite(wide) or abs(wide) < _F32_NEGLIGIBLE:
        return narrow

    exact = Fraction(literal)
    if np.isinf(narrow):
        if abs(exact) >= _F32_OVERFLOW:
            return narrow
        narrow = np.float32(np.copysign(_F32_MAX, wide))

    candidates = (narrow,
                  np.nextafter(narrow, np.float32(-np.inf)),
                  np.nextafter(narrow, np.float32(np.inf)))
    return min((c for c in candidates if np.isfinite(c)),
               key=lambda c: (abs(Fraction(float(c)) - exact),
                              int(np.asarray(c).view(np.uint32)) & 1))
