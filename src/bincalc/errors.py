"""Error types for bincalc.

Every fault carries the offset into the input line where it was detected,
so the front end can put a caret under the offending column.
"""


class BinCalcError(Exception):
    """Base error: evaluation of one input line failed at *offset*."""
    kind = 'BinCalcError'
    default_message = 'Evaluation error'

    def __init__(self, offset=0, message=None):
        self.offset = offset
        self.message = message or self.default_message
        super().__init__(self.message)


class ParseFault(BinCalcError):
    """No valid literal or operator at the cursor, or an operator that
    the active encoding does not support."""
    kind = 'ParseFault'
    default_message = 'Parse error'


class EncodingMismatchError(ParseFault):
    """Binary operator applied to values of two different encodings."""
    default_message = 'Mixed encodings not supported'


class RangeFault(BinCalcError):
    """Literal does not fit the width/signedness of the active encoding."""
    kind = 'RangeFault'
    default_message = 'Value out of range'


class ArithmeticFault(BinCalcError):
    """Integer division by zero or an out-of-range shift amount."""
    kind = 'ArithmeticFault'
    default_message = 'Arithmetic error'
