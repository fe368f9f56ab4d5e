"""bincalc: Binary calculator for fixed-width numeric encodings.

Supports:
  - 8/16/32/64 bit signed and unsigned integers (s8 … u64)
  - 32/64 bit IEEE floating point (f32, f64)
  - Decimal and hex (``xff``) literals, range-checked per encoding
  - Unary ``~ -`` and binary ``* / % + - << >> & ^ |`` with C precedence
  - Hardware-width wraparound for integers, native float rounding
  - Verbose mode tracing every operator application in both radixes

Usage as library:
    from bincalc import evaluate
    result = evaluate('x00 - x01', 'u8')
    print(result.output)          # 255 (xff)
"""

__version__ = '1.0.0'

from .encodings import Encoding, EncodedValue, ENCODING_NAMES
from .errors import (BinCalcError, ParseFault, RangeFault, ArithmeticFault,
                     EncodingMismatchError)
from .expressions import (compute, evaluate, Evaluation, EvaluationFault,
                          FormattedOutput)
