"""Fixed-width numeric encodings and the tagged values that use them.

Ten encodings, one per hardware register shape:

  s8  s16  s32  s64   two's-complement signed integers
  u8  u16  u32  u64   unsigned integers
  f32 f64             IEEE 754 binary32 / binary64

Each payload is stored as the numpy scalar type of its encoding, so the
width is carried by the value itself.  Raw bit patterns (hex literals, hex
output) go through a same-width unsigned view of the payload.
"""

import enum

import numpy as np


class Encoding(enum.Enum):
    """Numeric encoding selected for a session."""

    S8 = ('s8', np.int8, np.uint8)
    S16 = ('s16', np.int16, np.uint16)
    S32 = ('s32', np.int32, np.uint32)
    S64 = ('s64', np.int64, np.uint64)
    U8 = ('u8', np.uint8, np.uint8)
    U16 = ('u16', np.uint16, np.uint16)
    U32 = ('u32', np.uint32, np.uint32)
    U64 = ('u64', np.uint64, np.uint64)
    F32 = ('f32', np.float32, np.uint32)
    F64 = ('f64', np.float64, np.uint64)

    def __init__(self, label, dtype, raw_dtype):
        self.label = label
        self.dtype = np.dtype(dtype)
        self.raw_dtype = np.dtype(raw_dtype)

    def __str__(self):
        return self.label

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    @property
    def hex_digits(self) -> int:
        return self.dtype.itemsize * 2

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def is_float(self) -> bool:
        return self.dtype.kind == 'f'

    @property
    def is_signed(self) -> bool:
        return self.dtype.kind == 'i'

    @property
    def min(self) -> int:
        """Smallest representable integer (integer encodings only)."""
        return int(np.iinfo(self.dtype).min)

    @property
    def max(self) -> int:
        """Largest representable integer (integer encodings only)."""
        return int(np.iinfo(self.dtype).max)

    @classmethod
    def from_name(cls, label):
        """Look up an encoding by its short name (``'s8'`` … ``'f64'``).

        Raises:
            ValueError if *label* names no encoding.
        """
        if isinstance(label, cls):
            return label
        for encoding in cls:
            if encoding.label == label:
                return encoding
        raise ValueError(f"Unknown encoding '{label}' "
                         f"(expected one of: {', '.join(ENCODING_NAMES)})")


ENCODING_NAMES = tuple(e.label for e in Encoding)


class EncodedValue:
    """A payload tagged with its encoding.

    The payload is always a numpy scalar of ``encoding.dtype``; two values
    compare equal when both the tag and the raw bit pattern match.
    """
    __slots__ = ('encoding', 'payload')

    def __init__(self, encoding, payload):
        self.encoding = encoding
        self.payload = encoding.dtype.type(payload)

    @classmethod
    def from_bits(cls, encoding, raw):
        """Reinterpret the unsigned bit pattern *raw* as *encoding*."""
        bits = np.array(raw, dtype=encoding.raw_dtype)
        return cls(encoding, bits.view(encoding.dtype)[()])

    @classmethod
    def from_int(cls, encoding, n):
        """Wrap the Python integer *n* to the width of an integer encoding."""
        return cls.from_bits(encoding, n & encoding.mask)

    @property
    def raw(self) -> int:
        """Raw bit pattern as a non-negative Python int."""
        return np.asarray(self.payload).view(self.encoding.raw_dtype).item()

    def item(self):
        """Native Python number (int or float)."""
        return self.payload.item()

    def __eq__(self, other):
        if not isinstance(other, EncodedValue):
            return NotImplemented
        return self.encoding is other.encoding and self.raw == other.raw

    def __hash__(self):
        return hash((self.encoding, self.raw))

    def __repr__(self):
        return f"EncodedValue({self.encoding.label}, {self.item()!r})"
