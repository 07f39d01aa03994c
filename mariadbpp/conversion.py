"""Range-checked numeric casts, text-to-number parsing and decimal values."""

from __future__ import annotations

import math
import re
import struct
import sys
from dataclasses import dataclass

from .types import ValueType

_FLT_MAX = 3.4028234663852886e38
_FLT_MIN = 1.1754943508222875e-38
_DBL_MAX = sys.float_info.max
_DBL_MIN = sys.float_info.min

_INT32 = (-(2**31), 2**31 - 1)
_UINT64_MAX = 2**64 - 1

_INTEGER_LIMITS = {
    ValueType.BOOLEAN: (0, 1),
    ValueType.UNSIGNED8: (0, 2**8 - 1),
    ValueType.SIGNED8: (-(2**7), 2**7 - 1),
    ValueType.UNSIGNED16: (0, 2**16 - 1),
    ValueType.SIGNED16: (-(2**15), 2**15 - 1),
    ValueType.UNSIGNED32: (0, 2**32 - 1),
    ValueType.SIGNED32: _INT32,
    ValueType.UNSIGNED64: (0, _UINT64_MAX),
    ValueType.SIGNED64: (-(2**63), 2**63 - 1),
}

_FLOAT_LIMITS = {
    ValueType.FLOAT32: (-_FLT_MAX, _FLT_MAX),
    ValueType.DOUBLE64: (-_DBL_MAX, _DBL_MAX),
}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*(?P<num>[+-]?(?:"
    r"(?P<mant>\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|(?P<inf>inf(?:inity)?)"
    r"|nan))",
    re.IGNORECASE,
)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _default(value_type: ValueType) -> int | float | bool:
    if value_type == ValueType.BOOLEAN:
        return False
    if value_type in _FLOAT_LIMITS:
        return 0.0
    return 0


def checked_cast(value: int | float, value_type: ValueType) -> int | float | bool:
    """Return ``value`` as ``value_type``, or that type's zero if out of range."""
    value_type = ValueType(value_type)

    if value_type in _INTEGER_LIMITS:
        low, high = _INTEGER_LIMITS[value_type]
        if value < low or value > high:
            return _default(value_type)
        if value_type == ValueType.BOOLEAN:
            return bool(value)
        return int(value)

    if value_type in _FLOAT_LIMITS:
        low, high = _FLOAT_LIMITS[value_type]
        if value < low or value > high:
            return 0.0
        value = float(value)
        return _to_float32(value) if value_type == ValueType.FLOAT32 else value

    raise TypeError(f"no numeric cast to {value_type.name}")


def _parse_integer(text: str) -> tuple[int, bool]:
    """Parse a leading integer; return it and whether it spans all of ``text``."""
    match = _INT_PREFIX.match(text)
    if not match:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1)), match.end() == len(text)


def _parse_unsigned(text: str) -> tuple[int, bool]:
    value, whole = _parse_integer(text)
    if abs(value) > _UINT64_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    # a negative input wraps around like an unsigned conversion does
    return value % (_UINT64_MAX + 1), whole


def _parse_float(text: str, value_type: ValueType) -> float:
    match = _FLOAT_PREFIX.match(text)
    if not match:
        raise ValueError(f"invalid number: {text!r}")

    number = float(match.group("num"))
    literal_inf = match.group("inf") is not None
    has_digits = match.group("mant") is not None and any(
        c in "123456789" for c in match.group("mant")
    )

    if math.isinf(number) and not literal_inf:
        return math.nan

    if value_type == ValueType.FLOAT32 and not math.isnan(number):
        try:
            number = _to_float32(number)
        except OverflowError:
            return math.nan
        smallest = _FLT_MIN
    else:
        smallest = _DBL_MIN

    if math.isfinite(number) and has_digits and abs(number) < smallest:
        return math.nan

    if match.end() != len(text):
        return 0.0
    return number


def string_cast(text: str, value_type: ValueType) -> int | float | bool:
    """Parse ``text`` as a number of ``value_type``.

    Raises ValueError when no number starts the text and OverflowError when an
    integer is out of the parser's range. Trailing characters give the type's
    zero; floating-point overflow and underflow give NaN.
    """
    value_type = ValueType(value_type)

    if value_type in _FLOAT_LIMITS:
        return _parse_float(text, value_type)

    if value_type == ValueType.UNSIGNED64:
        value, whole = _parse_unsigned(text)
        return value if whole else 0

    if value_type == ValueType.UNSIGNED32:
        value, whole = _parse_unsigned(text)
        return checked_cast(value, value_type) if whole else 0

    if value_type == ValueType.SIGNED64:
        value, whole = _parse_integer(text)
        low, high = _INTEGER_LIMITS[value_type]
        if value < low or value > high:
            raise OverflowError(f"integer out of range: {text!r}")
        return value if whole else 0

    if value_type in _INTEGER_LIMITS:
        value, whole = _parse_integer(text)
        low, high = _INT32
        if value < low or value > high:
            raise OverflowError(f"integer out of range: {text!r}")
        if not whole:
            return _default(value_type)
        return checked_cast(value, value_type)

    raise TypeError(f"no numeric conversion to {value_type.name}")


@dataclass(frozen=True)
class DecimalValue:
    """A decimal number kept in its exact textual form."""

    text: str = ""

    def float32(self) -> float:
        """The value as a single-precision float."""
        return string_cast(self.text, ValueType.FLOAT32)

    def double64(self) -> float:
        """The value as a double-precision float."""
        return string_cast(self.text, ValueType.DOUBLE64)

    def __str__(self) -> str:
        return self.text