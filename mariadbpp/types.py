"""Value types, isolation levels and the mapping from server field types."""

from __future__ import annotations

from enum import IntEnum

from .exceptions import DatabaseConnectionError

UNSIGNED_FLAG = 32
"""Column flag set by the server for unsigned numeric columns."""

TYPE_ERROR_ID = 12


class ValueType(IntEnum):
    """Type of a value as seen by the client."""

    NULL = 0
    BLOB = 1
    DATA = 2
    DATE = 3
    DATE_TIME = 4
    TIME = 5
    STRING = 6
    BOOLEAN = 7
    DECIMAL = 8
    UNSIGNED8 = 9
    SIGNED8 = 10
    UNSIGNED16 = 11
    SIGNED16 = 12
    UNSIGNED32 = 13
    SIGNED32 = 14
    UNSIGNED64 = 15
    SIGNED64 = 16
    FLOAT32 = 17
    DOUBLE64 = 18
    ENUMERATION = 19


class IsolationLevel(IntEnum):
    """Transaction isolation level."""

    REPEATABLE_READ = 0
    READ_COMMITTED = 1
    READ_UNCOMMITTED = 2
    SERIALIZABLE = 3


class FieldType(IntEnum):
    """Column type codes as sent by the server in result metadata."""

    DECIMAL = 0
    TINY = 1
    SHORT = 2
    LONG = 3
    FLOAT = 4
    DOUBLE = 5
    NULL = 6
    TIMESTAMP = 7
    LONGLONG = 8
    INT24 = 9
    DATE = 10
    TIME = 11
    DATETIME = 12
    YEAR = 13
    NEWDATE = 14
    VARCHAR = 15
    BIT = 16
    JSON = 245
    NEWDECIMAL = 246
    ENUM = 247
    SET = 248
    TINY_BLOB = 249
    MEDIUM_BLOB = 250
    LONG_BLOB = 251
    BLOB = 252
    VAR_STRING = 253
    STRING = 254
    GEOMETRY = 255


_FIXED_TYPES = {
    FieldType.NULL: ValueType.NULL,
    FieldType.BIT: ValueType.BOOLEAN,
    FieldType.FLOAT: ValueType.FLOAT32,
    FieldType.DECIMAL: ValueType.DECIMAL,
    FieldType.NEWDECIMAL: ValueType.DECIMAL,
    FieldType.DOUBLE: ValueType.DOUBLE64,
    FieldType.NEWDATE: ValueType.DATE,
    FieldType.DATE: ValueType.DATE,
    FieldType.TIME: ValueType.TIME,
    FieldType.TIMESTAMP: ValueType.DATE_TIME,
    FieldType.DATETIME: ValueType.DATE_TIME,
    FieldType.TINY_BLOB: ValueType.BLOB,
    FieldType.MEDIUM_BLOB: ValueType.BLOB,
    FieldType.LONG_BLOB: ValueType.BLOB,
    FieldType.BLOB: ValueType.BLOB,
    FieldType.ENUM: ValueType.ENUMERATION,
}

# field type -> (unsigned value type, signed value type)
_INTEGER_TYPES = {
    FieldType.TINY: (ValueType.UNSIGNED8, ValueType.SIGNED8),
    FieldType.YEAR: (ValueType.UNSIGNED16, ValueType.SIGNED16),
    FieldType.SHORT: (ValueType.UNSIGNED16, ValueType.SIGNED16),
    FieldType.INT24: (ValueType.UNSIGNED32, ValueType.SIGNED32),
    FieldType.LONG: (ValueType.UNSIGNED32, ValueType.SIGNED32),
    FieldType.LONGLONG: (ValueType.UNSIGNED64, ValueType.SIGNED64),
}


def column_type(field_type: int, flags: int = 0) -> ValueType:
    """Map a server field type and its column flags to a value type."""
    try:
        field = FieldType(field_type)
    except ValueError:
        return ValueType.STRING

    if field in _FIXED_TYPES:
        return _FIXED_TYPES[field]

    if field in _INTEGER_TYPES:
        unsigned, signed = _INTEGER_TYPES[field]
        return unsigned if (flags & UNSIGNED_FLAG) == UNSIGNED_FLAG else signed

    return ValueType.STRING


def _exact(value_type: ValueType) -> frozenset[ValueType]:
    return frozenset({value_type})


_TEXT_TYPES = frozenset({ValueType.STRING, ValueType.BLOB, ValueType.DATA, ValueType.NULL})

_COMPATIBLE: dict[ValueType, frozenset[ValueType]] = {
    **{t: _exact(t) for t in (
        ValueType.FLOAT32,
        ValueType.DOUBLE64,
        ValueType.DECIMAL,
        ValueType.TIME,
        ValueType.DATE_TIME,
        ValueType.DATE,
        ValueType.ENUMERATION,
    )},
    **{t: frozenset({ValueType.SIGNED8, ValueType.UNSIGNED8})
       for t in (ValueType.SIGNED8, ValueType.UNSIGNED8)},
    **{t: frozenset({ValueType.SIGNED16, ValueType.UNSIGNED16})
       for t in (ValueType.SIGNED16, ValueType.UNSIGNED16)},
    **{t: frozenset({ValueType.SIGNED32, ValueType.UNSIGNED32})
       for t in (ValueType.SIGNED32, ValueType.UNSIGNED32)},
    **{t: frozenset({ValueType.SIGNED64, ValueType.UNSIGNED64})
       for t in (ValueType.SIGNED64, ValueType.UNSIGNED64)},
    ValueType.BOOLEAN: frozenset({ValueType.BOOLEAN, ValueType.SIGNED8}),
    **{t: _TEXT_TYPES for t in (ValueType.STRING, ValueType.BLOB, ValueType.DATA)},
}


def check_type(requested: ValueType, actual: ValueType) -> ValueType:
    """Return ``actual`` if a column of that type can be read as ``requested``.

    Raises DatabaseConnectionError when the types are incompatible.
    """
    requested = ValueType(requested)
    actual = ValueType(actual)
    allowed = _COMPATIBLE.get(requested)
    if allowed is not None and actual not in allowed:
        raise DatabaseConnectionError(
            TYPE_ERROR_ID,
            f"type error: requested type {int(requested)} "
            f"does not match actual type {int(actual)}",
        )
    return actual