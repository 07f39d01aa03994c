# mariadbpp

Building blocks for MariaDB and MySQL client code. The package has no dependencies outside the
standard library.

## Modules

- `mariadbpp.types` defines three enums: `ValueType`, `IsolationLevel` and `FieldType`.
  - `column_type(field_type, flags)` maps a server field type and its column flags to a
    `ValueType`. Integer types are signed unless the unsigned flag (32) is set. Unknown codes map
    to `ValueType.STRING`.
  - `check_type(requested, actual)` returns `actual` when a column of that type can be read as
    `requested`. Otherwise it raises `DatabaseConnectionError` with error id 12.
- `mariadbpp.exceptions` holds the error hierarchy. `MariaDBError` carries `error_id` and
  `message`. Its subclasses are `DateTimeError`, `TimeError`, `DatabaseConnectionError` and
  `StatementError`.
- `mariadbpp.conversion` provides numeric conversion and decimals:
  - `checked_cast(value, value_type)` returns the value as the given numeric `ValueType`. A value
    out of range gives that type's zero.
  - `string_cast(text, value_type)` parses text as a number. It raises `ValueError` when no
    number starts the text and `OverflowError` when an integer is out of range. Trailing
    characters give zero. Floating-point overflow and underflow give NaN.
  - `DecimalValue` keeps the exact text of a DECIMAL value and offers `float32()` and
    `double64()`.
- `mariadbpp.data` provides `Data`, a byte buffer with a position. It supports `create`,
  `assign`, `resize`, `destroy`, `read`, `write` and `seek`. `write` never grows the buffer.
- `mariadbpp.time_span` provides `TimeSpan`, a signed duration made of days, hours, minutes,
  seconds and milliseconds.
  - Each part is range-checked, and an out-of-range part raises `ValueError`.
  - It offers `zero()`, `compare()` and the `total_*()` methods.
- `mariadbpp.sqltime` provides `Time`, a time of day with milliseconds. Seconds may go up to 61.
  - Arithmetic wraps around at midnight: `add_hours`, `add_minutes`, `add_seconds`,
    `add_milliseconds`, `add` and `subtract`.
  - `time_between` measures the span between two times.
  - `Time.parse` reads text, and `str_time` formats it.
  - `Time.now` and `Time.now_utc` give the current time.
- `mariadbpp.transaction` provides `Transaction` and `SavePoint`, both context managers.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Time arithmetic wraps around at midnight:

```python
from mariadbpp.sqltime import Time

t = Time(23, 59, 59, 999)
print(t.add_milliseconds(1).str_time(True))   # 00:00:00.000
print(Time.parse("8:9:5-01").str_time(True))  # 08:09:05.001
```

Measuring the time between two values:

```python
from mariadbpp.sqltime import Time

span = Time(13, 37, 42, 7).time_between(Time(12, 37, 42, 7))
print(span.hours, span.negative)              # 1 False
```

Decimals keep the text they were given:

```python
from mariadbpp.conversion import DecimalValue

d = DecimalValue("24.1234")
print(d.double64())                           # 24.1234
```

Transactions and save points:

```python
from mariadbpp.transaction import Transaction
from mariadbpp.types import IsolationLevel

with Transaction(connection, IsolationLevel.READ_COMMITTED, False) as trx:
    with trx.create_save_point() as sp:
        connection.execute("INSERT INTO t (str) VALUES ('x')")
        sp.commit()
    trx.commit()
```

The connection object must have three methods: `execute(sql)`, `commit()` and `rollback()`.

When a transaction is created, it sets the isolation level and starts the transaction.

If a transaction leaves its `with` block without `commit()`, it calls the connection's
`rollback()`. A save point left without `commit()` runs `ROLLBACK TO SAVEPOINT`.

`create_save_point()` returns `None` once the transaction has ended.

## What this package does not do

This package does not talk to a server. It has no connection, account, prepared statement,
result set or background query execution of its own. You supply the connection object that
`Transaction` drives. The other modules only describe, convert and check values.