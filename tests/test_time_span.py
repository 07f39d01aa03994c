import copy

import pytest

from mariadbpp.time_span import TimeSpan


@pytest.mark.parametrize(
    "args",
    [
        (0, 33, 37, 42, 7, True),
        (0, 3, 66, 42, 7),
        (0, 3, 37, 100, 7),
        (0, 3, 37, 42, 1001),
    ],
)
def test_invalid_parts_raise(args):
    with pytest.raises(ValueError):
        TimeSpan(*args)


def test_span_from_source():
    a = TimeSpan()
    b = TimeSpan(1, 3, 37, 42, 7)
    c = TimeSpan(0, 3, 37, 42, 7, True)
    e = copy.copy(b)

    assert b == e
    assert a.zero()
    assert not a.negative

    assert a != b
    assert b != c

    c.days = 1
    assert b != c

    c.negative = False
    assert b == c

    c.days = 0
    assert b.total_hours() == c.total_hours() + 24
    assert b.total_minutes() == c.total_minutes() + 24 * 60
    assert b.total_seconds() == c.total_seconds() + 24 * 60 * 60
    assert b.total_milliseconds() == c.total_milliseconds() + 24 * 60 * 60 * 1000


def test_negative_orders_before_positive():
    neg = TimeSpan(5, negative=True)
    pos = TimeSpan(0, 1)
    assert neg < pos
    assert pos > neg
    assert neg.compare(pos) == -1
    assert pos.compare(neg) == 1


def test_ordering_by_parts():
    assert TimeSpan(0, 1) < TimeSpan(1)
    assert TimeSpan(0, 0, 0, 0, 2) > TimeSpan(0, 0, 0, 0, 1)
    assert TimeSpan(0, 2, 3) <= TimeSpan(0, 2, 3)


def test_setter_validation():
    span = TimeSpan()
    with pytest.raises(ValueError):
        span.hours = 24
    with pytest.raises(ValueError):
        span.seconds = 61
    span.seconds = 60
    assert span.seconds == 60


def test_set_assigns_all_parts():
    span = TimeSpan()
    span.set(2, 3, 4, 5, 6, True)
    assert (span.days, span.hours, span.minutes, span.seconds, span.milliseconds) == (2, 3, 4, 5, 6)
    assert span.negative


def test_str_format():
    assert str(TimeSpan(1, 3, 37, 42, 7)) == "1 days, 3 hours, 37 minutes, 42 seconds, 7 milliseconds"
    assert str(TimeSpan(0, 3, 37, 42, 7, True)).startswith("negative 0 days")