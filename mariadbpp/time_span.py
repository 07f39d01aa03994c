"""A signed duration made of days, hours, minutes, seconds and milliseconds."""

from __future__ import annotations

from functools import total_ordering

_U32_MAX = 2**32 - 1


def _check(value: int, limit: int, what: str) -> int:
    if value < 0 or value > limit:
        raise ValueError(f"{what} must be < {limit + 1}")
    return value


@total_ordering
class TimeSpan:
    """A duration with an explicit sign."""

    __slots__ = ("_days", "_hours", "_minutes", "_seconds", "_milliseconds", "_negative")

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        negative: bool = False,
    ) -> None:
        self._days = 0
        self._hours = 0
        self._minutes = 0
        self._seconds = 0
        self._milliseconds = 0
        self._negative = False
        self.set(days, hours, minutes, seconds, milliseconds, negative)

    def set(
        self,
        days: int,
        hours: int,
        minutes: int,
        seconds: int,
        milliseconds: int,
        negative: bool = False,
    ) -> None:
        """Assign all parts, validating each."""
        self.negative = negative
        self.days = days
        self.hours = hours
        self.minutes = minutes
        self.seconds = seconds
        self.milliseconds = milliseconds

    @property
    def days(self) -> int:
        return self._days

    @days.setter
    def days(self, value: int) -> None:
        self._days = _check(value, _U32_MAX, "Days")

    @property
    def hours(self) -> int:
        return self._hours

    @hours.setter
    def hours(self, value: int) -> None:
        self._hours = _check(value, 23, "Hours")

    @property
    def minutes(self) -> int:
        return self._minutes

    @minutes.setter
    def minutes(self, value: int) -> None:
        self._minutes = _check(value, 59, "Minutes")

    @property
    def seconds(self) -> int:
        return self._seconds

    @seconds.setter
    def seconds(self, value: int) -> None:
        self._seconds = _check(value, 60, "Seconds")

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    @milliseconds.setter
    def milliseconds(self, value: int) -> None:
        self._milliseconds = _check(value, 999, "Milliseconds")

    @property
    def negative(self) -> bool:
        return self._negative

    @negative.setter
    def negative(self, value: bool) -> None:
        self._negative = bool(value)

    def zero(self) -> bool:
        """True if every part is zero, regardless of sign."""
        return not (self._days or self._hours or self._minutes or self._seconds or self._milliseconds)

    def _parts(self) -> tuple[int, int, int, int, int]:
        return (self._days, self._hours, self._minutes, self._seconds, self._milliseconds)

    def compare(self, other: TimeSpan) -> int:
        """Return -1, 0 or 1; any negative span orders before any positive one."""
        if self._negative != other._negative:
            return -1 if self._negative else 1
        if self.zero() and other.zero():
            return 0
        mine, theirs = self._parts(), other._parts()
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.compare(other) < 0

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> TimeSpan:
        return TimeSpan(*self._parts(), self._negative)

    def total_hours(self) -> int:
        return self._days * 24 + self._hours

    def total_minutes(self) -> int:
        return self.total_hours() * 60 + self._minutes

    def total_seconds(self) -> int:
        return self.total_minutes() * 60 + self._seconds

    def total_milliseconds(self) -> int:
        return self.total_seconds() * 1000 + self._milliseconds

    def __str__(self) -> str:
        prefix = "negative " if self._negative else ""
        return (
            f"{prefix}{self._days} days, {self._hours} hours, {self._minutes} minutes, "
            f"{self._seconds} seconds, {self._milliseconds} milliseconds"
        )

    def __repr__(self) -> str:
        return (
            f"TimeSpan({self._days}, {self._hours}, {self._minutes}, "
            f"{self._seconds}, {self._milliseconds}, negative={self._negative})"
        )