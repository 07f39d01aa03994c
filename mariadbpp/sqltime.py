"""Time of day with millisecond precision, as used by SQL TIME columns."""

from __future__ import annotations

import time as _time
from copy import copy
from functools import total_ordering
from typing import Any

from .exceptions import TimeError
from .time_span import TimeSpan

MS_PER_SEC = 1000
MS_PER_MIN = MS_PER_SEC * 60
MS_PER_HOUR = MS_PER_MIN * 60
MS_PER_DAY = MS_PER_HOUR * 24

_U16_MAX = 2**16 - 1


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _read_number(text: str, pos: int) -> tuple[int, int] | None:
    """Read an unsigned 16-bit number the way a formatted stream extraction does."""
    pos = _skip_space(text, pos)
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and text[pos].isdigit():
        pos += 1
    if pos == start:
        return None
    value = int(text[start:pos])
    if value > _U16_MAX or (negative and value != 0):
        return None
    return value, pos


def _read_char(text: str, pos: int) -> int | None:
    """Skip whitespace and consume one character; return the new position."""
    pos = _skip_space(text, pos)
    if pos >= len(text):
        return None
    return pos + 1


@total_ordering
class Time:
    """A time of day: hours, minutes, seconds (leap seconds allowed) and milliseconds."""

    __slots__ = ("_hour", "_minute", "_second", "_millisecond")

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0, millisecond: int = 0) -> None:
        self._hour = 0
        self._minute = 0
        self._second = 0
        self._millisecond = 0
        self.set(hour, minute, second, millisecond)

    @classmethod
    def parse(cls, text: str) -> Time:
        """Build a time from ``hh[:mm][:ss][.nnn]`` with any delimiters."""
        result = cls()
        result.set_from_string(text)
        return result

    @classmethod
    def from_struct_time(cls, struct: Any) -> Time:
        """Build a time from the hour, minute and second of a ``time.struct_time``."""
        return cls(struct.tm_hour, struct.tm_min, struct.tm_sec, 0)

    @classmethod
    def from_timestamp(cls, timestamp: float) -> Time:
        """Build a time from the local time of a POSIX timestamp."""
        return cls.from_struct_time(_time.localtime(timestamp))

    def set(self, hour: int, minute: int, second: int, millisecond: int) -> None:
        """Assign all parts without validating them."""
        self._hour = int(hour)
        self._minute = int(minute)
        self._second = int(second)
        self._millisecond = int(millisecond)

    def set_from_string(self, text: str) -> None:
        """Assign from ``hh[:mm][:ss][.nnn]``; raise ValueError on a bad format."""
        read = _read_number(text, 0)
        if read is not None and read[0] < 24:
            hour, pos = read
            if pos == len(text):
                self.set(hour, 0, 0, 0)
                return
            pos = _read_char(text, pos)
            read = _read_number(text, pos) if pos is not None else None
            if read is not None and read[0] < 60:
                minute, pos = read
                if pos == len(text):
                    self.set(hour, minute, 0, 0)
                    return
                pos = _read_char(text, pos)
                read = _read_number(text, pos) if pos is not None else None
                if read is not None and read[0] < 62:
                    second, pos = read
                    if pos == len(text):
                        self.set(hour, minute, second, 0)
                        return
                    pos = _read_char(text, pos)
                    read = _read_number(text, pos) if pos is not None else None
                    if read is not None:
                        self.set(hour, minute, second, read[0])
                        return
        raise ValueError("invalid time format")

    @property
    def hour(self) -> int:
        return self._hour

    @hour.setter
    def hour(self, value: int) -> None:
        if value < 0 or value > 23:
            raise TimeError(value, self._minute, self._second, self._millisecond)
        self._hour = value

    @property
    def minute(self) -> int:
        return self._minute

    @minute.setter
    def minute(self, value: int) -> None:
        if value < 0 or value > 59:
            raise TimeError(self._hour, value, self._second, self._millisecond)
        self._minute = value

    @property
    def second(self) -> int:
        return self._second

    @second.setter
    def second(self, value: int) -> None:
        # up to 61 to allow for leap seconds
        if value < 0 or value > 61:
            raise TimeError(self._hour, self._minute, value, self._millisecond)
        self._second = value

    @property
    def millisecond(self) -> int:
        return self._millisecond

    @millisecond.setter
    def millisecond(self, value: int) -> None:
        if value < 0 or value > 999:
            raise TimeError(self._hour, self._minute, self._second, value)
        self._millisecond = value

    def _parts(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._millisecond)

    def compare(self, other: Time) -> int:
        """Return -1, 0 or 1 as this time is before, equal to or after ``other``."""
        mine, theirs = self._parts(), other._parts()
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.compare(other) < 0

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Time:
        return Time(*self._parts())

    def add_hours(self, hours: int) -> Time:
        """Return this time plus ``hours``, wrapping around the day."""
        result = copy(self)
        if hours == 0:
            return result
        result.hour = (hours + self._hour) % 24
        return result

    def add_minutes(self, minutes: int) -> Time:
        """Return this time plus ``minutes``, carrying into hours."""
        result = copy(self)
        if minutes == 0:
            return result
        hours, minute = divmod(self._minute + minutes, 60)
        if hours:
            result = result.add_hours(hours)
        result.minute = minute
        return result

    def add_seconds(self, seconds: int) -> Time:
        """Return this time plus ``seconds``, carrying into minutes."""
        result = copy(self)
        if seconds == 0:
            return result
        minutes, second = divmod(self._second + seconds, 60)
        if minutes:
            result = result.add_minutes(minutes)
        result.second = second
        return result

    def add_milliseconds(self, milliseconds: int) -> Time:
        """Return this time plus ``milliseconds``, carrying into seconds."""
        result = copy(self)
        if milliseconds == 0:
            return result
        seconds, millisecond = divmod(self._millisecond + milliseconds, 1000)
        if seconds:
            result = result.add_seconds(seconds)
        result.millisecond = millisecond
        return result

    def add(self, span: TimeSpan) -> Time:
        """Return this time shifted by ``span``; whole days have no effect."""
        sign = -1 if span.negative else 1
        return (
            self.add_hours(sign * span.hours)
            .add_minutes(sign * span.minutes)
            .add_seconds(sign * span.seconds)
            .add_milliseconds(sign * span.milliseconds)
        )

    def subtract(self, span: TimeSpan) -> Time:
        """Return this time shifted back by ``span``."""
        negated = copy(span)
        negated.negative = not span.negative
        return self.add(negated)

    def time_between(self, other: Time) -> TimeSpan:
        """The span from ``other`` to this time; negative if ``other`` is later."""
        if other == self:
            return TimeSpan(0, 0, 0, 0, 0)

        if other > self:
            span = other.time_between(self)
            span.negative = True
            return span

        def total(t: Time) -> int:
            return (
                t.hour * MS_PER_HOUR + t.minute * MS_PER_MIN + t.second * MS_PER_SEC + t.millisecond
            )

        ms, other_ms = total(self), total(other)
        total_ms = MS_PER_DAY - (other_ms - ms) if other_ms > ms else ms - other_ms

        hours, total_ms = divmod(total_ms, MS_PER_HOUR)
        minutes, total_ms = divmod(total_ms, MS_PER_MIN)
        seconds, total_ms = divmod(total_ms, MS_PER_SEC)
        return TimeSpan(0, hours, minutes, seconds, total_ms, False)

    def mktime(self) -> float:
        """Local timestamp of this time on a fixed reference date."""
        return _time.mktime((3800, 1, 1, self._hour, self._minute, self._second, 0, 1, -1))

    def diff_time(self, other: Time) -> float:
        """Difference ``self - other`` in whole seconds."""
        return float(self.mktime() - other.mktime())

    def is_valid(self) -> bool:
        return Time.valid_time(*self._parts())

    @staticmethod
    def valid_time(hour: int, minute: int, second: int, millisecond: int) -> bool:
        """True if the parts are within range; seconds may go up to 61."""
        return 0 <= hour < 24 and 0 <= minute < 60 and 0 <= second <= 61 and 0 <= millisecond < 1000

    def str_time(self, with_millisecond: bool = False) -> str:
        """Format as ``hh:mm:ss`` or ``hh:mm:ss.nnn``."""
        text = f"{self._hour:02d}:{self._minute:02d}:{self._second:02d}"
        if with_millisecond:
            text += f".{self._millisecond:03d}"
        return text

    @classmethod
    def now(cls) -> Time:
        """The current local time."""
        stamp = _time.time()
        millis = int(stamp * 1000) % 1000
        return cls.from_struct_time(_time.localtime(stamp)).add_milliseconds(millis)

    @classmethod
    def now_utc(cls) -> Time:
        """The current time in UTC."""
        stamp = _time.time()
        millis = int(stamp * 1000) % 1000
        return cls.from_struct_time(_time.gmtime(stamp)).add_milliseconds(millis)

    def __str__(self) -> str:
        return self.str_time(True)

    def __repr__(self) -> str:
        return f"Time({self._hour}, {self._minute}, {self._second}, {self._millisecond})"