"""Exceptions raised by the client."""

from __future__ import annotations


class MariaDBError(Exception):
    """Base error carrying a numeric error id and a message."""

    def __init__(self, error_id: int = 0, message: str = "Exception not defined") -> None:
        super().__init__(message)
        self.error_id = error_id
        self.message = message

    @property
    def error_no(self) -> int:
        """The numeric error id."""
        return self.error_id

    def __str__(self) -> str:
        return self.message


class DateTimeError(MariaDBError):
    """Raised for an invalid combination of date and time parts."""

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        millisecond: int,
    ) -> None:
        super().__init__(
            0,
            f"invalid date time {year:04d}-{month:02d}-{day:02d} "
            f"{hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}",
        )
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour
        self.minute = minute
        self.second = second
        self.millisecond = millisecond


class TimeError(MariaDBError):
    """Raised for an invalid combination of time parts."""

    def __init__(self, hour: int, minute: int, second: int, millisecond: int) -> None:
        super().__init__(
            0,
            f"invalid time {hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}",
        )
        self.hour = hour
        self.minute = minute
        self.second = second
        self.millisecond = millisecond


class DatabaseConnectionError(MariaDBError):
    """Raised for errors reported on a connection."""


class StatementError(MariaDBError):
    """Raised for errors reported on a prepared statement."""