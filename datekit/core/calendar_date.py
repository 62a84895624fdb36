"""CalendarDate class representing a day in the Gregorian calendar.

This module provides the CalendarDate value type: a proleptic Gregorian
calendar day with an optional time of day, unbounded years, and field
rollover on construction.
"""

from __future__ import annotations

import datetime

from datekit._internal.calendar import (
    days_in_month,
    is_leap_year,
    normalize_month,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from datekit._internal.constants import (
    MICROS_PER_DAY,
    MICROS_PER_HOUR,
    MICROS_PER_MINUTE,
    MICROS_PER_SECOND,
    STDLIB_MAX_YEAR,
    STDLIB_MIN_YEAR,
)
from datekit._internal.validation import as_int
from datekit.errors import ConversionError
from datekit.format.date import format_date
from datekit.logging_config import get_logger

logger = get_logger(__name__)


class CalendarDate:
    """An instant within a day of the proleptic Gregorian calendar.

    CalendarDate carries year, month and day plus a time of day
    (hour, minute, second, microsecond). Years are unbounded and use
    astronomical numbering, where year 0 exists and equals 1 BCE.

    Fields outside their usual range roll over instead of raising:
    day 32 of January is February 1, month 13 is January of the next
    year, day 0 is the last day of the previous month, and hour 24 is
    midnight of the following day.

    Instances are immutable. Internally a CalendarDate is an ordinal
    day number (ordinal 1 = 0001-01-01) plus microseconds since
    midnight.

    Attributes:
        year: The year (can be 0 or negative).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        microsecond: The microsecond (0-999999).

    Examples:
        >>> CalendarDate(2023, 1, 31)
        CalendarDate(2023, 1, 31)

        >>> CalendarDate(2023, 1, 32)  # Rolls into February
        CalendarDate(2023, 2, 1)

        >>> CalendarDate(2024, 3, 0)  # Last day of February
        CalendarDate(2024, 2, 29)
    """

    __slots__ = ("_ordinal", "_micros")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> None:
        """Create a CalendarDate, rolling out-of-range fields over.

        Args:
            year: The year.
            month: The month; values outside 1-12 carry into the year.
            day: The day; values outside the month carry into the month.
            hour: The hour; values outside 0-23 carry into the day.
            minute: The minute.
            second: The second.
            microsecond: The microsecond.

        Raises:
            TypeError: If any field is not an integer.
        """
        year = as_int("year", year)
        month = as_int("month", month)
        day = as_int("day", day)
        hour = as_int("hour", hour)
        minute = as_int("minute", minute)
        second = as_int("second", second)
        microsecond = as_int("microsecond", microsecond)

        norm_year, norm_month = normalize_month(year, month)
        ordinal = ymd_to_ordinal(norm_year, norm_month, 1) + day - 1

        micros = (
            hour * MICROS_PER_HOUR
            + minute * MICROS_PER_MINUTE
            + second * MICROS_PER_SECOND
            + microsecond
        )
        carry_days, micros = divmod(micros, MICROS_PER_DAY)

        self._ordinal = ordinal + carry_days
        self._micros = micros

        if (
            norm_month != month
            or not 1 <= day <= days_in_month(norm_year, norm_month)
            or not 0 <= hour < 24
            or not 0 <= minute < 60
            or not 0 <= second < 60
            or not 0 <= microsecond < MICROS_PER_SECOND
        ):
            logger.debug(
                "normalized out-of-range fields (%d, %d, %d, %d, %d, %d, %d) to %r",
                year, month, day, hour, minute, second, microsecond, self,
            )

    @classmethod
    def _from_parts(cls, ordinal: int, micros: int) -> CalendarDate:
        """Build directly from an ordinal and microseconds since midnight."""
        carry_days, micros = divmod(micros, MICROS_PER_DAY)
        result = cls.__new__(cls)
        result._ordinal = ordinal + carry_days
        result._micros = micros
        return result

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate at midnight of an ordinal day.

        Ordinal 1 = 0001-01-01, the same numbering as
        ``datetime.date.toordinal()``.

        Examples:
            >>> CalendarDate.from_ordinal(1)
            CalendarDate(1, 1, 1)

            >>> CalendarDate.from_ordinal(738900)
            CalendarDate(2024, 1, 15)
        """
        return cls._from_parts(as_int("ordinal", ordinal), 0)

    @classmethod
    def from_date(cls, value: datetime.date) -> CalendarDate:
        """Create a CalendarDate from a stdlib date or datetime.

        The time of day is copied from datetimes; tzinfo is dropped and
        the wall-clock fields are kept as they are.

        Args:
            value: A ``datetime.date`` or ``datetime.datetime``.

        Returns:
            The equivalent CalendarDate.

        Raises:
            TypeError: If value is not a date or datetime.

        Examples:
            >>> import datetime
            >>> CalendarDate.from_date(datetime.date(2024, 1, 15))
            CalendarDate(2024, 1, 15)
        """
        if not isinstance(value, datetime.date):
            raise TypeError(
                f"expected datetime.date or datetime.datetime, got {type(value).__name__}"
            )

        micros = 0
        if isinstance(value, datetime.datetime):
            micros = (
                value.hour * MICROS_PER_HOUR
                + value.minute * MICROS_PER_MINUTE
                + value.second * MICROS_PER_SECOND
                + value.microsecond
            )
        return cls._from_parts(value.toordinal(), micros)

    @classmethod
    def today(cls) -> CalendarDate:
        """Return the current local date and time."""
        return cls.from_date(datetime.datetime.now())

    @property
    def year(self) -> int:
        """Return the year component."""
        return ordinal_to_ymd(self._ordinal)[0]

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return ordinal_to_ymd(self._ordinal)[1]

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return ordinal_to_ymd(self._ordinal)[2]

    @property
    def hour(self) -> int:
        return self._micros // MICROS_PER_HOUR

    @property
    def minute(self) -> int:
        return self._micros % MICROS_PER_HOUR // MICROS_PER_MINUTE

    @property
    def second(self) -> int:
        return self._micros % MICROS_PER_MINUTE // MICROS_PER_SECOND

    @property
    def microsecond(self) -> int:
        return self._micros % MICROS_PER_SECOND

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date falls in a leap year.

        Examples:
            >>> CalendarDate(2024, 1, 1).is_leap_year
            True
            >>> CalendarDate(1900, 1, 1).is_leap_year
            False
        """
        return is_leap_year(self.year)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        microsecond: int | None = None,
    ) -> CalendarDate:
        """Return a new CalendarDate with the given fields replaced.

        Replaced fields roll over exactly as in the constructor.

        Examples:
            >>> CalendarDate(2024, 1, 31).replace(month=2)
            CalendarDate(2024, 3, 2)
        """
        y, m, d = ordinal_to_ymd(self._ordinal)
        return CalendarDate(
            y if year is None else year,
            m if month is None else month,
            d if day is None else day,
            self.hour if hour is None else hour,
            self.minute if minute is None else minute,
            self.second if second is None else second,
            self.microsecond if microsecond is None else microsecond,
        )

    def add_days(self, days: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of days.

        The time of day is unchanged.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new CalendarDate offset by the specified days.

        Raises:
            TypeError: If days is not an integer.

        Examples:
            >>> CalendarDate(2023, 12, 31).add_days(1)
            CalendarDate(2024, 1, 1)

            >>> CalendarDate(2024, 3, 1).add_days(-1)
            CalendarDate(2024, 2, 29)
        """
        return CalendarDate._from_parts(
            self._ordinal + as_int("days", days), self._micros
        )

    def to_ordinal(self) -> int:
        """Return the ordinal day number (ordinal 1 = 0001-01-01)."""
        return self._ordinal

    def to_date(self) -> datetime.date:
        """Return the calendar day as a stdlib ``datetime.date``.

        Raises:
            ConversionError: If the year is outside 1-9999.
        """
        self._check_stdlib_range()
        return datetime.date.fromordinal(self._ordinal)

    def to_datetime(self) -> datetime.datetime:
        """Return a naive stdlib ``datetime.datetime`` with the same fields.

        Raises:
            ConversionError: If the year is outside 1-9999.

        Examples:
            >>> CalendarDate(2024, 1, 15, 9, 30).to_datetime()
            datetime.datetime(2024, 1, 15, 9, 30)
        """
        self._check_stdlib_range()
        return datetime.datetime.combine(
            datetime.date.fromordinal(self._ordinal),
            datetime.time(self.hour, self.minute, self.second, self.microsecond),
        )

    def _check_stdlib_range(self) -> None:
        year = self.year
        if year < STDLIB_MIN_YEAR or year > STDLIB_MAX_YEAR:
            raise ConversionError(
                f"year {year} is out of range for datetime "
                f"({STDLIB_MIN_YEAR}-{STDLIB_MAX_YEAR})"
            )

    def __add__(self, other: object) -> CalendarDate:
        """Add a ``datetime.timedelta``.

        Examples:
            >>> CalendarDate(2023, 1, 31) + datetime.timedelta(days=1)
            CalendarDate(2023, 2, 1)
        """
        if not isinstance(other, datetime.timedelta):
            return NotImplemented  # type: ignore[return-value]
        return CalendarDate._from_parts(
            self._ordinal + other.days,
            self._micros + other.seconds * MICROS_PER_SECOND + other.microseconds,
        )

    __radd__ = __add__

    def __sub__(self, other: object) -> CalendarDate | datetime.timedelta:
        """Subtract a timedelta, or another CalendarDate to get a timedelta."""
        if isinstance(other, datetime.timedelta):
            return self + (-other)
        if isinstance(other, CalendarDate):
            return datetime.timedelta(
                days=self._ordinal - other._ordinal,
                microseconds=self._micros - other._micros,
            )
        return NotImplemented  # type: ignore[return-value]

    def _key(self) -> tuple[int, int]:
        return (self._ordinal, self._micros)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a string like 'CalendarDate(2024, 1, 15)'.

        Time fields are shown only when the time of day is not midnight.
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        if self._micros == 0:
            return f"CalendarDate({year}, {month}, {day})"
        return (
            f"CalendarDate({year}, {month}, {day}, {self.hour}, "
            f"{self.minute}, {self.second}, {self.microsecond})"
        )

    def __str__(self) -> str:
        """Return the date as YYYY-MM-DD."""
        return format_date(self)


__all__ = ["CalendarDate"]
