# -*- coding: utf-8 -*-
"""A module for housing the Ethiopian date type and its conversions.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
EthiopianDate -- Immutable Ethiopian (year, month, day) value.

Exported Functions:
to_ethiopian -- Converts a Gregorian date to an EthiopianDate.
to_gregorian -- Converts an Ethiopian date to a Gregorian date.
is_valid -- Checks an Ethiopian date against the calendar and year range.
add_days -- Adds a number of days to an Ethiopian date.
add_years -- Adds a number of years to an Ethiopian date.
compare -- Orders two Ethiopian dates.
weekday -- Weekday of an Ethiopian date (Monday=1 .. Sunday=7).
month_start_weekday -- Weekday of the first day of an Ethiopian month.
gregorian_day_number -- Lenient Gregorian day number for display code.
today -- The current Ethiopian date.
parse -- Parses a "YYYY-MM-DD" Ethiopian date string.
from_parts -- Builds an EthiopianDate from its parts.
as_ethiopian -- Coerces an EthiopianDate or (year, month, day) argument.
ethiopian_from_ticks -- Converts POSIX seconds to an EthiopianDate.
ethiopian_to_ticks -- Converts an Ethiopian date to POSIX seconds.
to_jd -- Julian Day Number of an Ethiopian date.
from_jd -- Ethiopian date of a Julian Day Number.
previous_month -- First day of the preceding Ethiopian month.
next_month -- First day of the following Ethiopian month.
calendar_days -- Gregorian dates of a six week month grid.
"""

__all__ = ['MIN_YEAR', 'MAX_YEAR', 'TICKSDAY', 'EthiopianDate',
           'to_ethiopian', 'to_gregorian', 'is_valid', 'add_days',
           'add_years', 'compare', 'weekday', 'month_start_weekday',
           'gregorian_day_number', 'today', 'parse', 'from_parts',
           'ethiopian_from_ticks', 'ethiopian_to_ticks', 'to_jd', 'from_jd',
           'previous_month', 'next_month', 'calendar_days', 'as_ethiopian']

import logging
from collections import namedtuple
from datetime import datetime as Timestamp, date as Date
from datetime import timedelta as TimeDelta

try:
    from typing import Any, List, Optional, Union  # pylint: disable=unused-import
except ImportError:
    pass

from pytz import utc as UTC

from .exception import DataError, InterfaceError
from .calendar import ETHIOPIAN_OFFSET, is_leap_year_ethiopian, month_length
from .calendar import ethiopian_ymd2day, ethiopian_day2ymd
from .calendar import gregorian_ymd2day, gregorian_day2ymd, day2weekday
from .calendar import ethiopian_to_jd, jd_to_ethiopian
from .names import AMH, month_name

_log = logging.getLogger(__name__)

MIN_YEAR = 1000
MAX_YEAR = 3000
TICKSDAY = 86400
UNIX_EPOCH_DAY = gregorian_ymd2day(1970, 1, 1)


class EthiopianDate(namedtuple('EthiopianDate', ['year', 'month', 'day'])):
    """An Ethiopian calendar date.

    Fields are ordered (year, month, day) so comparison operators order
    dates chronologically.
    """

    __slots__ = ()

    def __str__(self):
        # type: () -> str
        """Amharic long form, e.g. "15 መስከረም 2016"."""
        return '%d %s %d' % (self.day, month_name(self.month, AMH), self.year)

    def short(self):
        # type: () -> str
        return '%d/%d/%d' % (self.day, self.month, self.year)

    def isoformat(self):
        # type: () -> str
        return '%d-%02d-%02d' % (self.year, self.month, self.day)


def _as_gregorian(value):
    # type: (Any) -> Date
    # datetime is a subclass of date so it must be checked first.
    if isinstance(value, Timestamp):
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(UTC)
        return value.date()
    if isinstance(value, Date):
        return value
    raise InterfaceError("Expected a date or datetime, got %r" % (value,))


def as_ethiopian(value):
    # type: (Any) -> EthiopianDate
    if isinstance(value, EthiopianDate):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 3 \
            and all(isinstance(v, int) and not isinstance(v, bool) for v in value):
        return EthiopianDate(*value)
    raise InterfaceError("Expected an EthiopianDate or (year, month, day), got %r"
                         % (value,))


def _check_valid(edate):
    # type: (EthiopianDate) -> None
    if not is_valid(edate):
        raise DataError("Invalid Ethiopian date %s-%s-%s"
                        % (edate.day, edate.month, edate.year))


def to_ethiopian(value):
    # type: (Date) -> EthiopianDate
    """Convert a Gregorian date (or datetime, taken in UTC) to Ethiopian."""
    gdate = _as_gregorian(value)
    daynum = gregorian_ymd2day(gdate.year, gdate.month, gdate.day)
    return EthiopianDate(*ethiopian_day2ymd(daynum - ETHIOPIAN_OFFSET))


def to_gregorian(value):
    # type: (Union[EthiopianDate, tuple]) -> Date
    """Convert an EthiopianDate or (year, month, day) to a Gregorian date."""
    edate = as_ethiopian(value)
    daynum = ethiopian_ymd2day(edate.year, edate.month, edate.day)
    y, m, d = gregorian_day2ymd(daynum + ETHIOPIAN_OFFSET)
    try:
        return Date(year=y, month=m, day=d)
    except ValueError as e:
        raise DataError("Ethiopian date %s-%s-%s has no Gregorian date: %s"
                        % (edate.day, edate.month, edate.year, e))


def is_valid(value):
    # type: (Union[EthiopianDate, tuple]) -> bool
    """Check an Ethiopian date.

    Besides the calendar rules the year must be between MIN_YEAR and
    MAX_YEAR, which guards against implausible user input.
    """
    edate = as_ethiopian(value)
    if edate.year < MIN_YEAR or edate.year > MAX_YEAR:
        return False
    if edate.month < 1 or edate.month > 13:
        return False
    if edate.day < 1:
        return False
    return edate.day <= month_length(edate.month, edate.year)


def add_days(value, days):
    # type: (Union[EthiopianDate, tuple], int) -> EthiopianDate
    """Return the Ethiopian date `days` days after (or before) value."""
    edate = as_ethiopian(value)
    _check_valid(edate)
    daynum = ethiopian_ymd2day(edate.year, edate.month, edate.day)
    return EthiopianDate(*ethiopian_day2ymd(daynum + days))


def add_years(value, years):
    # type: (Union[EthiopianDate, tuple], int) -> EthiopianDate
    """Return value moved by `years` years.

    The sixth day of Pagume becomes the fifth when the target year is not
    a leap year.
    """
    edate = as_ethiopian(value)
    _check_valid(edate)
    year = edate.year + years
    if edate.month == 13 and edate.day == 6 and not is_leap_year_ethiopian(year):
        return EthiopianDate(year, 13, 5)
    return EthiopianDate(year, edate.month, edate.day)


def compare(first, second):
    # type: (Union[EthiopianDate, tuple], Union[EthiopianDate, tuple]) -> int
    """Return -1, 0 or 1 as first is before, equal to or after second."""
    a = as_ethiopian(first)
    b = as_ethiopian(second)
    return (a > b) - (a < b)


def weekday(value):
    # type: (Union[EthiopianDate, tuple]) -> int
    edate = as_ethiopian(value)
    daynum = ethiopian_ymd2day(edate.year, edate.month, edate.day)
    return day2weekday(daynum + ETHIOPIAN_OFFSET)


def month_start_weekday(month, year):
    # type: (int, int) -> int
    """Return the weekday (Monday=1 .. Sunday=7) of day 1 of the month."""
    return weekday(EthiopianDate(year, month, 1))


def gregorian_day_number(value):
    # type: (Any) -> int
    """Return the Gregorian day number of value.

    Unlike to_ethiopian this does not raise: anything that is not a date
    is logged and gives 0.
    """
    if not isinstance(value, Date):
        _log.error("Invalid date object: %r", value)
        return 0
    gdate = _as_gregorian(value)
    return gregorian_ymd2day(gdate.year, gdate.month, gdate.day)


def today(now=None):
    # type: (Optional[Date]) -> EthiopianDate
    """Return the Ethiopian date of `now`.

    This is the only function that reads the clock, and only when `now`
    is not given.
    """
    if now is None:
        now = Timestamp.now(UTC)
    return to_ethiopian(now)


def parse(text):
    # type: (str) -> EthiopianDate
    """Parse an Ethiopian date written "YYYY-MM-DD".

    The date is not validated, only its shape.
    """
    if not isinstance(text, str):
        raise InterfaceError("Expected an Ethiopian date string, got %r" % (text,))
    error = 'Invalid Ethiopian date string: %s. Expected format: "YYYY-MM-DD"' % text
    parts = text.strip().split('-')
    if len(parts) != 3:
        raise DataError(error)
    try:
        year, month, day = [int(p) for p in parts]
    except ValueError:
        raise DataError(error)
    if not year or not month or not day:
        raise DataError(error)
    return EthiopianDate(year, month, day)


def from_parts(year, month, day):
    # type: (int, int, int) -> EthiopianDate
    return EthiopianDate(year, month, day)


def ethiopian_from_ticks(ticks):
    # type: (int) -> EthiopianDate
    """Convert POSIX seconds (UTC) to an EthiopianDate."""
    daynum = int(ticks // TICKSDAY) + UNIX_EPOCH_DAY
    return EthiopianDate(*ethiopian_day2ymd(daynum - ETHIOPIAN_OFFSET))


def ethiopian_to_ticks(value):
    # type: (Union[EthiopianDate, tuple]) -> int
    """Convert an Ethiopian date to POSIX seconds at UTC midnight."""
    edate = as_ethiopian(value)
    daynum = ethiopian_ymd2day(edate.year, edate.month, edate.day) + ETHIOPIAN_OFFSET
    return (daynum - UNIX_EPOCH_DAY) * TICKSDAY


def to_jd(value):
    # type: (Union[EthiopianDate, tuple]) -> int
    edate = as_ethiopian(value)
    return ethiopian_to_jd(edate.year, edate.month, edate.day)


def from_jd(jdn):
    # type: (int) -> EthiopianDate
    return EthiopianDate(*jd_to_ethiopian(jdn))


def previous_month(month, year):
    # type: (int, int) -> EthiopianDate
    if month == 1:
        return EthiopianDate(year - 1, 13, 1)
    return EthiopianDate(year, month - 1, 1)


def next_month(month, year):
    # type: (int, int) -> EthiopianDate
    if month == 13:
        return EthiopianDate(year + 1, 1, 1)
    return EthiopianDate(year, month + 1, 1)


def calendar_days(month, year):
    # type: (int, int) -> List[Date]
    """Return the 42 Gregorian dates of a Monday first month grid.

    The first row holds day 1 of the Ethiopian month, preceded by the
    trailing days of the previous month.
    """
    first = to_gregorian(EthiopianDate(year, month, 1))
    start = first - TimeDelta(days=month_start_weekday(month, year) - 1)
    return [start + TimeDelta(days=i) for i in range(42)]
