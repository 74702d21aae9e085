"""A module to calculate Ethiopian and Gregorian dates from day numbers.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Calendar functions for computing year,month,day relative to a day number
in each calendar:
  - Ethiopian day numbers count from the Ethiopian epoch; 1/1/1 E.C. is 365.
  - Gregorian day numbers count from 1/1/1 of the proleptic Gregorian
    calendar, which is day 1 (the same as datetime.date.toordinal()).

The two sequences differ by ETHIOPIAN_OFFSET days.  The Julian Day Number
bridge uses jdcal so values can be exchanged with astronomical software.
"""

__all__ = ['ETHIOPIAN_OFFSET', 'is_leap_year_ethiopian',
           'is_leap_year_gregorian', 'month_length', 'gregorian_month_length',
           'ethiopian_ymd2day', 'ethiopian_day2ymd', 'gregorian_ymd2day',
           'gregorian_day2ymd', 'day2weekday', 'ethiopian_to_jd',
           'jd_to_ethiopian']

from typing import Tuple  # pylint: disable=unused-import
import jdcal

ETHIOPIAN_OFFSET = 2431

# Ethiopian calendar: 12 months of 30 days then Pagume of 5 (6 when leap).
ETHIOPIAN_MONTH_DAYS = 30
PAGUME_DAYS = 5
PAGUME_LEAP_DAYS = 6

ETHIOPIAN_CYCLE_DAYS = 1461    # 3 * 365 + 366

GREGORIAN_400Y_DAYS = 146097
GREGORIAN_100Y_DAYS = 36524
GREGORIAN_4Y_DAYS = 1461
GREGORIAN_1Y_DAYS = 365

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year_ethiopian(year):
    # type: (int) -> bool
    """Return True if the Ethiopian year has a six day Pagume.

    >>> is_leap_year_ethiopian(2019)
    True
    >>> is_leap_year_ethiopian(2018)
    False
    """
    return year % 4 == 3


def is_leap_year_gregorian(year):
    # type: (int) -> bool
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(month, year):
    # type: (int, int) -> int
    """Return the number of days in an Ethiopian month.

    The month is not checked: callers must validate it first.
    """
    if month == 13:
        return PAGUME_LEAP_DAYS if is_leap_year_ethiopian(year) else PAGUME_DAYS
    return ETHIOPIAN_MONTH_DAYS


def gregorian_month_length(month, year):
    # type: (int, int) -> int
    if month == 2 and is_leap_year_gregorian(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def ethiopian_ymd2day(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given Ethiopian year, month, day to an Ethiopian day number.

    Each 1461 day cycle holds three common years followed by one leap year,
    so no iteration over years is needed.
    """
    return ((year // 4) * ETHIOPIAN_CYCLE_DAYS
            + (year % 4) * 365
            + (month - 1) * ETHIOPIAN_MONTH_DAYS
            + day - 1)


def ethiopian_day2ymd(daynum):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given Ethiopian day number to a tuple (year,month,day).

    The last day of a cycle (remainder 1460) is the sixth day of Pagume
    in the leap year closing that cycle; it does not fit the 365 day
    layout used for every other day.
    """
    cycles = daynum // ETHIOPIAN_CYCLE_DAYS
    remainder = daynum % ETHIOPIAN_CYCLE_DAYS
    years = remainder // 365
    day_of_year = remainder % 365

    if remainder == ETHIOPIAN_CYCLE_DAYS - 1:
        return cycles * 4 + years - 1, 13, PAGUME_LEAP_DAYS

    return (cycles * 4 + years,
            day_of_year // ETHIOPIAN_MONTH_DAYS + 1,
            day_of_year % ETHIOPIAN_MONTH_DAYS + 1)


def _gregorian_days_before_month(month, year):
    # type: (int, int) -> int
    days = 0
    for m in range(1, month):
        days += gregorian_month_length(m, year)
    return days


def gregorian_ymd2day(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given Gregorian year, month, day to a Gregorian day number.

    Day 1 is 1/1/1; the result matches datetime.date.toordinal().
    """
    previous = year - 1
    leaps = previous // 4 - previous // 100 + previous // 400
    days = leaps * 366 + (previous - leaps) * 365
    return days + _gregorian_days_before_month(month, year) + day


def gregorian_day2ymd(daynum):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given Gregorian day number to a tuple (year,month,day).

    The day number is reduced through 400, 100, 4 and 1 year periods.  Only
    three 100 year and three 1 year periods are taken per enclosing period
    since the fourth one carries the extra leap day.  Whenever a period
    consumes the day number exactly, the date is December 31 of the last
    completed year.

       +---------------------------+
       |  daynum | (year,month,day)|
       |---------+-----------------|
       |       1 | (1,1,1)         |
       |     365 | (1,12,31)       |
       |  146097 | (400,12,31)     |
       |  719163 | (1970,1,1)      |
       +---------------------------+
    """
    n400, daynum = divmod(daynum, GREGORIAN_400Y_DAYS)
    if daynum == 0:
        return 400 * n400, 12, 31

    n100 = min(daynum // GREGORIAN_100Y_DAYS, 3)
    daynum -= n100 * GREGORIAN_100Y_DAYS
    if daynum == 0:
        return 400 * n400 + 100 * n100, 12, 31

    n4, daynum = divmod(daynum, GREGORIAN_4Y_DAYS)
    if daynum == 0:
        return 400 * n400 + 100 * n100 + 4 * n4, 12, 31

    n1 = min(daynum // GREGORIAN_1Y_DAYS, 3)
    daynum -= n1 * GREGORIAN_1Y_DAYS
    if daynum == 0:
        return 400 * n400 + 100 * n100 + 4 * n4 + n1, 12, 31

    year = 400 * n400 + 100 * n100 + 4 * n4 + n1 + 1
    month = 1
    while daynum > gregorian_month_length(month, year):
        daynum -= gregorian_month_length(month, year)
        month += 1
    return year, month, daynum


def day2weekday(daynum):
    # type: (int) -> int
    """Return the weekday of a Gregorian day number, Monday=1 .. Sunday=7."""
    # 1/1/1 was a Monday, so daynum % 7 numbers the week from Sunday=0.
    sunday0 = daynum % 7
    return (sunday0 + 6) % 7 + 1


def ethiopian_to_jd(year, month, day):
    # type: (int, int, int) -> int
    """Return the Julian Day Number of an Ethiopian date.

    1/1/1 E.C. is JDN 1724221.
    """
    ymd = gregorian_day2ymd(ethiopian_ymd2day(year, month, day) + ETHIOPIAN_OFFSET)
    # jdcal returns the julian date at midnight, half a day before the JDN.
    return int(sum(jdcal.gcal2jd(*ymd)) + 0.5)


def jd_to_ethiopian(jdn):
    # type: (int) -> Tuple[int, int, int]
    """Converts given Julian Day Number to an Ethiopian (year,month,day)."""
    y, m, d, _ = jdcal.jd2gcal(jdcal.MJD_0, jdn - jdcal.MJD_0 - 0.5)
    return ethiopian_day2ymd(gregorian_ymd2day(y, m, d) - ETHIOPIAN_OFFSET)
