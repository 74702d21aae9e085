"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime

import jdcal

from pyethiodate import calendar


class TestLeapYears(object):
    """Leap year rules of both calendars."""

    def test_ethiopian_leap_years(self):
        assert calendar.is_leap_year_ethiopian(2019)
        assert not calendar.is_leap_year_ethiopian(2018)
        assert calendar.is_leap_year_ethiopian(2015)
        assert calendar.is_leap_year_ethiopian(3)
        assert not calendar.is_leap_year_ethiopian(0)

    def test_one_leap_year_in_four(self):
        for start in range(1, 3000):
            leaps = [y for y in range(start, start + 4)
                     if calendar.is_leap_year_ethiopian(y)]
            assert len(leaps) == 1
            assert leaps[0] % 4 == 3

    def test_gregorian_leap_years(self):
        assert calendar.is_leap_year_gregorian(2020)
        assert calendar.is_leap_year_gregorian(2000)
        assert not calendar.is_leap_year_gregorian(2021)
        assert not calendar.is_leap_year_gregorian(2100)
        assert not calendar.is_leap_year_gregorian(1900)


class TestMonthLength(object):

    def test_ethiopian_months(self):
        for month in range(1, 13):
            assert calendar.month_length(month, 2016) == 30
            assert calendar.month_length(month, 2019) == 30
        assert calendar.month_length(13, 2019) == 6
        assert calendar.month_length(13, 2016) == 5

    def test_year_length(self):
        for year in range(1, 3001):
            total = sum(calendar.month_length(m, year) for m in range(1, 14))
            if calendar.is_leap_year_ethiopian(year):
                assert total == 366
            else:
                assert total == 365

    def test_gregorian_months(self):
        assert calendar.gregorian_month_length(1, 2021) == 31
        assert calendar.gregorian_month_length(2, 2020) == 29
        assert calendar.gregorian_month_length(2, 2021) == 28
        assert calendar.gregorian_month_length(2, 1900) == 28
        assert calendar.gregorian_month_length(4, 2020) == 30
        assert calendar.gregorian_month_length(12, 2020) == 31


class TestEthiopianDayNumbers(object):

    def test_epoch(self):
        assert calendar.ethiopian_ymd2day(1, 1, 1) == 365
        assert calendar.ethiopian_day2ymd(365) == (1, 1, 1)
        assert calendar.ethiopian_ymd2day(2016, 1, 1) == 736344

    def test_sixth_pagume(self):
        assert calendar.ethiopian_ymd2day(3, 13, 6) == 1460
        assert calendar.ethiopian_day2ymd(1460) == (3, 13, 6)
        assert calendar.ethiopian_day2ymd(1461) == (4, 1, 1)
        assert calendar.ethiopian_day2ymd(736343) == (2015, 13, 6)

    def test_consecutive_days(self):
        daynum = calendar.ethiopian_ymd2day(1990, 1, 1)
        for year in range(1990, 2031):
            for month in range(1, 14):
                for day in range(1, calendar.month_length(month, year) + 1):
                    assert calendar.ethiopian_ymd2day(year, month, day) == daynum
                    assert calendar.ethiopian_day2ymd(daynum) == (year, month, day)
                    daynum += 1


class TestGregorianDayNumbers(object):

    def test_matches_ordinals(self):
        last = datetime.date(9999, 12, 31).toordinal()
        for daynum in list(range(1, last + 1, 97)) + [last]:
            d = datetime.date.fromordinal(daynum)
            assert calendar.gregorian_ymd2day(d.year, d.month, d.day) == daynum
            assert calendar.gregorian_day2ymd(daynum) == (d.year, d.month, d.day)

    def test_every_day_of_a_leap_cycle(self):
        first = datetime.date(1896, 1, 1).toordinal()
        last = datetime.date(2004, 12, 31).toordinal()
        for daynum in range(first, last + 1):
            d = datetime.date.fromordinal(daynum)
            assert calendar.gregorian_day2ymd(daynum) == (d.year, d.month, d.day)

    def test_period_boundaries(self):
        """An exactly consumed period ends on December 31."""
        assert calendar.gregorian_day2ymd(365) == (1, 12, 31)
        assert calendar.gregorian_day2ymd(730) == (2, 12, 31)
        assert calendar.gregorian_day2ymd(1461) == (4, 12, 31)
        assert calendar.gregorian_day2ymd(36524) == (100, 12, 31)
        assert calendar.gregorian_day2ymd(73048) == (200, 12, 31)
        assert calendar.gregorian_day2ymd(146097) == (400, 12, 31)
        assert calendar.gregorian_day2ymd(5 * 146097) == (2000, 12, 31)
        assert calendar.gregorian_day2ymd(146096) == (400, 12, 30)
        assert calendar.gregorian_day2ymd(1460) == (4, 12, 30)

    def test_known_dates(self):
        assert calendar.gregorian_ymd2day(1, 1, 1) == 1
        assert calendar.gregorian_ymd2day(1970, 1, 1) == 719163
        assert calendar.gregorian_ymd2day(2000, 1, 1) == 730120


class TestWeekdays(object):

    def test_first_day_was_monday(self):
        assert calendar.day2weekday(1) == 1
        assert calendar.day2weekday(7) == 7
        assert calendar.day2weekday(8) == 1

    def test_matches_isoweekday(self):
        first = datetime.date(2020, 1, 1).toordinal()
        for daynum in range(first, first + 400):
            d = datetime.date.fromordinal(daynum)
            assert calendar.day2weekday(daynum) == d.isoweekday()


class TestJulianDayNumbers(object):

    def test_ethiopian_epoch(self):
        assert calendar.ethiopian_to_jd(1, 1, 1) == 1724221
        assert calendar.jd_to_ethiopian(1724221) == (1, 1, 1)

    def test_j2000(self):
        # January 1, 2000 is Tahsas 22, 1992.
        assert calendar.ethiopian_to_jd(1992, 4, 22) == 2451545
        assert calendar.jd_to_ethiopian(2451545) == (1992, 4, 22)

    def test_agrees_with_jdcal(self):
        for year in (1000, 1500, 1962, 2015, 2016, 2019, 3000):
            for month, day in ((1, 1), (6, 15), (13, 5)):
                jdn = calendar.ethiopian_to_jd(year, month, day)
                daynum = calendar.ethiopian_ymd2day(year, month, day) + calendar.ETHIOPIAN_OFFSET
                ymd = calendar.gregorian_day2ymd(daynum)
                assert jdn == int(sum(jdcal.gcal2jd(*ymd)) + 0.5)
                assert calendar.jd_to_ethiopian(jdn) == (year, month, day)
