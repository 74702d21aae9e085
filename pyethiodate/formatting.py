# -*- coding: utf-8 -*-
"""Render Ethiopian dates as text.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Pattern tokens understood by format_date:

  YYYY  year
  MMM   month name in the locale
  MM    month, two digits
  DD    day, two digits
  D     day
  E     era ("ዓ.ም" or "E.C.")
  d     weekday name in the locale

The pattern is scanned once from left to right.  At each position the
tokens are tried in the order above, so "MMM" wins over "MM" and "DD" over
"D".  Substituted names are never scanned again and any other text is
copied unchanged.

"d" names the weekday of the formatted date itself.  Earlier releases of
the JavaScript date picker used the weekday of the first day of the month
instead, so patterns ported from it may render a different weekday.
"""

__all__ = ['format_date', 'format_ethiopian_date', 'date_string', 'STYLES']

import re

from datetime import date  # pylint: disable=unused-import

try:
    from typing import Optional, Union  # pylint: disable=unused-import
except ImportError:
    pass

from .exception import InterfaceError
from .names import check_locale, month_name, day_name, era
from .datatype import EthiopianDate, to_ethiopian, weekday, as_ethiopian

STYLES = ('long', 'short', 'month', 'day')

_TOKENS = re.compile(r'YYYY|MMM|MM|DD|D|E|d')


def format_date(value, pattern, locale=None):
    # type: (Union[EthiopianDate, tuple], str, Optional[str]) -> str
    """Substitute the tokens of pattern with the parts of an Ethiopian date.

    >>> format_date(EthiopianDate(2017, 11, 10), "MMM DD, YYYY E", "EN")
    'July 10, 2017 E.C.'
    """
    edate = as_ethiopian(value)
    locale = check_locale(locale)

    def _substitute(match):
        token = match.group(0)
        if token == 'YYYY':
            return str(edate.year)
        if token == 'MMM':
            return month_name(edate.month, locale)
        if token == 'MM':
            return '%02d' % edate.month
        if token == 'DD':
            return '%02d' % edate.day
        if token == 'D':
            return str(edate.day)
        if token == 'E':
            return era(locale)
        return day_name(weekday(edate), locale)

    return _TOKENS.sub(_substitute, pattern)


def date_string(value, locale=None):
    # type: (Union[EthiopianDate, tuple], Optional[str]) -> str
    """Return e.g. "ሐምሌ 10, 2017" or, in English, "July 10, 2017"."""
    edate = as_ethiopian(value)
    return '%s %d, %d' % (month_name(edate.month, check_locale(locale)),
                          edate.day, edate.year)


def format_ethiopian_date(value, style='long', locale=None):
    # type: (Optional[date], str, Optional[str]) -> str
    """Format a Gregorian date as an Ethiopian one in a named style.

    long  -- "10 ሐምሌ 2017"
    short -- "10/11/2017"
    month -- "ሐምሌ 2017"
    day   -- "10 ሐምሌ"

    A missing date formats as ''.
    """
    if value is None:
        return ''
    if style not in STYLES:
        raise InterfaceError("Unknown date style %r: expected one of %s"
                             % (style, ', '.join(STYLES)))
    locale = check_locale(locale)
    edate = to_ethiopian(value)
    name = month_name(edate.month, locale)

    if style == 'short':
        return edate.short()
    if style == 'month':
        return '%s %d' % (name, edate.year)
    if style == 'day':
        return '%d %s' % (edate.day, name)
    return '%d %s %d' % (edate.day, name, edate.year)
