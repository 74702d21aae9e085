# -*- coding: utf-8 -*-
"""Month, weekday and era names for the supported locales.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Two locales are supported:
  AMH -- Amharic names of the Ethiopian months and weekdays.
  EN  -- English.  Ethiopian months are labelled with the Gregorian month
         they customarily correspond to; this is a fixed label, not a
         conversion, so Pagume is always "September".

The default locale is taken from the PYETHIODATE_LOCALE environment
variable when the module is imported.
"""

__all__ = ['AMH', 'EN', 'LOCALES', 'DEFAULT_LOCALE', 'ETHIOPIAN_MONTHS',
           'ETHIOPIAN_MONTHS_EN', 'ENGLISH_MONTHS', 'ETHIOPIAN_DAYS',
           'ETHIOPIAN_DAYS_SHORT', 'ENGLISH_DAYS', 'ENGLISH_DAYS_SHORT',
           'check_locale', 'month_name', 'ethiopian_month_name', 'day_name',
           'era']

import os
import logging

try:
    from typing import Optional  # pylint: disable=unused-import
except ImportError:
    pass

from .exception import InterfaceError

_log = logging.getLogger(__name__)

AMH = 'AMH'
EN = 'EN'
LOCALES = (AMH, EN)

ETHIOPIAN_MONTHS = (
    "መስከረም",
    "ጥቅምት",
    "ህዳር",
    "ታህሳስ",
    "ጥር",
    "የካቲት",
    "መጋቢት",
    "ሚያዚያ",
    "ግንቦት",
    "ሰኔ",
    "ሐምሌ",
    "ነሀሴ",
    "ጳጉሜ",
)

ETHIOPIAN_MONTHS_EN = (
    "Meskerem",
    "Tikimt",
    "Hidar",
    "Tahsas",
    "Tir",
    "Yekatit",
    "Megabit",
    "Miyaziya",
    "Ginbot",
    "Sene",
    "Hamle",
    "Nehase",
    "Pagume",
)

ENGLISH_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Monday first.
ETHIOPIAN_DAYS = ("ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ", "እሁድ")
ETHIOPIAN_DAYS_SHORT = ("ሰ", "ማ", "ረ", "ሐ", "ዓ", "ቅ", "እ")
ENGLISH_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
                "Saturday", "Sunday")
ENGLISH_DAYS_SHORT = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Index into ENGLISH_MONTHS for each Ethiopian month; Pagume shares
# September with Meskerem.
_ENGLISH_MONTH_INDEX = (8, 9, 10, 11, 0, 1, 2, 3, 4, 5, 6, 7, 8)

_ERAS = {AMH: "ዓ.ም", EN: "E.C."}


def _default_locale():
    # type: () -> str
    locale = os.environ.get('PYETHIODATE_LOCALE')
    if locale is None:
        return AMH
    if locale.upper() not in LOCALES:
        _log.warning("Ignoring PYETHIODATE_LOCALE=%r: expected one of %s",
                     locale, ', '.join(LOCALES))
        return AMH
    return locale.upper()


DEFAULT_LOCALE = _default_locale()


def check_locale(locale):
    # type: (Optional[str]) -> str
    """Return the canonical locale name; None means DEFAULT_LOCALE."""
    if locale is None:
        return DEFAULT_LOCALE
    name = str(locale).upper()
    if name not in LOCALES:
        raise InterfaceError("Unknown locale %r: expected one of %s"
                             % (locale, ', '.join(LOCALES)))
    return name


def month_name(month, locale=None):
    # type: (int, Optional[str]) -> str
    """Return the name of an Ethiopian month, or '' if month is not 1-13."""
    locale = check_locale(locale)
    if month < 1 or month > 13:
        return ''
    if locale == AMH:
        return ETHIOPIAN_MONTHS[month - 1]
    return ENGLISH_MONTHS[_ENGLISH_MONTH_INDEX[month - 1]]


def ethiopian_month_name(month):
    # type: (int) -> str
    """Return the transliterated name of an Ethiopian month ("Meskerem")."""
    if month < 1 or month > 13:
        return ''
    return ETHIOPIAN_MONTHS_EN[month - 1]


def day_name(weekday, locale=None, short=False):
    # type: (int, Optional[str], bool) -> str
    """Return the name of a weekday numbered Monday=1 .. Sunday=7.

    An out of range weekday gives ''.
    """
    locale = check_locale(locale)
    if weekday < 1 or weekday > 7:
        return ''
    if locale == AMH:
        names = ETHIOPIAN_DAYS_SHORT if short else ETHIOPIAN_DAYS
    else:
        names = ENGLISH_DAYS_SHORT if short else ENGLISH_DAYS
    return names[weekday - 1]


def era(locale=None):
    # type: (Optional[str]) -> str
    return _ERAS[check_locale(locale)]
