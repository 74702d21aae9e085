"""A chained-call interface over the Ethiopian date functions.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
EthiopianDateConverter -- Wraps one EthiopianDate with chainable methods.

Exported Objects:
date_converter -- Entry points creating EthiopianDateConverter objects.

For example:

    date_converter.to_ethiopian('2025-07-17').add_days(30).format('MMM DD, YYYY')
    date_converter.to_gregorian('2017-11-10')
"""

__all__ = ['EthiopianDateConverter', 'date_converter']

from numbers import Real
from datetime import datetime as Timestamp, date as Date

try:
    from typing import Any, Optional  # pylint: disable=unused-import
except ImportError:
    pass

from .exception import DataError, InterfaceError
from . import datatype
from . import formatting


def _parse_gregorian(text):
    # type: (str) -> Date
    try:
        return Timestamp.strptime(text.strip(), '%Y-%m-%d').date()
    except ValueError:
        raise DataError('Invalid Gregorian date string: %s. '
                        'Expected format: "YYYY-MM-DD"' % text)


class EthiopianDateConverter(object):
    """An Ethiopian date with chainable conversion and formatting methods.

    The constructor accepts:
      a date or datetime            -- converted to Ethiopian
      a "YYYY-MM-DD" string         -- a Gregorian date, converted
      year, month, day integers     -- an Ethiopian date as is
      a single number               -- POSIX seconds (UTC)
      nothing                       -- today, taken from `now` if given
    """

    __slots__ = ('__date',)

    def __init__(self, value=None, month=None, day=None, now=None):
        # type: (Any, Optional[int], Optional[int], Optional[Date]) -> None
        if isinstance(value, datatype.EthiopianDate):
            edate = value
        elif isinstance(value, str):
            edate = datatype.to_ethiopian(_parse_gregorian(value))
        elif isinstance(value, Date):
            edate = datatype.to_ethiopian(value)
        elif isinstance(value, int) and isinstance(month, int) and isinstance(day, int):
            edate = datatype.EthiopianDate(value, month, day)
        elif isinstance(value, Real) and not isinstance(value, bool) \
                and month is None and day is None:
            edate = datatype.ethiopian_from_ticks(int(value))
        elif value is None:
            edate = datatype.today(now)
        else:
            raise InterfaceError("Cannot build an Ethiopian date from %r"
                                 % ((value, month, day),))
        self.__date = edate

    @property
    def ethiopian_date(self):
        # type: () -> datatype.EthiopianDate
        return self.__date

    def __eq__(self, other):
        if isinstance(other, EthiopianDateConverter):
            return self.__date == other.ethiopian_date
        return NotImplemented

    def __hash__(self):
        return hash(self.__date)

    def __repr__(self):
        return 'EthiopianDateConverter(%d, %d, %d)' % self.__date

    def __str__(self):
        return self.__date.isoformat()

    def format(self, pattern, locale=None):
        # type: (str, Optional[str]) -> str
        """Format with the tokens described in pyethiodate.formatting."""
        return formatting.format_date(self.__date, pattern, locale)

    def to_date_string(self, locale=None):
        # type: (Optional[str]) -> str
        return formatting.date_string(self.__date, locale)

    def to_gregorian(self):
        # type: () -> Date
        return datatype.to_gregorian(self.__date)

    def add_years(self, years):
        # type: (int) -> EthiopianDateConverter
        return EthiopianDateConverter(datatype.add_years(self.__date, years))

    def add_days(self, days):
        # type: (int) -> EthiopianDateConverter
        return EthiopianDateConverter(datatype.add_days(self.__date, days))


class _DateConverter(object):
    """Factory functions for EthiopianDateConverter."""

    @staticmethod
    def to_ethiopian(value):
        # type: (Any) -> EthiopianDateConverter
        """Convert a Gregorian date, "YYYY-MM-DD" string or timestamp."""
        if value is None:
            raise InterfaceError("No Gregorian date provided.")
        return EthiopianDateConverter(value)

    @staticmethod
    def to_gregorian(value, month=None, day=None):
        # type: (Any, Optional[int], Optional[int]) -> Date
        """Convert an Ethiopian date to a Gregorian one.

        value may be an EthiopianDateConverter, an EthiopianDate, a
        "YYYY-MM-DD" Ethiopian date string or, with month and day, the
        Ethiopian year.  Parts are validated before conversion.
        """
        if isinstance(value, EthiopianDateConverter):
            return value.to_gregorian()
        if isinstance(value, datatype.EthiopianDate):
            return datatype.to_gregorian(value)
        if isinstance(value, str):
            return datatype.to_gregorian(datatype.parse(value))
        if isinstance(value, int) and isinstance(month, int) and isinstance(day, int):
            edate = datatype.EthiopianDate(value, month, day)
            if not datatype.is_valid(edate):
                raise DataError("Invalid Ethiopian date: %d-%d-%d" % (day, month, value))
            return datatype.to_gregorian(edate)
        raise InterfaceError("Invalid parameters for to_gregorian: %r"
                             % ((value, month, day),))

    @staticmethod
    def now(now=None):
        # type: (Optional[Date]) -> EthiopianDateConverter
        return EthiopianDateConverter(now=now)

    @staticmethod
    def from_parts(year, month, day):
        # type: (int, int, int) -> EthiopianDateConverter
        return EthiopianDateConverter(year, month, day)


date_converter = _DateConverter()
