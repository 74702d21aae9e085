"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

try:
    from typing import Iterator  # pylint: disable=unused-import
except ImportError:
    pass

from pyethiodate import EthiopianDate, month_length


def ethiopian_days(first_year, last_year):
    # type: (int, int) -> Iterator[EthiopianDate]
    """Yield every Ethiopian date from first_year to last_year inclusive."""
    for year in range(first_year, last_year + 1):
        for month in range(1, 14):
            for day in range(1, month_length(month, year) + 1):
                yield EthiopianDate(year, month, day)
