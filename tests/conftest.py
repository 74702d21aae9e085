"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime

import pytest

from pyethiodate import EthiopianDate


@pytest.fixture
def hamle_10():
    # type: () -> EthiopianDate
    """Hamle 10, 2017 E.C. which is Thursday, July 17 2025."""
    return EthiopianDate(2017, 11, 10)


@pytest.fixture
def july_17():
    # type: () -> datetime.date
    return datetime.date(2025, 7, 17)


@pytest.fixture
def leap_pagume_6():
    # type: () -> EthiopianDate
    """The sixth day of Pagume 2019, a leap year; Gregorian 2027-09-11."""
    return EthiopianDate(2019, 13, 6)
