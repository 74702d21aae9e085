"""Classes containing the exceptions for reporting errors.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['Error', 'InterfaceError', 'DataError']


class Error(Exception):
    def __init__(self, value):
        self.__value = value

    def __str__(self):
        return repr(self.__value)


class InterfaceError(Error):
    """An argument of an unsupported shape was passed to the API."""

    def __init__(self, value):
        Error.__init__(self, value)


class DataError(Error):
    """An Ethiopian date or date string is not valid."""

    def __init__(self, value):
        Error.__init__(self, value)
