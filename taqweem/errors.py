from __future__ import annotations


class TaqweemError(Exception):
    """Base class for calendar failures raised by this app."""


class ConversionOutOfRange(TaqweemError, ValueError):
    """
    التاريخ خارج جدول أم القرى، أو التاريخ الهجري غير صالح.
    """


class ZoneDatabaseUnavailable(TaqweemError, LookupError):
    """The configured IANA time zone could not be loaded."""
