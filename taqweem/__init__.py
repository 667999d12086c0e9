from __future__ import annotations

from .durations import duration_to_text
from .errors import ConversionOutOfRange, TaqweemError, ZoneDatabaseUnavailable
from .hijri import HijriDate
from .ksa_time import CivilDay

__all__ = [
    "CivilDay",
    "HijriDate",
    "duration_to_text",
    "TaqweemError",
    "ConversionOutOfRange",
    "ZoneDatabaseUnavailable",
]
