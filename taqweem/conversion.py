"""
Thin wrapper over hijridate's Umm al-Qura tables.

Everything that needs a Hijri <-> Gregorian conversion goes through the two
functions here so that range errors surface as ``ConversionOutOfRange``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from hijridate import Gregorian, Hijri

from .errors import ConversionOutOfRange
from .weekdays import Weekday

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HijriParts:
    year: int
    month: int
    day: int
    weekday: Weekday


def gregorian_to_hijri(d: date) -> HijriParts:
    """Umm al-Qura date of the calendar day ``d`` (time of day is ignored)."""
    try:
        h = Gregorian(d.year, d.month, d.day).to_hijri()
    except (OverflowError, ValueError) as e:
        raise ConversionOutOfRange(f"Gregorian date out of Umm al-Qura range: {d:%Y-%m-%d}") from e

    logger.debug("gregorian %s -> hijri %04d-%02d-%02d", d, h.year, h.month, h.day)
    return HijriParts(year=h.year, month=h.month, day=h.day, weekday=Weekday.of(d))


def hijri_to_gregorian(year: int, month: int, day: int) -> date:
    try:
        g = Hijri(year, month, day).to_gregorian()
    except (OverflowError, ValueError) as e:
        raise ConversionOutOfRange(f"Invalid Umm al-Qura date: {year:04d}-{month:02d}-{day:02d}") from e

    return date(g.year, g.month, g.day)
