from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from django import template

from ..conversion import gregorian_to_hijri
from ..durations import duration_to_text
from ..errors import TaqweemError
from ..hijri import HijriDate
from ..ksa_time import CivilDay
from ..numerals import printer

logger = logging.getLogger(__name__)

register = template.Library()


@register.filter(name="to_hijri")
def to_hijri(value):
    """
    يحول تاريخ ميلادي (date/datetime) إلى نص هجري: 1447-07-28
    datetime تُحسب حسب يوم السعودية (UTC+3)، و date تُحوّل كما هي.
    """
    if not value:
        return ""
    try:
        if isinstance(value, datetime):
            return str(HijriDate.of(value))
        if isinstance(value, date):
            h = gregorian_to_hijri(value)
            return f"{h.year:04d}-{h.month:02d}-{h.day:02d}"
    except TaqweemError as e:
        logger.warning("to_hijri: %s", e)
        return ""
    return str(value)


@register.filter(name="hijri_formatted")
def hijri_formatted(value):
    if not isinstance(value, datetime):
        return ""
    try:
        return HijriDate.of(value).formatted()
    except TaqweemError as e:
        logger.warning("hijri_formatted: %s", e)
        return ""


@register.filter(name="ksa_date")
def ksa_date(value):
    if not isinstance(value, datetime):
        return ""
    return CivilDay.of(value).date_string()


@register.filter(name="duration_ar")
def duration_ar(value):
    if not isinstance(value, timedelta):
        return ""
    return duration_to_text(value)


@register.filter(name="arabic_digits")
def arabic_digits(value):
    if value is None:
        return ""
    return printer.digits(str(value))
