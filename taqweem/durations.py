from __future__ import annotations

from datetime import timedelta
from enum import Enum

from . import conf
from .numerals import printer

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY


class TimeUnit(Enum):
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"


class Agreement(Enum):
    SINGULAR = "singular"  # 1, word only
    DUAL = "dual"  # 2, word only
    FEW = "few"  # 3..10
    MANY = "many"  # 11+


# الكلمة حسب العدد: مفرد / مثنى / جمع قلة (3-10) / تمييز مفرد منصوب (11+)
UNIT_WORDS: dict[TimeUnit, dict[Agreement, str]] = {
    TimeUnit.DAY: {
        Agreement.SINGULAR: "يوم",
        Agreement.DUAL: "يومان",
        Agreement.FEW: "أيام",
        Agreement.MANY: "يوما",
    },
    TimeUnit.HOUR: {
        Agreement.SINGULAR: "ساعة",
        Agreement.DUAL: "ساعات",
        Agreement.FEW: "ساعات",
        Agreement.MANY: "ساعة",
    },
    TimeUnit.MINUTE: {
        Agreement.SINGULAR: "دقيقة",
        Agreement.DUAL: "دقيقتان",
        Agreement.FEW: "دقائق",
        Agreement.MANY: "دقيقة",
    },
}

_WORD_ONLY = (Agreement.SINGULAR, Agreement.DUAL)


def agreement_class(value: int) -> Agreement:
    if value == 1:
        return Agreement.SINGULAR
    if value == 2:
        return Agreement.DUAL
    if 3 <= value <= 10:
        return Agreement.FEW
    return Agreement.MANY


def format_unit(value: int, unit: TimeUnit, arabic_digits: bool = False) -> str:
    agreement = agreement_class(value)
    word = UNIT_WORDS[unit][agreement]
    if agreement in _WORD_ONLY:
        return word
    number = printer.number(value) if arabic_digits else str(value)
    return f"{number} {word}"


def duration_to_text(d: timedelta, arabic_digits: bool | None = None) -> str:
    """
    Largest whole unit of ``d`` (days, then hours, then minutes) as Arabic text.

    Anything under a minute, and negative durations, give an empty string.
    """
    if arabic_digits is None:
        arabic_digits = conf.duration_arabic_digits()

    minutes = d // timedelta(minutes=1)

    days = minutes // MINUTES_PER_DAY
    hours = (minutes % MINUTES_PER_DAY) // MINUTES_PER_HOUR
    remaining = minutes % MINUTES_PER_HOUR

    if minutes <= 0:
        return ""
    if days > 0:
        return format_unit(days, TimeUnit.DAY, arabic_digits)
    if hours > 0:
        return format_unit(hours, TimeUnit.HOUR, arabic_digits)
    if remaining > 0:
        return format_unit(remaining, TimeUnit.MINUTE, arabic_digits)
    return ""
