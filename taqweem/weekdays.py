from __future__ import annotations

from datetime import date
from enum import IntEnum


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, d: date) -> "Weekday":
        # Python weekday: Mon=0 .. Sun=6
        return cls((d.weekday() + 1) % 7)
