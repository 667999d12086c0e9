from __future__ import annotations

from datetime import date, datetime, timedelta

from .conversion import gregorian_to_hijri
from .weekdays import Weekday
from .hijri import AR_WEEKDAYS
from .ksa_time import CivilDay

# أيام الدوام: الأحد .. الخميس
WORK_DAYS = 5


def week_start_date(start_week1_sunday: date, week_no: int) -> date:
    return start_week1_sunday + timedelta(days=(week_no - 1) * 7)


def civil_week_sunday(instant: datetime) -> date:
    """Sunday that opens the KSA week containing ``instant``."""
    return date.fromisoformat(CivilDay.of(instant).week_date_string())


def hijri_str(d: date) -> str:
    h = gregorian_to_hijri(d)
    return f"{h.year:04d}-{h.month:02d}-{h.day:02d}"


def week_rows(start_week1_sunday: date, week_no: int, days: int = WORK_DAYS) -> list[dict]:
    start = week_start_date(start_week1_sunday, week_no)
    if Weekday.of(start) != Weekday.SUNDAY:
        raise ValueError(f"week 1 must start on a Sunday, got {start} ({AR_WEEKDAYS[Weekday.of(start)]})")

    rows = []
    for i in range(days):
        g = start + timedelta(days=i)
        rows.append(
            {
                "weekday": i,
                "weekday_name": AR_WEEKDAYS[i],
                "greg_date": g,
                "hijri_date": hijri_str(g),
            }
        )
    return rows
