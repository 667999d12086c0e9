"""
Umm al-Qura Hijri date paired with its Gregorian instant.

Navigation methods use three different strategies on purpose:

* ``add_date`` / ``week_starting_day`` move the Gregorian instant and
  re-derive the Hijri triple from it.
* ``month_starting_day`` / ``next_month_start`` build the Hijri triple first
  and invert it to a Gregorian instant.
* ``current_day_start`` / ``next_day_start`` keep the Hijri triple as-is and
  only move the Gregorian clock to midnight. They are only meaningful for the
  Gregorian day the value was created for.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from . import conf
from .conversion import gregorian_to_hijri, hijri_to_gregorian
from .errors import ConversionOutOfRange
from .ksa_time import as_utc
from .numerals import printer
from .weekdays import Weekday

logger = logging.getLogger(__name__)

HIJRI_MONTHS_AR = {
    1: "محرم",
    2: "صفر",
    3: "ربيع الأول",
    4: "ربيع الثاني",
    5: "جمادى الأولى",
    6: "جمادى الثانية",
    7: "رجب",
    8: "شعبان",
    9: "رمضان",
    10: "شوال",
    11: "ذو القعدة",
    12: "ذو الحجة",
}

AR_WEEKDAYS = ["الأحد", "الإثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"]


def _shift(dt: datetime, delta: timedelta) -> datetime:
    try:
        return dt + delta
    except OverflowError as e:
        raise ConversionOutOfRange(f"Date out of range: {dt.isoformat()} + {delta}") from e


def _add_calendar(dt: datetime, years: int, months: int, days: int) -> datetime:
    # month/day overflow rolls forward: Jan 31 + 1 month -> Mar 2 (or 3)
    total = dt.month - 1 + months
    year = dt.year + years + total // 12
    month = total % 12 + 1
    try:
        first = dt.replace(year=year, month=month, day=1)
        return first + timedelta(days=dt.day - 1 + days)
    except (OverflowError, ValueError) as e:
        raise ConversionOutOfRange(
            f"Date out of range: {dt.isoformat()} + {years}y {months}m {days}d"
        ) from e


def _midnight(d: date, tz: tzinfo) -> datetime:
    return datetime.combine(d, time(0, 0), tzinfo=tz)


@dataclass(frozen=True)
class HijriDate:
    year: int
    month: int
    day: int
    weekday: Weekday
    gregorian: datetime

    # =========================
    # الإنشاء
    # =========================
    @classmethod
    def of(cls, instant: datetime) -> "HijriDate":
        utc = as_utc(instant)
        parts = gregorian_to_hijri(_shift(utc, conf.utc_offset()).date())
        return cls(
            year=parts.year,
            month=parts.month,
            day=parts.day,
            weekday=parts.weekday,
            gregorian=utc.astimezone(conf.riyadh_zone()),
        )

    @classmethod
    def now(cls) -> "HijriDate":
        return cls.of(datetime.now(timezone.utc))

    @classmethod
    def from_parts(cls, year: int, month: int, day: int = 1) -> "HijriDate":
        """Hijri triple at KSA midnight of its Gregorian day."""
        return cls._inverted(year, month, day, conf.riyadh_zone())

    @classmethod
    def _inverted(cls, year: int, month: int, day: int, tz: tzinfo) -> "HijriDate":
        g = hijri_to_gregorian(year, month, day)
        # UTC midnight shifted back by the offset is KSA midnight of the same day
        t = (_midnight(g, timezone.utc) - conf.utc_offset()).astimezone(tz)
        return cls(
            year=year,
            month=month,
            day=day,
            weekday=Weekday.of(t.date()),
            gregorian=t,
        )

    def to_gregorian(self) -> datetime:
        return self.gregorian

    def add_date(self, years: int, months: int, days: int) -> "HijriDate":
        t = _add_calendar(self.gregorian, years, months, days)
        parts = gregorian_to_hijri(t.date())
        return HijriDate(
            year=parts.year,
            month=parts.month,
            day=parts.day,
            weekday=parts.weekday,
            gregorian=t,
        )

    # =========================
    # التنسيق
    # =========================
    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def month_name(self) -> str:
        return HIJRI_MONTHS_AR[self.month]

    @property
    def weekday_name(self) -> str:
        return AR_WEEKDAYS[self.weekday]

    def formatted(self) -> str:
        """e.g. ``٠١:٣٠:٠٠ ١ رمضان ١٤٤٥ هـ``"""
        logger.debug("formatting hijri date %s (month=%d)", self, self.month)
        t = self.gregorian
        return "{}:{}:{} {} {} {} هـ".format(
            printer.number(t.hour, 2),
            printer.number(t.minute, 2),
            printer.number(t.second, 2),
            printer.number(self.day),
            self.month_name,
            printer.number(self.year),
        )

    # =========================
    # التنقل
    # =========================
    def week_starting_day(self) -> "HijriDate":
        g = self.gregorian
        start = _shift(g, -timedelta(days=Weekday.of(g.date())))
        parts = gregorian_to_hijri(start.date())
        return HijriDate(
            year=parts.year,
            month=parts.month,
            day=parts.day,
            weekday=parts.weekday,
            gregorian=_midnight(start.date(), start.tzinfo),
        )

    def month_starting_day(self) -> "HijriDate":
        return HijriDate._inverted(self.year, self.month, 1, self.gregorian.tzinfo)

    def next_month_start(self) -> "HijriDate":
        year = self.year
        month = self.month % 12 + 1
        if month == 1:
            year += 1
        return HijriDate._inverted(year, month, 1, self.gregorian.tzinfo)

    def current_day_start(self) -> "HijriDate":
        return self._day_time(0)

    def next_day_start(self) -> "HijriDate":
        return self._day_time(1)

    def _day_time(self, inc: int) -> "HijriDate":
        g = self.gregorian
        return HijriDate(
            year=self.year,
            month=self.month,
            day=self.day,
            weekday=self.weekday,
            gregorian=_shift(_midnight(g.date(), g.tzinfo), timedelta(days=inc)),
        )

    def contains(self, instant: datetime) -> bool:
        x = as_utc(instant)
        return self.current_day_start().gregorian < x < self.next_day_start().gregorian
