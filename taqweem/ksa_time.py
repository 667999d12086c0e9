"""
Fixed-offset KSA civil day (UTC+3, no DST).

A CivilDay stores the instant in UTC with the offset added once, so its wall
clock reads KSA time while its tzinfo stays UTC. Two kinds of day boundary
come out of it:

* ``current_day_start`` / ``next_day_start``: midnight of the KSA date in the
  stored zone (for display; not shifted back).
* ``current_day_start_utc`` / ``next_day_start_utc``: the same midnight as a
  true UTC instant, safe to compare with instants coming from elsewhere.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from . import conf
from .weekdays import Weekday


def as_utc(value: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CivilDay:
    __slots__ = ("_t", "_offset")

    def __init__(self, shifted: datetime, offset: timedelta) -> None:
        # use current() / of(); ``offset`` is the one already added to ``shifted``
        self._t = shifted
        self._offset = offset

    @classmethod
    def current(cls) -> "CivilDay":
        offset = conf.utc_offset()
        return cls(datetime.now(timezone.utc) + offset, offset)

    @classmethod
    def of(cls, instant: datetime) -> "CivilDay":
        offset = conf.utc_offset()
        return cls(as_utc(instant) + offset, offset)

    @property
    def wall_clock(self) -> datetime:
        return self._t

    def __repr__(self) -> str:
        return f"CivilDay({self._t.isoformat()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilDay):
            return NotImplemented
        return (self._t, self._offset) == (other._t, other._offset)

    def __hash__(self) -> int:
        return hash((self._t, self._offset))

    # =========================
    # تواريخ نصية YYYY-MM-DD
    # =========================
    def date_string(self) -> str:
        return self._t.strftime("%Y-%m-%d")

    def week_date_string(self) -> str:
        """Sunday on or before the KSA date."""
        today = self._t.date()
        start = today - timedelta(days=Weekday.of(today))
        return start.strftime("%Y-%m-%d")

    def month_date_string(self) -> str:
        return date(self._t.year, self._t.month, 1).strftime("%Y-%m-%d")

    # =========================
    # حدود اليوم
    # =========================
    def current_day_start(self) -> datetime:
        return self._day_start(0)

    def next_day_start(self) -> datetime:
        return self._day_start(1)

    def _day_start(self, inc: int) -> datetime:
        s = self._t
        return datetime(s.year, s.month, s.day, tzinfo=s.tzinfo) + timedelta(days=inc)

    def current_day_start_utc(self) -> datetime:
        return self._day_start_utc(0)

    def next_day_start_utc(self) -> datetime:
        return self._day_start_utc(1)

    def _day_start_utc(self, inc: int) -> datetime:
        s = self._t.astimezone(timezone.utc)
        midnight = datetime(s.year, s.month, s.day, tzinfo=timezone.utc) + timedelta(days=inc)
        return midnight - self._offset

    def contains(self, instant: datetime) -> bool:
        """Strictly inside the KSA day; both boundaries are excluded."""
        x = as_utc(instant)
        return self.current_day_start_utc() < x < self.next_day_start_utc()
