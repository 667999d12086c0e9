from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.conf import settings

from .errors import ZoneDatabaseUnavailable

DEFAULT_TIME_ZONE = "Asia/Riyadh"
DEFAULT_UTC_OFFSET_HOURS = 3


def _setting(name: str, default):
    # يعمل حتى بدون settings.configure() (استخدام المكتبة خارج مشروع Django)
    if not settings.configured:
        return default
    return getattr(settings, name, default)


def time_zone_name() -> str:
    return _setting("TAQWEEM_TIME_ZONE", DEFAULT_TIME_ZONE)


def utc_offset() -> timedelta:
    return timedelta(hours=int(_setting("TAQWEEM_UTC_OFFSET_HOURS", DEFAULT_UTC_OFFSET_HOURS)))


def duration_arabic_digits() -> bool:
    return bool(_setting("TAQWEEM_DURATION_ARABIC_DIGITS", False))


@lru_cache(maxsize=None)
def load_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ZoneDatabaseUnavailable(f"Time zone not available: {name!r}") from e


def riyadh_zone() -> ZoneInfo:
    """The named zone HijriDate values are expressed in (Asia/Riyadh by default)."""
    return load_zone(time_zone_name())
