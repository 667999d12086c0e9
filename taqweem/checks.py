from __future__ import annotations

from django.core.checks import Error, register

from . import conf
from .errors import ZoneDatabaseUnavailable


@register()
def check_time_zone(app_configs, **kwargs):
    try:
        conf.riyadh_zone()
    except ZoneDatabaseUnavailable as e:
        return [
            Error(
                str(e),
                hint="Set TAQWEEM_TIME_ZONE to a valid IANA zone or install tzdata.",
                id="taqweem.E001",
            )
        ]
    return []
