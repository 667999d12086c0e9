from __future__ import annotations

from django.apps import AppConfig


class TaqweemConfig(AppConfig):
    name = "taqweem"
    verbose_name = "التقويم"

    def ready(self):
        from . import checks  # noqa: F401
