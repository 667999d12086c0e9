from __future__ import annotations

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = "taqweem-dev-only"
DEBUG = True
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "taqweem.apps.TaqweemConfig",
]

DATABASES: dict = {}

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

LANGUAGE_CODE = "ar"
TIME_ZONE = "Asia/Riyadh"
USE_TZ = True

# =========================
# التقويم
# =========================
TAQWEEM_TIME_ZONE = "Asia/Riyadh"
TAQWEEM_UTC_OFFSET_HOURS = 3
TAQWEEM_DURATION_ARABIC_DIGITS = False

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {"taqweem": {"handlers": ["console"], "level": "INFO"}},
}
