import os
from datetime import datetime, timezone

import django
import pytest


def pytest_configure():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    django.setup()


@pytest.fixture
def utc():
    def make(*args):
        return datetime(*args, tzinfo=timezone.utc)

    return make
