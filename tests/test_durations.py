"""Tests for Arabic duration text."""

from datetime import timedelta

import pytest
from django.test import override_settings

from taqweem.durations import Agreement, TimeUnit, UNIT_WORDS, agreement_class, duration_to_text


class TestDurationToText:
    @pytest.mark.parametrize(
        "d, expected",
        [
            (timedelta(0), ""),
            (timedelta(seconds=59), ""),
            (timedelta(minutes=1), "دقيقة"),
            (timedelta(minutes=2), "دقيقتان"),
            (timedelta(minutes=45), "45 دقيقة"),
            (timedelta(minutes=7), "7 دقائق"),
            (timedelta(hours=1), "ساعة"),
            (timedelta(hours=2), "ساعات"),
            (timedelta(hours=10), "10 ساعات"),
            (timedelta(hours=11), "11 ساعة"),
            (timedelta(days=1), "يوم"),
            (timedelta(days=2), "يومان"),
            (timedelta(days=5), "5 أيام"),
            (timedelta(days=30), "30 يوما"),
        ],
    )
    def test_examples(self, d, expected):
        assert duration_to_text(d) == expected

    def test_largest_unit_only(self):
        assert duration_to_text(timedelta(minutes=90)) == "ساعة"
        assert duration_to_text(timedelta(days=3, hours=23, minutes=59)) == "3 أيام"

    def test_truncates_partial_minutes(self):
        assert duration_to_text(timedelta(minutes=59, seconds=59)) == "59 دقيقة"

    def test_negative_is_empty(self):
        assert duration_to_text(timedelta(minutes=-5)) == ""
        assert duration_to_text(timedelta(days=-2)) == ""

    def test_arabic_digits(self):
        assert duration_to_text(timedelta(days=5), arabic_digits=True) == "٥ أيام"
        assert duration_to_text(timedelta(days=1), arabic_digits=True) == "يوم"

    def test_arabic_digits_setting(self):
        with override_settings(TAQWEEM_DURATION_ARABIC_DIGITS=True):
            assert duration_to_text(timedelta(minutes=45)) == "٤٥ دقيقة"


class TestAgreementTable:
    def test_classes(self):
        assert agreement_class(1) is Agreement.SINGULAR
        assert agreement_class(2) is Agreement.DUAL
        assert [agreement_class(n) for n in range(3, 11)] == [Agreement.FEW] * 8
        assert agreement_class(11) is Agreement.MANY
        assert agreement_class(0) is Agreement.MANY

    def test_every_unit_has_every_class(self):
        for unit in TimeUnit:
            assert set(UNIT_WORDS[unit]) == set(Agreement)
