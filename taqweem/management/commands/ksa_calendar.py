from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from taqweem.errors import TaqweemError
from taqweem.exports import weeks_workbook
from taqweem.hijri import HijriDate
from taqweem.ksa_time import CivilDay
from taqweem.utils_dates import WORK_DAYS, civil_week_sunday, week_rows


def parse_instant(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class Command(BaseCommand):
    help = "Show KSA civil-day and Umm al-Qura boundaries for an instant, optionally exporting week sheets"

    def add_arguments(self, parser):
        parser.add_argument("--at", type=str, help="ISO instant (default: now). Naive values are UTC")
        parser.add_argument("--weeks", type=int, default=1, help="How many weeks to list from the KSA week start")
        parser.add_argument("--days", type=int, default=WORK_DAYS, help="Days per week row (default 5: Sun..Thu)")
        parser.add_argument("--xlsx", type=str, default="", help="Write the week sheets to this .xlsx file")

    def handle(self, *args, **options):
        at = options.get("at")
        weeks = options["weeks"]
        days = options["days"]
        xlsx = (options.get("xlsx") or "").strip()

        if weeks < 1:
            raise CommandError("--weeks must be >= 1")
        if not 1 <= days <= 7:
            raise CommandError("--days must be between 1 and 7")

        try:
            instant = parse_instant(at) if at else datetime.now(timezone.utc)
        except ValueError as e:
            raise CommandError(f"Invalid --at value: {at}") from e

        civil = CivilDay.of(instant)
        try:
            h = HijriDate.of(instant)
            month_start = h.month_starting_day()
            next_month = h.next_month_start()
            week_start = h.week_starting_day()

            sunday = civil_week_sunday(instant)
            sheets = [(i, week_rows(sunday, i, days=days)) for i in range(1, weeks + 1)]
        except TaqweemError as e:
            raise CommandError(str(e)) from e

        out = self.stdout
        out.write(f"KSA date:          {civil.date_string()}")
        out.write(f"KSA week start:    {civil.week_date_string()}")
        out.write(f"KSA month start:   {civil.month_date_string()}")
        out.write(f"Day (UTC):         {civil.current_day_start_utc().isoformat()} .. {civil.next_day_start_utc().isoformat()}")
        out.write(f"Hijri:             {h} ({h.weekday_name})")
        out.write(f"Hijri formatted:   {h.formatted()}")
        out.write(f"Hijri week start:  {week_start} = {week_start.gregorian:%Y-%m-%d}")
        out.write(f"Hijri month start: {month_start} = {month_start.gregorian:%Y-%m-%d}")
        out.write(f"Next Hijri month:  {next_month} = {next_month.gregorian:%Y-%m-%d}")

        for week_no, rows in sheets:
            out.write(f"-- week {week_no}")
            for r in rows:
                out.write(f"   {r['weekday_name']}  {r['greg_date']:%Y-%m-%d}  {r['hijri_date']}")

        if xlsx:
            path = Path(xlsx)
            if not path.parent.exists():
                raise CommandError(f"Directory not found: {path.parent}")
            weeks_workbook(sheets).save(str(path))
            self.stdout.write(self.style.SUCCESS(f"✅ Done. weeks={weeks} | file={path}"))
