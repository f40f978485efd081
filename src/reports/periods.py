"""Monday-to-Friday reporting windows."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from django.utils import timezone

WEEK_END_TIME = time(23, 59, 59)


@dataclass(frozen=True)
class WeekWindow:
    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end

    def as_dict(self) -> dict:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


def week_window(reference: datetime | date | None = None) -> WeekWindow:
    """Return the reporting window containing ``reference`` (default: now).

    The window runs from Monday 00:00:00 to Friday 23:59:59 in the server's
    time zone. Weeks are ISO weeks, so a Saturday or Sunday maps back to the
    Monday of the week that just ended.
    """
    tz = timezone.get_default_timezone()
    if reference is None:
        reference = timezone.now()

    if isinstance(reference, datetime):
        if timezone.is_aware(reference):
            reference = timezone.localtime(reference, tz)
        day = reference.date()
    else:
        day = reference

    monday = day - timedelta(days=day.weekday())
    friday = monday + timedelta(days=4)
    return WeekWindow(
        start=timezone.make_aware(datetime.combine(monday, time.min), tz),
        end=timezone.make_aware(datetime.combine(friday, WEEK_END_TIME), tz),
    )
