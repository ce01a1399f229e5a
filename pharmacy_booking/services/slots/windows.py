# pharmacy_booking/services/slots/windows.py
"""
Time-window and timezone primitives shared by the override engine
and the slot selector.

Windows are half-open minute-of-day intervals [start, end) evaluated
in the pharmacy's civil time: a window ending at "13:00" excludes 13:00.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable
from zoneinfo import ZoneInfo

MINUTES_PER_DAY = 24 * 60


def time_str_to_minutes(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    hours, minutes = (int(part) for part in value.strip().split(":"))
    # "24:00" is allowed as an end-of-day bound
    if not (0 <= hours <= 24 and 0 <= minutes <= 59) or (hours == 24 and minutes):
        raise ValueError(f"Clock time out of range: {value!r}")
    return hours * 60 + minutes


def minutes_to_time_str(minutes: int) -> str:
    """Convert minutes since midnight to "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True, order=True)
class MinuteWindow:
    """Half-open [start, end) interval of minutes since midnight."""
    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end <= MINUTES_PER_DAY:
            raise ValueError(f"Invalid window: [{self.start}, {self.end})")

    @classmethod
    def from_strings(cls, start: str, end: str) -> "MinuteWindow":
        return cls(time_str_to_minutes(start), time_str_to_minutes(end))

    def contains(self, minute: int) -> bool:
        return self.start <= minute < self.end

    def __str__(self) -> str:
        return f"{minutes_to_time_str(self.start)}-{minutes_to_time_str(self.end)}"


def minute_of_day_in_window(minutes: int, windows: Iterable[MinuteWindow]) -> bool:
    """True if `minutes` falls inside at least one window."""
    return any(window.contains(minutes) for window in windows)


def to_pharmacy_time(instant: datetime, tz: ZoneInfo) -> datetime:
    """
    Convert an instant to pharmacy civil time.

    Naive datetimes are taken as already being pharmacy-local.
    """
    if instant.tzinfo is None:
        return instant.replace(tzinfo=tz)
    return instant.astimezone(tz)


def minute_of_day(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute


def iso_weekday(dt: datetime) -> int:
    """1 = Monday ... 7 = Sunday."""
    return dt.isoweekday()
