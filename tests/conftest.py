"""Pytest configuration and fixtures."""

from datetime import date, datetime, timedelta

import pytest

from pharmacy_booking.schemas.slots import DayAvailability, TimeSlot
from pharmacy_booking.services.slots import BookingConfig


def make_slot(start: str, minutes: int = 30, available: bool = True) -> TimeSlot:
    """Slot from an ISO-8601 start instant."""
    start_dt = datetime.fromisoformat(start)
    return TimeSlot(
        start_time=start_dt,
        end_time=start_dt + timedelta(minutes=minutes),
        available=available,
    )


def make_day(day: str, starts: list[str], offset: str = "+12:00", available: bool = True) -> DayAvailability:
    """Day with slots at "HH:MM" local clock times in the given UTC offset."""
    return DayAvailability(
        date=date.fromisoformat(day),
        time_slots=[make_slot(f"{day}T{hhmm}:00{offset}", available=available) for hhmm in starts],
    )


@pytest.fixture
def config() -> BookingConfig:
    return BookingConfig(pharmacy_timezone="Pacific/Auckland", min_advance_minutes=60)


@pytest.fixture
def saturday() -> DayAvailability:
    # 2024-06-01 is a Saturday (NZST, +12:00)
    return make_day("2024-06-01", ["09:00", "09:30", "10:00", "14:00"])


@pytest.fixture
def wednesday() -> DayAvailability:
    # 2024-06-05 is a Wednesday (NZST, +12:00)
    return make_day("2024-06-05", ["11:30", "12:00", "12:30", "13:00", "13:30"])
