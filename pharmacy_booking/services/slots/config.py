# pharmacy_booking/services/slots/config.py
"""
Booking configuration for slots resolution.
"""

from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class BookingConfig:
    """
    Configuration for the availability pipeline.

    Attributes:
        pharmacy_timezone: Fixed civil timezone of the pharmacies. Dates,
            weekdays and minute-of-day are always evaluated here.
        min_advance_minutes: Same-day cutoff. Slots on today's date must
            start strictly later than now + this many minutes.
    """
    pharmacy_timezone: str = "Pacific/Auckland"
    min_advance_minutes: int = 60

    def __post_init__(self):
        """Validate configuration."""
        try:
            ZoneInfo(self.pharmacy_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown pharmacy_timezone: {self.pharmacy_timezone!r}") from e
        if self.min_advance_minutes < 0:
            raise ValueError(f"min_advance_minutes must be >= 0, got {self.min_advance_minutes}")

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.pharmacy_timezone)

    @property
    def min_advance(self) -> timedelta:
        return timedelta(minutes=self.min_advance_minutes)


@lru_cache
def get_booking_config() -> BookingConfig:
    """
    Get booking configuration (singleton).

    Built once from environment settings.
    """
    from ...config import settings

    return BookingConfig(
        pharmacy_timezone=settings.pharmacy_timezone,
        min_advance_minutes=settings.min_advance_minutes,
    )
