# pharmacy_booking/services/slots/formatting.py
"""
Display helpers for slots, always rendered in pharmacy time (en-NZ style).

  format_pharmacy_time → "09:30 am"
  format_pharmacy_date → "Saturday, 1 June 2024"
"""

from datetime import date, datetime

from ...schemas.slots import TimeSlot
from .config import BookingConfig, get_booking_config
from .windows import to_pharmacy_time

# en-NZ names, independent of the process locale
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _as_local(value: datetime | str, config: BookingConfig) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return to_pharmacy_time(value, config.tz)


def format_pharmacy_time(value: datetime | str, config: BookingConfig | None = None) -> str:
    """Format an instant as "hh:mm am/pm" in pharmacy time."""
    local = _as_local(value, config or get_booking_config())
    suffix = "am" if local.hour < 12 else "pm"
    return f"{local.hour % 12 or 12:02d}:{local.minute:02d} {suffix}"


def format_pharmacy_date(value: date | datetime | str, config: BookingConfig | None = None) -> str:
    """Format a date or instant as "Weekday, D Month YYYY" in pharmacy time."""
    if isinstance(value, date) and not isinstance(value, datetime):
        local = value
    else:
        local = _as_local(value, config or get_booking_config())
    return f"{WEEKDAY_NAMES[local.isoweekday() - 1]}, {local.day} {MONTH_NAMES[local.month - 1]} {local.year}"


def format_slot_range(slot: TimeSlot, config: BookingConfig | None = None) -> str:
    config = config or get_booking_config()
    return f"{format_pharmacy_time(slot.start_time, config)} – {format_pharmacy_time(slot.end_time, config)}"
