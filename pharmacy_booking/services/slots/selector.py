# pharmacy_booking/services/slots/selector.py
"""
Slot selector: bookable slots for one selected date.

Contains:
✓ available flag (set upstream by the override engine)
✓ same-day cutoff (slot must start after now + min_advance)
✓ ordering by start instant (stable)

Does NOT contain:
✗ Holiday / tenant rules (apply_overrides runs first)
"""

from datetime import date, datetime
from typing import Callable

from ...schemas.slots import DayAvailability, TimeSlot
from .config import BookingConfig, get_booking_config
from .windows import to_pharmacy_time


def select_slots(
    selected_date: date | datetime | None,
    calendar: list[DayAvailability],
    now: datetime,
    config: BookingConfig | None = None,
) -> list[TimeSlot]:
    """
    Get ordered bookable slots for selected_date.

    No selected date, no matching day or no open slots → empty list.
    """
    if selected_date is None:
        return []

    config = config or get_booking_config()
    date_str = _local_date(selected_date, config).isoformat()

    day = next((d for d in calendar if d.date.isoformat() == date_str), None)
    if day is None:
        return []

    local_now = to_pharmacy_time(now, config.tz)
    is_today = date_str == local_now.date().isoformat()
    cutoff = local_now + config.min_advance

    valid = [
        slot
        for slot in day.time_slots
        if slot.available and (not is_today or slot.start_time > cutoff)
    ]

    return sorted(valid, key=lambda s: s.start_time)


def _local_date(value: date | datetime, config: BookingConfig) -> date:
    if isinstance(value, datetime):
        return to_pharmacy_time(value, config.tz).date()
    return value


# ── Reactive view ────────────────────────────────────────────────────────


class BookableSlots:
    """
    Memoized select_slots over changing inputs.

    Recomputes only when selected_date, calendar or now changed, and
    notifies subscribers when the resulting slot list differs.
    """

    def __init__(
        self,
        calendar: list[DayAvailability] | None = None,
        selected_date: date | datetime | None = None,
        now: datetime | None = None,
        config: BookingConfig | None = None,
    ):
        self.config = config or get_booking_config()
        self._calendar = list(calendar or [])
        self._selected_date = selected_date
        self._now = now
        self._slots: list[TimeSlot] | None = None
        self._subscribers: list[Callable[[list[TimeSlot]], None]] = []

    # ── Inputs ───────────────────────────────────────────────────────────

    @property
    def calendar(self) -> list[DayAvailability]:
        return list(self._calendar)

    @calendar.setter
    def calendar(self, value: list[DayAvailability]) -> None:
        value = list(value)
        if value != self._calendar:
            self._calendar = value
            self._changed()

    @property
    def selected_date(self) -> date | datetime | None:
        return self._selected_date

    @selected_date.setter
    def selected_date(self, value: date | datetime | None) -> None:
        if value != self._selected_date:
            self._selected_date = value
            self._changed()

    @property
    def now(self) -> datetime | None:
        return self._now

    @now.setter
    def now(self, value: datetime) -> None:
        if value != self._now:
            self._now = value
            self._changed()

    # ── Output ───────────────────────────────────────────────────────────

    @property
    def slots(self) -> list[TimeSlot]:
        if self._slots is None:
            self._slots = self._compute()
        return list(self._slots)

    def subscribe(self, callback: Callable[[list[TimeSlot]], None]) -> Callable[[], None]:
        """Register callback(slots). Returns an unsubscribe function."""
        if self._slots is None:
            # Baseline for change detection
            self._slots = self._compute()
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _compute(self) -> list[TimeSlot]:
        if self._now is None:
            return []
        return select_slots(self._selected_date, self._calendar, self._now, self.config)

    def _changed(self) -> None:
        previous = self._slots
        self._slots = None
        if not self._subscribers:
            return
        current = self.slots
        if current != previous:
            for callback in list(self._subscribers):
                callback(current)
