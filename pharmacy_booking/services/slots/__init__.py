# pharmacy_booking/services/slots/__init__.py
"""
Slots availability module.

Step 1: Override engine (holiday closures, tenant recurring rules)
Step 2: Slot selector (selected date, same-day cutoff, ordering)
"""

from .config import BookingConfig, get_booking_config
from .rules import (
    OverrideRules,
    RuleTableError,
    TenantRules,
    get_override_rules,
    load_override_rules,
)
from .overrides import apply_overrides
from .selector import BookableSlots, select_slots
from .formatting import format_pharmacy_date, format_pharmacy_time, format_slot_range
from .windows import MinuteWindow, minute_of_day_in_window

__all__ = [
    "BookingConfig",
    "get_booking_config",
    "OverrideRules",
    "RuleTableError",
    "TenantRules",
    "get_override_rules",
    "load_override_rules",
    "apply_overrides",
    "BookableSlots",
    "select_slots",
    "format_pharmacy_date",
    "format_pharmacy_time",
    "format_slot_range",
    "MinuteWindow",
    "minute_of_day_in_window",
]
