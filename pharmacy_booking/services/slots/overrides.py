# pharmacy_booking/services/slots/overrides.py
"""
Override engine: narrows availability of a raw calendar.

Per slot, in this order:
  1. Holiday — date closed unless the slot sits in a tenant open window.
     Closure is final: tenant rules are not evaluated.
  2. Tenant rules — weekday lunch blackout, Saturday service gating.

Rules only ever turn availability off. Input is not mutated; output
keeps the same days, slots and ordering.
"""

import logging

from ...schemas.slots import DayAvailability, TimeSlot
from .config import BookingConfig, get_booking_config
from .rules import OverrideRules, TenantRules, get_override_rules, normalize_id
from .windows import iso_weekday, minute_of_day, minute_of_day_in_window, to_pharmacy_time

logger = logging.getLogger(__name__)

SATURDAY = 6


def apply_overrides(
    calendar: list[DayAvailability],
    tenant_id: int | str | None,
    service_id: int | str | None,
    rules: OverrideRules | None = None,
    config: BookingConfig | None = None,
) -> list[DayAvailability]:
    """
    Apply holiday and tenant rules to a calendar.

    Unknown or malformed ids never raise: an unknown tenant gets no
    tenant rules and no holiday open windows.

    Returns:
        New calendar with some slots flagged unavailable.
    """
    rules = rules or get_override_rules()
    config = config or get_booking_config()

    tid = normalize_id(tenant_id)
    sid = normalize_id(service_id)
    tenant_rules = rules.for_tenant(tid)

    narrowed = 0
    adjusted: list[DayAvailability] = []

    for day in calendar:
        slots: list[TimeSlot] = []
        for slot in day.time_slots:
            if slot.available and _is_closed(slot, tid, sid, tenant_rules, rules, config):
                slot = slot.model_copy(update={"available": False})
                narrowed += 1
            slots.append(slot)
        adjusted.append(day.model_copy(update={"time_slots": slots}))

    logger.debug(f"Overrides for tenant={tenant_id} service={service_id}: {narrowed} slots closed")
    return adjusted


def _is_closed(
    slot: TimeSlot,
    tenant_id: int | None,
    service_id: int | None,
    tenant_rules: TenantRules,
    rules: OverrideRules,
    config: BookingConfig,
) -> bool:
    start = to_pharmacy_time(slot.start_time, config.tz)
    minutes = minute_of_day(start)

    # Step 1: Holiday closure, unless inside the tenant's open window
    holiday = rules.holiday_for(start.date())
    if holiday is not None:
        allowed = holiday.windows_for(tenant_id)
        if not allowed or not minute_of_day_in_window(minutes, allowed):
            return True

    # Step 2: Tenant recurring rules
    weekday = iso_weekday(start)

    if weekday <= 5 and minute_of_day_in_window(minutes, tenant_rules.lunch_blackout):
        return True

    if weekday == SATURDAY and not tenant_rules.saturday_allows(service_id):
        return True

    return False
