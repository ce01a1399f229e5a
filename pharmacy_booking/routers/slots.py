# pharmacy_booking/routers/slots.py
"""
Slots API endpoints.

POST /slots/overrides - Apply holiday/tenant rules to a raw calendar
POST /slots/day       - Bookable slots for a selected date
GET  /slots/rules     - Active rule tables (debug)
"""

from datetime import datetime, timezone
from fastapi import APIRouter

from ..schemas.slots import (
    HolidayInfo,
    OverridesRequest,
    OverridesResponse,
    RulesResponse,
    SlotInfo,
    SlotsDayRequest,
    SlotsDayResponse,
    TenantRulesInfo,
)
from ..services.slots import (
    apply_overrides,
    format_slot_range,
    get_booking_config,
    get_override_rules,
    select_slots,
)


router = APIRouter(prefix="/slots", tags=["slots"])


@router.post("/overrides", response_model=OverridesResponse)
def post_overrides(body: OverridesRequest):
    """Apply override rules to a calendar (same shape, some slots closed)."""
    calendar = apply_overrides(body.calendar, body.tenant_id, body.service_id)
    return OverridesResponse(calendar=calendar)


@router.post("/day", response_model=SlotsDayResponse)
def post_slots_day(body: SlotsDayRequest):
    """Get ordered bookable slots for the selected date."""
    config = get_booking_config()
    now = body.now or datetime.now(timezone.utc)

    # Holiday closures apply to every tenant, known or not
    calendar = apply_overrides(body.calendar, body.tenant_id, body.service_id, config=config)

    slots = select_slots(body.selected_date, calendar, now, config)

    return SlotsDayResponse(
        selected_date=body.selected_date,
        slots=[
            SlotInfo(
                start_time=slot.start_time,
                end_time=slot.end_time,
                available=slot.available,
                label=format_slot_range(slot, config),
            )
            for slot in slots
        ],
        count=len(slots),
    )


@router.get("/rules", response_model=RulesResponse)
def get_rules():
    """Get active override rules (admin/debug endpoint)."""
    config = get_booking_config()
    rules = get_override_rules()

    holidays = [
        HolidayInfo(
            date=holiday.date,
            open_windows={
                tenant_id: [str(w) for w in windows]
                for tenant_id, windows in holiday.open_windows.items()
            },
        )
        for holiday in sorted(rules.holidays.values(), key=lambda h: h.date)
    ]
    tenants = [
        TenantRulesInfo(
            tenant_id=tenant.tenant_id,
            lunch_blackout=[str(w) for w in tenant.lunch_blackout],
            saturday_service_ids=(
                sorted(tenant.saturday_service_ids)
                if tenant.saturday_service_ids is not None
                else None
            ),
        )
        for tenant in sorted(rules.tenants.values(), key=lambda t: t.tenant_id)
    ]

    return RulesResponse(timezone=config.pharmacy_timezone, holidays=holidays, tenants=tenants)
