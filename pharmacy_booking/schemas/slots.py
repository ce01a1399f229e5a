# pharmacy_booking/schemas/slots.py
"""
Pydantic schemas for slots API.

Wire format uses camelCase keys (startTime, timeSlots, ...) as produced
by the pharmacy data loader; Python code uses snake_case attributes.
"""

from datetime import date
from pydantic import AwareDatetime, BaseModel, Field


class TimeSlot(BaseModel):
    """A single advertised slot. Frozen: overrides produce copies."""
    start_time: AwareDatetime = Field(alias="startTime")
    end_time: AwareDatetime = Field(alias="endTime")
    available: bool = True

    model_config = {"frozen": True, "populate_by_name": True, "from_attributes": True}


class DayAvailability(BaseModel):
    """All slots advertised for one calendar date."""
    date: date
    time_slots: list[TimeSlot] = Field(default_factory=list, alias="timeSlots")

    model_config = {"frozen": True, "populate_by_name": True, "from_attributes": True}


class OverridesRequest(BaseModel):
    """Request to apply holiday and tenant rules to a raw calendar."""
    calendar: list[DayAvailability]
    tenant_id: int | str | None = Field(default=None, alias="tenantId")
    service_id: int | str | None = Field(default=None, alias="serviceId")

    model_config = {"populate_by_name": True}


class OverridesResponse(BaseModel):
    """Adjusted calendar, same shape and order as the request."""
    calendar: list[DayAvailability]

    model_config = {"populate_by_name": True}


class SlotsDayRequest(BaseModel):
    """Request for the bookable slots of a selected day."""
    calendar: list[DayAvailability]
    selected_date: date | None = Field(default=None, alias="date")
    now: AwareDatetime | None = None  # Defaults to the system clock
    tenant_id: int | str | None = Field(default=None, alias="tenantId")
    service_id: int | str | None = Field(default=None, alias="serviceId")

    model_config = {"populate_by_name": True}


class SlotInfo(TimeSlot):
    """Bookable slot with its display label in pharmacy time."""
    label: str


class SlotsDayResponse(BaseModel):
    """Ordered bookable slots for a day."""
    selected_date: date | None = Field(default=None, alias="date")
    slots: list[SlotInfo]
    count: int

    model_config = {"populate_by_name": True}


class HolidayInfo(BaseModel):
    date: date
    open_windows: dict[int, list[str]] = Field(alias="openWindows")

    model_config = {"populate_by_name": True}


class TenantRulesInfo(BaseModel):
    tenant_id: int = Field(alias="tenantId")
    lunch_blackout: list[str] = Field(alias="lunchBlackout")
    saturday_service_ids: list[int] | None = Field(alias="saturdayServiceIds")

    model_config = {"populate_by_name": True}


class RulesResponse(BaseModel):
    """Active override rule tables (for debugging/admin)."""
    timezone: str
    holidays: list[HolidayInfo]
    tenants: list[TenantRulesInfo]

    model_config = {"populate_by_name": True}
