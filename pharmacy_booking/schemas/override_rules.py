# pharmacy_booking/schemas/override_rules.py
"""
File format for override rule tables.

Example:
    {
      "holidays": [
        {"date": "2025-12-25", "open_windows": {"7": [["09:00", "15:00"]]}}
      ],
      "tenants": [
        {"tenant_id": 4, "lunch_blackout": [["12:00", "13:00"]],
         "saturday_service_ids": [150, 152]}
      ]
    }
"""

from datetime import date
from pydantic import BaseModel, Field


class HolidayRuleSchema(BaseModel):
    date: date
    # tenant_id -> [[from, to], ...] in pharmacy time; absent tenant = closed
    open_windows: dict[int, list[tuple[str, str]]] = Field(default_factory=dict)


class TenantRulesSchema(BaseModel):
    tenant_id: int
    lunch_blackout: list[tuple[str, str]] = Field(default_factory=list)
    saturday_service_ids: list[int] | None = None


class OverrideRulesFile(BaseModel):
    holidays: list[HolidayRuleSchema] = Field(default_factory=list)
    tenants: list[TenantRulesSchema] = Field(default_factory=list)
