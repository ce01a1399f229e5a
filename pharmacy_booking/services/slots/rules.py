# pharmacy_booking/services/slots/rules.py
"""
Override rule tables.

Two kinds of rules:
✓ Holidays: dates closed for every tenant, with per-tenant open windows
✓ Tenant rules: recurring restrictions for a specific pharmacy
  (weekday lunch blackout, Saturday service gating)

Tables are read-only and built once per process (get_override_rules).
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from pydantic import ValidationError

from ...schemas.override_rules import OverrideRulesFile
from .windows import MinuteWindow

logger = logging.getLogger(__name__)


class RuleTableError(ValueError):
    """Override rule file could not be loaded."""


# ── Tenants & services ───────────────────────────────────────────────────

VERCOE_ROAD = 3
UNICHEM_MILFORD = 4
DEVONPORT_7_DAY = 5
MANGAWHAI = 6
UNICHEM_RUSSELL_STREET = 7
UNICHEM_PUTARURU = 8
GILMOURS_HAVELOCK_NORTH = 9

# Services Unichem Milford still offers on Saturdays
UNICHEM_MILFORD_SATURDAY_SERVICE_IDS = frozenset({150, 152, 153, 154, 155, 156, 157})


def normalize_id(value: int | str | None) -> int | None:
    """
    Normalize a tenant/service id to int.

    Returns None for anything that is not an integer id.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


# ── Rule records ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HolidayRule:
    """A closed date. Tenants listed in open_windows stay open inside them."""
    date: date
    open_windows: Mapping[int, tuple[MinuteWindow, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def windows_for(self, tenant_id: int | None) -> tuple[MinuteWindow, ...]:
        if tenant_id is None:
            return ()
        return self.open_windows.get(tenant_id, ())


@dataclass(frozen=True)
class TenantRules:
    """
    Recurring restrictions for one tenant.

    Attributes:
        lunch_blackout: Windows closed Mon-Fri.
        saturday_service_ids: If set, only these services may be booked
            on Saturdays. None = no Saturday gating.
    """
    tenant_id: int | None
    lunch_blackout: tuple[MinuteWindow, ...] = ()
    saturday_service_ids: frozenset[int] | None = None

    def saturday_allows(self, service_id: int | None) -> bool:
        if self.saturday_service_ids is None:
            return True
        return service_id in self.saturday_service_ids


NO_TENANT_RULES = TenantRules(tenant_id=None)


@dataclass(frozen=True)
class OverrideRules:
    holidays: Mapping[date, HolidayRule] = field(default_factory=lambda: MappingProxyType({}))
    tenants: Mapping[int, TenantRules] = field(default_factory=lambda: MappingProxyType({}))

    def holiday_for(self, day: date) -> HolidayRule | None:
        return self.holidays.get(day)

    def for_tenant(self, tenant_id: int | None) -> TenantRules:
        """Recurring rules for a tenant. Unknown tenants get NO_TENANT_RULES."""
        if tenant_id is not None and tenant_id in self.tenants:
            return self.tenants[tenant_id]
        return NO_TENANT_RULES


def _windows(pairs) -> tuple[MinuteWindow, ...]:
    return tuple(sorted(MinuteWindow.from_strings(start, end) for start, end in pairs))


def build_override_rules(
    holidays: Mapping[date, Mapping[int, list[tuple[str, str]]]],
    tenants: list[TenantRules],
) -> OverrideRules:
    """Build frozen rule tables from plain holiday/tenant definitions."""
    holiday_rules = {
        day: HolidayRule(
            date=day,
            open_windows=MappingProxyType(
                {tenant_id: _windows(pairs) for tenant_id, pairs in windows.items()}
            ),
        )
        for day, windows in holidays.items()
    }
    return OverrideRules(
        holidays=MappingProxyType(holiday_rules),
        tenants=MappingProxyType({t.tenant_id: t for t in tenants}),
    )


# ── Defaults (NZ public holidays) ────────────────────────────────────────

DEFAULT_HOLIDAYS: dict[date, dict[int, list[tuple[str, str]]]] = {
    # Labour Day
    date(2025, 10, 27): {
        DEVONPORT_7_DAY: [("10:00", "16:00")],
        UNICHEM_RUSSELL_STREET: [("09:00", "15:00")],
    },
    # Christmas & New Year
    date(2025, 12, 25): {UNICHEM_RUSSELL_STREET: [("09:00", "15:00")]},
    date(2026, 1, 1): {UNICHEM_RUSSELL_STREET: [("09:00", "15:00")]},
    date(2026, 1, 2): {UNICHEM_RUSSELL_STREET: [("09:00", "15:00")]},
}

DEFAULT_TENANT_RULES = [
    TenantRules(
        tenant_id=UNICHEM_MILFORD,
        lunch_blackout=_windows([("12:00", "13:00")]),
        saturday_service_ids=UNICHEM_MILFORD_SATURDAY_SERVICE_IDS,
    ),
]

DEFAULT_OVERRIDE_RULES = build_override_rules(DEFAULT_HOLIDAYS, DEFAULT_TENANT_RULES)


# ── Loading ──────────────────────────────────────────────────────────────


def load_override_rules(path: Path) -> OverrideRules:
    """
    Load rule tables from a JSON file.

    Raises:
        RuleTableError: file missing, not JSON, or not a valid rule table.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        parsed = OverrideRulesFile.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise RuleTableError(f"Invalid override rules file {path}: {e}") from e

    try:
        rules = build_override_rules(
            {h.date: h.open_windows for h in parsed.holidays},
            [
                TenantRules(
                    tenant_id=t.tenant_id,
                    lunch_blackout=_windows(t.lunch_blackout),
                    saturday_service_ids=(
                        frozenset(t.saturday_service_ids)
                        if t.saturday_service_ids is not None
                        else None
                    ),
                )
                for t in parsed.tenants
            ],
        )
    except ValueError as e:
        raise RuleTableError(f"Invalid window in override rules file {path}: {e}") from e

    logger.info(
        f"Loaded override rules from {path}: "
        f"{len(rules.holidays)} holidays, {len(rules.tenants)} tenants"
    )
    return rules


@lru_cache
def get_override_rules() -> OverrideRules:
    """
    Get override rules (singleton).

    Uses the configured rule file if set, built-in defaults otherwise.
    """
    from ...config import settings

    path = settings.resolved_override_rules_file
    if path is None:
        return DEFAULT_OVERRIDE_RULES
    return load_override_rules(path)
