# -*- coding: utf-8 -*-
"""Validations for energy-ledger inputs.

None of these block a calculation: the core always returns a number. They
tell the caller which numbers rest on fallbacks or suspicious input.
"""

from __future__ import annotations

from typing import Iterable, List

from core.calculations.solar_hours import normalize_auto_solar_hours
from core.models.energy import BatteryConfig, GenerationSource, LoadItem, SolarStatus
from core.numeric import finite_or
from core.types import Issue, Severity


def validate_battery(battery: BatteryConfig) -> List[Issue]:
    issues: List[Issue] = []

    if finite_or(battery.voltage) <= 0:
        issues.append(Issue(code="BAT_VOLTAGE_INVALID", message="Bus voltage must be > 0; Ah figures will read 0.", severity=Severity.ERROR, context="voltage"))
    if finite_or(battery.capacity_ah) <= 0:
        issues.append(Issue(code="BAT_CAPACITY_INVALID", message="Battery capacity must be > 0 Ah.", severity=Severity.ERROR, context="capacityAh"))

    soc = finite_or(battery.initial_soc, -1.0)
    if soc < 0 or soc > 100:
        issues.append(Issue(code="BAT_SOC_RANGE", message="Initial state of charge should be between 0 and 100 %.", severity=Severity.WARNING, context="initialSoC"))

    return issues


def validate_loads(loads: Iterable[LoadItem]) -> List[Issue]:
    issues: List[Issue] = []
    for item in loads or []:
        duty = finite_or(item.duty_cycle, -1.0)
        if duty < 0 or duty > 100:
            issues.append(Issue(code="LOAD_DUTY_RANGE", message=f"Duty cycle of '{item.name}' should be between 0 and 100 %.", severity=Severity.WARNING, context=item.id))
        if finite_or(item.watts) < 0:
            issues.append(Issue(code="LOAD_WATTS_NEGATIVE", message=f"'{item.name}' has negative watts.", severity=Severity.WARNING, context=item.id))
    return issues


def validate_sources(sources: Iterable[GenerationSource], battery: BatteryConfig) -> List[Issue]:
    issues: List[Issue] = []
    sources = list(sources or [])

    for src in sources:
        eff = finite_or(src.efficiency, -1.0)
        if eff < 0 or eff > 1:
            issues.append(Issue(code="SRC_EFF_RANGE", message=f"Efficiency of '{src.name}' should be a fraction between 0 and 1.", severity=Severity.WARNING, context=src.id))
        if src.is_solar and not src.auto_solar and finite_or(src.hours) == 0:
            issues.append(Issue(code="SRC_SOLAR_HOURS_UNSET", message=f"'{src.name}' has 0 manual hours; the 4.0 h default is used.", severity=Severity.INFO, context=src.id))

    if not any(s.is_solar and s.auto_solar and s.enabled is not False for s in sources):
        return issues

    norm = normalize_auto_solar_hours(battery)
    if norm.status is SolarStatus.LOADING:
        issues.append(Issue(code="SOLAR_FORECAST_LOADING", message="Solar forecast is still loading; auto-solar sources use manual or default hours.", severity=Severity.INFO, context="forecast"))
    elif norm.status is SolarStatus.NODATA:
        issues.append(Issue(code="SOLAR_FORECAST_NODATA", message="No solar forecast available; auto-solar sources use manual or default hours.", severity=Severity.WARNING, context="forecast"))
    elif norm.status is SolarStatus.INVALID:
        issues.append(Issue(code="SOLAR_FORECAST_INVALID", message="Solar forecast value is out of range; auto-solar sources use manual or default hours.", severity=Severity.WARNING, context="forecast"))

    return issues


def validate_energy_inputs(
    loads: Iterable[LoadItem],
    sources: Iterable[GenerationSource],
    battery: BatteryConfig,
) -> List[Issue]:
    return validate_battery(battery) + validate_loads(loads) + validate_sources(sources, battery)
