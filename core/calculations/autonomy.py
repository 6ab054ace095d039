# -*- coding: utf-8 -*-
"""Battery autonomy under irradiance scenarios.

Scenarios:
  - current: today's generation, exactly as the totals compute it.
  - peak   : solar at its baseline (best available full-sun hours).
  - cloud  : solar at a functional overcast level (see ``cloud_hours``).
  - zero   : no generation at all.

current starts the countdown at today's SoC; the others start from a full
battery because they describe buffer capacity, not today's trajectory.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, Optional

from core.calculations.effective_hours import effective_source_hours
from core.calculations.solar_hours import read_forecast_hours
from core.calculations.totals import capacity_wh, daily_wh_consumed, source_daily_wh
from core.models.energy import (
    DEFAULT_SOLAR_HOURS,
    AutonomyResult,
    BatteryConfig,
    ForecastMode,
    GenerationSource,
    LoadItem,
    Scenario,
    SolarStatus,
)
from core.numeric import clamp, finite_or, scrub

PARTLY_CLOUDY_FACTOR = 0.60
OVERCAST_FLOOR_FACTOR = 0.20
MAX_AUTONOMY_DAYS = 9999.0


def baseline_solar_hours(source: GenerationSource, battery: BatteryConfig) -> float:
    """Best-case full-sun hours: forecast sunny (auto only), else manual, else 4.0."""
    if source.auto_solar:
        sunny = read_forecast_hours(battery, "sunny_hours")
        if sunny.status is SolarStatus.OK and sunny.value is not None:
            return sunny.value
    manual = finite_or(source.hours)
    return manual if manual > 0 else DEFAULT_SOLAR_HOURS


def cloud_hours(source: GenerationSource, battery: BatteryConfig) -> float:
    """Overcast hours: max(forecast cloudy, 60% of baseline, 20% of baseline).

    Diffuse light keeps heavy overcast at roughly 15-25% of clear sky and
    partly cloudy at 50-75%, so the 20% floor is never undercut.
    """
    baseline = baseline_solar_hours(source, battery)
    forecast_cloudy = 0.0
    if source.auto_solar and battery.forecast_mode == ForecastMode.MONTH_AVG:
        cloudy = read_forecast_hours(battery, "cloudy_hours")
        if cloudy.status is SolarStatus.OK and cloudy.value is not None:
            forecast_cloudy = cloudy.value
    return max(
        forecast_cloudy,
        baseline * PARTLY_CLOUDY_FACTOR,
        baseline * OVERCAST_FLOOR_FACTOR,
    )


def scenario_source_hours(source: GenerationSource, battery: BatteryConfig, scenario: Scenario) -> float:
    if scenario is Scenario.ZERO:
        return 0.0
    if scenario is Scenario.CURRENT:
        return effective_source_hours(source, battery)
    if not source.is_solar:
        return max(0.0, finite_or(source.hours))
    if scenario is Scenario.PEAK:
        return baseline_solar_hours(source, battery)
    if scenario is Scenario.CLOUD:
        return cloud_hours(source, battery)
    raise ValueError(f"Unknown scenario: {scenario!r}")


def scenario_wh_generated(
    sources: Iterable[GenerationSource],
    battery: BatteryConfig,
    scenario: Scenario,
) -> float:
    total = 0.0
    for source in sources or []:
        if source.enabled is False:
            continue
        total += source_daily_wh(source, scenario_source_hours(source, battery, scenario))
    return scrub(total)


def _basis_soc(battery: BatteryConfig, scenario: Scenario, current_soc: Optional[float]) -> float:
    if scenario is Scenario.CURRENT:
        soc = current_soc if current_soc is not None else battery.initial_soc
        return clamp(finite_or(soc), 0.0, 100.0)
    return 100.0


def project_autonomy(
    loads: Iterable[LoadItem],
    sources: Iterable[GenerationSource],
    battery: BatteryConfig,
    scenario: Scenario,
    current_soc: Optional[float] = None,
) -> AutonomyResult:
    """Days/hours until a daily deficit empties the battery under ``scenario``."""
    scenario = Scenario(scenario)
    loads = list(loads or [])

    consumed = daily_wh_consumed(loads, finite_or(battery.voltage))
    generated = scenario_wh_generated(sources, battery, scenario)
    net = scrub(generated - consumed)

    if net >= 0:
        return AutonomyResult(scenario=scenario, days=math.inf, hours=math.inf, net_wh=net)

    deficit = abs(net)
    remaining = capacity_wh(battery) * _basis_soc(battery, scenario, current_soc) / 100.0
    days = remaining / deficit

    if not math.isfinite(days) or days >= MAX_AUTONOMY_DAYS:
        return AutonomyResult(scenario=scenario, days=math.inf, hours=math.inf, net_wh=net)
    return AutonomyResult(scenario=scenario, days=days, hours=days * 24.0, net_wh=net)


def project_all_scenarios(
    loads: Iterable[LoadItem],
    sources: Iterable[GenerationSource],
    battery: BatteryConfig,
    current_soc: Optional[float] = None,
) -> Dict[Scenario, AutonomyResult]:
    loads = list(loads or [])
    sources = list(sources or [])
    return {
        sc: project_autonomy(loads, sources, battery, sc, current_soc=current_soc)
        for sc in Scenario
    }
