# -*- coding: utf-8 -*-
"""Pure 24h totals for the whole system.

NOTE: This module must not depend on storage, services or the CLI.
"""

from __future__ import annotations

from typing import Dict, Iterable

from core.calculations.effective_hours import effective_source_hours
from core.calculations.item_energy import amp_hours, calculate_item_energy, unit_quantity
from core.models.energy import (
    BatteryConfig,
    GenerationSource,
    LoadCategory,
    LoadItem,
    SystemTotals,
)
from core.numeric import clamp, finite_or, scrub


def daily_wh_consumed(loads: Iterable[LoadItem], voltage: float) -> float:
    total = 0.0
    for item in loads or []:
        if item.enabled is False:
            continue
        total += calculate_item_energy(item, voltage).wh
    return scrub(total)


def source_daily_wh(source: GenerationSource, hours: float) -> float:
    """Wh per day for ``source`` over ``hours``. Input is watts: no voltage term."""
    input_w = finite_or(source.input_w)
    efficiency = finite_or(source.efficiency)
    return scrub(input_w * finite_or(hours) * efficiency * unit_quantity(source.quantity))


def daily_wh_generated(sources: Iterable[GenerationSource], battery: BatteryConfig) -> float:
    total = 0.0
    for source in sources or []:
        if source.enabled is False:
            continue
        total += source_daily_wh(source, effective_source_hours(source, battery))
    return scrub(total)


def consumption_by_category(loads: Iterable[LoadItem], voltage: float) -> Dict[LoadCategory, float]:
    """Enabled consumption per category, every category present (0 if empty)."""
    out: Dict[LoadCategory, float] = {cat: 0.0 for cat in LoadCategory}
    for item in loads or []:
        if item.enabled is False:
            continue
        out[item.category] += calculate_item_energy(item, voltage).wh
    return {cat: scrub(wh) for cat, wh in out.items()}


def capacity_wh(battery: BatteryConfig) -> float:
    return max(0.0, scrub(finite_or(battery.capacity_ah) * finite_or(battery.voltage)))


def project_final_soc(battery: BatteryConfig, net_wh: float) -> float:
    """End-of-day SoC %, as a ledger clamped to [0, capacity]."""
    cap = capacity_wh(battery)
    if cap <= 0:
        return 0.0
    start = finite_or(battery.initial_soc) / 100.0 * cap
    end = clamp(start + finite_or(net_wh), 0.0, cap)
    return scrub(end / cap * 100.0)


def compute_system_totals(
    loads: Iterable[LoadItem],
    sources: Iterable[GenerationSource],
    battery: BatteryConfig,
) -> SystemTotals:
    """Compute consumption, generation, net and projected SoC for one day."""
    voltage = finite_or(battery.voltage)

    consumed = daily_wh_consumed(loads, voltage)
    generated = daily_wh_generated(sources, battery)
    net = scrub(generated - consumed)

    ah_consumed = amp_hours(consumed, voltage)
    ah_generated = amp_hours(generated, voltage)

    return SystemTotals(
        daily_wh_consumed=consumed,
        daily_ah_consumed=ah_consumed,
        daily_wh_generated=generated,
        daily_ah_generated=ah_generated,
        net_wh=net,
        net_ah=scrub(ah_generated - ah_consumed),
        final_soc=project_final_soc(battery, net),
    )
