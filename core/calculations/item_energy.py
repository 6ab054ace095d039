# -*- coding: utf-8 -*-
"""Daily energy of a single load row."""

from __future__ import annotations

from core.calculations.inverter import inverter_efficiency
from core.models.energy import ItemEnergy, LoadCategory, LoadItem
from core.numeric import finite_or, scrub


def unit_quantity(quantity: float) -> float:
    """Quantity with default 1 and a floor of 1."""
    return max(1.0, finite_or(quantity, 1.0))


def amp_hours(wh: float, voltage: float) -> float:
    v = finite_or(voltage)
    if v == 0:
        return 0.0
    return scrub(wh / v)


def calculate_item_energy(item: LoadItem, voltage: float) -> ItemEnergy:
    """Wh/Ah per day for ``item`` on a ``voltage`` bus.

    AC loads are grossed up by the inverter efficiency at their per-unit
    wattage; DC and system loads are taken at face value.
    """
    watts = finite_or(item.watts)
    hours = finite_or(item.hours)
    duty = finite_or(item.duty_cycle) / 100.0
    qty = unit_quantity(item.quantity)

    efficiency = 1.0
    if item.category == LoadCategory.AC:
        efficiency = inverter_efficiency(watts)
    total_watts = watts / efficiency

    wh = scrub(total_watts * hours * duty * qty)
    return ItemEnergy(wh=wh, ah=amp_hours(wh, voltage), efficiency=efficiency)
