# -*- coding: utf-8 -*-
"""Inverter conversion efficiency curve."""

from __future__ import annotations

from core.numeric import finite_or

REFERENCE_INVERTER_W = 2000.0

# (upper bound of load ratio, efficiency); the last band covers ratio >= 0.80
_EFFICIENCY_BANDS = (
    (0.05, 0.75),
    (0.15, 0.85),
    (0.40, 0.90),
    (0.80, 0.94),
)
_FULL_LOAD_EFFICIENCY = 0.91


def inverter_efficiency(watts: float) -> float:
    """Efficiency fraction for an AC load of ``watts`` per unit.

    Light loads convert poorly, mid-range loads sit on a broad peak and the
    curve dips slightly near full load. ``watts <= 0`` means nothing is
    converted and returns 1.0.
    """
    w = finite_or(watts)
    if w <= 0:
        return 1.0
    ratio = w / REFERENCE_INVERTER_W
    for upper, eff in _EFFICIENCY_BANDS:
        if ratio < upper:
            return eff
    return _FULL_LOAD_EFFICIENCY
