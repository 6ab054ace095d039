# -*- coding: utf-8 -*-
"""Hours of generation actually credited to a source today."""

from __future__ import annotations

from core.calculations.solar_hours import normalize_auto_solar_hours
from core.models.energy import BatteryConfig, GenerationSource, SolarStatus
from core.numeric import finite_or


def effective_source_hours(source: GenerationSource, battery: BatteryConfig) -> float:
    """Resolve today's hours for ``source``.

    - Auto-solar: the normalized forecast when it is ``ok`` (0.0 included),
      else manual hours if > 0, else the fallback.
    - Manual solar: manual hours, but exactly 0 means "not filled in" and
      resolves to the fallback.
    - Any other type: manual hours.

    Never negative.
    """
    manual = finite_or(source.hours)

    if source.is_solar:
        norm = normalize_auto_solar_hours(battery)
        if source.auto_solar:
            if norm.status is SolarStatus.OK and norm.value is not None:
                return norm.value
            return manual if manual > 0 else norm.fallback_value
        if manual == 0:
            return norm.fallback_value

    return max(0.0, manual)
