# -*- coding: utf-8 -*-
"""Solar-hours normalization.

The forecast is written asynchronously by the weather fetcher, so at read
time it can be absent, mid-fetch, empty or garbage. This module turns it
into one of four statuses:

- ``loading``: a fetch is running or never completed; the hour fields are
  not looked at, whatever they contain.
- ``nodata``: no forecast, or the selected field is None / blank text.
- ``invalid``: something is there but it is not a plausible PSH value
  (not a number, not finite, or outside [0, 15]).
- ``ok``: a usable value. 0.0 is a real reading (darkness), not missing data.

Missing data is detected *before* any numeric conversion. Converting first
would turn "" into 0 and report a sunny site as dark.

Consumers must branch on ``status``, never on the truthiness of ``value``.
"""

from __future__ import annotations

import math
from typing import Any

from core.models.energy import (
    BatteryConfig,
    ForecastMode,
    SolarHours,
    SolarStatus,
)

MAX_PLAUSIBLE_HOURS = 15.0

FORECAST_HOUR_FIELDS = ("now_hours", "sunny_hours", "cloudy_hours")

_NODATA = SolarHours(SolarStatus.NODATA)
_LOADING = SolarHours(SolarStatus.LOADING)
_INVALID = SolarHours(SolarStatus.INVALID)


def _is_missing(raw: Any) -> bool:
    if raw is None:
        return True
    return isinstance(raw, str) and raw.strip() == ""


def classify_hours_reading(raw: Any) -> SolarHours:
    """Classify one raw forecast hour field (no loading gate)."""
    if _is_missing(raw):
        return _NODATA

    # bool is an int subclass; True must not read as 1 hour of sun
    if isinstance(raw, bool):
        return _INVALID
    if isinstance(raw, (int, float)):
        val = float(raw)
    elif isinstance(raw, str):
        try:
            val = float(raw.strip())
        except ValueError:
            return _INVALID
    else:
        return _INVALID

    if not math.isfinite(val) or val < 0.0 or val > MAX_PLAUSIBLE_HOURS:
        return _INVALID
    return SolarHours(SolarStatus.OK, value=val)


def read_forecast_hours(battery: BatteryConfig, field: str) -> SolarHours:
    """Read a forecast hour field through the absent/loading gates."""
    if field not in FORECAST_HOUR_FIELDS:
        raise ValueError(f"Unknown forecast field: {field!r}")

    forecast = battery.forecast
    if forecast is None:
        return _NODATA
    if forecast.loading or not forecast.fetched:
        return _LOADING
    return classify_hours_reading(getattr(forecast, field))


def normalize_auto_solar_hours(battery: BatteryConfig) -> SolarHours:
    """Solar hours for auto-solar sources, per the battery's forecast mode."""
    field = "now_hours" if battery.forecast_mode == ForecastMode.NOW else "sunny_hours"
    return read_forecast_hours(battery, field)
