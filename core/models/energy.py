# -*- coding: utf-8 -*-
"""Models for the daily energy ledger.

Every record is frozen: the calculation core receives snapshots and returns
new result objects, it never edits what it was given.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


DEFAULT_SOLAR_HOURS = 4.0


class LoadCategory(str, Enum):
    DC = "dc"          # DC native / DC-DC converters
    AC = "ac"          # routed through the inverter
    SYSTEM = "system"  # standby and management overhead

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    LoadCategory.DC: "DC Loads (Native/DCDC)",
    LoadCategory.AC: "AC Loads (Inverter)",
    LoadCategory.SYSTEM: "System Mgmt",
}


class SourceType(str, Enum):
    SOLAR = "solar"
    ALTERNATOR = "alternator"
    GENERATOR = "generator"
    MPPT = "mppt"
    CHARGER = "charger"
    WIND = "wind"
    OTHER = "other"


class ForecastMode(str, Enum):
    NOW = "now"
    MONTH_AVG = "monthAvg"


class Scenario(str, Enum):
    CURRENT = "current"
    PEAK = "peak"
    CLOUD = "cloud"
    ZERO = "zero"


class SolarStatus(str, Enum):
    OK = "ok"
    LOADING = "loading"
    NODATA = "nodata"
    INVALID = "invalid"


@dataclass(frozen=True)
class LoadItem:
    id: str
    category: LoadCategory
    name: str
    quantity: float = 1
    watts: float = 0.0
    hours: float = 0.0
    duty_cycle: float = 100.0
    enabled: bool = True
    notes: str = ""
    technical_specs: Optional[str] = None


@dataclass(frozen=True)
class GenerationSource:
    """A charging source. ``input_w`` is per unit and always in watts."""

    id: str
    name: str
    quantity: float = 1
    input_w: float = 0.0
    hours: float = 0.0
    efficiency: float = 0.85
    type: SourceType = SourceType.OTHER
    auto_solar: bool = False
    enabled: bool = True

    @property
    def is_solar(self) -> bool:
        return self.type is SourceType.SOLAR


@dataclass(frozen=True)
class IrradianceForecast:
    """Forecast as written by the weather fetcher.

    The hour fields are kept raw (number, numeric text, blank text or None);
    only the solar-hours normalizer is allowed to interpret them.
    """

    loading: bool = False
    fetched: bool = False
    now_hours: Any = None
    sunny_hours: Any = None
    cloudy_hours: Any = None
    timestamp: Optional[str] = None
    error: Optional[str] = None

    @property
    def usable(self) -> bool:
        return self.fetched and not self.loading


@dataclass(frozen=True)
class BatteryConfig:
    capacity_ah: float = 400.0
    voltage: float = 24.0
    initial_soc: float = 100.0
    forecast_mode: ForecastMode = ForecastMode.NOW
    target_month: Optional[str] = None
    location: str = ""
    forecast: Optional[IrradianceForecast] = None


@dataclass(frozen=True)
class SolarHours:
    status: SolarStatus
    value: Optional[float] = None
    fallback_value: float = DEFAULT_SOLAR_HOURS


@dataclass(frozen=True)
class ItemEnergy:
    wh: float
    ah: float
    efficiency: float


@dataclass(frozen=True)
class SystemTotals:
    daily_wh_consumed: float
    daily_ah_consumed: float
    daily_wh_generated: float
    daily_ah_generated: float
    net_wh: float
    net_ah: float
    final_soc: float


@dataclass(frozen=True)
class AutonomyResult:
    """Runway under a scenario; ``inf`` days means the day is not a deficit."""

    scenario: Scenario
    days: float
    hours: float
    net_wh: float

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.days)
