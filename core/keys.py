# -*- coding: utf-8 -*-
"""Single source of truth for persisted document keys.

These are *storage keys* in the saved project JSON. The camelCase spelling
comes from the browser-local documents written by earlier versions; keep
them stable and migrate when needed.
"""

from __future__ import annotations


class ProjectKeys:
    META = "_meta"
    VERSION = "version"
    LOADS = "items"
    SOURCES = "charging"
    BATTERY = "battery"


class LoadKeys:
    ID = "id"
    CATEGORY = "category"
    NAME = "name"
    QUANTITY = "quantity"
    WATTS = "watts"
    HOURS = "hours"
    DUTY_CYCLE = "dutyCycle"
    ENABLED = "enabled"
    NOTES = "notes"
    TECHNICAL_SPECS = "technicalSpecs"


class SourceKeys:
    ID = "id"
    NAME = "name"
    QUANTITY = "quantity"
    INPUT = "input"
    UNIT = "unit"  # legacy (v1) only
    HOURS = "hours"
    EFFICIENCY = "efficiency"
    TYPE = "type"
    AUTO_SOLAR = "autoSolar"
    ENABLED = "enabled"


class BatteryKeys:
    CAPACITY_AH = "capacityAh"
    VOLTAGE = "voltage"
    INITIAL_SOC = "initialSoC"
    FORECAST_MODE = "forecastMode"
    TARGET_MONTH = "targetMonth"
    LOCATION = "location"
    FORECAST = "forecast"


class ForecastKeys:
    LOADING = "loading"
    FETCHED = "fetched"
    NOW_HOURS = "nowHours"
    SUNNY_HOURS = "sunnyHours"
    CLOUDY_HOURS = "cloudyHours"
    TIMESTAMP = "timestamp"
    ERROR = "error"
