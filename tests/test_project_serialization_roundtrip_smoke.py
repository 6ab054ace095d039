# -*- coding: utf-8 -*-
"""Smoke tests for storage.project_serialization.

Validates that a project can be serialized and then loaded back, and that
the forecast hour fields survive untouched so the normalizer still sees
"missing" as missing.
"""

from __future__ import annotations

import json

from core.calculations.solar_hours import normalize_auto_solar_hours
from core.keys import ProjectKeys as K
from core.models.energy import (
    ForecastMode,
    IrradianceForecast,
    LoadCategory,
    SolarStatus,
    SourceType,
)
from domain.defaults import seed_project
from storage.project_serialization import project_from_dict, project_to_dict
from storage.schema import PROJECT_VERSION


def test_serialization_roundtrip_smoke():
    project = seed_project()
    payload = project_to_dict(project)
    assert payload[K.META][K.VERSION] == PROJECT_VERSION
    assert payload[K.META]["app"] == "solsum"

    # JSON-safe
    restored, issues = project_from_dict(json.loads(json.dumps(payload)))
    assert issues == []
    assert restored.loads == project.loads
    assert restored.sources == project.sources
    assert restored.battery == project.battery


def test_loading_flag_is_never_persisted():
    project = seed_project().with_forecast(IrradianceForecast(loading=True, fetched=True, now_hours=5.0))
    payload = project_to_dict(project)
    assert payload[K.BATTERY]["forecast"]["loading"] is False


def test_blank_forecast_reading_stays_nodata():
    project = seed_project().with_forecast(IrradianceForecast(fetched=True, now_hours=""))
    restored, _ = project_from_dict(json.loads(json.dumps(project_to_dict(project))))
    assert restored.battery.forecast.now_hours == ""
    assert normalize_auto_solar_hours(restored.battery).status is SolarStatus.NODATA


def test_bad_numbers_fall_back_with_issue():
    doc = {
        "_meta": {"version": PROJECT_VERSION},
        "items": [{"id": "a", "category": "dc", "name": "Fan", "watts": "lots", "hours": "2,5"}],
        "charging": [],
        "battery": {"capacityAh": "400", "voltage": 24},
    }
    project, issues = project_from_dict(doc)
    item = project.loads[0]
    assert item.watts == 0.0
    assert item.hours == 2.5
    assert project.battery.capacity_ah == 400.0
    assert [i.code for i in issues] == ["FIELD_NOT_NUMERIC"]
    assert issues[0].context == "a"


def test_unknown_enums_are_reported_and_defaulted():
    doc = {
        "_meta": {"version": PROJECT_VERSION},
        "items": [{"id": "a", "category": "fridge stuff", "name": "Fridge"}],
        "charging": [{"id": "b", "name": "Fuel cell", "type": "fuelcell"}],
        "battery": {"forecastMode": "yearly"},
    }
    project, issues = project_from_dict(doc)
    assert project.loads[0].category is LoadCategory.DC
    assert project.sources[0].type is SourceType.OTHER
    assert project.battery.forecast_mode is ForecastMode.NOW
    assert {i.code for i in issues} == {"LOAD_CATEGORY_UNKNOWN", "SOURCE_TYPE_UNKNOWN", "FORECAST_MODE_UNKNOWN"}


def test_missing_fields_get_defaults():
    project, issues = project_from_dict({"items": [{"category": "ac"}], "charging": [{}]})
    item, src = project.loads[0], project.sources[0]
    assert item.id
    assert item.quantity == 1.0 and item.duty_cycle == 100.0 and item.enabled is True
    assert src.efficiency == 0.85 and src.auto_solar is False
    assert project.battery.capacity_ah == 400.0
    assert project.battery.forecast is None
    assert issues == []
