# -*- coding: utf-8 -*-
"""Smoke tests for services.calc_service."""

from __future__ import annotations

import json

import pytest

from core.models.energy import (
    BatteryConfig,
    GenerationSource,
    IrradianceForecast,
    LoadCategory,
    Scenario,
    SolarStatus,
    SourceType,
)
from core.types import Issue
from domain.defaults import seed_project
from domain.models.project import Project
from services.calc_service import EnergyCalcService, report_to_dict


def test_seed_project_report():
    report = EnergyCalcService().compute(seed_project())
    t = report.totals
    assert t.daily_wh_generated == pytest.approx(5015.0)
    assert t.daily_wh_consumed > t.daily_wh_generated
    assert t.net_wh < 0
    assert set(report.autonomy) == set(Scenario)
    assert report.autonomy[Scenario.ZERO].days < report.autonomy[Scenario.CURRENT].days
    assert report.source_wh == {"solar1": pytest.approx(5015.0)}
    assert sum(report.by_category.values()) == pytest.approx(t.daily_wh_consumed)
    assert report.issues == ()


def test_report_is_strict_json():
    project = Project(sources=(GenerationSource(id="g", name="Gen", input_w=1000, hours=5, type=SourceType.GENERATOR),))
    d = report_to_dict(EnergyCalcService().compute(project))
    text = json.dumps(d, allow_nan=False)
    out = json.loads(text)
    assert out["autonomy"]["current"]["days"] is None
    assert out["autonomy"]["current"]["unbounded"] is True
    assert out["solar"]["status"] == "nodata"
    assert set(out["by_category"]) == {c.value for c in LoadCategory}


def test_disabled_source_reports_zero():
    src = GenerationSource(id="s", name="Array", input_w=1000, hours=5, type=SourceType.SOLAR, enabled=False)
    report = EnergyCalcService().compute(Project(sources=(src,)))
    assert report.source_wh == {"s": 0.0}


def test_forecast_status_and_issues_surface():
    src = GenerationSource(id="s", name="Array", input_w=1000, hours=5, type=SourceType.SOLAR, auto_solar=True)
    battery = BatteryConfig(forecast=IrradianceForecast(fetched=True, now_hours=""))
    report = EnergyCalcService().compute(Project(sources=(src,), battery=battery))
    assert report.solar.status is SolarStatus.NODATA
    # falls back to the manual 5 h, never to 0
    assert report.totals.daily_wh_generated == pytest.approx(1000 * 5 * 0.85)
    assert "SOLAR_FORECAST_NODATA" in {i.code for i in report.issues}


def test_extra_issues_come_first_and_are_deduped():
    extra = Issue(code="FIELD_NOT_NUMERIC", message="x", context="a")
    report = EnergyCalcService().compute(seed_project(), extra_issues=[extra, extra])
    assert report.issues == (extra,)


def test_current_soc_override():
    full = EnergyCalcService().compute(seed_project())
    half = EnergyCalcService().compute(seed_project(), current_soc=50)
    assert half.autonomy[Scenario.CURRENT].days == pytest.approx(full.autonomy[Scenario.CURRENT].days / 2)
    assert half.autonomy[Scenario.ZERO].days == pytest.approx(full.autonomy[Scenario.ZERO].days)
