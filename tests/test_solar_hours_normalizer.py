# -*- coding: utf-8 -*-
"""Solar-hours normalizer: missing data must never read as zero sun."""

from __future__ import annotations

import math

import pytest

from core.calculations.solar_hours import (
    classify_hours_reading,
    normalize_auto_solar_hours,
    read_forecast_hours,
)
from core.models.energy import BatteryConfig, ForecastMode, IrradianceForecast, SolarStatus


def _battery(mode=ForecastMode.NOW, **fc):
    forecast = IrradianceForecast(**fc) if fc else None
    return BatteryConfig(forecast_mode=mode, forecast=forecast)


def test_no_forecast_is_nodata():
    res = normalize_auto_solar_hours(BatteryConfig(forecast=None))
    assert res.status is SolarStatus.NODATA
    assert res.value is None
    assert res.fallback_value == 4.0


def test_not_fetched_is_loading_whatever_the_values():
    res = normalize_auto_solar_hours(_battery(fetched=False, loading=False, now_hours=6.0))
    assert res.status is SolarStatus.LOADING
    assert res.value is None


def test_loading_masks_stale_values():
    res = normalize_auto_solar_hours(_battery(fetched=True, loading=True, now_hours=6.0, sunny_hours=7.0))
    assert res.status is SolarStatus.LOADING
    assert res.value is None


def test_missing_now_hours_is_nodata():
    res = normalize_auto_solar_hours(_battery(fetched=True, loading=False, now_hours=None))
    assert res.status is SolarStatus.NODATA
    assert res.value is None
    assert res.fallback_value == 4.0


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_blank_reading_is_nodata_never_zero(raw):
    res = classify_hours_reading(raw)
    assert res.status is SolarStatus.NODATA
    assert res.value is None


@pytest.mark.parametrize("raw", [20, 15.01, -0.1, "abc", math.nan, math.inf, "inf", True, [5]])
def test_out_of_range_or_garbage_is_invalid(raw):
    res = classify_hours_reading(raw)
    assert res.status is SolarStatus.INVALID
    assert res.value is None


def test_plain_reading_is_ok():
    res = normalize_auto_solar_hours(_battery(fetched=True, now_hours=7.2))
    assert res.status is SolarStatus.OK
    assert res.value == 7.2


def test_zero_is_a_real_reading():
    res = normalize_auto_solar_hours(_battery(fetched=True, now_hours=0))
    assert res.status is SolarStatus.OK
    assert res.value == 0.0


def test_numeric_text_is_parsed():
    assert classify_hours_reading(" 5.5 ").value == 5.5
    assert classify_hours_reading(15).status is SolarStatus.OK


def test_month_mode_reads_sunny_hours():
    bat = _battery(mode=ForecastMode.MONTH_AVG, fetched=True, now_hours=1.0, sunny_hours=6.3)
    res = normalize_auto_solar_hours(bat)
    assert res.status is SolarStatus.OK
    assert res.value == 6.3


def test_month_mode_ignores_now_hours_when_sunny_missing():
    bat = _battery(mode=ForecastMode.MONTH_AVG, fetched=True, now_hours=5.0, sunny_hours="")
    assert normalize_auto_solar_hours(bat).status is SolarStatus.NODATA


def test_read_forecast_hours_applies_loading_gate():
    bat = _battery(fetched=True, loading=True, cloudy_hours=2.0)
    assert read_forecast_hours(bat, "cloudy_hours").status is SolarStatus.LOADING


def test_read_forecast_hours_rejects_unknown_field():
    with pytest.raises(ValueError):
        read_forecast_hours(BatteryConfig(), "timestamp")
