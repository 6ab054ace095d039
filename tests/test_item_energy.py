# -*- coding: utf-8 -*-
import math

import pytest

from core.calculations.item_energy import calculate_item_energy
from core.models.energy import LoadCategory, LoadItem


def _load(category=LoadCategory.DC, **kw):
    base = dict(id="x", category=category, name="Load", watts=50, hours=24, duty_cycle=100)
    base.update(kw)
    return LoadItem(**base)


def test_dc_fridge_with_duty_cycle():
    res = calculate_item_energy(_load(watts=50, hours=24, duty_cycle=33), 24)
    assert res.wh == pytest.approx(396.0)
    assert res.ah == pytest.approx(16.5)
    assert res.efficiency == 1.0


def test_ac_cooktop_includes_inverter_loss():
    res = calculate_item_energy(_load(LoadCategory.AC, watts=1500, hours=0.5), 24)
    assert res.efficiency == 0.94
    assert res.wh == pytest.approx(1500 / 0.94 * 0.5)
    assert res.wh == pytest.approx(797.87, abs=0.01)


def test_ac_zero_watts_is_lossless():
    res = calculate_item_energy(_load(LoadCategory.AC, watts=0, hours=3), 24)
    assert res.efficiency == 1.0
    assert res.wh == 0.0


def test_system_load_is_face_value():
    res = calculate_item_energy(_load(LoadCategory.SYSTEM, watts=10, hours=24), 24)
    assert res.wh == pytest.approx(240.0)
    assert res.ah == pytest.approx(10.0)


def test_quantity_multiplies_and_floors_at_one():
    assert calculate_item_energy(_load(quantity=3, watts=10, hours=1), 24).wh == pytest.approx(30.0)
    assert calculate_item_energy(_load(quantity=0, watts=10, hours=1), 24).wh == pytest.approx(10.0)
    assert calculate_item_energy(_load(quantity=math.nan, watts=10, hours=1), 24).wh == pytest.approx(10.0)


def test_zero_duty_cycle_draws_nothing():
    assert calculate_item_energy(_load(duty_cycle=0), 24).wh == 0.0


@pytest.mark.parametrize("voltage", [24, 12, 48.0, 13.2])
def test_ah_is_wh_over_voltage(voltage):
    res = calculate_item_energy(_load(LoadCategory.AC, watts=300, hours=2, duty_cycle=80), voltage)
    assert res.ah == pytest.approx(res.wh / voltage)


def test_non_finite_inputs_never_leak():
    res = calculate_item_energy(_load(watts=math.inf, hours=math.nan, duty_cycle="x"), 24)
    assert res.wh == 0.0
    assert res.ah == 0.0


def test_zero_voltage_gives_zero_ah():
    res = calculate_item_energy(_load(watts=50, hours=2), 0)
    assert res.wh == pytest.approx(100.0)
    assert res.ah == 0.0
