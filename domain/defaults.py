# -*- coding: utf-8 -*-
"""Seed project: a 24 V truck build with one solar array and a 400 Ah bank."""

from __future__ import annotations

from core.models.energy import (
    BatteryConfig,
    GenerationSource,
    LoadCategory,
    LoadItem,
    SourceType,
)
from domain.models.project import Project

SYSTEM_VOLTAGE = 24.0

_DC = LoadCategory.DC
_AC = LoadCategory.AC
_SYS = LoadCategory.SYSTEM

# (id, category, name, watts, hours, duty %, notes)
_SEED_LOADS = (
    # climate
    ("c1", _DC, "DC Air Con", 960, 4.0, 50, "High drain. Cycles on thermostat."),
    ("c2", _DC, "Sirocco Fan", 4, 8.0, 100, "Sleeping/Desk (via 12V Conv)"),
    ("c3", _DC, "Kitchen Exhaust", 80, 1.0, 100, "High power mode (via 12V Conv)"),
    ("c4", _DC, "Toilet/Cab Fans", 15, 1.0, 100, "Intermittent (via 12V Conv)"),
    # cooking
    ("k1", _AC, "Induction Cooktop", 1500, 0.5, 100, "Avg dinner session (via Inv1)"),
    ("k2", _AC, "Ninja Oven", 1700, 0.3, 100, "Baking/Reheat (via Inv1)"),
    ("k3", _AC, "Kettle/Toaster", 1500, 0.1, 100, "Short bursts (via Inv1)"),
    # office
    ("o1", _DC, "Mac Mini (M4)", 40, 8.0, 100, "Workstation (via UDF)"),
    ("o2", _DC, "Monitor (USB-C)", 40, 8.0, 100, "(via UDF)"),
    ("o3", _DC, "MacBook Air", 30, 3.0, 100, "Charging (via UDF)"),
    ("o4", _DC, "Starlink", 50, 12.0, 100, "If active (via 12V Conv or Inv)"),
    # house / 12V
    ("h1", _DC, "Fridge (NCC-80)", 50, 24.0, 33, "33% Duty Cycle factored"),
    ("h2", _DC, "Water Pump", 60, 0.3, 100, "Showers/Dishes (via 12V Conv)"),
    ("h3", _DC, "LED Lights (All)", 20, 5.0, 100, "Evening (via 12V Conv)"),
    ("h4", _DC, "Phone/Misc USB", 10, 4.0, 100, "Charging small devices"),
    # system management
    ("s1", _SYS, "Inv1 Standby", 25, 2.0, 100, "ON only during cooking"),
    ("s2", _SYS, "Inv2 Standby", 5, 10.0, 100, "ON during work hours"),
    ("s3", _SYS, "24-12V Converter", 10, 24.0, 100, "Idle + Efficiency loss (Always ON)"),
    ("s4", _SYS, "IoT/HA/Shunt", 5, 24.0, 100, "24/7 Monitoring"),
)


def seed_loads() -> tuple:
    return tuple(
        LoadItem(id=i, category=cat, name=name, watts=float(w), hours=h, duty_cycle=float(duty), notes=notes)
        for i, cat, name, w, h, duty, notes in _SEED_LOADS
    )


def seed_sources() -> tuple:
    return (
        GenerationSource(
            id="solar1",
            name="Solar Array (Truck)",
            input_w=1180.0,
            hours=5.0,
            efficiency=0.85,
            type=SourceType.SOLAR,
        ),
    )


def seed_project() -> Project:
    return Project(
        loads=seed_loads(),
        sources=seed_sources(),
        battery=BatteryConfig(capacity_ah=400.0, voltage=SYSTEM_VOLTAGE, initial_soc=100.0),
        meta={"app": "solsum"},
    )
