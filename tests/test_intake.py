# -*- coding: utf-8 -*-
import pytest

from core.models.energy import BatteryConfig, LoadCategory, SourceType
from domain.defaults import seed_project
from domain.intake import apply_proposals, infer_load_category, load_from_proposal, source_from_proposal
from domain.models.project import Project


@pytest.mark.parametrize(
    "raw, name, expected",
    [
        ("", "Microwave", LoadCategory.AC),
        ("Kitchen", "Induction Cooktop", LoadCategory.AC),
        ("", "Inverter standby", LoadCategory.SYSTEM),
        ("ac", "Laptop", LoadCategory.AC),
        ("AC Loads (Inverter)", "Espresso", LoadCategory.AC),
        ("system", "Shunt", LoadCategory.SYSTEM),
        ("", "MacBook charger", LoadCategory.DC),
        ("12V", "Water Pump", LoadCategory.DC),
        ("misc", "Parasitic draw", LoadCategory.SYSTEM),
    ],
)
def test_infer_load_category(raw, name, expected):
    assert infer_load_category(raw, name) is expected


def test_load_proposal_is_normalized():
    item = load_from_proposal({"category": "Appliances", "name": "Kettle", "watts": "1500", "hours": "0,1", "quantity": 0})
    assert item.category is LoadCategory.AC
    assert item.watts == 1500.0
    assert item.hours == pytest.approx(0.1)
    assert item.quantity == 1.0
    assert item.duty_cycle == 100.0
    assert item.notes == "(Model Cat: Appliances)"
    assert len(item.id) == 9


def test_canonical_category_adds_no_note():
    item = load_from_proposal({"category": "dc", "name": "Fan", "notes": "bedroom"})
    assert item.category is LoadCategory.DC
    assert item.notes == "bedroom"


def test_each_proposal_gets_a_fresh_id():
    a = load_from_proposal({"name": "Fan"})
    b = load_from_proposal({"name": "Fan"})
    assert a.id != b.id


def test_amp_source_is_converted_to_watts():
    src = source_from_proposal({"name": "DC-DC", "input": 30, "unit": "A", "hours": 2, "type": "alternator"}, 24)
    assert src.input_w == pytest.approx(720.0)
    assert src.type is SourceType.ALTERNATOR
    assert src.auto_solar is False


def test_source_defaults():
    src = source_from_proposal({"input": "400", "type": "fusion", "efficiency": 0}, 12)
    assert src.name == "New Source"
    assert src.input_w == 400.0
    assert src.type is SourceType.OTHER
    assert src.efficiency == 0.85


def test_apply_proposals_appends_to_project():
    project = Project(battery=BatteryConfig(voltage=12))
    out = apply_proposals(
        project,
        loads=[{"name": "Microwave", "watts": 900, "hours": 0.2}],
        sources=[{"name": "DC-DC", "input": 20, "unit": "A", "hours": 3, "type": "alternator"}],
    )
    assert project.loads == () and project.sources == ()
    assert [i.name for i in out.loads] == ["Microwave"]
    assert out.loads[0].category is LoadCategory.AC
    assert out.sources[0].input_w == pytest.approx(240.0)


def test_apply_proposals_keeps_existing_records():
    base = seed_project()
    out = apply_proposals(base, loads=[{"name": "Heater"}])
    assert out.loads[:-1] == base.loads
    assert out.sources == base.sources
    assert len(out.without_load(out.loads[-1].id).loads) == len(base.loads)
