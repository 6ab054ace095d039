# -*- coding: utf-8 -*-
import json

import pytest

from domain.defaults import seed_project
from storage.project_io import load_project, save_project


def test_save_then_load(tmp_path):
    path = save_project(seed_project(), tmp_path / "nested" / "truck.json")
    assert path.exists()

    project, issues = load_project(path)
    assert issues == []
    assert len(project.loads) == 19
    assert project.sources[0].id == "solar1"


def test_load_legacy_document(tmp_path):
    path = tmp_path / "legacy.json"
    path.write_text(json.dumps({
        "solsum_items": [{"id": "a", "category": "DC Loads (Native/DCDC)", "name": "Fan", "watts": "4", "hours": 8}],
        "solsum_charging": [{"id": "b", "name": "DC-DC", "input": 30, "unit": "A", "hours": 1, "type": "alternator"}],
        "solsum_battery": {"capacityAh": 200, "voltage": 12},
    }), encoding="utf-8")

    project, issues = load_project(path)
    assert issues == []
    assert project.loads[0].watts == 4.0
    assert project.sources[0].input_w == pytest.approx(360.0)
    assert project.battery.voltage == 12.0


def test_missing_file_raises_ioerror(tmp_path):
    with pytest.raises(IOError, match="Error loading project"):
        load_project(tmp_path / "nope.json")


def test_corrupt_json_raises_ioerror(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(IOError):
        load_project(path)
