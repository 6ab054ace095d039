# -*- coding: utf-8 -*-
"""
domain/intake.py

Turn loads/sources proposed by the extraction assistant into canonical
records. The assistant's values are never trusted: every number goes
through the same tolerant parsing as saved documents, the category is
re-derived from keywords, and each record gets a fresh id.
"""

from __future__ import annotations

import re
import uuid
from typing import Any, Iterable, Mapping

from core.models.energy import GenerationSource, LoadCategory, LoadItem, SourceType
from domain.defaults import SYSTEM_VOLTAGE
from domain.models.project import Project
from domain.parse import to_float, to_text

_SYSTEM_KEYWORDS = (
    "system management",
    "system mgmt",
    "mgmt",
    "overhead",
    "standby",
    "idle",
    "parasitic",
    "vampire",
)

_AC_KEYWORDS = (
    "ac load",
    "inverter",
    "microwave",
    "oven",
    "induction",
    "cooktop",
    "kettle",
    "toaster",
)

# "ac" only as a word, so "MacBook" or "backpack" stay DC
_AC_TOKEN = re.compile(r"\bac\b")

_CANONICAL = {cat.value: cat for cat in LoadCategory}
_CANONICAL.update({cat.label: cat for cat in LoadCategory})


def new_id() -> str:
    return uuid.uuid4().hex[:9]


def infer_load_category(raw_category: str, name: str) -> LoadCategory:
    """Pick a category from the proposed category text and the item name."""
    cat_text = _CANONICAL[raw_category].label if raw_category in _CANONICAL else raw_category
    signal = f"{cat_text} {name}".lower()

    if any(k in signal for k in _SYSTEM_KEYWORDS):
        return LoadCategory.SYSTEM
    if any(k in signal for k in _AC_KEYWORDS) or _AC_TOKEN.search(signal):
        return LoadCategory.AC
    return LoadCategory.DC


def load_from_proposal(props: Mapping[str, Any]) -> LoadItem:
    raw_cat = to_text(props.get("category"))
    name = to_text(props.get("name")) or "New Item"

    notes = to_text(props.get("notes"))
    if raw_cat and raw_cat not in _CANONICAL:
        notes = f"{notes} (Model Cat: {raw_cat})".strip()

    return LoadItem(
        id=new_id(),
        category=infer_load_category(raw_cat, name),
        name=name,
        quantity=max(1.0, to_float(props.get("quantity"), 1.0)),
        watts=to_float(props.get("watts"), 0.0),
        hours=to_float(props.get("hours"), 0.0),
        duty_cycle=to_float(props.get("dutyCycle", props.get("duty_cycle")), 100.0),
        notes=notes,
        technical_specs=to_text(props.get("technicalSpecs")) or None,
    )


def source_from_proposal(props: Mapping[str, Any], voltage: float) -> GenerationSource:
    """Canonical watt-denominated source; amp proposals are converted at ``voltage``."""
    raw_input = to_float(props.get("input"), 0.0)
    unit = to_text(props.get("unit"), "W").upper()
    input_w = raw_input * float(voltage) if unit == "A" else raw_input

    raw_type = to_text(props.get("type")).lower()
    try:
        src_type = SourceType(raw_type)
    except ValueError:
        src_type = SourceType.OTHER

    return GenerationSource(
        id=new_id(),
        name=to_text(props.get("name")) or "New Source",
        quantity=max(1.0, to_float(props.get("quantity"), 1.0)),
        input_w=input_w,
        hours=to_float(props.get("hours"), 0.0),
        efficiency=to_float(props.get("efficiency"), 0.85) or 0.85,
        type=src_type,
        auto_solar=False,
    )


def apply_proposals(
    project: Project,
    loads: Iterable[Mapping[str, Any]] = (),
    sources: Iterable[Mapping[str, Any]] = (),
) -> Project:
    """Append normalized proposals to ``project``; amps convert at its bus voltage."""
    voltage = to_float(project.battery.voltage, None) or SYSTEM_VOLTAGE
    for props in loads or ():
        project = project.with_load(load_from_proposal(props))
    for props in sources or ():
        project = project.with_source(source_from_proposal(props, voltage))
    return project
