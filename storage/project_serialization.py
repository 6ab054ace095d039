# -*- coding: utf-8 -*-
"""storage/project_serialization.py

Validating (de)serialization of project documents.

``project_from_dict`` upgrades a document to the current schema and builds
fully typed, fully defaulted records. It never raises on field-level junk:
the field falls back to its default and an Issue is reported instead.

Forecast hour fields are passed through untouched. Only the solar-hours
normalizer may decide whether "" or "abc" means no data or invalid data.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

from core.keys import BatteryKeys as B
from core.keys import ForecastKeys as F
from core.keys import LoadKeys as L
from core.keys import ProjectKeys as K
from core.keys import SourceKeys as S
from core.models.energy import (
    BatteryConfig,
    ForecastMode,
    GenerationSource,
    IrradianceForecast,
    LoadCategory,
    LoadItem,
    SourceType,
)
from core.types import Issue, Severity
from domain.models.project import Project
from domain.parse import is_blank, to_bool, to_float, to_text
from storage.migrations import upgrade_project_dict
from storage.schema import APP_NAME, PROJECT_VERSION

log = logging.getLogger(__name__)

_CATEGORY_LOOKUP = {cat.value: cat for cat in LoadCategory}
_CATEGORY_LOOKUP.update({cat.label: cat for cat in LoadCategory})


class _Reader:
    """Reads fields out of one raw record, collecting issues as it goes."""

    def __init__(self, raw: Dict[str, Any], context: str, issues: List[Issue]):
        self.raw = raw
        self.context = context
        self.issues = issues

    def number(self, key: str, default: float) -> float:
        val = self.raw.get(key)
        if is_blank(val):
            return default
        out = to_float(val)
        if out is None:
            self.issues.append(Issue(
                code="FIELD_NOT_NUMERIC",
                message=f"'{key}' value {val!r} is not a number; using {default}.",
                severity=Severity.WARNING,
                context=self.context,
            ))
            return default
        return out

    def flag(self, key: str, default: bool) -> bool:
        return to_bool(self.raw.get(key), default)

    def text(self, key: str, default: str = "") -> str:
        return to_text(self.raw.get(key), default)


def _record_id(raw: Dict[str, Any]) -> str:
    rid = to_text(raw.get("id"))
    return rid or uuid.uuid4().hex[:9]


def _load_from_dict(raw: Dict[str, Any], issues: List[Issue]) -> LoadItem:
    load_id = _record_id(raw)
    r = _Reader(raw, load_id, issues)

    raw_cat = r.text(L.CATEGORY)
    category = _CATEGORY_LOOKUP.get(raw_cat)
    if category is None:
        issues.append(Issue(code="LOAD_CATEGORY_UNKNOWN", message=f"Unknown load category {raw_cat!r}; treated as DC.", severity=Severity.WARNING, context=load_id))
        category = LoadCategory.DC

    return LoadItem(
        id=load_id,
        category=category,
        name=r.text(L.NAME),
        quantity=r.number(L.QUANTITY, 1.0),
        watts=r.number(L.WATTS, 0.0),
        hours=r.number(L.HOURS, 0.0),
        duty_cycle=r.number(L.DUTY_CYCLE, 100.0),
        enabled=r.flag(L.ENABLED, True),
        notes=r.text(L.NOTES),
        technical_specs=r.text(L.TECHNICAL_SPECS) or None,
    )


def _source_from_dict(raw: Dict[str, Any], issues: List[Issue]) -> GenerationSource:
    source_id = _record_id(raw)
    r = _Reader(raw, source_id, issues)

    raw_type = r.text(S.TYPE, SourceType.OTHER.value).lower() or SourceType.OTHER.value
    try:
        src_type = SourceType(raw_type)
    except ValueError:
        issues.append(Issue(code="SOURCE_TYPE_UNKNOWN", message=f"Unknown source type {raw_type!r}; treated as 'other'.", severity=Severity.WARNING, context=source_id))
        src_type = SourceType.OTHER

    return GenerationSource(
        id=source_id,
        name=r.text(S.NAME),
        quantity=r.number(S.QUANTITY, 1.0),
        input_w=r.number(S.INPUT, 0.0),
        hours=r.number(S.HOURS, 0.0),
        efficiency=r.number(S.EFFICIENCY, 0.85),
        type=src_type,
        auto_solar=r.flag(S.AUTO_SOLAR, False),
        enabled=r.flag(S.ENABLED, True),
    )


def _forecast_from_dict(raw: Any) -> Optional[IrradianceForecast]:
    if not isinstance(raw, dict):
        return None
    return IrradianceForecast(
        loading=to_bool(raw.get(F.LOADING), False),
        fetched=to_bool(raw.get(F.FETCHED), False),
        now_hours=raw.get(F.NOW_HOURS),
        sunny_hours=raw.get(F.SUNNY_HOURS),
        cloudy_hours=raw.get(F.CLOUDY_HOURS),
        timestamp=to_text(raw.get(F.TIMESTAMP)) or None,
        error=to_text(raw.get(F.ERROR)) or None,
    )


def _battery_from_dict(raw: Dict[str, Any], issues: List[Issue]) -> BatteryConfig:
    r = _Reader(raw, "battery", issues)

    raw_mode = r.text(B.FORECAST_MODE, ForecastMode.NOW.value)
    try:
        mode = ForecastMode(raw_mode)
    except ValueError:
        issues.append(Issue(code="FORECAST_MODE_UNKNOWN", message=f"Unknown forecast mode {raw_mode!r}; using 'now'.", severity=Severity.WARNING, context="battery"))
        mode = ForecastMode.NOW

    return BatteryConfig(
        capacity_ah=r.number(B.CAPACITY_AH, 400.0),
        voltage=r.number(B.VOLTAGE, 24.0),
        initial_soc=r.number(B.INITIAL_SOC, 100.0),
        forecast_mode=mode,
        target_month=r.text(B.TARGET_MONTH) or None,
        location=r.text(B.LOCATION),
        forecast=_forecast_from_dict(raw.get(B.FORECAST)),
    )


def project_from_dict(data: Any) -> Tuple[Project, List[Issue]]:
    """Build a Project from a (possibly legacy) document."""
    d = upgrade_project_dict(data, to_version=PROJECT_VERSION)
    issues: List[Issue] = []

    loads = tuple(
        _load_from_dict(it, issues) for it in d.get(K.LOADS, []) if isinstance(it, dict)
    )
    sources = tuple(
        _source_from_dict(src, issues) for src in d.get(K.SOURCES, []) if isinstance(src, dict)
    )
    battery_raw = d.get(K.BATTERY)
    battery = _battery_from_dict(battery_raw if isinstance(battery_raw, dict) else {}, issues)

    meta = dict(d.get(K.META) or {})
    if issues:
        log.debug("Project deserialization issues: %s", issues)
    return Project(loads=loads, sources=sources, battery=battery, meta=meta), issues


def _load_to_dict(item: LoadItem) -> Dict[str, Any]:
    out = {
        L.ID: item.id,
        L.CATEGORY: item.category.value,
        L.NAME: item.name,
        L.QUANTITY: item.quantity,
        L.WATTS: item.watts,
        L.HOURS: item.hours,
        L.DUTY_CYCLE: item.duty_cycle,
        L.ENABLED: item.enabled,
        L.NOTES: item.notes,
    }
    if item.technical_specs:
        out[L.TECHNICAL_SPECS] = item.technical_specs
    return out


def _source_to_dict(src: GenerationSource) -> Dict[str, Any]:
    return {
        S.ID: src.id,
        S.NAME: src.name,
        S.QUANTITY: src.quantity,
        S.INPUT: src.input_w,
        S.HOURS: src.hours,
        S.EFFICIENCY: src.efficiency,
        S.TYPE: src.type.value,
        S.AUTO_SOLAR: src.auto_solar,
        S.ENABLED: src.enabled,
    }


def _forecast_to_dict(fc: Optional[IrradianceForecast]) -> Optional[Dict[str, Any]]:
    if fc is None:
        return None
    return {
        # a saved document is never mid-fetch
        F.LOADING: False,
        F.FETCHED: fc.fetched,
        F.NOW_HOURS: fc.now_hours,
        F.SUNNY_HOURS: fc.sunny_hours,
        F.CLOUDY_HOURS: fc.cloudy_hours,
        F.TIMESTAMP: fc.timestamp,
        F.ERROR: fc.error,
    }


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Serialize a Project to the current document shape."""
    meta = dict(project.meta or {})
    meta[K.VERSION] = PROJECT_VERSION
    meta.setdefault("app", APP_NAME)

    bat = project.battery
    return {
        K.META: meta,
        K.LOADS: [_load_to_dict(i) for i in project.loads],
        K.SOURCES: [_source_to_dict(s) for s in project.sources],
        K.BATTERY: {
            B.CAPACITY_AH: bat.capacity_ah,
            B.VOLTAGE: bat.voltage,
            B.INITIAL_SOC: bat.initial_soc,
            B.FORECAST_MODE: bat.forecast_mode.value,
            B.TARGET_MONTH: bat.target_month,
            B.LOCATION: bat.location,
            B.FORECAST: _forecast_to_dict(bat.forecast),
        },
    }
