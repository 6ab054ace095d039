# -*- coding: utf-8 -*-
"""storage/migrations.py

Structural migrations of saved project documents (JSON) between versions.

Rules:
- PURE functions: dict in, dict out (no IO).
- No energy calculations here; only data compatibility.
- Migrations must be idempotent: applying them twice changes nothing.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

from core.keys import BatteryKeys as B
from core.keys import ForecastKeys as F
from core.keys import LoadKeys as L
from core.keys import ProjectKeys as K
from core.keys import SourceKeys as S
from core.models.energy import LoadCategory
from domain.parse import to_float

# browser-local storage keys used before documents had a single root
_LEGACY_ROOT_KEYS = {
    "solsum_items": K.LOADS,
    "solsum_charging": K.SOURCES,
    "solsum_battery": K.BATTERY,
}

_CATEGORY_BY_LABEL = {cat.label: cat.value for cat in LoadCategory}


def _ensure_dict(x: Any) -> Dict[str, Any]:
    return x if isinstance(x, dict) else {}


def _ensure_list(x: Any) -> list:
    return x if isinstance(x, list) else []


def migrate_v1_to_v2(data: Dict[str, Any]) -> Dict[str, Any]:
    """v1 -> v2

    - legacy solsum_* roots -> items/charging/battery
    - loads/sources get quantity=1 and enabled=True when absent
    - category display labels -> category keys
    - amp sources -> watts at the battery voltage; 'unit' is dropped
    - forecast gets fetched=False (v1 readings are untrusted until the
      next fetch) and is never left mid-fetch
    """
    d = deepcopy(data)

    for legacy, key in _LEGACY_ROOT_KEYS.items():
        if key not in d and legacy in d:
            d[key] = d.pop(legacy)

    battery = _ensure_dict(d.get(K.BATTERY))
    voltage = to_float(battery.get(B.VOLTAGE), None) or 24.0

    items = []
    for it in _ensure_list(d.get(K.LOADS)):
        if not isinstance(it, dict):
            continue
        it.setdefault(L.QUANTITY, 1)
        it.setdefault(L.ENABLED, True)
        cat = it.get(L.CATEGORY)
        if isinstance(cat, str) and cat in _CATEGORY_BY_LABEL:
            it[L.CATEGORY] = _CATEGORY_BY_LABEL[cat]
        items.append(it)
    d[K.LOADS] = items

    sources = []
    for src in _ensure_list(d.get(K.SOURCES)):
        if not isinstance(src, dict):
            continue
        src.setdefault(S.QUANTITY, 1)
        src.setdefault(S.ENABLED, True)
        unit = str(src.pop(S.UNIT, "W") or "W").strip().upper()
        if unit == "A":
            amps = to_float(src.get(S.INPUT), 0.0) or 0.0
            src[S.INPUT] = amps * voltage
        sources.append(src)
    d[K.SOURCES] = sources

    forecast = battery.get(B.FORECAST)
    if isinstance(forecast, dict):
        # v1 wrote a zero-hour placeholder when a fetch started, so a stored
        # reading cannot be told apart from an abandoned fetch
        forecast.setdefault(F.FETCHED, False)
        forecast[F.LOADING] = False
    battery.setdefault(B.FORECAST_MODE, "now")
    d[K.BATTERY] = battery

    meta = _ensure_dict(d.get(K.META))
    meta[K.VERSION] = 2
    d[K.META] = meta
    return d


_MIGRATIONS = {
    (1, 2): migrate_v1_to_v2,
}


def migrate_project_dict(data: Dict[str, Any], *, from_version: int, to_version: int) -> Dict[str, Any]:
    """Migrate a document from from_version up to to_version."""
    d = deepcopy(data)
    v = int(from_version or 1)
    target = int(to_version)
    if v > target:
        # no automatic downgrade
        return d

    while v < target:
        fn = _MIGRATIONS.get((v, v + 1))
        if fn is None:
            raise ValueError(f"No migration path from project version {v} to {v + 1}")
        d = fn(d)
        v += 1

    meta = _ensure_dict(d.get(K.META))
    meta[K.VERSION] = target
    d[K.META] = meta
    return d


def upgrade_project_dict(data: Any, *, to_version: int) -> Dict[str, Any]:
    """Migrate a dict loaded from JSON to the current version.

    Documents without _meta are v1. Anything that is not a dict becomes an
    empty v1 document. PURE (no IO).
    """
    if not isinstance(data, dict):
        data = {}

    meta = _ensure_dict(data.get(K.META))
    try:
        from_ver = max(1, int(meta.get(K.VERSION, 1) or 1))
    except (TypeError, ValueError):
        from_ver = 1
    return migrate_project_dict(data, from_version=from_ver, to_version=int(to_version))
