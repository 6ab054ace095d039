# -*- coding: utf-8 -*-
"""Calculation orchestration service.

Single entry point for callers (CLI, chart export): takes a Project
snapshot and returns an EnergyReport with totals, solar status, per-source
and per-category figures, autonomy for every scenario and input issues.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field, is_dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from core.calculations.autonomy import project_all_scenarios
from core.calculations.effective_hours import effective_source_hours
from core.calculations.solar_hours import normalize_auto_solar_hours
from core.calculations.totals import compute_system_totals, consumption_by_category, source_daily_wh
from core.models.energy import AutonomyResult, LoadCategory, Scenario, SolarHours, SystemTotals
from core.types import Issue
from domain.models.project import Project
from infra.perf import span
from services.validation_service import ValidationService, dedupe_issues

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnergyReport:
    totals: SystemTotals
    solar: SolarHours
    autonomy: Dict[Scenario, AutonomyResult]
    by_category: Dict[LoadCategory, float]
    source_wh: Dict[str, float]
    issues: Tuple[Issue, ...] = field(default_factory=tuple)


def _as_serializable(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj):
        return _as_serializable(asdict(obj))
    if isinstance(obj, float):
        # JSON has no Infinity; unbounded autonomy is reported as null
        return obj if math.isfinite(obj) else None
    if isinstance(obj, (str, int, bool)):
        return obj
    if isinstance(obj, dict):
        return {str(_as_serializable(k)): _as_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_as_serializable(v) for v in obj]
    return str(obj)


def report_to_dict(report: EnergyReport) -> Dict[str, Any]:
    out = {
        "totals": _as_serializable(report.totals),
        "solar": _as_serializable(report.solar),
        "by_category": _as_serializable(report.by_category),
        "source_wh": _as_serializable(report.source_wh),
        "autonomy": {
            sc.value: dict(_as_serializable(res), unbounded=res.is_unbounded)
            for sc, res in report.autonomy.items()
        },
        "issues": [it.to_dict() for it in report.issues],
    }
    return out


class EnergyCalcService:
    """Centralized calculation service."""

    def __init__(self, validation: Optional[ValidationService] = None):
        self.validation = validation or ValidationService()

    def compute(
        self,
        project: Project,
        *,
        current_soc: Optional[float] = None,
        extra_issues: Iterable[Issue] = (),
    ) -> EnergyReport:
        battery = project.battery

        with span("energy.compute"):
            totals = compute_system_totals(project.loads, project.sources, battery)
            solar = normalize_auto_solar_hours(battery)
            autonomy = project_all_scenarios(project.loads, project.sources, battery, current_soc=current_soc)
            by_category = consumption_by_category(project.loads, battery.voltage)
            source_wh = {
                s.id: (source_daily_wh(s, effective_source_hours(s, battery)) if s.enabled is not False else 0.0)
                for s in project.sources
            }

        issues = dedupe_issues(list(extra_issues) + self.validation.validate(project))

        log.info(
            "Energy balance consumed=%.0fWh generated=%.0fWh net=%.0fWh final_soc=%.1f%% solar=%s",
            totals.daily_wh_consumed,
            totals.daily_wh_generated,
            totals.net_wh,
            totals.final_soc,
            solar.status.value,
        )
        if issues:
            log.debug("Energy input issues: %s", issues)

        return EnergyReport(
            totals=totals,
            solar=solar,
            autonomy=autonomy,
            by_category=by_category,
            source_wh=source_wh,
            issues=tuple(issues),
        )
