# -*- coding: utf-8 -*-
"""Immutable project snapshot handed to the calculation core."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Tuple

from core.models.energy import BatteryConfig, GenerationSource, IrradianceForecast, LoadItem


@dataclass(frozen=True)
class Project:
    loads: Tuple[LoadItem, ...] = ()
    sources: Tuple[GenerationSource, ...] = ()
    battery: BatteryConfig = field(default_factory=BatteryConfig)
    meta: Mapping[str, Any] = field(default_factory=dict)

    def with_load(self, item: LoadItem) -> "Project":
        return replace(self, loads=self.loads + (item,))

    def with_source(self, source: GenerationSource) -> "Project":
        return replace(self, sources=self.sources + (source,))

    def without_load(self, load_id: str) -> "Project":
        return replace(self, loads=tuple(i for i in self.loads if i.id != load_id))

    def without_source(self, source_id: str) -> "Project":
        return replace(self, sources=tuple(s for s in self.sources if s.id != source_id))

    def with_forecast(self, forecast: Optional[IrradianceForecast]) -> "Project":
        return replace(self, battery=replace(self.battery, forecast=forecast))
