# -*- coding: utf-8 -*-
"""
Energy chart export.

Draws daily consumption per load category next to the autonomy of each
scenario and writes it to an image file. No calculations happen here: the
figure is built from an EnergyReport.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from core.models.energy import Scenario
from services.calc_service import EnergyReport

log = logging.getLogger(__name__)

_SCENARIO_LABELS = {
    Scenario.CURRENT: "Realistic",
    Scenario.PEAK: "Peak sun",
    Scenario.CLOUD: "Cloud",
    Scenario.ZERO: "0% gen",
}


def build_energy_figure(report: EnergyReport) -> Figure:
    fig = Figure(figsize=(9, 3.5))
    FigureCanvasAgg(fig)
    ax_cat, ax_aut = fig.subplots(1, 2)

    # --- consumption by category ---
    cats = [c for c, wh in report.by_category.items() if wh > 0]
    ax_cat.set_title("Daily consumption by category")
    ax_cat.set_ylabel("Energy [Wh/day]")
    ax_cat.grid(True, axis="y")
    if cats:
        values = [report.by_category[c] for c in cats]
        ax_cat.bar([c.label for c in cats], values)
        ax_cat.tick_params(axis="x", labelsize=8)
        for i, v in enumerate(values):
            ax_cat.text(i, v, f"{v:.0f}", ha="center", va="bottom", fontsize=8)
    else:
        ax_cat.text(0.5, 0.5, "No enabled loads", ha="center", va="center", transform=ax_cat.transAxes)

    # --- autonomy per scenario ---
    ax_aut.set_title("Autonomy by scenario")
    ax_aut.set_xlabel("Days")
    finite = [r.days for r in report.autonomy.values() if not r.is_unbounded]
    cap = max(finite) * 1.2 if finite else 1.0

    labels = []
    widths = []
    for sc in Scenario:
        res = report.autonomy.get(sc)
        if res is None:
            continue
        labels.append(_SCENARIO_LABELS[sc])
        widths.append(cap if res.is_unbounded else res.days)
    ax_aut.barh(labels, widths)
    for i, sc in enumerate(sc for sc in Scenario if sc in report.autonomy):
        res = report.autonomy[sc]
        text = "net positive" if res.is_unbounded else f"{res.days:.1f} d"
        ax_aut.text(widths[i], i, f" {text}", va="center", fontsize=8)
    ax_aut.set_xlim(0, cap * 1.35)

    fig.tight_layout()
    return fig


def save_energy_chart(report: EnergyReport, out_path: Union[str, Path], dpi: int = 120) -> Path:
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = build_energy_figure(report)
    fig.savefig(path, dpi=dpi)
    log.info("Energy chart written to %s", path)
    return path
