# -*- coding: utf-8 -*-
"""SolSum command line entrypoint.

    solsum init PATH                 write the seed project
    solsum report PATH [options]     print the daily balance and autonomy
    solsum add PATH PROPOSALS        append proposed loads/sources (JSON)
    solsum remove PATH ID            drop a load or source by id
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from solsum.version import get_version

log = logging.getLogger("solsum")


def _fmt_runway(days: float, hours: float) -> str:
    if days == float("inf"):
        return "unbounded (net positive)"
    if days < 1:
        return f"{hours:.1f} h"
    return f"{days:.1f} days ({hours:.0f} h)"


def format_report(report) -> str:
    from core.models.energy import Scenario

    t = report.totals
    lines = [
        "Daily balance",
        f"  consumed : {t.daily_wh_consumed:10.0f} Wh  {t.daily_ah_consumed:8.1f} Ah",
        f"  generated: {t.daily_wh_generated:10.0f} Wh  {t.daily_ah_generated:8.1f} Ah",
        f"  net      : {t.net_wh:+10.0f} Wh  {t.net_ah:+8.1f} Ah",
        f"  end-of-day SoC: {t.final_soc:.0f}%",
        "",
        f"Solar forecast: {report.solar.status.value}"
        + (f" ({report.solar.value:.2f} h)" if report.solar.value is not None else f" (fallback {report.solar.fallback_value:.1f} h)"),
        "",
        "Consumption by category",
    ]
    for cat, wh in report.by_category.items():
        lines.append(f"  {cat.label:<24} {wh:10.0f} Wh")
    lines += ["", "Autonomy"]
    for sc in Scenario:
        res = report.autonomy[sc]
        lines.append(f"  {sc.value:<8} {_fmt_runway(res.days, res.hours)}")
    if report.issues:
        lines += ["", "Issues"]
        for it in report.issues:
            lines.append(f"  [{it.severity.value}] {it.code}: {it.message}")
    return "\n".join(lines)


def _cmd_init(args) -> int:
    from domain.defaults import seed_project
    from storage.project_io import save_project

    try:
        path = save_project(seed_project(), args.path)
    except IOError as exc:
        log.error("%s", exc)
        return 1
    print(f"Seed project written to {path}")
    return 0


def _cmd_add(args) -> int:
    from core.keys import ProjectKeys as K
    from domain.intake import apply_proposals
    from storage.project_io import load_project, save_project

    try:
        project, _ = load_project(args.path)
        with open(args.proposals, encoding="utf-8") as fh:
            proposals = json.load(fh)
    except (IOError, ValueError) as exc:
        log.error("%s", exc)
        return 1
    if not isinstance(proposals, dict):
        log.error("Proposals file %s must hold an object with '%s'/'%s' lists", args.proposals, K.LOADS, K.SOURCES)
        return 1

    loads = [p for p in proposals.get(K.LOADS) or [] if isinstance(p, dict)]
    sources = [p for p in proposals.get(K.SOURCES) or [] if isinstance(p, dict)]
    updated = apply_proposals(project, loads=loads, sources=sources)
    try:
        save_project(updated, args.path)
    except IOError as exc:
        log.error("%s", exc)
        return 1
    print(f"Added {len(loads)} load(s) and {len(sources)} source(s) to {args.path}")
    return 0


def _cmd_remove(args) -> int:
    from storage.project_io import load_project, save_project

    try:
        project, _ = load_project(args.path)
    except IOError as exc:
        log.error("%s", exc)
        return 1

    updated = project.without_load(args.record_id).without_source(args.record_id)
    if updated == project:
        log.error("No load or source with id %r in %s", args.record_id, args.path)
        return 1
    try:
        save_project(updated, args.path)
    except IOError as exc:
        log.error("%s", exc)
        return 1
    print(f"Removed {args.record_id} from {args.path}")
    return 0


def _cmd_report(args, settings) -> int:
    from services.calc_service import EnergyCalcService, report_to_dict
    from storage.project_io import load_project

    try:
        project, load_issues = load_project(args.path)
    except IOError as exc:
        log.error("%s", exc)
        return 1

    current_soc = args.current_soc
    if current_soc is None:
        current_soc = settings.get("default_current_soc")

    report = EnergyCalcService().compute(project, current_soc=current_soc, extra_issues=load_issues)

    if args.json:
        print(json.dumps(report_to_dict(report), indent=2, ensure_ascii=False))
    else:
        print(format_report(report))

    if args.chart:
        from reports.energy_chart import save_energy_chart

        save_energy_chart(report, args.chart, dpi=int(settings.get("chart_dpi") or 120))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="solsum", description="Off-grid DC energy ledger")
    ap.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING (default from settings)")
    sub = ap.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init", help="Write the seed project to PATH")
    p_init.add_argument("path")

    p_rep = sub.add_parser("report", help="Compute the daily balance for the project at PATH")
    p_rep.add_argument("path")
    p_rep.add_argument("--current-soc", type=float, default=None, help="Basis SoC %% for the realistic scenario")
    p_rep.add_argument("--json", action="store_true", help="Print the report as JSON")
    p_rep.add_argument("--chart", default="", help="Write a PNG chart to this path")

    p_add = sub.add_parser("add", help="Append proposed loads/sources from a JSON file")
    p_add.add_argument("path")
    p_add.add_argument("proposals", help="JSON object with 'items' and/or 'charging' lists")

    p_rm = sub.add_parser("remove", help="Remove the load or source with this id")
    p_rm.add_argument("path")
    p_rm.add_argument("record_id", metavar="ID")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    from infra.logging_setup import init_logging, init_perf_logging
    from infra.perf import is_enabled as perf_enabled
    from infra.settings import load_settings

    args = build_parser().parse_args(argv)
    settings = load_settings()
    init_logging(level=str(args.log_level or settings.get("log_level") or "INFO").upper())
    if perf_enabled():
        init_perf_logging()

    if args.command == "init":
        return _cmd_init(args)
    if args.command == "add":
        return _cmd_add(args)
    if args.command == "remove":
        return _cmd_remove(args)
    return _cmd_report(args, settings)


if __name__ == "__main__":
    sys.exit(main())
