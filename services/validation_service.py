# -*- coding: utf-8 -*-
"""ValidationService

Runs the pure input validators over a project snapshot.

- Validators return core.types.Issue instances.
- A crashing validator is reported as an issue, never propagated to the
  caller: a report must always be produced.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from core.types import Issue, Severity
from core.validators.energy import validate_energy_inputs
from domain.models.project import Project

log = logging.getLogger(__name__)

Validator = Callable[[Project], List[Issue]]

_VALIDATORS = {
    "energy": lambda p: validate_energy_inputs(p.loads, p.sources, p.battery),
}


def dedupe_issues(issues: Iterable[Issue]) -> List[Issue]:
    """Drop repeats by (code, message, context), keeping first occurrence order."""
    seen = set()
    uniq: List[Issue] = []
    for it in issues:
        key = (it.code, it.message, it.context)
        if key in seen:
            continue
        seen.add(key)
        uniq.append(it)
    return uniq


class ValidationService:
    def __init__(self, validators=None):
        self.validators = dict(validators if validators is not None else _VALIDATORS)

    def validate(self, project: Project) -> List[Issue]:
        out: List[Issue] = []
        for name, fn in self.validators.items():
            try:
                out.extend(fn(project) or [])
            except Exception:
                log.exception("validator %s failed", name)
                out.append(Issue(code="VALIDATOR_CRASH", message=f"Validator '{name}' failed (see logs).", severity=Severity.WARNING, context=name))
        return dedupe_issues(out)
