# -*- coding: utf-8 -*-
"""Timing spans for the calculation pipeline.

Off unless SOLSUM_PERF is set to 1/true/yes/on. Spans are reported on the
``solsum.perf`` logger, which the CLI routes to perf.log.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager

PERF_LOGGER = "solsum.perf"

log = logging.getLogger(PERF_LOGGER)


def is_enabled() -> bool:
    # read on every call so a test or a long-lived caller can toggle it
    return os.environ.get("SOLSUM_PERF", "").strip().lower() in ("1", "true", "yes", "on")


@contextmanager
def span(label: str):
    if not is_enabled():
        yield
        return
    started = time.perf_counter()
    try:
        yield
    finally:
        log.info("PERF %s %.1fms", label, (time.perf_counter() - started) * 1000.0)
