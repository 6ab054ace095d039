# -*- coding: utf-8 -*-
"""
Logging for the CLI: solsum.log in the per-user logs folder plus stderr,
and an optional perf.log fed by infra.perf spans.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from infra.paths import logs_dir
from infra.perf import PERF_LOGGER

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _writes_to(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == str(path)
        for h in logger.handlers
    )


def init_logging(filename: str = "solsum.log", level: Union[int, str] = logging.INFO) -> Path:
    """Configure the root logger once per log file; later calls only adjust the level."""
    log_path = logs_dir() / filename
    root = logging.getLogger()
    if not _writes_to(root, log_path):
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=[logging.FileHandler(log_path, encoding="utf-8"), logging.StreamHandler()],
        )
    root.setLevel(level)
    return log_path


def init_perf_logging(filename: str = "perf.log") -> Path:
    log_path = logs_dir() / filename
    perf_log = logging.getLogger(PERF_LOGGER)
    perf_log.setLevel(logging.INFO)
    if not _writes_to(perf_log, log_path):
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        perf_log.addHandler(handler)
    return log_path
