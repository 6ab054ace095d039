# -*- coding: utf-8 -*-
"""
User settings stored in a per-user writable folder.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from infra.paths import settings_file

log = logging.getLogger(__name__)


def _defaults() -> Dict[str, Any]:
    return {
        "log_level": "INFO",
        "chart_dpi": 120,
        # basis SoC for the 'current' scenario; None means the battery's initial SoC
        "default_current_soc": None,
    }


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    defaults = _defaults()
    if not path.exists():
        save_settings(defaults.copy(), path)
        return defaults.copy()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        log.warning("Settings file %s is unreadable; resetting to defaults", path)
        save_settings(defaults.copy(), path)
        return defaults.copy()

    merged = defaults.copy()
    if isinstance(data, dict):
        merged.update({k: v for k, v in data.items() if k in defaults})
    return merged


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
