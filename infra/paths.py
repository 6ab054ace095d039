# -*- coding: utf-8 -*-
"""
Centralized path resolver for per-user writable data (logs, settings).

Resolution order for the user data dir:
  SOLSUM_HOME > LOCALAPPDATA/SolSum > APPDATA/SolSum > ~/.solsum
"""
from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "SolSum"


def user_data_dir() -> Path:
    override = os.getenv("SOLSUM_HOME")
    if override:
        p = Path(override).expanduser()
    else:
        base = os.getenv("LOCALAPPDATA") or os.getenv("APPDATA")
        p = Path(base) / APP_NAME if base else Path.home() / ".solsum"
    p.mkdir(parents=True, exist_ok=True)
    return p


def ensure_dir(p: Path) -> Path:
    p.mkdir(parents=True, exist_ok=True)
    return p


def logs_dir() -> Path:
    return ensure_dir(user_data_dir() / "logs")


def settings_file() -> Path:
    return user_data_dir() / "solsum_settings.json"
