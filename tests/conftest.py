# -*- coding: utf-8 -*-

"""Pytest configuration.

The layers live in a flat app folder layout (core/, domain/, storage/, ...).
For local testing we add the repository root to sys.path so that imports like
`from core...` work without installing. User-space files (settings, logs) are
redirected to a temp dir so tests never touch the real home folder.
"""

from __future__ import annotations

import os
import sys

import pytest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _isolated_user_space(tmp_path, monkeypatch):
    monkeypatch.setenv("SOLSUM_HOME", str(tmp_path / "user"))
    monkeypatch.delenv("SOLSUM_PERF", raising=False)
