# -*- coding: utf-8 -*-
"""Defensive numeric coercion used by the calculation core.

NOTE: these helpers never parse text. Anything that is not already a real
number (or is NaN/inf) is replaced by the given default. Text parsing is a
deserializer concern (see domain.parse).
"""

from __future__ import annotations

import math
from typing import Any


def finite_or(value: Any, default: float = 0.0) -> float:
    """Return ``value`` as float if it is a finite real number, else ``default``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    v = float(value)
    if not math.isfinite(v):
        return default
    return v


def scrub(value: float) -> float:
    """Replace NaN/inf in a computed result by 0."""
    return value if math.isfinite(value) else 0.0


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
