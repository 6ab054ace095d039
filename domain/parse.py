# -*- coding: utf-8 -*-
"""
domain/parse.py

Tolerant parsing of values coming from saved documents or assistant
proposals (numbers stored as text, decimal commas, yes/no flags).

Blank input always maps to the caller's default and never to 0, so the
caller can tell "not entered" apart from "entered as zero".
"""

from __future__ import annotations

import math
from typing import Any, Optional


def is_blank(val: Any) -> bool:
    """True if the value should be treated as 'not entered'."""
    if val is None:
        return True
    # bool is a subclass of int; it is never blank
    if isinstance(val, (int, float)):
        return False
    return str(val).strip() == ""


def to_float(val: Any, default: Optional[float] = None) -> Optional[float]:
    """
    Convert to a finite float.
    - Accepts a decimal comma ("4,5").
    - Handles thousands separators ("1.234,56" or "1,234.56").
    - Blank, bool, unparseable or non-finite -> default.
    """
    if is_blank(val) or isinstance(val, bool):
        return default

    if isinstance(val, (int, float)):
        out = float(val)
        return out if math.isfinite(out) else default

    s = str(val).strip().replace(" ", "")

    if "," in s and "." in s:
        # the decimal separator is usually the last one to appear
        if s.rfind(",") > s.rfind("."):
            s = s.replace(".", "").replace(",", ".")
        else:
            s = s.replace(",", "")
    else:
        s = s.replace(",", ".")

    try:
        out = float(s)
    except ValueError:
        return default
    return out if math.isfinite(out) else default


def to_bool(val: Any, default: bool = False) -> bool:
    if isinstance(val, bool):
        return val
    if val is None:
        return default
    if isinstance(val, (int, float)):
        return bool(val)
    s = str(val).strip().lower()
    if s in {"true", "1", "yes", "y", "on"}:
        return True
    if s in {"false", "0", "no", "n", "off"}:
        return False
    return default


def to_text(val: Any, default: str = "") -> str:
    if val is None:
        return default
    return str(val).strip()
