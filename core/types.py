# -*- coding: utf-8 -*-
"""Shared issue types (pure, test-friendly).

Issues are data, never exceptions: validators and the deserializer return
them and callers decide how to render them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Issue:
    code: str
    message: str
    severity: Severity = Severity.WARNING
    context: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "msg": self.message,
            "level": self.severity.value,
            "context": self.context,
        }
