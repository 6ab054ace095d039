# -*- coding: utf-8 -*-
"""Project JSON I/O helpers.

The only place that touches project files. Everything past this boundary
works on immutable Project snapshots.
"""
from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import List, Tuple, Union

from core.types import Issue
from domain.models.project import Project
from storage.project_serialization import project_from_dict, project_to_dict

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def save_project(project: Project, file_path: PathLike) -> Path:
    path = Path(file_path)
    try:
        t0 = time.perf_counter()
        payload = json.dumps(project_to_dict(project), indent=2, ensure_ascii=False)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        log.debug("Project serialize: %.1f ms, %d bytes", elapsed_ms, len(payload.encode("utf-8")))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        raise IOError(f"Error saving project {path}: {e}") from e
    log.info("Project saved file=%s loads=%d sources=%d", path, len(project.loads), len(project.sources))
    return path


def load_project(file_path: PathLike) -> Tuple[Project, List[Issue]]:
    path = Path(file_path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise IOError(f"Error loading project {path}: {e}") from e

    project, issues = project_from_dict(data)
    log.info(
        "Project loaded file=%s loads=%d sources=%d issues=%d",
        path, len(project.loads), len(project.sources), len(issues),
    )
    return project, issues
