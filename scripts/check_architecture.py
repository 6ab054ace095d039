"""Architecture boundary checker (no external deps).

Rules:
- core/ is the pure calculation layer: no domain, storage, services, infra,
  reports, solsum or main imports
- domain/ must not import storage, services, infra, reports
- storage/ must not import services, reports

Usage:
  python scripts/check_architecture.py
"""

from __future__ import annotations

import ast
from pathlib import Path
from typing import Dict, List, Optional, Set

ROOT = Path(__file__).resolve().parents[1]

RULES: Dict[str, Set[str]] = {
    'core': {'domain', 'storage', 'services', 'infra', 'reports', 'solsum', 'main'},
    'domain': {'storage', 'services', 'infra', 'reports', 'solsum', 'main'},
    'storage': {'services', 'reports', 'solsum', 'main'},
}


def iter_py_files(root: Path = ROOT) -> List[Path]:
    skip_dirs = {'.pytest_cache', '__pycache__', 'build', 'dist', '.git', '.venv'}
    return [p for p in root.rglob('*.py') if not any(part in skip_dirs for part in p.parts)]


def layer_of(path: Path, root: Path = ROOT) -> Optional[str]:
    rel = path.relative_to(root)
    if not rel.parts:
        return None
    top = rel.parts[0]
    return top if top in RULES else None


def imported_roots(node: ast.AST) -> List[str]:
    if isinstance(node, ast.Import):
        return [alias.name.split('.')[0] for alias in node.names]
    if isinstance(node, ast.ImportFrom) and node.module and not node.level:
        return [node.module.split('.')[0]]
    return []


def find_violations(root: Path = ROOT) -> List[str]:
    violations: List[str] = []
    for fpath in iter_py_files(root):
        layer = layer_of(fpath, root)
        if layer is None:
            continue
        tree = ast.parse(fpath.read_text(encoding='utf-8'), filename=str(fpath))
        forbidden = RULES[layer]
        for node in ast.walk(tree):
            for name in imported_roots(node):
                if name in forbidden:
                    lineno = getattr(node, 'lineno', '?')
                    violations.append(f"{layer}: {fpath.relative_to(root)}:{lineno} imports '{name}'")
    return violations


def main() -> int:
    violations = find_violations()
    if violations:
        print('Architecture boundary violations found:')
        for v in violations:
            print('  -', v)
        return 2

    print('OK: no architecture boundary violations found.')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
