"""Performance sentinel workloads and their time budgets."""

from __future__ import annotations

import os
from typing import Any, Dict, List


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_WIDE_OBJECT_MS = _budget_from_env("JSON_NORMALIZE_MAX_WIDE_OBJECT_MS", 500.0)
MAX_DEEP_NESTING_MS = _budget_from_env("JSON_NORMALIZE_MAX_DEEP_NESTING_MS", 500.0)
MAX_ASYNC_FANOUT_MS = _budget_from_env("JSON_NORMALIZE_MAX_ASYNC_FANOUT_MS", 2000.0)


def build_wide_object(width: int = 5000) -> Dict[str, Any]:
    """Flat object with keys inserted in reverse order."""
    return {f"key{i:05d}": {"n": i, "s": str(i)} for i in reversed(range(width))}


def build_deep_nesting(depth: int = 200) -> Dict[str, Any]:
    node: Dict[str, Any] = {"leaf": True}
    for i in range(depth):
        node = {"level": i, "child": node}
    return node


def build_async_fanout(width: int = 200, rows: int = 10) -> List[Dict[str, Any]]:
    return [{f"c{j}": [j, str(j), None] for j in range(width)} for _ in range(rows)]

