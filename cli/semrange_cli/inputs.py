from __future__ import annotations

import sys


def read_inputs(values: list[str] | None) -> list[str]:
    """Arguments when given, otherwise non-blank stdin lines."""
    if values:
        return list(values)
    if sys.stdin is None or sys.stdin.isatty():
        return []
    return [line.strip() for line in sys.stdin if line.strip()]
