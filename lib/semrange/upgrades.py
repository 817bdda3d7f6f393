from __future__ import annotations

import re
from typing import Iterable

from .semver import compare, parse

_LIST_SEP_RE = re.compile(r"[\s,]+")


def split_versions(text: str | None) -> list[str]:
    return [v for v in _LIST_SEP_RE.split(text or "") if v]


def upgrade_list(sorted_versions: Iterable[str], maximum_version: str) -> list[str] | None:
    """Return the upgrade steps that do not go past ``maximum_version``.

    ``sorted_versions`` must already be in ascending order; it is never
    re-sorted. Returns None when ``maximum_version`` is not a version.
    """
    steps = list(sorted_versions)
    if parse(maximum_version) is None:
        return None
    if not steps:
        return []

    if compare(maximum_version, steps[-1]) in (0, 1):
        return steps

    required: list[str] = []
    for step in steps:
        if compare(step, maximum_version) == 1:
            break
        required.append(step)
    return required
