"""Version validation, normalization and ordering.

Comparisons follow node-semver closely enough for migration decisions, with
two simplifications: prerelease tags compare as plain strings, and build
metadata is carried but never ordered on.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUM = r"(0|[1-9][0-9]*)"
_PART = r"(0|[1-9][0-9]*|x|X)"
_TAIL = r"(?:-([^+]+))?(?:\+(.*))?"

_VALID_RE = re.compile(rf"v?{_NUM}\.{_NUM}\.{_NUM}{_TAIL}")
_CLEAN_FULL_RE = re.compile(rf"v?{_PART}\.{_PART}\.{_PART}{_TAIL}")
_CLEAN_MINOR_RE = re.compile(rf"v?{_PART}\.{_PART}")
_CLEAN_MAJOR_RE = re.compile(rf"v?{_PART}")


@dataclass(frozen=True)
class Version:
    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text

    def as_dict(self) -> dict[str, int | str]:
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease,
            "build": self.build,
        }


def validate(text: str | None) -> Version | None:
    m = _VALID_RE.fullmatch(text or "")
    if not m:
        return None
    return Version(
        int(m.group(1)),
        int(m.group(2)),
        int(m.group(3)),
        m.group(4) or "",
        m.group(5) or "",
    )


def _zero(part: str) -> str:
    return "0" if part in {"x", "X"} else part


def clean(text: str | None) -> str | None:
    """Normalize a possibly partial version to ``MAJOR.MINOR.PATCH[-PRE][+BUILD]``.

    A leading ``v`` is dropped, ``x``/``X`` placeholders become ``0`` and
    missing minor/patch components are filled with ``0``. Returns None when
    the text has none of the accepted shapes.
    """
    value = text or ""

    m = _CLEAN_FULL_RE.fullmatch(value)
    if m:
        major, minor, patch = (_zero(m.group(i)) for i in (1, 2, 3))
        prerelease = m.group(4) or ""
        build = m.group(5) or ""
        out = f"{major}.{minor}.{patch}"
        if prerelease:
            out += f"-{prerelease}"
        if build:
            out += f"+{build}"
        return out

    m = _CLEAN_MINOR_RE.fullmatch(value)
    if m:
        return f"{_zero(m.group(1))}.{_zero(m.group(2))}.0"

    m = _CLEAN_MAJOR_RE.fullmatch(value)
    if m:
        return f"{_zero(m.group(1))}.0.0"

    return None


def parse(text: str | None) -> Version | None:
    """Clean then validate ``text``."""
    cleaned = clean(text)
    if cleaned is None:
        return None
    return validate(cleaned)


def compare_versions(a: Version, b: Version) -> int:
    for left, right in ((a.major, b.major), (a.minor, b.minor), (a.patch, b.patch)):
        if left < right:
            return -1
        if left > right:
            return 1

    # a release outranks any of its prereleases
    if a.prerelease and not b.prerelease:
        return -1
    if not a.prerelease and b.prerelease:
        return 1
    if a.prerelease < b.prerelease:
        return -1
    if a.prerelease > b.prerelease:
        return 1
    return 0


def compare(a: str | None, b: str | None) -> int | None:
    left = parse(a)
    right = parse(b)
    if left is None or right is None:
        return None
    return compare_versions(left, right)
