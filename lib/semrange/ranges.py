"""Range expressions: ``||``-separated sets of ANDed comparators.

    ">=1.0.0 <2.0.0 || >=3.0.0"

A comparator is an operator glued to a version (``>=1.2``, ``<2.x``).
Comparators inside a set are separated by whitespace or commas.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from .semver import Version, compare_versions, parse

logger = logging.getLogger(__name__)

TRACE = 5

_COMPARATOR_RE = re.compile(r"(<=|>=|<|>|=)(.+)")
_COMPARATOR_SEP_RE = re.compile(r"[\s,]+")


class Operator(str, Enum):
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "="

    def accepts(self, result: int) -> bool:
        return _ACCEPTS[self](result)


_ACCEPTS = {
    Operator.LT: lambda r: r < 0,
    Operator.LE: lambda r: r <= 0,
    Operator.GT: lambda r: r > 0,
    Operator.GE: lambda r: r >= 0,
    Operator.EQ: lambda r: r == 0,
}


@dataclass(frozen=True)
class Comparator:
    operator: Operator
    version: Version

    def test(self, version: Version) -> bool:
        return self.operator.accepts(compare_versions(version, self.version))

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"


@dataclass(frozen=True)
class ComparatorSet:
    comparators: tuple[Comparator, ...] = ()
    malformed: tuple[str, ...] = ()

    def test(self, version: Version) -> bool:
        if self.malformed:
            logger.debug("Comparator set has malformed comparators %s", ", ".join(self.malformed))
            return False
        for comparator in self.comparators:
            ok = comparator.test(version)
            logger.log(TRACE, "Comparing %s to %s, match=%s", version, comparator, ok)
            if not ok:
                return False
        return True

    def __str__(self) -> str:
        return " ".join([*(str(c) for c in self.comparators), *self.malformed])


@dataclass(frozen=True)
class Range:
    sets: tuple[ComparatorSet, ...]

    def test(self, version: Version) -> bool:
        for comparator_set in self.sets:
            logger.debug('Checking comparator set "%s" ...', comparator_set)
            if comparator_set.malformed:
                # a malformed comparator ends evaluation of the whole range
                logger.debug("Malformed comparators %s", ", ".join(comparator_set.malformed))
                return False
            if comparator_set.test(version):
                return True
        return False


def parse_comparator(token: str) -> Comparator | None:
    m = _COMPARATOR_RE.fullmatch(token or "")
    if not m:
        return None
    version = parse(m.group(2))
    if version is None:
        return None
    return Comparator(Operator(m.group(1)), version)


def parse_comparator_set(text: str) -> ComparatorSet:
    comparators: list[Comparator] = []
    malformed: list[str] = []
    for token in _COMPARATOR_SEP_RE.split(text.strip()):
        if not token:
            continue
        comparator = parse_comparator(token)
        if comparator is None:
            malformed.append(token)
        else:
            comparators.append(comparator)
    return ComparatorSet(tuple(comparators), tuple(malformed))


def parse_range(text: str | None) -> Range:
    """Split on ``|`` or ``||``. Blank segments are dropped, so a blank range has no sets."""
    normalized = (text or "").replace("||", "|")
    return Range(tuple(parse_comparator_set(part) for part in normalized.split("|") if part.strip()))


def satisfies(version: str | None, range_expr: str | None) -> bool:
    target = parse(version)
    if target is None:
        return False
    return parse_range(range_expr).test(target)
