from .ranges import Comparator, ComparatorSet, Operator, Range, parse_comparator, parse_range, satisfies
from .semver import Version, clean, compare, parse, validate
from .upgrades import split_versions, upgrade_list

__all__ = [
    "Comparator",
    "ComparatorSet",
    "Operator",
    "Range",
    "Version",
    "clean",
    "compare",
    "parse",
    "parse_comparator",
    "parse_range",
    "satisfies",
    "split_versions",
    "upgrade_list",
    "validate",
]
