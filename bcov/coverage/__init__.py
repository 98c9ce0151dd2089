from __future__ import annotations

from .model import CoverageRange, ModuleInterval, PackageTotal, SizedModule, VerdictMap
from .packages import aggregate, package_name
from .reconcile import (
    Overlap,
    classify,
    normalize_modules,
    normalize_ranges,
    reconcile,
    unused_modules,
)

__all__ = [
    "CoverageRange",
    "ModuleInterval",
    "PackageTotal",
    "SizedModule",
    "VerdictMap",
    "Overlap",
    "classify",
    "reconcile",
    "unused_modules",
    "normalize_modules",
    "normalize_ranges",
    "aggregate",
    "package_name",
]
