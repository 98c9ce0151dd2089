"""
Конвейер анализа профиля: для каждого ассета
извлечение модулей → сверка с покрытием → размеры → агрегация по пакетам.

Ассеты обрабатываются независимо; сбой на одном ассете логируется
и не мешает остальным.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .coverage import (
    PackageTotal,
    SizedModule,
    aggregate,
    normalize_modules,
    normalize_ranges,
    reconcile,
    unused_modules,
)
from .extract import extract_modules
from .filtering import AssetFilter
from .io import Asset, is_script_asset, load_profile
from .sizes import compute_sizes
from .types import RunOptions

_LOG = logging.getLogger("bcov.engine")

SKIP_NO_REGISTRY = "no-module-registry"


@dataclass
class AssetAnalysis:
    url: str
    modules_total: int = 0
    unused: List[SizedModule] = field(default_factory=list)
    packages: List[PackageTotal] = field(default_factory=list)
    skipped: Optional[str] = None  # причина пропуска, None — ассет проанализирован

    @property
    def unused_bytes(self) -> int:
        return sum(m.size for m in self.unused)


@dataclass
class AnalysisRun:
    profile: Path
    options: RunOptions
    assets: List[AssetAnalysis] = field(default_factory=list)

    @property
    def analyzed(self) -> List[AssetAnalysis]:
        return [a for a in self.assets if a.skipped is None]


def analyze_asset(asset: Asset, options: RunOptions) -> AssetAnalysis:
    """Полный цикл для одного ассета. Исключения не перехватывает."""
    modules = extract_modules(asset.text)
    if modules is None:
        _LOG.debug("Does not have any module")
        return AssetAnalysis(url=asset.url, skipped=SKIP_NO_REGISTRY)

    ranges = asset.ranges
    if options.normalize_ranges:
        modules = normalize_modules(modules)
        ranges = normalize_ranges(ranges)

    verdicts = reconcile(modules, ranges)
    sized = compute_sizes(unused_modules(verdicts), options.root)

    return AssetAnalysis(
        url=asset.url,
        modules_total=len(modules),
        unused=sized,
        packages=aggregate(sized),
    )


def analyze_assets(assets: List[Asset], options: RunOptions) -> List[AssetAnalysis]:
    flt = AssetFilter(options.include, options.exclude)
    results: List[AssetAnalysis] = []

    for asset in assets:
        _LOG.debug("Processing %s", asset.url)

        if not is_script_asset(asset):
            _LOG.debug("Asset is not a script")
            continue
        if not flt.includes(asset.url_path):
            _LOG.debug("Asset is filtered out")
            continue

        try:
            results.append(analyze_asset(asset, options))
        except Exception as e:
            _LOG.warning("Failed to analyze %s: %s", asset.url, e)
            results.append(AssetAnalysis(url=asset.url, skipped=f"error: {e}"))

    return results


def run_analysis(profile: Path, options: RunOptions) -> AnalysisRun:
    assets = load_profile(profile)
    return AnalysisRun(profile=profile, options=options, assets=analyze_assets(assets, options))


__all__ = [
    "AssetAnalysis",
    "AnalysisRun",
    "SKIP_NO_REGISTRY",
    "analyze_asset",
    "analyze_assets",
    "run_analysis",
]
