"""
JSON-схема отчёта `bcov report`.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..engine import AnalysisRun, AssetAnalysis
from ..version import tool_version


class UnusedModule(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    size: int


class UnusedPackage(BaseModel):
    model_config = ConfigDict(extra="forbid")

    package: str
    size: int


class AssetReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url: str
    modulesTotal: int
    unusedModules: List[UnusedModule]
    unusedBytes: int
    packages: List[UnusedPackage]
    skipped: Optional[str] = None


class CoverageReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    toolVersion: str
    profile: str
    root: Optional[str] = None
    assets: List[AssetReport]


def _asset_report(a: AssetAnalysis) -> AssetReport:
    return AssetReport(
        url=a.url,
        modulesTotal=a.modules_total,
        unusedModules=[UnusedModule(name=m.name, size=m.size) for m in a.unused],
        unusedBytes=a.unused_bytes,
        packages=[UnusedPackage(package=p.package, size=p.size) for p in a.packages],
        skipped=a.skipped,
    )


def build_report(run: AnalysisRun) -> CoverageReport:
    return CoverageReport(
        toolVersion=tool_version(),
        profile=str(run.profile),
        root=str(run.options.root) if run.options.root is not None else None,
        assets=[_asset_report(a) for a in run.assets],
    )


__all__ = ["UnusedModule", "UnusedPackage", "AssetReport", "CoverageReport", "build_report"]
