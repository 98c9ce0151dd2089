from __future__ import annotations

from .report_schema import CoverageReport, build_report
from .text import render_run

__all__ = ["CoverageReport", "build_report", "render_run"]
