"""
Текстовый отчёт: по каждому ассету таблица неиспользованных модулей
и таблица неиспользованных внешних пакетов (по возрастанию размера).
"""

from __future__ import annotations

from typing import List

from ..coverage.model import PackageTotal, SizedModule
from ..engine import AnalysisRun, AssetAnalysis
from .tables import markdown_table

SEPARATOR = "=" * 51


def render_modules(modules: List[SizedModule], *, show_zero: bool) -> str:
    rows = [
        (m.size, m.name)
        for m in sorted(modules, key=lambda m: m.size)
        if show_zero or m.size
    ]
    return markdown_table(("Size (bytes)", "Module"), rows, numeric=(0,))


def render_packages(packages: List[PackageTotal]) -> str:
    """Пустая строка, если ни у одного пакета нет ненулевого размера."""
    rows = [(p.size, p.package) for p in sorted(packages, key=lambda p: p.size) if p.size > 0]
    if not rows:
        return ""
    return markdown_table(("Size (bytes)", "Packages"), rows, numeric=(0,))


def render_asset(analysis: AssetAnalysis, *, show_zero: bool) -> str:
    out: List[str] = [SEPARATOR, "Asset: ", "", analysis.url, ""]

    out.append("Unused modules:")
    out.append("")
    out.append(render_modules(analysis.unused, show_zero=show_zero))

    packages = render_packages(analysis.packages)
    if packages:
        out.append("Unused external packages:")
        out.append("")
        out.append(packages)
        out.append("")

    return "\n".join(out) + "\n"


def render_run(run: AnalysisRun) -> str:
    show_zero = run.options.effective_show_zero
    chunks = [render_asset(a, show_zero=show_zero) for a in run.analyzed]
    return "".join(chunks) + "\n"


__all__ = ["render_modules", "render_packages", "render_asset", "render_run", "SEPARATOR"]
