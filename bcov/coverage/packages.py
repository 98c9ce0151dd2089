"""
Агрегация размеров неиспользованных модулей по внешним пакетам.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .model import PackageTotal, SizedModule

NODE_MODULES = "node_modules"


def package_name(module_path: str) -> Optional[str]:
    """
    Извлекает имя пакета из пути модуля.

    Берётся первый сегмент "node_modules" и следующий за ним сегмент;
    для scoped-пакетов (@scope/name) — два сегмента.

        "./node_modules/lodash/map.js"        -> "lodash"
        "node_modules/@scope/pkg/index.js"    -> "@scope/pkg"
        "src/app.js"                          -> None
    """
    segments = module_path.split("/")
    try:
        idx = segments.index(NODE_MODULES)
    except ValueError:
        return None

    rest = segments[idx + 1:]
    if not rest or not rest[0]:
        return None

    head = rest[0]
    if head.startswith("@") and len(rest) > 1 and rest[1]:
        return f"{head}/{rest[1]}"
    return head


def aggregate(modules: Iterable[SizedModule]) -> List[PackageTotal]:
    """
    Суммирует размеры модулей по пакетам.

    Модули вне node_modules в сумму не попадают. Пакеты с нулевым итогом
    отбрасываются. Порядок — порядок первого появления пакета.
    """
    totals: Dict[str, int] = {}
    for mod in modules:
        pkg = package_name(mod.name)
        if pkg is None:
            continue
        totals[pkg] = totals.get(pkg, 0) + (mod.size or 0)

    return [PackageTotal(package=pkg, size=size) for pkg, size in totals.items() if size > 0]


__all__ = ["package_name", "aggregate", "NODE_MODULES"]
