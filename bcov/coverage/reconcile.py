"""
Сверка границ модулей бандла с диапазонами, реально исполненными в рантайме.

Оба входа — отсортированные по start последовательности полуоткрытых
интервалов [start, end) без взаимных пересечений. Сверка делается одним
проходом двумя указателями: каждый шаг сдвигает хотя бы один из них,
откатов нет, поэтому время линейно по сумме длин.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple

from .model import CoverageRange, ModuleInterval, VerdictMap


class Overlap(Enum):
    """Взаимное расположение модуля M и диапазона R."""
    BEFORE = "before"        # M целиком до R
    AFTER = "after"          # M целиком после R
    INSIDE = "inside"        # M целиком внутри R
    CONTAINS = "contains"    # R целиком внутри M
    TAIL_IN = "tail_in"      # M начинается до R, заканчивается внутри
    HEAD_IN = "head_in"      # M начинается внутри R, заканчивается после


class _Step(NamedTuple):
    used: bool
    next_module: int
    next_range: int


_STEPS: Dict[Overlap, _Step] = {
    Overlap.BEFORE:   _Step(used=False, next_module=1, next_range=0),
    Overlap.AFTER:    _Step(used=False, next_module=0, next_range=1),
    Overlap.INSIDE:   _Step(used=True,  next_module=1, next_range=0),
    Overlap.CONTAINS: _Step(used=True,  next_module=1, next_range=1),
    Overlap.TAIL_IN:  _Step(used=True,  next_module=1, next_range=0),
    Overlap.HEAD_IN:  _Step(used=True,  next_module=1, next_range=1),
}


def classify(module: ModuleInterval, rng: CoverageRange) -> Overlap:
    """
    Определяет отношение модуля к диапазону.

    Проверки идут в фиксированном порядке, побеждает первая сработавшая.
    Касание концов (M.end == R.start или M.start == R.end) пересечением
    не считается.
    """
    if module.end <= rng.start:
        return Overlap.BEFORE
    if module.start >= rng.end:
        return Overlap.AFTER
    if module.start >= rng.start and module.end <= rng.end:
        return Overlap.INSIDE
    if module.start <= rng.start and module.end >= rng.end:
        return Overlap.CONTAINS
    if module.start <= rng.start and module.end <= rng.end:
        return Overlap.TAIL_IN
    # module.start >= rng.start and module.end >= rng.end
    return Overlap.HEAD_IN


def reconcile(modules: Sequence[ModuleInterval], ranges: Sequence[CoverageRange]) -> VerdictMap:
    """
    Помечает каждый модуль как использованный или нет.

    Модуль регистрируется со значением False при первом посещении, до анализа
    пересечения, и переводится в True при первом найденном пересечении.
    В результате есть каждый модуль, в том числе при пустом списке диапазонов.
    Вход не проверяется и не пересортировывается: на неотсортированных или
    перекрывающихся данных результат не гарантирован (см. normalize_ranges).
    """
    verdicts: VerdictMap = {}
    m = 0
    r = 0
    while m < len(modules) and r < len(ranges):
        module = modules[m]
        if module.name not in verdicts:
            verdicts[module.name] = False

        step = _STEPS[classify(module, ranges[r])]
        if step.used:
            verdicts[module.name] = True
        m += step.next_module
        r += step.next_range

    # Диапазоны кончились раньше модулей: хвост остаётся неиспользованным.
    for module in modules[m:]:
        verdicts.setdefault(module.name, False)

    return verdicts


def unused_modules(verdicts: VerdictMap) -> List[str]:
    """Имена неиспользованных модулей в порядке их первого посещения."""
    return [name for name, used in verdicts.items() if not used]


# ---------------- Необязательная нормализация входа ---------------- #

def normalize_modules(modules: Iterable[ModuleInterval]) -> List[ModuleInterval]:
    """Стабильная сортировка модулей по началу интервала."""
    return sorted(modules, key=lambda mi: mi.start)


def normalize_ranges(ranges: Iterable[CoverageRange]) -> List[CoverageRange]:
    """
    Сортирует диапазоны и сливает строго перекрывающиеся.

    Соприкасающиеся диапазоны ([0, 10) и [10, 20)) остаются раздельными:
    их слияние поменяло бы вердикт для вырожденных модулей на стыке.
    На корректном входе возвращает те же диапазоны.
    """
    merged: List[Tuple[int, int]] = []
    for rng in sorted(ranges, key=lambda x: (x.start, x.end)):
        if merged and rng.start < merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, rng.end))
        else:
            merged.append((rng.start, rng.end))
    return [CoverageRange(start=s, end=e) for s, e in merged]


__all__ = [
    "Overlap",
    "classify",
    "reconcile",
    "unused_modules",
    "normalize_modules",
    "normalize_ranges",
]
