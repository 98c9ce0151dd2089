from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


# -----------------------------
@dataclass(frozen=True)
class RunOptions:
    # Корень проекта для вычисления размеров модулей (None — размеры 0)
    root: Optional[Path] = None
    # Фильтрация ассетов по пути URL (gitwildmatch)
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    # Показывать модули нулевого размера (None — решается по наличию root)
    show_zero: Optional[bool] = None
    # Сортировать/сливать диапазоны перед сверкой
    normalize_ranges: bool = False

    @property
    def effective_show_zero(self) -> bool:
        if self.show_zero is None:
            return self.root is None
        return self.show_zero
