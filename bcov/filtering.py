"""
Фильтрация ассетов профиля по пути URL.

Паттерны — gitwildmatch (как в .gitignore), сравнение без учёта регистра:
    include: ["/static/js/**"]   — только ассеты из /static/js/
    exclude: ["**/runtime*.js"]  — кроме runtime-чанков
Пустой include означает «всё». exclude приоритетнее include.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pathspec


@dataclass(frozen=True)
class CompiledPatterns:
    """Скомпилированные паттерны для быстрой проверки."""
    include_spec: Optional[pathspec.PathSpec]
    exclude_spec: Optional[pathspec.PathSpec]

    @classmethod
    def compile(cls, include: List[str], exclude: List[str]) -> CompiledPatterns:
        include_lower = [pat.lower() for pat in include]
        exclude_lower = [pat.lower() for pat in exclude]
        return cls(
            include_spec=pathspec.PathSpec.from_lines("gitwildmatch", include_lower) if include_lower else None,
            exclude_spec=pathspec.PathSpec.from_lines("gitwildmatch", exclude_lower) if exclude_lower else None,
        )


class AssetFilter:

    def __init__(self, include: Optional[List[str]] = None, exclude: Optional[List[str]] = None):
        self.patterns = CompiledPatterns.compile(list(include or []), list(exclude or []))

    def includes(self, url_path: str) -> bool:
        rel = url_path.lower().lstrip("/")
        if self.patterns.exclude_spec and self.patterns.exclude_spec.match_file(rel):
            return False
        if self.patterns.include_spec:
            return self.patterns.include_spec.match_file(rel)
        return True


__all__ = ["AssetFilter", "CompiledPatterns"]
