from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ModuleInterval:
    name: str          # ключ модуля в объекте регистрации, напр. "./src/index.js"
    start: int         # начало тела модуля (включительно)
    end: int           # конец тела модуля (не включительно)


@dataclass(frozen=True)
class CoverageRange:
    start: int
    end: int


@dataclass(frozen=True)
class SizedModule:
    name: str
    size: int = 0      # 0, если корень проекта не задан или файл не найден


@dataclass(frozen=True)
class PackageTotal:
    package: str       # "lodash" | "@scope/name"
    size: int


# name -> used
VerdictMap = Dict[str, bool]


__all__ = ["ModuleInterval", "CoverageRange", "SizedModule", "PackageTotal", "VerdictMap"]
