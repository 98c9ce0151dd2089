from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .coverage.model import SizedModule

_LOG = logging.getLogger("bcov.sizes")


def resolve_size(name: str, root: Optional[Path]) -> int:
    """
    Размер файла модуля на диске относительно корня проекта.
    Никогда не кидает: без корня, при отсутствии файла или ошибке доступа — 0.
    """
    if root is None:
        return 0
    try:
        return (root / name).stat().st_size
    except (OSError, ValueError) as e:
        _LOG.debug("Cannot stat %s under %s: %s", name, root, e)
        return 0


def compute_sizes(names: Iterable[str], root: Optional[Path]) -> List[SizedModule]:
    """Размеры для списка модулей, порядок сохраняется."""
    return [SizedModule(name=name, size=resolve_size(name, root)) for name in names]


__all__ = ["resolve_size", "compute_sizes"]
