from __future__ import annotations

import logging
import os

_LOG = logging.getLogger("bcov")

DEBUG_ENV = "BCOV_DEBUG"


def setup_logging(debug: bool = False) -> None:
    """
    Настраивает корневой логгер пакета: один обработчик в stderr.
    Повторные вызовы только меняют уровень.
    """
    level = logging.DEBUG if debug or os.environ.get(DEBUG_ENV) else logging.INFO
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)


__all__ = ["setup_logging", "DEBUG_ENV"]
