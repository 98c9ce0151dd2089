from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .types import RunOptions

_LOG = logging.getLogger("bcov.config")

_yaml = YAML(typ="safe")
CONFIG_FILE = "bcov.yaml"


@dataclass
class FileConfig:
    root: Optional[str] = None
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    show_zero: Optional[bool] = None
    normalize_ranges: bool = False
    # Каталог, относительно которого резолвится root из файла
    base_dir: Optional[Path] = None


_KNOWN_KEYS = {"root", "include", "exclude", "show_zero", "normalize_ranges"}


def _cfg_path(cwd: Path) -> Path:
    return (cwd / CONFIG_FILE).resolve()


def load_config(cwd: Path, explicit: Optional[Path] = None) -> FileConfig:
    """
    Читает bcov.yaml. Отсутствие файла по умолчанию — не ошибка (пустой конфиг),
    а вот явно указанный через --config файл обязан существовать.
    """
    p = explicit.resolve() if explicit is not None else _cfg_path(cwd)
    if not p.is_file():
        if explicit is not None:
            raise ConfigError(f"Config file not found: {p}")
        return FileConfig()

    _LOG.debug("Loading config from %s", p)
    try:
        raw = _yaml.load(p.read_text(encoding="utf-8")) or {}
    except (OSError, YAMLError) as e:
        raise ConfigError(f"{p}: failed to read config: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{p}: config must be a mapping with keys: {', '.join(sorted(_KNOWN_KEYS))}")

    unknown = sorted(set(map(str, raw.keys())) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{p}: unknown keys: {', '.join(unknown)}")

    return FileConfig(
        root=_opt_str(raw, "root", p),
        include=_str_list(raw, "include", p),
        exclude=_str_list(raw, "exclude", p),
        show_zero=_opt_bool(raw, "show_zero", p),
        normalize_ranges=bool(_opt_bool(raw, "normalize_ranges", p) or False),
        base_dir=p.parent,
    )


def _opt_str(raw: Dict[str, Any], key: str, p: Path) -> Optional[str]:
    val = raw.get(key)
    if val is None:
        return None
    if not isinstance(val, str):
        raise ConfigError(f"{p}: {key}: expected string, got {type(val).__name__}")
    return val


def _opt_bool(raw: Dict[str, Any], key: str, p: Path) -> Optional[bool]:
    val = raw.get(key)
    if val is None:
        return None
    if not isinstance(val, bool):
        raise ConfigError(f"{p}: {key}: expected boolean, got {type(val).__name__}")
    return val


def _str_list(raw: Dict[str, Any], key: str, p: Path) -> List[str]:
    val = raw.get(key)
    if val is None:
        return []
    if isinstance(val, str):
        return [val]
    if not isinstance(val, list) or not all(isinstance(x, str) for x in val):
        raise ConfigError(f"{p}: {key}: expected list of strings")
    return list(val)


def build_options(
    cfg: FileConfig,
    *,
    root: Optional[str] = None,
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    show_zero: Optional[bool] = None,
    normalize_ranges: Optional[bool] = None,
) -> RunOptions:
    """
    Сливает значения из файла с аргументами CLI (CLI приоритетнее).
    Списки include/exclude из CLI заменяют файловые целиком.
    """
    root_path: Optional[Path] = None
    if root:
        root_path = Path(root)
    elif cfg.root:
        root_path = Path(cfg.root)
        if not root_path.is_absolute() and cfg.base_dir is not None:
            root_path = cfg.base_dir / root_path

    return RunOptions(
        root=root_path,
        include=list(include) if include else list(cfg.include),
        exclude=list(exclude) if exclude else list(cfg.exclude),
        show_zero=show_zero if show_zero is not None else cfg.show_zero,
        normalize_ranges=normalize_ranges if normalize_ranges is not None else cfg.normalize_ranges,
    )


__all__ = ["CONFIG_FILE", "FileConfig", "load_config", "build_options"]
