"""
Чтение профиля покрытия JS.

Формат — массив ассетов, как его отдают Puppeteer `page.coverage.stopJSCoverage()`
и экспорт вкладки Coverage в Chrome DevTools:

    [{"url": "...", "text": "...", "ranges": [{"start": 0, "end": 42}, ...]}, ...]
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional
from urllib.parse import urlsplit

from ..coverage.model import CoverageRange
from ..errors import ProfileError

_LOG = logging.getLogger("bcov.io")


@dataclass(frozen=True)
class Asset:
    url: str
    text: str
    ranges: List[CoverageRange] = field(default_factory=list)

    @property
    def url_path(self) -> str:
        """Путь URL без схемы, хоста, query и fragment."""
        return urlsplit(self.url).path or self.url


def is_script_asset(asset: Asset) -> bool:
    return asset.url_path.endswith(".js")


def load_profile(path: Path) -> List[Asset]:
    """
    Загружает профиль. Ошибки верхнего уровня (нет файла, не JSON, не массив)
    поднимаются как ProfileError; битые отдельные записи пропускаются с
    предупреждением.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProfileError(f"Cannot read coverage file {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ProfileError(f"Coverage file {path} is not valid JSON: {e}") from e

    return parse_profile(data, source=str(path))


def parse_profile(data: Any, *, source: str = "<profile>") -> List[Asset]:
    if not isinstance(data, list):
        raise ProfileError(f"{source}: coverage profile must be a JSON array of assets")

    assets: List[Asset] = []
    for idx, entry in enumerate(data):
        asset = _parse_asset(entry)
        if asset is None:
            _LOG.warning("%s: skipping malformed entry #%d", source, idx)
            continue
        assets.append(asset)
    return assets


def _parse_asset(entry: Any) -> Optional[Asset]:
    if not isinstance(entry, dict):
        return None
    url = entry.get("url")
    text = entry.get("text")
    if not isinstance(url, str) or not isinstance(text, str):
        return None

    raw_ranges = entry.get("ranges") or []
    if not isinstance(raw_ranges, list):
        return None

    ranges: List[CoverageRange] = []
    for r in raw_ranges:
        if not isinstance(r, dict):
            return None
        start, end = r.get("start"), r.get("end")
        if not _is_int(start) or not _is_int(end) or start > end:
            return None
        ranges.append(CoverageRange(start=start, end=end))

    return Asset(url=url, text=text, ranges=ranges)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


__all__ = ["Asset", "is_script_asset", "load_profile", "parse_profile"]
