"""
Перевод байтовых смещений tree-sitter (UTF-8) в смещения UTF-16,
в которых браузерные профили покрытия задают диапазоны.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import List

_NON_ASCII = re.compile(r"[^\x00-\x7f]")


class Utf16Offsets:
    """
    Индекс для быстрого перевода byte offset -> UTF-16 offset.

    Строится за один проход по не-ASCII символам текста. Для чисто ASCII
    текста перевод тождественный.
    """

    def __init__(self, text: str):
        # Байтовые позиции концов не-ASCII символов и накопленная разница
        # (байты UTF-8 минус единицы UTF-16) после каждого из них.
        self._ends: List[int] = []
        self._deltas: List[int] = []

        delta = 0
        extra_bytes = 0
        for m in _NON_ASCII.finditer(text):
            ch = m.group()
            n8 = len(ch.encode("utf-8", "surrogatepass"))
            n16 = 2 if ord(ch) > 0xFFFF else 1
            byte_end = m.start() + extra_bytes + n8
            extra_bytes += n8 - 1
            delta += n8 - n16
            self._ends.append(byte_end)
            self._deltas.append(delta)

    @property
    def is_identity(self) -> bool:
        return not self._ends

    def to_utf16(self, byte_pos: int) -> int:
        """Смещение в единицах UTF-16 для байтовой позиции на границе символа."""
        if byte_pos <= 0 or not self._ends:
            return max(byte_pos, 0)
        idx = bisect_right(self._ends, byte_pos) - 1
        if idx < 0:
            return byte_pos
        return byte_pos - self._deltas[idx]


__all__ = ["Utf16Offsets"]
