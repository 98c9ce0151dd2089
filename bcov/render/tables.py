from __future__ import annotations

from typing import List, Sequence, Tuple

Row = Tuple[object, ...]


def markdown_table(headings: Sequence[str], rows: Sequence[Row], *, numeric: Sequence[int] = ()) -> str:
    """
    Таблица в стиле GitHub Markdown с выравниванием по ширине колонок.
    Колонки из numeric выравниваются вправо.
    """
    cells: List[List[str]] = [[str(c) for c in row] for row in rows]
    widths = [len(h) for h in headings]
    for row in cells:
        for i, c in enumerate(row):
            widths[i] = max(widths[i], len(c))

    def fmt(values: Sequence[str]) -> str:
        parts = []
        for i, v in enumerate(values):
            parts.append(v.rjust(widths[i]) if i in numeric else v.ljust(widths[i]))
        return "| " + " | ".join(parts) + " |"

    sep = []
    for i, w in enumerate(widths):
        sep.append("-" * (w - 1) + ":" if i in numeric else "-" * w)

    lines = [fmt(list(headings)), "| " + " | ".join(sep) + " |"]
    lines.extend(fmt(row) for row in cells)
    return "\n".join(lines)


__all__ = ["markdown_table"]
