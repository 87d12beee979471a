from __future__ import annotations
from typing import List, Sequence
import numpy as np

from .structures import WordToken

def nearest_anchor(left: int, anchors: np.ndarray) -> int:
    # np.argmin devuelve el primer mínimo: en empate exacto gana el ancla de menor índice
    return int(np.argmin(np.abs(anchors - left)))

def assign_cells(rows: Sequence[Sequence[WordToken]],
                 anchors: Sequence[int]
                 ) -> List[List[str]]:
    """Assign each word of each row to its nearest column anchor by left edge.

    Words landing in the same cell are joined with a single space, in the
    left-to-right order the row already has. The cell array is sized to
    max(len(anchors), len(row)); rows are not equal-length yet.
    """
    if not anchors:
        return [[] for _ in rows]

    arr = np.asarray(anchors, dtype=np.int64)
    out: List[List[str]] = []
    for row in rows:
        cells = [""] * max(len(anchors), len(row))
        for w in row:
            idx = nearest_anchor(w.left, arr)
            cells[idx] = f"{cells[idx]} {w.text}" if cells[idx] else w.text
        out.append(cells)
    return out
