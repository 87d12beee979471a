# src/ocr_table_grid/rows.py
from __future__ import annotations
import logging
from typing import List, Sequence
import numpy as np

from .config import DEFAULT_ROW_TOLERANCE_FACTOR
from .structures import WordToken

log = logging.getLogger(__name__)

def average_height(words: Sequence[WordToken]) -> float:
    """Altura media de las palabras; base de ambas tolerancias (filas y columnas)."""
    if not words:
        raise ValueError("average_height requiere al menos una palabra.")
    return float(np.mean([w.height for w in words]))

def _close_row(row: List[WordToken]) -> List[WordToken]:
    return sorted(row, key=lambda w: w.left)

def cluster_rows(words: Sequence[WordToken],
                 avg_height: float,
                 tolerance_factor: float = DEFAULT_ROW_TOLERANCE_FACTOR
                 ) -> List[List[WordToken]]:
    """Agrupa palabras en filas horizontales.

    Las palabras se recorren por `top` (orden estable) y cada una se compara con
    el `top` de la PRIMERA palabra de la fila en curso. Si la diferencia supera
    `avg_height * tolerance_factor` se abre una fila nueva; igual a la
    tolerancia sigue en la misma fila.

    Cada fila se devuelve ordenada por `left`.
    """
    if not words:
        return []

    tolerance = avg_height * tolerance_factor
    ordered = sorted(words, key=lambda w: w.top)

    rows: List[List[WordToken]] = []
    current = [ordered[0]]
    # Ancla fija a la primera palabra de la fila, NO una media móvil: evita la
    # deriva en filas largas de texto ligeramente inclinado, a cambio de depender
    # del jitter vertical de esa primera palabra. No cambiar sin revisar fixtures.
    anchor_top = ordered[0].top

    for w in ordered[1:]:
        if abs(w.top - anchor_top) > tolerance:
            rows.append(_close_row(current))
            current = [w]
            anchor_top = w.top
        else:
            current.append(w)

    rows.append(_close_row(current))
    log.debug("Tolerancia de fila %.2f px → %d filas.", tolerance, len(rows))
    return rows
