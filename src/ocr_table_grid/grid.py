# src/ocr_table_grid/grid.py
from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from .structures import TableGrid

log = logging.getLogger(__name__)

def pad_rows(rows: Sequence[Sequence[str]]) -> List[List[str]]:
    """Rellena (y recorta) todas las filas a la longitud de la más larga."""
    if not rows:
        return []
    max_cols = max(len(r) for r in rows)
    return [(list(r) + [""] * max_cols)[:max_cols] for r in rows]

def drop_empty_columns(rows: Sequence[Sequence[str]]) -> List[List[str]]:
    """Elimina las columnas vacías (tras strip) en todas las filas, conservando el orden."""
    if not rows:
        return []
    n_cols = len(rows[0])
    keep = [j for j in range(n_cols) if any(r[j].strip() for r in rows)]
    if len(keep) < n_cols:
        log.debug("Columnas vacías eliminadas: %s", [j for j in range(n_cols) if j not in keep])
    return [[r[j] for j in keep] for r in rows]

def normalize_grid(rows: Sequence[Sequence[str]]) -> Optional[TableGrid]:
    """
    Deja la rejilla rectangular y sin columnas vacías.
    Devuelve None si no queda ninguna fila o ninguna columna.
    """
    grid_rows = drop_empty_columns(pad_rows(rows))
    if not grid_rows or not grid_rows[0]:
        return None
    return TableGrid(rows=grid_rows)
