from __future__ import annotations
import logging
from typing import List, Sequence
import numpy as np

from .config import DEFAULT_COLUMN_GAP_FACTOR
from .structures import WordToken

log = logging.getLogger(__name__)

def infer_column_anchors(rows: Sequence[Sequence[WordToken]],
                         avg_height: float,
                         gap_factor: float = DEFAULT_COLUMN_GAP_FACTOR
                         ) -> List[int]:
    """Estima los bordes izquierdos de las columnas a partir de la distribución global de `left`.

    Se ordenan todos los `left` de la tabla y se abre una columna nueva cada vez
    que el salto respecto al valor anterior supera `avg_height * gap_factor`.
    Las anclas son globales (no por fila) para que las columnas queden alineadas
    en toda la tabla. Si todas las palabras comparten `left` sale una sola ancla.
    """
    lefts = np.sort(np.array([w.left for row in rows for w in row], dtype=np.int64))
    if lefts.size == 0:
        return []

    min_gap = avg_height * gap_factor

    # el "último valor visto" avanza siempre, así que basta con los saltos consecutivos
    jumps = np.diff(lefts) > min_gap
    anchors = [int(lefts[0])] + [int(x) for x in lefts[1:][jumps]]

    log.debug("Separación mínima entre columnas %.2f px → anclas %s", min_gap, anchors)
    return anchors
