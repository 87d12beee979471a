# src/ocr_table_grid/pipeline.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .assign import assign_cells
from .columns import infer_column_anchors
from .config import TableConfig
from .exporters import render_markdown
from .filters import filter_words
from .grid import normalize_grid
from .parser import parse_tsv_records
from .rows import average_height, cluster_rows
from .structures import RawRecord, TableGrid, WordToken

log = logging.getLogger(__name__)

DEFAULT_CONFIG = TableConfig()


@dataclass(frozen=True)
class TableResult:
    grid: TableGrid
    markdown: str
    n_words: int
    anchors: List[int]


def reconstruct_table(
    words: Sequence[WordToken],
    config: Optional[TableConfig] = None,
) -> Optional[TableGrid]:
    """
    Filas → anclas de columna → celdas → rejilla normalizada.
    Devuelve None ("no hay tabla") si no hay palabras o la rejilla queda vacía.
    Función pura: sin estado global, segura para llamar desde varios hilos.
    """
    grid, _ = _reconstruct(words, config or DEFAULT_CONFIG)
    return grid


def _reconstruct(words: Sequence[WordToken], config: TableConfig) -> Tuple[Optional[TableGrid], List[int]]:
    if not words:
        log.warning("No hay palabras válidas: no se detectó tabla.")
        return None, []

    avg_h = average_height(words)
    rows = cluster_rows(words, avg_h, tolerance_factor=config.row_tolerance_factor)
    anchors = infer_column_anchors(rows, avg_h, gap_factor=config.column_gap_factor)
    log.info("%d palabras → %d filas, %d anclas de columna (altura media %.2f).",
             len(words), len(rows), len(anchors), avg_h)

    cells = assign_cells(rows, anchors)
    grid = normalize_grid(cells)
    if grid is None:
        log.warning("La rejilla quedó vacía tras normalizar: no se detectó tabla.")
        return None, anchors

    log.info("Rejilla construida con %d filas y %d columnas.", grid.n_rows, grid.n_cols)
    return grid, anchors


def extract_table(
    records: Iterable[RawRecord],
    config: Optional[TableConfig] = None,
) -> Optional[TableResult]:
    """Pipeline completo sobre los registros crudos de un único intento de OCR."""
    config = config or DEFAULT_CONFIG
    words = filter_words(records, min_confidence=config.min_confidence)
    grid, anchors = _reconstruct(words, config)
    if grid is None:
        return None
    return TableResult(grid=grid, markdown=render_markdown(grid), n_words=len(words), anchors=anchors)


def table_from_words(
    words: Sequence[WordToken],
    config: Optional[TableConfig] = None,
) -> Optional[str]:
    grid = reconstruct_table(words, config)
    return render_markdown(grid) if grid is not None else None


def table_from_tsv(
    tsv_text: str,
    config: Optional[TableConfig] = None,
) -> Optional[str]:
    result = extract_table(parse_tsv_records(tsv_text), config)
    return result.markdown if result is not None else None
