# src/ocr_table_grid/config.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

DEFAULT_ROW_TOLERANCE_FACTOR = 0.6   # × altura media
DEFAULT_COLUMN_GAP_FACTOR = 1.5      # × altura media
DEFAULT_MIN_CONFIDENCE = 0

DEFAULT_LANG = "eng"
DEFAULT_OEM = 3
# psm 6: bloque uniforme de texto; psm 4: una columna de texto de tamaño variable
DEFAULT_LAYOUT_MODES: Tuple[int, ...] = (6, 4)

@dataclass(frozen=True)
class TableConfig:
    """Parámetros de la reconstrucción de tablas.

    Con los valores por defecto: tolerancia de fila = 0.6 × altura media y
    separación mínima entre columnas = 1.5 × altura media.
    """
    row_tolerance_factor: float = DEFAULT_ROW_TOLERANCE_FACTOR
    column_gap_factor: float = DEFAULT_COLUMN_GAP_FACTOR
    min_confidence: int = DEFAULT_MIN_CONFIDENCE

    def __post_init__(self) -> None:
        for name in ("row_tolerance_factor", "column_gap_factor"):
            value = getattr(self, name)
            # NaN haría falsas todas las comparaciones de distancia
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} debe ser un número finito >= 0: {value!r}")
        if self.min_confidence < 0:
            raise ValueError(f"min_confidence debe ser >= 0: {self.min_confidence!r}")

@dataclass(frozen=True)
class OcrConfig:
    lang: str = DEFAULT_LANG
    layout_modes: Tuple[int, ...] = DEFAULT_LAYOUT_MODES
    oem: int = DEFAULT_OEM

    def __post_init__(self) -> None:
        if not self.layout_modes:
            raise ValueError("layout_modes no puede estar vacío.")
        if not self.lang:
            raise ValueError("lang es requerido.")
