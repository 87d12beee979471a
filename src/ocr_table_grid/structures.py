from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import re

BBOX_RE = re.compile(r"bbox (\d+)\s+(\d+)\s+(\d+)\s+(\d+)")
WCONF_RE = re.compile(r"x_wconf\s+(-?\d+(?:\.\d+)?)")

def parse_bbox(title_attr: str) -> Optional[Tuple[int, int, int, int]]:
    if not title_attr:
        return None
    m = BBOX_RE.search(title_attr)
    if not m:
        return None
    x1, y1, x2, y2 = map(int, m.groups())
    return x1, y1, x2, y2

def parse_wconf(title_attr: str) -> Optional[int]:
    if not title_attr:
        return None
    m = WCONF_RE.search(title_attr)
    if not m:
        return None
    return int(float(m.group(1)))

@dataclass(frozen=True)
class RawRecord:
    """Registro por palabra tal como lo emite el reconocedor.

    Los campos numéricos que no se pudieron parsear quedan en None; el filtro
    decide qué hacer con ellos.
    """
    text: str
    left: Optional[int]
    top: Optional[int]
    width: Optional[int]
    height: Optional[int]
    confidence: Optional[int]
    block_id: Optional[int] = None
    line_id: Optional[int] = None

@dataclass(frozen=True)
class WordToken:
    text: str
    left: int
    top: int
    height: int
    confidence: int

@dataclass
class TableGrid:
    """Rejilla rectangular de celdas; la fila 0 actúa como cabecera al renderizar."""
    rows: List[List[str]] = field(default_factory=list)

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def header(self) -> List[str]:
        return self.rows[0] if self.rows else []

    @property
    def body(self) -> List[List[str]]:
        return self.rows[1:]
