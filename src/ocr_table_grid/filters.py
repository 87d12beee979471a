# src/ocr_table_grid/filters.py
from __future__ import annotations
import logging
from typing import Iterable, List

from .config import DEFAULT_MIN_CONFIDENCE
from .structures import RawRecord, WordToken

log = logging.getLogger(__name__)

def clean_word_text(text: str) -> str:
    """Limpia el texto de una palabra individual."""
    return (text or "").strip()

def filter_words(records: Iterable[RawRecord],
                 min_confidence: int = DEFAULT_MIN_CONFIDENCE
                 ) -> List[WordToken]:
    """
    Descarta registros inválidos y devuelve los WordToken utilizables:
      - confianza < 0 (detección vacía) o no parseable,
      - texto vacío tras recortar,
      - left/top/height que no se pudieron parsear.
    Una lista vacía no es un error: significa "no hay tabla".
    """
    words: List[WordToken] = []
    dropped = 0
    for r in records:
        text = clean_word_text(r.text)
        # con el mínimo por defecto (0) esto es la regla "confianza < 0"
        if r.confidence is None or r.confidence < min_confidence:
            dropped += 1
            continue
        if not text:
            dropped += 1
            continue
        if r.left is None or r.top is None or r.height is None:
            log.debug("Registro con coordenadas inválidas, se omite: %r", r)
            dropped += 1
            continue
        words.append(WordToken(text=text, left=r.left, top=r.top,
                               height=r.height, confidence=r.confidence))

    log.debug("Filtro de palabras: %d válidas, %d descartadas.", len(words), dropped)
    return words
