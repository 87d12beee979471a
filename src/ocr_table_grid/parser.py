# src/ocr_table_grid/parser.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional
from bs4 import BeautifulSoup
from .structures import RawRecord, parse_bbox, parse_wconf

log = logging.getLogger(__name__)

# Posiciones en la salida TSV por palabra del reconocedor:
# level page_num block_num par_num line_num word_num left top width height conf text
TSV_MIN_COLUMNS = 12
COL_BLOCK = 2
COL_LINE = 4
COL_LEFT = 6
COL_TOP = 7
COL_WIDTH = 8
COL_HEIGHT = 9
COL_CONF = 10
COL_TEXT = 11

def _to_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return None

def _to_conf(value: str) -> Optional[int]:
    # las versiones recientes emiten la confianza con decimales ("96.47")
    try:
        return int(float(value.strip()))
    except (ValueError, AttributeError):
        return None

def parse_tsv_records(text: str) -> List[RawRecord]:
    """
    Parsea la salida TSV por palabra. La primera línea es la cabecera y se omite.
    Las líneas con menos de 12 columnas se descartan sin error.
    """
    records: List[RawRecord] = []
    skipped = 0
    # solo "\n" separa registros: splitlines() también corta en \x0c, \x85 o \u2028
    for lineno, line in enumerate(text.split("\n")[1:], start=2):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < TSV_MIN_COLUMNS:
            skipped += 1
            log.debug("Línea %d con %d columnas, se omite.", lineno, len(parts))
            continue
        records.append(RawRecord(
            text="\t".join(parts[COL_TEXT:]),
            left=_to_int(parts[COL_LEFT]),
            top=_to_int(parts[COL_TOP]),
            width=_to_int(parts[COL_WIDTH]),
            height=_to_int(parts[COL_HEIGHT]),
            confidence=_to_conf(parts[COL_CONF]),
            block_id=_to_int(parts[COL_BLOCK]),
            line_id=_to_int(parts[COL_LINE]),
        ))
    if skipped:
        log.info("Se omitieron %d líneas TSV incompletas.", skipped)
    return records

def parse_tsv_file(tsv_path: str) -> List[RawRecord]:
    with open(tsv_path, "r", encoding="utf-8") as f:
        raw = f.read()
    return parse_tsv_records(raw)

def _load_soup(text: str) -> BeautifulSoup:
    """
    Intenta XML (lxml-xml) y, si no hay nodos HOCR, fallback a HTML (lxml).
    """
    soup_xml = BeautifulSoup(text, "lxml-xml")
    if soup_xml.find(class_=lambda c: c and "ocr_page" in c):
        return soup_xml
    return BeautifulSoup(text, "lxml")

def _ordinals(page, cls: str) -> Dict[int, int]:
    nodes = page.find_all(class_=lambda c: c and cls in c)
    return {id(node): i for i, node in enumerate(nodes, start=1)}

def parse_hocr_records(text: str) -> List[RawRecord]:
    """
    Extrae registros por palabra de un documento hOCR.
    block_id/line_id son el ordinal del `ocr_carea` / `ocr_line` contenedor.
    """
    soup = _load_soup(text)
    records: List[RawRecord] = []

    for pi, page in enumerate(soup.find_all(class_=lambda c: c and "ocr_page" in c), start=1):
        block_ids = _ordinals(page, "ocr_carea")
        line_ids = _ordinals(page, "ocr_line")

        for w in page.find_all(class_=lambda c: c and "ocrx_word" in c):
            title = w.get("title", "")
            bb = parse_bbox(title)
            conf = parse_wconf(title)

            block = w.find_parent(class_=lambda c: c and "ocr_carea" in c)
            line = w.find_parent(class_=lambda c: c and "ocr_line" in c)

            if bb:
                x1, y1, x2, y2 = bb
                left, top, width, height = x1, y1, x2 - x1, y2 - y1
            else:
                log.debug("Palabra sin bbox en página %d: %r", pi, w.get_text())
                left = top = width = height = None

            records.append(RawRecord(
                text=w.get_text() or "",
                left=left,
                top=top,
                width=width,
                height=height,
                confidence=conf if conf is not None else 0,
                block_id=block_ids.get(id(block)),
                line_id=line_ids.get(id(line)),
            ))

    return records

def parse_hocr_file(hocr_path: str) -> List[RawRecord]:
    with open(hocr_path, "r", encoding="utf-8") as f:
        raw = f.read()
    return parse_hocr_records(raw)
