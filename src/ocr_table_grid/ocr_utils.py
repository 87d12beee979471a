from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import OcrConfig, TableConfig
from .parser import parse_tsv_records
from .pipeline import TableResult, extract_table

log = logging.getLogger(__name__)


def run_tesseract_tsv(
    image_path: str,
    *,
    lang: str = "eng",
    psm: int = 6,
    oem: int = 3,
) -> str:
    """
    Ejecuta Tesseract sobre una imagen y devuelve su salida TSV por palabra
    (cabecera + una línea por nodo de layout).
    """
    try:
        from PIL import Image
    except ImportError as exc:
        raise RuntimeError("Pillow es requerido para ejecutar el OCR.") from exc

    try:
        import pytesseract
    except ImportError as exc:
        raise RuntimeError("pytesseract es requerido para ejecutar el OCR.") from exc

    img_path = Path(image_path)
    log.debug("Ejecutando Tesseract sobre %s (lang=%s, psm=%d, oem=%d)", img_path, lang, psm, oem)

    with Image.open(str(img_path)) as im:
        image = im.convert("RGB")
    custom_config = f"--oem {oem} --psm {psm}"
    return pytesseract.image_to_data(
        image, lang=lang, config=custom_config, output_type=pytesseract.Output.STRING
    )


def ocr_image_to_table(
    image_path: str,
    *,
    ocr_config: Optional[OcrConfig] = None,
    table_config: Optional[TableConfig] = None,
) -> Optional[TableResult]:
    """
    Prueba los modos de layout en orden y devuelve la primera tabla detectada.
    Cada intento pasa por el pipeline de forma independiente.
    """
    ocr_config = ocr_config or OcrConfig()
    for psm in ocr_config.layout_modes:
        tsv = run_tesseract_tsv(image_path, lang=ocr_config.lang, psm=psm, oem=ocr_config.oem)
        result = extract_table(parse_tsv_records(tsv), table_config)
        if result is not None:
            log.info("Tabla detectada con psm %d.", psm)
            return result
        log.info("Sin tabla con psm %d.", psm)
    return None
