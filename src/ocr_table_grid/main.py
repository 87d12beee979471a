from __future__ import annotations

import logging
from typing import Optional

from .config import OcrConfig, TableConfig
from .exporters import rows_to_csv, write_markdown
from .ocr_utils import ocr_image_to_table
from .parser import parse_hocr_file, parse_tsv_file
from .pipeline import TableResult, extract_table

log = logging.getLogger(__name__)

INPUT_FORMATS = ("tsv", "hocr", "image")


def file_to_table(
    input_path: str,
    *,
    input_format: str = "tsv",
    table_config: Optional[TableConfig] = None,
    ocr_config: Optional[OcrConfig] = None,
    md_path: Optional[str] = None,
    csv_path: Optional[str] = None,
) -> Optional[TableResult]:
    """
    Orquesta la reconstrucción de la tabla según el formato de entrada y
    escribe las salidas pedidas. Devuelve None si no se detectó tabla.
    """
    input_format = (input_format or "tsv").lower()
    log.info("Formato de entrada: %s", input_format)

    if input_format == "image":
        result = ocr_image_to_table(input_path, ocr_config=ocr_config, table_config=table_config)
    elif input_format == "tsv":
        log.info("Parseando TSV desde: %s", input_path)
        result = extract_table(parse_tsv_file(input_path), table_config)
    elif input_format == "hocr":
        log.info("Parseando HOCR desde: %s", input_path)
        result = extract_table(parse_hocr_file(input_path), table_config)
    else:
        raise ValueError(f"Formato de entrada desconocido: {input_format!r}")

    if result is None:
        log.warning("No se detectó ninguna tabla en %s.", input_path)
        return None

    if md_path:
        write_markdown(result.markdown, md_path)
        log.info("Tabla markdown escrita en: %s", md_path)
    if csv_path:
        rows_to_csv(result.grid.body, result.grid.header, csv_path)
        log.info("CSV escrito en: %s", csv_path)
    return result
