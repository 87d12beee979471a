from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    DEFAULT_COLUMN_GAP_FACTOR,
    DEFAULT_LANG,
    DEFAULT_LAYOUT_MODES,
    DEFAULT_MIN_CONFIDENCE,
    DEFAULT_OEM,
    DEFAULT_ROW_TOLERANCE_FACTOR,
    OcrConfig,
    TableConfig,
)
from .evaluation import evaluate_grid, write_report
from .main import file_to_table

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_TABLE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reconstruye una tabla a partir de la salida por palabra de un OCR (TSV, hOCR o imagen)."
    )
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--tsv", type=str, help="Ruta a la salida TSV por palabra del OCR")
    src.add_argument("--hocr", type=str, help="Ruta a un archivo .hocr")
    src.add_argument("--image", type=str, help="Ruta a una imagen (se ejecuta Tesseract)")

    parser.add_argument("--output", type=str, help="Ruta opcional para guardar la tabla markdown")
    parser.add_argument("--csv", type=str, help="Ruta opcional para guardar la tabla como CSV")
    parser.add_argument("--reference", type=str, help="CSV de referencia para evaluar la tabla reconstruida")
    parser.add_argument("--report", type=str, help="Ruta opcional para el reporte CSV de la evaluación")
    parser.add_argument("--json", type=str, help="Ruta opcional para las métricas de la evaluación en JSON")

    parser.add_argument("--row-tolerance", type=float, default=DEFAULT_ROW_TOLERANCE_FACTOR,
                        help=f"Tolerancia de fila como múltiplo de la altura media (default: {DEFAULT_ROW_TOLERANCE_FACTOR})")
    parser.add_argument("--col-gap", type=float, default=DEFAULT_COLUMN_GAP_FACTOR,
                        help=f"Separación mínima entre columnas como múltiplo de la altura media (default: {DEFAULT_COLUMN_GAP_FACTOR})")
    parser.add_argument("--min-confidence", type=int, default=DEFAULT_MIN_CONFIDENCE,
                        help="Confianza mínima de palabra (default: 0)")

    parser.add_argument("--lang", type=str, default=DEFAULT_LANG, help=f"Idioma OCR para Tesseract (default: {DEFAULT_LANG})")
    parser.add_argument("--psm", type=int, action="append",
                        help="Modo de layout de Tesseract; repetir para reintentos en orden (default: 6 y luego 4)")
    parser.add_argument("--oem", type=int, default=DEFAULT_OEM, help=f"Motor OCR de Tesseract (default: {DEFAULT_OEM})")

    parser.add_argument("--loglevel", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Nivel de verbosidad del log (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")

    if args.tsv:
        input_path, input_format = args.tsv, "tsv"
    elif args.hocr:
        input_path, input_format = args.hocr, "hocr"
    else:
        input_path, input_format = args.image, "image"
    log.info("ENTRADA: %s (%s)", input_path, input_format)

    try:
        table_config = TableConfig(
            row_tolerance_factor=args.row_tolerance,
            column_gap_factor=args.col_gap,
            min_confidence=args.min_confidence,
        )
        ocr_config = OcrConfig(
            lang=args.lang,
            layout_modes=tuple(args.psm) if args.psm else DEFAULT_LAYOUT_MODES,
            oem=args.oem,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        result = file_to_table(
            input_path,
            input_format=input_format,
            table_config=table_config,
            ocr_config=ocr_config,
            md_path=args.output,
            csv_path=args.csv,
        )
    except FileNotFoundError:
        log.error("Error: No se encontró el archivo de entrada: %s", input_path)
        return EXIT_ERROR
    except Exception as e:
        log.error("Ocurrió un error inesperado: %s", e, exc_info=True)
        return EXIT_ERROR

    if result is None:
        print("No se detectó ninguna tabla.", file=sys.stderr)
        return EXIT_NO_TABLE

    print(result.markdown)

    if args.reference:
        try:
            evaluation = evaluate_grid(result.grid, args.reference)
        except FileNotFoundError:
            log.error("Error: No se encontró el CSV de referencia: %s", args.reference)
            return EXIT_ERROR
        except Exception as e:
            log.error("No se pudo evaluar contra %s: %s", args.reference, e, exc_info=True)
            return EXIT_ERROR
        log.info("Text accuracy: %.4f (%d/%d)", evaluation.text_accuracy, evaluation.matched_cells, evaluation.total_cells)
        log.info("Forma predicha %s, referencia %s", evaluation.predicted_shape, evaluation.reference_shape)
        if args.report:
            write_report(evaluation, args.report)
            log.info("Reporte CSV guardado en %s", args.report)
        if args.json:
            Path(args.json).parent.mkdir(parents=True, exist_ok=True)
            with open(args.json, "w", encoding="utf-8") as fh:
                json.dump(evaluation.to_dict(), fh, indent=2)
            log.info("Reporte JSON guardado en %s", args.json)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
