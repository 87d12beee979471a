from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

import pandas as pd

from .structures import TableGrid


@dataclass
class GridEvaluation:
    text_accuracy: float
    total_cells: int
    matched_cells: int
    predicted_shape: Tuple[int, int]
    reference_shape: Tuple[int, int]

    @property
    def shape_match(self) -> bool:
        return self.predicted_shape == self.reference_shape

    def to_dict(self) -> Dict[str, object]:
        return {
            "text_accuracy": self.text_accuracy,
            "total_cells": self.total_cells,
            "matched_cells": self.matched_cells,
            "predicted_shape": list(self.predicted_shape),
            "reference_shape": list(self.reference_shape),
            "shape_match": self.shape_match,
        }


def _read_csv(path: str) -> pd.DataFrame:
    # sin cabecera: la fila 0 de la rejilla se compara como una fila más
    df = pd.read_csv(path, dtype=str, keep_default_na=False, header=None, encoding="utf-8-sig")
    # normalizar espacios
    df = df.map(lambda x: (x or "").strip())
    return df


def _pad(df: pd.DataFrame, n_rows: int, n_cols: int) -> pd.DataFrame:
    df = df.copy()
    df.columns = range(df.shape[1])
    for j in range(df.shape[1], n_cols):
        df[j] = ""
    if len(df) < n_rows:
        padding = pd.DataFrame([[""] * n_cols] * (n_rows - len(df)), columns=df.columns)
        df = pd.concat([df, padding], ignore_index=True)
    return df


def evaluate_grid(grid: TableGrid, reference_csv: str) -> GridEvaluation:
    """
    Compara celda a celda la rejilla reconstruida con un CSV de referencia.
    Ambas se rellenan con celdas vacías hasta la misma forma antes de comparar.
    """
    df_ref = _read_csv(reference_csv)
    df_pred = pd.DataFrame(grid.rows, dtype=str).map(lambda x: (x or "").strip())

    predicted_shape = (int(df_pred.shape[0]), int(df_pred.shape[1]))
    reference_shape = (int(df_ref.shape[0]), int(df_ref.shape[1]))

    n_rows = max(predicted_shape[0], reference_shape[0])
    n_cols = max(predicted_shape[1], reference_shape[1])
    df_ref = _pad(df_ref, n_rows, n_cols)
    df_pred = _pad(df_pred, n_rows, n_cols)

    total_cells = n_rows * n_cols
    matches = int((df_ref.values == df_pred.values).sum())
    text_accuracy = matches / total_cells if total_cells else 0.0

    return GridEvaluation(
        text_accuracy=text_accuracy,
        total_cells=total_cells,
        matched_cells=matches,
        predicted_shape=predicted_shape,
        reference_shape=reference_shape,
    )


def write_report(evaluation: GridEvaluation, output_path: str) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(["Metric", "Value"])
        writer.writerow(["text_accuracy", f"{evaluation.text_accuracy:.4f}"])
        writer.writerow(["matched_cells", evaluation.matched_cells])
        writer.writerow(["total_cells", evaluation.total_cells])
        writer.writerow(["predicted_shape", "x".join(map(str, evaluation.predicted_shape))])
        writer.writerow(["reference_shape", "x".join(map(str, evaluation.reference_shape))])
        writer.writerow(["shape_match", evaluation.shape_match])
