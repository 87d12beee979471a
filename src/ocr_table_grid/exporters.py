# src/ocr_table_grid/exporters.py
from __future__ import annotations
from pathlib import Path
from typing import List, Sequence
import csv

from .structures import TableGrid

def _pipe_line(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"

def render_markdown(grid: TableGrid) -> str:
    """
    Serializa la rejilla como tabla markdown:
      | cab1 | cab2 |
      | --- | --- |
      | a | b |
    La fila 0 es la cabecera. Una tabla de una sola fila repite esa fila como
    cuerpo ("| A |", "| --- |", "| A |").
    """
    if not grid.rows or not grid.n_cols:
        raise ValueError("render_markdown requiere al menos una fila y una columna.")

    body = grid.body or [grid.header]
    lines: List[str] = [_pipe_line(grid.header), _pipe_line(["---"] * grid.n_cols)]
    lines.extend(_pipe_line(row) for row in body)
    return "\n".join(lines).rstrip()

def rows_to_csv(rows: List[List[str]], header: List[str], csv_path: str) -> None:
    Path(csv_path).parent.mkdir(parents=True, exist_ok=True)
    with open(csv_path, "w", encoding="utf-8-sig", newline="") as f:
        w = csv.writer(f)
        if header:
            w.writerow(header)
        w.writerows(rows)

def write_markdown(markdown: str, md_path: str) -> None:
    Path(md_path).parent.mkdir(parents=True, exist_ok=True)
    with open(md_path, "w", encoding="utf-8") as f:
        f.write(markdown + "\n")
