"""Tests for grid-vs-reference evaluation."""

import csv

from ocr_table_grid.evaluation import evaluate_grid, write_report
from ocr_table_grid.exporters import rows_to_csv
from ocr_table_grid.structures import TableGrid


def write_csv(path, rows):
    with open(path, "w", encoding="utf-8", newline="") as fh:
        csv.writer(fh).writerows(rows)


GRID = TableGrid(rows=[["Name", "Age"], ["Alice", "30"], ["Bob", "25"]])


class TestEvaluateGrid:
    def test_perfect_roundtrip_through_exported_csv(self, tmp_path):
        ref = tmp_path / "ref.csv"
        rows_to_csv(GRID.body, GRID.header, str(ref))
        ev = evaluate_grid(GRID, str(ref))
        assert ev.text_accuracy == 1.0
        assert ev.shape_match

    def test_one_wrong_cell(self, tmp_path):
        ref = tmp_path / "ref.csv"
        write_csv(ref, [["Name", "Age"], ["Alice", "30"], ["Bob", "26"]])
        ev = evaluate_grid(GRID, str(ref))
        assert ev.matched_cells == 5
        assert ev.total_cells == 6

    def test_shape_mismatch_padded(self, tmp_path):
        ref = tmp_path / "ref.csv"
        write_csv(ref, [["Name", "Age", "City"], ["Alice", "30", "Lima"], ["Bob", "25", ""], ["Eve", "41", ""]])
        ev = evaluate_grid(GRID, str(ref))
        assert ev.predicted_shape == (3, 2)
        assert ev.reference_shape == (4, 3)
        assert not ev.shape_match
        assert ev.total_cells == 12
        # 6 shared cells + 2 empty "City" cells that the padded prediction also leaves empty
        assert ev.matched_cells == 8

    def test_write_report(self, tmp_path):
        ref = tmp_path / "ref.csv"
        rows_to_csv(GRID.body, GRID.header, str(ref))
        out = tmp_path / "reports" / "eval.csv"
        write_report(evaluate_grid(GRID, str(ref)), str(out))
        with open(out, encoding="utf-8", newline="") as fh:
            rows = list(csv.reader(fh))
        assert rows[0] == ["Metric", "Value"]
        assert ["text_accuracy", "1.0000"] in rows
        assert ["shape_match", "True"] in rows
