"""Tests for configuration defaults and validation."""

import pytest

from ocr_table_grid.config import DEFAULT_LAYOUT_MODES, OcrConfig, TableConfig


class TestTableConfig:
    def test_defaults(self):
        cfg = TableConfig()
        assert cfg.row_tolerance_factor == 0.6
        assert cfg.column_gap_factor == 1.5
        assert cfg.min_confidence == 0

    @pytest.mark.parametrize("kwargs", [
        {"row_tolerance_factor": -0.1},
        {"column_gap_factor": -1},
        {"min_confidence": -5},
        {"row_tolerance_factor": float("nan")},
        {"column_gap_factor": float("inf")},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            TableConfig(**kwargs)

    def test_zero_factors_allowed(self):
        cfg = TableConfig(row_tolerance_factor=0, column_gap_factor=0)
        assert cfg.row_tolerance_factor == 0

    def test_frozen(self):
        with pytest.raises(Exception):
            TableConfig().row_tolerance_factor = 1.0


class TestOcrConfig:
    def test_defaults(self):
        cfg = OcrConfig()
        assert cfg.lang == "eng"
        assert cfg.layout_modes == DEFAULT_LAYOUT_MODES == (6, 4)

    def test_empty_layout_modes(self):
        with pytest.raises(ValueError):
            OcrConfig(layout_modes=())

    def test_empty_lang(self):
        with pytest.raises(ValueError):
            OcrConfig(lang="")
