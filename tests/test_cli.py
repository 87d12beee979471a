"""Tests for the command-line entry point and the file/image orchestration."""

import csv
import json

import pytest
from conftest import PEOPLE_TABLE, TSV_HEADER

from ocr_table_grid import ocr_utils
from ocr_table_grid.cli import EXIT_ERROR, EXIT_NO_TABLE, EXIT_OK, main
from ocr_table_grid.config import OcrConfig
from ocr_table_grid.main import file_to_table


@pytest.fixture
def tsv_file(tmp_path, people_tsv):
    p = tmp_path / "words.tsv"
    p.write_text(people_tsv, encoding="utf-8")
    return p


@pytest.fixture
def fake_tesseract(monkeypatch, people_tsv):
    """Recognizer stub: psm 6 finds nothing, any other mode returns the people table."""
    calls = []

    def _run(image_path, *, lang="eng", psm=6, oem=3):
        calls.append((image_path, lang, psm, oem))
        return TSV_HEADER + "\n" if psm == 6 else people_tsv

    monkeypatch.setattr(ocr_utils, "run_tesseract_tsv", _run)
    return calls


class TestCli:
    def test_tsv_to_stdout(self, tsv_file, capsys):
        assert main(["--tsv", str(tsv_file)]) == EXIT_OK
        assert capsys.readouterr().out.strip() == PEOPLE_TABLE

    def test_writes_markdown_and_csv(self, tsv_file, tmp_path):
        md = tmp_path / "out" / "table.md"
        out_csv = tmp_path / "out" / "table.csv"
        assert main(["--tsv", str(tsv_file), "--output", str(md), "--csv", str(out_csv)]) == EXIT_OK
        assert md.read_text(encoding="utf-8").strip() == PEOPLE_TABLE
        with open(out_csv, encoding="utf-8-sig", newline="") as fh:
            assert list(csv.reader(fh)) == [["Name", "Age"], ["Alice", "30"], ["Bob", "25"]]

    def test_no_table_exit_code(self, tmp_path, capsys):
        p = tmp_path / "empty.tsv"
        p.write_text(TSV_HEADER + "\n", encoding="utf-8")
        assert main(["--tsv", str(p)]) == EXIT_NO_TABLE
        assert capsys.readouterr().out == ""

    def test_missing_input(self, tmp_path):
        assert main(["--tsv", str(tmp_path / "nope.tsv")]) == EXIT_ERROR

    def test_invalid_factor_is_usage_error(self, tsv_file):
        with pytest.raises(SystemExit) as exc:
            main(["--tsv", str(tsv_file), "--row-tolerance", "-1"])
        assert exc.value.code == 2

    def test_nan_factor_is_usage_error(self, tsv_file):
        with pytest.raises(SystemExit) as exc:
            main(["--tsv", str(tsv_file), "--row-tolerance", "nan"])
        assert exc.value.code == 2

    def test_requires_one_input(self):
        with pytest.raises(SystemExit):
            main([])

    def test_reference_evaluation(self, tsv_file, tmp_path):
        ref = tmp_path / "ref.csv"
        ref.write_text("Name,Age\nAlice,30\nBob,25\n", encoding="utf-8")
        report = tmp_path / "report.csv"
        metrics = tmp_path / "metrics.json"
        rc = main(["--tsv", str(tsv_file), "--reference", str(ref), "--report", str(report), "--json", str(metrics)])
        assert rc == EXIT_OK
        assert report.exists()
        data = json.loads(metrics.read_text(encoding="utf-8"))
        assert data["text_accuracy"] == 1.0
        assert data["shape_match"] is True

    def test_missing_reference(self, tsv_file, tmp_path):
        assert main(["--tsv", str(tsv_file), "--reference", str(tmp_path / "nope.csv")]) == EXIT_ERROR

    @pytest.mark.parametrize("content", ["", "Name\nAlice,30\n"], ids=["empty", "ragged"])
    def test_unreadable_reference(self, tsv_file, tmp_path, capsys, content):
        """A reference CSV pandas cannot read is an error exit, not a traceback."""
        ref = tmp_path / "ref.csv"
        ref.write_text(content, encoding="utf-8")
        assert main(["--tsv", str(tsv_file), "--reference", str(ref)]) == EXIT_ERROR
        assert capsys.readouterr().out.strip() == PEOPLE_TABLE

    def test_image_retries_layout_modes(self, fake_tesseract, capsys):
        assert main(["--image", "scan.png", "--lang", "eng+tur"]) == EXIT_OK
        assert [c[2] for c in fake_tesseract] == [6, 4]
        assert all(c[1] == "eng+tur" for c in fake_tesseract)
        assert capsys.readouterr().out.strip() == PEOPLE_TABLE

    def test_image_custom_psm_order(self, fake_tesseract):
        assert main(["--image", "scan.png", "--psm", "6", "--psm", "11", "--psm", "4"]) == EXIT_OK
        assert [c[2] for c in fake_tesseract] == [6, 11]


class TestFileToTable:
    def test_unknown_format(self, tsv_file):
        with pytest.raises(ValueError):
            file_to_table(str(tsv_file), input_format="pdf")

    def test_image_no_table_in_any_mode(self, monkeypatch):
        monkeypatch.setattr(ocr_utils, "run_tesseract_tsv", lambda *a, **k: TSV_HEADER + "\n")
        result = file_to_table("scan.png", input_format="image", ocr_config=OcrConfig(layout_modes=(6, 4, 3)))
        assert result is None

    def test_hocr_input(self, tmp_path):
        from test_parser import HOCR_DOC

        p = tmp_path / "page.hocr"
        p.write_text(HOCR_DOC, encoding="utf-8")
        result = file_to_table(str(p), input_format="hocr")
        assert result.markdown == "| Name | Age |\n| --- | --- |\n| Alice | 30 |"
