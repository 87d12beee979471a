"""Shared test fixtures: TSV builders in the recognizer's per-word layout."""

import pytest

from ocr_table_grid.structures import WordToken

TSV_HEADER = "level\tpage_num\tblock_num\tpar_num\tline_num\tword_num\tleft\ttop\twidth\theight\tconf\ttext"


def tsv_line(text, left, top, height=12, conf="95.5", block=1, line=1, width=30, level=5):
    """One TSV row; numeric fields may be given as strings to simulate garbage."""
    return "\t".join(str(v) for v in [level, 1, block, 1, line, 1, left, top, width, height, conf, text])


def make_tsv(lines):
    return "\n".join([TSV_HEADER, *lines]) + "\n"


def word(text, left, top, height=10, confidence=90):
    return WordToken(text=text, left=left, top=top, height=height, confidence=confidence)


@pytest.fixture
def people_tsv():
    """Three-row, two-column table as emitted by the recognizer, with layout-level noise."""
    return make_tsv([
        "1\t1\t0\t0\t0\t0\t0\t0\t640\t480\t-1\t",
        "2\t1\t1\t0\t0\t0\t10\t5\t230\t82\t-1\t",
        tsv_line("Name", 10, 5),
        tsv_line("Age", 200, 5),
        tsv_line("Alice", 10, 40, line=2),
        tsv_line("30", 200, 40, line=2),
        tsv_line("Bob", 10, 75, line=3),
        tsv_line("25", 200, 75, line=3),
    ])


PEOPLE_TABLE = "| Name | Age |\n| --- | --- |\n| Alice | 30 |\n| Bob | 25 |"
