# run.py
from __future__ import annotations
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent / "src"))
from importlib import import_module
cli_main = import_module("ocr_table_grid.cli").main

if __name__ == "__main__":
    sys.exit(cli_main())
