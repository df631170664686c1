# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
from typing import Any, Callable

import pandas as pd
import pytest

from compliance_report.excel.cells import SOURCE_COLUMNS
from compliance_report.logging.init import reset_logging

ROW_WIDTH = 27  # A..AA


def build_row(
    file_name: object = None,
    ref_no: object = None,
    customer_name: object = None,
    city: object = None,
    ctr: object = None,
    text_a: object = None,
    text_b: object = None,
    width: int = ROW_WIDTH,
) -> list[object]:
    """Build a raw row with values placed at the fixed source column offsets."""
    row: list[object] = [None] * width
    placements = {
        SOURCE_COLUMNS.file_name: file_name,
        SOURCE_COLUMNS.ref_no: ref_no,
        SOURCE_COLUMNS.customer_name: customer_name,
        SOURCE_COLUMNS.city: city,
        SOURCE_COLUMNS.ctr: ctr,
        SOURCE_COLUMNS.search_text_a: text_a,
        SOURCE_COLUMNS.search_text_b: text_b,
    }
    for idx, val in placements.items():
        if idx < width:
            row[idx] = val
    return row


def write_excel(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=sheet, header=False, index=False)
    return path


@pytest.fixture()
def row_factory() -> Callable[..., list[object]]:
    return build_row


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("COMPLIANCE_REPORT_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """high_risk_keywords:
  - sanction
  - Embargo
approved_codes: [RU, ir, KP]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "report.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_rows() -> list[list[object]]:
    return [
        build_row("a.txt", 1001, "Acme Sanction Partners", "Moscow", "RU", "MatchName=Ivan Petrov|", ""),
        build_row("a.txt", 1002, "Acme Corp", "Moscow", "ru", "", ""),
        build_row("b.txt", 1003, "Globex", "Berlin", "DE", "ZKWD=1|MatchName=Jane Roe|", "ZEMB=1|Splid=S-9|"),
        [None, None, None],
        build_row("b.txt", 1004, "Initech", None, None, "", ""),
        build_row("c.txt", 1005, "Stark Trading", "Osaka", "JP", "DenialType=Export|", ""),
    ]


@pytest.fixture()
def source_workbook(temp_workdir: Path, sample_rows: list[list[object]]) -> Path:
    return write_excel(temp_workdir / "data" / "export.xlsx", {"Sheet1": sample_rows})


@pytest.fixture(autouse=True)
def _clean_logging() -> Any:
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def excel_factory() -> Callable[[Path, dict[str, list[list[object]]]], Path]:
    return write_excel
