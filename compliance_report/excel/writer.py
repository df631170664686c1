from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pandas as pd

from ..models.report_models import Report

"""Excel writer for the processed report (single sheet "Processed Report").

Every output cell is text. openpyxl treats a string starting with "=" as a
formula, so such cells are re-typed as plain strings before saving.
"""

__all__ = [
    "REPORT_SHEET_NAME",
    "write_report",
    "save_report",
]

REPORT_SHEET_NAME = "Processed Report"
FORMULA_PREFIX = "="


def _to_frame(report: Report) -> pd.DataFrame:
    return pd.DataFrame([r.as_list() for r in report.rows], columns=list(report.header), dtype=object)


def _keep_as_text(worksheet) -> None:
    for row in worksheet.iter_rows():
        for cell in row:
            if isinstance(cell.value, str) and cell.value.startswith(FORMULA_PREFIX):
                cell.data_type = "s"


def write_report(report: Report) -> bytes:
    """Serialize the report into an xlsx workbook and return its bytes."""
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        _to_frame(report).to_excel(writer, sheet_name=REPORT_SHEET_NAME, index=False)
        _keep_as_text(writer.sheets[REPORT_SHEET_NAME])
    return buffer.getvalue()


def save_report(report: Report, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(write_report(report))
    return path
