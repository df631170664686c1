from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ..models.config_models import ClassificationConfig
from ..models.report_models import REPORT_HEADER, Report
from .transformer import transform_row

"""Report assembly service.

Applies transform_row to every raw row in order (the first row included, the
source has no assumed header) and collects the surviving rows under the fixed
21-column header.
"""

__all__ = [
    "InputError",
    "ProcessingError",
    "REPORT_HEADER",
    "assemble_report",
]


class ProcessingError(Exception):
    """Base exception for processing errors."""
    pass


class InputError(ProcessingError):
    """Raised when the source provides no rows or no readable content."""
    pass


def assemble_report(
    raw_rows: Sequence[Sequence[Any] | None] | None,
    config: ClassificationConfig,
    on_row: Callable[[], None] | None = None,
) -> Report:
    """Build the Report for a whole sheet.

    Args:
        raw_rows: All rows of the first sheet, in sheet order
        config: Keyword/code configuration
        on_row: Optional hook called once per raw row (progress display)

    Raises:
        InputError: If there are no rows or every row is blank
    """
    if not raw_rows:
        raise InputError("Excel file is empty")

    report = Report(header=REPORT_HEADER)
    for raw in raw_rows:
        out = transform_row(raw, config)
        if out is None:
            report.skipped_rows += 1
        else:
            report.rows.append(out)
        if on_row is not None:
            on_row()

    if not report.rows:
        raise InputError(f"no readable content: all {len(raw_rows)} rows are blank")
    return report
