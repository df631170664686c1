from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..excel.cells import SOURCE_COLUMNS, SourceColumns, get_cell, is_blank_row
from ..models.config_models import ClassificationConfig
from ..models.report_models import OutputRow
from .classifier import classify
from .extractor import build_search_text, extract_fields

"""Row transformation service.

Turns one raw sheet row into one OutputRow: reads the fixed columns, assigns
the status and extracts the inline fields. Blank rows yield None.
"""

__all__ = [
    "transform_row",
]

logger = logging.getLogger(__name__)


def transform_row(
    raw_row: Sequence[Any] | None,
    config: ClassificationConfig,
    columns: SourceColumns = SOURCE_COLUMNS,
) -> OutputRow | None:
    """Transform a raw row into an OutputRow, or None when the row is blank.

    Args:
        raw_row: Cell values of one source row (may be shorter than the sheet)
        config: Keyword/code configuration for classification
        columns: Fixed column offsets of the source format

    Returns:
        OutputRow with every extraction slot present, or None for a blank row
    """
    if is_blank_row(raw_row):
        return None

    file_name = get_cell(raw_row, columns.file_name)
    ref_no = get_cell(raw_row, columns.ref_no)
    customer_name = get_cell(raw_row, columns.customer_name)
    city = get_cell(raw_row, columns.city)
    ctr = get_cell(raw_row, columns.ctr)
    text_a = get_cell(raw_row, columns.search_text_a)
    text_b = get_cell(raw_row, columns.search_text_b)

    status = classify(customer_name, ctr, city, text_a, text_b, config)
    fields = extract_fields(build_search_text(text_a, text_b))
    logger.debug(f"row ref={ref_no!r} status={status.value} matches={len(fields.match_names)}")

    return OutputRow(
        status=status,
        file_name=file_name,
        ref_no=ref_no,
        customer_name=customer_name,
        city=city,
        ctr=ctr,
        fields=fields,
    )
