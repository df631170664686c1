from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

import pandas as pd

"""Bounds-safe, type-normalizing cell access for raw sheet rows.

Rows come from the reader as plain lists and may be shorter than the widest
row of the sheet. get_cell() never raises: anything missing reads as "".
"""

__all__ = [
    "SourceColumns",
    "SOURCE_COLUMNS",
    "cell_to_str",
    "get_cell",
    "is_blank_row",
]


@dataclass(frozen=True)
class SourceColumns:
    """Fixed 0-based column offsets of the compliance export (C, D, I, L, O, W, AA)."""
    file_name: int = 2
    ref_no: int = 3
    customer_name: int = 8
    city: int = 11
    ctr: int = 14
    search_text_a: int = 22
    search_text_b: int = 26


SOURCE_COLUMNS = SourceColumns()


def _is_missing(value: Any) -> bool:
    if value is None or value is pd.NaT:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def cell_to_str(value: Any) -> str:
    """Render a raw cell value as a trimmed string ("" for blanks)."""
    if _is_missing(value):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        # 空セル混在の整数列は pandas が float 化するため "123.0" -> "123"
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ", timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def get_cell(row: Sequence[Any] | None, index: int) -> str:
    if row is None or index < 0 or index >= len(row):
        return ""
    return cell_to_str(row[index])


def is_blank_row(row: Sequence[Any] | None) -> bool:
    """True when the row has no cells or every cell reads as an empty string."""
    if row is None or len(row) == 0:
        return True
    return all(cell_to_str(v) == "" for v in row)
