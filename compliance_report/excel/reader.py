from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from ..services.report import InputError

"""Excel reader for the compliance export.

Only the first sheet is read, without a header row: the fixed column offsets
are a contract of the input format, so every row (the first one included) is
handed to the report builder as a plain list of cell values.
"""

__all__ = [
    "read_first_sheet",
    "read_sheet_names",
]


def read_sheet_names(path: Path) -> list[str]:
    with pd.ExcelFile(path) as xls:
        return [str(n) for n in xls.sheet_names]


def _trim_trailing_blanks(values: list[Any]) -> list[Any]:
    end = len(values)
    while end > 0 and (values[end - 1] is None or (isinstance(values[end - 1], str) and values[end - 1] == "")):
        end -= 1
    return values[:end]


def read_first_sheet(path: Path) -> list[list[Any]]:
    """Read the first sheet of ``path`` as a list of raw rows.

    Parameters
    ----------
    path: Excel ファイルパス (.xlsx / .xls / .ods は pandas の engine 次第)

    Literal strings such as "NA" or "NULL" are kept as text (pandas would
    otherwise turn them into NaN) and numeric-looking text such as "00123"
    is not converted to a number. Blank cells become None and trailing blank
    cells are dropped so that rows stay sparse.

    Raises
    ------
    InputError: the workbook contains no sheet
    """
    with pd.ExcelFile(path) as xls:
        if not xls.sheet_names:
            raise InputError(f"no readable sheet in {Path(path).name}")
        first = xls.sheet_names[0]
        df = xls.parse(first, header=None, dtype=object, keep_default_na=False, na_values=[""])

    # NaN -> None に統一 (object 化してから置換)
    df = df.astype(object).where(pd.notna(df), None)
    return [_trim_trailing_blanks(list(r)) for r in df.itertuples(index=False, name=None)]
