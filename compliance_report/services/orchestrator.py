from __future__ import annotations

import logging
import zipfile
from datetime import UTC, datetime
from pathlib import Path

from ..excel.reader import read_first_sheet
from ..excel.writer import save_report
from ..models.config_models import ClassificationConfig
from ..models.processing_result import ProcessingResult
from .progress import ProgressTracker
from .report import InputError, ProcessingError, assemble_report

"""Service orchestration for the compliance report builder.

Coordinates a single run: read the first sheet of the source workbook,
assemble the report in memory, then write the processed workbook. Nothing is
written unless the whole report was built successfully.
"""

__all__ = [
    "ProcessingError",
    "InputError",
    "default_output_path",
    "process_file",
]

logger = logging.getLogger(__name__)

OUTPUT_PREFIX = "Processed_"


def default_output_path(input_path: Path) -> Path:
    """``Processed_<name>.xlsx`` next to the input file."""
    return input_path.with_name(f"{OUTPUT_PREFIX}{input_path.stem}.xlsx")


def _read_source(input_path: Path) -> list[list[object]]:
    if not input_path.exists():
        raise ProcessingError(f"input file not found: {input_path}")
    if not input_path.is_file():
        raise ProcessingError(f"input path is not a file: {input_path}")
    try:
        return read_first_sheet(input_path)
    except InputError:
        raise
    except (ValueError, OSError, KeyError, ImportError, zipfile.BadZipFile) as e:
        # 破損ファイル・非対応フォーマット (pandas/openpyxl は ValueError 系を送出)
        raise ProcessingError(f"failed to read {input_path.name}: {e}") from e


def process_file(
    input_path: Path,
    config: ClassificationConfig,
    output_path: Path | None = None,
) -> ProcessingResult:
    """Process one compliance export into a processed report workbook.

    Args:
        input_path: Source workbook (first sheet is used)
        config: Keyword/code configuration for classification
        output_path: Destination; defaults to default_output_path(input_path)

    Returns:
        ProcessingResult with row counts, status counts and timing

    Raises:
        InputError: The workbook has no sheet, no rows, or only blank rows
        ProcessingError: The input cannot be read or the output cannot be written
    """
    start_time = datetime.now(UTC)
    input_path = Path(input_path)
    target = Path(output_path) if output_path is not None else default_output_path(input_path)

    raw_rows = _read_source(input_path)
    logger.info(f"Read {len(raw_rows)} rows from {input_path.name}")

    with ProgressTracker(len(raw_rows)) as tracker:
        report = assemble_report(raw_rows, config, on_row=tracker.advance)
        tracker.set_postfix(written=len(report))

    try:
        save_report(report, target)
    except OSError as e:
        raise ProcessingError(f"failed to write {target}: {e}") from e
    logger.info(f"Wrote {len(report)} rows to {target}")

    end_time = datetime.now(UTC)
    elapsed = (end_time - start_time).total_seconds()
    throughput = len(raw_rows) / elapsed if elapsed > 0 else 0.0

    return ProcessingResult(
        input_path=input_path,
        output_path=target,
        total_rows=len(raw_rows),
        written_rows=len(report),
        skipped_rows=report.skipped_rows,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed,
        throughput_rows_per_sec=throughput,
        status_counts=report.status_counts(),
    )
