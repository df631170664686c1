from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .report_models import Status

"""Processing result model for the compliance report builder.

Aggregates the metrics needed for the SUMMARY output line of a single run.
"""


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of processing one source workbook."""
    input_path: Path  # 入力ファイル
    output_path: Path | None  # 出力ファイル (inspect 等で未出力なら None)
    total_rows: int  # 読み込んだ全行数 (空行含む)
    written_rows: int  # レポートに出力した行数
    skipped_rows: int  # 空行スキップ数
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_rows_per_sec: float  # total_rows / elapsed
    status_counts: dict[Status, int] = field(default_factory=dict)
