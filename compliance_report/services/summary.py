from __future__ import annotations

from ..models.processing_result import ProcessingResult
from ..models.report_models import Status

"""Summary line rendering service.

Format:
SUMMARY rows={total} written={written} skipped_blank={skipped} elapsed_sec={elapsed}
throughput_rps={throughput} high_risk=.. aprv=.. zkwd=.. zemb=.. zkwd_zemb=.. no_add=.. spl=..
"""

STATUS_KEYS: dict[Status, str] = {
    Status.HIGH_RISK: "high_risk",
    Status.APRV: "aprv",
    Status.ZKWD: "zkwd",
    Status.ZEMB: "zemb",
    Status.ZKWD_ZEMB: "zkwd_zemb",
    Status.NO_ADD: "no_add",
    Status.SPL: "spl",
}


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Format very small numbers to avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.2f}".rstrip("0").rstrip(".")


def render_summary_line(result: ProcessingResult) -> str:
    """Render a SUMMARY line from a ProcessingResult.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     input_path=Path("in.xlsx"), output_path=Path("out.xlsx"),
        ...     total_rows=10, written_rows=9, skipped_rows=1,
        ...     start_time=start, end_time=end,
        ...     elapsed_seconds=2.0, throughput_rows_per_sec=5.0,
        ...     status_counts={Status.SPL: 9},
        ... )
        >>> render_summary_line(result)  # doctest: +ELLIPSIS
        'SUMMARY rows=10 written=9 skipped_blank=1 elapsed_sec=2 throughput_rps=5 high_risk=0 ... spl=9'
    """
    counts = " ".join(
        f"{key}={result.status_counts.get(status, 0)}" for status, key in STATUS_KEYS.items()
    )
    return (
        f"SUMMARY rows={result.total_rows} "
        f"written={result.written_rows} "
        f"skipped_blank={result.skipped_rows} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_rps={_format_number(result.throughput_rows_per_sec)} "
        f"{counts}"
    )
