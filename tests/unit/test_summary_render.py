from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

from compliance_report.models.processing_result import ProcessingResult
from compliance_report.models.report_models import Status
from compliance_report.services.summary import render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY rows=([0-9]+) written=([0-9]+) skipped_blank=([0-9]+) "
    r"elapsed_sec=([0-9]+\.?[0-9]*) throughput_rps=([0-9]+\.?[0-9]*) "
    r"high_risk=([0-9]+) aprv=([0-9]+) zkwd=([0-9]+) zemb=([0-9]+) "
    r"zkwd_zemb=([0-9]+) no_add=([0-9]+) spl=([0-9]+)$"
)


def _result(elapsed: float, throughput: float, counts: dict[Status, int]) -> ProcessingResult:
    start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
    return ProcessingResult(
        input_path=Path("in.xlsx"),
        output_path=Path("Processed_in.xlsx"),
        total_rows=sum(counts.values()) + 1,
        written_rows=sum(counts.values()),
        skipped_rows=1,
        start_time=start,
        end_time=start,
        elapsed_seconds=elapsed,
        throughput_rows_per_sec=throughput,
        status_counts=counts,
    )


def test_render_summary_line_counts():
    counts = {Status.HIGH_RISK: 2, Status.APRV: 1, Status.ZKWD_ZEMB: 3, Status.SPL: 4}
    line = render_summary_line(_result(2.0, 5.0, counts))

    m = SUMMARY_PATTERN.match(line)
    assert m, f"SUMMARY line should match regex: {line}"
    assert m.group(1) == "11"
    assert m.group(2) == "10"
    assert m.group(3) == "1"
    assert m.group(4) == "2"
    assert m.group(5) == "5"
    assert m.group(6) == "2"
    assert m.group(7) == "1"
    assert m.group(8) == "0"  # zkwd missing -> 0
    assert m.group(10) == "3"
    assert m.group(12) == "4"


def test_render_summary_line_fractional_numbers():
    line = render_summary_line(_result(1.23456, 4860.127, {Status.SPL: 6}))
    assert "elapsed_sec=1.23 " in line
    assert "throughput_rps=4860.13 " in line
    assert SUMMARY_PATTERN.match(line)


def test_render_summary_line_tiny_elapsed():
    line = render_summary_line(_result(0.000123, 0.0, {}))
    assert "elapsed_sec=0.000123 " in line
    assert "throughput_rps=0 " in line
