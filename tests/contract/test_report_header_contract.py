from __future__ import annotations

from compliance_report.models.report_models import REPORT_HEADER, Status

"""Output header contract: fixed 21 labels in fixed order."""

EXPECTED_HEADER = [
    "Status", "File name", "Ref No", "Customer Name", "City", "CTR",
    "RPL 1", "RPL 2", "RPL 3", "RPL 4", "RPL 5",
    "Denial Type 1", "Denial Type 2", "Denial Type 3", "Denial Type 4", "Denial Type 5",
    "Splid 1", "Splid 2", "Splid 3", "Splid 4", "Splid 5",
]


def test_report_header_exact():
    assert list(REPORT_HEADER) == EXPECTED_HEADER
    assert len(REPORT_HEADER) == 21


def test_status_enumeration_is_closed():
    assert {s.value for s in Status} == {
        "High Risk", "APRV", "ZKWD", "ZEMB", "ZKWD & ZEMB", "No add", "SPL",
    }
