from __future__ import annotations

import numpy as np
import pytest

from compliance_report.models.config_models import ClassificationConfig
from compliance_report.models.report_models import REPORT_HEADER, Status
from compliance_report.services.report import InputError, ProcessingError, assemble_report


@pytest.fixture()
def config() -> ClassificationConfig:
    return ClassificationConfig.from_iterables(["sanction", "Embargo"], ["RU", "ir", "KP"])


def test_assemble_sample_rows(sample_rows, config: ClassificationConfig):
    report = assemble_report(sample_rows, config)
    assert [r.status for r in report.rows] == [
        Status.HIGH_RISK,
        Status.APRV,
        Status.ZKWD_ZEMB,
        Status.NO_ADD,
        Status.SPL,
    ]
    assert report.skipped_rows == 1
    table = report.to_table()
    assert table[0] == list(REPORT_HEADER)
    assert len(table) == 6
    assert all(len(r) == 21 for r in table)
    # 3 行目: MatchName と Splid を両列から抽出
    assert table[3][6] == "Jane Roe"
    assert table[3][16] == "S-9"


def test_first_row_is_processed_as_data(config: ClassificationConfig, row_factory):
    header_like = ["A", "B", "File name", "Ref No", "", "", "", "", "Customer Name"]
    report = assemble_report([header_like], config)
    assert len(report) == 1
    assert report.rows[0].file_name == "File name"
    assert report.rows[0].status == Status.NO_ADD


def test_row_order_preserved(config: ClassificationConfig, row_factory):
    rows = [row_factory(ref_no=i, city="Berlin") for i in range(10)]
    report = assemble_report(rows, config)
    assert [r.ref_no for r in report.rows] == [str(i) for i in range(10)]


@pytest.mark.parametrize("rows", [[], None])
def test_empty_source_raises(rows, config: ClassificationConfig):
    with pytest.raises(InputError, match="empty"):
        assemble_report(rows, config)


def test_all_blank_rows_raise(config: ClassificationConfig):
    with pytest.raises(InputError, match="no readable content"):
        assemble_report([[None], [], ["  "]], config)


def test_input_error_is_processing_error():
    assert issubclass(InputError, ProcessingError)


def test_on_row_called_once_per_raw_row(sample_rows, config: ClassificationConfig):
    calls = []
    assemble_report(sample_rows, config, on_row=lambda: calls.append(1))
    assert len(calls) == len(sample_rows)


def test_status_counts(sample_rows, config: ClassificationConfig):
    counts = assemble_report(sample_rows, config).status_counts()
    assert set(counts) == set(Status)
    assert counts[Status.HIGH_RISK] == 1
    assert counts[Status.ZKWD] == 0
    assert sum(counts.values()) == 5


def test_config_reused_across_runs(sample_rows, config: ClassificationConfig):
    first = assemble_report(sample_rows, config).to_table()
    second = assemble_report(sample_rows, config).to_table()
    assert first == second
    assert config.approved_codes == frozenset({"RU", "ir", "KP"})


def test_assemble_accepts_array_rows(sample_rows, config: ClassificationConfig):
    rows = [np.array(r, dtype=object) for r in sample_rows]
    report = assemble_report(rows, config)
    assert [r.status for r in report.rows] == [r.status for r in assemble_report(sample_rows, config).rows]
    assert report.skipped_rows == 1
