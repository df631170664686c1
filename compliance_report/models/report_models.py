from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

"""Report domain models: Status enum, ExtractedFields, OutputRow, Report.

Every OutputRow is fixed width (21 string fields). Extraction slots are always
padded to SLOTS_PER_FIELD entries with empty strings, never omitted.
"""

__all__ = [
    "Status",
    "ExtractedFields",
    "OutputRow",
    "Report",
    "SLOTS_PER_FIELD",
    "REPORT_HEADER",
]

SLOTS_PER_FIELD = 5

REPORT_HEADER: tuple[str, ...] = (
    "Status",
    "File name",
    "Ref No",
    "Customer Name",
    "City",
    "CTR",
    *(f"RPL {i}" for i in range(1, SLOTS_PER_FIELD + 1)),
    *(f"Denial Type {i}" for i in range(1, SLOTS_PER_FIELD + 1)),
    *(f"Splid {i}" for i in range(1, SLOTS_PER_FIELD + 1)),
)


class Status(Enum):
    """Compliance status assigned to each row (exactly one per row).

    Members are listed in rule priority order; SPL is the fallback.
    """
    HIGH_RISK = "High Risk"
    APRV = "APRV"
    ZKWD = "ZKWD"
    ZEMB = "ZEMB"
    ZKWD_ZEMB = "ZKWD & ZEMB"
    NO_ADD = "No add"
    SPL = "SPL"

    def __str__(self) -> str:
        return self.value


def _slots(values: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    kept = tuple(values[:SLOTS_PER_FIELD])
    return kept + ("",) * (SLOTS_PER_FIELD - len(kept))


@dataclass(frozen=True)
class ExtractedFields:
    """Values pulled out of the inline key=value| text, each capped at 5 entries."""
    match_names: tuple[str, ...] = ()
    denial_types: tuple[str, ...] = ()
    split_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # frozen なので object.__setattr__ で切り詰め
        object.__setattr__(self, "match_names", tuple(self.match_names[:SLOTS_PER_FIELD]))
        object.__setattr__(self, "denial_types", tuple(self.denial_types[:SLOTS_PER_FIELD]))
        object.__setattr__(self, "split_ids", tuple(self.split_ids[:SLOTS_PER_FIELD]))


@dataclass(frozen=True)
class OutputRow:
    """One row of the processed report, in REPORT_HEADER order."""
    status: Status
    file_name: str
    ref_no: str
    customer_name: str
    city: str
    ctr: str
    fields: ExtractedFields = field(default_factory=ExtractedFields)

    def as_list(self) -> list[str]:
        return [
            self.status.value,
            self.file_name,
            self.ref_no,
            self.customer_name,
            self.city,
            self.ctr,
            *_slots(self.fields.match_names),
            *_slots(self.fields.denial_types),
            *_slots(self.fields.split_ids),
        ]


@dataclass
class Report:
    """Header plus ordered output rows for one run."""
    rows: list[OutputRow] = field(default_factory=list)
    skipped_rows: int = 0  # 空行としてスキップした件数
    header: tuple[str, ...] = REPORT_HEADER

    def __len__(self) -> int:
        return len(self.rows)

    def to_table(self) -> list[list[str]]:
        return [list(self.header)] + [r.as_list() for r in self.rows]

    def status_counts(self) -> dict[Status, int]:
        counts = Counter(r.status for r in self.rows)
        return {s: counts.get(s, 0) for s in Status}
