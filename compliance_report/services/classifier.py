from __future__ import annotations

from collections.abc import Iterable

from ..models.config_models import ClassificationConfig
from ..models.report_models import Status

"""Status classification service.

Rules are evaluated in priority order and the first hit wins:

1. High Risk   - a configured keyword occurs in the customer name
2. APRV        - the CTR code equals a configured approved code
3. ZKWD / ZEMB - marker tokens in the free-text columns (both -> "ZKWD & ZEMB")
4. No add      - city and CTR are both blank
5. SPL         - fallback

classify() is total: it never raises and always returns exactly one Status.
"""

__all__ = [
    "ZKWD_MARKER",
    "ZEMB_MARKER",
    "normalize",
    "classify",
]

ZKWD_MARKER = "ZKWD"
ZEMB_MARKER = "ZEMB"


def normalize(value: str | None) -> str:
    """Single case-folding policy shared by every case-insensitive comparison."""
    if not value:
        return ""
    return value.strip().casefold()


def _normalized_terms(values: Iterable[str]) -> list[str]:
    return [t for t in (normalize(v) for v in values) if t]


def is_high_risk(customer_name: str, config: ClassificationConfig) -> bool:
    name = normalize(customer_name)
    if not name:
        return False
    return any(kw in name for kw in _normalized_terms(config.high_risk_keywords))


def is_approved(ctr_code: str, config: ClassificationConfig) -> bool:
    code = normalize(ctr_code)
    if not code:
        return False
    return code in _normalized_terms(config.approved_codes)


def marker_status(search_text_a: str, search_text_b: str) -> Status | None:
    combined = normalize(f"{search_text_a} {search_text_b}")
    has_zkwd = normalize(ZKWD_MARKER) in combined
    has_zemb = normalize(ZEMB_MARKER) in combined
    if has_zkwd and has_zemb:
        return Status.ZKWD_ZEMB
    if has_zkwd:
        return Status.ZKWD
    if has_zemb:
        return Status.ZEMB
    return None


def classify(
    customer_name: str,
    ctr_code: str,
    city: str,
    search_text_a: str,
    search_text_b: str,
    config: ClassificationConfig,
) -> Status:
    if is_high_risk(customer_name, config):
        return Status.HIGH_RISK
    if is_approved(ctr_code, config):
        return Status.APRV
    marker = marker_status(search_text_a, search_text_b)
    if marker is not None:
        return marker
    if (city or "").strip() == "" and (ctr_code or "").strip() == "":
        return Status.NO_ADD
    return Status.SPL
