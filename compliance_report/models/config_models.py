from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

"""Classification configuration dataclass for the compliance report builder.

The configuration is read-only for the duration of a run. Keywords and codes are
stored as entered (trimmed only); case folding happens at comparison time in
services.classifier so that every rule uses the same normalization.
"""

__all__ = [
    "ClassificationConfig",
    "DEFAULT_HIGH_RISK_KEYWORDS",
    "DEFAULT_APPROVED_CODES",
]

DEFAULT_HIGH_RISK_KEYWORDS: tuple[str, ...] = ("SANCTION", "EMBARGO", "DENIED")
DEFAULT_APPROVED_CODES: tuple[str, ...] = ("RU", "UA", "NI", "VE", "BY", "CU", "IR", "KP", "SY")


def _clean(values: Iterable[object] | None) -> frozenset[str]:
    # 空文字・空白のみは登録しない (重複は frozenset で除去)
    if not values:
        return frozenset()
    return frozenset(s for s in (str(v).strip() for v in values if v is not None) if s)


@dataclass(frozen=True)
class ClassificationConfig:
    """Keyword and code sets consulted by the status classifier.

    high_risk_keywords: substrings searched for in the customer name
    approved_codes: country/territory codes compared exactly against the CTR cell
    """
    high_risk_keywords: frozenset[str] = frozenset()
    approved_codes: frozenset[str] = frozenset()

    @staticmethod
    def from_iterables(
        high_risk_keywords: Iterable[object] | None = None,
        approved_codes: Iterable[object] | None = None,
    ) -> ClassificationConfig:
        return ClassificationConfig(
            high_risk_keywords=_clean(high_risk_keywords),
            approved_codes=_clean(approved_codes),
        )

    @staticmethod
    def defaults() -> ClassificationConfig:
        return ClassificationConfig.from_iterables(DEFAULT_HIGH_RISK_KEYWORDS, DEFAULT_APPROVED_CODES)

    def extended(
        self,
        high_risk_keywords: Iterable[object] | None = None,
        approved_codes: Iterable[object] | None = None,
    ) -> ClassificationConfig:
        """Return a new config with extra keywords/codes added (self is untouched)."""
        return ClassificationConfig(
            high_risk_keywords=self.high_risk_keywords | _clean(high_risk_keywords),
            approved_codes=self.approved_codes | _clean(approved_codes),
        )
