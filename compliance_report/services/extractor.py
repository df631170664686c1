from __future__ import annotations

import re
from functools import lru_cache

from ..models.report_models import ExtractedFields

"""Inline field extraction for the key=value| mini-language.

The two free-text columns of the export embed structured data such as
``MatchName=John Doe|DenialType=Fraud|``. Values cannot contain ``|`` (there is
no escaping), keys are matched case-insensitively.
"""

__all__ = [
    "MATCH_NAME_KEY",
    "DENIAL_TYPE_KEY",
    "SPLIT_ID_KEY",
    "FIELD_DELIMITER",
    "build_search_text",
    "extract_values",
    "extract_fields",
]

MATCH_NAME_KEY = "matchname"
DENIAL_TYPE_KEY = "denialtype"
SPLIT_ID_KEY = "splid"

FIELD_DELIMITER = "|"


@lru_cache(maxsize=32)
def _pattern_for(key: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(key)}=([^|]*)\|", re.IGNORECASE)


def extract_values(text: str, key: str) -> list[str]:
    """Return every value recorded for ``key`` in ``text``, left to right.

    Matches are non-overlapping; scanning resumes right after each closing
    ``|``. Values are trimmed and empty values are dropped. No truncation is
    applied here.
    """
    if not text or not key:
        return []
    values: list[str] = []
    for m in _pattern_for(key).finditer(text):
        value = m.group(1).strip()
        if value:
            values.append(value)
    return values


def build_search_text(search_text_a: str, search_text_b: str) -> str:
    # 末尾に区切りを付与し、閉じ "|" が欠けたセルでも最後の値を拾えるようにする
    return f"{search_text_a}{FIELD_DELIMITER}{search_text_b}{FIELD_DELIMITER}"


def extract_fields(search_text: str) -> ExtractedFields:
    """Extract match names, denial types and split identifiers (max 5 each)."""
    return ExtractedFields(
        match_names=tuple(extract_values(search_text, MATCH_NAME_KEY)),
        denial_types=tuple(extract_values(search_text, DENIAL_TYPE_KEY)),
        split_ids=tuple(extract_values(search_text, SPLIT_ID_KEY)),
    )
