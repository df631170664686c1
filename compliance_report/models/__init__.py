"""Domain models for the compliance report builder.

This package contains the configuration, report and run-result models used
throughout the application.
"""

from .config_models import DEFAULT_APPROVED_CODES, DEFAULT_HIGH_RISK_KEYWORDS, ClassificationConfig
from .processing_result import ProcessingResult
from .report_models import REPORT_HEADER, SLOTS_PER_FIELD, ExtractedFields, OutputRow, Report, Status

__all__ = [
    # Configuration models
    "ClassificationConfig",
    "DEFAULT_APPROVED_CODES",
    "DEFAULT_HIGH_RISK_KEYWORDS",
    # Report models
    "ExtractedFields",
    "OutputRow",
    "Report",
    "REPORT_HEADER",
    "SLOTS_PER_FIELD",
    "Status",
    # Run metrics
    "ProcessingResult",
]
