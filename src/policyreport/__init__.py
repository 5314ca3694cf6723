"""Policy report data model with derived summaries and severity ranking."""

__version__ = "0.1.0"

from .core.severity import SEVERITY_LEVEL, compare_severities, meets_threshold, severity_level
from .core.summary import compute_summary, with_computed_summary
from .models import (
    LabelSelector,
    Limits,
    ObjectReference,
    Report,
    ReportConfiguration,
    ReportResult,
    ReportSummary,
    Result,
    ResultSeverity,
    StatusFilter,
    to_resource_string,
)
