"""Policy report data models."""

from .reference import LabelSelector, LabelSelectorRequirement, ObjectReference, SelectorOperator, to_resource_string
from .report import Limits, ObjectMeta, Report, ReportConfiguration, ReportSummary
from .result import ReportResult, Result, ResultSeverity, StatusFilter, Timestamp

__all__ = [
    "LabelSelector",
    "LabelSelectorRequirement",
    "Limits",
    "ObjectMeta",
    "ObjectReference",
    "Report",
    "ReportConfiguration",
    "ReportResult",
    "ReportSummary",
    "Result",
    "ResultSeverity",
    "SelectorOperator",
    "StatusFilter",
    "Timestamp",
    "to_resource_string",
]
