"""Summary aggregation over report results."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from ..models.report import Report, ReportSummary
from ..models.result import ReportResult, Result


def compute_summary(results: Iterable[ReportResult]) -> ReportSummary:
    """Count results by status.

    Pure function: call it whenever the results change instead of
    maintaining counts incrementally.
    """
    counts = Counter(r.result for r in results)
    return ReportSummary(
        pass_=counts[Result.PASS],
        fail=counts[Result.FAIL],
        warn=counts[Result.WARN],
        error=counts[Result.ERROR],
        skip=counts[Result.SKIP],
    )


def summary_is_consistent(report: Report) -> bool:
    return report.summary == compute_summary(report.results)


def with_computed_summary(report: Report) -> Report:
    """Return a copy of ``report`` whose summary matches its results."""
    return report.model_copy(update={"summary": compute_summary(report.results)})
