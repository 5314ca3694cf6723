"""Severity ranking and severity-based ordering of results."""

from __future__ import annotations

from typing import Iterable, Optional

from ..models.result import ReportResult, Result, ResultSeverity

SEVERITY_LEVEL: dict[ResultSeverity, int] = {
    ResultSeverity.UNSET: -1,
    ResultSeverity.INFO: 0,
    ResultSeverity.LOW: 1,
    ResultSeverity.MEDIUM: 2,
    ResultSeverity.HIGH: 3,
    ResultSeverity.CRITICAL: 4,
}


def severity_level(severity: ResultSeverity | str) -> int:
    """Return the rank of a severity.

    Unset ranks below every named severity. Unknown strings raise
    ``ValueError`` instead of silently ranking as info.
    """
    try:
        return SEVERITY_LEVEL[ResultSeverity(severity)]
    except ValueError:
        raise ValueError(f"Unknown severity: {severity!r}") from None


def compare_severities(a: ResultSeverity | str, b: ResultSeverity | str) -> int:
    """Return -1, 0 or 1 as ``a`` ranks below, equal to or above ``b``."""
    la, lb = severity_level(a), severity_level(b)
    return (la > lb) - (la < lb)


def meets_threshold(severity: ResultSeverity | str, threshold: ResultSeverity | str) -> bool:
    """True when ``severity`` is at or above ``threshold``."""
    return severity_level(severity) >= severity_level(threshold)


def sort_by_severity(
    results: Iterable[ReportResult],
    descending: bool = True,
) -> list[ReportResult]:
    """Sort results by severity rank. Ties keep their original order."""
    return sorted(results, key=lambda r: severity_level(r.severity), reverse=descending)


def highest_severity(results: Iterable[ReportResult]) -> ResultSeverity:
    highest = ResultSeverity.UNSET
    for r in results:
        if severity_level(r.severity) > severity_level(highest):
            highest = r.severity
    return highest


def filter_results(
    results: Iterable[ReportResult],
    min_severity: Optional[ResultSeverity | str] = None,
    statuses: Optional[Iterable[Result | str]] = None,
) -> list[ReportResult]:
    """Keep results at or above ``min_severity`` whose status is in ``statuses``."""
    status_set = {Result(s) for s in statuses} if statuses is not None else None
    filtered: list[ReportResult] = []
    for r in results:
        if min_severity and not meets_threshold(r.severity, min_severity):
            continue
        if status_set is not None and r.result not in status_set:
            continue
        filtered.append(r)
    return filtered
