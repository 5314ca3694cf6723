"""Markdown rendering of a single policy report."""

from __future__ import annotations

from datetime import datetime

from ..core.severity import highest_severity, sort_by_severity
from ..core.summary import compute_summary
from ..models.report import Report
from ..models.result import Result


def generate_report_markdown(report: Report, max_results: int = 0) -> str:
    """Render a report as markdown.

    The summary table is recomputed from the results. Results are listed
    most severe first; ``max_results`` caps the detail section (0 = all).
    """
    summary = compute_summary(report.results)
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    lines: list[str] = []
    lines.append("# Policy Report")
    lines.append("")
    if report.get_key():
        lines.append(f"**Report:** {report.get_key()}")
    if report.source:
        lines.append(f"**Source:** {report.source}")
    if report.scope is not None:
        lines.append(f"**Scope:** {report.scope.to_resource_string()}")
    elif report.scope_selector is not None:
        labels = ", ".join(f"{k}={v}" for k, v in sorted(report.scope_selector.match_labels.items()))
        lines.append(f"**Scope selector:** {labels or '(expressions)'}")
    highest = highest_severity(report.results)
    if highest.value:
        lines.append(f"**Highest severity:** {highest.value}")
    lines.append("")

    lines.append("## Summary")
    lines.append("")
    lines.append("| Status | Count |")
    lines.append("|--------|-------|")
    for status in Result:
        lines.append(f"| {status.value.upper():<6} | {summary.count(status)} |")
    lines.append(f"| **Total** | **{summary.total}** |")
    lines.append("")

    detail = sort_by_severity(report.results)
    if max_results > 0:
        detail = detail[:max_results]

    if detail:
        lines.append("## Results")
        lines.append("")
        for r in detail:
            name = f"{r.policy}/{r.rule}" if r.rule else r.policy
            sev = f" ({r.severity.value})" if r.severity.value else ""
            lines.append(f"### {name} [{r.result.value.upper()}]{sev}")
            if r.has_resource():
                lines.append(f"**Resource:** `{r.resource_string()}`")
            source = report.result_source(r)
            if source:
                lines.append(f"**Source:** {source}")
            if r.category:
                lines.append(f"**Category:** {r.category}")
            if r.description:
                lines.append(f"\n{r.description}")
            lines.append("")

    lines.append("---")
    lines.append(f"*Generated at {timestamp}*")

    return "\n".join(lines)
