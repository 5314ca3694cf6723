"""JUnit XML formatter for CI/CD integration."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Iterable
from xml.dom import minidom
from xml.etree import ElementTree as ET

from ..models.report import Report
from ..models.result import ReportResult, Result


def _case_name(result: ReportResult) -> str:
    if result.rule:
        return f"{result.policy}/{result.rule}"
    return result.policy


def _failure_text(report: Report, result: ReportResult) -> str:
    text_parts = [f"Result: {result.result.value}"]
    if result.severity.value:
        text_parts.append(f"Severity: {result.severity.value}")
    source = report.result_source(result)
    if source:
        text_parts.append(f"Source: {source}")
    if result.has_resource():
        text_parts.append(f"Resource: {result.resource_string()}")
    if result.category:
        text_parts.append(f"Category: {result.category}")
    if result.description:
        text_parts.append(f"\nMessage:\n{result.description}")
    return "\n".join(text_parts)


def export_junit_results(
    reports: Iterable[Report],
    output_path: Path,
    fail_on: list[str] | None = None,
    suite_name: str = "Policy Reports",
) -> dict:
    """Export policy reports as JUnit XML.

    Args:
        reports: Reports to export. Each report becomes a testsuite and each
            result a testcase.
        output_path: Path to write the XML file.
        fail_on: Statuses marked as failures. Default: fail. ``error``
            results are always reported as errors and ``skip`` as skipped.
        suite_name: Name for the testsuites element.

    Returns:
        Dict with: path, total_tests, failures, errors, skipped, passed.
    """
    if fail_on is None:
        fail_on = ["fail"]
    fail_set = {Result(s) for s in fail_on}

    testsuites = ET.Element("testsuites")
    testsuites.set("name", suite_name)
    testsuites.set("timestamp", datetime.now().strftime("%Y-%m-%dT%H:%M:%S"))

    total_tests = 0
    total_failures = 0
    total_errors = 0
    total_skipped = 0

    for report in reports:
        report_name = report.get_key() or report.source or "report"
        testsuite = ET.SubElement(testsuites, "testsuite")
        testsuite.set("name", report_name)
        testsuite.set("tests", str(len(report.results)))

        suite_failures = suite_errors = suite_skipped = 0

        for result in report.results:
            total_tests += 1

            testcase = ET.SubElement(testsuite, "testcase")
            testcase.set("name", _case_name(result))
            testcase.set("classname", result.resource_string() or report_name)

            if result.result == Result.ERROR:
                suite_errors += 1
                error = ET.SubElement(testcase, "error")
                error.set("message", result.description or "policy could not be evaluated")
                error.text = _failure_text(report, result)
            elif result.result == Result.SKIP:
                suite_skipped += 1
                ET.SubElement(testcase, "skipped")
            elif result.result in fail_set:
                suite_failures += 1
                failure = ET.SubElement(testcase, "failure")
                label = result.severity.value or result.result.value
                failure.set("message", f"[{label}] {result.description}".rstrip())
                failure.set("type", result.result.value)
                failure.text = _failure_text(report, result)

        testsuite.set("failures", str(suite_failures))
        testsuite.set("errors", str(suite_errors))
        testsuite.set("skipped", str(suite_skipped))
        total_failures += suite_failures
        total_errors += suite_errors
        total_skipped += suite_skipped

    testsuites.set("tests", str(total_tests))
    testsuites.set("failures", str(total_failures))
    testsuites.set("errors", str(total_errors))
    testsuites.set("skipped", str(total_skipped))

    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Pretty-print XML
    rough = ET.tostring(testsuites, encoding="unicode")
    dom = minidom.parseString(rough)
    xml_str = dom.toprettyxml(indent="  ", encoding="UTF-8")
    output_path.write_bytes(xml_str)

    return {
        "path": str(output_path),
        "total_tests": total_tests,
        "failures": total_failures,
        "errors": total_errors,
        "skipped": total_skipped,
        "passed": total_tests - total_failures - total_errors - total_skipped,
    }
