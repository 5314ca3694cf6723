"""Tests for models/report.py and the report protocol."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from policyreport.core.interface import ReportInterface
from policyreport.core.loader import dump_report
from policyreport.models.reference import LabelSelector, ObjectReference
from policyreport.models.report import Limits, ObjectMeta, Report, ReportSummary
from policyreport.models.result import ReportResult, Result


class TestScopeExclusivity:
    def test_scope_only(self):
        report = Report(scope=ObjectReference(kind="Namespace", name="payments"))
        assert report.get_scope().name == "payments"

    def test_selector_only(self):
        report = Report(scope_selector=LabelSelector(match_labels={"app": "api"}))
        assert report.get_scope() is None

    def test_both_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Report.model_validate({
                "scope": {"kind": "Namespace", "name": "payments"},
                "scopeSelector": {"matchLabels": {"app": "api"}},
            })
        assert "scopeSelector" in str(exc.value)


class TestReportSummaryModel:
    def test_rejects_negative_counts(self):
        with pytest.raises(ValidationError) as exc:
            ReportSummary.model_validate({"fail": -1})
        assert "fail" in str(exc.value)

    def test_zero_counts_serialized(self):
        assert ReportSummary().model_dump(by_alias=True) == {
            "pass": 0, "fail": 0, "warn": 0, "error": 0, "skip": 0,
        }

    def test_count_accepts_strings(self):
        assert ReportSummary(skip=3).count("skip") == 3


class TestLimits:
    def test_status_filter_validated(self):
        with pytest.raises(ValidationError) as exc:
            Limits.model_validate({"statusFilter": ["fail", "bogus"]})
        assert "statusFilter" in str(exc.value)

    def test_negative_max_results_rejected(self):
        with pytest.raises(ValidationError):
            Limits.model_validate({"maxResults": -5})

    def test_max_results_always_serialized(self):
        assert Limits().model_dump(by_alias=True)["maxResults"] == 0


class TestReportAccessors:
    def test_key_namespaced(self, sample_report_data: dict):
        report = Report.model_validate(sample_report_data)
        assert report.get_key() == "payments/cpol-require-labels"

    def test_key_cluster_scoped(self):
        report = Report(metadata=ObjectMeta(name="cluster-wide"))
        assert report.get_key() == "cluster-wide"

    def test_id_prefers_uid(self, sample_report_data: dict):
        report = Report.model_validate(sample_report_data)
        assert report.get_id() == "8f2c6a1e-0d5b-4d6e-9b1a-2f7c3e9d4a10"

    def test_id_falls_back_to_key(self):
        report = Report(metadata=ObjectMeta(name="r", namespace="ns"))
        assert report.get_id() == "ns/r"

    def test_kinds_distinct_first_seen(self, sample_report_data: dict):
        report = Report.model_validate(sample_report_data)
        assert report.get_kinds() == ["Pod", "Deployment"]

    def test_severities_distinct(self, sample_report_data: dict):
        report = Report.model_validate(sample_report_data)
        assert report.get_severities() == ["medium", "critical", "low"]

    def test_has_result(self):
        report = Report(results=[
            ReportResult(id="r-1", policy="p", result=Result.PASS),
            ReportResult(policy="q", result=Result.FAIL),
        ])
        assert report.has_result("r-1") is True
        assert report.has_result("r-2") is False
        assert report.has_result("") is False

    def test_result_source_override(self, sample_report_data: dict):
        report = Report.model_validate(sample_report_data)
        assert report.result_source(report.results[1]) == "trivy"
        assert report.result_source(report.results[2]) == "kyverno"

    def test_satisfies_protocol(self):
        assert isinstance(Report(), ReportInterface)


class TestRoundTrip:
    def test_dump_and_load_equal(self, sample_report_data: dict):
        report = Report.model_validate(sample_report_data)
        assert Report.model_validate(dump_report(report)) == report

    def test_zero_counts_preserved(self):
        report = Report(source="kyverno")
        doc = dump_report(report)
        assert doc["summary"] == {"pass": 0, "fail": 0, "warn": 0, "error": 0, "skip": 0}
        assert Report.model_validate(doc) == report

    def test_wire_keys(self, sample_report_data: dict):
        doc = dump_report(Report.model_validate(sample_report_data))
        result = doc["results"][1]
        assert result["message"] == "Privileged mode is disallowed."
        assert result["resources"][0]["name"] == "worker-1"
        assert "scopeSelector" not in doc
        assert doc["configuration"]["limits"]["statusFilter"] == ["fail", "error"]
