"""Shared fixtures for policyreport tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def sample_report_data() -> dict:
    """Return a wire-format report document."""
    return {
        "apiVersion": "openreports.io/v1alpha1",
        "kind": "Report",
        "metadata": {
            "name": "cpol-require-labels",
            "namespace": "payments",
            "uid": "8f2c6a1e-0d5b-4d6e-9b1a-2f7c3e9d4a10",
        },
        "source": "kyverno",
        "scope": {"kind": "Deployment", "namespace": "payments", "name": "api"},
        "configuration": {"limits": {"maxResults": 100, "statusFilter": ["fail", "error"]}},
        "summary": {"pass": 2, "fail": 1, "warn": 0, "error": 0, "skip": 1},
        "results": [
            {
                "source": "kyverno",
                "policy": "require-labels",
                "rule": "check-team",
                "category": "Best Practices",
                "severity": "medium",
                "timestamp": {"seconds": 1718000000, "nanos": 0},
                "result": "pass",
                "scored": True,
                "resources": [{"kind": "Pod", "namespace": "payments", "name": "api-7d9f"}],
                "message": "validation rule 'check-team' passed.",
            },
            {
                "source": "trivy",
                "policy": "disallow-privileged",
                "rule": "privileged-containers",
                "category": "Pod Security",
                "severity": "critical",
                "result": "fail",
                "scored": True,
                "resources": [
                    {"kind": "Pod", "namespace": "payments", "name": "worker-1"},
                    {"kind": "Pod", "namespace": "payments", "name": "worker-2"},
                ],
                "message": "Privileged mode is disallowed.",
                "properties": {"container": "worker"},
            },
            {
                "policy": "require-probes",
                "result": "pass",
                "severity": "low",
                "resources": [{"kind": "Deployment", "namespace": "payments", "name": "api"}],
            },
            {
                "policy": "restrict-node-port",
                "result": "skip",
                "resourceSelector": {"matchLabels": {"app": "api"}},
            },
        ],
    }


@pytest.fixture
def report_file(tmp_path: Path, sample_report_data: dict) -> Path:
    """Write the sample report as YAML."""
    path = tmp_path / "report.yaml"
    path.write_text(yaml.safe_dump(sample_report_data, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def passing_report_file(tmp_path: Path) -> Path:
    """Write a report with only passing results as JSON."""
    data = {
        "metadata": {"name": "clean"},
        "source": "kyverno",
        "summary": {"pass": 1},
        "results": [{"policy": "require-labels", "result": "pass", "severity": "high"}],
    }
    path = tmp_path / "clean.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project with a .policyreport config."""
    project = tmp_path / "project"
    cfg = project / ".policyreport"
    cfg.mkdir(parents=True)
    (cfg / "config.yaml").write_text(
        "check:\n  fail_on: [fail, warn]\n  min_severity: high\n",
        encoding="utf-8",
    )
    return project
