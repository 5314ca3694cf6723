"""Report data models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .reference import LabelSelector, ObjectReference
from .result import ReportResult, Result, StatusFilter

API_VERSION = "openreports.io/v1alpha1"
KIND = "Report"


class ObjectMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    namespace: str = ""
    uid: str = ""
    labels: dict[str, str] = {}
    annotations: dict[str, str] = {}
    resource_version: str = Field(default="", alias="resourceVersion")
    creation_timestamp: Optional[datetime] = Field(default=None, alias="creationTimestamp")


class Limits(BaseModel):
    """Contract between report producers and consumers. Not enforced here."""

    model_config = ConfigDict(populate_by_name=True)

    max_results: int = Field(default=0, ge=0, alias="maxResults")
    status_filter: list[StatusFilter] = Field(default=[], alias="statusFilter")


class ReportConfiguration(BaseModel):
    limits: Limits = Limits()


class ReportSummary(BaseModel):
    """Status count summary of a report's results."""

    model_config = ConfigDict(populate_by_name=True)

    pass_: int = Field(default=0, ge=0, alias="pass")
    fail: int = Field(default=0, ge=0)
    warn: int = Field(default=0, ge=0)
    error: int = Field(default=0, ge=0)
    skip: int = Field(default=0, ge=0)

    def count(self, status: Result) -> int:
        return {
            Result.PASS: self.pass_,
            Result.FAIL: self.fail,
            Result.WARN: self.warn,
            Result.ERROR: self.error,
            Result.SKIP: self.skip,
        }[Result(status)]

    @property
    def total(self) -> int:
        return self.pass_ + self.fail + self.warn + self.error + self.skip


class Report(BaseModel):
    """A policy report: the aggregate root over a set of results.

    ``scope`` and ``scope_selector`` are mutually exclusive; setting both is
    rejected at construction. The summary is stored as given. Use
    ``core.summary.with_computed_summary`` to bring it in line with the
    results after they change.
    """

    model_config = ConfigDict(populate_by_name=True)

    api_version: str = Field(default=API_VERSION, alias="apiVersion")
    kind: str = KIND
    metadata: ObjectMeta = ObjectMeta()
    source: str = ""
    scope: Optional[ObjectReference] = None
    scope_selector: Optional[LabelSelector] = Field(default=None, alias="scopeSelector")
    configuration: Optional[ReportConfiguration] = None
    summary: ReportSummary = ReportSummary()
    results: list[ReportResult] = []

    @model_validator(mode="after")
    def check_scope_exclusive(self) -> Report:
        if self.scope is not None and self.scope_selector is not None:
            raise ValueError("scopeSelector: only one of scope or scopeSelector may be set")
        return self

    def get_id(self) -> str:
        """Return the metadata UID, falling back to the report key."""
        return self.metadata.uid or self.get_key()

    def get_key(self) -> str:
        if self.metadata.namespace:
            return f"{self.metadata.namespace}/{self.metadata.name}"
        return self.metadata.name

    def get_scope(self) -> Optional[ObjectReference]:
        return self.scope

    def get_results(self) -> list[ReportResult]:
        return self.results

    def has_result(self, result_id: str) -> bool:
        if not result_id:
            return False
        return any(r.get_id() == result_id for r in self.results)

    def get_summary(self) -> ReportSummary:
        return self.summary

    def get_source(self) -> str:
        return self.source

    def result_source(self, result: ReportResult) -> str:
        """Effective source of a result; result-level source wins."""
        return result.source or self.source

    def get_kinds(self) -> list[str]:
        """Distinct resource kinds across results, in first-seen order."""
        kinds: list[str] = []
        for r in self.results:
            kind = r.get_kind()
            if kind and kind not in kinds:
                kinds.append(kind)
        return kinds

    def get_severities(self) -> list[str]:
        """Distinct assigned severities across results, in first-seen order."""
        severities: list[str] = []
        for r in self.results:
            sev = r.severity.value
            if sev and sev not in severities:
                severities.append(sev)
        return severities
