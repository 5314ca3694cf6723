"""Policy result data models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .reference import LabelSelector, ObjectReference


class Result(str, Enum):
    """Outcome of evaluating one policy rule.

    - pass: the policy requirements are met
    - fail: the policy requirements are not met
    - warn: the policy requirements are not met and the policy is not scored
    - error: the policy could not be evaluated
    - skip: the policy was not selected based on user inputs or applicability
    """

    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"
    ERROR = "error"
    SKIP = "skip"


class StatusFilter(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"
    ERROR = "error"
    SKIP = "skip"


class ResultSeverity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"
    UNSET = ""


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Timestamp(BaseModel):
    """Seconds since the epoch (signed) plus non-negative nanos.

    Instants before 1970 have negative seconds; nanos always count forward.
    """

    seconds: int = 0
    nanos: int = Field(default=0, ge=0, lt=1_000_000_000)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - EPOCH
        return cls(
            seconds=delta.days * 86400 + delta.seconds,
            nanos=delta.microseconds * 1000,
        )

    def to_datetime(self) -> datetime:
        return EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)


class ReportResult(BaseModel):
    """The outcome of one policy rule against zero or more resources.

    The first entry of ``subjects`` is the authoritative resource; any
    further entries are informational. A result may carry subjects, a
    resource selector, both, or neither (in which case it applies to the
    report scope).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", exclude=True)
    source: str = ""
    policy: str
    rule: str = ""
    category: str = ""
    severity: ResultSeverity = ResultSeverity.UNSET
    timestamp: Optional[Timestamp] = None
    result: Result
    scored: bool = False
    subjects: list[ObjectReference] = Field(default=[], alias="resources")
    resource_selector: Optional[LabelSelector] = Field(default=None, alias="resourceSelector")
    description: str = Field(default="", alias="message")
    properties: dict[str, str] = {}

    def get_id(self) -> str:
        return self.id

    def has_resource(self) -> bool:
        return len(self.subjects) > 0

    def get_resource(self) -> Optional[ObjectReference]:
        if not self.has_resource():
            return None
        return self.subjects[0]

    def get_kind(self) -> str:
        resource = self.get_resource()
        if resource is None:
            return ""
        return resource.kind

    def resource_string(self) -> str:
        resource = self.get_resource()
        if resource is None:
            return ""
        return resource.to_resource_string()
