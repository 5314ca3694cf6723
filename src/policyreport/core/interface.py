"""Capability protocol for report-like objects."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..models.reference import ObjectReference
from ..models.report import ReportSummary
from ..models.result import ReportResult


@runtime_checkable
class ReportInterface(Protocol):
    """Uniform read access to heterogeneous reports.

    Kinds and severities are derived by scanning the results, never stored.
    """

    def get_id(self) -> str: ...

    def get_key(self) -> str: ...

    def get_scope(self) -> Optional[ObjectReference]: ...

    def get_results(self) -> list[ReportResult]: ...

    def has_result(self, result_id: str) -> bool: ...

    def get_summary(self) -> ReportSummary: ...

    def get_source(self) -> str: ...

    def get_kinds(self) -> list[str]: ...

    def get_severities(self) -> list[str]: ...
