"""Resource reference and selector models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SelectorOperator(str, Enum):
    IN = "In"
    NOT_IN = "NotIn"
    EXISTS = "Exists"
    DOES_NOT_EXIST = "DoesNotExist"


class ObjectReference(BaseModel):
    """Reference to a single resource in the managed system."""

    model_config = ConfigDict(populate_by_name=True)

    kind: str = ""
    namespace: str = ""
    name: str = ""
    uid: str = ""
    api_version: str = Field(default="", alias="apiVersion")
    resource_version: str = Field(default="", alias="resourceVersion")
    field_path: str = Field(default="", alias="fieldPath")

    def to_resource_string(self) -> str:
        return to_resource_string(self)


class LabelSelectorRequirement(BaseModel):
    key: str
    operator: SelectorOperator
    values: list[str] = []


class LabelSelector(BaseModel):
    """Label selector criteria. Stored only, never evaluated here."""

    model_config = ConfigDict(populate_by_name=True)

    match_labels: dict[str, str] = Field(default={}, alias="matchLabels")
    match_expressions: list[LabelSelectorRequirement] = Field(
        default=[], alias="matchExpressions"
    )


def to_resource_string(ref: ObjectReference) -> str:
    """Format a reference as a ``namespace/kind/name`` path.

    Missing components are dropped without leaving a separator behind.
    Only the kind is lowercased.
    """
    resource = ""

    if ref.namespace:
        resource = ref.namespace

    if ref.kind and resource:
        resource = f"{resource}/{ref.kind.lower()}"
    elif ref.kind:
        resource = ref.kind.lower()

    if ref.name and resource:
        resource = f"{resource}/{ref.name}"
    elif ref.name:
        resource = ref.name

    return resource
