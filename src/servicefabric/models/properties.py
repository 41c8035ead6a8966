"""Naming service names and the typed properties stored under them."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ._base import FabricModel
from .enums import PropertyValueKind
from .polymorphic import polymorphic


class PropertyValue(FabricModel):
    kind: str


class BinaryPropertyValue(PropertyValue):
    """Raw bytes, carried on the wire as a list of integers 0-255."""

    kind: Literal["Binary"] = "Binary"
    data: list[int]

    @classmethod
    def from_bytes(cls, value: bytes) -> "BinaryPropertyValue":
        return cls(data=list(value))

    def to_bytes(self) -> bytes:
        return bytes(self.data)


class Int64PropertyValue(PropertyValue):
    kind: Literal["Int64"] = "Int64"
    data: str


class DoublePropertyValue(PropertyValue):
    kind: Literal["Double"] = "Double"
    data: float


class StringPropertyValue(PropertyValue):
    kind: Literal["String"] = "String"
    data: str


class GuidPropertyValue(PropertyValue):
    kind: Literal["Guid"] = "Guid"
    data: str


PropertyValueUnion = polymorphic(
    "PropertyValue",
    PropertyValue,
    "kind",
    BinaryPropertyValue,
    Int64PropertyValue,
    DoublePropertyValue,
    StringPropertyValue,
    GuidPropertyValue,
)


class PropertyMetadata(FabricModel):
    type_id: PropertyValueKind | None = None
    custom_type_id: str | None = None
    parent: str | None = None
    size_in_bytes: int | None = None
    last_modified_utc_timestamp: datetime | None = None
    sequence_number: str | None = None


class PropertyInfo(FabricModel):
    name: str
    value: PropertyValueUnion | None = None
    metadata: PropertyMetadata | None = None


class PropertyDescription(FabricModel):
    property_name: str
    custom_type_id: str | None = None
    value: PropertyValueUnion


class PagedSubNameInfoList(FabricModel):
    continuation_token: str | None = None
    is_consistent: bool | None = None
    sub_names: list[str] = Field(default_factory=list)

    @property
    def items(self) -> list[str]:
        return self.sub_names


class PagedPropertyInfoList(FabricModel):
    continuation_token: str | None = None
    is_consistent: bool | None = None
    properties: list[PropertyInfo] = Field(default_factory=list)

    @property
    def items(self) -> list[PropertyInfo]:
        return self.properties


# Batches


class PropertyBatchOperation(FabricModel):
    kind: str
    property_name: str


class CheckExistsPropertyBatchOperation(PropertyBatchOperation):
    kind: Literal["CheckExists"] = "CheckExists"
    exists: bool


class CheckSequencePropertyBatchOperation(PropertyBatchOperation):
    kind: Literal["CheckSequence"] = "CheckSequence"
    sequence_number: str


class CheckValuePropertyBatchOperation(PropertyBatchOperation):
    kind: Literal["CheckValue"] = "CheckValue"
    value: PropertyValueUnion


class DeletePropertyBatchOperation(PropertyBatchOperation):
    kind: Literal["Delete"] = "Delete"


class GetPropertyBatchOperation(PropertyBatchOperation):
    kind: Literal["Get"] = "Get"
    include_value: bool | None = None


class PutPropertyBatchOperation(PropertyBatchOperation):
    kind: Literal["Put"] = "Put"
    value: PropertyValueUnion
    custom_type_id: str | None = None


PropertyBatchOperationUnion = polymorphic(
    "PropertyBatchOperation",
    PropertyBatchOperation,
    "kind",
    CheckExistsPropertyBatchOperation,
    CheckSequencePropertyBatchOperation,
    CheckValuePropertyBatchOperation,
    DeletePropertyBatchOperation,
    GetPropertyBatchOperation,
    PutPropertyBatchOperation,
)


class PropertyBatchDescriptionList(FabricModel):
    operations: list[PropertyBatchOperationUnion] = Field(default_factory=list)


class PropertyBatchInfo(FabricModel):
    kind: str


class SuccessfulPropertyBatchInfo(PropertyBatchInfo):
    kind: Literal["Successful"] = "Successful"
    properties: dict[str, PropertyInfo] = Field(default_factory=dict)


class FailedPropertyBatchInfo(PropertyBatchInfo):
    """Returned with HTTP 409 when one operation of the batch failed; nothing was applied."""

    kind: Literal["Failed"] = "Failed"
    error_message: str | None = None
    operation_index: int | None = None


PropertyBatchInfoUnion = polymorphic(
    "PropertyBatchInfo",
    PropertyBatchInfo,
    "kind",
    SuccessfulPropertyBatchInfo,
    FailedPropertyBatchInfo,
)
