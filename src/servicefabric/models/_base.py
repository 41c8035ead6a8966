"""Base classes shared by every wire model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal

T = TypeVar("T")


class FabricModel(BaseModel):
    """Cluster REST payload with PascalCase wire names.

    Unknown fields are kept so that newer cluster versions round-trip through
    older clients without losing data.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
    )


class CamelModel(BaseModel):
    """Payload with camelCase wire names (mesh resources and AAD metadata)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class PagedList(FabricModel, Generic[T]):
    """One page of a continuation-token listing.

    An absent or empty ``ContinuationToken`` means there are no further pages.
    """

    continuation_token: str | None = None
    items: list[T] = Field(default_factory=list)

    @property
    def has_more(self) -> bool:
        return bool(self.continuation_token)


class CamelPagedList(CamelModel, Generic[T]):
    continuation_token: str | None = None
    items: list[T] = Field(default_factory=list)

    @property
    def has_more(self) -> bool:
        return bool(self.continuation_token)


def to_wire(value: BaseModel | Mapping[str, Any] | Any) -> Any:
    """Serialize a request body: models by alias without unset optionals, mappings key by key."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(value, Mapping):
        return {key: to_wire(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    return value
