"""Small value objects shared across resource families."""

from __future__ import annotations

from ._base import FabricModel


class NodeId(FabricModel):
    id: str | None = None


class ApplicationParameter(FabricModel):
    key: str
    value: str


class NameDescription(FabricModel):
    name: str


class ApplicationNameInfo(FabricModel):
    id: str | None = None
    name: str | None = None


class ServiceNameInfo(FabricModel):
    id: str | None = None
    name: str | None = None
