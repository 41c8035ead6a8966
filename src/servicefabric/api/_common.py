"""Helpers shared by the operation groups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, TypeAlias
from urllib.parse import quote

from pydantic import BaseModel

RequestFn = Callable[..., Any]
Body: TypeAlias = BaseModel | Mapping[str, Any]

MESH_API_VERSION = "8.2"


def entity_id(name: str) -> str:
    """Turn ``fabric:/App/Svc`` into the ``App~Svc`` form used in request paths."""
    value = str(name)
    if value.startswith("fabric:/"):
        value = value[len("fabric:/") :]
    return value.replace("/", "~")


def _segment(value: Any) -> str:
    return quote(str(value), safe="~")


def _entity(value: Any) -> str:
    return quote(entity_id(value), safe="~")


def _store_path(value: str) -> str:
    return quote(str(value).strip("/"), safe="/")
