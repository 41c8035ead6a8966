"""Tagged unions keyed by a wire discriminator, with a fallback for unknown tags."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel, Discriminator, Tag

UNKNOWN_TAG = "__unrecognized__"


@dataclass(frozen=True, slots=True)
class PolymorphicType:
    name: str
    base: type[BaseModel]
    field: str
    wire_name: str
    variants: Mapping[str, type[BaseModel]]


POLYMORPHIC_TYPES: dict[str, PolymorphicType] = {}


def discriminator_literal(model: type[BaseModel], field: str) -> str:
    """Return the single literal a variant pins its discriminator field to."""
    info = model.model_fields[field]
    literal = info.default
    if not isinstance(literal, str):
        raise TypeError(f"{model.__name__}.{field} must default to its discriminator literal")
    if get_origin(info.annotation) is Literal and get_args(info.annotation) != (literal,):
        raise TypeError(f"{model.__name__}.{field} must be Literal[{literal!r}]")
    return literal


def _wire_name(model: type[BaseModel], field: str) -> str:
    alias = model.model_fields[field].alias
    if alias:
        return alias
    generator = model.model_config.get("alias_generator")
    return generator(field) if callable(generator) else field


def polymorphic(name: str, base: type[BaseModel], field: str, *variants: type[BaseModel]) -> Any:
    """Build ``Annotated[Union[...], Discriminator]`` over ``variants``.

    A payload whose tag is missing or not among the variants validates as
    ``base`` so new server-side kinds still deserialize.
    """
    wire_name = _wire_name(base, field)
    mapping: dict[str, type[BaseModel]] = {}
    for variant in variants:
        if not issubclass(variant, base):
            raise TypeError(f"{variant.__name__} does not extend {base.__name__}")
        literal = discriminator_literal(variant, field)
        if literal in mapping:
            raise TypeError(f"{name} declares {literal!r} twice")
        mapping[literal] = variant

    def _tag(value: Any) -> str:
        if isinstance(value, Mapping):
            raw = value.get(wire_name, value.get(field))
        else:
            raw = getattr(value, field, None)
        if isinstance(raw, Enum):
            raw = raw.value
        if isinstance(raw, str) and raw in mapping:
            return raw
        return UNKNOWN_TAG

    choices = tuple(Annotated[variant, Tag(literal)] for literal, variant in mapping.items())
    union = Union[(*choices, Annotated[base, Tag(UNKNOWN_TAG)])]  # type: ignore[valid-type]
    POLYMORPHIC_TYPES[name] = PolymorphicType(
        name=name,
        base=base,
        field=field,
        wire_name=wire_name,
        variants=dict(mapping),
    )
    return Annotated[union, Discriminator(_tag)]
