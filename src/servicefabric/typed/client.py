"""Typed facade wrappers for the sync/async Service Fabric clients.

``client.typed`` mirrors the raw operation groups. Each call validates a
mapping request body against the operation's request model, forwards to the
raw method, and parses the JSON response into the operation's response model.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import TypedModelValidationError
from .contracts import TYPED_OPERATION_CONTRACTS, TypedOperationContract

TypedValidationMode = Literal["typed-only", "off", "strict"]

_VALIDATION_MODES: set[str] = {"typed-only", "off", "strict"}
_adapter_cache: dict[Any, TypeAdapter[Any]] = {}
_MAX_SAMPLE_DEPTH = 2
_MAX_SAMPLE_ITEMS = 5
_MAX_SAMPLE_STRING = 200


def _model_name(model_type: Any) -> str:
    return getattr(model_type, "__name__", None) or repr(model_type)


def _adapter_for(model_type: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapter_cache.get(model_type)
    except TypeError:
        return TypeAdapter(model_type)

    if adapter is None:
        adapter = TypeAdapter(model_type)
        _adapter_cache[model_type] = adapter
    return adapter


def _sample_payload(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_SAMPLE_DEPTH:
        return "<trimmed>"

    if isinstance(value, dict):
        sampled: dict[str, Any] = {}
        for index, (key, nested) in enumerate(value.items()):
            if index >= _MAX_SAMPLE_ITEMS:
                sampled["..."] = "<trimmed>"
                break
            sampled[str(key)] = _sample_payload(nested, depth + 1)
        return sampled

    if isinstance(value, list):
        sampled_items = [_sample_payload(item, depth + 1) for item in value[:_MAX_SAMPLE_ITEMS]]
        if len(value) > _MAX_SAMPLE_ITEMS:
            sampled_items.append("<trimmed>")
        return sampled_items

    if isinstance(value, str):
        return value if len(value) <= _MAX_SAMPLE_STRING else f"{value[:_MAX_SAMPLE_STRING]}..."

    if isinstance(value, (int, float, bool)) or value is None:
        return value

    return repr(value)


def _resolve_mode(mode_getter: Callable[[], str]) -> TypedValidationMode:
    mode = mode_getter()
    if mode in _VALIDATION_MODES:
        return mode  # type: ignore[return-value]
    return "typed-only"


def _should_validate(mode: TypedValidationMode, override: bool | None) -> bool:
    if override is not None:
        return override
    return mode != "off"


def _validate_request_body(contract: TypedOperationContract, body: Any) -> Any:
    if body is None or contract.request_model is None or isinstance(body, BaseModel):
        return body

    adapter = _adapter_for(contract.request_model)
    try:
        return adapter.validate_python(body)
    except ValidationError as error:
        raise TypedModelValidationError(
            operation=contract.operation_key,
            boundary="request",
            model_name=_model_name(contract.request_model),
            errors=error.errors(),
            raw_sample=_sample_payload(body),
        ) from error


def _parse_typed_response(
    contract: TypedOperationContract,
    payload: Any,
    *,
    boundary: Literal["request", "response"] = "response",
    status_code: int | None = None,
) -> Any:
    # Operations without a response model, and empty bodies, pass through untouched.
    if contract.response_model is None or payload is None:
        return payload

    adapter = _adapter_for(contract.response_model)
    try:
        return adapter.validate_python(payload)
    except ValidationError as error:
        raise TypedModelValidationError(
            operation=contract.operation_key,
            boundary=boundary,
            model_name=_model_name(contract.response_model),
            status_code=status_code,
            errors=error.errors(),
            raw_sample=_sample_payload(payload),
        ) from error


def parse_response_for_operation(
    operation_key: str,
    payload: Any,
    *,
    boundary: Literal["request", "response"] = "response",
    status_code: int | None = None,
) -> Any:
    contract = TYPED_OPERATION_CONTRACTS.get(operation_key)
    if contract is None:
        raise ValueError(f"no typed contract registered for operation {operation_key}")
    return _parse_typed_response(contract, payload, boundary=boundary, status_code=status_code)


def _bind_body(
    contract: TypedOperationContract,
    method: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> tuple[tuple[Any, ...], dict[str, Any]]:
    if contract.request_model is None:
        return args, kwargs

    bound = inspect.signature(method).bind(*args, **kwargs)
    if "body" in bound.arguments:
        bound.arguments["body"] = _validate_request_body(contract, bound.arguments["body"])
    return bound.args, bound.kwargs


class TypedOperation:
    def __init__(
        self,
        contract: TypedOperationContract,
        method: Callable[..., Any],
        mode_getter: Callable[[], str],
    ) -> None:
        self.contract = contract
        self._method = method
        self._mode_getter = mode_getter

    def __call__(self, *args: Any, validate: bool | None = None, **kwargs: Any) -> Any:
        should_validate = _should_validate(_resolve_mode(self._mode_getter), validate)
        if should_validate:
            args, kwargs = _bind_body(self.contract, self._method, args, kwargs)
        response = self._method(*args, **kwargs)
        if not should_validate:
            return response
        return _parse_typed_response(self.contract, response)


class AsyncTypedOperation:
    def __init__(
        self,
        contract: TypedOperationContract,
        method: Callable[..., Any],
        mode_getter: Callable[[], str],
    ) -> None:
        self.contract = contract
        self._method = method
        self._mode_getter = mode_getter

    async def __call__(self, *args: Any, validate: bool | None = None, **kwargs: Any) -> Any:
        should_validate = _should_validate(_resolve_mode(self._mode_getter), validate)
        if should_validate:
            args, kwargs = _bind_body(self.contract, self._method, args, kwargs)
        response = await self._method(*args, **kwargs)
        if not should_validate:
            return response
        return _parse_typed_response(self.contract, response)


def _is_group_prefix(prefix: str) -> bool:
    lead = prefix + "."
    return any(key.startswith(lead) for key in TYPED_OPERATION_CONTRACTS)


class TypedGroup:
    """Typed view over one raw operation group, resolved lazily by attribute name."""

    def __init__(
        self,
        target: Any,
        prefix: str,
        mode_getter: Callable[[], str],
        operation_type: type[TypedOperation] | type[AsyncTypedOperation],
    ) -> None:
        self._target = target
        self._prefix = prefix
        self._mode_getter = mode_getter
        self._operation_type = operation_type

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        key = f"{self._prefix}.{name}"
        contract = TYPED_OPERATION_CONTRACTS.get(key)
        if contract is not None:
            return self._operation_type(contract, getattr(self._target, name), self._mode_getter)
        if _is_group_prefix(key):
            return TypedGroup(getattr(self._target, name), key, self._mode_getter, self._operation_type)
        raise AttributeError(f"no typed operation {key!r}")

    def __dir__(self) -> list[str]:
        lead = self._prefix + "."
        names = {key[len(lead) :].split(".", 1)[0] for key in TYPED_OPERATION_CONTRACTS if key.startswith(lead)}
        return sorted(names)


class TypedServiceFabricFacade:
    def __init__(self, client: Any) -> None:
        self._client = client
        self._mode_getter = lambda: getattr(client, "_validation_mode", "typed-only")

    def __getattr__(self, name: str) -> TypedGroup:
        if name.startswith("_") or not _is_group_prefix(name):
            raise AttributeError(name)
        return TypedGroup(getattr(self._client, name), name, self._mode_getter, TypedOperation)

    def parse(self, operation_key: str, payload: Any, *, status_code: int | None = None) -> Any:
        return parse_response_for_operation(operation_key, payload, status_code=status_code)


class AsyncTypedServiceFabricFacade:
    def __init__(self, client: Any) -> None:
        self._client = client
        self._mode_getter = lambda: getattr(client, "_validation_mode", "typed-only")

    def __getattr__(self, name: str) -> TypedGroup:
        if name.startswith("_") or not _is_group_prefix(name):
            raise AttributeError(name)
        return TypedGroup(getattr(self._client, name), name, self._mode_getter, AsyncTypedOperation)

    def parse(self, operation_key: str, payload: Any, *, status_code: int | None = None) -> Any:
        return parse_response_for_operation(operation_key, payload, status_code=status_code)


__all__ = [
    "AsyncTypedOperation",
    "AsyncTypedServiceFabricFacade",
    "TypedGroup",
    "TypedOperation",
    "TypedServiceFabricFacade",
    "TypedValidationMode",
    "parse_response_for_operation",
]
