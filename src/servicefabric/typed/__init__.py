"""Typed facade and the per-operation request/response contracts."""

from __future__ import annotations

from .client import (
    AsyncTypedOperation,
    AsyncTypedServiceFabricFacade,
    TypedGroup,
    TypedOperation,
    TypedServiceFabricFacade,
    TypedValidationMode,
    parse_response_for_operation,
)
from .contracts import (
    OPERATION_IDS,
    STRICT_VALIDATION_OPERATION_KEYS,
    TYPED_OPERATION_CONTRACTS,
    TypedOperationContract,
)

__all__ = [
    "AsyncTypedOperation",
    "AsyncTypedServiceFabricFacade",
    "OPERATION_IDS",
    "STRICT_VALIDATION_OPERATION_KEYS",
    "TYPED_OPERATION_CONTRACTS",
    "TypedGroup",
    "TypedOperation",
    "TypedOperationContract",
    "TypedServiceFabricFacade",
    "TypedValidationMode",
    "parse_response_for_operation",
]
