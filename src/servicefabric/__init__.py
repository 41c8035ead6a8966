"""Service Fabric cluster REST client SDK.

This module uses lazy exports so lightweight utilities (for example config parsing)
can be imported without immediately importing transport dependencies.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "acollect_all",
    "aiter_items",
    "ApiError",
    "AsyncHeaderProvider",
    "AsyncPageFetcher",
    "AsyncHookMiddleware",
    "AsyncRequestExecutor",
    "AsyncServiceFabricClient",
    "AuthError",
    "ClientConfig",
    "ClientTimeoutError",
    "collect_all",
    "ConflictError",
    "entity_id",
    "ExponentialBackoff",
    "GatewayTimeoutError",
    "HookRegistry",
    "iter_items",
    "LoggingMiddleware",
    "PageFetcher",
    "NotFoundError",
    "PaginationError",
    "PayloadTooLargeError",
    "RequestCall",
    "RetryPolicy",
    "ServerError",
    "ServiceFabricClient",
    "ServiceFabricError",
    "ServiceUnavailableError",
    "summarize_upgrade",
    "SyncHeaderProvider",
    "SyncHookMiddleware",
    "SyncRequestExecutor",
    "TransportError",
    "TypedModelValidationError",
    "UpgradeProgressSummary",
    "UploadError",
    "ValidationError",
    "ValidationMode",
    "WaitTimeoutError",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "entity_id": (".api", "entity_id"),
    "AsyncServiceFabricClient": (".client", "AsyncServiceFabricClient"),
    "ServiceFabricClient": (".client", "ServiceFabricClient"),
    "ValidationMode": (".client", "ValidationMode"),
    "ClientConfig": (".config", "ClientConfig"),
    "ApiError": (".errors", "ApiError"),
    "AuthError": (".errors", "AuthError"),
    "ClientTimeoutError": (".errors", "ClientTimeoutError"),
    "ConflictError": (".errors", "ConflictError"),
    "GatewayTimeoutError": (".errors", "GatewayTimeoutError"),
    "NotFoundError": (".errors", "NotFoundError"),
    "PaginationError": (".errors", "PaginationError"),
    "PayloadTooLargeError": (".errors", "PayloadTooLargeError"),
    "ServerError": (".errors", "ServerError"),
    "ServiceFabricError": (".errors", "ServiceFabricError"),
    "ServiceUnavailableError": (".errors", "ServiceUnavailableError"),
    "TransportError": (".errors", "TransportError"),
    "TypedModelValidationError": (".errors", "TypedModelValidationError"),
    "UploadError": (".errors", "UploadError"),
    "ValidationError": (".errors", "ValidationError"),
    "WaitTimeoutError": (".errors", "WaitTimeoutError"),
    "HookRegistry": (".hooks", "HookRegistry"),
    "LoggingMiddleware": (".hooks", "LoggingMiddleware"),
    "RequestCall": (".hooks", "RequestCall"),
    "acollect_all": (".paging", "acollect_all"),
    "aiter_items": (".paging", "aiter_items"),
    "collect_all": (".paging", "collect_all"),
    "iter_items": (".paging", "iter_items"),
    "AsyncHeaderProvider": (".protocols", "AsyncHeaderProvider"),
    "AsyncPageFetcher": (".protocols", "AsyncPageFetcher"),
    "PageFetcher": (".protocols", "PageFetcher"),
    "AsyncHookMiddleware": (".protocols", "AsyncHookMiddleware"),
    "AsyncRequestExecutor": (".protocols", "AsyncRequestExecutor"),
    "RetryPolicy": (".protocols", "RetryPolicy"),
    "SyncHeaderProvider": (".protocols", "SyncHeaderProvider"),
    "SyncHookMiddleware": (".protocols", "SyncHookMiddleware"),
    "SyncRequestExecutor": (".protocols", "SyncRequestExecutor"),
    "ExponentialBackoff": (".retry", "ExponentialBackoff"),
    "summarize_upgrade": (".wait", "summarize_upgrade"),
    "UpgradeProgressSummary": (".wait", "UpgradeProgressSummary"),
}

if TYPE_CHECKING:
    from .api import entity_id
    from .client import (
        AsyncServiceFabricClient,
        ServiceFabricClient,
        ValidationMode,
    )
    from .config import ClientConfig
    from .errors import (
        ApiError,
        AuthError,
        ClientTimeoutError,
        ConflictError,
        GatewayTimeoutError,
        NotFoundError,
        PaginationError,
        PayloadTooLargeError,
        ServerError,
        ServiceFabricError,
        ServiceUnavailableError,
        TransportError,
        TypedModelValidationError,
        UploadError,
        ValidationError,
        WaitTimeoutError,
    )
    from .hooks import (
        HookRegistry,
        LoggingMiddleware,
        RequestCall,
    )
    from .paging import (
        acollect_all,
        aiter_items,
        collect_all,
        iter_items,
    )
    from .protocols import (
        AsyncHeaderProvider,
        AsyncPageFetcher,
        AsyncHookMiddleware,
        AsyncRequestExecutor,
        PageFetcher,
        RetryPolicy,
        SyncHeaderProvider,
        SyncHookMiddleware,
        SyncRequestExecutor,
    )
    from .retry import ExponentialBackoff
    from .wait import (
        UpgradeProgressSummary,
        summarize_upgrade,
    )


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
