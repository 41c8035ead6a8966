"""Top-level Service Fabric clients (sync + async)."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from collections.abc import AsyncIterator, Iterator
from dataclasses import replace
from typing import Any, Callable, Iterable, Literal

import httpx

from .api import (
    ApplicationsApi,
    ApplicationTypesApi,
    AsyncImageStoreApi,
    BackupApi,
    ChaosApi,
    ClusterApi,
    ComposeApi,
    DeployedApplicationsApi,
    EventsApi,
    FaultsApi,
    ImageStoreApi,
    MeshApi,
    NodesApi,
    PartitionsApi,
    PropertiesApi,
    RawApi,
    RepairTasksApi,
    ReplicasApi,
    ServicesApi,
)
from .config import ClientConfig
from .errors import ApiError, TypedModelValidationError
from .hooks import HookRegistry, RequestCall
from .models._base import to_wire
from .paging import aiter_items, iter_items
from .protocols import (
    AsyncHeaderProvider,
    AsyncHookMiddleware,
    AsyncRequestExecutor,
    RetryPolicy,
    SyncHeaderProvider,
    SyncHookMiddleware,
    SyncRequestExecutor,
)
from .transport import AsyncTransport, SyncTransport
from .typed.client import AsyncTypedServiceFabricFacade, TypedServiceFabricFacade, parse_response_for_operation
from .typed.contracts import STRICT_VALIDATION_OPERATION_KEYS
from .wait import AsyncWaitApi, WaitApi

logger = logging.getLogger(__name__)

_RETRY_SAFE_METHODS = {"GET", "HEAD", "OPTIONS"}
_VALIDATION_MODE_ENV = "SF_CLIENT_VALIDATION_MODE"
_VALIDATION_MODES = {"typed-only", "off", "strict"}
ValidationMode = Literal["typed-only", "off", "strict"]

_OPERATION_GROUPS: tuple[tuple[str, type], ...] = (
    ("cluster", ClusterApi),
    ("nodes", NodesApi),
    ("application_types", ApplicationTypesApi),
    ("applications", ApplicationsApi),
    ("deployed_applications", DeployedApplicationsApi),
    ("services", ServicesApi),
    ("partitions", PartitionsApi),
    ("replicas", ReplicasApi),
    ("faults", FaultsApi),
    ("repair_tasks", RepairTasksApi),
    ("compose", ComposeApi),
    ("chaos", ChaosApi),
    ("backup", BackupApi),
    ("properties", PropertiesApi),
    ("events", EventsApi),
    ("mesh", MeshApi),
    ("raw", RawApi),
)


def _normalize_path(path: str) -> str:
    if not path:
        return "/"
    return path if path.startswith("/") else f"/{path}"


def _normalize_validation_mode(value: str | None) -> ValidationMode:
    mode = (value or "").strip().lower() or "typed-only"
    if mode not in _VALIDATION_MODES:
        raise ValueError(f"invalid validation_mode {value!r}; expected one of: typed-only, off, strict")
    return mode  # type: ignore[return-value]


def _resolve_config(config: ClientConfig | None, headers: dict[str, str] | None, **overrides: Any) -> ClientConfig:
    base = config or ClientConfig()
    changes = {name: value for name, value in overrides.items() if value is not None}
    return replace(base, headers={**base.headers, **(headers or {})}, **changes)


def _build_query(
    config: ClientConfig,
    query: dict[str, Any] | None,
    *,
    api_version: str | None,
    timeout: int | None,
    send_timeout: bool,
) -> dict[str, Any]:
    built: dict[str, Any] = {"api-version": api_version or config.api_version}
    built.update(query or {})
    if send_timeout:
        built["timeout"] = timeout if timeout is not None else config.server_timeout
    return built


class _ClientBase:
    """State and request shaping shared by the sync and async clients.

    Subclasses supply the httpx client, the transport and the image store
    group (the only group with a sync/async split of its own).
    """

    cluster: ClusterApi
    nodes: NodesApi
    application_types: ApplicationTypesApi
    applications: ApplicationsApi
    deployed_applications: DeployedApplicationsApi
    services: ServicesApi
    partitions: PartitionsApi
    replicas: ReplicasApi
    faults: FaultsApi
    repair_tasks: RepairTasksApi
    compose: ComposeApi
    chaos: ChaosApi
    backup: BackupApi
    properties: PropertiesApi
    events: EventsApi
    mesh: MeshApi
    raw: RawApi
    image_store: ImageStoreApi | AsyncImageStoreApi

    def _setup(
        self,
        config: ClientConfig,
        *,
        hook_registry: HookRegistry | None,
        header_provider: Any,
        retry_policy: RetryPolicy | None,
        retryable_operations: Iterable[str] | None,
        validation_mode: str | None,
    ) -> None:
        self.client_config = config
        self._hooks = hook_registry or HookRegistry()
        self._header_provider = header_provider
        self._retry_policy = retry_policy
        self._retryable_operations = frozenset(retryable_operations or ())
        if validation_mode is None:
            validation_mode = os.getenv(_VALIDATION_MODE_ENV)
        self._validation_mode = _normalize_validation_mode(validation_mode)

    def _attach_groups(self, image_store_cls: type) -> None:
        for name, group_cls in _OPERATION_GROUPS:
            setattr(self, name, group_cls(self._request))
        self.image_store = image_store_cls(self._request)

    def _http_client_options(self) -> dict[str, Any]:
        return {
            "base_url": self.client_config.endpoint,
            "timeout": self.client_config.timeout_seconds,
            "headers": self.client_config.headers,
            "verify": self.client_config.ssl_verify(),
        }

    def before(self, operation: str = "*") -> Callable[[Callable[[RequestCall], Any]], Callable[[RequestCall], Any]]:
        """Register a hook that runs before matching calls (``"nodes.*"``, ``"nodes.get"`` or ``"*"``)."""

        def register(func: Callable[[RequestCall], Any]) -> Callable[[RequestCall], Any]:
            self._hooks.add_before(operation, func)
            return func

        return register

    def after(self, operation: str = "*") -> Callable[[Callable[[RequestCall, Any], Any]], Callable[[RequestCall, Any], Any]]:
        def register(func: Callable[[RequestCall, Any], Any]) -> Callable[[RequestCall, Any], Any]:
            self._hooks.add_after(operation, func)
            return func

        return register

    def on_error(self, operation: str = "*") -> Callable[[Callable[[RequestCall, Exception], Any]], Callable[[RequestCall, Exception], Any]]:
        def register(func: Callable[[RequestCall, Exception], Any]) -> Callable[[RequestCall, Exception], Any]:
            self._hooks.add_error(operation, func)
            return func

        return register

    def use_middleware(self, middleware: SyncHookMiddleware | AsyncHookMiddleware, *, operation: str = "*") -> None:
        self._hooks.add_middleware(operation, middleware)

    def _retry_delay(self, call: RequestCall, attempt: int, error: Exception) -> float | None:
        """Seconds to wait before repeating ``call``, or ``None`` to give up.

        Validation failures are never repeated. Writes are repeated only for
        operations listed in ``retryable_operations``.
        """
        policy = self._retry_policy
        if policy is None or isinstance(error, TypedModelValidationError):
            return None
        if call.method not in _RETRY_SAFE_METHODS and call.operation not in self._retryable_operations:
            return None
        status_code = error.status_code if isinstance(error, ApiError) else None
        if not policy.should_retry(attempt=attempt, error=error, status_code=status_code):
            return None
        delay = policy.next_delay_seconds(attempt=attempt)
        logger.info("retrying %s after attempt %d in %.2fs: %s", call.operation, attempt, delay, error)
        return delay

    def _check_response(self, operation: str, response: Any) -> None:
        if self._validation_mode == "strict" and operation in STRICT_VALIDATION_OPERATION_KEYS:
            parse_response_for_operation(operation, response, status_code=None)

    def _build_call(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        json_body: Any | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        api_version: str | None = None,
        timeout: int | None = None,
        send_timeout: bool = True,
    ) -> RequestCall:
        return RequestCall(
            operation=operation,
            method=method.upper(),
            path=_normalize_path(path),
            query=_build_query(
                self.client_config,
                query,
                api_version=api_version,
                timeout=timeout,
                send_timeout=send_timeout,
            ),
            json_body=to_wire(json_body) if json_body is not None else None,
            content=content,
            headers=dict(headers or {}),
            api_version=api_version or self.client_config.api_version,
        )


def _with_provider_headers(provided: dict[str, str] | None, call: RequestCall) -> dict[str, str] | None:
    return {**(provided or {}), **(call.headers or {})} or None


class ServiceFabricClient(_ClientBase):
    """Synchronous Service Fabric cluster client."""

    def __init__(
        self,
        *,
        endpoint: str | None = None,
        api_version: str | None = None,
        timeout_seconds: float | None = None,
        server_timeout: int | None = None,
        headers: dict[str, str] | None = None,
        cert_path: str | None = None,
        key_path: str | None = None,
        verify: bool | None = None,
        config: ClientConfig | None = None,
        http_client: httpx.Client | None = None,
        request_executor: SyncRequestExecutor | None = None,
        header_provider: SyncHeaderProvider | None = None,
        retry_policy: RetryPolicy | None = None,
        retryable_operations: Iterable[str] | None = None,
        hook_registry: HookRegistry | None = None,
        validation_mode: ValidationMode | None = None,
    ) -> None:
        self._setup(
            _resolve_config(
                config,
                headers,
                endpoint=endpoint,
                api_version=api_version,
                timeout_seconds=timeout_seconds,
                server_timeout=server_timeout,
                cert_path=cert_path,
                key_path=key_path,
                verify=verify,
            ),
            hook_registry=hook_registry,
            header_provider=header_provider,
            retry_policy=retry_policy,
            retryable_operations=retryable_operations,
            validation_mode=validation_mode,
        )
        self._client = http_client or httpx.Client(**self._http_client_options())
        self._executor: SyncRequestExecutor = request_executor or SyncTransport(self._client)
        self._attach_groups(ImageStoreApi)
        self.typed = TypedServiceFabricFacade(self)
        self.wait = WaitApi(self)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ServiceFabricClient":
        return cls(config=ClientConfig.from_env(), **kwargs)

    @classmethod
    def from_profile(cls, cluster: str | None = None, **kwargs: Any) -> "ServiceFabricClient":
        return cls(config=ClientConfig.from_profile(cluster), **kwargs)

    def paginate(self, fetch_page: Callable[..., Any], **kwargs: Any) -> Iterator[Any]:
        """Iterate items across every page of a list operation, e.g. ``client.paginate(client.nodes.list)``."""
        return iter_items(fetch_page, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ServiceFabricClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        allow_statuses: Iterable[int] | None = None,
        **kwargs: Any,
    ) -> Any:
        call = self._build_call(operation, method, path, **kwargs)
        self._hooks.run_before(call)

        attempt = 1
        while True:
            try:
                provided = self._header_provider.headers() if self._header_provider is not None else None
                response = self._executor.request(
                    operation=call.operation,
                    method=call.method,
                    path=call.path,
                    query=call.query,
                    json_body=call.json_body,
                    content=call.content,
                    headers=_with_provider_headers(provided, call),
                    allow_statuses=allow_statuses,
                )
                self._check_response(call.operation, response)
            except Exception as error:
                try:
                    delay = self._retry_delay(call, attempt, error)
                except Exception as policy_error:
                    self._hooks.run_error(call, policy_error)
                    raise
                if delay is None:
                    self._hooks.run_error(call, error)
                    raise
                if delay > 0:
                    time.sleep(delay)
                attempt += 1
                continue

            self._hooks.run_after(call, response)
            return response


class AsyncServiceFabricClient(_ClientBase):
    """Asynchronous Service Fabric cluster client."""

    def __init__(
        self,
        *,
        endpoint: str | None = None,
        api_version: str | None = None,
        timeout_seconds: float | None = None,
        server_timeout: int | None = None,
        headers: dict[str, str] | None = None,
        cert_path: str | None = None,
        key_path: str | None = None,
        verify: bool | None = None,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        request_executor: AsyncRequestExecutor | None = None,
        header_provider: AsyncHeaderProvider | None = None,
        retry_policy: RetryPolicy | None = None,
        retryable_operations: Iterable[str] | None = None,
        hook_registry: HookRegistry | None = None,
        validation_mode: ValidationMode | None = None,
    ) -> None:
        self._setup(
            _resolve_config(
                config,
                headers,
                endpoint=endpoint,
                api_version=api_version,
                timeout_seconds=timeout_seconds,
                server_timeout=server_timeout,
                cert_path=cert_path,
                key_path=key_path,
                verify=verify,
            ),
            hook_registry=hook_registry,
            header_provider=header_provider,
            retry_policy=retry_policy,
            retryable_operations=retryable_operations,
            validation_mode=validation_mode,
        )
        self._client = http_client or httpx.AsyncClient(**self._http_client_options())
        self._executor: AsyncRequestExecutor = request_executor or AsyncTransport(self._client)
        self._attach_groups(AsyncImageStoreApi)
        self.typed = AsyncTypedServiceFabricFacade(self)
        self.wait = AsyncWaitApi(self)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncServiceFabricClient":
        return cls(config=ClientConfig.from_env(), **kwargs)

    @classmethod
    def from_profile(cls, cluster: str | None = None, **kwargs: Any) -> "AsyncServiceFabricClient":
        return cls(config=ClientConfig.from_profile(cluster), **kwargs)

    def paginate(self, fetch_page: Callable[..., Any], **kwargs: Any) -> AsyncIterator[Any]:
        return aiter_items(fetch_page, **kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncServiceFabricClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        allow_statuses: Iterable[int] | None = None,
        **kwargs: Any,
    ) -> Any:
        call = self._build_call(operation, method, path, **kwargs)
        await self._hooks.run_before_async(call)

        attempt = 1
        while True:
            try:
                provided = await self._header_provider.headers() if self._header_provider is not None else None
                response = await self._executor.request(
                    operation=call.operation,
                    method=call.method,
                    path=call.path,
                    query=call.query,
                    json_body=call.json_body,
                    content=call.content,
                    headers=_with_provider_headers(provided, call),
                    allow_statuses=allow_statuses,
                )
                self._check_response(call.operation, response)
            except Exception as error:
                try:
                    delay = self._retry_delay(call, attempt, error)
                except Exception as policy_error:
                    await self._hooks.run_error_async(call, policy_error)
                    raise
                if delay is None:
                    await self._hooks.run_error_async(call, error)
                    raise
                if delay > 0:
                    await asyncio.sleep(delay)
                attempt += 1
                continue

            await self._hooks.run_after_async(call, response)
            return response
