"""Extension points of the Service Fabric clients.

A request executor receives a fully built call: ``query`` already carries
``api-version`` and, outside mesh and repair task operations, the server-side
``timeout``. ``allow_statuses`` lists non-2xx codes an operation treats as a
result rather than an error (for example 409 from a property batch).
"""

from __future__ import annotations

from collections.abc import Awaitable, Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .hooks import RequestCall


@runtime_checkable
class SyncRequestExecutor(Protocol):
    def request(
        self,
        *,
        operation: str,
        method: str,
        path: str,
        query: dict[str, Any] | None = None,
        json_body: Any | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        allow_statuses: Iterable[int] | None = None,
    ) -> Any: ...


@runtime_checkable
class AsyncRequestExecutor(Protocol):
    async def request(
        self,
        *,
        operation: str,
        method: str,
        path: str,
        query: dict[str, Any] | None = None,
        json_body: Any | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        allow_statuses: Iterable[int] | None = None,
    ) -> Any: ...


@runtime_checkable
class SyncHeaderProvider(Protocol):
    """Supplies per-request headers, e.g. a refreshed AAD bearer token."""

    def headers(self) -> dict[str, str]: ...


@runtime_checkable
class AsyncHeaderProvider(Protocol):
    async def headers(self) -> dict[str, str]: ...


@runtime_checkable
class RetryPolicy(Protocol):
    """Decides whether a failed attempt is repeated.

    ``status_code`` is set for cluster responses and ``None`` for transport
    failures. ``attempt`` starts at 1.
    """

    def should_retry(
        self,
        *,
        attempt: int,
        error: Exception | None,
        status_code: int | None,
    ) -> bool: ...

    def next_delay_seconds(self, *, attempt: int) -> float: ...


@runtime_checkable
class PageFetcher(Protocol):
    """A list operation that resumes from a continuation token, e.g. ``client.nodes.list``."""

    def __call__(self, *, continuation_token: str | None = None, **kwargs: Any) -> Any: ...


@runtime_checkable
class AsyncPageFetcher(Protocol):
    def __call__(self, *, continuation_token: str | None = None, **kwargs: Any) -> Awaitable[Any]: ...


@runtime_checkable
class SyncHookMiddleware(Protocol):
    def before(self, call: RequestCall) -> None: ...

    def after(self, call: RequestCall, response: Any) -> None: ...

    def on_error(self, call: RequestCall, error: Exception) -> None: ...


@runtime_checkable
class AsyncHookMiddleware(Protocol):
    async def before(self, call: RequestCall) -> None: ...

    async def after(self, call: RequestCall, response: Any) -> None: ...

    async def on_error(self, call: RequestCall, error: Exception) -> None: ...
