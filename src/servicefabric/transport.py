"""httpx-backed request executors for the Service Fabric HTTP gateway.

The client hands these executors a finished query (``api-version`` and the
server ``timeout`` included), so the transport only renders values into
their wire form, sends the request and turns the gateway answer into either
a decoded body or an :class:`~servicefabric.errors.ApiError`.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum, IntEnum, IntFlag
from json import JSONDecodeError
from typing import Any
from urllib.parse import urlencode
from uuid import UUID

import httpx

from .errors import ClientTimeoutError, RequestDetails, TransportError, classify_api_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """One gateway call as the executor received it."""

    operation: str
    method: str
    path: str
    query: dict[str, Any] | None = None
    json_body: Any | None = None
    content: bytes | None = None
    headers: dict[str, str] | None = None
    allow_statuses: Iterable[int] | None = None

    @property
    def url(self) -> str:
        return self.path + encode_query(self.query)

    def accepts(self, status_code: int) -> bool:
        if 200 <= status_code < 300:
            return True
        return self.allow_statuses is not None and status_code in tuple(self.allow_statuses)


def encode_query_value(value: Any) -> str:
    # Health and status filters are bit masks on the wire, other enums go by name.
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (IntFlag, IntEnum)):
        return str(int(value))
    if isinstance(value, Enum):
        return encode_query_value(value.value)
    if isinstance(value, datetime):
        utc = value.astimezone(timezone.utc) if value.tzinfo is not None else value
        return utc.isoformat().replace("+00:00", "Z")
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(encode_query_value(item) for item in value)
    if isinstance(value, UUID):
        return str(value)
    return str(value)


def encode_query(params: dict[str, Any] | None) -> str:
    pairs = [(key, encode_query_value(value)) for key, value in (params or {}).items() if value is not None]
    return "?" + urlencode(pairs) if pairs else ""


def parse_response_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    if "json" in response.headers.get("content-type", ""):
        try:
            return response.json()
        except JSONDecodeError:
            pass
    return response.text


def validate_status(response: httpx.Response, options: RequestOptions) -> None:
    if options.accepts(response.status_code):
        return
    raise classify_api_error(
        RequestDetails(
            operation=options.operation,
            method=options.method,
            path=options.path,
            status_code=response.status_code,
            response_body=parse_response_body(response),
        )
    )


@contextmanager
def _gateway_errors(options: RequestOptions) -> Iterator[None]:
    try:
        yield
    except httpx.TimeoutException as error:
        raise ClientTimeoutError(f"{options.operation}: {error}") from error
    except httpx.HTTPError as error:
        raise TransportError(f"{options.operation}: {error}") from error


class _GatewayTransport:
    def _prepare(self, client: httpx.Client | httpx.AsyncClient, options: RequestOptions) -> httpx.Request:
        logger.debug("%s %s (%s)", options.method, options.path, options.operation)
        if options.content is not None:
            return client.build_request(options.method, options.url, content=options.content, headers=options.headers)
        return client.build_request(options.method, options.url, json=options.json_body, headers=options.headers)

    def _finish(self, options: RequestOptions, response: httpx.Response, started: float) -> Any:
        logger.debug(
            "%s %s -> %s in %.1f ms",
            options.method,
            options.path,
            response.status_code,
            (time.perf_counter() - started) * 1000.0,
        )
        validate_status(response, options)
        return parse_response_body(response)


class SyncTransport(_GatewayTransport):
    def __init__(self, client: httpx.Client) -> None:
        self._client = client

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
    ) -> Any:
        options = RequestOptions(operation, method, path, query, json_body, content, headers, allow_statuses)
        request = self._prepare(self._client, options)
        started = time.perf_counter()
        with _gateway_errors(options):
            response = self._client.send(request)
        return self._finish(options, response, started)


class AsyncTransport(_GatewayTransport):
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

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
    ) -> Any:
        options = RequestOptions(operation, method, path, query, json_body, content, headers, allow_statuses)
        request = self._prepare(self._client, options)
        started = time.perf_counter()
        with _gateway_errors(options):
            response = await self._client.send(request)
        return self._finish(options, response, started)
