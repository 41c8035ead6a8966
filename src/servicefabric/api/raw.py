from __future__ import annotations

from typing import Any

from ._common import RequestFn


class RawApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def request(
        self,
        method: str,
        path: str,
        *,
        operation: str = "raw.request",
        query: dict[str, Any] | None = None,
        body: Any | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        allow_statuses: tuple[int, ...] | None = None,
        api_version: str | None = None,
        timeout: int | None = None,
        send_timeout: bool = True,
    ) -> Any:
        return self._request(
            operation=operation,
            method=method,
            path=path,
            query=query,
            json_body=body,
            content=content,
            headers=headers,
            allow_statuses=allow_statuses,
            api_version=api_version,
            timeout=timeout,
            send_timeout=send_timeout,
        )
