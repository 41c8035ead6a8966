"""Naming service: names, properties and atomic property batches."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ._common import Body, RequestFn, _entity


class PropertiesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def create_name(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request("properties.create_name", "POST", "/Names/$/Create", json_body=body, timeout=timeout)

    def name_exists(self, name_id: str, *, timeout: int | None = None) -> Any:
        return self._request("properties.name_exists", "GET", f"/Names/{_entity(name_id)}", timeout=timeout)

    def delete_name(self, name_id: str, *, timeout: int | None = None) -> Any:
        return self._request("properties.delete_name", "DELETE", f"/Names/{_entity(name_id)}", timeout=timeout)

    def get_sub_names(
        self,
        name_id: str,
        *,
        recursive: bool | None = None,
        continuation_token: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "properties.get_sub_names",
            "GET",
            f"/Names/{_entity(name_id)}/$/GetSubNames",
            query={"Recursive": recursive, "ContinuationToken": continuation_token},
            timeout=timeout,
        )

    def list(
        self,
        name_id: str,
        *,
        include_values: bool | None = None,
        continuation_token: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "properties.list",
            "GET",
            f"/Names/{_entity(name_id)}/$/GetProperties",
            query={"IncludeValues": include_values, "ContinuationToken": continuation_token},
            timeout=timeout,
        )

    def put(self, name_id: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "properties.put",
            "PUT",
            f"/Names/{_entity(name_id)}/$/GetProperty",
            json_body=body,
            timeout=timeout,
        )

    def get(self, name_id: str, property_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "properties.get",
            "GET",
            f"/Names/{_entity(name_id)}/$/GetProperty",
            query={"PropertyName": property_name},
            timeout=timeout,
        )

    def delete(self, name_id: str, property_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "properties.delete",
            "DELETE",
            f"/Names/{_entity(name_id)}/$/GetProperty",
            query={"PropertyName": property_name},
            timeout=timeout,
        )

    def submit_batch(self, name_id: str, body: Body | Sequence[Body], *, timeout: int | None = None) -> Any:
        """Run a property batch atomically.

        A batch whose check fails comes back as HTTP 409 with a
        ``FailedPropertyBatchInfo`` body; that is returned rather than raised.
        """
        if not hasattr(body, "model_dump") and isinstance(body, Sequence):
            body = {"Operations": list(body)}
        return self._request(
            "properties.submit_batch",
            "POST",
            f"/Names/{_entity(name_id)}/$/GetProperties/$/SubmitBatch",
            json_body=body,
            allow_statuses=(200, 409),
            timeout=timeout,
        )
