"""Docker Compose deployments (preview API)."""

from __future__ import annotations

from typing import Any

from ._common import Body, RequestFn, _segment

COMPOSE_API_VERSION = "6.0-preview"


class ComposeApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def create(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "compose.create",
            "PUT",
            "/ComposeDeployments/$/Create",
            json_body=body,
            api_version=COMPOSE_API_VERSION,
            timeout=timeout,
        )

    def get(self, deployment_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "compose.get",
            "GET",
            f"/ComposeDeployments/{_segment(deployment_name)}",
            api_version=COMPOSE_API_VERSION,
            timeout=timeout,
        )

    def list(
        self,
        *,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "compose.list",
            "GET",
            "/ComposeDeployments",
            query={"ContinuationToken": continuation_token, "MaxResults": max_results},
            api_version=COMPOSE_API_VERSION,
            timeout=timeout,
        )

    def get_upgrade_progress(self, deployment_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "compose.get_upgrade_progress",
            "GET",
            f"/ComposeDeployments/{_segment(deployment_name)}/$/GetUpgradeProgress",
            api_version=COMPOSE_API_VERSION,
            timeout=timeout,
        )

    def remove(self, deployment_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "compose.remove",
            "POST",
            f"/ComposeDeployments/{_segment(deployment_name)}/$/Delete",
            api_version=COMPOSE_API_VERSION,
            timeout=timeout,
        )

    def start_upgrade(self, deployment_name: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "compose.start_upgrade",
            "POST",
            f"/ComposeDeployments/{_segment(deployment_name)}/$/Upgrade",
            json_body=body,
            api_version=COMPOSE_API_VERSION,
            timeout=timeout,
        )

    def start_rollback(self, deployment_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "compose.start_rollback",
            "POST",
            f"/ComposeDeployments/{_segment(deployment_name)}/$/RollbackUpgrade",
            api_version="7.0",
            timeout=timeout,
        )
