"""Node queries, health and lifecycle."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.enums import HealthStateFilter, NodeStatusFilter
from ._common import Body, RequestFn, _segment


class NodesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(
        self,
        *,
        continuation_token: str | None = None,
        node_status_filter: NodeStatusFilter | str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "nodes.list",
            "GET",
            "/Nodes",
            query={
                "ContinuationToken": continuation_token,
                "NodeStatusFilter": node_status_filter,
                "MaxResults": max_results,
            },
            api_version="6.3",
            timeout=timeout,
        )

    def get(self, node_name: str, *, timeout: int | None = None) -> Any:
        return self._request("nodes.get", "GET", f"/Nodes/{_segment(node_name)}", timeout=timeout)

    def get_health(
        self,
        node_name: str,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "nodes.get_health",
            "GET",
            f"/Nodes/{_segment(node_name)}/$/GetHealth",
            query={"EventsHealthStateFilter": events_health_state_filter},
            timeout=timeout,
        )

    def get_health_using_policy(
        self,
        node_name: str,
        body: Body | None = None,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "nodes.get_health_using_policy",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/GetHealth",
            query={"EventsHealthStateFilter": events_health_state_filter},
            json_body=body,
            timeout=timeout,
        )

    def report_health(
        self,
        node_name: str,
        body: Body,
        *,
        immediate: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "nodes.report_health",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/ReportHealth",
            query={"Immediate": immediate},
            json_body=body,
            timeout=timeout,
        )

    def get_load(self, node_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "nodes.get_load", "GET", f"/Nodes/{_segment(node_name)}/$/GetLoadInformation", timeout=timeout
        )

    def disable(self, node_name: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "nodes.disable",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/Deactivate",
            json_body=body,
            timeout=timeout,
        )

    def enable(self, node_name: str, *, timeout: int | None = None) -> Any:
        return self._request("nodes.enable", "POST", f"/Nodes/{_segment(node_name)}/$/Activate", timeout=timeout)

    def remove_state(self, node_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "nodes.remove_state", "POST", f"/Nodes/{_segment(node_name)}/$/RemoveNodeState", timeout=timeout
        )

    def restart(self, node_name: str, body: Body | None = None, *, timeout: int | None = None) -> Any:
        return self._request(
            "nodes.restart",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/Restart",
            json_body=body if body is not None else {"NodeInstanceId": "0"},
            timeout=timeout,
        )

    def get_configuration_overrides(self, node_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "nodes.get_configuration_overrides",
            "GET",
            f"/Nodes/{_segment(node_name)}/$/GetConfigurationOverrides",
            api_version="7.0",
            timeout=timeout,
        )

    def add_configuration_parameter_overrides(
        self,
        node_name: str,
        body: Sequence[Body],
        *,
        force: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "nodes.add_configuration_parameter_overrides",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/AddConfigurationParameterOverrides",
            query={"Force": force},
            json_body=list(body),
            api_version="7.0",
            timeout=timeout,
        )

    def remove_configuration_overrides(self, node_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "nodes.remove_configuration_overrides",
            "DELETE",
            f"/Nodes/{_segment(node_name)}/$/RemoveConfigurationOverrides",
            api_version="7.0",
            timeout=timeout,
        )

    def add_tags(self, node_name: str, body: Sequence[str], *, timeout: int | None = None) -> Any:
        return self._request(
            "nodes.add_tags",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/AddNodeTags",
            json_body=list(body),
            api_version="7.2",
            timeout=timeout,
        )

    def remove_tags(self, node_name: str, body: Sequence[str], *, timeout: int | None = None) -> Any:
        return self._request(
            "nodes.remove_tags",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/RemoveNodeTags",
            json_body=list(body),
            api_version="7.2",
            timeout=timeout,
        )
