"""Partition queries, health, load and recovery."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.enums import HealthStateFilter
from ._common import Body, RequestFn, _entity, _segment


class PartitionsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(self, service_id: str, *, continuation_token: str | None = None, timeout: int | None = None) -> Any:
        return self._request(
            "partitions.list",
            "GET",
            f"/Services/{_entity(service_id)}/$/GetPartitions",
            query={"ContinuationToken": continuation_token},
            timeout=timeout,
        )

    def get(self, partition_id: str, *, timeout: int | None = None) -> Any:
        return self._request("partitions.get", "GET", f"/Partitions/{_segment(partition_id)}", timeout=timeout)

    def get_service_name_info(self, partition_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "partitions.get_service_name_info",
            "GET",
            f"/Partitions/{_segment(partition_id)}/$/GetServiceName",
            timeout=timeout,
        )

    def get_health(
        self,
        partition_id: str,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        replicas_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "partitions.get_health",
            "GET",
            f"/Partitions/{_segment(partition_id)}/$/GetHealth",
            query={
                "EventsHealthStateFilter": events_health_state_filter,
                "ReplicasHealthStateFilter": replicas_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
            },
            timeout=timeout,
        )

    def get_health_using_policy(
        self,
        partition_id: str,
        body: Body | None = None,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        replicas_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "partitions.get_health_using_policy",
            "POST",
            f"/Partitions/{_segment(partition_id)}/$/GetHealth",
            query={
                "EventsHealthStateFilter": events_health_state_filter,
                "ReplicasHealthStateFilter": replicas_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
            },
            json_body=body,
            timeout=timeout,
        )

    def report_health(
        self,
        partition_id: str,
        body: Body,
        *,
        immediate: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "partitions.report_health",
            "POST",
            f"/Partitions/{_segment(partition_id)}/$/ReportHealth",
            query={"Immediate": immediate},
            json_body=body,
            timeout=timeout,
        )

    def get_load(self, partition_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "partitions.get_load",
            "GET",
            f"/Partitions/{_segment(partition_id)}/$/GetLoadInformation",
            timeout=timeout,
        )

    def reset_load(self, partition_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "partitions.reset_load", "POST", f"/Partitions/{_segment(partition_id)}/$/ResetLoad", timeout=timeout
        )

    def update_load(
        self,
        body: Sequence[Body],
        *,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "partitions.update_load",
            "POST",
            "/$/UpdatePartitionLoad",
            query={"ContinuationToken": continuation_token, "MaxResults": max_results},
            json_body=list(body),
            api_version="7.2",
            timeout=timeout,
        )

    def get_loaded_partition_info_list(
        self,
        metric_name: str,
        *,
        service_name: str | None = None,
        ordering: str | None = None,
        max_results: int | None = None,
        continuation_token: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "partitions.get_loaded_partition_info_list",
            "GET",
            "/$/GetLoadedPartitionInfoList",
            query={
                "MetricName": metric_name,
                "ServiceName": service_name,
                "Ordering": ordering,
                "MaxResults": max_results,
                "ContinuationToken": continuation_token,
            },
            api_version="8.0",
            timeout=timeout,
        )

    def recover(self, partition_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "partitions.recover", "POST", f"/Partitions/{_segment(partition_id)}/$/Recover", timeout=timeout
        )

    def recover_service_partitions(self, service_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "partitions.recover_service_partitions",
            "POST",
            f"/Services/$/{_entity(service_id)}/$/GetPartitions/$/Recover",
            timeout=timeout,
        )

    def recover_system(self, *, timeout: int | None = None) -> Any:
        return self._request("partitions.recover_system", "POST", "/$/RecoverSystemPartitions", timeout=timeout)

    def recover_all(self, *, timeout: int | None = None) -> Any:
        return self._request("partitions.recover_all", "POST", "/$/RecoverAllPartitions", timeout=timeout)

    def move_primary_replica(
        self,
        partition_id: str,
        *,
        node_name: str | None = None,
        ignore_constraints: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "partitions.move_primary_replica",
            "POST",
            f"/Partitions/{_segment(partition_id)}/$/MovePrimaryReplica",
            query={"NodeName": node_name, "IgnoreConstraints": ignore_constraints},
            api_version="6.5",
            timeout=timeout,
        )

    def move_secondary_replica(
        self,
        partition_id: str,
        current_node_name: str,
        *,
        new_node_name: str | None = None,
        ignore_constraints: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "partitions.move_secondary_replica",
            "POST",
            f"/Partitions/{_segment(partition_id)}/$/MoveSecondaryReplica",
            query={
                "CurrentNodeName": current_node_name,
                "NewNodeName": new_node_name,
                "IgnoreConstraints": ignore_constraints,
            },
            api_version="6.5",
            timeout=timeout,
        )

    def move_instance(
        self,
        service_id: str,
        partition_id: str,
        *,
        current_node_name: str | None = None,
        new_node_name: str | None = None,
        ignore_constraints: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "partitions.move_instance",
            "POST",
            f"/Services/{_entity(service_id)}/$/GetPartitions/{_segment(partition_id)}/$/MoveInstance",
            query={
                "CurrentNodeName": current_node_name,
                "NewNodeName": new_node_name,
                "IgnoreConstraints": ignore_constraints,
            },
            api_version="8.0",
            timeout=timeout,
        )
