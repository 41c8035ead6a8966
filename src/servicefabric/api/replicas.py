"""Replicas and instances, cluster-wide and as deployed on nodes."""

from __future__ import annotations

from typing import Any

from ..models.enums import HealthStateFilter, ServiceKind
from ._common import Body, RequestFn, _entity, _segment


class ReplicasApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(self, partition_id: str, *, continuation_token: str | None = None, timeout: int | None = None) -> Any:
        return self._request(
            "replicas.list",
            "GET",
            f"/Partitions/{_segment(partition_id)}/$/GetReplicas",
            query={"ContinuationToken": continuation_token},
            timeout=timeout,
        )

    def get(self, partition_id: str, replica_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "replicas.get",
            "GET",
            f"/Partitions/{_segment(partition_id)}/$/GetReplicas/{_segment(replica_id)}",
            timeout=timeout,
        )

    def get_health(
        self,
        partition_id: str,
        replica_id: str,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "replicas.get_health",
            "GET",
            f"/Partitions/{_segment(partition_id)}/$/GetReplicas/{_segment(replica_id)}/$/GetHealth",
            query={"EventsHealthStateFilter": events_health_state_filter},
            timeout=timeout,
        )

    def get_health_using_policy(
        self,
        partition_id: str,
        replica_id: str,
        body: Body | None = None,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "replicas.get_health_using_policy",
            "POST",
            f"/Partitions/{_segment(partition_id)}/$/GetReplicas/{_segment(replica_id)}/$/GetHealth",
            query={"EventsHealthStateFilter": events_health_state_filter},
            json_body=body,
            timeout=timeout,
        )

    def report_health(
        self,
        partition_id: str,
        replica_id: str,
        body: Body,
        *,
        service_kind: ServiceKind | str = ServiceKind.STATEFUL,
        immediate: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "replicas.report_health",
            "POST",
            f"/Partitions/{_segment(partition_id)}/$/GetReplicas/{_segment(replica_id)}/$/ReportHealth",
            query={"ServiceKind": service_kind, "Immediate": immediate},
            json_body=body,
            timeout=timeout,
        )

    def list_deployed(
        self,
        node_name: str,
        application_id: str,
        *,
        partition_id: str | None = None,
        service_manifest_name: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "replicas.list_deployed",
            "GET",
            f"/Nodes/{_segment(node_name)}/$/GetApplications/{_entity(application_id)}/$/GetReplicas",
            query={"PartitionId": partition_id, "ServiceManifestName": service_manifest_name},
            timeout=timeout,
        )

    def get_deployed_detail(
        self,
        node_name: str,
        partition_id: str,
        replica_id: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "replicas.get_deployed_detail",
            "GET",
            f"/Nodes/{_segment(node_name)}/$/GetPartitions/{_segment(partition_id)}"
            f"/$/GetReplicas/{_segment(replica_id)}/$/GetDetail",
            timeout=timeout,
        )

    def get_deployed_detail_by_partition(
        self,
        node_name: str,
        partition_id: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "replicas.get_deployed_detail_by_partition",
            "GET",
            f"/Nodes/{_segment(node_name)}/$/GetPartitions/{_segment(partition_id)}/$/GetReplicas",
            timeout=timeout,
        )

    def restart(self, node_name: str, partition_id: str, replica_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "replicas.restart",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/GetPartitions/{_segment(partition_id)}"
            f"/$/GetReplicas/{_segment(replica_id)}/$/Restart",
            timeout=timeout,
        )

    def remove(
        self,
        node_name: str,
        partition_id: str,
        replica_id: str,
        *,
        force_remove: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "replicas.remove",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/GetPartitions/{_segment(partition_id)}"
            f"/$/GetReplicas/{_segment(replica_id)}/$/Delete",
            query={"ForceRemove": force_remove},
            timeout=timeout,
        )
