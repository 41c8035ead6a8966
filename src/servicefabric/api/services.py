"""Service instances, descriptions, health and name resolution."""

from __future__ import annotations

from typing import Any

from ..models.enums import HealthStateFilter, PartitionKeyType
from ._common import Body, RequestFn, _entity


class ServicesApi:
    """``service_id`` and ``application_id`` accept ``App~Svc`` or ``fabric:/App/Svc``."""

    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(
        self,
        application_id: str,
        *,
        service_type_name: str | None = None,
        continuation_token: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "services.list",
            "GET",
            f"/Applications/{_entity(application_id)}/$/GetServices",
            query={"ServiceTypeName": service_type_name, "ContinuationToken": continuation_token},
            timeout=timeout,
        )

    def get(self, application_id: str, service_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "services.get",
            "GET",
            f"/Applications/{_entity(application_id)}/$/GetServices/{_entity(service_id)}",
            timeout=timeout,
        )

    def get_application_name_info(self, service_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "services.get_application_name_info",
            "GET",
            f"/Services/{_entity(service_id)}/$/GetApplicationName",
            timeout=timeout,
        )

    def create(self, application_id: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "services.create",
            "POST",
            f"/Applications/{_entity(application_id)}/$/GetServices/$/Create",
            json_body=body,
            timeout=timeout,
        )

    def create_from_template(self, application_id: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "services.create_from_template",
            "POST",
            f"/Applications/{_entity(application_id)}/$/GetServices/$/CreateFromTemplate",
            json_body=body,
            timeout=timeout,
        )

    def delete(self, service_id: str, *, force_remove: bool | None = None, timeout: int | None = None) -> Any:
        return self._request(
            "services.delete",
            "POST",
            f"/Services/{_entity(service_id)}/$/Delete",
            query={"ForceRemove": force_remove},
            timeout=timeout,
        )

    def update(self, service_id: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "services.update",
            "POST",
            f"/Services/{_entity(service_id)}/$/Update",
            json_body=body,
            timeout=timeout,
        )

    def get_description(self, service_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "services.get_description",
            "GET",
            f"/Services/{_entity(service_id)}/$/GetDescription",
            timeout=timeout,
        )

    def get_health(
        self,
        service_id: str,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        partitions_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "services.get_health",
            "GET",
            f"/Services/{_entity(service_id)}/$/GetHealth",
            query={
                "EventsHealthStateFilter": events_health_state_filter,
                "PartitionsHealthStateFilter": partitions_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
            },
            timeout=timeout,
        )

    def get_health_using_policy(
        self,
        service_id: str,
        body: Body | None = None,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        partitions_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "services.get_health_using_policy",
            "POST",
            f"/Services/{_entity(service_id)}/$/GetHealth",
            query={
                "EventsHealthStateFilter": events_health_state_filter,
                "PartitionsHealthStateFilter": partitions_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
            },
            json_body=body,
            timeout=timeout,
        )

    def report_health(
        self,
        service_id: str,
        body: Body,
        *,
        immediate: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "services.report_health",
            "POST",
            f"/Services/{_entity(service_id)}/$/ReportHealth",
            query={"Immediate": immediate},
            json_body=body,
            timeout=timeout,
        )

    def resolve(
        self,
        service_id: str,
        *,
        partition_key_type: PartitionKeyType | int | None = None,
        partition_key_value: str | None = None,
        previous_rsp_version: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        """Resolve a partition to its current endpoints.

        Pass the ``Version`` of an earlier resolution as ``previous_rsp_version``
        to force a refresh when the cached endpoints have gone stale.
        """
        return self._request(
            "services.resolve",
            "GET",
            f"/Services/{_entity(service_id)}/$/ResolvePartition",
            query={
                "PartitionKeyType": partition_key_type,
                "PartitionKeyValue": partition_key_value,
                "PreviousRspVersion": previous_rsp_version,
            },
            timeout=timeout,
        )

    def get_unplaced_replica_information(
        self,
        service_id: str,
        *,
        partition_id: str | None = None,
        only_query_primaries: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "services.get_unplaced_replica_information",
            "GET",
            f"/Services/{_entity(service_id)}/$/GetUnplacedReplicaInformation",
            query={"PartitionId": partition_id, "OnlyQueryPrimaries": only_query_primaries},
            timeout=timeout,
        )
