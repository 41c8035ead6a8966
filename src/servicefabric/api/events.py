"""EventStore queries.

Every query takes a required UTC time window. ``events_types_filter`` is a
comma-separated list of event kinds, for example ``"NodeDown,NodeUp"``.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from ..models.enums import FabricEventKind
from ._common import RequestFn, _entity, _segment

EVENTS_API_VERSION = "6.4"


def _kinds(value: str | Iterable[FabricEventKind | str] | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return ",".join(str(kind) for kind in value)


class EventsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def _query(
        self,
        operation: str,
        path: str,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        events_types_filter: str | Iterable[FabricEventKind | str] | None,
        exclude_analysis_events: bool | None,
        skip_correlation_lookup: bool | None,
        timeout: int | None,
    ) -> Any:
        return self._request(
            operation,
            "GET",
            path,
            query={
                "StartTimeUtc": start_time_utc,
                "EndTimeUtc": end_time_utc,
                "EventsTypesFilter": _kinds(events_types_filter),
                "ExcludeAnalysisEvents": exclude_analysis_events,
                "SkipCorrelationLookup": skip_correlation_lookup,
            },
            api_version=EVENTS_API_VERSION,
            timeout=timeout,
        )

    def get_cluster_event_list(
        self,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_cluster_event_list",
            "/EventsStore/Cluster/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_nodes_event_list(
        self,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_nodes_event_list",
            "/EventsStore/Nodes/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_node_event_list(
        self,
        node_name: str,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_node_event_list",
            f"/EventsStore/Nodes/{_segment(node_name)}/$/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_applications_event_list(
        self,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_applications_event_list",
            "/EventsStore/Applications/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_application_event_list(
        self,
        application_id: str,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_application_event_list",
            f"/EventsStore/Applications/{_entity(application_id)}/$/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_services_event_list(
        self,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_services_event_list",
            "/EventsStore/Services/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_service_event_list(
        self,
        service_id: str,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_service_event_list",
            f"/EventsStore/Services/{_entity(service_id)}/$/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_partitions_event_list(
        self,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_partitions_event_list",
            "/EventsStore/Partitions/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_partition_event_list(
        self,
        partition_id: str,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_partition_event_list",
            f"/EventsStore/Partitions/{_segment(partition_id)}/$/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_partition_replicas_event_list(
        self,
        partition_id: str,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_partition_replicas_event_list",
            f"/EventsStore/Partitions/{_segment(partition_id)}/$/Replicas/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_partition_replica_event_list(
        self,
        partition_id: str,
        replica_id: str,
        start_time_utc: datetime | str,
        end_time_utc: datetime | str,
        *,
        events_types_filter: str | Iterable[FabricEventKind | str] | None = None,
        exclude_analysis_events: bool | None = None,
        skip_correlation_lookup: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._query(
            "events.get_partition_replica_event_list",
            f"/EventsStore/Partitions/{_segment(partition_id)}/$/Replicas/{_segment(replica_id)}/$/Events",
            start_time_utc,
            end_time_utc,
            events_types_filter,
            exclude_analysis_events,
            skip_correlation_lookup,
            timeout,
        )

    def get_correlated_event_list(self, event_instance_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "events.get_correlated_event_list",
            "GET",
            f"/EventsStore/CorrelatedEvents/{_segment(event_instance_id)}/$/Events",
            api_version=EVENTS_API_VERSION,
            timeout=timeout,
        )
