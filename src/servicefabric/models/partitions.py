"""Partition schemes, partition information and partition load."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ._base import FabricModel, PagedList
from .durations import FabricDuration
from .enums import HealthState, ServicePartitionStatus
from .polymorphic import polymorphic

# Partition scheme, as requested when a service is created


class PartitionSchemeDescription(FabricModel):
    partition_scheme: str


class SingletonPartitionSchemeDescription(PartitionSchemeDescription):
    partition_scheme: Literal["Singleton"] = "Singleton"


class UniformInt64RangePartitionSchemeDescription(PartitionSchemeDescription):
    """``Count`` partitions splitting ``LowKey``..``HighKey`` evenly; keys travel as strings."""

    partition_scheme: Literal["UniformInt64Range"] = "UniformInt64Range"
    count: int
    low_key: str
    high_key: str


class NamedPartitionSchemeDescription(PartitionSchemeDescription):
    partition_scheme: Literal["Named"] = "Named"
    count: int
    names: list[str]


PartitionSchemeDescriptionUnion = polymorphic(
    "PartitionSchemeDescription",
    PartitionSchemeDescription,
    "partition_scheme",
    SingletonPartitionSchemeDescription,
    UniformInt64RangePartitionSchemeDescription,
    NamedPartitionSchemeDescription,
)


# Partition information, as reported for an existing partition


class PartitionInformation(FabricModel):
    service_partition_kind: str
    id: str | None = None


class SingletonPartitionInformation(PartitionInformation):
    service_partition_kind: Literal["Singleton"] = "Singleton"


class Int64RangePartitionInformation(PartitionInformation):
    service_partition_kind: Literal["Int64Range"] = "Int64Range"
    low_key: str | None = None
    high_key: str | None = None


class NamedPartitionInformation(PartitionInformation):
    service_partition_kind: Literal["Named"] = "Named"
    name: str | None = None


PartitionInformationUnion = polymorphic(
    "PartitionInformation",
    PartitionInformation,
    "service_partition_kind",
    SingletonPartitionInformation,
    Int64RangePartitionInformation,
    NamedPartitionInformation,
)


class Epoch(FabricModel):
    configuration_version: str | None = None
    data_loss_version: str | None = None


class ServicePartitionInfo(FabricModel):
    service_kind: str
    health_state: HealthState | None = None
    partition_status: ServicePartitionStatus | None = None
    partition_information: PartitionInformationUnion | None = None


class StatefulServicePartitionInfo(ServicePartitionInfo):
    service_kind: Literal["Stateful"] = "Stateful"
    target_replica_set_size: int | None = None
    min_replica_set_size: int | None = None
    auxiliary_replica_count: int | None = None
    last_quorum_loss_duration: FabricDuration | None = None
    primary_epoch: Epoch | None = None


class StatelessServicePartitionInfo(ServicePartitionInfo):
    service_kind: Literal["Stateless"] = "Stateless"
    instance_count: int | None = None
    min_instance_count: int | None = None
    min_instance_percentage: int | None = None


ServicePartitionInfoUnion = polymorphic(
    "ServicePartitionInfo",
    ServicePartitionInfo,
    "service_kind",
    StatefulServicePartitionInfo,
    StatelessServicePartitionInfo,
)


class PagedServicePartitionInfoList(PagedList[ServicePartitionInfoUnion]):
    pass


# Load


class LoadMetricReport(FabricModel):
    last_reported_utc: datetime | None = None
    name: str | None = None
    value: str | None = None
    current_value: str | None = None


class PartitionLoadInformation(FabricModel):
    partition_id: str | None = None
    primary_load_metric_reports: list[LoadMetricReport] = Field(default_factory=list)
    secondary_load_metric_reports: list[LoadMetricReport] = Field(default_factory=list)
    auxiliary_load_metric_reports: list[LoadMetricReport] = Field(default_factory=list)


class MetricLoadDescription(FabricModel):
    metric_name: str | None = None
    current_load: int | None = None
    predicted_load: int | None = None


class ReplicaMetricLoadDescription(FabricModel):
    node_name: str | None = None
    replica_or_instance_load_entries: list[MetricLoadDescription] | None = None


class PartitionMetricLoadDescription(FabricModel):
    partition_id: str | None = None
    primary_replica_load_entries: list[MetricLoadDescription] | None = None
    secondary_replicas_or_instances_load_entries: list[MetricLoadDescription] | None = None
    secondary_replica_or_instance_load_entries_per_node: list[ReplicaMetricLoadDescription] | None = None
    auxiliary_replicas_load_entries: list[MetricLoadDescription] | None = None
    auxiliary_replica_load_entries_per_node: list[ReplicaMetricLoadDescription] | None = None


class UpdatePartitionLoadResult(FabricModel):
    partition_id: str | None = None
    partition_error_code: int | None = None


class PagedUpdatePartitionLoadResultList(PagedList[UpdatePartitionLoadResult]):
    pass


class LoadedPartitionInformationResult(FabricModel):
    service_name: str | None = None
    partition_id: str | None = None
    metric_name: str | None = None
    load: int | None = None


class LoadedPartitionInformationResultList(PagedList[LoadedPartitionInformationResult]):
    pass
