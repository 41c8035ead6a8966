"""Replicas and instances, cluster-wide and as deployed on a node."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ._base import FabricModel, PagedList
from .enums import (
    HealthState,
    PartitionAccessStatus,
    ReconfigurationPhase,
    ReconfigurationType,
    ReplicaRole,
    ReplicaStatus,
    ReplicatorOperationName,
    ServiceOperationName,
)
from .polymorphic import polymorphic


class ReplicaInfo(FabricModel):
    service_kind: str
    replica_status: ReplicaStatus | None = None
    health_state: HealthState | None = None
    node_name: str | None = None
    address: str | None = None
    last_in_build_duration_in_seconds: str | None = None


class StatefulServiceReplicaInfo(ReplicaInfo):
    service_kind: Literal["Stateful"] = "Stateful"
    replica_role: ReplicaRole | None = None
    replica_id: str | None = None


class StatelessServiceInstanceInfo(ReplicaInfo):
    service_kind: Literal["Stateless"] = "Stateless"
    instance_id: str | None = None


ReplicaInfoUnion = polymorphic(
    "ReplicaInfo",
    ReplicaInfo,
    "service_kind",
    StatefulServiceReplicaInfo,
    StatelessServiceInstanceInfo,
)


class PagedReplicaInfoList(PagedList[ReplicaInfoUnion]):
    pass


# Deployed on a node


class ReconfigurationInformation(FabricModel):
    previous_configuration_role: ReplicaRole | None = None
    reconfiguration_phase: ReconfigurationPhase | None = None
    reconfiguration_type: ReconfigurationType | None = None
    reconfiguration_start_time_utc: datetime | None = None


class DeployedServiceReplicaInfo(FabricModel):
    service_kind: str
    service_name: str | None = None
    service_type_name: str | None = None
    service_manifest_name: str | None = None
    code_package_name: str | None = None
    partition_id: str | None = None
    replica_status: ReplicaStatus | None = None
    address: str | None = None
    service_package_activation_id: str | None = None
    host_process_id: str | None = None


class DeployedStatefulServiceReplicaInfo(DeployedServiceReplicaInfo):
    service_kind: Literal["Stateful"] = "Stateful"
    replica_id: str | None = None
    replica_role: ReplicaRole | None = None
    reconfiguration_information: ReconfigurationInformation | None = None


class DeployedStatelessServiceInstanceInfo(DeployedServiceReplicaInfo):
    service_kind: Literal["Stateless"] = "Stateless"
    instance_id: str | None = None


DeployedServiceReplicaInfoUnion = polymorphic(
    "DeployedServiceReplicaInfo",
    DeployedServiceReplicaInfo,
    "service_kind",
    DeployedStatefulServiceReplicaInfo,
    DeployedStatelessServiceInstanceInfo,
)


class LoadMetricReportInfo(FabricModel):
    name: str | None = None
    value: int | None = None
    current_value: str | None = None
    last_reported_utc: datetime | None = None


class DeployedServiceReplicaDetailInfo(FabricModel):
    service_kind: str
    service_name: str | None = None
    partition_id: str | None = None
    current_service_operation: ServiceOperationName | None = None
    current_service_operation_start_time_utc: datetime | None = None
    reported_load: list[LoadMetricReportInfo] = Field(default_factory=list)


class DeployedStatefulServiceReplicaDetailInfo(DeployedServiceReplicaDetailInfo):
    service_kind: Literal["Stateful"] = "Stateful"
    replica_id: str | None = None
    current_replicator_operation: ReplicatorOperationName | None = None
    read_status: PartitionAccessStatus | None = None
    write_status: PartitionAccessStatus | None = None
    deployed_service_replica_query_result: DeployedStatefulServiceReplicaInfo | None = None


class DeployedStatelessServiceInstanceDetailInfo(DeployedServiceReplicaDetailInfo):
    service_kind: Literal["Stateless"] = "Stateless"
    instance_id: str | None = None
    deployed_service_replica_query_result: DeployedStatelessServiceInstanceInfo | None = None


DeployedServiceReplicaDetailInfoUnion = polymorphic(
    "DeployedServiceReplicaDetailInfo",
    DeployedServiceReplicaDetailInfo,
    "service_kind",
    DeployedStatefulServiceReplicaDetailInfo,
    DeployedStatelessServiceInstanceDetailInfo,
)
