"""Health reports, health policies and the recursive health evaluation tree."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ._base import FabricModel
from .common import NodeId
from .durations import FabricDuration
from .enums import EntityKind, HealthState
from .polymorphic import polymorphic

# Reports and events


class HealthInformation(FabricModel):
    """A health report as submitted by a watchdog or system component."""

    source_id: str
    property: str
    health_state: HealthState
    time_to_live_in_milli_seconds: FabricDuration | None = Field(default=None, alias="TimeToLiveInMilliSeconds")
    description: str | None = None
    sequence_number: str | None = None
    remove_when_expired: bool | None = None
    health_report_id: str | None = None


class HealthEvent(HealthInformation):
    is_expired: bool | None = None
    source_utc_timestamp: datetime | None = None
    last_modified_utc_timestamp: datetime | None = None
    last_ok_transition_at: datetime | None = None
    last_warning_transition_at: datetime | None = None
    last_error_transition_at: datetime | None = None


class HealthStateCount(FabricModel):
    ok_count: int | None = None
    warning_count: int | None = None
    error_count: int | None = None


class EntityKindHealthStateCount(FabricModel):
    entity_kind: EntityKind | None = None
    health_state_count: HealthStateCount | None = None


class HealthStatistics(FabricModel):
    health_state_count_list: list[EntityKindHealthStateCount] = Field(default_factory=list)


# Evaluations


class HealthEvaluation(FabricModel):
    """Why an entity has its aggregated health state.

    Aggregate evaluations nest further evaluations in ``unhealthy_evaluations``.
    """

    kind: str
    aggregated_health_state: HealthState | None = None
    description: str | None = None


class HealthEvaluationWrapper(FabricModel):
    health_evaluation: HealthEvaluationUnion | None = None


class EventHealthEvaluation(HealthEvaluation):
    kind: Literal["Event"] = "Event"
    consider_warning_as_error: bool | None = None
    unhealthy_event: HealthEvent | None = None


class ReplicasHealthEvaluation(HealthEvaluation):
    kind: Literal["Replicas"] = "Replicas"
    max_percent_unhealthy_replicas_per_partition: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class PartitionsHealthEvaluation(HealthEvaluation):
    kind: Literal["Partitions"] = "Partitions"
    max_percent_unhealthy_partitions_per_service: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class DeployedServicePackagesHealthEvaluation(HealthEvaluation):
    kind: Literal["DeployedServicePackages"] = "DeployedServicePackages"
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class DeployedApplicationsHealthEvaluation(HealthEvaluation):
    kind: Literal["DeployedApplications"] = "DeployedApplications"
    max_percent_unhealthy_deployed_applications: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class ServicesHealthEvaluation(HealthEvaluation):
    kind: Literal["Services"] = "Services"
    service_type_name: str | None = None
    max_percent_unhealthy_services: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class NodesHealthEvaluation(HealthEvaluation):
    kind: Literal["Nodes"] = "Nodes"
    max_percent_unhealthy_nodes: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class ApplicationsHealthEvaluation(HealthEvaluation):
    kind: Literal["Applications"] = "Applications"
    max_percent_unhealthy_applications: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class SystemApplicationHealthEvaluation(HealthEvaluation):
    kind: Literal["SystemApplication"] = "SystemApplication"
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class UpgradeDomainDeployedApplicationsHealthEvaluation(HealthEvaluation):
    kind: Literal["UpgradeDomainDeployedApplications"] = "UpgradeDomainDeployedApplications"
    upgrade_domain_name: str | None = None
    max_percent_unhealthy_deployed_applications: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class UpgradeDomainNodesHealthEvaluation(HealthEvaluation):
    kind: Literal["UpgradeDomainNodes"] = "UpgradeDomainNodes"
    upgrade_domain_name: str | None = None
    max_percent_unhealthy_nodes: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class ReplicaHealthEvaluation(HealthEvaluation):
    kind: Literal["Replica"] = "Replica"
    partition_id: str | None = None
    replica_or_instance_id: str | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class PartitionHealthEvaluation(HealthEvaluation):
    kind: Literal["Partition"] = "Partition"
    partition_id: str | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class DeployedServicePackageHealthEvaluation(HealthEvaluation):
    kind: Literal["DeployedServicePackage"] = "DeployedServicePackage"
    node_name: str | None = None
    application_name: str | None = None
    service_manifest_name: str | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class DeployedApplicationHealthEvaluation(HealthEvaluation):
    kind: Literal["DeployedApplication"] = "DeployedApplication"
    node_name: str | None = None
    application_name: str | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class ServiceHealthEvaluation(HealthEvaluation):
    kind: Literal["Service"] = "Service"
    service_name: str | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class NodeHealthEvaluation(HealthEvaluation):
    kind: Literal["Node"] = "Node"
    node_name: str | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class ApplicationHealthEvaluation(HealthEvaluation):
    kind: Literal["Application"] = "Application"
    application_name: str | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class DeltaNodesCheckHealthEvaluation(HealthEvaluation):
    kind: Literal["DeltaNodesCheck"] = "DeltaNodesCheck"
    baseline_error_count: int | None = None
    baseline_total_count: int | None = None
    max_percent_delta_unhealthy_nodes: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class UpgradeDomainDeltaNodesCheckHealthEvaluation(HealthEvaluation):
    kind: Literal["UpgradeDomainDeltaNodesCheck"] = "UpgradeDomainDeltaNodesCheck"
    upgrade_domain_name: str | None = None
    baseline_error_count: int | None = None
    baseline_total_count: int | None = None
    max_percent_upgrade_domain_delta_unhealthy_nodes: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class ApplicationTypeApplicationsHealthEvaluation(HealthEvaluation):
    kind: Literal["ApplicationTypeApplications"] = "ApplicationTypeApplications"
    application_type_name: str | None = None
    max_percent_unhealthy_applications: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


class NodeTypeNodesHealthEvaluation(HealthEvaluation):
    kind: Literal["NodeTypeNodes"] = "NodeTypeNodes"
    node_type_name: str | None = None
    max_percent_unhealthy_nodes: int | None = None
    total_count: int | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)


HealthEvaluationUnion = polymorphic(
    "HealthEvaluation",
    HealthEvaluation,
    "kind",
    EventHealthEvaluation,
    ReplicasHealthEvaluation,
    PartitionsHealthEvaluation,
    DeployedServicePackagesHealthEvaluation,
    DeployedApplicationsHealthEvaluation,
    ServicesHealthEvaluation,
    NodesHealthEvaluation,
    ApplicationsHealthEvaluation,
    SystemApplicationHealthEvaluation,
    UpgradeDomainDeployedApplicationsHealthEvaluation,
    UpgradeDomainNodesHealthEvaluation,
    ReplicaHealthEvaluation,
    PartitionHealthEvaluation,
    DeployedServicePackageHealthEvaluation,
    DeployedApplicationHealthEvaluation,
    ServiceHealthEvaluation,
    NodeHealthEvaluation,
    ApplicationHealthEvaluation,
    DeltaNodesCheckHealthEvaluation,
    UpgradeDomainDeltaNodesCheckHealthEvaluation,
    ApplicationTypeApplicationsHealthEvaluation,
    NodeTypeNodesHealthEvaluation,
)


# Policies


class ServiceTypeHealthPolicy(FabricModel):
    max_percent_unhealthy_partitions_per_service: int | None = None
    max_percent_unhealthy_replicas_per_partition: int | None = None
    max_percent_unhealthy_services: int | None = None


class ServiceTypeHealthPolicyMapItem(FabricModel):
    key: str
    value: ServiceTypeHealthPolicy


class ApplicationHealthPolicy(FabricModel):
    """Percent thresholds (0-100) for evaluating an application's health."""

    consider_warning_as_error: bool | None = None
    max_percent_unhealthy_deployed_applications: int | None = None
    default_service_type_health_policy: ServiceTypeHealthPolicy | None = None
    service_type_health_policy_map: list[ServiceTypeHealthPolicyMapItem] | None = None


class ApplicationHealthPolicyMapItem(FabricModel):
    key: str
    value: ApplicationHealthPolicy


class ApplicationHealthPolicies(FabricModel):
    application_health_policy_map: list[ApplicationHealthPolicyMapItem] | None = None


class ApplicationTypeHealthPolicyMapItem(FabricModel):
    key: str
    value: int


class NodeTypeHealthPolicyMapItem(FabricModel):
    key: str
    value: int


class ClusterHealthPolicy(FabricModel):
    consider_warning_as_error: bool | None = None
    max_percent_unhealthy_nodes: int | None = None
    max_percent_unhealthy_applications: int | None = None
    application_type_health_policy_map: list[ApplicationTypeHealthPolicyMapItem] | None = None
    node_type_health_policy_map: list[NodeTypeHealthPolicyMapItem] | None = None


class ClusterHealthPolicies(FabricModel):
    application_health_policy_map: list[ApplicationHealthPolicyMapItem] | None = None
    cluster_health_policy: ClusterHealthPolicy | None = None


class ClusterUpgradeHealthPolicyObject(FabricModel):
    max_percent_delta_unhealthy_nodes: int | None = None
    max_percent_upgrade_domain_delta_unhealthy_nodes: int | None = None


# Entity health


class EntityHealthState(FabricModel):
    aggregated_health_state: HealthState | None = None


class NodeHealthState(EntityHealthState):
    name: str | None = None
    id: NodeId | None = None


class ApplicationHealthState(EntityHealthState):
    name: str | None = None


class ServiceHealthState(EntityHealthState):
    service_name: str | None = None


class PartitionHealthState(EntityHealthState):
    partition_id: str | None = None


class DeployedApplicationHealthState(EntityHealthState):
    node_name: str | None = None
    application_name: str | None = None


class DeployedServicePackageHealthState(EntityHealthState):
    node_name: str | None = None
    application_name: str | None = None
    service_manifest_name: str | None = None
    service_package_activation_id: str | None = None


class ReplicaHealthState(EntityHealthState):
    service_kind: str
    partition_id: str | None = None


class StatefulServiceReplicaHealthState(ReplicaHealthState):
    service_kind: Literal["Stateful"] = "Stateful"
    replica_id: str | None = None


class StatelessServiceInstanceHealthState(ReplicaHealthState):
    service_kind: Literal["Stateless"] = "Stateless"
    replica_id: str | None = None


ReplicaHealthStateUnion = polymorphic(
    "ReplicaHealthState",
    ReplicaHealthState,
    "service_kind",
    StatefulServiceReplicaHealthState,
    StatelessServiceInstanceHealthState,
)


class EntityHealth(FabricModel):
    aggregated_health_state: HealthState | None = None
    health_events: list[HealthEvent] = Field(default_factory=list)
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)
    health_statistics: HealthStatistics | None = None

    @property
    def is_healthy(self) -> bool:
        return self.aggregated_health_state == HealthState.OK


class ClusterHealth(EntityHealth):
    node_health_states: list[NodeHealthState] = Field(default_factory=list)
    application_health_states: list[ApplicationHealthState] = Field(default_factory=list)


class NodeHealth(EntityHealth):
    name: str | None = None


class ApplicationHealth(EntityHealth):
    name: str | None = None
    service_health_states: list[ServiceHealthState] = Field(default_factory=list)
    deployed_application_health_states: list[DeployedApplicationHealthState] = Field(default_factory=list)


class ServiceHealth(EntityHealth):
    name: str | None = None
    partition_health_states: list[PartitionHealthState] = Field(default_factory=list)


class PartitionHealth(EntityHealth):
    partition_id: str | None = None
    replica_health_states: list[ReplicaHealthStateUnion] = Field(default_factory=list)


class ReplicaHealth(EntityHealth):
    service_kind: str
    partition_id: str | None = None


class StatefulServiceReplicaHealth(ReplicaHealth):
    service_kind: Literal["Stateful"] = "Stateful"
    replica_id: str | None = None


class StatelessServiceInstanceHealth(ReplicaHealth):
    service_kind: Literal["Stateless"] = "Stateless"
    instance_id: str | None = None


ReplicaHealthUnion = polymorphic(
    "ReplicaHealth",
    ReplicaHealth,
    "service_kind",
    StatefulServiceReplicaHealth,
    StatelessServiceInstanceHealth,
)


class DeployedApplicationHealth(EntityHealth):
    name: str | None = None
    node_name: str | None = None
    deployed_service_package_health_states: list[DeployedServicePackageHealthState] = Field(default_factory=list)


class DeployedServicePackageHealth(EntityHealth):
    application_name: str | None = None
    service_manifest_name: str | None = None
    node_name: str | None = None


# Health chunks


class ReplicaHealthStateFilter(FabricModel):
    replica_or_instance_id_filter: str | None = None
    health_state_filter: int | None = None


class PartitionHealthStateFilter(FabricModel):
    partition_id_filter: str | None = None
    health_state_filter: int | None = None
    replica_filters: list[ReplicaHealthStateFilter] | None = None


class ServiceHealthStateFilter(FabricModel):
    service_name_filter: str | None = None
    health_state_filter: int | None = None
    partition_filters: list[PartitionHealthStateFilter] | None = None


class DeployedServicePackageHealthStateFilter(FabricModel):
    service_manifest_name_filter: str | None = None
    service_package_activation_id_filter: str | None = None
    health_state_filter: int | None = None


class DeployedApplicationHealthStateFilter(FabricModel):
    node_name_filter: str | None = None
    health_state_filter: int | None = None
    deployed_service_package_filters: list[DeployedServicePackageHealthStateFilter] | None = None


class ApplicationHealthStateFilter(FabricModel):
    application_name_filter: str | None = None
    application_type_name_filter: str | None = None
    health_state_filter: int | None = None
    service_filters: list[ServiceHealthStateFilter] | None = None
    deployed_application_filters: list[DeployedApplicationHealthStateFilter] | None = None


class NodeHealthStateFilter(FabricModel):
    node_name_filter: str | None = None
    health_state_filter: int | None = None


class ClusterHealthChunkQueryDescription(FabricModel):
    node_filters: list[NodeHealthStateFilter] | None = None
    application_filters: list[ApplicationHealthStateFilter] | None = None
    cluster_health_policy: ClusterHealthPolicy | None = None
    application_health_policies: ApplicationHealthPolicies | None = None


class ReplicaHealthStateChunk(FabricModel):
    replica_or_instance_id: str | None = None
    health_state: HealthState | None = None


class ReplicaHealthStateChunkList(FabricModel):
    items: list[ReplicaHealthStateChunk] = Field(default_factory=list)


class PartitionHealthStateChunk(FabricModel):
    partition_id: str | None = None
    health_state: HealthState | None = None
    replica_health_state_chunks: ReplicaHealthStateChunkList | None = None


class PartitionHealthStateChunkList(FabricModel):
    items: list[PartitionHealthStateChunk] = Field(default_factory=list)


class ServiceHealthStateChunk(FabricModel):
    service_name: str | None = None
    health_state: HealthState | None = None
    partition_health_state_chunks: PartitionHealthStateChunkList | None = None


class ServiceHealthStateChunkList(FabricModel):
    items: list[ServiceHealthStateChunk] = Field(default_factory=list)


class DeployedServicePackageHealthStateChunk(FabricModel):
    service_manifest_name: str | None = None
    service_package_activation_id: str | None = None
    health_state: HealthState | None = None


class DeployedServicePackageHealthStateChunkList(FabricModel):
    items: list[DeployedServicePackageHealthStateChunk] = Field(default_factory=list)


class DeployedApplicationHealthStateChunk(FabricModel):
    node_name: str | None = None
    health_state: HealthState | None = None
    deployed_service_package_health_state_chunks: DeployedServicePackageHealthStateChunkList | None = None


class DeployedApplicationHealthStateChunkList(FabricModel):
    items: list[DeployedApplicationHealthStateChunk] = Field(default_factory=list)


class ApplicationHealthStateChunk(FabricModel):
    application_name: str | None = None
    application_type_name: str | None = None
    health_state: HealthState | None = None
    service_health_state_chunks: ServiceHealthStateChunkList | None = None
    deployed_application_health_state_chunks: DeployedApplicationHealthStateChunkList | None = None


class ApplicationHealthStateChunkList(FabricModel):
    total_count: int | None = None
    items: list[ApplicationHealthStateChunk] = Field(default_factory=list)


class NodeHealthStateChunk(FabricModel):
    node_name: str | None = None
    health_state: HealthState | None = None


class NodeHealthStateChunkList(FabricModel):
    total_count: int | None = None
    items: list[NodeHealthStateChunk] = Field(default_factory=list)


class ClusterHealthChunk(FabricModel):
    health_state: HealthState | None = None
    node_health_state_chunks: NodeHealthStateChunkList | None = None
    application_health_state_chunks: ApplicationHealthStateChunkList | None = None


HealthEvaluationWrapper.model_rebuild()
for _evaluation in (
    ReplicasHealthEvaluation,
    PartitionsHealthEvaluation,
    DeployedServicePackagesHealthEvaluation,
    DeployedApplicationsHealthEvaluation,
    ServicesHealthEvaluation,
    NodesHealthEvaluation,
    ApplicationsHealthEvaluation,
    SystemApplicationHealthEvaluation,
    UpgradeDomainDeployedApplicationsHealthEvaluation,
    UpgradeDomainNodesHealthEvaluation,
    ReplicaHealthEvaluation,
    PartitionHealthEvaluation,
    DeployedServicePackageHealthEvaluation,
    DeployedApplicationHealthEvaluation,
    ServiceHealthEvaluation,
    NodeHealthEvaluation,
    ApplicationHealthEvaluation,
    DeltaNodesCheckHealthEvaluation,
    UpgradeDomainDeltaNodesCheckHealthEvaluation,
    ApplicationTypeApplicationsHealthEvaluation,
    NodeTypeNodesHealthEvaluation,
):
    _evaluation.model_rebuild()
