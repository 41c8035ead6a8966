"""EventStore records.

Every event carries ``Kind``; the entity it concerns is given by the
intermediate class (cluster, node, application, service, partition or
replica). Fields not modelled here are kept as extras.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ._base import FabricModel
from .polymorphic import polymorphic


class FabricEvent(FabricModel):
    kind: str
    event_instance_id: str | None = None
    category: str | None = None
    time_stamp: datetime | None = None
    has_correlated_events: bool | None = None


class ClusterEvent(FabricEvent):
    pass


class NodeEvent(FabricEvent):
    node_name: str | None = None


class ApplicationEvent(FabricEvent):
    application_id: str | None = None


class ServiceEvent(FabricEvent):
    service_id: str | None = None


class PartitionEvent(FabricEvent):
    partition_id: str | None = None


class ReplicaEvent(FabricEvent):
    partition_id: str | None = None
    replica_id: int | None = None


class _HealthReportFields(FabricModel):
    source_id: str | None = None
    property: str | None = None
    health_state: str | None = None
    time_to_live_ms: int | None = None
    sequence_number: int | None = None
    description: str | None = None
    remove_when_expired: bool | None = None
    source_utc_timestamp: datetime | None = None


class _UpgradeFields(FabricModel):
    current_fabric_version: str | None = None
    target_fabric_version: str | None = None
    upgrade_type: str | None = None
    rolling_upgrade_mode: str | None = None
    failure_action: str | None = None
    overall_upgrade_elapsed_time_in_ms: float | None = None


# Cluster


class ClusterNewHealthReportEvent(ClusterEvent, _HealthReportFields):
    kind: Literal["ClusterNewHealthReport"] = "ClusterNewHealthReport"


class ClusterHealthReportExpiredEvent(ClusterEvent, _HealthReportFields):
    kind: Literal["ClusterHealthReportExpired"] = "ClusterHealthReportExpired"


class ClusterUpgradeStartedEvent(ClusterEvent, _UpgradeFields):
    kind: Literal["ClusterUpgradeStarted"] = "ClusterUpgradeStarted"


class ClusterUpgradeDomainCompletedEvent(ClusterEvent, _UpgradeFields):
    kind: Literal["ClusterUpgradeDomainCompleted"] = "ClusterUpgradeDomainCompleted"
    upgrade_state: str | None = None
    upgrade_domains: str | None = None
    upgrade_domain_elapsed_time_in_ms: float | None = None


class ClusterUpgradeCompletedEvent(ClusterEvent, _UpgradeFields):
    kind: Literal["ClusterUpgradeCompleted"] = "ClusterUpgradeCompleted"


class ClusterUpgradeRollbackStartedEvent(ClusterEvent, _UpgradeFields):
    kind: Literal["ClusterUpgradeRollbackStarted"] = "ClusterUpgradeRollbackStarted"
    failure_reason: str | None = None


class ClusterUpgradeRollbackCompletedEvent(ClusterEvent, _UpgradeFields):
    kind: Literal["ClusterUpgradeRollbackCompleted"] = "ClusterUpgradeRollbackCompleted"
    failure_reason: str | None = None


class ChaosStartedEvent(ClusterEvent):
    kind: Literal["ChaosStarted"] = "ChaosStarted"
    max_concurrent_faults: int | None = None
    time_to_run_in_seconds: float | None = None
    max_cluster_stabilization_timeout_in_seconds: float | None = None
    wait_time_between_iterations_in_seconds: float | None = None
    wait_time_between_fautls_in_seconds: float | None = None
    move_replica_fault_enabled: bool | None = None
    included_node_type_list: str | None = None
    included_application_list: str | None = None
    cluster_health_policy: str | None = None
    chaos_context: str | None = None


class ChaosStoppedEvent(ClusterEvent):
    kind: Literal["ChaosStopped"] = "ChaosStopped"
    reason: str | None = None


# Node


class NodeAbortedEvent(NodeEvent):
    kind: Literal["NodeAborted"] = "NodeAborted"
    node_instance: int | None = None
    node_id: str | None = None
    upgrade_domain: str | None = None
    fault_domain: str | None = None
    ip_address_or_fqdn: str | None = Field(None, alias="IpAddressOrFQDN")
    hostname: str | None = None
    is_seed_node: bool | None = None
    node_version: str | None = None


class NodeAddedToClusterEvent(NodeEvent):
    kind: Literal["NodeAddedToCluster"] = "NodeAddedToCluster"
    node_id: str | None = None
    node_instance: int | None = None
    node_type: str | None = None
    fabric_version: str | None = None
    ip_address_or_fqdn: str | None = Field(None, alias="IpAddressOrFQDN")
    node_capacities: str | None = None


class NodeRemovedFromClusterEvent(NodeEvent):
    kind: Literal["NodeRemovedFromCluster"] = "NodeRemovedFromCluster"
    node_id: str | None = None
    node_instance: int | None = None
    node_type: str | None = None
    fabric_version: str | None = None
    ip_address_or_fqdn: str | None = Field(None, alias="IpAddressOrFQDN")
    node_capacities: str | None = None


class NodeClosedEvent(NodeEvent):
    kind: Literal["NodeClosed"] = "NodeClosed"
    node_id: str | None = None
    node_instance: int | None = None
    error: str | None = None


class NodeDeactivateStartedEvent(NodeEvent):
    kind: Literal["NodeDeactivateStarted"] = "NodeDeactivateStarted"
    node_instance: int | None = None
    batch_id: str | None = None
    deactivate_intent: str | None = None


class NodeDeactivateCompletedEvent(NodeEvent):
    kind: Literal["NodeDeactivateCompleted"] = "NodeDeactivateCompleted"
    node_instance: int | None = None
    effective_deactivate_intent: str | None = None
    batch_ids_with_deactivate_intent: str | None = None
    start_time: datetime | None = None


class NodeDownEvent(NodeEvent):
    kind: Literal["NodeDown"] = "NodeDown"
    node_instance: int | None = None
    last_node_up_at: datetime | None = None


class NodeUpEvent(NodeEvent):
    kind: Literal["NodeUp"] = "NodeUp"
    node_instance: int | None = None
    last_node_down_at: datetime | None = None


class NodeOpenSucceededEvent(NodeEvent):
    kind: Literal["NodeOpenSucceeded"] = "NodeOpenSucceeded"
    node_instance: int | None = None
    node_id: str | None = None
    upgrade_domain: str | None = None
    fault_domain: str | None = None
    ip_address_or_fqdn: str | None = Field(None, alias="IpAddressOrFQDN")
    hostname: str | None = None
    is_seed_node: bool | None = None
    node_version: str | None = None


class NodeOpenFailedEvent(NodeEvent):
    kind: Literal["NodeOpenFailed"] = "NodeOpenFailed"
    node_instance: int | None = None
    node_id: str | None = None
    upgrade_domain: str | None = None
    fault_domain: str | None = None
    ip_address_or_fqdn: str | None = Field(None, alias="IpAddressOrFQDN")
    hostname: str | None = None
    is_seed_node: bool | None = None
    node_version: str | None = None
    error: str | None = None


class NodeNewHealthReportEvent(NodeEvent, _HealthReportFields):
    kind: Literal["NodeNewHealthReport"] = "NodeNewHealthReport"
    node_instance_id: int | None = None


class NodeHealthReportExpiredEvent(NodeEvent, _HealthReportFields):
    kind: Literal["NodeHealthReportExpired"] = "NodeHealthReportExpired"
    node_instance_id: int | None = None


class ChaosNodeRestartScheduledEvent(NodeEvent):
    kind: Literal["ChaosNodeRestartScheduled"] = "ChaosNodeRestartScheduled"
    node_instance_id: int | None = None
    fault_group_id: str | None = None
    fault_id: str | None = None


# Application


class ApplicationCreatedEvent(ApplicationEvent):
    kind: Literal["ApplicationCreated"] = "ApplicationCreated"
    application_type_name: str | None = None
    application_type_version: str | None = None
    application_definition_kind: str | None = None


class ApplicationDeletedEvent(ApplicationEvent):
    kind: Literal["ApplicationDeleted"] = "ApplicationDeleted"
    application_type_name: str | None = None
    application_type_version: str | None = None


class ApplicationNewHealthReportEvent(ApplicationEvent, _HealthReportFields):
    kind: Literal["ApplicationNewHealthReport"] = "ApplicationNewHealthReport"
    application_instance_id: int | None = None


class ApplicationHealthReportExpiredEvent(ApplicationEvent, _HealthReportFields):
    kind: Literal["ApplicationHealthReportExpired"] = "ApplicationHealthReportExpired"
    application_instance_id: int | None = None


class _ApplicationUpgradeFields(FabricModel):
    application_type_name: str | None = None
    current_application_type_version: str | None = None
    application_type_version: str | None = None
    overall_upgrade_elapsed_time_in_ms: float | None = None


class ApplicationUpgradeStartedEvent(ApplicationEvent, _ApplicationUpgradeFields):
    kind: Literal["ApplicationUpgradeStarted"] = "ApplicationUpgradeStarted"
    upgrade_type: str | None = None
    rolling_upgrade_mode: str | None = None
    failure_action: str | None = None


class ApplicationUpgradeDomainCompletedEvent(ApplicationEvent, _ApplicationUpgradeFields):
    kind: Literal["ApplicationUpgradeDomainCompleted"] = "ApplicationUpgradeDomainCompleted"
    upgrade_state: str | None = None
    upgrade_domains: str | None = None
    upgrade_domain_elapsed_time_in_ms: float | None = None


class ApplicationUpgradeCompletedEvent(ApplicationEvent, _ApplicationUpgradeFields):
    kind: Literal["ApplicationUpgradeCompleted"] = "ApplicationUpgradeCompleted"


class ApplicationUpgradeRollbackStartedEvent(ApplicationEvent, _ApplicationUpgradeFields):
    kind: Literal["ApplicationUpgradeRollbackStarted"] = "ApplicationUpgradeRollbackStarted"
    failure_reason: str | None = None


class ApplicationUpgradeRollbackCompletedEvent(ApplicationEvent, _ApplicationUpgradeFields):
    kind: Literal["ApplicationUpgradeRollbackCompleted"] = "ApplicationUpgradeRollbackCompleted"
    failure_reason: str | None = None


class _ProcessExitFields(FabricModel):
    service_name: str | None = None
    service_package_name: str | None = None
    service_package_activation_id: str | None = None
    is_exclusive: bool | None = None
    code_package_name: str | None = None
    entry_point_type: str | None = None
    image_name: str | None = None
    container_name: str | None = None
    host_id: str | None = None
    exit_code: int | None = None
    unexpected_termination: bool | None = None
    start_time: datetime | None = None


class ApplicationProcessExitedEvent(ApplicationEvent, _ProcessExitFields):
    kind: Literal["ApplicationProcessExited"] = "ApplicationProcessExited"


class ApplicationContainerInstanceExitedEvent(ApplicationEvent, _ProcessExitFields):
    kind: Literal["ApplicationContainerInstanceExited"] = "ApplicationContainerInstanceExited"


class ChaosCodePackageRestartScheduledEvent(ApplicationEvent):
    kind: Literal["ChaosCodePackageRestartScheduled"] = "ChaosCodePackageRestartScheduled"
    fault_group_id: str | None = None
    fault_id: str | None = None
    node_name: str | None = None
    service_manifest_name: str | None = None
    code_package_name: str | None = None
    service_package_activation_id: str | None = None


# Service


class ServiceCreatedEvent(ServiceEvent):
    kind: Literal["ServiceCreated"] = "ServiceCreated"
    service_type_name: str | None = None
    application_name: str | None = None
    application_type_name: str | None = None
    service_instance: int | None = None
    is_stateful: bool | None = None
    partition_count: int | None = None
    target_replica_set_size: int | None = None
    min_replica_set_size: int | None = None
    service_package_version: str | None = None
    partition_id: str | None = None


class ServiceDeletedEvent(ServiceEvent):
    kind: Literal["ServiceDeleted"] = "ServiceDeleted"
    service_type_name: str | None = None
    application_name: str | None = None
    application_type_name: str | None = None
    service_instance: int | None = None
    is_stateful: bool | None = None
    partition_count: int | None = None
    target_replica_set_size: int | None = None
    min_replica_set_size: int | None = None
    service_package_version: str | None = None


class ServiceNewHealthReportEvent(ServiceEvent, _HealthReportFields):
    kind: Literal["ServiceNewHealthReport"] = "ServiceNewHealthReport"
    instance_id: int | None = None


class ServiceHealthReportExpiredEvent(ServiceEvent, _HealthReportFields):
    kind: Literal["ServiceHealthReportExpired"] = "ServiceHealthReportExpired"
    instance_id: int | None = None


# Partition


class PartitionNewHealthReportEvent(PartitionEvent, _HealthReportFields):
    kind: Literal["PartitionNewHealthReport"] = "PartitionNewHealthReport"


class PartitionHealthReportExpiredEvent(PartitionEvent, _HealthReportFields):
    kind: Literal["PartitionHealthReportExpired"] = "PartitionHealthReportExpired"


class PartitionReconfiguredEvent(PartitionEvent):
    kind: Literal["PartitionReconfigured"] = "PartitionReconfigured"
    node_name: str | None = None
    node_instance_id: str | None = None
    service_type: str | None = None
    cc_epoch_data_loss_version: int | None = None
    cc_epoch_config_version: int | None = None
    reconfig_type: str | None = None
    result: str | None = None
    phase0_duration_ms: float | None = None
    phase1_duration_ms: float | None = None
    phase2_duration_ms: float | None = None
    phase3_duration_ms: float | None = None
    phase4_duration_ms: float | None = None
    total_duration_ms: float | None = None


class PartitionPrimaryMoveAnalysisEvent(PartitionEvent):
    kind: Literal["PartitionPrimaryMoveAnalysis"] = "PartitionPrimaryMoveAnalysis"
    when_move_completed: datetime | None = None
    previous_node: str | None = None
    current_node: str | None = None
    move_reason: str | None = None
    relevant_traces: str | None = None


class ChaosPartitionPrimaryMoveScheduledEvent(PartitionEvent):
    kind: Literal["ChaosPartitionPrimaryMoveScheduled"] = "ChaosPartitionPrimaryMoveScheduled"
    fault_group_id: str | None = None
    fault_id: str | None = None
    service_name: str | None = None
    node_to: str | None = None
    forced_move: bool | None = None


class ChaosPartitionSecondaryMoveScheduledEvent(PartitionEvent):
    kind: Literal["ChaosPartitionSecondaryMoveScheduled"] = "ChaosPartitionSecondaryMoveScheduled"
    fault_group_id: str | None = None
    fault_id: str | None = None
    service_name: str | None = None
    source_node: str | None = None
    destination_node: str | None = None
    forced_move: bool | None = None


# Replica


class StatefulReplicaNewHealthReportEvent(ReplicaEvent, _HealthReportFields):
    kind: Literal["StatefulReplicaNewHealthReport"] = "StatefulReplicaNewHealthReport"
    replica_instance_id: int | None = None


class StatefulReplicaHealthReportExpiredEvent(ReplicaEvent, _HealthReportFields):
    kind: Literal["StatefulReplicaHealthReportExpired"] = "StatefulReplicaHealthReportExpired"
    replica_instance_id: int | None = None


class StatelessReplicaNewHealthReportEvent(ReplicaEvent, _HealthReportFields):
    kind: Literal["StatelessReplicaNewHealthReport"] = "StatelessReplicaNewHealthReport"


class StatelessReplicaHealthReportExpiredEvent(ReplicaEvent, _HealthReportFields):
    kind: Literal["StatelessReplicaHealthReportExpired"] = "StatelessReplicaHealthReportExpired"


class ChaosReplicaRemovalScheduledEvent(ReplicaEvent):
    kind: Literal["ChaosReplicaRemovalScheduled"] = "ChaosReplicaRemovalScheduled"
    fault_group_id: str | None = None
    fault_id: str | None = None
    service_uri: str | None = None


class ChaosReplicaRestartScheduledEvent(ReplicaEvent):
    kind: Literal["ChaosReplicaRestartScheduled"] = "ChaosReplicaRestartScheduled"
    fault_group_id: str | None = None
    fault_id: str | None = None
    service_uri: str | None = None


FABRIC_EVENT_VARIANTS: tuple[type[FabricEvent], ...] = (
    ClusterNewHealthReportEvent,
    ClusterHealthReportExpiredEvent,
    ClusterUpgradeStartedEvent,
    ClusterUpgradeDomainCompletedEvent,
    ClusterUpgradeCompletedEvent,
    ClusterUpgradeRollbackStartedEvent,
    ClusterUpgradeRollbackCompletedEvent,
    ChaosStartedEvent,
    ChaosStoppedEvent,
    NodeAbortedEvent,
    NodeAddedToClusterEvent,
    NodeRemovedFromClusterEvent,
    NodeClosedEvent,
    NodeDeactivateStartedEvent,
    NodeDeactivateCompletedEvent,
    NodeDownEvent,
    NodeUpEvent,
    NodeOpenSucceededEvent,
    NodeOpenFailedEvent,
    NodeNewHealthReportEvent,
    NodeHealthReportExpiredEvent,
    ChaosNodeRestartScheduledEvent,
    ApplicationCreatedEvent,
    ApplicationDeletedEvent,
    ApplicationNewHealthReportEvent,
    ApplicationHealthReportExpiredEvent,
    ApplicationUpgradeStartedEvent,
    ApplicationUpgradeDomainCompletedEvent,
    ApplicationUpgradeCompletedEvent,
    ApplicationUpgradeRollbackStartedEvent,
    ApplicationUpgradeRollbackCompletedEvent,
    ApplicationProcessExitedEvent,
    ApplicationContainerInstanceExitedEvent,
    ChaosCodePackageRestartScheduledEvent,
    ServiceCreatedEvent,
    ServiceDeletedEvent,
    ServiceNewHealthReportEvent,
    ServiceHealthReportExpiredEvent,
    PartitionNewHealthReportEvent,
    PartitionHealthReportExpiredEvent,
    PartitionReconfiguredEvent,
    PartitionPrimaryMoveAnalysisEvent,
    ChaosPartitionPrimaryMoveScheduledEvent,
    ChaosPartitionSecondaryMoveScheduledEvent,
    StatefulReplicaNewHealthReportEvent,
    StatefulReplicaHealthReportExpiredEvent,
    StatelessReplicaNewHealthReportEvent,
    StatelessReplicaHealthReportExpiredEvent,
    ChaosReplicaRemovalScheduledEvent,
    ChaosReplicaRestartScheduledEvent,
)

FabricEventUnion = polymorphic("FabricEvent", FabricEvent, "kind", *FABRIC_EVENT_VARIANTS)
