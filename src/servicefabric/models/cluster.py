"""Cluster manifest, versions, upgrades and load."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ._base import CamelModel, FabricModel
from .common import NodeId
from .durations import FabricDuration
from .enums import FailureReason, UpgradeKind, UpgradeMode, UpgradeSortOrder, UpgradeState
from .health import (
    ApplicationHealthPolicies,
    ClusterHealthPolicy,
    ClusterUpgradeHealthPolicyObject,
    HealthEvaluationWrapper,
)
from .upgrade import (
    CurrentUpgradeDomainProgressInfo,
    CurrentUpgradeUnitsProgressInfo,
    FailureUpgradeDomainProgressInfo,
    MonitoringPolicyDescription,
    RollingUpgradeUpdateDescription,
    UpgradeDomainInfo,
    UpgradeUnitInfo,
)


class ClusterManifest(FabricModel):
    manifest: str | None = None


class ClusterVersion(FabricModel):
    version: str | None = None


class ClusterConfiguration(FabricModel):
    cluster_configuration: str | None = None


class FabricCodeVersionInfo(FabricModel):
    code_version: str | None = None


class FabricConfigVersionInfo(FabricModel):
    config_version: str | None = None


class ProvisionFabricDescription(FabricModel):
    code_file_path: str | None = None
    cluster_manifest_file_path: str | None = None


class UnprovisionFabricDescription(FabricModel):
    code_version: str | None = None
    config_version: str | None = None


class StartClusterUpgradeDescription(FabricModel):
    code_version: str | None = None
    config_version: str | None = None
    upgrade_kind: UpgradeKind = UpgradeKind.ROLLING
    rolling_upgrade_mode: UpgradeMode = UpgradeMode.UNMONITORED_AUTO
    upgrade_replica_set_check_timeout_in_seconds: int | None = None
    force_restart: bool | None = None
    sort_order: UpgradeSortOrder | None = None
    monitoring_policy: MonitoringPolicyDescription | None = None
    cluster_health_policy: ClusterHealthPolicy | None = None
    enable_delta_health_evaluation: bool | None = None
    cluster_upgrade_health_policy: ClusterUpgradeHealthPolicyObject | None = None
    application_health_policy_map: ApplicationHealthPolicies | None = None
    instance_close_delay_duration_in_seconds: int | None = None


class ClusterUpgradeDescriptionObject(FabricModel):
    config_version: str | None = None
    code_version: str | None = None
    upgrade_kind: UpgradeKind | None = None
    rolling_upgrade_mode: UpgradeMode | None = None
    upgrade_replica_set_check_timeout_in_seconds: int | None = None
    force_restart: bool | None = None
    sort_order: UpgradeSortOrder | None = None
    enable_delta_health_evaluation: bool | None = None
    monitoring_policy: MonitoringPolicyDescription | None = None
    cluster_health_policy: ClusterHealthPolicy | None = None
    cluster_upgrade_health_policy: ClusterUpgradeHealthPolicyObject | None = None
    application_health_policy_map: ApplicationHealthPolicies | None = None


class UpdateClusterUpgradeDescription(FabricModel):
    upgrade_kind: UpgradeKind = UpgradeKind.ROLLING
    update_description: RollingUpgradeUpdateDescription | None = None
    cluster_health_policy: ClusterHealthPolicy | None = None
    enable_delta_health_evaluation: bool | None = None
    cluster_upgrade_health_policy: ClusterUpgradeHealthPolicyObject | None = None
    application_health_policy_map: ApplicationHealthPolicies | None = None


class ClusterUpgradeProgressObject(FabricModel):
    code_version: str | None = None
    config_version: str | None = None
    upgrade_domains: list[UpgradeDomainInfo] = Field(default_factory=list)
    upgrade_units: list[UpgradeUnitInfo] = Field(default_factory=list)
    upgrade_state: UpgradeState | None = None
    next_upgrade_domain: str | None = None
    rolling_upgrade_mode: UpgradeMode | None = None
    upgrade_description: ClusterUpgradeDescriptionObject | None = None
    upgrade_duration_in_milliseconds: FabricDuration | None = None
    upgrade_domain_duration_in_milliseconds: FabricDuration | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)
    current_upgrade_domain_progress: CurrentUpgradeDomainProgressInfo | None = None
    current_upgrade_units_progress: CurrentUpgradeUnitsProgressInfo | None = None
    start_timestamp_utc: str | None = None
    failure_timestamp_utc: str | None = None
    failure_reason: FailureReason | None = None
    upgrade_domain_progress_at_failure: FailureUpgradeDomainProgressInfo | None = None
    is_node_by_node: bool | None = None


class ClusterConfigurationUpgradeDescription(FabricModel):
    cluster_config: str
    health_check_retry_timeout: FabricDuration | None = None
    health_check_wait_duration_in_seconds: FabricDuration | None = None
    health_check_stable_duration_in_seconds: FabricDuration | None = None
    upgrade_domain_timeout_in_seconds: FabricDuration | None = None
    upgrade_timeout_in_seconds: FabricDuration | None = None
    max_percent_unhealthy_applications: int | None = None
    max_percent_unhealthy_nodes: int | None = None
    max_percent_delta_unhealthy_nodes: int | None = None
    max_percent_upgrade_domain_delta_unhealthy_nodes: int | None = None
    application_health_policies: ApplicationHealthPolicies | None = None


class ClusterConfigurationUpgradeStatusInfo(FabricModel):
    upgrade_state: UpgradeState | None = None
    progress_status: int | None = None
    config_version: str | None = None
    details: str | None = None


class UpgradeOrchestrationServiceState(FabricModel):
    service_state: str | None = None


class UpgradeOrchestrationServiceStateSummary(FabricModel):
    current_code_version: str | None = None
    current_manifest_version: str | None = None
    target_code_version: str | None = None
    target_manifest_version: str | None = None
    pending_upgrade_type: str | None = None


class LoadMetricInformation(FabricModel):
    name: str | None = None
    is_balanced_before: bool | None = None
    is_balanced_after: bool | None = None
    deviation_before: str | None = None
    deviation_after: str | None = None
    balancing_threshold: str | None = None
    action: str | None = None
    activity_threshold: str | None = None
    cluster_capacity: str | None = None
    cluster_load: str | None = None
    current_cluster_load: str | None = None
    cluster_remaining_capacity: str | None = None
    is_cluster_capacity_violation: bool | None = None
    node_buffer_percentage: str | None = None
    min_node_load_value: str | None = None
    min_node_load_node_id: NodeId | None = None
    max_node_load_value: str | None = None
    max_node_load_node_id: NodeId | None = None
    planned_load_removal: str | None = None


class ClusterLoadInfo(FabricModel):
    last_balancing_start_time_utc: datetime | None = None
    last_balancing_end_time_utc: datetime | None = None
    load_metric_information: list[LoadMetricInformation] = Field(default_factory=list)


class AadMetadata(CamelModel):
    authority: str | None = None
    client: str | None = None
    cluster: str | None = None
    login: str | None = None
    redirect: str | None = None
    tenant: str | None = None


class AadMetadataObject(CamelModel):
    type: str | None = None
    metadata: AadMetadata | None = None
