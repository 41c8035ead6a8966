"""Cluster nodes: listing, deactivation, restart, load and configuration overrides."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ._base import FabricModel, PagedList
from .common import NodeId
from .durations import FabricDuration
from .enums import (
    CreateFabricDump,
    DeactivationIntent,
    HealthState,
    NodeDeactivationIntent,
    NodeDeactivationStatus,
    NodeDeactivationTaskType,
    NodeStatus,
)
from .upgrade import SafetyCheckWrapper


class NodeDeactivationTaskId(FabricModel):
    id: str | None = None
    node_deactivation_task_type: NodeDeactivationTaskType | None = None


class NodeDeactivationTask(FabricModel):
    node_deactivation_task_id: NodeDeactivationTaskId | None = None
    node_deactivation_intent: NodeDeactivationIntent | None = None


class NodeDeactivationInfo(FabricModel):
    node_deactivation_intent: NodeDeactivationIntent | None = None
    node_deactivation_status: NodeDeactivationStatus | None = None
    node_deactivation_task: list[NodeDeactivationTask] = Field(default_factory=list)
    pending_safety_checks: list[SafetyCheckWrapper] = Field(default_factory=list)


class NodeInfo(FabricModel):
    name: str | None = None
    ip_address_or_fqdn: str | None = Field(default=None, alias="IpAddressOrFQDN")
    type: str | None = None
    code_version: str | None = None
    config_version: str | None = None
    node_status: NodeStatus | None = None
    node_up_time_in_seconds: str | None = None
    health_state: HealthState | None = None
    is_seed_node: bool | None = None
    upgrade_domain: str | None = None
    fault_domain: str | None = None
    id: NodeId | None = None
    instance_id: str | None = None
    node_deactivation_info: NodeDeactivationInfo | None = None
    is_stopped: bool | None = None
    node_down_time_in_seconds: str | None = None
    node_up_at: datetime | None = None
    node_down_at: datetime | None = None
    node_tags: list[str] | None = None
    is_node_by_node_upgrade_in_progress: bool | None = None
    infrastructure_placement_id: str | None = Field(default=None, alias="InfrastructurePlacementID")


class PagedNodeInfoList(PagedList[NodeInfo]):
    pass


class DeactivationIntentDescription(FabricModel):
    deactivation_intent: DeactivationIntent | None = None


class RestartNodeDescription(FabricModel):
    """``NodeInstanceId`` ``"0"`` restarts whatever instance is currently running."""

    node_instance_id: str = "0"
    create_fabric_dump: CreateFabricDump | None = CreateFabricDump.FALSE


class NodeLoadMetricInformation(FabricModel):
    name: str | None = None
    node_capacity: str | None = None
    node_load: str | None = None
    node_remaining_capacity: str | None = None
    is_capacity_violation: bool | None = None
    node_buffered_capacity: str | None = None
    node_remaining_buffered_capacity: str | None = None
    current_node_load: str | None = None
    node_capacity_remaining: str | None = None
    buffered_node_capacity_remaining: str | None = None
    planned_node_load_removal: str | None = None


class NodeLoadInfo(FabricModel):
    node_name: str | None = None
    node_load_metric_information: list[NodeLoadMetricInformation] = Field(default_factory=list)


class ConfigParameterOverride(FabricModel):
    section_name: str
    parameter_name: str
    parameter_value: str
    timeout: FabricDuration | None = None
    persist_across_upgrade: bool | None = None
