"""Repair tasks and the requests that drive them through their states.

A task moves Created -> Claimed -> Preparing -> Approved -> Executing ->
Restoring -> Completed; every state-changing request carries the ``Version``
the caller last observed and fails if the task changed in between.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ._base import FabricModel
from .enums import ImpactLevel, RepairTaskHealthCheckState, RepairTaskResult, RepairTaskState
from .polymorphic import polymorphic


class RepairTargetDescription(FabricModel):
    kind: str


class NodeRepairTargetDescription(RepairTargetDescription):
    kind: Literal["Node"] = "Node"
    node_names: list[str] = Field(default_factory=list)


RepairTargetDescriptionUnion = polymorphic(
    "RepairTargetDescription",
    RepairTargetDescription,
    "kind",
    NodeRepairTargetDescription,
)


class NodeImpact(FabricModel):
    node_name: str
    impact_level: ImpactLevel | None = None


class RepairImpactDescription(FabricModel):
    kind: str


class NodeRepairImpactDescription(RepairImpactDescription):
    kind: Literal["Node"] = "Node"
    node_impact_list: list[NodeImpact] = Field(default_factory=list)


RepairImpactDescriptionUnion = polymorphic(
    "RepairImpactDescription",
    RepairImpactDescription,
    "kind",
    NodeRepairImpactDescription,
)


class RepairTaskHistory(FabricModel):
    created_utc_timestamp: datetime | None = None
    claimed_utc_timestamp: datetime | None = None
    preparing_utc_timestamp: datetime | None = None
    approved_utc_timestamp: datetime | None = None
    executing_utc_timestamp: datetime | None = None
    restoring_utc_timestamp: datetime | None = None
    completed_utc_timestamp: datetime | None = None
    preparing_health_check_start_utc_timestamp: datetime | None = None
    preparing_health_check_end_utc_timestamp: datetime | None = None
    restoring_health_check_start_utc_timestamp: datetime | None = None
    restoring_health_check_end_utc_timestamp: datetime | None = None


class RepairTask(FabricModel):
    task_id: str
    version: str | None = None
    description: str | None = None
    state: RepairTaskState
    flags: int | None = None
    action: str
    target: RepairTargetDescriptionUnion | None = None
    executor: str | None = None
    executor_data: str | None = None
    impact: RepairImpactDescriptionUnion | None = None
    result_status: RepairTaskResult | None = None
    result_code: int | None = None
    result_details: str | None = None
    history: RepairTaskHistory | None = None
    preparing_health_check_state: RepairTaskHealthCheckState | None = None
    restoring_health_check_state: RepairTaskHealthCheckState | None = None
    perform_preparing_health_check: bool | None = None
    perform_restoring_health_check: bool | None = None


class RepairTaskCancelDescription(FabricModel):
    task_id: str
    version: str | None = None
    request_abort: bool | None = None


class RepairTaskDeleteDescription(FabricModel):
    task_id: str
    version: str | None = None


class RepairTaskApproveDescription(FabricModel):
    task_id: str
    version: str | None = None


class RepairTaskUpdateHealthPolicyDescription(FabricModel):
    task_id: str
    version: str | None = None
    perform_preparing_health_check: bool | None = None
    perform_restoring_health_check: bool | None = None


class RepairTaskUpdateInfo(FabricModel):
    version: str
