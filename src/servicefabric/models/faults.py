"""Progress of fault-injection operations (data loss, quorum loss, restarts, node transitions)."""

from __future__ import annotations

from ._base import FabricModel
from .enums import OperationState, OperationType


class SelectedPartition(FabricModel):
    service_name: str | None = None
    partition_id: str | None = None


class InvokeDataLossResult(FabricModel):
    error_code: int | None = None
    selected_partition: SelectedPartition | None = None


class InvokeQuorumLossResult(FabricModel):
    error_code: int | None = None
    selected_partition: SelectedPartition | None = None


class RestartPartitionResult(FabricModel):
    error_code: int | None = None
    selected_partition: SelectedPartition | None = None


class NodeResult(FabricModel):
    node_name: str | None = None
    node_instance_id: str | None = None


class NodeTransitionResult(FabricModel):
    error_code: int | None = None
    node_result: NodeResult | None = None


class PartitionDataLossProgress(FabricModel):
    state: OperationState | None = None
    invoke_data_loss_result: InvokeDataLossResult | None = None


class PartitionQuorumLossProgress(FabricModel):
    state: OperationState | None = None
    invoke_quorum_loss_result: InvokeQuorumLossResult | None = None


class PartitionRestartProgress(FabricModel):
    state: OperationState | None = None
    restart_partition_result: RestartPartitionResult | None = None


class NodeTransitionProgress(FabricModel):
    state: OperationState | None = None
    node_transition_result: NodeTransitionResult | None = None


class OperationStatus(FabricModel):
    operation_id: str | None = None
    state: OperationState | None = None
    type: OperationType | None = None
