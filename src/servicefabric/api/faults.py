"""Fault-injection operations and their progress.

Every fault operation is identified by a caller-chosen ``operation_id`` (a
GUID). Starting the same operation twice with the same id is accepted by the
cluster and does not start a second fault.
"""

from __future__ import annotations

from typing import Any

from ..models.enums import (
    DataLossMode,
    NodeTransitionType,
    OperationStateFilter,
    OperationTypeFilter,
    QuorumLossMode,
    RestartPartitionMode,
)
from ._common import RequestFn, _entity, _segment


def _partition_fault_path(service_id: str, partition_id: str, action: str) -> str:
    return f"/Faults/Services/{_entity(service_id)}/$/GetPartitions/{_segment(partition_id)}/$/{action}"


class FaultsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def start_data_loss(
        self,
        service_id: str,
        partition_id: str,
        operation_id: str,
        data_loss_mode: DataLossMode | str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.start_data_loss",
            "POST",
            _partition_fault_path(service_id, partition_id, "StartDataLoss"),
            query={"OperationId": operation_id, "DataLossMode": data_loss_mode},
            timeout=timeout,
        )

    def get_data_loss_progress(
        self,
        service_id: str,
        partition_id: str,
        operation_id: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.get_data_loss_progress",
            "GET",
            _partition_fault_path(service_id, partition_id, "GetDataLossProgress"),
            query={"OperationId": operation_id},
            timeout=timeout,
        )

    def start_quorum_loss(
        self,
        service_id: str,
        partition_id: str,
        operation_id: str,
        quorum_loss_mode: QuorumLossMode | str,
        quorum_loss_duration: int,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.start_quorum_loss",
            "POST",
            _partition_fault_path(service_id, partition_id, "StartQuorumLoss"),
            query={
                "OperationId": operation_id,
                "QuorumLossMode": quorum_loss_mode,
                "QuorumLossDuration": quorum_loss_duration,
            },
            timeout=timeout,
        )

    def get_quorum_loss_progress(
        self,
        service_id: str,
        partition_id: str,
        operation_id: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.get_quorum_loss_progress",
            "GET",
            _partition_fault_path(service_id, partition_id, "GetQuorumLossProgress"),
            query={"OperationId": operation_id},
            timeout=timeout,
        )

    def start_partition_restart(
        self,
        service_id: str,
        partition_id: str,
        operation_id: str,
        restart_partition_mode: RestartPartitionMode | str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.start_partition_restart",
            "POST",
            _partition_fault_path(service_id, partition_id, "StartRestart"),
            query={"OperationId": operation_id, "RestartPartitionMode": restart_partition_mode},
            timeout=timeout,
        )

    def get_partition_restart_progress(
        self,
        service_id: str,
        partition_id: str,
        operation_id: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.get_partition_restart_progress",
            "GET",
            _partition_fault_path(service_id, partition_id, "GetRestartProgress"),
            query={"OperationId": operation_id},
            timeout=timeout,
        )

    def start_node_transition(
        self,
        node_name: str,
        operation_id: str,
        node_transition_type: NodeTransitionType | str,
        node_instance_id: str,
        stop_duration_in_seconds: int,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.start_node_transition",
            "POST",
            f"/Faults/Nodes/{_segment(node_name)}/$/StartTransition/",
            query={
                "OperationId": operation_id,
                "NodeTransitionType": node_transition_type,
                "NodeInstanceId": node_instance_id,
                "StopDurationInSeconds": stop_duration_in_seconds,
            },
            timeout=timeout,
        )

    def get_node_transition_progress(
        self,
        node_name: str,
        operation_id: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.get_node_transition_progress",
            "GET",
            f"/Faults/Nodes/{_segment(node_name)}/$/GetTransitionProgress",
            query={"OperationId": operation_id},
            timeout=timeout,
        )

    def list_operations(
        self,
        *,
        type_filter: OperationTypeFilter | int = OperationTypeFilter.ALL,
        state_filter: OperationStateFilter | int = OperationStateFilter.ALL,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.list_operations",
            "GET",
            "/Faults/",
            query={"TypeFilter": type_filter, "StateFilter": state_filter},
            timeout=timeout,
        )

    def cancel_operation(
        self,
        operation_id: str,
        *,
        force: bool = False,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "faults.cancel_operation",
            "POST",
            "/Faults/$/Cancel",
            query={"OperationId": operation_id, "Force": force},
            timeout=timeout,
        )
