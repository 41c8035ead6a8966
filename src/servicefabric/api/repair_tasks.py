"""Repair Manager tasks.

The Repair Manager does not take the per-operation ``timeout`` parameter, so
none of these calls send it.
"""

from __future__ import annotations

from typing import Any

from ..models.enums import RepairTaskStateFilter
from ._common import Body, RequestFn


class RepairTasksApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def create(self, body: Body) -> Any:
        return self._request(
            "repair_tasks.create", "POST", "/$/CreateRepairTask", json_body=body, send_timeout=False
        )

    def cancel(self, body: Body) -> Any:
        return self._request(
            "repair_tasks.cancel", "POST", "/$/CancelRepairTask", json_body=body, send_timeout=False
        )

    def delete(self, body: Body) -> Any:
        return self._request(
            "repair_tasks.delete", "POST", "/$/DeleteRepairTask", json_body=body, send_timeout=False
        )

    def list(
        self,
        *,
        task_id_filter: str | None = None,
        state_filter: RepairTaskStateFilter | int | None = None,
        executor_filter: str | None = None,
    ) -> Any:
        return self._request(
            "repair_tasks.list",
            "GET",
            "/$/GetRepairTaskList",
            query={
                "TaskIdFilter": task_id_filter,
                "StateFilter": state_filter,
                "ExecutorFilter": executor_filter,
            },
            send_timeout=False,
        )

    def force_approve(self, body: Body) -> Any:
        return self._request(
            "repair_tasks.force_approve",
            "POST",
            "/$/ForceApproveRepairTask",
            json_body=body,
            send_timeout=False,
        )

    def update_health_policy(self, body: Body) -> Any:
        return self._request(
            "repair_tasks.update_health_policy",
            "POST",
            "/$/UpdateRepairTaskHealthPolicy",
            json_body=body,
            send_timeout=False,
        )

    def update_execution_state(self, body: Body) -> Any:
        return self._request(
            "repair_tasks.update_execution_state",
            "POST",
            "/$/UpdateRepairExecutionState",
            json_body=body,
            send_timeout=False,
        )
