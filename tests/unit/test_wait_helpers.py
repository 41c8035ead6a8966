from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import pytest

from servicefabric import AsyncServiceFabricClient, ServiceFabricClient
from servicefabric.errors import WaitTimeoutError
from servicefabric.models import ApplicationUpgradeProgressInfo, ClusterUpgradeProgressObject
from servicefabric.wait import AsyncWaitApi, WaitApi, summarize_upgrade


@dataclass
class _ScriptedExecutor:
    """Answers each operation with the next payload from its script, repeating the last one."""

    scripts: dict[str, list[Any]]
    calls: list[dict[str, Any]] = field(default_factory=list)

    def _next(self, operation: str) -> Any:
        script = self.scripts[operation]
        return script.pop(0) if len(script) > 1 else script[0]

    def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return self._next(kwargs["operation"])


@dataclass
class _AsyncScriptedExecutor(_ScriptedExecutor):
    async def request(self, **kwargs: Any) -> Any:  # type: ignore[override]
        self.calls.append(dict(kwargs))
        return self._next(kwargs["operation"])


def test_wait_until_sync_returns_when_predicate_matches() -> None:
    values = iter([0, 0, 3])
    waiter = WaitApi(client=object())
    result = waiter.until(
        lambda: next(values),
        predicate=lambda value: value == 3,
        timeout_seconds=2,
        interval_seconds=0.01,
    )
    assert result == 3


def test_wait_until_sync_raises_timeout() -> None:
    waiter = WaitApi(client=object())
    with pytest.raises(WaitTimeoutError, match="did not match within"):
        waiter.until(
            lambda: 0,
            predicate=lambda value: value == 1,
            timeout_seconds=0.05,
            interval_seconds=0.01,
        )


def test_wait_until_sync_honors_max_attempts() -> None:
    waiter = WaitApi(client=object())
    attempts = {"count": 0}

    def _poll() -> int:
        attempts["count"] += 1
        return 0

    with pytest.raises(WaitTimeoutError):
        waiter.until(
            _poll,
            predicate=lambda value: value == 1,
            timeout_seconds=5,
            interval_seconds=0.01,
            max_attempts=3,
        )
    assert attempts["count"] == 3


def test_wait_until_sync_rejects_invalid_args() -> None:
    waiter = WaitApi(client=object())
    with pytest.raises(ValueError):
        waiter.until(lambda: 1, timeout_seconds=0)
    with pytest.raises(ValueError):
        waiter.until(lambda: 1, interval_seconds=0)
    with pytest.raises(ValueError):
        waiter.until(lambda: 1, initial_delay_seconds=-1)
    with pytest.raises(ValueError):
        waiter.until(lambda: 1, max_attempts=0)


@pytest.mark.asyncio
async def test_wait_until_async_supports_async_predicate() -> None:
    async_waiter = AsyncWaitApi(client=object())
    values = iter([0, 0, 2])

    async def _poll() -> int:
        return next(values)

    async def _predicate(value: int) -> bool:
        return value == 2

    result = await async_waiter.until(_poll, predicate=_predicate, timeout_seconds=1, interval_seconds=0.01)
    assert result == 2


@pytest.mark.asyncio
async def test_wait_until_async_raises_timeout() -> None:
    async_waiter = AsyncWaitApi(client=object())
    with pytest.raises(WaitTimeoutError):
        await async_waiter.until(
            lambda: 0,
            predicate=lambda value: value == 1,
            timeout_seconds=0.05,
            interval_seconds=0.01,
        )


def test_cluster_upgrade_waits_for_terminal_state() -> None:
    executor = _ScriptedExecutor(
        {
            "cluster.get_upgrade_progress": [
                {"UpgradeState": "RollingForwardInProgress"},
                {"UpgradeState": "RollingForwardInProgress"},
                {"UpgradeState": "RollingForwardCompleted", "CodeVersion": "10.1.1"},
            ]
        }
    )
    client = ServiceFabricClient(request_executor=executor)
    try:
        progress = client.wait.cluster_upgrade(interval_seconds=0.01, timeout_seconds=2)
    finally:
        client.close()

    assert progress["CodeVersion"] == "10.1.1"
    assert len(executor.calls) == 3


def test_application_upgrade_stops_on_failure() -> None:
    executor = _ScriptedExecutor(
        {"applications.get_upgrade": [{"UpgradeState": "RollingBackInProgress"}, {"UpgradeState": "Failed"}]}
    )
    client = ServiceFabricClient(request_executor=executor)
    try:
        progress = client.wait.application_upgrade("fabric:/Voting", interval_seconds=0.01, timeout_seconds=2)
    finally:
        client.close()

    assert progress["UpgradeState"] == "Failed"
    assert executor.calls[0]["path"] == "/Applications/Voting/$/GetUpgradeProgress"


def test_fault_operation_polls_progress_callable() -> None:
    executor = _ScriptedExecutor(
        {
            "faults.get_quorum_loss_progress": [
                {"State": "Running"},
                {"State": "Completed", "InvokeQuorumLossResult": {"ErrorCode": 0}},
            ]
        }
    )
    client = ServiceFabricClient(request_executor=executor)
    try:
        progress = client.wait.fault_operation(
            lambda: client.faults.get_quorum_loss_progress("Voting~Data", "p-1", "op-1"),
            interval_seconds=0.01,
            timeout_seconds=2,
        )
    finally:
        client.close()

    assert progress["State"] == "Completed"
    assert executor.calls[-1]["query"]["OperationId"] == "op-1"


def test_repair_task_matches_exact_task_id() -> None:
    executor = _ScriptedExecutor(
        {
            "repair_tasks.list": [
                [{"TaskId": "Azure/PlatformUpdate/1-a", "State": "Completed", "Action": "x"}],
                [
                    {"TaskId": "Azure/PlatformUpdate/1-a", "State": "Completed", "Action": "x"},
                    {"TaskId": "Azure/PlatformUpdate/1", "State": "Executing", "Action": "x"},
                ],
            ]
        }
    )
    client = ServiceFabricClient(request_executor=executor)
    try:
        task = client.wait.repair_task(
            "Azure/PlatformUpdate/1", states=("Executing", "Restoring"), interval_seconds=0.01, timeout_seconds=2
        )
    finally:
        client.close()

    assert task["State"] == "Executing"
    assert executor.calls[0]["query"]["TaskIdFilter"] == "Azure/PlatformUpdate/1"


def test_repair_task_rejects_empty_states() -> None:
    waiter = WaitApi(client=object())
    with pytest.raises(ValueError):
        waiter.repair_task("task", states=[" "])


@pytest.mark.asyncio
async def test_async_node_status_waits_for_up() -> None:
    executor = _AsyncScriptedExecutor(
        {"nodes.get": [{"Name": "_Node_0", "NodeStatus": "Down"}, {"Name": "_Node_0", "NodeStatus": "Up"}]}
    )
    client = AsyncServiceFabricClient(request_executor=executor)
    try:
        node = await client.wait.node_status("_Node_0", interval_seconds=0.01, timeout_seconds=2)
    finally:
        await client.close()

    assert node["NodeStatus"] == "Up"
    assert len(executor.calls) == 2


def test_summarize_raw_cluster_upgrade_progress() -> None:
    summary = summarize_upgrade(
        {
            "UpgradeState": "RollingForwardInProgress",
            "UpgradeDomains": [
                {"Name": "UD0", "State": "Completed"},
                {"Name": "UD1", "State": "InProgress"},
                {"Name": "UD2", "State": "Pending"},
                {"Name": "UD3", "State": "Pending"},
            ],
            "CurrentUpgradeDomainProgress": {"DomainName": "UD1", "NodeUpgradeProgressList": []},
            "UpgradeDurationInMilliseconds": "PT30M",
            "UpgradeDescription": {"MonitoringPolicy": {"UpgradeTimeoutInMilliseconds": "3600000"}},
        }
    )

    assert summary.upgrade_state == "RollingForwardInProgress"
    assert summary.completed_domains == 1
    assert summary.total_domains == 4
    assert summary.percent_complete == 25.0
    assert summary.current_domain == "UD1"
    assert summary.elapsed == timedelta(minutes=30)
    assert summary.time_left == timedelta(minutes=30)
    assert summary.is_terminal is False


def test_summarize_parsed_application_upgrade_progress() -> None:
    progress = ApplicationUpgradeProgressInfo.model_validate(
        {
            "Name": "fabric:/Voting",
            "UpgradeState": "RollingForwardCompleted",
            "UpgradeDomains": [{"Name": "UD0", "State": "Completed"}, {"Name": "UD1", "State": "Completed"}],
            "NextUpgradeDomain": "",
            "UpgradeDurationInMilliseconds": "7200000",
            "UpgradeDescription": {
                "Name": "fabric:/Voting",
                "TargetApplicationTypeVersion": "2.0.0",
                "UpgradeKind": "Rolling",
                "MonitoringPolicy": {"UpgradeTimeoutInMilliseconds": "PT1H"},
            },
        }
    )

    summary = summarize_upgrade(progress)

    assert summary.is_terminal is True
    assert summary.completed_domains == 2
    assert summary.current_domain is None
    assert summary.elapsed == timedelta(hours=2)
    assert summary.time_left == timedelta(0)


def test_summarize_without_durations_leaves_time_unknown() -> None:
    summary = summarize_upgrade(ClusterUpgradeProgressObject(upgrade_state="RollingForwardPending"))

    assert summary.elapsed is None
    assert summary.time_left is None
    assert summary.total_domains == 0
    assert summary.percent_complete == 0.0
