"""Sync/async wait helpers for polling cluster state."""

from __future__ import annotations

import asyncio
import inspect
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, TypeVar

from pydantic import BaseModel

from .errors import WaitTimeoutError
from .models.durations import parse_fabric_duration

T = TypeVar("T")

UPGRADE_TERMINAL_STATES = frozenset({"RollingForwardCompleted", "RollingBackCompleted", "Failed"})
FAULT_TERMINAL_STATES = frozenset({"Completed", "Faulted", "Cancelled", "ForceCancelled"})


@dataclass(slots=True)
class UpgradeProgressSummary:
    """Condensed view of a cluster or application upgrade progress payload."""

    upgrade_state: str | None
    completed_domains: int
    total_domains: int
    current_domain: str | None
    elapsed: timedelta | None
    time_left: timedelta | None
    is_terminal: bool

    @property
    def percent_complete(self) -> float:
        if self.total_domains == 0:
            return 100.0 if self.is_terminal else 0.0
        return 100.0 * self.completed_domains / self.total_domains


def _as_wire(value: Any) -> dict[str, Any]:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    return value if isinstance(value, dict) else {}


def _state(value: Any, key: str = "State") -> str | None:
    state = _as_wire(value).get(key)
    return str(state) if state is not None else None


def _duration_or_none(value: Any) -> timedelta | None:
    if value is None:
        return None
    try:
        return parse_fabric_duration(value)
    except ValueError:
        return None


def summarize_upgrade(progress: Any) -> UpgradeProgressSummary:
    """Summarize ``GetUpgradeProgress``-style payloads, raw or parsed.

    ``time_left`` counts down from the monitoring policy's overall upgrade
    timeout and never goes below zero; it is ``None`` when either side is
    unknown.
    """
    data = _as_wire(progress)
    state = _state(data, "UpgradeState")

    domains = [entry for entry in data.get("UpgradeDomains") or [] if isinstance(entry, dict)]
    completed = sum(1 for entry in domains if str(entry.get("State")) == "Completed")

    current = _as_wire(data.get("CurrentUpgradeDomainProgress")).get("DomainName") or data.get("NextUpgradeDomain")

    elapsed = _duration_or_none(data.get("UpgradeDurationInMilliseconds"))
    policy = _as_wire(_as_wire(data.get("UpgradeDescription")).get("MonitoringPolicy"))
    upgrade_timeout = _duration_or_none(policy.get("UpgradeTimeoutInMilliseconds"))
    time_left = None
    if elapsed is not None and upgrade_timeout is not None:
        time_left = max(upgrade_timeout - elapsed, timedelta(0))

    return UpgradeProgressSummary(
        upgrade_state=state,
        completed_domains=completed,
        total_domains=len(domains),
        current_domain=current or None,
        elapsed=elapsed,
        time_left=time_left,
        is_terminal=state in UPGRADE_TERMINAL_STATES,
    )


@dataclass(slots=True)
class _PollSchedule:
    timeout_seconds: float
    interval_seconds: float
    initial_delay_seconds: float
    max_attempts: int | None
    description: str | None
    attempts: int = 0
    started: float = 0.0

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if self.interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        if self.initial_delay_seconds < 0:
            raise ValueError("initial_delay_seconds must be >= 0")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError("max_attempts must be > 0 when provided")

    def start(self) -> None:
        self.started = time.monotonic()

    def record_miss(self) -> None:
        """Count a poll that did not match; raise once the budget is spent."""
        self.attempts += 1
        out_of_attempts = self.max_attempts is not None and self.attempts >= self.max_attempts
        if out_of_attempts or time.monotonic() - self.started >= self.timeout_seconds:
            subject = self.description or "wait condition"
            raise WaitTimeoutError(
                f"{subject} did not match within {self.timeout_seconds:.2f}s after {self.attempts} attempts"
            )


def _normalize_states(states: str | Iterable[str]) -> frozenset[str]:
    values = [states] if isinstance(states, str) else list(states)
    normalized = frozenset(str(value) for value in values if str(value).strip())
    if not normalized:
        raise ValueError("states must include at least one non-empty state")
    return normalized


def _find_repair_task(payload: Any, task_id: str) -> dict[str, Any] | None:
    tasks = payload if isinstance(payload, list) else []
    for task in tasks:
        wire = _as_wire(task)
        if wire.get("TaskId") == task_id:
            return wire
    return None


def _upgrade_done(progress: Any) -> bool:
    return _state(progress, "UpgradeState") in UPGRADE_TERMINAL_STATES


def _fault_done(progress: Any) -> bool:
    return _state(progress) in FAULT_TERMINAL_STATES


class WaitApi:
    """Synchronous wait helpers for upgrades, fault operations, repair tasks and nodes."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def until(
        self,
        poll: Callable[[], T],
        *,
        predicate: Callable[[T], bool] | None = None,
        timeout_seconds: float = 60.0,
        interval_seconds: float = 1.0,
        initial_delay_seconds: float = 0.0,
        max_attempts: int | None = None,
        description: str | None = None,
    ) -> T:
        """Call ``poll`` until ``predicate`` (truthiness by default) accepts its result."""
        schedule = _PollSchedule(timeout_seconds, interval_seconds, initial_delay_seconds, max_attempts, description)
        if initial_delay_seconds > 0:
            time.sleep(initial_delay_seconds)
        schedule.start()
        accept = predicate or bool

        while True:
            value = poll()
            if accept(value):
                return value
            schedule.record_miss()
            time.sleep(interval_seconds)

    def cluster_upgrade(self, *, timeout_seconds: float = 3600.0, interval_seconds: float = 10.0) -> Any:
        return self.until(
            self._client.cluster.get_upgrade_progress,
            predicate=_upgrade_done,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description="cluster upgrade",
        )

    def application_upgrade(
        self,
        application_id: str,
        *,
        timeout_seconds: float = 3600.0,
        interval_seconds: float = 10.0,
    ) -> Any:
        return self.until(
            lambda: self._client.applications.get_upgrade(application_id),
            predicate=_upgrade_done,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description=f"upgrade of application {application_id}",
        )

    def fault_operation(
        self,
        get_progress: Callable[[], Any],
        *,
        timeout_seconds: float = 600.0,
        interval_seconds: float = 2.0,
    ) -> Any:
        return self.until(
            get_progress,
            predicate=_fault_done,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description="fault operation",
        )

    def repair_task(
        self,
        task_id: str,
        states: str | Iterable[str] = ("Completed",),
        *,
        timeout_seconds: float = 3600.0,
        interval_seconds: float = 10.0,
    ) -> dict[str, Any]:
        expected = _normalize_states(states)

        def _matches(payload: Any) -> bool:
            task = _find_repair_task(payload, task_id)
            return task is not None and _state(task) in expected

        payload = self.until(
            lambda: self._client.repair_tasks.list(task_id_filter=task_id),
            predicate=_matches,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description=f"repair task {task_id} state in {', '.join(sorted(expected))}",
        )
        task = _find_repair_task(payload, task_id)
        if task is None:
            raise WaitTimeoutError(f"repair task {task_id} was not available")
        return task

    def node_status(
        self,
        node_name: str,
        statuses: str | Iterable[str] = ("Up",),
        *,
        timeout_seconds: float = 600.0,
        interval_seconds: float = 5.0,
    ) -> Any:
        expected = _normalize_states(statuses)
        return self.until(
            lambda: self._client.nodes.get(node_name),
            predicate=lambda node: _state(node, "NodeStatus") in expected,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description=f"node {node_name} status in {', '.join(sorted(expected))}",
        )


class AsyncWaitApi:
    """Asynchronous wait helpers for upgrades, fault operations, repair tasks and nodes."""

    def __init__(self, client: Any) -> None:
        self._client = client

    async def until(
        self,
        poll: Callable[[], T | Awaitable[T]],
        *,
        predicate: Callable[[T], bool | Awaitable[bool]] | None = None,
        timeout_seconds: float = 60.0,
        interval_seconds: float = 1.0,
        initial_delay_seconds: float = 0.0,
        max_attempts: int | None = None,
        description: str | None = None,
    ) -> T:
        """Like :meth:`WaitApi.until`; ``poll`` and ``predicate`` may be coroutines."""
        schedule = _PollSchedule(timeout_seconds, interval_seconds, initial_delay_seconds, max_attempts, description)
        if initial_delay_seconds > 0:
            await asyncio.sleep(initial_delay_seconds)
        schedule.start()
        accept = predicate or bool

        while True:
            value = poll()
            if inspect.isawaitable(value):
                value = await value
            verdict = accept(value)
            if inspect.isawaitable(verdict):
                verdict = await verdict
            if verdict:
                return value
            schedule.record_miss()
            await asyncio.sleep(interval_seconds)

    async def cluster_upgrade(self, *, timeout_seconds: float = 3600.0, interval_seconds: float = 10.0) -> Any:
        return await self.until(
            self._client.cluster.get_upgrade_progress,
            predicate=_upgrade_done,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description="cluster upgrade",
        )

    async def application_upgrade(
        self,
        application_id: str,
        *,
        timeout_seconds: float = 3600.0,
        interval_seconds: float = 10.0,
    ) -> Any:
        return await self.until(
            lambda: self._client.applications.get_upgrade(application_id),
            predicate=_upgrade_done,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description=f"upgrade of application {application_id}",
        )

    async def fault_operation(
        self,
        get_progress: Callable[[], Any],
        *,
        timeout_seconds: float = 600.0,
        interval_seconds: float = 2.0,
    ) -> Any:
        return await self.until(
            get_progress,
            predicate=_fault_done,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description="fault operation",
        )

    async def repair_task(
        self,
        task_id: str,
        states: str | Iterable[str] = ("Completed",),
        *,
        timeout_seconds: float = 3600.0,
        interval_seconds: float = 10.0,
    ) -> dict[str, Any]:
        expected = _normalize_states(states)

        def _matches(payload: Any) -> bool:
            task = _find_repair_task(payload, task_id)
            return task is not None and _state(task) in expected

        payload = await self.until(
            lambda: self._client.repair_tasks.list(task_id_filter=task_id),
            predicate=_matches,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description=f"repair task {task_id} state in {', '.join(sorted(expected))}",
        )
        task = _find_repair_task(payload, task_id)
        if task is None:
            raise WaitTimeoutError(f"repair task {task_id} was not available")
        return task

    async def node_status(
        self,
        node_name: str,
        statuses: str | Iterable[str] = ("Up",),
        *,
        timeout_seconds: float = 600.0,
        interval_seconds: float = 5.0,
    ) -> Any:
        expected = _normalize_states(statuses)
        return await self.until(
            lambda: self._client.nodes.get(node_name),
            predicate=lambda node: _state(node, "NodeStatus") in expected,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
            description=f"node {node_name} status in {', '.join(sorted(expected))}",
        )
