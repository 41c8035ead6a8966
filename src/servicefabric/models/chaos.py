"""Chaos runs, schedules and the event history they produce."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ._base import FabricModel
from .enums import ChaosScheduleStatus, ChaosStatus
from .health import ClusterHealthPolicy
from .polymorphic import polymorphic


class ChaosContext(FabricModel):
    map: dict[str, str] | None = None


class ChaosTargetFilter(FabricModel):
    node_type_inclusion_list: list[str] | None = None
    application_inclusion_list: list[str] | None = None


class ChaosParameters(FabricModel):
    time_to_run_in_seconds: str | None = None
    max_cluster_stabilization_timeout_in_seconds: int | None = None
    max_concurrent_faults: int | None = None
    enable_move_replica_faults: bool | None = None
    wait_time_between_faults_in_seconds: int | None = None
    wait_time_between_iterations_in_seconds: int | None = None
    cluster_health_policy: ClusterHealthPolicy | None = None
    context: ChaosContext | None = None
    chaos_target_filter: ChaosTargetFilter | None = None


class Chaos(FabricModel):
    chaos_parameters: ChaosParameters | None = None
    status: ChaosStatus | None = None
    schedule_status: ChaosScheduleStatus | None = None


# Events


class ChaosEvent(FabricModel):
    kind: str
    time_stamp_utc: datetime | None = None


class StartedChaosEvent(ChaosEvent):
    kind: Literal["Started"] = "Started"
    chaos_parameters: ChaosParameters | None = None


class ExecutingFaultsChaosEvent(ChaosEvent):
    kind: Literal["ExecutingFaults"] = "ExecutingFaults"
    faults: list[str] = Field(default_factory=list)


class WaitingChaosEvent(ChaosEvent):
    kind: Literal["Waiting"] = "Waiting"
    reason: str | None = None


class ValidationFailedChaosEvent(ChaosEvent):
    kind: Literal["ValidationFailed"] = "ValidationFailed"
    reason: str | None = None


class TestErrorChaosEvent(ChaosEvent):
    __test__ = False

    kind: Literal["TestError"] = "TestError"
    reason: str | None = None


class StoppedChaosEvent(ChaosEvent):
    kind: Literal["Stopped"] = "Stopped"
    reason: str | None = None


ChaosEventUnion = polymorphic(
    "ChaosEvent",
    ChaosEvent,
    "kind",
    StartedChaosEvent,
    ExecutingFaultsChaosEvent,
    WaitingChaosEvent,
    ValidationFailedChaosEvent,
    TestErrorChaosEvent,
    StoppedChaosEvent,
)


class ChaosEventWrapper(FabricModel):
    chaos_event: ChaosEventUnion | None = None


class ChaosEventsSegment(FabricModel):
    continuation_token: str | None = None
    history: list[ChaosEventWrapper] = Field(default_factory=list)


# Schedule


class TimeOfDay(FabricModel):
    hour: int | None = None
    minute: int | None = None


class TimeRange(FabricModel):
    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None


class ChaosScheduleJobActiveDaysOfWeek(FabricModel):
    sunday: bool | None = None
    monday: bool | None = None
    tuesday: bool | None = None
    wednesday: bool | None = None
    thursday: bool | None = None
    friday: bool | None = None
    saturday: bool | None = None


class ChaosScheduleJob(FabricModel):
    chaos_parameters: str | None = None
    days: ChaosScheduleJobActiveDaysOfWeek | None = None
    times: list[TimeRange] | None = None


class ChaosParametersDictionaryItem(FabricModel):
    key: str
    value: ChaosParameters


class ChaosSchedule(FabricModel):
    start_date: datetime | None = None
    expiry_date: datetime | None = None
    chaos_parameters_dictionary: list[ChaosParametersDictionaryItem] | None = None
    jobs: list[ChaosScheduleJob] | None = None


class ChaosScheduleDescription(FabricModel):
    version: int | None = None
    schedule: ChaosSchedule | None = None
