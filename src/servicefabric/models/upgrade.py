"""Rolling upgrade building blocks shared by cluster, application and compose upgrades."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ._base import FabricModel
from .durations import FabricDuration
from .enums import (
    FailureAction,
    NodeUpgradePhase,
    UpgradeDomainState,
    UpgradeMode,
    UpgradeUnitState,
)
from .polymorphic import polymorphic


class UpgradeDomainInfo(FabricModel):
    name: str | None = None
    state: UpgradeDomainState | None = None


class UpgradeUnitInfo(FabricModel):
    name: str | None = None
    state: UpgradeUnitState | None = None


class MonitoringPolicyDescription(FabricModel):
    """How a monitored upgrade waits for health checks and when it gives up.

    Every duration accepts ISO-8601 text or a millisecond count.
    """

    failure_action: FailureAction | None = None
    health_check_wait_duration_in_milliseconds: FabricDuration | None = None
    health_check_stable_duration_in_milliseconds: FabricDuration | None = None
    health_check_retry_timeout_in_milliseconds: FabricDuration | None = None
    upgrade_timeout_in_milliseconds: FabricDuration | None = None
    upgrade_domain_timeout_in_milliseconds: FabricDuration | None = None


class RollingUpgradeUpdateDescription(FabricModel):
    rolling_upgrade_mode: UpgradeMode = UpgradeMode.UNMONITORED_AUTO
    force_restart: bool | None = None
    replica_set_check_timeout_in_milliseconds: int | None = None
    failure_action: FailureAction | None = None
    health_check_wait_duration_in_milliseconds: FabricDuration | None = None
    health_check_stable_duration_in_milliseconds: FabricDuration | None = None
    health_check_retry_timeout_in_milliseconds: FabricDuration | None = None
    upgrade_timeout_in_milliseconds: FabricDuration | None = None
    upgrade_domain_timeout_in_milliseconds: FabricDuration | None = None
    instance_close_delay_duration_in_seconds: int | None = None


# Safety checks


class SafetyCheck(FabricModel):
    kind: str


class PartitionSafetyCheck(SafetyCheck):
    partition_id: str | None = None


class EnsureAvailabilitySafetyCheck(PartitionSafetyCheck):
    kind: Literal["EnsureAvailability"] = "EnsureAvailability"


class EnsurePartitionQuorumSafetyCheck(PartitionSafetyCheck):
    kind: Literal["EnsurePartitionQuorum"] = "EnsurePartitionQuorum"


class WaitForInbuildReplicaSafetyCheck(PartitionSafetyCheck):
    kind: Literal["WaitForInbuildReplica"] = "WaitForInbuildReplica"


class WaitForPrimaryPlacementSafetyCheck(PartitionSafetyCheck):
    kind: Literal["WaitForPrimaryPlacement"] = "WaitForPrimaryPlacement"


class WaitForPrimarySwapSafetyCheck(PartitionSafetyCheck):
    kind: Literal["WaitForPrimarySwap"] = "WaitForPrimarySwap"


class WaitForReconfigurationSafetyCheck(PartitionSafetyCheck):
    kind: Literal["WaitForReconfiguration"] = "WaitForReconfiguration"


class SeedNodeSafetyCheck(SafetyCheck):
    kind: Literal["EnsureSeedNodeQuorum"] = "EnsureSeedNodeQuorum"


SafetyCheckUnion = polymorphic(
    "SafetyCheck",
    SafetyCheck,
    "kind",
    EnsureAvailabilitySafetyCheck,
    EnsurePartitionQuorumSafetyCheck,
    WaitForInbuildReplicaSafetyCheck,
    WaitForPrimaryPlacementSafetyCheck,
    WaitForPrimarySwapSafetyCheck,
    WaitForReconfigurationSafetyCheck,
    SeedNodeSafetyCheck,
)


class SafetyCheckWrapper(FabricModel):
    safety_check: SafetyCheckUnion | None = None


class NodeUpgradeProgressInfo(FabricModel):
    node_name: str | None = None
    upgrade_phase: NodeUpgradePhase | None = None
    pending_safety_checks: list[SafetyCheckWrapper] = Field(default_factory=list)


class CurrentUpgradeDomainProgressInfo(FabricModel):
    domain_name: str | None = None
    node_upgrade_progress_list: list[NodeUpgradeProgressInfo] = Field(default_factory=list)


class CurrentUpgradeUnitsProgressInfo(FabricModel):
    domain_name: str | None = None
    node_upgrade_progress_list: list[NodeUpgradeProgressInfo] = Field(default_factory=list)


class FailureUpgradeDomainProgressInfo(FabricModel):
    domain_name: str | None = None
    node_upgrade_progress_list: list[NodeUpgradeProgressInfo] = Field(default_factory=list)


class ResumeUpgradeDescription(FabricModel):
    upgrade_domain_name: str
