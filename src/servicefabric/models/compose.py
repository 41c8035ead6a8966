"""Docker Compose deployments."""

from __future__ import annotations

from pydantic import Field

from ._base import FabricModel, PagedList
from .durations import FabricDuration
from .enums import (
    ComposeDeploymentStatus,
    ComposeDeploymentUpgradeState,
    FailureReason,
    UpgradeKind,
    UpgradeMode,
)
from .health import ApplicationHealthPolicy, HealthEvaluationWrapper
from .upgrade import (
    CurrentUpgradeDomainProgressInfo,
    FailureUpgradeDomainProgressInfo,
    MonitoringPolicyDescription,
)


class ComposeDeploymentStatusInfo(FabricModel):
    name: str | None = None
    application_name: str | None = None
    status: ComposeDeploymentStatus | None = None
    status_details: str | None = None


class PagedComposeDeploymentStatusInfoList(PagedList[ComposeDeploymentStatusInfo]):
    pass


class RegistryCredential(FabricModel):
    registry_user_name: str | None = None
    registry_password: str | None = None
    password_encrypted: bool | None = None


class CreateComposeDeploymentDescription(FabricModel):
    deployment_name: str
    compose_file_content: str
    registry_credential: RegistryCredential | None = None


class ComposeDeploymentUpgradeDescription(FabricModel):
    deployment_name: str
    compose_file_content: str
    registry_credential: RegistryCredential | None = None
    upgrade_kind: UpgradeKind = UpgradeKind.ROLLING
    rolling_upgrade_mode: UpgradeMode | None = UpgradeMode.UNMONITORED_AUTO
    upgrade_replica_set_check_timeout_in_seconds: int | None = None
    force_restart: bool | None = None
    monitoring_policy: MonitoringPolicyDescription | None = None
    application_health_policy: ApplicationHealthPolicy | None = None


class ComposeDeploymentUpgradeProgressInfo(FabricModel):
    deployment_name: str | None = None
    application_name: str | None = None
    upgrade_state: ComposeDeploymentUpgradeState | None = None
    upgrade_status_details: str | None = None
    upgrade_kind: UpgradeKind | None = None
    rolling_upgrade_mode: UpgradeMode | None = None
    force_restart: bool | None = None
    upgrade_replica_set_check_timeout_in_seconds: int | None = None
    monitoring_policy: MonitoringPolicyDescription | None = None
    application_health_policy: ApplicationHealthPolicy | None = None
    target_application_type_version: str | None = None
    upgrade_duration: FabricDuration | None = None
    current_upgrade_domain_duration: FabricDuration | None = None
    application_unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)
    current_upgrade_domain_progress: CurrentUpgradeDomainProgressInfo | None = None
    start_timestamp_utc: str | None = None
    failure_timestamp_utc: str | None = None
    failure_reason: FailureReason | None = None
    upgrade_domain_progress_at_failure: FailureUpgradeDomainProgressInfo | None = None
    application_upgrade_status_details: str | None = None
