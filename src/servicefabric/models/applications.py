"""Application types, applications, application upgrades and load."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ._base import FabricModel, PagedList
from .common import ApplicationParameter
from .durations import FabricDuration
from .enums import (
    ApplicationDefinitionKind,
    ApplicationPackageCleanupPolicy,
    ApplicationStatus,
    ApplicationTypeDefinitionKind,
    ApplicationTypeStatus,
    FailureReason,
    HealthState,
    UpgradeKind,
    UpgradeMode,
    UpgradeSortOrder,
    UpgradeState,
)
from .health import ApplicationHealthPolicy, HealthEvaluationWrapper
from .polymorphic import polymorphic
from .upgrade import (
    CurrentUpgradeDomainProgressInfo,
    CurrentUpgradeUnitsProgressInfo,
    FailureUpgradeDomainProgressInfo,
    MonitoringPolicyDescription,
    RollingUpgradeUpdateDescription,
    UpgradeDomainInfo,
    UpgradeUnitInfo,
)

# Application types


class ApplicationTypeInfo(FabricModel):
    name: str | None = None
    version: str | None = None
    default_parameter_list: list[ApplicationParameter] = Field(default_factory=list)
    status: ApplicationTypeStatus | None = None
    status_details: str | None = None
    application_type_definition_kind: ApplicationTypeDefinitionKind | None = None


class PagedApplicationTypeInfoList(PagedList[ApplicationTypeInfo]):
    pass


class ApplicationTypeManifest(FabricModel):
    manifest: str | None = None


class ProvisionApplicationTypeDescriptionBase(FabricModel):
    kind: str
    async_: bool = Field(default=False, alias="Async")


class ProvisionApplicationTypeDescription(ProvisionApplicationTypeDescriptionBase):
    """Provision from a package already copied to the image store."""

    kind: Literal["ImageStorePath"] = "ImageStorePath"
    application_type_build_path: str
    application_package_cleanup_policy: ApplicationPackageCleanupPolicy | None = None


class ExternalStoreProvisionApplicationTypeDescription(ProvisionApplicationTypeDescriptionBase):
    """Provision from an ``.sfpkg`` downloaded by the cluster from a URI."""

    kind: Literal["ExternalStore"] = "ExternalStore"
    application_package_download_uri: str
    application_type_name: str
    application_type_version: str


ProvisionApplicationTypeDescriptionUnion = polymorphic(
    "ProvisionApplicationTypeDescription",
    ProvisionApplicationTypeDescriptionBase,
    "kind",
    ProvisionApplicationTypeDescription,
    ExternalStoreProvisionApplicationTypeDescription,
)


class UnprovisionApplicationTypeDescriptionInfo(FabricModel):
    application_type_version: str
    async_: bool | None = Field(default=None, alias="Async")


# Applications


class ApplicationMetricDescription(FabricModel):
    name: str | None = None
    maximum_capacity: int | None = None
    reservation_capacity: int | None = None
    total_application_capacity: int | None = None


class ApplicationCapacityDescription(FabricModel):
    minimum_nodes: int | None = None
    maximum_nodes: int | None = None
    application_metrics: list[ApplicationMetricDescription] | None = None


class ManagedApplicationIdentity(FabricModel):
    name: str
    principal_id: str | None = None


class ManagedApplicationIdentityDescription(FabricModel):
    token_service_endpoint: str | None = None
    managed_identities: list[ManagedApplicationIdentity] | None = None


class ApplicationInfo(FabricModel):
    id: str | None = None
    name: str | None = None
    type_name: str | None = None
    type_version: str | None = None
    status: ApplicationStatus | None = None
    parameters: list[ApplicationParameter] = Field(default_factory=list)
    health_state: HealthState | None = None
    application_definition_kind: ApplicationDefinitionKind | None = None
    managed_application_identity: ManagedApplicationIdentityDescription | None = None


class PagedApplicationInfoList(PagedList[ApplicationInfo]):
    pass


class ApplicationDescription(FabricModel):
    name: str
    type_name: str
    type_version: str
    parameter_list: list[ApplicationParameter] | None = None
    application_capacity: ApplicationCapacityDescription | None = None
    managed_application_identity: ManagedApplicationIdentityDescription | None = None


class ApplicationUpdateDescription(FabricModel):
    flags: str | None = None
    remove_application_capacity: bool | None = None
    minimum_nodes: int | None = None
    maximum_nodes: int | None = None
    application_metrics: list[ApplicationMetricDescription] | None = None


class ApplicationLoadMetricInformation(FabricModel):
    name: str | None = None
    reservation_capacity: int | None = None
    application_capacity: int | None = None
    application_load: int | None = None


class ApplicationLoadInfo(FabricModel):
    id: str | None = None
    minimum_nodes: int | None = None
    maximum_nodes: int | None = None
    node_count: int | None = None
    application_load_metric_information: list[ApplicationLoadMetricInformation] = Field(default_factory=list)


# Application upgrades


class ApplicationUpgradeDescription(FabricModel):
    name: str
    target_application_type_version: str
    parameters: list[ApplicationParameter] | None = None
    upgrade_kind: UpgradeKind = UpgradeKind.ROLLING
    rolling_upgrade_mode: UpgradeMode | None = UpgradeMode.UNMONITORED_AUTO
    upgrade_replica_set_check_timeout_in_seconds: int | None = None
    force_restart: bool | None = None
    sort_order: UpgradeSortOrder | None = None
    monitoring_policy: MonitoringPolicyDescription | None = None
    application_health_policy: ApplicationHealthPolicy | None = None
    instance_close_delay_duration_in_seconds: int | None = None
    managed_application_identity: ManagedApplicationIdentityDescription | None = None


class ApplicationUpgradeUpdateDescription(FabricModel):
    name: str
    upgrade_kind: UpgradeKind = UpgradeKind.ROLLING
    application_health_policy: ApplicationHealthPolicy | None = None
    update_description: RollingUpgradeUpdateDescription | None = None


class ApplicationUpgradeProgressInfo(FabricModel):
    name: str | None = None
    type_name: str | None = None
    target_application_type_version: str | None = None
    upgrade_domains: list[UpgradeDomainInfo] = Field(default_factory=list)
    upgrade_units: list[UpgradeUnitInfo] = Field(default_factory=list)
    upgrade_state: UpgradeState | None = None
    next_upgrade_domain: str | None = None
    rolling_upgrade_mode: UpgradeMode | None = None
    upgrade_description: ApplicationUpgradeDescription | None = None
    upgrade_duration_in_milliseconds: FabricDuration | None = None
    upgrade_domain_duration_in_milliseconds: FabricDuration | None = None
    unhealthy_evaluations: list[HealthEvaluationWrapper] = Field(default_factory=list)
    current_upgrade_domain_progress: CurrentUpgradeDomainProgressInfo | None = None
    current_upgrade_units_progress: CurrentUpgradeUnitsProgressInfo | None = None
    start_timestamp_utc: str | None = None
    failure_timestamp_utc: str | None = None
    failure_reason: FailureReason | None = None
    upgrade_domain_progress_at_failure: FailureUpgradeDomainProgressInfo | None = None
    upgrade_status_details: str | None = None
    is_node_by_node: bool | None = None
