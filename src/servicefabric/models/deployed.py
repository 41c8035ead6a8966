"""Applications, service packages and code packages as deployed on a node."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ._base import FabricModel, PagedList
from .enums import (
    DeploymentStatus,
    EntryPointStatus,
    HealthState,
    HostIsolationMode,
    HostType,
    PackageSharingPolicyScope,
    ServiceTypeRegistrationStatus,
)


class DeployedApplicationInfo(FabricModel):
    id: str | None = None
    name: str | None = None
    type_name: str | None = None
    type_version: str | None = None
    status: DeploymentStatus | None = None
    work_directory: str | None = None
    log_directory: str | None = None
    temp_directory: str | None = None
    health_state: HealthState | None = None


class PagedDeployedApplicationInfoList(PagedList[DeployedApplicationInfo]):
    pass


class DeployedServicePackageInfo(FabricModel):
    name: str | None = None
    version: str | None = None
    status: DeploymentStatus | None = None
    service_package_activation_id: str | None = None


class DeployedServiceTypeInfo(FabricModel):
    service_type_name: str | None = None
    service_manifest_name: str | None = None
    code_package_name: str | None = None
    status: ServiceTypeRegistrationStatus | None = None
    service_package_activation_id: str | None = None


class CodePackageEntryPointStatistics(FabricModel):
    last_exit_code: str | None = None
    last_activation_time: datetime | None = None
    last_exit_time: datetime | None = None
    last_successful_activation_time: datetime | None = None
    last_successful_exit_time: datetime | None = None
    activation_count: str | None = None
    activation_failure_count: str | None = None
    continuous_activation_failure_count: str | None = None
    exit_count: str | None = None
    exit_failure_count: str | None = None
    continuous_exit_failure_count: str | None = None


class CodePackageEntryPoint(FabricModel):
    entry_point_location: str | None = None
    process_id: str | None = None
    run_as_user_name: str | None = None
    code_package_entry_point_statistics: CodePackageEntryPointStatistics | None = None
    status: EntryPointStatus | None = None
    next_activation_time: datetime | None = None
    instance_id: str | None = None
    container_id: str | None = None


class DeployedCodePackageInfo(FabricModel):
    name: str | None = None
    version: str | None = None
    service_manifest_name: str | None = None
    service_package_activation_id: str | None = None
    host_type: HostType | None = None
    host_isolation_mode: HostIsolationMode | None = None
    status: DeploymentStatus | None = None
    run_frequency_interval: str | None = None
    setup_entry_point: CodePackageEntryPoint | None = None
    main_entry_point: CodePackageEntryPoint | None = None


class RestartDeployedCodePackageDescription(FabricModel):
    """``CodePackageInstanceId`` ``"0"`` restarts the running instance."""

    service_manifest_name: str
    service_package_activation_id: str | None = None
    code_package_name: str
    code_package_instance_id: str = "0"


class PackageSharingPolicyInfo(FabricModel):
    shared_package_name: str | None = None
    package_sharing_scope: PackageSharingPolicyScope | None = None


class DeployServicePackageToNodeDescription(FabricModel):
    service_manifest_name: str
    application_type_name: str
    application_type_version: str
    node_name: str
    package_sharing_policy: list[PackageSharingPolicyInfo] | None = None


class ContainerLogs(FabricModel):
    content: str | None = None


class ContainerApiRequestBody(FabricModel):
    http_verb: str | None = None
    uri_path: str
    content_type: str | None = Field(default=None, alias="Content-Type")
    body: str | None = None


class ContainerApiResult(FabricModel):
    status: int | None = None
    content_type: str | None = Field(default=None, alias="Content-Type")
    content_encoding: str | None = Field(default=None, alias="Content-Encoding")
    body: str | None = None


class ContainerApiResponse(FabricModel):
    container_api_result: ContainerApiResult | None = None
