"""Mesh container-application resources.

Mesh payloads follow the ARM resource shape ``{"name": ..., "properties":
{...}}`` and use camelCase wire names, unlike the rest of the cluster API.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ._base import CamelModel, CamelPagedList
from .enums import (
    HeaderMatchType,
    HealthState,
    OperatingSystemType,
    PathMatchType,
    ResourceStatus,
    RestartPolicy,
    SettingType,
    SizeTypes,
    UpgradeMode,
    VolumeProvider,
)
from .polymorphic import polymorphic

# Secrets


class SecretResourceProperties(CamelModel):
    kind: str
    description: str | None = None
    status: ResourceStatus | None = None
    status_details: str | None = None
    content_type: str | None = None


class InlinedValueSecretResourceProperties(SecretResourceProperties):
    kind: Literal["inlinedValue"] = "inlinedValue"


class KeyVaultVersionedReferenceSecretResourceProperties(SecretResourceProperties):
    kind: Literal["keyVaultVersionedReference"] = "keyVaultVersionedReference"


SecretResourcePropertiesUnion = polymorphic(
    "SecretResourceProperties",
    SecretResourceProperties,
    "kind",
    InlinedValueSecretResourceProperties,
    KeyVaultVersionedReferenceSecretResourceProperties,
)


class SecretResourceDescription(CamelModel):
    name: str
    properties: SecretResourcePropertiesUnion


class PagedSecretResourceDescriptionList(CamelPagedList[SecretResourceDescription]):
    pass


class SecretValueProperties(CamelModel):
    value: str | None = None


class SecretValueResourceDescription(CamelModel):
    name: str
    properties: SecretValueProperties = Field(default_factory=SecretValueProperties)


class PagedSecretValueResourceDescriptionList(CamelPagedList[SecretValueResourceDescription]):
    pass


class SecretValue(CamelModel):
    value: str | None = None


# Volumes


class VolumeProviderParametersAzureFile(CamelModel):
    account_name: str
    account_key: str | None = None
    share_name: str


class VolumeProperties(CamelModel):
    description: str | None = None
    status: ResourceStatus | None = None
    status_details: str | None = None
    provider: VolumeProvider = VolumeProvider.SF_AZURE_FILE
    azure_file_parameters: VolumeProviderParametersAzureFile | None = None


class VolumeResourceDescription(CamelModel):
    name: str
    properties: VolumeProperties


class PagedVolumeResourceDescriptionList(CamelPagedList[VolumeResourceDescription]):
    pass


# Networks


class NetworkResourceProperties(CamelModel):
    kind: str
    description: str | None = None
    status: ResourceStatus | None = None
    status_details: str | None = None


class LocalNetworkResourceProperties(NetworkResourceProperties):
    kind: Literal["Local"] = "Local"
    network_address_prefix: str | None = None


NetworkResourcePropertiesUnion = polymorphic(
    "NetworkResourceProperties",
    NetworkResourceProperties,
    "kind",
    LocalNetworkResourceProperties,
)


class NetworkResourceDescription(CamelModel):
    name: str
    properties: NetworkResourcePropertiesUnion


class PagedNetworkResourceDescriptionList(CamelPagedList[NetworkResourceDescription]):
    pass


class EndpointRef(CamelModel):
    name: str | None = None


class NetworkRef(CamelModel):
    name: str | None = None
    endpoint_refs: list[EndpointRef] | None = None


# Diagnostics


class DiagnosticsSinkProperties(CamelModel):
    kind: str
    name: str | None = None
    description: str | None = None


class AzureInternalMonitoringPipelineSinkDescription(DiagnosticsSinkProperties):
    kind: Literal["AzureInternalMonitoringPipeline"] = "AzureInternalMonitoringPipeline"
    account_name: str | None = None
    namespace: str | None = None
    ma_config_url: str | None = None
    fluentd_config_url: str | None = None
    auto_key_config_url: str | None = None


DiagnosticsSinkPropertiesUnion = polymorphic(
    "DiagnosticsSinkProperties",
    DiagnosticsSinkProperties,
    "kind",
    AzureInternalMonitoringPipelineSinkDescription,
)


class DiagnosticsDescription(CamelModel):
    sinks: list[DiagnosticsSinkPropertiesUnion] | None = None
    enabled: bool | None = None
    default_sink_refs: list[str] | None = None


class DiagnosticsRef(CamelModel):
    enabled: bool | None = None
    sink_refs: list[str] | None = None


# Code packages


class ImageRegistryCredential(CamelModel):
    server: str
    username: str
    password_type: str | None = None
    password: str | None = None


class EnvironmentVariable(CamelModel):
    type: SettingType | None = None
    name: str | None = None
    value: str | None = None


class Setting(CamelModel):
    type: SettingType | None = None
    name: str | None = None
    value: str | None = None


class ContainerLabel(CamelModel):
    name: str
    value: str


class EndpointProperties(CamelModel):
    name: str
    port: int | None = None


class ResourceRequests(CamelModel):
    memory_in_gb: float = Field(alias="memoryInGB")
    cpu: float


class ResourceLimits(CamelModel):
    memory_in_gb: float | None = Field(default=None, alias="memoryInGB")
    cpu: float | None = None


class ResourceRequirements(CamelModel):
    requests: ResourceRequests
    limits: ResourceLimits | None = None


class VolumeReference(CamelModel):
    name: str
    read_only: bool | None = None
    destination_path: str


class ApplicationScopedVolumeCreationParameters(CamelModel):
    kind: str
    description: str | None = None


class ApplicationScopedVolumeCreationParametersServiceFabricVolumeDisk(
    ApplicationScopedVolumeCreationParameters
):
    kind: Literal["ServiceFabricVolumeDisk"] = "ServiceFabricVolumeDisk"
    size_disk: SizeTypes


ApplicationScopedVolumeCreationParametersUnion = polymorphic(
    "ApplicationScopedVolumeCreationParameters",
    ApplicationScopedVolumeCreationParameters,
    "kind",
    ApplicationScopedVolumeCreationParametersServiceFabricVolumeDisk,
)


class ApplicationScopedVolume(VolumeReference):
    creation_parameters: ApplicationScopedVolumeCreationParametersUnion


class ReliableCollectionsRef(CamelModel):
    name: str
    do_not_persist_state: bool | None = None


class ContainerState(CamelModel):
    state: str | None = None
    start_time: datetime | None = None
    exit_code: str | None = None
    finish_time: datetime | None = None
    detail_status: str | None = None


class ContainerEvent(CamelModel):
    name: str | None = None
    count: int | None = None
    first_timestamp: str | None = None
    last_timestamp: str | None = None
    message: str | None = None
    type: str | None = None


class ContainerInstanceView(CamelModel):
    restart_count: int | None = None
    current_state: ContainerState | None = None
    previous_state: ContainerState | None = None
    events: list[ContainerEvent] | None = None


class ContainerCodePackageProperties(CamelModel):
    name: str
    image: str
    image_registry_credential: ImageRegistryCredential | None = None
    entry_point: str | None = None
    commands: list[str] | None = None
    environment_variables: list[EnvironmentVariable] | None = None
    settings: list[Setting] | None = None
    labels: list[ContainerLabel] | None = None
    endpoints: list[EndpointProperties] | None = None
    resources: ResourceRequirements
    volume_refs: list[VolumeReference] | None = None
    volumes: list[ApplicationScopedVolume] | None = None
    diagnostics: DiagnosticsRef | None = None
    reliable_collections_refs: list[ReliableCollectionsRef] | None = None
    instance_view: ContainerInstanceView | None = None


# Execution and auto scaling


class ExecutionPolicy(CamelModel):
    type: str


class DefaultExecutionPolicy(ExecutionPolicy):
    type: Literal["Default"] = "Default"


class RunToCompletionExecutionPolicy(ExecutionPolicy):
    type: Literal["RunToCompletion"] = "RunToCompletion"
    restart: RestartPolicy


ExecutionPolicyUnion = polymorphic(
    "ExecutionPolicy",
    ExecutionPolicy,
    "type",
    DefaultExecutionPolicy,
    RunToCompletionExecutionPolicy,
)


class AutoScalingMetric(CamelModel):
    kind: str


class AutoScalingResourceMetric(AutoScalingMetric):
    kind: Literal["Resource"] = "Resource"
    name: str


AutoScalingMetricUnion = polymorphic(
    "AutoScalingMetric",
    AutoScalingMetric,
    "kind",
    AutoScalingResourceMetric,
)


class AutoScalingTrigger(CamelModel):
    kind: str


class AverageLoadScalingTrigger(AutoScalingTrigger):
    kind: Literal["AverageLoad"] = "AverageLoad"
    metric: AutoScalingMetricUnion
    lower_load_threshold: float
    upper_load_threshold: float
    scale_interval_in_seconds: int


AutoScalingTriggerUnion = polymorphic(
    "AutoScalingTrigger",
    AutoScalingTrigger,
    "kind",
    AverageLoadScalingTrigger,
)


class AutoScalingMechanism(CamelModel):
    kind: str


class AddRemoveReplicaScalingMechanism(AutoScalingMechanism):
    kind: Literal["AddRemoveReplica"] = "AddRemoveReplica"
    min_count: int
    max_count: int
    scale_increment: int


AutoScalingMechanismUnion = polymorphic(
    "AutoScalingMechanism",
    AutoScalingMechanism,
    "kind",
    AddRemoveReplicaScalingMechanism,
)


class AutoScalingPolicy(CamelModel):
    name: str
    trigger: AutoScalingTriggerUnion
    mechanism: AutoScalingMechanismUnion


# Services and replicas


class ServiceResourceProperties(CamelModel):
    os_type: OperatingSystemType
    code_packages: list[ContainerCodePackageProperties]
    network_refs: list[NetworkRef] | None = None
    diagnostics: DiagnosticsRef | None = None
    description: str | None = None
    replica_count: int | None = None
    execution_policy: ExecutionPolicyUnion | None = None
    auto_scaling_policies: list[AutoScalingPolicy] | None = None
    status: ResourceStatus | None = None
    status_details: str | None = None
    health_state: HealthState | None = None
    unhealthy_evaluation: str | None = None
    identity_refs: list[dict[str, str]] | None = None
    dns_name: str | None = None


class ServiceResourceDescription(CamelModel):
    name: str
    properties: ServiceResourceProperties


class PagedServiceResourceDescriptionList(CamelPagedList[ServiceResourceDescription]):
    pass


class ServiceReplicaDescription(CamelModel):
    replica_name: str
    os_type: OperatingSystemType | None = None
    code_packages: list[ContainerCodePackageProperties] = Field(default_factory=list)
    network_refs: list[NetworkRef] | None = None
    diagnostics: DiagnosticsRef | None = None


class PagedServiceReplicaDescriptionList(CamelPagedList[ServiceReplicaDescription]):
    pass


# Applications


class IdentityItemDescription(CamelModel):
    principal_id: str | None = None
    client_id: str | None = None


class IdentityDescription(CamelModel):
    type: str
    token_service_endpoint: str | None = None
    tenant_id: str | None = None
    principal_id: str | None = None
    user_assigned_identities: dict[str, IdentityItemDescription] | None = None


class ApplicationResourceProperties(CamelModel):
    description: str | None = None
    services: list[ServiceResourceDescription] | None = None
    diagnostics: DiagnosticsDescription | None = None
    debug_params: str | None = None
    service_names: list[str] | None = None
    status: ResourceStatus | None = None
    status_details: str | None = None
    health_state: HealthState | None = None
    unhealthy_evaluation: str | None = None


class ApplicationResourceDescription(CamelModel):
    name: str
    identity: IdentityDescription | None = None
    properties: ApplicationResourceProperties = Field(default_factory=ApplicationResourceProperties)


class PagedApplicationResourceDescriptionList(CamelPagedList[ApplicationResourceDescription]):
    pass


class ServiceUpgradeProgress(CamelModel):
    service_name: str | None = None
    completed_replica_count: str | None = None
    pending_replica_count: str | None = None


class ApplicationResourceUpgradeProgressInfo(CamelModel):
    name: str | None = None
    target_application_type_version: str | None = None
    start_timestamp_utc: str | None = None
    upgrade_state: str | None = None
    percent_completed: str | None = None
    service_upgrade_progress: list[ServiceUpgradeProgress] | None = None
    rolling_upgrade_mode: UpgradeMode | None = None
    upgrade_duration: str | None = None
    application_upgrade_status_details: str | None = None
    upgrade_replica_set_check_timeout_in_seconds: int | None = None
    failure_timestamp_utc: str | None = None


# Gateways


class GatewayDestination(CamelModel):
    application_name: str
    service_name: str
    endpoint_name: str


class TcpConfig(CamelModel):
    name: str
    port: int
    destination: GatewayDestination


class HttpRouteMatchPath(CamelModel):
    value: str
    rewrite: str | None = None
    type: PathMatchType = PathMatchType.PREFIX


class HttpRouteMatchHeader(CamelModel):
    name: str
    value: str | None = None
    type: HeaderMatchType | None = None


class HttpRouteMatchRule(CamelModel):
    path: HttpRouteMatchPath
    headers: list[HttpRouteMatchHeader] | None = None


class HttpRouteConfig(CamelModel):
    name: str
    match: HttpRouteMatchRule
    destination: GatewayDestination


class HttpHostConfig(CamelModel):
    name: str
    routes: list[HttpRouteConfig]


class HttpConfig(CamelModel):
    name: str
    port: int
    hosts: list[HttpHostConfig]


class GatewayProperties(CamelModel):
    description: str | None = None
    source_network: NetworkRef
    destination_network: NetworkRef
    tcp: list[TcpConfig] | None = None
    http: list[HttpConfig] | None = None
    status: ResourceStatus | None = None
    status_details: str | None = None
    ip_address: str | None = None


class GatewayResourceDescription(CamelModel):
    name: str
    properties: GatewayProperties


class PagedGatewayResourceDescriptionList(CamelPagedList[GatewayResourceDescription]):
    pass
