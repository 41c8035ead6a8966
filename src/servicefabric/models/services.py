"""Service descriptions, service types, placement and scaling policies."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ._base import FabricModel, PagedList
from .enums import (
    HealthState,
    MoveCost,
    ServiceCorrelationScheme,
    ServiceEndpointRole,
    ServiceLoadMetricWeight,
    ServicePackageActivationMode,
    ServiceStatus,
)
from .partitions import PartitionInformationUnion, PartitionSchemeDescriptionUnion
from .polymorphic import polymorphic


class ServiceCorrelationDescription(FabricModel):
    scheme: ServiceCorrelationScheme
    service_name: str


class ServiceLoadMetricDescription(FabricModel):
    name: str
    weight: ServiceLoadMetricWeight | None = None
    primary_default_load: int | None = None
    secondary_default_load: int | None = None
    auxiliary_default_load: int | None = None
    default_load: int | None = None


class NodeTagsDescription(FabricModel):
    count: int
    tags: list[str]


# Placement policies


class ServicePlacementPolicyDescription(FabricModel):
    type: str


class ServicePlacementInvalidDomainPolicyDescription(ServicePlacementPolicyDescription):
    type: Literal["InvalidDomain"] = "InvalidDomain"
    domain_name: str | None = None


class ServicePlacementRequiredDomainPolicyDescription(ServicePlacementPolicyDescription):
    type: Literal["RequireDomain"] = "RequireDomain"
    domain_name: str | None = None


class ServicePlacementPreferPrimaryDomainPolicyDescription(ServicePlacementPolicyDescription):
    type: Literal["PreferPrimaryDomain"] = "PreferPrimaryDomain"
    domain_name: str | None = None


class ServicePlacementRequireDomainDistributionPolicyDescription(ServicePlacementPolicyDescription):
    type: Literal["RequireDomainDistribution"] = "RequireDomainDistribution"
    domain_name: str | None = None


class ServicePlacementNonPartiallyPlaceServicePolicyDescription(ServicePlacementPolicyDescription):
    type: Literal["NonPartiallyPlaceService"] = "NonPartiallyPlaceService"


class ServicePlacementAllowMultipleStatelessInstancesOnNodePolicyDescription(ServicePlacementPolicyDescription):
    type: Literal["AllowMultipleStatelessInstancesOnNode"] = "AllowMultipleStatelessInstancesOnNode"
    domain_name: str | None = None


ServicePlacementPolicyDescriptionUnion = polymorphic(
    "ServicePlacementPolicyDescription",
    ServicePlacementPolicyDescription,
    "type",
    ServicePlacementInvalidDomainPolicyDescription,
    ServicePlacementRequiredDomainPolicyDescription,
    ServicePlacementPreferPrimaryDomainPolicyDescription,
    ServicePlacementRequireDomainDistributionPolicyDescription,
    ServicePlacementNonPartiallyPlaceServicePolicyDescription,
    ServicePlacementAllowMultipleStatelessInstancesOnNodePolicyDescription,
)


# Scaling


class ScalingTriggerDescription(FabricModel):
    kind: str


class AveragePartitionLoadScalingTrigger(ScalingTriggerDescription):
    kind: Literal["AveragePartitionLoad"] = "AveragePartitionLoad"
    metric_name: str
    lower_load_threshold: str
    upper_load_threshold: str
    scale_interval_in_seconds: int


class AverageServiceLoadScalingTrigger(ScalingTriggerDescription):
    kind: Literal["AverageServiceLoad"] = "AverageServiceLoad"
    metric_name: str
    lower_load_threshold: str
    upper_load_threshold: str
    scale_interval_in_seconds: int
    use_only_primary_load: bool = False


ScalingTriggerDescriptionUnion = polymorphic(
    "ScalingTriggerDescription",
    ScalingTriggerDescription,
    "kind",
    AveragePartitionLoadScalingTrigger,
    AverageServiceLoadScalingTrigger,
)


class ScalingMechanismDescription(FabricModel):
    kind: str


class PartitionInstanceCountScaleMechanism(ScalingMechanismDescription):
    kind: Literal["PartitionInstanceCount"] = "PartitionInstanceCount"
    min_instance_count: int
    max_instance_count: int
    scale_increment: int


class AddRemoveIncrementalNamedPartitionScalingMechanism(ScalingMechanismDescription):
    kind: Literal["AddRemoveIncrementalNamedPartition"] = "AddRemoveIncrementalNamedPartition"
    min_partition_count: int
    max_partition_count: int
    scale_increment: int


ScalingMechanismDescriptionUnion = polymorphic(
    "ScalingMechanismDescription",
    ScalingMechanismDescription,
    "kind",
    PartitionInstanceCountScaleMechanism,
    AddRemoveIncrementalNamedPartitionScalingMechanism,
)


class ScalingPolicyDescription(FabricModel):
    scaling_trigger: ScalingTriggerDescriptionUnion
    scaling_mechanism: ScalingMechanismDescriptionUnion


# Service descriptions


class ServiceDescription(FabricModel):
    """Request body for creating a service; ``ServiceKind`` selects the variant."""

    service_kind: str
    application_name: str | None = None
    service_name: str
    service_type_name: str
    initialization_data: list[int] | None = None
    partition_description: PartitionSchemeDescriptionUnion
    placement_constraints: str | None = None
    correlation_scheme: list[ServiceCorrelationDescription] | None = None
    service_load_metrics: list[ServiceLoadMetricDescription] | None = None
    service_placement_policies: list[ServicePlacementPolicyDescriptionUnion] | None = None
    default_move_cost: MoveCost | None = None
    is_default_move_cost_specified: bool | None = None
    service_package_activation_mode: ServicePackageActivationMode | None = None
    service_dns_name: str | None = None
    scaling_policies: list[ScalingPolicyDescription] | None = None
    tags_required_to_place: NodeTagsDescription | None = None
    tags_required_to_run: NodeTagsDescription | None = None


class StatefulServiceDescription(ServiceDescription):
    service_kind: Literal["Stateful"] = "Stateful"
    target_replica_set_size: int
    min_replica_set_size: int
    has_persisted_state: bool
    flags: int | None = None
    replica_restart_wait_duration_seconds: int | None = None
    quorum_loss_wait_duration_seconds: int | None = None
    stand_by_replica_keep_duration_seconds: int | None = None
    service_placement_time_limit_seconds: int | None = None
    drop_source_replica_on_move: bool | None = None
    auxiliary_replica_count: int | None = None


class StatelessServiceDescription(ServiceDescription):
    service_kind: Literal["Stateless"] = "Stateless"
    instance_count: int
    min_instance_count: int | None = None
    min_instance_percentage: int | None = None
    flags: int | None = None
    instance_close_delay_duration_seconds: int | None = None
    instance_restart_wait_duration_seconds: int | None = None


ServiceDescriptionUnion = polymorphic(
    "ServiceDescription",
    ServiceDescription,
    "service_kind",
    StatefulServiceDescription,
    StatelessServiceDescription,
)


class ServiceFromTemplateDescription(FabricModel):
    application_name: str
    service_name: str
    service_type_name: str
    initialization_data: list[int] | None = None
    service_package_activation_mode: ServicePackageActivationMode | None = None
    service_dns_name: str | None = None


class ServiceUpdateDescription(FabricModel):
    """Partial update; ``Flags`` tells the cluster which of the optional fields are set."""

    service_kind: str
    flags: str | None = None
    placement_constraints: str | None = None
    correlation_scheme: list[ServiceCorrelationDescription] | None = None
    load_metrics: list[ServiceLoadMetricDescription] | None = None
    service_placement_policies: list[ServicePlacementPolicyDescriptionUnion] | None = None
    default_move_cost: MoveCost | None = None
    scaling_policies: list[ScalingPolicyDescription] | None = None
    service_dns_name: str | None = None
    tags_for_placement: NodeTagsDescription | None = None
    tags_for_running: NodeTagsDescription | None = None


class StatefulServiceUpdateDescription(ServiceUpdateDescription):
    service_kind: Literal["Stateful"] = "Stateful"
    target_replica_set_size: int | None = None
    min_replica_set_size: int | None = None
    replica_restart_wait_duration_seconds: str | None = None
    quorum_loss_wait_duration_seconds: str | None = None
    stand_by_replica_keep_duration_seconds: str | None = None
    service_placement_time_limit_seconds: str | None = None
    drop_source_replica_on_move: bool | None = None
    auxiliary_replica_count: int | None = None


class StatelessServiceUpdateDescription(ServiceUpdateDescription):
    service_kind: Literal["Stateless"] = "Stateless"
    instance_count: int | None = None
    min_instance_count: int | None = None
    min_instance_percentage: int | None = None
    instance_close_delay_duration_seconds: str | None = None
    instance_restart_wait_duration_seconds: str | None = None


ServiceUpdateDescriptionUnion = polymorphic(
    "ServiceUpdateDescription",
    ServiceUpdateDescription,
    "service_kind",
    StatefulServiceUpdateDescription,
    StatelessServiceUpdateDescription,
)


# Service info


class ServiceInfo(FabricModel):
    service_kind: str
    id: str | None = None
    name: str | None = None
    type_name: str | None = None
    manifest_version: str | None = None
    health_state: HealthState | None = None
    service_status: ServiceStatus | None = None
    is_service_group: bool | None = None


class StatefulServiceInfo(ServiceInfo):
    service_kind: Literal["Stateful"] = "Stateful"
    has_persisted_state: bool | None = None


class StatelessServiceInfo(ServiceInfo):
    service_kind: Literal["Stateless"] = "Stateless"


ServiceInfoUnion = polymorphic(
    "ServiceInfo",
    ServiceInfo,
    "service_kind",
    StatefulServiceInfo,
    StatelessServiceInfo,
)


class PagedServiceInfoList(PagedList[ServiceInfoUnion]):
    pass


class ResolvedServiceEndpoint(FabricModel):
    kind: ServiceEndpointRole | None = None
    address: str | None = None


class ResolvedServicePartition(FabricModel):
    name: str | None = None
    partition_information: PartitionInformationUnion | None = None
    endpoints: list[ResolvedServiceEndpoint] = Field(default_factory=list)
    version: str | None = None


class UnplacedReplicaInformation(FabricModel):
    service_name: str | None = None
    partition_id: str | None = None
    unplaced_replica_details: list[str] = Field(default_factory=list)


# Service types


class ServiceTypeExtensionDescription(FabricModel):
    key: str | None = None
    value: str | None = None


class ServiceTypeDescription(FabricModel):
    kind: str
    is_stateful: bool | None = None
    service_type_name: str | None = None
    placement_constraints: str | None = None
    load_metrics: list[ServiceLoadMetricDescription] | None = None
    service_placement_policies: list[ServicePlacementPolicyDescriptionUnion] | None = None
    extensions: list[ServiceTypeExtensionDescription] | None = None


class StatefulServiceTypeDescription(ServiceTypeDescription):
    kind: Literal["Stateful"] = "Stateful"
    has_persisted_state: bool | None = None


class StatelessServiceTypeDescription(ServiceTypeDescription):
    kind: Literal["Stateless"] = "Stateless"
    use_implicit_host: bool | None = None


ServiceTypeDescriptionUnion = polymorphic(
    "ServiceTypeDescription",
    ServiceTypeDescription,
    "kind",
    StatefulServiceTypeDescription,
    StatelessServiceTypeDescription,
)


class ServiceTypeInfo(FabricModel):
    service_type_description: ServiceTypeDescriptionUnion | None = None
    service_manifest_name: str | None = None
    service_manifest_version: str | None = None
    is_service_group: bool | None = None


class ServiceTypeManifest(FabricModel):
    manifest: str | None = None
