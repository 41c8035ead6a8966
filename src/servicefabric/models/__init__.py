"""Wire models for the cluster REST API, grouped by resource family."""

from __future__ import annotations

from ._base import (
    CamelModel,
    CamelPagedList,
    FabricModel,
    PagedList,
    to_wire,
)
from .durations import (
    FabricDuration,
    datetime_to_file_time,
    format_iso_duration,
    parse_fabric_duration,
    parse_iso_duration,
)
from .enums import (
    ApplicationDefinitionKind,
    ApplicationDefinitionKindFilter,
    ApplicationPackageCleanupPolicy,
    ApplicationScopedVolumeKind,
    ApplicationStatus,
    ApplicationTypeDefinitionKind,
    ApplicationTypeDefinitionKindFilter,
    ApplicationTypeStatus,
    AutoScalingMechanismKind,
    AutoScalingMetricKind,
    AutoScalingResourceMetricName,
    AutoScalingTriggerKind,
    BackupEntityKind,
    BackupPolicyScope,
    BackupScheduleFrequencyType,
    BackupScheduleKind,
    BackupState,
    BackupStorageKind,
    BackupSuspensionScope,
    BackupType,
    ChaosEventKind,
    ChaosScheduleStatus,
    ChaosStatus,
    ComposeDeploymentStatus,
    ComposeDeploymentUpgradeState,
    CreateFabricDump,
    DataLossMode,
    DayOfWeek,
    DeactivationIntent,
    DeploymentStatus,
    DiagnosticsSinkKind,
    EntityKind,
    EntryPointStatus,
    ExecutionPolicyType,
    FabricEnum,
    FabricErrorCodes,
    FabricEventKind,
    FailureAction,
    FailureReason,
    HeaderMatchType,
    HealthEvaluationKind,
    HealthState,
    HealthStateFilter,
    HostIsolationMode,
    HostType,
    ImpactLevel,
    ManagedIdentityType,
    MoveCost,
    NetworkKind,
    NodeDeactivationIntent,
    NodeDeactivationStatus,
    NodeDeactivationTaskType,
    NodeStatus,
    NodeStatusFilter,
    NodeTransitionType,
    NodeUpgradePhase,
    OperatingSystemType,
    OperationState,
    OperationStateFilter,
    OperationType,
    OperationTypeFilter,
    Ordering,
    PackageSharingPolicyScope,
    PartitionAccessStatus,
    PartitionKeyType,
    PartitionScheme,
    PathMatchType,
    PropertyBatchInfoKind,
    PropertyBatchOperationKind,
    PropertyValueKind,
    ProvisionApplicationTypeKind,
    QuorumLossMode,
    ReconfigurationPhase,
    ReconfigurationType,
    RepairImpactKind,
    RepairTargetKind,
    RepairTaskHealthCheckState,
    RepairTaskResult,
    RepairTaskState,
    RepairTaskStateFilter,
    ReplicaKind,
    ReplicaRole,
    ReplicaStatus,
    ReplicatorOperationName,
    ResourceStatus,
    RestartPartitionMode,
    RestartPolicy,
    RestoreState,
    RetentionPolicyType,
    RollingUpgradeMode,
    SafetyCheckKind,
    ScalingMechanismKind,
    ScalingTriggerKind,
    SecretKind,
    ServiceCorrelationScheme,
    ServiceEndpointRole,
    ServiceKind,
    ServiceLoadMetricWeight,
    ServiceOperationName,
    ServicePackageActivationMode,
    ServicePartitionKind,
    ServicePartitionStatus,
    ServicePlacementPolicyType,
    ServiceStatus,
    ServiceTypeRegistrationStatus,
    SettingType,
    SizeTypes,
    UpgradeDomainState,
    UpgradeKind,
    UpgradeMode,
    UpgradeSortOrder,
    UpgradeState,
    UpgradeUnitState,
    VolumeProvider,
)
from .errors import (
    FABRIC_ERROR_STATUS,
    FabricError,
    FabricErrorError,
    expected_status,
)
from .polymorphic import (
    POLYMORPHIC_TYPES,
    PolymorphicType,
    UNKNOWN_TAG,
    discriminator_literal,
    polymorphic,
)
from .common import (
    ApplicationNameInfo,
    ApplicationParameter,
    NameDescription,
    NodeId,
    ServiceNameInfo,
)
from .health import (
    ApplicationHealth,
    ApplicationHealthEvaluation,
    ApplicationHealthPolicies,
    ApplicationHealthPolicy,
    ApplicationHealthPolicyMapItem,
    ApplicationHealthState,
    ApplicationHealthStateChunk,
    ApplicationHealthStateChunkList,
    ApplicationHealthStateFilter,
    ApplicationTypeApplicationsHealthEvaluation,
    ApplicationTypeHealthPolicyMapItem,
    ApplicationsHealthEvaluation,
    ClusterHealth,
    ClusterHealthChunk,
    ClusterHealthChunkQueryDescription,
    ClusterHealthPolicies,
    ClusterHealthPolicy,
    ClusterUpgradeHealthPolicyObject,
    DeltaNodesCheckHealthEvaluation,
    DeployedApplicationHealth,
    DeployedApplicationHealthEvaluation,
    DeployedApplicationHealthState,
    DeployedApplicationHealthStateChunk,
    DeployedApplicationHealthStateChunkList,
    DeployedApplicationHealthStateFilter,
    DeployedApplicationsHealthEvaluation,
    DeployedServicePackageHealth,
    DeployedServicePackageHealthEvaluation,
    DeployedServicePackageHealthState,
    DeployedServicePackageHealthStateChunk,
    DeployedServicePackageHealthStateChunkList,
    DeployedServicePackageHealthStateFilter,
    DeployedServicePackagesHealthEvaluation,
    EntityHealth,
    EntityHealthState,
    EntityKindHealthStateCount,
    EventHealthEvaluation,
    HealthEvaluation,
    HealthEvaluationUnion,
    HealthEvaluationWrapper,
    HealthEvent,
    HealthInformation,
    HealthStateCount,
    HealthStatistics,
    NodeHealth,
    NodeHealthEvaluation,
    NodeHealthState,
    NodeHealthStateChunk,
    NodeHealthStateChunkList,
    NodeHealthStateFilter,
    NodeTypeHealthPolicyMapItem,
    NodeTypeNodesHealthEvaluation,
    NodesHealthEvaluation,
    PartitionHealth,
    PartitionHealthEvaluation,
    PartitionHealthState,
    PartitionHealthStateChunk,
    PartitionHealthStateChunkList,
    PartitionHealthStateFilter,
    PartitionsHealthEvaluation,
    ReplicaHealth,
    ReplicaHealthEvaluation,
    ReplicaHealthState,
    ReplicaHealthStateChunk,
    ReplicaHealthStateChunkList,
    ReplicaHealthStateFilter,
    ReplicaHealthStateUnion,
    ReplicaHealthUnion,
    ReplicasHealthEvaluation,
    ServiceHealth,
    ServiceHealthEvaluation,
    ServiceHealthState,
    ServiceHealthStateChunk,
    ServiceHealthStateChunkList,
    ServiceHealthStateFilter,
    ServiceTypeHealthPolicy,
    ServiceTypeHealthPolicyMapItem,
    ServicesHealthEvaluation,
    StatefulServiceReplicaHealth,
    StatefulServiceReplicaHealthState,
    StatelessServiceInstanceHealth,
    StatelessServiceInstanceHealthState,
    SystemApplicationHealthEvaluation,
    UpgradeDomainDeltaNodesCheckHealthEvaluation,
    UpgradeDomainDeployedApplicationsHealthEvaluation,
    UpgradeDomainNodesHealthEvaluation,
)
from .upgrade import (
    CurrentUpgradeDomainProgressInfo,
    CurrentUpgradeUnitsProgressInfo,
    EnsureAvailabilitySafetyCheck,
    EnsurePartitionQuorumSafetyCheck,
    FailureUpgradeDomainProgressInfo,
    MonitoringPolicyDescription,
    NodeUpgradeProgressInfo,
    PartitionSafetyCheck,
    ResumeUpgradeDescription,
    RollingUpgradeUpdateDescription,
    SafetyCheck,
    SafetyCheckUnion,
    SafetyCheckWrapper,
    SeedNodeSafetyCheck,
    UpgradeDomainInfo,
    UpgradeUnitInfo,
    WaitForInbuildReplicaSafetyCheck,
    WaitForPrimaryPlacementSafetyCheck,
    WaitForPrimarySwapSafetyCheck,
    WaitForReconfigurationSafetyCheck,
)
from .cluster import (
    AadMetadata,
    AadMetadataObject,
    ClusterConfiguration,
    ClusterConfigurationUpgradeDescription,
    ClusterConfigurationUpgradeStatusInfo,
    ClusterLoadInfo,
    ClusterManifest,
    ClusterUpgradeDescriptionObject,
    ClusterUpgradeProgressObject,
    ClusterVersion,
    FabricCodeVersionInfo,
    FabricConfigVersionInfo,
    LoadMetricInformation,
    ProvisionFabricDescription,
    StartClusterUpgradeDescription,
    UnprovisionFabricDescription,
    UpdateClusterUpgradeDescription,
    UpgradeOrchestrationServiceState,
    UpgradeOrchestrationServiceStateSummary,
)
from .nodes import (
    ConfigParameterOverride,
    DeactivationIntentDescription,
    NodeDeactivationInfo,
    NodeDeactivationTask,
    NodeDeactivationTaskId,
    NodeInfo,
    NodeLoadInfo,
    NodeLoadMetricInformation,
    PagedNodeInfoList,
    RestartNodeDescription,
)
from .applications import (
    ApplicationCapacityDescription,
    ApplicationDescription,
    ApplicationInfo,
    ApplicationLoadInfo,
    ApplicationLoadMetricInformation,
    ApplicationMetricDescription,
    ApplicationTypeInfo,
    ApplicationTypeManifest,
    ApplicationUpdateDescription,
    ApplicationUpgradeDescription,
    ApplicationUpgradeProgressInfo,
    ApplicationUpgradeUpdateDescription,
    ExternalStoreProvisionApplicationTypeDescription,
    ManagedApplicationIdentity,
    ManagedApplicationIdentityDescription,
    PagedApplicationInfoList,
    PagedApplicationTypeInfoList,
    ProvisionApplicationTypeDescription,
    ProvisionApplicationTypeDescriptionBase,
    ProvisionApplicationTypeDescriptionUnion,
    UnprovisionApplicationTypeDescriptionInfo,
)
from .services import (
    AddRemoveIncrementalNamedPartitionScalingMechanism,
    AveragePartitionLoadScalingTrigger,
    AverageServiceLoadScalingTrigger,
    NodeTagsDescription,
    PagedServiceInfoList,
    PartitionInstanceCountScaleMechanism,
    ResolvedServiceEndpoint,
    ResolvedServicePartition,
    ScalingMechanismDescription,
    ScalingMechanismDescriptionUnion,
    ScalingPolicyDescription,
    ScalingTriggerDescription,
    ScalingTriggerDescriptionUnion,
    ServiceCorrelationDescription,
    ServiceDescription,
    ServiceDescriptionUnion,
    ServiceFromTemplateDescription,
    ServiceInfo,
    ServiceInfoUnion,
    ServiceLoadMetricDescription,
    ServicePlacementAllowMultipleStatelessInstancesOnNodePolicyDescription,
    ServicePlacementInvalidDomainPolicyDescription,
    ServicePlacementNonPartiallyPlaceServicePolicyDescription,
    ServicePlacementPolicyDescription,
    ServicePlacementPolicyDescriptionUnion,
    ServicePlacementPreferPrimaryDomainPolicyDescription,
    ServicePlacementRequireDomainDistributionPolicyDescription,
    ServicePlacementRequiredDomainPolicyDescription,
    ServiceTypeDescription,
    ServiceTypeDescriptionUnion,
    ServiceTypeExtensionDescription,
    ServiceTypeInfo,
    ServiceTypeManifest,
    ServiceUpdateDescription,
    ServiceUpdateDescriptionUnion,
    StatefulServiceDescription,
    StatefulServiceInfo,
    StatefulServiceTypeDescription,
    StatefulServiceUpdateDescription,
    StatelessServiceDescription,
    StatelessServiceInfo,
    StatelessServiceTypeDescription,
    StatelessServiceUpdateDescription,
    UnplacedReplicaInformation,
)
from .partitions import (
    Epoch,
    Int64RangePartitionInformation,
    LoadMetricReport,
    LoadedPartitionInformationResult,
    LoadedPartitionInformationResultList,
    MetricLoadDescription,
    NamedPartitionInformation,
    NamedPartitionSchemeDescription,
    PagedServicePartitionInfoList,
    PagedUpdatePartitionLoadResultList,
    PartitionInformation,
    PartitionInformationUnion,
    PartitionLoadInformation,
    PartitionMetricLoadDescription,
    PartitionSchemeDescription,
    PartitionSchemeDescriptionUnion,
    ReplicaMetricLoadDescription,
    ServicePartitionInfo,
    ServicePartitionInfoUnion,
    SingletonPartitionInformation,
    SingletonPartitionSchemeDescription,
    StatefulServicePartitionInfo,
    StatelessServicePartitionInfo,
    UniformInt64RangePartitionSchemeDescription,
    UpdatePartitionLoadResult,
)
from .replicas import (
    DeployedServiceReplicaDetailInfo,
    DeployedServiceReplicaDetailInfoUnion,
    DeployedServiceReplicaInfo,
    DeployedServiceReplicaInfoUnion,
    DeployedStatefulServiceReplicaDetailInfo,
    DeployedStatefulServiceReplicaInfo,
    DeployedStatelessServiceInstanceDetailInfo,
    DeployedStatelessServiceInstanceInfo,
    LoadMetricReportInfo,
    PagedReplicaInfoList,
    ReconfigurationInformation,
    ReplicaInfo,
    ReplicaInfoUnion,
    StatefulServiceReplicaInfo,
    StatelessServiceInstanceInfo,
)
from .deployed import (
    CodePackageEntryPoint,
    CodePackageEntryPointStatistics,
    ContainerApiRequestBody,
    ContainerApiResponse,
    ContainerApiResult,
    ContainerLogs,
    DeployServicePackageToNodeDescription,
    DeployedApplicationInfo,
    DeployedCodePackageInfo,
    DeployedServicePackageInfo,
    DeployedServiceTypeInfo,
    PackageSharingPolicyInfo,
    PagedDeployedApplicationInfoList,
    RestartDeployedCodePackageDescription,
)
from .faults import (
    InvokeDataLossResult,
    InvokeQuorumLossResult,
    NodeResult,
    NodeTransitionProgress,
    NodeTransitionResult,
    OperationStatus,
    PartitionDataLossProgress,
    PartitionQuorumLossProgress,
    PartitionRestartProgress,
    RestartPartitionResult,
    SelectedPartition,
)
from .repair import (
    NodeImpact,
    NodeRepairImpactDescription,
    NodeRepairTargetDescription,
    RepairImpactDescription,
    RepairImpactDescriptionUnion,
    RepairTargetDescription,
    RepairTargetDescriptionUnion,
    RepairTask,
    RepairTaskApproveDescription,
    RepairTaskCancelDescription,
    RepairTaskDeleteDescription,
    RepairTaskHistory,
    RepairTaskUpdateHealthPolicyDescription,
    RepairTaskUpdateInfo,
)
from .chaos import (
    Chaos,
    ChaosContext,
    ChaosEvent,
    ChaosEventUnion,
    ChaosEventWrapper,
    ChaosEventsSegment,
    ChaosParameters,
    ChaosParametersDictionaryItem,
    ChaosSchedule,
    ChaosScheduleDescription,
    ChaosScheduleJob,
    ChaosScheduleJobActiveDaysOfWeek,
    ChaosTargetFilter,
    ExecutingFaultsChaosEvent,
    StartedChaosEvent,
    StoppedChaosEvent,
    TestErrorChaosEvent,
    TimeOfDay,
    TimeRange,
    ValidationFailedChaosEvent,
    WaitingChaosEvent,
)
from .backup import (
    ApplicationBackupConfigurationInfo,
    ApplicationBackupEntity,
    AzureBlobBackupStorageDescription,
    BackupConfigurationInfo,
    BackupConfigurationInfoUnion,
    BackupEntity,
    BackupEntityUnion,
    BackupEpoch,
    BackupInfo,
    BackupPartitionDescription,
    BackupPolicyDescription,
    BackupProgressInfo,
    BackupScheduleDescription,
    BackupScheduleDescriptionUnion,
    BackupStorageDescription,
    BackupStorageDescriptionUnion,
    BackupSuspensionInfo,
    BasicRetentionPolicyDescription,
    DisableBackupDescription,
    DsmsAzureBlobBackupStorageDescription,
    EnableBackupDescription,
    FileShareBackupStorageDescription,
    FrequencyBasedBackupScheduleDescription,
    GetBackupByStorageQueryDescription,
    ManagedIdentityAzureBlobBackupStorageDescription,
    PagedBackupConfigurationInfoList,
    PagedBackupEntityList,
    PagedBackupInfoList,
    PagedBackupPolicyDescriptionList,
    PartitionBackupConfigurationInfo,
    PartitionBackupEntity,
    RestorePartitionDescription,
    RestoreProgressInfo,
    RetentionPolicyDescription,
    RetentionPolicyDescriptionUnion,
    ServiceBackupConfigurationInfo,
    ServiceBackupEntity,
    TimeBasedBackupScheduleDescription,
)
from .image_store import (
    DiskInfo,
    FileInfo,
    FileVersion,
    FolderInfo,
    FolderSizeInfo,
    ImageStoreContent,
    ImageStoreCopyDescription,
    ImageStoreInfo,
    UploadChunkRange,
    UploadSession,
    UploadSessionInfo,
    UsageInfo,
)
from .properties import (
    BinaryPropertyValue,
    CheckExistsPropertyBatchOperation,
    CheckSequencePropertyBatchOperation,
    CheckValuePropertyBatchOperation,
    DeletePropertyBatchOperation,
    DoublePropertyValue,
    FailedPropertyBatchInfo,
    GetPropertyBatchOperation,
    GuidPropertyValue,
    Int64PropertyValue,
    PagedPropertyInfoList,
    PagedSubNameInfoList,
    PropertyBatchDescriptionList,
    PropertyBatchInfo,
    PropertyBatchInfoUnion,
    PropertyBatchOperation,
    PropertyBatchOperationUnion,
    PropertyDescription,
    PropertyInfo,
    PropertyMetadata,
    PropertyValue,
    PropertyValueUnion,
    PutPropertyBatchOperation,
    StringPropertyValue,
    SuccessfulPropertyBatchInfo,
)
from .events import (
    ApplicationContainerInstanceExitedEvent,
    ApplicationCreatedEvent,
    ApplicationDeletedEvent,
    ApplicationEvent,
    ApplicationHealthReportExpiredEvent,
    ApplicationNewHealthReportEvent,
    ApplicationProcessExitedEvent,
    ApplicationUpgradeCompletedEvent,
    ApplicationUpgradeDomainCompletedEvent,
    ApplicationUpgradeRollbackCompletedEvent,
    ApplicationUpgradeRollbackStartedEvent,
    ApplicationUpgradeStartedEvent,
    ChaosCodePackageRestartScheduledEvent,
    ChaosNodeRestartScheduledEvent,
    ChaosPartitionPrimaryMoveScheduledEvent,
    ChaosPartitionSecondaryMoveScheduledEvent,
    ChaosReplicaRemovalScheduledEvent,
    ChaosReplicaRestartScheduledEvent,
    ChaosStartedEvent,
    ChaosStoppedEvent,
    ClusterEvent,
    ClusterHealthReportExpiredEvent,
    ClusterNewHealthReportEvent,
    ClusterUpgradeCompletedEvent,
    ClusterUpgradeDomainCompletedEvent,
    ClusterUpgradeRollbackCompletedEvent,
    ClusterUpgradeRollbackStartedEvent,
    ClusterUpgradeStartedEvent,
    FABRIC_EVENT_VARIANTS,
    FabricEvent,
    FabricEventUnion,
    NodeAbortedEvent,
    NodeAddedToClusterEvent,
    NodeClosedEvent,
    NodeDeactivateCompletedEvent,
    NodeDeactivateStartedEvent,
    NodeDownEvent,
    NodeEvent,
    NodeHealthReportExpiredEvent,
    NodeNewHealthReportEvent,
    NodeOpenFailedEvent,
    NodeOpenSucceededEvent,
    NodeRemovedFromClusterEvent,
    NodeUpEvent,
    PartitionEvent,
    PartitionHealthReportExpiredEvent,
    PartitionNewHealthReportEvent,
    PartitionPrimaryMoveAnalysisEvent,
    PartitionReconfiguredEvent,
    ReplicaEvent,
    ServiceCreatedEvent,
    ServiceDeletedEvent,
    ServiceEvent,
    ServiceHealthReportExpiredEvent,
    ServiceNewHealthReportEvent,
    StatefulReplicaHealthReportExpiredEvent,
    StatefulReplicaNewHealthReportEvent,
    StatelessReplicaHealthReportExpiredEvent,
    StatelessReplicaNewHealthReportEvent,
)
from .compose import (
    ComposeDeploymentStatusInfo,
    ComposeDeploymentUpgradeDescription,
    ComposeDeploymentUpgradeProgressInfo,
    CreateComposeDeploymentDescription,
    PagedComposeDeploymentStatusInfoList,
    RegistryCredential,
)
from .mesh import (
    AddRemoveReplicaScalingMechanism,
    ApplicationResourceDescription,
    ApplicationResourceProperties,
    ApplicationResourceUpgradeProgressInfo,
    ApplicationScopedVolume,
    ApplicationScopedVolumeCreationParameters,
    ApplicationScopedVolumeCreationParametersServiceFabricVolumeDisk,
    ApplicationScopedVolumeCreationParametersUnion,
    AutoScalingMechanism,
    AutoScalingMechanismUnion,
    AutoScalingMetric,
    AutoScalingMetricUnion,
    AutoScalingPolicy,
    AutoScalingResourceMetric,
    AutoScalingTrigger,
    AutoScalingTriggerUnion,
    AverageLoadScalingTrigger,
    AzureInternalMonitoringPipelineSinkDescription,
    ContainerCodePackageProperties,
    ContainerEvent,
    ContainerInstanceView,
    ContainerLabel,
    ContainerState,
    DefaultExecutionPolicy,
    DiagnosticsDescription,
    DiagnosticsRef,
    DiagnosticsSinkProperties,
    DiagnosticsSinkPropertiesUnion,
    EndpointProperties,
    EndpointRef,
    EnvironmentVariable,
    ExecutionPolicy,
    ExecutionPolicyUnion,
    GatewayDestination,
    GatewayProperties,
    GatewayResourceDescription,
    HttpConfig,
    HttpHostConfig,
    HttpRouteConfig,
    HttpRouteMatchHeader,
    HttpRouteMatchPath,
    HttpRouteMatchRule,
    IdentityDescription,
    IdentityItemDescription,
    ImageRegistryCredential,
    InlinedValueSecretResourceProperties,
    KeyVaultVersionedReferenceSecretResourceProperties,
    LocalNetworkResourceProperties,
    NetworkRef,
    NetworkResourceDescription,
    NetworkResourceProperties,
    NetworkResourcePropertiesUnion,
    PagedApplicationResourceDescriptionList,
    PagedGatewayResourceDescriptionList,
    PagedNetworkResourceDescriptionList,
    PagedSecretResourceDescriptionList,
    PagedSecretValueResourceDescriptionList,
    PagedServiceReplicaDescriptionList,
    PagedServiceResourceDescriptionList,
    PagedVolumeResourceDescriptionList,
    ReliableCollectionsRef,
    ResourceLimits,
    ResourceRequests,
    ResourceRequirements,
    RunToCompletionExecutionPolicy,
    SecretResourceDescription,
    SecretResourceProperties,
    SecretResourcePropertiesUnion,
    SecretValue,
    SecretValueProperties,
    SecretValueResourceDescription,
    ServiceReplicaDescription,
    ServiceResourceDescription,
    ServiceResourceProperties,
    ServiceUpgradeProgress,
    Setting,
    TcpConfig,
    VolumeProperties,
    VolumeProviderParametersAzureFile,
    VolumeReference,
    VolumeResourceDescription,
)

__all__ = [
    "AadMetadata",
    "AadMetadataObject",
    "AddRemoveIncrementalNamedPartitionScalingMechanism",
    "AddRemoveReplicaScalingMechanism",
    "ApplicationBackupConfigurationInfo",
    "ApplicationBackupEntity",
    "ApplicationCapacityDescription",
    "ApplicationContainerInstanceExitedEvent",
    "ApplicationCreatedEvent",
    "ApplicationDefinitionKind",
    "ApplicationDefinitionKindFilter",
    "ApplicationDeletedEvent",
    "ApplicationDescription",
    "ApplicationEvent",
    "ApplicationHealth",
    "ApplicationHealthEvaluation",
    "ApplicationHealthPolicies",
    "ApplicationHealthPolicy",
    "ApplicationHealthPolicyMapItem",
    "ApplicationHealthReportExpiredEvent",
    "ApplicationHealthState",
    "ApplicationHealthStateChunk",
    "ApplicationHealthStateChunkList",
    "ApplicationHealthStateFilter",
    "ApplicationInfo",
    "ApplicationLoadInfo",
    "ApplicationLoadMetricInformation",
    "ApplicationMetricDescription",
    "ApplicationNameInfo",
    "ApplicationNewHealthReportEvent",
    "ApplicationPackageCleanupPolicy",
    "ApplicationParameter",
    "ApplicationProcessExitedEvent",
    "ApplicationResourceDescription",
    "ApplicationResourceProperties",
    "ApplicationResourceUpgradeProgressInfo",
    "ApplicationScopedVolume",
    "ApplicationScopedVolumeCreationParameters",
    "ApplicationScopedVolumeCreationParametersServiceFabricVolumeDisk",
    "ApplicationScopedVolumeCreationParametersUnion",
    "ApplicationScopedVolumeKind",
    "ApplicationStatus",
    "ApplicationTypeApplicationsHealthEvaluation",
    "ApplicationTypeDefinitionKind",
    "ApplicationTypeDefinitionKindFilter",
    "ApplicationTypeHealthPolicyMapItem",
    "ApplicationTypeInfo",
    "ApplicationTypeManifest",
    "ApplicationTypeStatus",
    "ApplicationUpdateDescription",
    "ApplicationUpgradeCompletedEvent",
    "ApplicationUpgradeDescription",
    "ApplicationUpgradeDomainCompletedEvent",
    "ApplicationUpgradeProgressInfo",
    "ApplicationUpgradeRollbackCompletedEvent",
    "ApplicationUpgradeRollbackStartedEvent",
    "ApplicationUpgradeStartedEvent",
    "ApplicationUpgradeUpdateDescription",
    "ApplicationsHealthEvaluation",
    "AutoScalingMechanism",
    "AutoScalingMechanismKind",
    "AutoScalingMechanismUnion",
    "AutoScalingMetric",
    "AutoScalingMetricKind",
    "AutoScalingMetricUnion",
    "AutoScalingPolicy",
    "AutoScalingResourceMetric",
    "AutoScalingResourceMetricName",
    "AutoScalingTrigger",
    "AutoScalingTriggerKind",
    "AutoScalingTriggerUnion",
    "AverageLoadScalingTrigger",
    "AveragePartitionLoadScalingTrigger",
    "AverageServiceLoadScalingTrigger",
    "AzureBlobBackupStorageDescription",
    "AzureInternalMonitoringPipelineSinkDescription",
    "BackupConfigurationInfo",
    "BackupConfigurationInfoUnion",
    "BackupEntity",
    "BackupEntityKind",
    "BackupEntityUnion",
    "BackupEpoch",
    "BackupInfo",
    "BackupPartitionDescription",
    "BackupPolicyDescription",
    "BackupPolicyScope",
    "BackupProgressInfo",
    "BackupScheduleDescription",
    "BackupScheduleDescriptionUnion",
    "BackupScheduleFrequencyType",
    "BackupScheduleKind",
    "BackupState",
    "BackupStorageDescription",
    "BackupStorageDescriptionUnion",
    "BackupStorageKind",
    "BackupSuspensionInfo",
    "BackupSuspensionScope",
    "BackupType",
    "BasicRetentionPolicyDescription",
    "BinaryPropertyValue",
    "CamelModel",
    "CamelPagedList",
    "Chaos",
    "ChaosCodePackageRestartScheduledEvent",
    "ChaosContext",
    "ChaosEvent",
    "ChaosEventKind",
    "ChaosEventUnion",
    "ChaosEventWrapper",
    "ChaosEventsSegment",
    "ChaosNodeRestartScheduledEvent",
    "ChaosParameters",
    "ChaosParametersDictionaryItem",
    "ChaosPartitionPrimaryMoveScheduledEvent",
    "ChaosPartitionSecondaryMoveScheduledEvent",
    "ChaosReplicaRemovalScheduledEvent",
    "ChaosReplicaRestartScheduledEvent",
    "ChaosSchedule",
    "ChaosScheduleDescription",
    "ChaosScheduleJob",
    "ChaosScheduleJobActiveDaysOfWeek",
    "ChaosScheduleStatus",
    "ChaosStartedEvent",
    "ChaosStatus",
    "ChaosStoppedEvent",
    "ChaosTargetFilter",
    "CheckExistsPropertyBatchOperation",
    "CheckSequencePropertyBatchOperation",
    "CheckValuePropertyBatchOperation",
    "ClusterConfiguration",
    "ClusterConfigurationUpgradeDescription",
    "ClusterConfigurationUpgradeStatusInfo",
    "ClusterEvent",
    "ClusterHealth",
    "ClusterHealthChunk",
    "ClusterHealthChunkQueryDescription",
    "ClusterHealthPolicies",
    "ClusterHealthPolicy",
    "ClusterHealthReportExpiredEvent",
    "ClusterLoadInfo",
    "ClusterManifest",
    "ClusterNewHealthReportEvent",
    "ClusterUpgradeCompletedEvent",
    "ClusterUpgradeDescriptionObject",
    "ClusterUpgradeDomainCompletedEvent",
    "ClusterUpgradeHealthPolicyObject",
    "ClusterUpgradeProgressObject",
    "ClusterUpgradeRollbackCompletedEvent",
    "ClusterUpgradeRollbackStartedEvent",
    "ClusterUpgradeStartedEvent",
    "ClusterVersion",
    "CodePackageEntryPoint",
    "CodePackageEntryPointStatistics",
    "ComposeDeploymentStatus",
    "ComposeDeploymentStatusInfo",
    "ComposeDeploymentUpgradeDescription",
    "ComposeDeploymentUpgradeProgressInfo",
    "ComposeDeploymentUpgradeState",
    "ConfigParameterOverride",
    "ContainerApiRequestBody",
    "ContainerApiResponse",
    "ContainerApiResult",
    "ContainerCodePackageProperties",
    "ContainerEvent",
    "ContainerInstanceView",
    "ContainerLabel",
    "ContainerLogs",
    "ContainerState",
    "CreateComposeDeploymentDescription",
    "CreateFabricDump",
    "CurrentUpgradeDomainProgressInfo",
    "CurrentUpgradeUnitsProgressInfo",
    "DataLossMode",
    "DayOfWeek",
    "DeactivationIntent",
    "DeactivationIntentDescription",
    "DefaultExecutionPolicy",
    "DeletePropertyBatchOperation",
    "DeltaNodesCheckHealthEvaluation",
    "DeployServicePackageToNodeDescription",
    "DeployedApplicationHealth",
    "DeployedApplicationHealthEvaluation",
    "DeployedApplicationHealthState",
    "DeployedApplicationHealthStateChunk",
    "DeployedApplicationHealthStateChunkList",
    "DeployedApplicationHealthStateFilter",
    "DeployedApplicationInfo",
    "DeployedApplicationsHealthEvaluation",
    "DeployedCodePackageInfo",
    "DeployedServicePackageHealth",
    "DeployedServicePackageHealthEvaluation",
    "DeployedServicePackageHealthState",
    "DeployedServicePackageHealthStateChunk",
    "DeployedServicePackageHealthStateChunkList",
    "DeployedServicePackageHealthStateFilter",
    "DeployedServicePackageInfo",
    "DeployedServicePackagesHealthEvaluation",
    "DeployedServiceReplicaDetailInfo",
    "DeployedServiceReplicaDetailInfoUnion",
    "DeployedServiceReplicaInfo",
    "DeployedServiceReplicaInfoUnion",
    "DeployedServiceTypeInfo",
    "DeployedStatefulServiceReplicaDetailInfo",
    "DeployedStatefulServiceReplicaInfo",
    "DeployedStatelessServiceInstanceDetailInfo",
    "DeployedStatelessServiceInstanceInfo",
    "DeploymentStatus",
    "DiagnosticsDescription",
    "DiagnosticsRef",
    "DiagnosticsSinkKind",
    "DiagnosticsSinkProperties",
    "DiagnosticsSinkPropertiesUnion",
    "DisableBackupDescription",
    "DiskInfo",
    "DoublePropertyValue",
    "DsmsAzureBlobBackupStorageDescription",
    "EnableBackupDescription",
    "EndpointProperties",
    "EndpointRef",
    "EnsureAvailabilitySafetyCheck",
    "EnsurePartitionQuorumSafetyCheck",
    "EntityHealth",
    "EntityHealthState",
    "EntityKind",
    "EntityKindHealthStateCount",
    "EntryPointStatus",
    "EnvironmentVariable",
    "Epoch",
    "EventHealthEvaluation",
    "ExecutingFaultsChaosEvent",
    "ExecutionPolicy",
    "ExecutionPolicyType",
    "ExecutionPolicyUnion",
    "ExternalStoreProvisionApplicationTypeDescription",
    "FABRIC_ERROR_STATUS",
    "FABRIC_EVENT_VARIANTS",
    "FabricCodeVersionInfo",
    "FabricConfigVersionInfo",
    "FabricDuration",
    "FabricEnum",
    "FabricError",
    "FabricErrorCodes",
    "FabricErrorError",
    "FabricEvent",
    "FabricEventKind",
    "FabricEventUnion",
    "FabricModel",
    "FailedPropertyBatchInfo",
    "FailureAction",
    "FailureReason",
    "FailureUpgradeDomainProgressInfo",
    "FileInfo",
    "FileShareBackupStorageDescription",
    "FileVersion",
    "FolderInfo",
    "FolderSizeInfo",
    "FrequencyBasedBackupScheduleDescription",
    "GatewayDestination",
    "GatewayProperties",
    "GatewayResourceDescription",
    "GetBackupByStorageQueryDescription",
    "GetPropertyBatchOperation",
    "GuidPropertyValue",
    "HeaderMatchType",
    "HealthEvaluation",
    "HealthEvaluationKind",
    "HealthEvaluationUnion",
    "HealthEvaluationWrapper",
    "HealthEvent",
    "HealthInformation",
    "HealthState",
    "HealthStateCount",
    "HealthStateFilter",
    "HealthStatistics",
    "HostIsolationMode",
    "HostType",
    "HttpConfig",
    "HttpHostConfig",
    "HttpRouteConfig",
    "HttpRouteMatchHeader",
    "HttpRouteMatchPath",
    "HttpRouteMatchRule",
    "IdentityDescription",
    "IdentityItemDescription",
    "ImageRegistryCredential",
    "ImageStoreContent",
    "ImageStoreCopyDescription",
    "ImageStoreInfo",
    "ImpactLevel",
    "InlinedValueSecretResourceProperties",
    "Int64PropertyValue",
    "Int64RangePartitionInformation",
    "InvokeDataLossResult",
    "InvokeQuorumLossResult",
    "KeyVaultVersionedReferenceSecretResourceProperties",
    "LoadMetricInformation",
    "LoadMetricReport",
    "LoadMetricReportInfo",
    "LoadedPartitionInformationResult",
    "LoadedPartitionInformationResultList",
    "LocalNetworkResourceProperties",
    "ManagedApplicationIdentity",
    "ManagedApplicationIdentityDescription",
    "ManagedIdentityAzureBlobBackupStorageDescription",
    "ManagedIdentityType",
    "MetricLoadDescription",
    "MonitoringPolicyDescription",
    "MoveCost",
    "NameDescription",
    "NamedPartitionInformation",
    "NamedPartitionSchemeDescription",
    "NetworkKind",
    "NetworkRef",
    "NetworkResourceDescription",
    "NetworkResourceProperties",
    "NetworkResourcePropertiesUnion",
    "NodeAbortedEvent",
    "NodeAddedToClusterEvent",
    "NodeClosedEvent",
    "NodeDeactivateCompletedEvent",
    "NodeDeactivateStartedEvent",
    "NodeDeactivationInfo",
    "NodeDeactivationIntent",
    "NodeDeactivationStatus",
    "NodeDeactivationTask",
    "NodeDeactivationTaskId",
    "NodeDeactivationTaskType",
    "NodeDownEvent",
    "NodeEvent",
    "NodeHealth",
    "NodeHealthEvaluation",
    "NodeHealthReportExpiredEvent",
    "NodeHealthState",
    "NodeHealthStateChunk",
    "NodeHealthStateChunkList",
    "NodeHealthStateFilter",
    "NodeId",
    "NodeImpact",
    "NodeInfo",
    "NodeLoadInfo",
    "NodeLoadMetricInformation",
    "NodeNewHealthReportEvent",
    "NodeOpenFailedEvent",
    "NodeOpenSucceededEvent",
    "NodeRemovedFromClusterEvent",
    "NodeRepairImpactDescription",
    "NodeRepairTargetDescription",
    "NodeResult",
    "NodeStatus",
    "NodeStatusFilter",
    "NodeTagsDescription",
    "NodeTransitionProgress",
    "NodeTransitionResult",
    "NodeTransitionType",
    "NodeTypeHealthPolicyMapItem",
    "NodeTypeNodesHealthEvaluation",
    "NodeUpEvent",
    "NodeUpgradePhase",
    "NodeUpgradeProgressInfo",
    "NodesHealthEvaluation",
    "OperatingSystemType",
    "OperationState",
    "OperationStateFilter",
    "OperationStatus",
    "OperationType",
    "OperationTypeFilter",
    "Ordering",
    "POLYMORPHIC_TYPES",
    "PackageSharingPolicyInfo",
    "PackageSharingPolicyScope",
    "PagedApplicationInfoList",
    "PagedApplicationResourceDescriptionList",
    "PagedApplicationTypeInfoList",
    "PagedBackupConfigurationInfoList",
    "PagedBackupEntityList",
    "PagedBackupInfoList",
    "PagedBackupPolicyDescriptionList",
    "PagedComposeDeploymentStatusInfoList",
    "PagedDeployedApplicationInfoList",
    "PagedGatewayResourceDescriptionList",
    "PagedList",
    "PagedNetworkResourceDescriptionList",
    "PagedNodeInfoList",
    "PagedPropertyInfoList",
    "PagedReplicaInfoList",
    "PagedSecretResourceDescriptionList",
    "PagedSecretValueResourceDescriptionList",
    "PagedServiceInfoList",
    "PagedServicePartitionInfoList",
    "PagedServiceReplicaDescriptionList",
    "PagedServiceResourceDescriptionList",
    "PagedSubNameInfoList",
    "PagedUpdatePartitionLoadResultList",
    "PagedVolumeResourceDescriptionList",
    "PartitionAccessStatus",
    "PartitionBackupConfigurationInfo",
    "PartitionBackupEntity",
    "PartitionDataLossProgress",
    "PartitionEvent",
    "PartitionHealth",
    "PartitionHealthEvaluation",
    "PartitionHealthReportExpiredEvent",
    "PartitionHealthState",
    "PartitionHealthStateChunk",
    "PartitionHealthStateChunkList",
    "PartitionHealthStateFilter",
    "PartitionInformation",
    "PartitionInformationUnion",
    "PartitionInstanceCountScaleMechanism",
    "PartitionKeyType",
    "PartitionLoadInformation",
    "PartitionMetricLoadDescription",
    "PartitionNewHealthReportEvent",
    "PartitionPrimaryMoveAnalysisEvent",
    "PartitionQuorumLossProgress",
    "PartitionReconfiguredEvent",
    "PartitionRestartProgress",
    "PartitionSafetyCheck",
    "PartitionScheme",
    "PartitionSchemeDescription",
    "PartitionSchemeDescriptionUnion",
    "PartitionsHealthEvaluation",
    "PathMatchType",
    "PolymorphicType",
    "PropertyBatchDescriptionList",
    "PropertyBatchInfo",
    "PropertyBatchInfoKind",
    "PropertyBatchInfoUnion",
    "PropertyBatchOperation",
    "PropertyBatchOperationKind",
    "PropertyBatchOperationUnion",
    "PropertyDescription",
    "PropertyInfo",
    "PropertyMetadata",
    "PropertyValue",
    "PropertyValueKind",
    "PropertyValueUnion",
    "ProvisionApplicationTypeDescription",
    "ProvisionApplicationTypeDescriptionBase",
    "ProvisionApplicationTypeDescriptionUnion",
    "ProvisionApplicationTypeKind",
    "ProvisionFabricDescription",
    "PutPropertyBatchOperation",
    "QuorumLossMode",
    "ReconfigurationInformation",
    "ReconfigurationPhase",
    "ReconfigurationType",
    "RegistryCredential",
    "ReliableCollectionsRef",
    "RepairImpactDescription",
    "RepairImpactDescriptionUnion",
    "RepairImpactKind",
    "RepairTargetDescription",
    "RepairTargetDescriptionUnion",
    "RepairTargetKind",
    "RepairTask",
    "RepairTaskApproveDescription",
    "RepairTaskCancelDescription",
    "RepairTaskDeleteDescription",
    "RepairTaskHealthCheckState",
    "RepairTaskHistory",
    "RepairTaskResult",
    "RepairTaskState",
    "RepairTaskStateFilter",
    "RepairTaskUpdateHealthPolicyDescription",
    "RepairTaskUpdateInfo",
    "ReplicaEvent",
    "ReplicaHealth",
    "ReplicaHealthEvaluation",
    "ReplicaHealthState",
    "ReplicaHealthStateChunk",
    "ReplicaHealthStateChunkList",
    "ReplicaHealthStateFilter",
    "ReplicaHealthStateUnion",
    "ReplicaHealthUnion",
    "ReplicaInfo",
    "ReplicaInfoUnion",
    "ReplicaKind",
    "ReplicaMetricLoadDescription",
    "ReplicaRole",
    "ReplicaStatus",
    "ReplicasHealthEvaluation",
    "ReplicatorOperationName",
    "ResolvedServiceEndpoint",
    "ResolvedServicePartition",
    "ResourceLimits",
    "ResourceRequests",
    "ResourceRequirements",
    "ResourceStatus",
    "RestartDeployedCodePackageDescription",
    "RestartNodeDescription",
    "RestartPartitionMode",
    "RestartPartitionResult",
    "RestartPolicy",
    "RestorePartitionDescription",
    "RestoreProgressInfo",
    "RestoreState",
    "ResumeUpgradeDescription",
    "RetentionPolicyDescription",
    "RetentionPolicyDescriptionUnion",
    "RetentionPolicyType",
    "RollingUpgradeMode",
    "RollingUpgradeUpdateDescription",
    "RunToCompletionExecutionPolicy",
    "SafetyCheck",
    "SafetyCheckKind",
    "SafetyCheckUnion",
    "SafetyCheckWrapper",
    "ScalingMechanismDescription",
    "ScalingMechanismDescriptionUnion",
    "ScalingMechanismKind",
    "ScalingPolicyDescription",
    "ScalingTriggerDescription",
    "ScalingTriggerDescriptionUnion",
    "ScalingTriggerKind",
    "SecretKind",
    "SecretResourceDescription",
    "SecretResourceProperties",
    "SecretResourcePropertiesUnion",
    "SecretValue",
    "SecretValueProperties",
    "SecretValueResourceDescription",
    "SeedNodeSafetyCheck",
    "SelectedPartition",
    "ServiceBackupConfigurationInfo",
    "ServiceBackupEntity",
    "ServiceCorrelationDescription",
    "ServiceCorrelationScheme",
    "ServiceCreatedEvent",
    "ServiceDeletedEvent",
    "ServiceDescription",
    "ServiceDescriptionUnion",
    "ServiceEndpointRole",
    "ServiceEvent",
    "ServiceFromTemplateDescription",
    "ServiceHealth",
    "ServiceHealthEvaluation",
    "ServiceHealthReportExpiredEvent",
    "ServiceHealthState",
    "ServiceHealthStateChunk",
    "ServiceHealthStateChunkList",
    "ServiceHealthStateFilter",
    "ServiceInfo",
    "ServiceInfoUnion",
    "ServiceKind",
    "ServiceLoadMetricDescription",
    "ServiceLoadMetricWeight",
    "ServiceNameInfo",
    "ServiceNewHealthReportEvent",
    "ServiceOperationName",
    "ServicePackageActivationMode",
    "ServicePartitionInfo",
    "ServicePartitionInfoUnion",
    "ServicePartitionKind",
    "ServicePartitionStatus",
    "ServicePlacementAllowMultipleStatelessInstancesOnNodePolicyDescription",
    "ServicePlacementInvalidDomainPolicyDescription",
    "ServicePlacementNonPartiallyPlaceServicePolicyDescription",
    "ServicePlacementPolicyDescription",
    "ServicePlacementPolicyDescriptionUnion",
    "ServicePlacementPolicyType",
    "ServicePlacementPreferPrimaryDomainPolicyDescription",
    "ServicePlacementRequireDomainDistributionPolicyDescription",
    "ServicePlacementRequiredDomainPolicyDescription",
    "ServiceReplicaDescription",
    "ServiceResourceDescription",
    "ServiceResourceProperties",
    "ServiceStatus",
    "ServiceTypeDescription",
    "ServiceTypeDescriptionUnion",
    "ServiceTypeExtensionDescription",
    "ServiceTypeHealthPolicy",
    "ServiceTypeHealthPolicyMapItem",
    "ServiceTypeInfo",
    "ServiceTypeManifest",
    "ServiceTypeRegistrationStatus",
    "ServiceUpdateDescription",
    "ServiceUpdateDescriptionUnion",
    "ServiceUpgradeProgress",
    "ServicesHealthEvaluation",
    "Setting",
    "SettingType",
    "SingletonPartitionInformation",
    "SingletonPartitionSchemeDescription",
    "SizeTypes",
    "StartClusterUpgradeDescription",
    "StartedChaosEvent",
    "StatefulReplicaHealthReportExpiredEvent",
    "StatefulReplicaNewHealthReportEvent",
    "StatefulServiceDescription",
    "StatefulServiceInfo",
    "StatefulServicePartitionInfo",
    "StatefulServiceReplicaHealth",
    "StatefulServiceReplicaHealthState",
    "StatefulServiceReplicaInfo",
    "StatefulServiceTypeDescription",
    "StatefulServiceUpdateDescription",
    "StatelessReplicaHealthReportExpiredEvent",
    "StatelessReplicaNewHealthReportEvent",
    "StatelessServiceDescription",
    "StatelessServiceInfo",
    "StatelessServiceInstanceHealth",
    "StatelessServiceInstanceHealthState",
    "StatelessServiceInstanceInfo",
    "StatelessServicePartitionInfo",
    "StatelessServiceTypeDescription",
    "StatelessServiceUpdateDescription",
    "StoppedChaosEvent",
    "StringPropertyValue",
    "SuccessfulPropertyBatchInfo",
    "SystemApplicationHealthEvaluation",
    "TcpConfig",
    "TestErrorChaosEvent",
    "TimeBasedBackupScheduleDescription",
    "TimeOfDay",
    "TimeRange",
    "UNKNOWN_TAG",
    "UniformInt64RangePartitionSchemeDescription",
    "UnplacedReplicaInformation",
    "UnprovisionApplicationTypeDescriptionInfo",
    "UnprovisionFabricDescription",
    "UpdateClusterUpgradeDescription",
    "UpdatePartitionLoadResult",
    "UpgradeDomainDeltaNodesCheckHealthEvaluation",
    "UpgradeDomainDeployedApplicationsHealthEvaluation",
    "UpgradeDomainInfo",
    "UpgradeDomainNodesHealthEvaluation",
    "UpgradeDomainState",
    "UpgradeKind",
    "UpgradeMode",
    "UpgradeOrchestrationServiceState",
    "UpgradeOrchestrationServiceStateSummary",
    "UpgradeSortOrder",
    "UpgradeState",
    "UpgradeUnitInfo",
    "UpgradeUnitState",
    "UploadChunkRange",
    "UploadSession",
    "UploadSessionInfo",
    "UsageInfo",
    "ValidationFailedChaosEvent",
    "VolumeProperties",
    "VolumeProvider",
    "VolumeProviderParametersAzureFile",
    "VolumeReference",
    "VolumeResourceDescription",
    "WaitForInbuildReplicaSafetyCheck",
    "WaitForPrimaryPlacementSafetyCheck",
    "WaitForPrimarySwapSafetyCheck",
    "WaitForReconfigurationSafetyCheck",
    "WaitingChaosEvent",
    "datetime_to_file_time",
    "discriminator_literal",
    "expected_status",
    "format_iso_duration",
    "parse_fabric_duration",
    "parse_iso_duration",
    "polymorphic",
    "to_wire",
]
