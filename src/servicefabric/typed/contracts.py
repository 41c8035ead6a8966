"""Request/response contracts for every Service Fabric REST operation the client exposes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..models import (
    AadMetadataObject,
    ApplicationDescription,
    ApplicationHealth,
    ApplicationHealthPolicy,
    ApplicationInfo,
    ApplicationLoadInfo,
    ApplicationNameInfo,
    ApplicationResourceDescription,
    ApplicationResourceUpgradeProgressInfo,
    ApplicationTypeManifest,
    ApplicationUpdateDescription,
    ApplicationUpgradeDescription,
    ApplicationUpgradeProgressInfo,
    ApplicationUpgradeUpdateDescription,
    BackupPartitionDescription,
    BackupPolicyDescription,
    BackupProgressInfo,
    Chaos,
    ChaosEventsSegment,
    ChaosParameters,
    ChaosScheduleDescription,
    ClusterConfiguration,
    ClusterConfigurationUpgradeDescription,
    ClusterConfigurationUpgradeStatusInfo,
    ClusterHealth,
    ClusterHealthChunk,
    ClusterHealthChunkQueryDescription,
    ClusterHealthPolicies,
    ClusterHealthPolicy,
    ClusterLoadInfo,
    ClusterManifest,
    ClusterUpgradeProgressObject,
    ClusterVersion,
    ComposeDeploymentStatusInfo,
    ComposeDeploymentUpgradeDescription,
    ComposeDeploymentUpgradeProgressInfo,
    ConfigParameterOverride,
    ContainerApiRequestBody,
    ContainerApiResponse,
    ContainerLogs,
    CreateComposeDeploymentDescription,
    DeactivationIntentDescription,
    DeployedApplicationHealth,
    DeployedApplicationInfo,
    DeployedCodePackageInfo,
    DeployedServicePackageHealth,
    DeployedServicePackageInfo,
    DeployedServiceReplicaDetailInfoUnion,
    DeployedServiceReplicaInfoUnion,
    DeployedServiceTypeInfo,
    DeployServicePackageToNodeDescription,
    DisableBackupDescription,
    EnableBackupDescription,
    FabricCodeVersionInfo,
    FabricConfigVersionInfo,
    FabricEventUnion,
    FolderSizeInfo,
    GatewayResourceDescription,
    GetBackupByStorageQueryDescription,
    HealthInformation,
    ImageStoreContent,
    ImageStoreCopyDescription,
    ImageStoreInfo,
    LoadedPartitionInformationResultList,
    NameDescription,
    NetworkResourceDescription,
    NodeHealth,
    NodeInfo,
    NodeLoadInfo,
    NodeTransitionProgress,
    OperationStatus,
    PagedApplicationInfoList,
    PagedApplicationResourceDescriptionList,
    PagedApplicationTypeInfoList,
    PagedBackupConfigurationInfoList,
    PagedBackupEntityList,
    PagedBackupInfoList,
    PagedBackupPolicyDescriptionList,
    PagedComposeDeploymentStatusInfoList,
    PagedDeployedApplicationInfoList,
    PagedGatewayResourceDescriptionList,
    PagedNetworkResourceDescriptionList,
    PagedNodeInfoList,
    PagedPropertyInfoList,
    PagedReplicaInfoList,
    PagedSecretResourceDescriptionList,
    PagedSecretValueResourceDescriptionList,
    PagedServiceInfoList,
    PagedServicePartitionInfoList,
    PagedServiceReplicaDescriptionList,
    PagedServiceResourceDescriptionList,
    PagedSubNameInfoList,
    PagedUpdatePartitionLoadResultList,
    PagedVolumeResourceDescriptionList,
    PartitionDataLossProgress,
    PartitionHealth,
    PartitionLoadInformation,
    PartitionMetricLoadDescription,
    PartitionQuorumLossProgress,
    PartitionRestartProgress,
    PropertyBatchDescriptionList,
    PropertyBatchInfoUnion,
    PropertyBatchOperationUnion,
    PropertyDescription,
    PropertyInfo,
    ProvisionApplicationTypeDescriptionUnion,
    ProvisionFabricDescription,
    RepairTask,
    RepairTaskApproveDescription,
    RepairTaskCancelDescription,
    RepairTaskDeleteDescription,
    RepairTaskUpdateHealthPolicyDescription,
    RepairTaskUpdateInfo,
    ReplicaHealthUnion,
    ReplicaInfoUnion,
    ResolvedServicePartition,
    RestartDeployedCodePackageDescription,
    RestartNodeDescription,
    RestorePartitionDescription,
    RestoreProgressInfo,
    ResumeUpgradeDescription,
    SecretResourceDescription,
    SecretValue,
    SecretValueResourceDescription,
    ServiceDescriptionUnion,
    ServiceFromTemplateDescription,
    ServiceHealth,
    ServiceInfoUnion,
    ServiceNameInfo,
    ServicePartitionInfoUnion,
    ServiceReplicaDescription,
    ServiceResourceDescription,
    ServiceTypeInfo,
    ServiceTypeManifest,
    ServiceUpdateDescriptionUnion,
    StartClusterUpgradeDescription,
    UnplacedReplicaInformation,
    UnprovisionApplicationTypeDescriptionInfo,
    UnprovisionFabricDescription,
    UpdateClusterUpgradeDescription,
    UploadSession,
    UpgradeOrchestrationServiceState,
    UpgradeOrchestrationServiceStateSummary,
    VolumeResourceDescription,
)


@dataclass(frozen=True, slots=True)
class TypedOperationContract:
    operation_key: str
    operation_id: str
    request_model: Any | None
    response_model: Any | None


_CONTRACT_TABLE: tuple[tuple[str, str, Any, Any], ...] = (
    # cluster
    ("cluster.get_manifest", "GetClusterManifest", None, ClusterManifest),
    ("cluster.get_health", "GetClusterHealth", None, ClusterHealth),
    ("cluster.get_health_using_policy", "GetClusterHealthUsingPolicy", ClusterHealthPolicies, ClusterHealth),
    ("cluster.get_health_chunk", "GetClusterHealthChunk", None, ClusterHealthChunk),
    (
        "cluster.get_health_chunk_using_policy_and_advanced_filters",
        "GetClusterHealthChunkUsingPolicyAndAdvancedFilters",
        ClusterHealthChunkQueryDescription,
        ClusterHealthChunk,
    ),
    ("cluster.report_health", "ReportClusterHealth", HealthInformation, None),
    ("cluster.get_provisioned_code_versions", "GetProvisionedFabricCodeVersionInfoList", None, list[FabricCodeVersionInfo]),
    (
        "cluster.get_provisioned_config_versions",
        "GetProvisionedFabricConfigVersionInfoList",
        None,
        list[FabricConfigVersionInfo],
    ),
    ("cluster.get_upgrade_progress", "GetClusterUpgradeProgress", None, ClusterUpgradeProgressObject),
    ("cluster.get_configuration", "GetClusterConfiguration", None, ClusterConfiguration),
    (
        "cluster.get_configuration_upgrade_status",
        "GetClusterConfigurationUpgradeStatus",
        None,
        ClusterConfigurationUpgradeStatusInfo,
    ),
    (
        "cluster.get_upgrade_orchestration_service_state",
        "GetUpgradeOrchestrationServiceState",
        None,
        UpgradeOrchestrationServiceState,
    ),
    (
        "cluster.set_upgrade_orchestration_service_state",
        "SetUpgradeOrchestrationServiceState",
        UpgradeOrchestrationServiceState,
        UpgradeOrchestrationServiceStateSummary,
    ),
    ("cluster.provision", "ProvisionCluster", ProvisionFabricDescription, None),
    ("cluster.unprovision", "UnprovisionCluster", UnprovisionFabricDescription, None),
    ("cluster.rollback_upgrade", "RollbackClusterUpgrade", None, None),
    ("cluster.resume_upgrade", "ResumeClusterUpgrade", ResumeUpgradeDescription, None),
    ("cluster.start_upgrade", "StartClusterUpgrade", StartClusterUpgradeDescription, None),
    (
        "cluster.start_configuration_upgrade",
        "StartClusterConfigurationUpgrade",
        ClusterConfigurationUpgradeDescription,
        None,
    ),
    ("cluster.update_upgrade", "UpdateClusterUpgrade", UpdateClusterUpgradeDescription, None),
    ("cluster.get_aad_metadata", "GetAadMetadata", None, AadMetadataObject),
    ("cluster.get_version", "GetClusterVersion", None, ClusterVersion),
    ("cluster.get_load", "GetClusterLoad", None, ClusterLoadInfo),
    (
        "cluster.toggle_verbose_service_placement_health_reporting",
        "ToggleVerboseServicePlacementHealthReporting",
        None,
        None,
    ),
    # nodes
    ("nodes.list", "GetNodeInfoList", None, PagedNodeInfoList),
    ("nodes.get", "GetNodeInfo", None, NodeInfo),
    ("nodes.get_health", "GetNodeHealth", None, NodeHealth),
    ("nodes.get_health_using_policy", "GetNodeHealthUsingPolicy", ClusterHealthPolicy, NodeHealth),
    ("nodes.report_health", "ReportNodeHealth", HealthInformation, None),
    ("nodes.get_load", "GetNodeLoadInfo", None, NodeLoadInfo),
    ("nodes.disable", "DisableNode", DeactivationIntentDescription, None),
    ("nodes.enable", "EnableNode", None, None),
    ("nodes.remove_state", "RemoveNodeState", None, None),
    ("nodes.restart", "RestartNode", RestartNodeDescription, None),
    ("nodes.get_configuration_overrides", "GetConfigurationOverrides", None, list[ConfigParameterOverride]),
    (
        "nodes.add_configuration_parameter_overrides",
        "AddConfigurationParameterOverrides",
        list[ConfigParameterOverride],
        None,
    ),
    ("nodes.remove_configuration_overrides", "RemoveConfigurationOverrides", None, None),
    ("nodes.add_tags", "AddNodeTags", list[str], None),
    ("nodes.remove_tags", "RemoveNodeTags", list[str], None),
    # application types
    ("application_types.list", "GetApplicationTypeInfoList", None, PagedApplicationTypeInfoList),
    ("application_types.get", "GetApplicationTypeInfoListByName", None, PagedApplicationTypeInfoList),
    (
        "application_types.provision",
        "ProvisionApplicationType",
        ProvisionApplicationTypeDescriptionUnion,
        None,
    ),
    (
        "application_types.unprovision",
        "UnprovisionApplicationType",
        UnprovisionApplicationTypeDescriptionInfo,
        None,
    ),
    ("application_types.get_manifest", "GetApplicationManifest", None, ApplicationTypeManifest),
    ("application_types.get_service_types", "GetServiceTypeInfoList", None, list[ServiceTypeInfo]),
    ("application_types.get_service_type", "GetServiceTypeInfoByName", None, ServiceTypeInfo),
    ("application_types.get_service_manifest", "GetServiceManifest", None, ServiceTypeManifest),
    # applications
    ("applications.create", "CreateApplication", ApplicationDescription, None),
    ("applications.delete", "DeleteApplication", None, None),
    ("applications.list", "GetApplicationInfoList", None, PagedApplicationInfoList),
    ("applications.get", "GetApplicationInfo", None, ApplicationInfo),
    ("applications.get_load", "GetApplicationLoadInfo", None, ApplicationLoadInfo),
    ("applications.get_health", "GetApplicationHealth", None, ApplicationHealth),
    (
        "applications.get_health_using_policy",
        "GetApplicationHealthUsingPolicy",
        ApplicationHealthPolicy,
        ApplicationHealth,
    ),
    ("applications.report_health", "ReportApplicationHealth", HealthInformation, None),
    ("applications.update", "UpdateApplication", ApplicationUpdateDescription, None),
    ("applications.start_upgrade", "StartApplicationUpgrade", ApplicationUpgradeDescription, None),
    ("applications.get_upgrade", "GetApplicationUpgrade", None, ApplicationUpgradeProgressInfo),
    ("applications.update_upgrade", "UpdateApplicationUpgrade", ApplicationUpgradeUpdateDescription, None),
    ("applications.resume_upgrade", "ResumeApplicationUpgrade", ResumeUpgradeDescription, None),
    ("applications.rollback_upgrade", "RollbackApplicationUpgrade", None, None),
    # deployed applications
    ("deployed_applications.list", "GetDeployedApplicationInfoList", None, PagedDeployedApplicationInfoList),
    ("deployed_applications.get", "GetDeployedApplicationInfo", None, DeployedApplicationInfo),
    ("deployed_applications.get_health", "GetDeployedApplicationHealth", None, DeployedApplicationHealth),
    (
        "deployed_applications.get_health_using_policy",
        "GetDeployedApplicationHealthUsingPolicy",
        ApplicationHealthPolicy,
        DeployedApplicationHealth,
    ),
    ("deployed_applications.report_health", "ReportDeployedApplicationHealth", HealthInformation, None),
    (
        "deployed_applications.get_service_packages",
        "GetDeployedServicePackageInfoList",
        None,
        list[DeployedServicePackageInfo],
    ),
    (
        "deployed_applications.get_service_package",
        "GetDeployedServicePackageInfoListByName",
        None,
        list[DeployedServicePackageInfo],
    ),
    (
        "deployed_applications.get_service_package_health",
        "GetDeployedServicePackageHealth",
        None,
        DeployedServicePackageHealth,
    ),
    (
        "deployed_applications.get_service_package_health_using_policy",
        "GetDeployedServicePackageHealthUsingPolicy",
        ApplicationHealthPolicy,
        DeployedServicePackageHealth,
    ),
    (
        "deployed_applications.report_service_package_health",
        "ReportDeployedServicePackageHealth",
        HealthInformation,
        None,
    ),
    (
        "deployed_applications.deploy_service_package",
        "DeployServicePackageToNode",
        DeployServicePackageToNodeDescription,
        None,
    ),
    (
        "deployed_applications.get_service_types",
        "GetDeployedServiceTypeInfoList",
        None,
        list[DeployedServiceTypeInfo],
    ),
    (
        "deployed_applications.get_service_type",
        "GetDeployedServiceTypeInfoByName",
        None,
        list[DeployedServiceTypeInfo],
    ),
    (
        "deployed_applications.get_code_packages",
        "GetDeployedCodePackageInfoList",
        None,
        list[DeployedCodePackageInfo],
    ),
    (
        "deployed_applications.restart_code_package",
        "RestartDeployedCodePackage",
        RestartDeployedCodePackageDescription,
        None,
    ),
    ("deployed_applications.get_container_logs", "GetContainerLogsDeployedOnNode", None, ContainerLogs),
    (
        "deployed_applications.invoke_container_api",
        "InvokeContainerApi",
        ContainerApiRequestBody,
        ContainerApiResponse,
    ),
    # services
    ("services.list", "GetServiceInfoList", None, PagedServiceInfoList),
    ("services.get", "GetServiceInfo", None, ServiceInfoUnion),
    ("services.get_application_name_info", "GetApplicationNameInfo", None, ApplicationNameInfo),
    ("services.create", "CreateService", ServiceDescriptionUnion, None),
    ("services.create_from_template", "CreateServiceFromTemplate", ServiceFromTemplateDescription, None),
    ("services.delete", "DeleteService", None, None),
    ("services.update", "UpdateService", ServiceUpdateDescriptionUnion, None),
    ("services.get_description", "GetServiceDescription", None, ServiceDescriptionUnion),
    ("services.get_health", "GetServiceHealth", None, ServiceHealth),
    ("services.get_health_using_policy", "GetServiceHealthUsingPolicy", ApplicationHealthPolicy, ServiceHealth),
    ("services.report_health", "ReportServiceHealth", HealthInformation, None),
    ("services.resolve", "ResolveService", None, ResolvedServicePartition),
    (
        "services.get_unplaced_replica_information",
        "GetUnplacedReplicaInformation",
        None,
        UnplacedReplicaInformation,
    ),
    # partitions
    ("partitions.list", "GetPartitionInfoList", None, PagedServicePartitionInfoList),
    ("partitions.get", "GetPartitionInfo", None, ServicePartitionInfoUnion),
    ("partitions.get_service_name_info", "GetServiceNameInfo", None, ServiceNameInfo),
    ("partitions.get_health", "GetPartitionHealth", None, PartitionHealth),
    (
        "partitions.get_health_using_policy",
        "GetPartitionHealthUsingPolicy",
        ApplicationHealthPolicy,
        PartitionHealth,
    ),
    ("partitions.report_health", "ReportPartitionHealth", HealthInformation, None),
    ("partitions.get_load", "GetPartitionLoadInformation", None, PartitionLoadInformation),
    ("partitions.reset_load", "ResetPartitionLoad", None, None),
    (
        "partitions.update_load",
        "UpdatePartitionLoad",
        list[PartitionMetricLoadDescription],
        PagedUpdatePartitionLoadResultList,
    ),
    (
        "partitions.get_loaded_partition_info_list",
        "GetLoadedPartitionInfoList",
        None,
        LoadedPartitionInformationResultList,
    ),
    ("partitions.recover", "RecoverPartition", None, None),
    ("partitions.recover_service_partitions", "RecoverServicePartitions", None, None),
    ("partitions.recover_system", "RecoverSystemPartitions", None, None),
    ("partitions.recover_all", "RecoverAllPartitions", None, None),
    ("partitions.move_primary_replica", "MovePrimaryReplica", None, None),
    ("partitions.move_secondary_replica", "MoveSecondaryReplica", None, None),
    ("partitions.move_instance", "MoveInstance", None, None),
    # replicas
    ("replicas.list", "GetReplicaInfoList", None, PagedReplicaInfoList),
    ("replicas.get", "GetReplicaInfo", None, ReplicaInfoUnion),
    ("replicas.get_health", "GetReplicaHealth", None, ReplicaHealthUnion),
    (
        "replicas.get_health_using_policy",
        "GetReplicaHealthUsingPolicy",
        ApplicationHealthPolicy,
        ReplicaHealthUnion,
    ),
    ("replicas.report_health", "ReportReplicaHealth", HealthInformation, None),
    (
        "replicas.list_deployed",
        "GetDeployedServiceReplicaInfoList",
        None,
        list[DeployedServiceReplicaInfoUnion],
    ),
    (
        "replicas.get_deployed_detail",
        "GetDeployedServiceReplicaDetailInfo",
        None,
        DeployedServiceReplicaDetailInfoUnion,
    ),
    (
        "replicas.get_deployed_detail_by_partition",
        "GetDeployedServiceReplicaDetailInfoByPartitionId",
        None,
        DeployedServiceReplicaDetailInfoUnion,
    ),
    ("replicas.restart", "RestartReplica", None, None),
    ("replicas.remove", "RemoveReplica", None, None),
    # faults
    ("faults.start_data_loss", "StartDataLoss", None, None),
    ("faults.get_data_loss_progress", "GetDataLossProgress", None, PartitionDataLossProgress),
    ("faults.start_quorum_loss", "StartQuorumLoss", None, None),
    ("faults.get_quorum_loss_progress", "GetQuorumLossProgress", None, PartitionQuorumLossProgress),
    ("faults.start_partition_restart", "StartPartitionRestart", None, None),
    ("faults.get_partition_restart_progress", "GetPartitionRestartProgress", None, PartitionRestartProgress),
    ("faults.start_node_transition", "StartNodeTransition", None, None),
    ("faults.get_node_transition_progress", "GetNodeTransitionProgress", None, NodeTransitionProgress),
    ("faults.list_operations", "GetFaultOperationList", None, list[OperationStatus]),
    ("faults.cancel_operation", "CancelOperation", None, None),
    # repair tasks
    ("repair_tasks.create", "CreateRepairTask", RepairTask, RepairTaskUpdateInfo),
    ("repair_tasks.cancel", "CancelRepairTask", RepairTaskCancelDescription, RepairTaskUpdateInfo),
    ("repair_tasks.delete", "DeleteRepairTask", RepairTaskDeleteDescription, None),
    ("repair_tasks.list", "GetRepairTaskList", None, list[RepairTask]),
    ("repair_tasks.force_approve", "ForceApproveRepairTask", RepairTaskApproveDescription, RepairTaskUpdateInfo),
    (
        "repair_tasks.update_health_policy",
        "UpdateRepairTaskHealthPolicy",
        RepairTaskUpdateHealthPolicyDescription,
        RepairTaskUpdateInfo,
    ),
    ("repair_tasks.update_execution_state", "UpdateRepairExecutionState", RepairTask, RepairTaskUpdateInfo),
    # compose
    ("compose.create", "CreateComposeDeployment", CreateComposeDeploymentDescription, None),
    ("compose.get", "GetComposeDeploymentStatus", None, ComposeDeploymentStatusInfo),
    ("compose.list", "GetComposeDeploymentStatusList", None, PagedComposeDeploymentStatusInfoList),
    (
        "compose.get_upgrade_progress",
        "GetComposeDeploymentUpgradeProgress",
        None,
        ComposeDeploymentUpgradeProgressInfo,
    ),
    ("compose.remove", "RemoveComposeDeployment", None, None),
    ("compose.start_upgrade", "StartComposeDeploymentUpgrade", ComposeDeploymentUpgradeDescription, None),
    ("compose.start_rollback", "StartRollbackComposeDeploymentUpgrade", None, None),
    # chaos
    ("chaos.get", "GetChaos", None, Chaos),
    ("chaos.start", "StartChaos", ChaosParameters, None),
    ("chaos.stop", "StopChaos", None, None),
    ("chaos.get_events", "GetChaosEvents", None, ChaosEventsSegment),
    ("chaos.get_schedule", "GetChaosSchedule", None, ChaosScheduleDescription),
    ("chaos.post_schedule", "PostChaosSchedule", ChaosScheduleDescription, None),
    # image store
    ("image_store.get_root_content", "GetImageStoreRootContent", None, ImageStoreContent),
    ("image_store.get_content", "GetImageStoreContent", None, ImageStoreContent),
    ("image_store.delete_content", "DeleteImageStoreContent", None, None),
    ("image_store.upload_file", "UploadFile", None, None),
    ("image_store.copy_content", "CopyImageStoreContent", ImageStoreCopyDescription, None),
    ("image_store.get_upload_session_by_id", "GetImageStoreUploadSessionById", None, UploadSession),
    ("image_store.get_upload_session_by_path", "GetImageStoreUploadSessionByPath", None, UploadSession),
    ("image_store.upload_chunk", "UploadFileChunk", None, None),
    ("image_store.commit_upload_session", "CommitImageStoreUploadSession", None, None),
    ("image_store.delete_upload_session", "DeleteImageStoreUploadSession", None, None),
    ("image_store.get_root_folder_size", "GetImageStoreRootFolderSize", None, FolderSizeInfo),
    ("image_store.get_folder_size", "GetImageStoreFolderSize", None, FolderSizeInfo),
    ("image_store.get_info", "GetImageStoreInfo", None, ImageStoreInfo),
    # backup
    ("backup.policies.create", "CreateBackupPolicy", BackupPolicyDescription, None),
    ("backup.policies.delete", "DeleteBackupPolicy", None, None),
    ("backup.policies.list", "GetBackupPolicyList", None, PagedBackupPolicyDescriptionList),
    ("backup.policies.get", "GetBackupPolicyByName", None, BackupPolicyDescription),
    ("backup.policies.get_entities", "GetAllEntitiesBackedUpByPolicy", None, PagedBackupEntityList),
    ("backup.policies.update", "UpdateBackupPolicy", BackupPolicyDescription, None),
    ("backup.applications.enable", "EnableApplicationBackup", EnableBackupDescription, None),
    ("backup.applications.disable", "DisableApplicationBackup", DisableBackupDescription, None),
    (
        "backup.applications.get_configuration_info",
        "GetApplicationBackupConfigurationInfo",
        None,
        PagedBackupConfigurationInfoList,
    ),
    ("backup.applications.list_backups", "GetApplicationBackupList", None, PagedBackupInfoList),
    ("backup.applications.suspend", "SuspendApplicationBackup", None, None),
    ("backup.applications.resume", "ResumeApplicationBackup", None, None),
    ("backup.services.enable", "EnableServiceBackup", EnableBackupDescription, None),
    ("backup.services.disable", "DisableServiceBackup", DisableBackupDescription, None),
    (
        "backup.services.get_configuration_info",
        "GetServiceBackupConfigurationInfo",
        None,
        PagedBackupConfigurationInfoList,
    ),
    ("backup.services.list_backups", "GetServiceBackupList", None, PagedBackupInfoList),
    ("backup.services.suspend", "SuspendServiceBackup", None, None),
    ("backup.services.resume", "ResumeServiceBackup", None, None),
    ("backup.partitions.enable", "EnablePartitionBackup", EnableBackupDescription, None),
    ("backup.partitions.disable", "DisablePartitionBackup", DisableBackupDescription, None),
    (
        "backup.partitions.get_configuration_info",
        "GetPartitionBackupConfigurationInfo",
        None,
        PagedBackupConfigurationInfoList,
    ),
    ("backup.partitions.list_backups", "GetPartitionBackupList", None, PagedBackupInfoList),
    ("backup.partitions.suspend", "SuspendPartitionBackup", None, None),
    ("backup.partitions.resume", "ResumePartitionBackup", None, None),
    ("backup.partitions.backup", "BackupPartition", BackupPartitionDescription, None),
    ("backup.partitions.get_backup_progress", "GetPartitionBackupProgress", None, BackupProgressInfo),
    ("backup.partitions.restore", "RestorePartition", RestorePartitionDescription, None),
    ("backup.partitions.get_restore_progress", "GetPartitionRestoreProgress", None, RestoreProgressInfo),
    (
        "backup.get_backups_from_storage",
        "GetBackupsFromBackupLocation",
        GetBackupByStorageQueryDescription,
        PagedBackupInfoList,
    ),
    # properties
    ("properties.create_name", "CreateName", NameDescription, None),
    ("properties.name_exists", "GetNameExistsInfo", None, None),
    ("properties.delete_name", "DeleteName", None, None),
    ("properties.get_sub_names", "GetSubNameInfoList", None, PagedSubNameInfoList),
    ("properties.list", "GetPropertyInfoList", None, PagedPropertyInfoList),
    ("properties.put", "PutProperty", PropertyDescription, None),
    ("properties.get", "GetPropertyInfo", None, PropertyInfo),
    ("properties.delete", "DeleteProperty", None, None),
    (
        "properties.submit_batch",
        "SubmitPropertyBatch",
        PropertyBatchDescriptionList | list[PropertyBatchOperationUnion],
        PropertyBatchInfoUnion,
    ),
    # events
    ("events.get_cluster_event_list", "GetClusterEventList", None, list[FabricEventUnion]),
    ("events.get_nodes_event_list", "GetNodesEventList", None, list[FabricEventUnion]),
    ("events.get_node_event_list", "GetNodeEventList", None, list[FabricEventUnion]),
    ("events.get_applications_event_list", "GetApplicationsEventList", None, list[FabricEventUnion]),
    ("events.get_application_event_list", "GetApplicationEventList", None, list[FabricEventUnion]),
    ("events.get_services_event_list", "GetServicesEventList", None, list[FabricEventUnion]),
    ("events.get_service_event_list", "GetServiceEventList", None, list[FabricEventUnion]),
    ("events.get_partitions_event_list", "GetPartitionsEventList", None, list[FabricEventUnion]),
    ("events.get_partition_event_list", "GetPartitionEventList", None, list[FabricEventUnion]),
    ("events.get_partition_replicas_event_list", "GetPartitionReplicasEventList", None, list[FabricEventUnion]),
    ("events.get_partition_replica_event_list", "GetPartitionReplicaEventList", None, list[FabricEventUnion]),
    ("events.get_correlated_event_list", "GetCorrelatedEventList", None, list[FabricEventUnion]),
    # mesh
    ("mesh.secrets.create_or_update", "MeshSecret_CreateOrUpdate", SecretResourceDescription, SecretResourceDescription),
    ("mesh.secrets.get", "MeshSecret_Get", None, SecretResourceDescription),
    ("mesh.secrets.delete", "MeshSecret_Delete", None, None),
    ("mesh.secrets.list", "MeshSecret_List", None, PagedSecretResourceDescriptionList),
    (
        "mesh.secret_values.add_value",
        "MeshSecretValue_AddValue",
        SecretValueResourceDescription,
        SecretValueResourceDescription,
    ),
    ("mesh.secret_values.get", "MeshSecretValue_Get", None, SecretValueResourceDescription),
    ("mesh.secret_values.delete", "MeshSecretValue_Delete", None, None),
    ("mesh.secret_values.list", "MeshSecretValue_List", None, PagedSecretValueResourceDescriptionList),
    ("mesh.secret_values.show", "MeshSecretValue_Show", None, SecretValue),
    ("mesh.volumes.create_or_update", "MeshVolume_CreateOrUpdate", VolumeResourceDescription, VolumeResourceDescription),
    ("mesh.volumes.get", "MeshVolume_Get", None, VolumeResourceDescription),
    ("mesh.volumes.delete", "MeshVolume_Delete", None, None),
    ("mesh.volumes.list", "MeshVolume_List", None, PagedVolumeResourceDescriptionList),
    (
        "mesh.networks.create_or_update",
        "MeshNetwork_CreateOrUpdate",
        NetworkResourceDescription,
        NetworkResourceDescription,
    ),
    ("mesh.networks.get", "MeshNetwork_Get", None, NetworkResourceDescription),
    ("mesh.networks.delete", "MeshNetwork_Delete", None, None),
    ("mesh.networks.list", "MeshNetwork_List", None, PagedNetworkResourceDescriptionList),
    (
        "mesh.applications.create_or_update",
        "MeshApplication_CreateOrUpdate",
        ApplicationResourceDescription,
        ApplicationResourceDescription,
    ),
    ("mesh.applications.get", "MeshApplication_Get", None, ApplicationResourceDescription),
    ("mesh.applications.delete", "MeshApplication_Delete", None, None),
    ("mesh.applications.list", "MeshApplication_List", None, PagedApplicationResourceDescriptionList),
    (
        "mesh.applications.get_upgrade_progress",
        "MeshApplication_GetUpgradeProgress",
        None,
        ApplicationResourceUpgradeProgressInfo,
    ),
    ("mesh.services.get", "MeshService_Get", None, ServiceResourceDescription),
    ("mesh.services.list", "MeshService_List", None, PagedServiceResourceDescriptionList),
    ("mesh.service_replicas.get", "MeshServiceReplica_Get", None, ServiceReplicaDescription),
    ("mesh.service_replicas.list", "MeshServiceReplica_List", None, PagedServiceReplicaDescriptionList),
    ("mesh.code_packages.get_container_logs", "MeshCodePackage_GetContainerLogs", None, ContainerLogs),
    (
        "mesh.gateways.create_or_update",
        "MeshGateway_CreateOrUpdate",
        GatewayResourceDescription,
        GatewayResourceDescription,
    ),
    ("mesh.gateways.get", "MeshGateway_Get", None, GatewayResourceDescription),
    ("mesh.gateways.delete", "MeshGateway_Delete", None, None),
    ("mesh.gateways.list", "MeshGateway_List", None, PagedGatewayResourceDescriptionList),
)

TYPED_OPERATION_CONTRACTS: dict[str, TypedOperationContract] = {
    key: TypedOperationContract(
        operation_key=key,
        operation_id=operation_id,
        request_model=request_model,
        response_model=response_model,
    )
    for key, operation_id, request_model, response_model in _CONTRACT_TABLE
}

OPERATION_IDS: set[str] = {contract.operation_id for contract in TYPED_OPERATION_CONTRACTS.values()}

STRICT_VALIDATION_OPERATION_KEYS: set[str] = {
    key for key, contract in TYPED_OPERATION_CONTRACTS.items() if contract.response_model is not None
}
