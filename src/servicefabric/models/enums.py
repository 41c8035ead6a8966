"""Open string enums and integer bitmask filters used on the wire.

Every ``FabricEnum`` accepts strings it does not know: parsing an unrecognized
value yields a pseudo-member whose ``is_known`` is false instead of failing, so a
newer cluster can add values without breaking deserialization.
"""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag
from typing import Any


class FabricEnum(str, Enum):
    @classmethod
    def _missing_(cls, value: object) -> Any:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = value
        member._value_ = value
        return member

    def __str__(self) -> str:
        return self.value

    @property
    def is_known(self) -> bool:
        return self._value_ in type(self)._value2member_map_

    @classmethod
    def known_values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


# Health


class HealthState(FabricEnum):
    INVALID = "Invalid"
    OK = "Ok"
    WARNING = "Warning"
    ERROR = "Error"
    UNKNOWN = "Unknown"


class HealthEvaluationKind(FabricEnum):
    INVALID = "Invalid"
    EVENT = "Event"
    REPLICAS = "Replicas"
    PARTITIONS = "Partitions"
    DEPLOYED_SERVICE_PACKAGES = "DeployedServicePackages"
    DEPLOYED_APPLICATIONS = "DeployedApplications"
    SERVICES = "Services"
    NODES = "Nodes"
    APPLICATIONS = "Applications"
    SYSTEM_APPLICATION = "SystemApplication"
    UPGRADE_DOMAIN_DEPLOYED_APPLICATIONS = "UpgradeDomainDeployedApplications"
    UPGRADE_DOMAIN_NODES = "UpgradeDomainNodes"
    REPLICA = "Replica"
    PARTITION = "Partition"
    DEPLOYED_SERVICE_PACKAGE = "DeployedServicePackage"
    DEPLOYED_APPLICATION = "DeployedApplication"
    SERVICE = "Service"
    NODE = "Node"
    APPLICATION = "Application"
    DELTA_NODES_CHECK = "DeltaNodesCheck"
    UPGRADE_DOMAIN_DELTA_NODES_CHECK = "UpgradeDomainDeltaNodesCheck"
    APPLICATION_TYPE_APPLICATIONS = "ApplicationTypeApplications"
    NODE_TYPE_NODES = "NodeTypeNodes"


class EntityKind(FabricEnum):
    INVALID = "Invalid"
    NODE = "Node"
    PARTITION = "Partition"
    SERVICE = "Service"
    APPLICATION = "Application"
    REPLICA = "Replica"
    DEPLOYED_APPLICATION = "DeployedApplication"
    DEPLOYED_SERVICE_PACKAGE = "DeployedServicePackage"
    CLUSTER = "Cluster"


# Nodes


class NodeStatus(FabricEnum):
    INVALID = "Invalid"
    UP = "Up"
    DOWN = "Down"
    ENABLING = "Enabling"
    DISABLING = "Disabling"
    DISABLED = "Disabled"
    UNKNOWN = "Unknown"
    REMOVED = "Removed"


class NodeStatusFilter(FabricEnum):
    DEFAULT = "default"
    ALL = "all"
    UP = "up"
    DOWN = "down"
    ENABLING = "enabling"
    DISABLING = "disabling"
    DISABLED = "disabled"
    UNKNOWN = "unknown"
    REMOVED = "removed"


class DeactivationIntent(FabricEnum):
    PAUSE = "Pause"
    RESTART = "Restart"
    REMOVE_DATA = "RemoveData"


class NodeDeactivationIntent(FabricEnum):
    INVALID = "Invalid"
    PAUSE = "Pause"
    RESTART = "Restart"
    REMOVE_DATA = "RemoveData"
    REMOVE_NODE = "RemoveNode"


class NodeDeactivationStatus(FabricEnum):
    NONE = "None"
    SAFETY_CHECK_IN_PROGRESS = "SafetyCheckInProgress"
    SAFETY_CHECK_COMPLETE = "SafetyCheckComplete"
    COMPLETED = "Completed"


class NodeDeactivationTaskType(FabricEnum):
    INVALID = "Invalid"
    INFRASTRUCTURE = "Infrastructure"
    REPAIR = "Repair"
    CLIENT = "Client"


class CreateFabricDump(FabricEnum):
    FALSE = "False"
    TRUE = "True"


# Applications


class ApplicationStatus(FabricEnum):
    INVALID = "Invalid"
    READY = "Ready"
    UPGRADING = "Upgrading"
    CREATING = "Creating"
    DELETING = "Deleting"
    FAILED = "Failed"


class ApplicationDefinitionKind(FabricEnum):
    INVALID = "Invalid"
    SERVICE_FABRIC_APPLICATION_DESCRIPTION = "ServiceFabricApplicationDescription"
    COMPOSE = "Compose"


class ApplicationTypeStatus(FabricEnum):
    INVALID = "Invalid"
    PROVISIONING = "Provisioning"
    AVAILABLE = "Available"
    UNPROVISIONING = "Unprovisioning"
    FAILED = "Failed"


class ApplicationTypeDefinitionKind(FabricEnum):
    INVALID = "Invalid"
    SERVICE_FABRIC_APPLICATION_PACKAGE = "ServiceFabricApplicationPackage"
    COMPOSE = "Compose"


class ApplicationPackageCleanupPolicy(FabricEnum):
    INVALID = "Invalid"
    DEFAULT = "Default"
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


class ProvisionApplicationTypeKind(FabricEnum):
    INVALID = "Invalid"
    IMAGE_STORE_PATH = "ImageStorePath"
    EXTERNAL_STORE = "ExternalStore"


class DeploymentStatus(FabricEnum):
    INVALID = "Invalid"
    DOWNLOADING = "Downloading"
    ACTIVATING = "Activating"
    ACTIVE = "Active"
    UPGRADING = "Upgrading"
    DEACTIVATING = "Deactivating"
    RAN_TO_COMPLETION = "RanToCompletion"
    FAILED = "Failed"


class HostType(FabricEnum):
    INVALID = "Invalid"
    EXE_HOST = "ExeHost"
    CONTAINER_HOST = "ContainerHost"


class HostIsolationMode(FabricEnum):
    NONE = "None"
    PROCESS = "Process"
    HYPER_V = "HyperV"


class EntryPointStatus(FabricEnum):
    INVALID = "Invalid"
    PENDING = "Pending"
    STARTING = "Starting"
    STARTED = "Started"
    STOPPING = "Stopping"
    STOPPED = "Stopped"


class PackageSharingPolicyScope(FabricEnum):
    NONE = "None"
    ALL = "All"
    CODE = "Code"
    CONFIG = "Config"
    DATA = "Data"


# Services


class ServiceKind(FabricEnum):
    INVALID = "Invalid"
    STATELESS = "Stateless"
    STATEFUL = "Stateful"


class ServiceStatus(FabricEnum):
    UNKNOWN = "Unknown"
    ACTIVE = "Active"
    UPGRADING = "Upgrading"
    DELETING = "Deleting"
    CREATING = "Creating"
    FAILED = "Failed"


class ServicePackageActivationMode(FabricEnum):
    SHARED_PROCESS = "SharedProcess"
    EXCLUSIVE_PROCESS = "ExclusiveProcess"


class ServiceLoadMetricWeight(FabricEnum):
    ZERO = "Zero"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class MoveCost(FabricEnum):
    ZERO = "Zero"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "VeryHigh"


class ServiceCorrelationScheme(FabricEnum):
    INVALID = "Invalid"
    AFFINITY = "Affinity"
    ALIGNED_AFFINITY = "AlignedAffinity"
    NON_ALIGNED_AFFINITY = "NonAlignedAffinity"


class ServicePlacementPolicyType(FabricEnum):
    INVALID = "Invalid"
    INVALID_DOMAIN = "InvalidDomain"
    REQUIRE_DOMAIN = "RequireDomain"
    PREFER_PRIMARY_DOMAIN = "PreferPrimaryDomain"
    REQUIRE_DOMAIN_DISTRIBUTION = "RequireDomainDistribution"
    NON_PARTIALLY_PLACE_SERVICE = "NonPartiallyPlaceService"
    ALLOW_MULTIPLE_STATELESS_INSTANCES_ON_NODE = "AllowMultipleStatelessInstancesOnNode"


class ScalingTriggerKind(FabricEnum):
    INVALID = "Invalid"
    AVERAGE_PARTITION_LOAD = "AveragePartitionLoad"
    AVERAGE_SERVICE_LOAD = "AverageServiceLoad"


class ScalingMechanismKind(FabricEnum):
    INVALID = "Invalid"
    PARTITION_INSTANCE_COUNT = "PartitionInstanceCount"
    ADD_REMOVE_INCREMENTAL_NAMED_PARTITION = "AddRemoveIncrementalNamedPartition"


class ServiceTypeRegistrationStatus(FabricEnum):
    INVALID = "Invalid"
    DISABLED = "Disabled"
    ENABLED = "Enabled"
    REGISTERED = "Registered"


class ServiceEndpointRole(FabricEnum):
    INVALID = "Invalid"
    STATELESS = "Stateless"
    STATEFUL_PRIMARY = "StatefulPrimary"
    STATEFUL_SECONDARY = "StatefulSecondary"


# Partitions and replicas


class PartitionScheme(FabricEnum):
    INVALID = "Invalid"
    SINGLETON = "Singleton"
    UNIFORM_INT64_RANGE = "UniformInt64Range"
    NAMED = "Named"


class ServicePartitionKind(FabricEnum):
    INVALID = "Invalid"
    SINGLETON = "Singleton"
    INT64_RANGE = "Int64Range"
    NAMED = "Named"


class ServicePartitionStatus(FabricEnum):
    INVALID = "Invalid"
    READY = "Ready"
    NOT_READY = "NotReady"
    IN_QUORUM_LOSS = "InQuorumLoss"
    RECONFIGURING = "Reconfiguring"
    DELETING = "Deleting"


class PartitionKeyType(IntEnum):
    """Kind of key passed to partition resolution (``PartitionKeyType`` query value)."""

    NONE = 1
    INT64_RANGE = 2
    NAMED = 3


class ReplicaStatus(FabricEnum):
    INVALID = "Invalid"
    IN_BUILD = "InBuild"
    STANDBY = "Standby"
    READY = "Ready"
    DOWN = "Down"
    DROPPED = "Dropped"


class ReplicaRole(FabricEnum):
    UNKNOWN = "Unknown"
    NONE = "None"
    PRIMARY = "Primary"
    IDLE_SECONDARY = "IdleSecondary"
    ACTIVE_SECONDARY = "ActiveSecondary"
    IDLE_AUXILIARY = "IdleAuxiliary"
    ACTIVE_AUXILIARY = "ActiveAuxiliary"
    PRIMARY_AUXILIARY = "PrimaryAuxiliary"


class ReplicaKind(FabricEnum):
    INVALID = "Invalid"
    KEY_VALUE_STORE = "KeyValueStore"


class ReconfigurationPhase(FabricEnum):
    UNKNOWN = "Unknown"
    NONE = "None"
    PHASE0 = "Phase0"
    PHASE1 = "Phase1"
    PHASE2 = "Phase2"
    PHASE3 = "Phase3"
    PHASE4 = "Phase4"
    ABORT_PHASE_ZERO = "AbortPhaseZero"


class ReconfigurationType(FabricEnum):
    UNKNOWN = "Unknown"
    SWAP_PRIMARY = "SwapPrimary"
    FAILOVER = "Failover"
    OTHER = "Other"


class ServiceOperationName(FabricEnum):
    UNKNOWN = "Unknown"
    NONE = "None"
    OPEN = "Open"
    CHANGE_ROLE = "ChangeRole"
    CLOSE = "Close"
    ABORT = "Abort"


class ReplicatorOperationName(FabricEnum):
    INVALID = "Invalid"
    NONE = "None"
    OPEN = "Open"
    CHANGE_ROLE = "ChangeRole"
    UPDATE_EPOCH = "UpdateEpoch"
    CLOSE = "Close"
    ABORT = "Abort"
    ON_DATA_LOSS = "OnDataLoss"
    WAIT_FOR_CATCHUP = "WaitForCatchup"
    BUILD = "Build"


class PartitionAccessStatus(FabricEnum):
    INVALID = "Invalid"
    GRANTED = "Granted"
    RECONFIGURATION_PENDING = "ReconfigurationPending"
    NOT_PRIMARY = "NotPrimary"
    NO_WRITE_QUORUM = "NoWriteQuorum"


class Ordering(FabricEnum):
    DESC = "Desc"
    ASC = "Asc"


# Upgrades


class UpgradeKind(FabricEnum):
    INVALID = "Invalid"
    ROLLING = "Rolling"


class UpgradeMode(FabricEnum):
    INVALID = "Invalid"
    UNMONITORED_AUTO = "UnmonitoredAuto"
    UNMONITORED_MANUAL = "UnmonitoredManual"
    MONITORED = "Monitored"
    UNMONITORED_DEFERRED = "UnmonitoredDeferred"


class RollingUpgradeMode(FabricEnum):
    INVALID = "Invalid"
    UNMONITORED_AUTO = "UnmonitoredAuto"
    UNMONITORED_MANUAL = "UnmonitoredManual"
    MONITORED = "Monitored"
    UNMONITORED_DEFERRED = "UnmonitoredDeferred"


class UpgradeSortOrder(FabricEnum):
    INVALID = "Invalid"
    DEFAULT = "Default"
    NUMERIC = "Numeric"
    LEXICOGRAPHICAL = "Lexicographical"
    REVERSE_NUMERIC = "ReverseNumeric"
    REVERSE_LEXICOGRAPHICAL = "ReverseLexicographical"


class UpgradeState(FabricEnum):
    INVALID = "Invalid"
    ROLLING_BACK_IN_PROGRESS = "RollingBackInProgress"
    ROLLING_BACK_COMPLETED = "RollingBackCompleted"
    ROLLING_FORWARD_PENDING = "RollingForwardPending"
    ROLLING_FORWARD_IN_PROGRESS = "RollingForwardInProgress"
    ROLLING_FORWARD_COMPLETED = "RollingForwardCompleted"
    FAILED = "Failed"


class UpgradeDomainState(FabricEnum):
    INVALID = "Invalid"
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class UpgradeUnitState(FabricEnum):
    INVALID = "Invalid"
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    FAILED = "Failed"


class FailureAction(FabricEnum):
    INVALID = "Invalid"
    ROLLBACK = "Rollback"
    MANUAL = "Manual"


class FailureReason(FabricEnum):
    NONE = "None"
    INTERRUPTED = "Interrupted"
    HEALTH_CHECK = "HealthCheck"
    UPGRADE_DOMAIN_TIMEOUT = "UpgradeDomainTimeout"
    OVERALL_UPGRADE_TIMEOUT = "OverallUpgradeTimeout"


class NodeUpgradePhase(FabricEnum):
    INVALID = "Invalid"
    PRE_UPGRADE_SAFETY_CHECK = "PreUpgradeSafetyCheck"
    UPGRADING = "Upgrading"
    POST_UPGRADE_SAFETY_CHECK = "PostUpgradeSafetyCheck"


class SafetyCheckKind(FabricEnum):
    INVALID = "Invalid"
    ENSURE_SEED_NODE_QUORUM = "EnsureSeedNodeQuorum"
    ENSURE_PARTITION_QUORUM = "EnsurePartitionQuorum"
    WAIT_FOR_PRIMARY_PLACEMENT = "WaitForPrimaryPlacement"
    WAIT_FOR_PRIMARY_SWAP = "WaitForPrimarySwap"
    WAIT_FOR_RECONFIGURATION = "WaitForReconfiguration"
    WAIT_FOR_INBUILD_REPLICA = "WaitForInbuildReplica"
    ENSURE_AVAILABILITY = "EnsureAvailability"


class ComposeDeploymentStatus(FabricEnum):
    INVALID = "Invalid"
    PROVISIONING = "Provisioning"
    CREATING = "Creating"
    READY = "Ready"
    UNPROVISIONING = "Unprovisioning"
    DELETING = "Deleting"
    FAILED = "Failed"
    UPGRADING = "Upgrading"


class ComposeDeploymentUpgradeState(FabricEnum):
    INVALID = "Invalid"
    PROVISIONING_TARGET = "ProvisioningTarget"
    ROLLING_FORWARD_IN_PROGRESS = "RollingForwardInProgress"
    ROLLING_FORWARD_PENDING = "RollingForwardPending"
    UNPROVISIONING_CURRENT = "UnprovisioningCurrent"
    ROLLING_FORWARD_COMPLETED = "RollingForwardCompleted"
    ROLLING_BACK_IN_PROGRESS = "RollingBackInProgress"
    UNPROVISIONING_TARGET = "UnprovisioningTarget"
    ROLLING_BACK_COMPLETED = "RollingBackCompleted"
    FAILED = "Failed"


# Repair tasks


class RepairTaskState(FabricEnum):
    INVALID = "Invalid"
    CREATED = "Created"
    CLAIMED = "Claimed"
    PREPARING = "Preparing"
    APPROVED = "Approved"
    EXECUTING = "Executing"
    RESTORING = "Restoring"
    COMPLETED = "Completed"


class RepairTargetKind(FabricEnum):
    INVALID = "Invalid"
    NODE = "Node"


class RepairImpactKind(FabricEnum):
    INVALID = "Invalid"
    NODE = "Node"


class ImpactLevel(FabricEnum):
    INVALID = "Invalid"
    NONE = "None"
    RESTART = "Restart"
    REMOVE_DATA = "RemoveData"
    REMOVE_NODE = "RemoveNode"


class RepairTaskResult(FabricEnum):
    INVALID = "Invalid"
    SUCCEEDED = "Succeeded"
    CANCELLED = "Cancelled"
    INTERRUPTED = "Interrupted"
    FAILED = "Failed"
    PENDING = "Pending"


class RepairTaskHealthCheckState(FabricEnum):
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    SKIPPED = "Skipped"
    TIMED_OUT = "TimedOut"


# Chaos and fault operations


class ChaosStatus(FabricEnum):
    INVALID = "Invalid"
    RUNNING = "Running"
    STOPPED = "Stopped"


class ChaosScheduleStatus(FabricEnum):
    INVALID = "Invalid"
    STOPPED = "Stopped"
    ACTIVE = "Active"
    EXPIRED = "Expired"
    PENDING = "Pending"


class ChaosEventKind(FabricEnum):
    INVALID = "Invalid"
    STARTED = "Started"
    EXECUTING_FAULTS = "ExecutingFaults"
    WAITING = "Waiting"
    VALIDATION_FAILED = "ValidationFailed"
    TEST_ERROR = "TestError"
    STOPPED = "Stopped"


class DataLossMode(FabricEnum):
    INVALID = "Invalid"
    PARTIAL_DATA_LOSS = "PartialDataLoss"
    FULL_DATA_LOSS = "FullDataLoss"


class QuorumLossMode(FabricEnum):
    INVALID = "Invalid"
    QUORUM_REPLICAS = "QuorumReplicas"
    ALL_REPLICAS = "AllReplicas"


class RestartPartitionMode(FabricEnum):
    INVALID = "Invalid"
    ALL_REPLICAS_OR_INSTANCES = "AllReplicasOrInstances"
    ONLY_ACTIVE_SECONDARIES = "OnlyActiveSecondaries"


class NodeTransitionType(FabricEnum):
    INVALID = "Invalid"
    START = "Start"
    STOP = "Stop"


class OperationState(FabricEnum):
    INVALID = "Invalid"
    RUNNING = "Running"
    ROLLING_BACK = "RollingBack"
    COMPLETED = "Completed"
    FAULTED = "Faulted"
    CANCELLED = "Cancelled"
    FORCE_CANCELLED = "ForceCancelled"


class OperationType(FabricEnum):
    INVALID = "Invalid"
    PARTITION_DATA_LOSS = "PartitionDataLoss"
    PARTITION_QUORUM_LOSS = "PartitionQuorumLoss"
    PARTITION_RESTART = "PartitionRestart"
    NODE_TRANSITION = "NodeTransition"


# Backup and restore


class BackupStorageKind(FabricEnum):
    INVALID = "Invalid"
    FILE_SHARE = "FileShare"
    AZURE_BLOB_STORE = "AzureBlobStore"
    DSMS_AZURE_BLOB_STORE = "DsmsAzureBlobStore"
    MANAGED_IDENTITY_AZURE_BLOB_STORE = "ManagedIdentityAzureBlobStore"


class BackupScheduleKind(FabricEnum):
    INVALID = "Invalid"
    TIME_BASED = "TimeBased"
    FREQUENCY_BASED = "FrequencyBased"


class BackupScheduleFrequencyType(FabricEnum):
    INVALID = "Invalid"
    DAILY = "Daily"
    WEEKLY = "Weekly"


class DayOfWeek(FabricEnum):
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class RetentionPolicyType(FabricEnum):
    BASIC = "Basic"
    INVALID = "Invalid"


class BackupEntityKind(FabricEnum):
    INVALID = "Invalid"
    PARTITION = "Partition"
    SERVICE = "Service"
    APPLICATION = "Application"


class BackupPolicyScope(FabricEnum):
    INVALID = "Invalid"
    PARTITION = "Partition"
    SERVICE = "Service"
    APPLICATION = "Application"


class BackupSuspensionScope(FabricEnum):
    INVALID = "Invalid"
    PARTITION = "Partition"
    SERVICE = "Service"
    APPLICATION = "Application"


class BackupType(FabricEnum):
    INVALID = "Invalid"
    FULL = "Full"
    INCREMENTAL = "Incremental"


class BackupState(FabricEnum):
    INVALID = "Invalid"
    ACCEPTED = "Accepted"
    BACKUP_IN_PROGRESS = "BackupInProgress"
    SUCCESS = "Success"
    FAILURE = "Failure"
    TIMEOUT = "Timeout"


class RestoreState(FabricEnum):
    INVALID = "Invalid"
    ACCEPTED = "Accepted"
    RESTORE_IN_PROGRESS = "RestoreInProgress"
    SUCCESS = "Success"
    FAILURE = "Failure"
    TIMEOUT = "Timeout"


class ManagedIdentityType(FabricEnum):
    INVALID = "Invalid"
    VMSS = "VMSS"
    CLUSTER = "Cluster"


# Property management


class PropertyValueKind(FabricEnum):
    INVALID = "Invalid"
    BINARY = "Binary"
    INT64 = "Int64"
    DOUBLE = "Double"
    STRING = "String"
    GUID = "Guid"


class PropertyBatchOperationKind(FabricEnum):
    INVALID = "Invalid"
    PUT = "Put"
    GET = "Get"
    CHECK_EXISTS = "CheckExists"
    CHECK_SEQUENCE = "CheckSequence"
    DELETE = "Delete"
    CHECK_VALUE = "CheckValue"


class PropertyBatchInfoKind(FabricEnum):
    INVALID = "Invalid"
    SUCCESSFUL = "Successful"
    FAILED = "Failed"


# Mesh resources


class ResourceStatus(FabricEnum):
    UNKNOWN = "Unknown"
    READY = "Ready"
    UPGRADING = "Upgrading"
    CREATING = "Creating"
    DELETING = "Deleting"
    FAILED = "Failed"


class SecretKind(FabricEnum):
    INLINED_VALUE = "inlinedValue"
    KEY_VAULT_VERSIONED_REFERENCE = "keyVaultVersionedReference"


class VolumeProvider(FabricEnum):
    SF_AZURE_FILE = "SFAzureFile"


class NetworkKind(FabricEnum):
    LOCAL = "Local"


class OperatingSystemType(FabricEnum):
    LINUX = "Linux"
    WINDOWS = "Windows"


class DiagnosticsSinkKind(FabricEnum):
    INVALID = "Invalid"
    AZURE_INTERNAL_MONITORING_PIPELINE = "AzureInternalMonitoringPipeline"


class AutoScalingTriggerKind(FabricEnum):
    AVERAGE_LOAD = "AverageLoad"


class AutoScalingMechanismKind(FabricEnum):
    ADD_REMOVE_REPLICA = "AddRemoveReplica"


class AutoScalingMetricKind(FabricEnum):
    RESOURCE = "Resource"


class AutoScalingResourceMetricName(FabricEnum):
    CPU = "cpu"
    MEMORY_IN_GB = "memoryInGB"


class ApplicationScopedVolumeKind(FabricEnum):
    SERVICE_FABRIC_VOLUME_DISK = "ServiceFabricVolumeDisk"


class SizeTypes(FabricEnum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class ExecutionPolicyType(FabricEnum):
    DEFAULT = "Default"
    RUN_TO_COMPLETION = "RunToCompletion"


class RestartPolicy(FabricEnum):
    ON_FAILURE = "OnFailure"
    NEVER = "Never"


class SettingType(FabricEnum):
    CLEAR_TEXT = "ClearText"
    KEY_VAULT_REFERENCE = "KeyVaultReference"
    SECRET_VALUE_REFERENCE = "SecretValueReference"


class HeaderMatchType(FabricEnum):
    EXACT = "exact"


class PathMatchType(FabricEnum):
    PREFIX = "prefix"


# Events and errors


class FabricEventKind(FabricEnum):
    CLUSTER_NEW_HEALTH_REPORT = "ClusterNewHealthReport"
    CLUSTER_HEALTH_REPORT_EXPIRED = "ClusterHealthReportExpired"
    CLUSTER_UPGRADE_STARTED = "ClusterUpgradeStarted"
    CLUSTER_UPGRADE_DOMAIN_COMPLETED = "ClusterUpgradeDomainCompleted"
    CLUSTER_UPGRADE_COMPLETED = "ClusterUpgradeCompleted"
    CLUSTER_UPGRADE_ROLLBACK_STARTED = "ClusterUpgradeRollbackStarted"
    CLUSTER_UPGRADE_ROLLBACK_COMPLETED = "ClusterUpgradeRollbackCompleted"
    CHAOS_STARTED = "ChaosStarted"
    CHAOS_STOPPED = "ChaosStopped"
    NODE_ABORTED = "NodeAborted"
    NODE_ADDED_TO_CLUSTER = "NodeAddedToCluster"
    NODE_REMOVED_FROM_CLUSTER = "NodeRemovedFromCluster"
    NODE_CLOSED = "NodeClosed"
    NODE_DEACTIVATE_STARTED = "NodeDeactivateStarted"
    NODE_DEACTIVATE_COMPLETED = "NodeDeactivateCompleted"
    NODE_DOWN = "NodeDown"
    NODE_UP = "NodeUp"
    NODE_OPEN_SUCCEEDED = "NodeOpenSucceeded"
    NODE_OPEN_FAILED = "NodeOpenFailed"
    NODE_NEW_HEALTH_REPORT = "NodeNewHealthReport"
    NODE_HEALTH_REPORT_EXPIRED = "NodeHealthReportExpired"
    CHAOS_NODE_RESTART_SCHEDULED = "ChaosNodeRestartScheduled"
    APPLICATION_CREATED = "ApplicationCreated"
    APPLICATION_DELETED = "ApplicationDeleted"
    APPLICATION_NEW_HEALTH_REPORT = "ApplicationNewHealthReport"
    APPLICATION_HEALTH_REPORT_EXPIRED = "ApplicationHealthReportExpired"
    APPLICATION_UPGRADE_STARTED = "ApplicationUpgradeStarted"
    APPLICATION_UPGRADE_DOMAIN_COMPLETED = "ApplicationUpgradeDomainCompleted"
    APPLICATION_UPGRADE_COMPLETED = "ApplicationUpgradeCompleted"
    APPLICATION_UPGRADE_ROLLBACK_STARTED = "ApplicationUpgradeRollbackStarted"
    APPLICATION_UPGRADE_ROLLBACK_COMPLETED = "ApplicationUpgradeRollbackCompleted"
    APPLICATION_PROCESS_EXITED = "ApplicationProcessExited"
    APPLICATION_CONTAINER_INSTANCE_EXITED = "ApplicationContainerInstanceExited"
    CHAOS_CODE_PACKAGE_RESTART_SCHEDULED = "ChaosCodePackageRestartScheduled"
    SERVICE_CREATED = "ServiceCreated"
    SERVICE_DELETED = "ServiceDeleted"
    SERVICE_NEW_HEALTH_REPORT = "ServiceNewHealthReport"
    SERVICE_HEALTH_REPORT_EXPIRED = "ServiceHealthReportExpired"
    PARTITION_NEW_HEALTH_REPORT = "PartitionNewHealthReport"
    PARTITION_HEALTH_REPORT_EXPIRED = "PartitionHealthReportExpired"
    PARTITION_RECONFIGURED = "PartitionReconfigured"
    PARTITION_PRIMARY_MOVE_ANALYSIS = "PartitionPrimaryMoveAnalysis"
    CHAOS_PARTITION_PRIMARY_MOVE_SCHEDULED = "ChaosPartitionPrimaryMoveScheduled"
    CHAOS_PARTITION_SECONDARY_MOVE_SCHEDULED = "ChaosPartitionSecondaryMoveScheduled"
    STATEFUL_REPLICA_NEW_HEALTH_REPORT = "StatefulReplicaNewHealthReport"
    STATEFUL_REPLICA_HEALTH_REPORT_EXPIRED = "StatefulReplicaHealthReportExpired"
    STATELESS_REPLICA_NEW_HEALTH_REPORT = "StatelessReplicaNewHealthReport"
    STATELESS_REPLICA_HEALTH_REPORT_EXPIRED = "StatelessReplicaHealthReportExpired"
    CHAOS_REPLICA_REMOVAL_SCHEDULED = "ChaosReplicaRemovalScheduled"
    CHAOS_REPLICA_RESTART_SCHEDULED = "ChaosReplicaRestartScheduled"


class FabricErrorCodes(FabricEnum):
    # 400
    FABRIC_E_INVALID_PARTITION_KEY = "FABRIC_E_INVALID_PARTITION_KEY"
    FABRIC_E_IMAGEBUILDER_VALIDATION_ERROR = "FABRIC_E_IMAGEBUILDER_VALIDATION_ERROR"
    FABRIC_E_INVALID_ADDRESS = "FABRIC_E_INVALID_ADDRESS"
    FABRIC_E_APPLICATION_NOT_UPGRADING = "FABRIC_E_APPLICATION_NOT_UPGRADING"
    FABRIC_E_APPLICATION_UPGRADE_VALIDATION_ERROR = "FABRIC_E_APPLICATION_UPGRADE_VALIDATION_ERROR"
    FABRIC_E_FABRIC_NOT_UPGRADING = "FABRIC_E_FABRIC_NOT_UPGRADING"
    FABRIC_E_FABRIC_UPGRADE_VALIDATION_ERROR = "FABRIC_E_FABRIC_UPGRADE_VALIDATION_ERROR"
    FABRIC_E_INVALID_CONFIGURATION = "FABRIC_E_INVALID_CONFIGURATION"
    FABRIC_E_INVALID_NAME_URI = "FABRIC_E_INVALID_NAME_URI"
    FABRIC_E_PATH_TOO_LONG = "FABRIC_E_PATH_TOO_LONG"
    FABRIC_E_KEY_TOO_LARGE = "FABRIC_E_KEY_TOO_LARGE"
    FABRIC_E_SERVICE_AFFINITY_CHAIN_NOT_SUPPORTED = "FABRIC_E_SERVICE_AFFINITY_CHAIN_NOT_SUPPORTED"
    FABRIC_E_INVALID_ATOMIC_GROUP = "FABRIC_E_INVALID_ATOMIC_GROUP"
    FABRIC_E_VALUE_EMPTY = "FABRIC_E_VALUE_EMPTY"
    FABRIC_E_BACKUP_IS_ENABLED = "FABRIC_E_BACKUP_IS_ENABLED"
    FABRIC_E_RESTORE_SOURCE_TARGET_PARTITION_MISMATCH = "FABRIC_E_RESTORE_SOURCE_TARGET_PARTITION_MISMATCH"
    FABRIC_E_INVALID_FOR_STATELESS_SERVICES = "FABRIC_E_INVALID_FOR_STATELESS_SERVICES"
    FABRIC_E_INVALID_SERVICE_SCALING_POLICY = "FABRIC_E_INVALID_SERVICE_SCALING_POLICY"
    E_INVALIDARG = "E_INVALIDARG"
    # 404
    FABRIC_E_NODE_NOT_FOUND = "FABRIC_E_NODE_NOT_FOUND"
    FABRIC_E_APPLICATION_TYPE_NOT_FOUND = "FABRIC_E_APPLICATION_TYPE_NOT_FOUND"
    FABRIC_E_APPLICATION_NOT_FOUND = "FABRIC_E_APPLICATION_NOT_FOUND"
    FABRIC_E_SERVICE_TYPE_NOT_FOUND = "FABRIC_E_SERVICE_TYPE_NOT_FOUND"
    FABRIC_E_SERVICE_DOES_NOT_EXIST = "FABRIC_E_SERVICE_DOES_NOT_EXIST"
    FABRIC_E_SERVICE_TYPE_TEMPLATE_NOT_FOUND = "FABRIC_E_SERVICE_TYPE_TEMPLATE_NOT_FOUND"
    FABRIC_E_CONFIGURATION_SECTION_NOT_FOUND = "FABRIC_E_CONFIGURATION_SECTION_NOT_FOUND"
    FABRIC_E_PARTITION_NOT_FOUND = "FABRIC_E_PARTITION_NOT_FOUND"
    FABRIC_E_REPLICA_DOES_NOT_EXIST = "FABRIC_E_REPLICA_DOES_NOT_EXIST"
    FABRIC_E_SERVICE_GROUP_DOES_NOT_EXIST = "FABRIC_E_SERVICE_GROUP_DOES_NOT_EXIST"
    FABRIC_E_CONFIGURATION_PARAMETER_NOT_FOUND = "FABRIC_E_CONFIGURATION_PARAMETER_NOT_FOUND"
    FABRIC_E_DIRECTORY_NOT_FOUND = "FABRIC_E_DIRECTORY_NOT_FOUND"
    FABRIC_E_FABRIC_VERSION_NOT_FOUND = "FABRIC_E_FABRIC_VERSION_NOT_FOUND"
    FABRIC_E_FILE_NOT_FOUND = "FABRIC_E_FILE_NOT_FOUND"
    FABRIC_E_NAME_DOES_NOT_EXIST = "FABRIC_E_NAME_DOES_NOT_EXIST"
    FABRIC_E_PROPERTY_DOES_NOT_EXIST = "FABRIC_E_PROPERTY_DOES_NOT_EXIST"
    FABRIC_E_ENUMERATION_COMPLETED = "FABRIC_E_ENUMERATION_COMPLETED"
    FABRIC_E_SERVICE_MANIFEST_NOT_FOUND = "FABRIC_E_SERVICE_MANIFEST_NOT_FOUND"
    FABRIC_E_KEY_NOT_FOUND = "FABRIC_E_KEY_NOT_FOUND"
    FABRIC_E_HEALTH_ENTITY_NOT_FOUND = "FABRIC_E_HEALTH_ENTITY_NOT_FOUND"
    FABRIC_E_BACKUP_NOT_ENABLED = "FABRIC_E_BACKUP_NOT_ENABLED"
    FABRIC_E_BACKUP_POLICY_NOT_EXISTING = "FABRIC_E_BACKUP_POLICY_NOT_EXISTING"
    FABRIC_E_FAULT_ANALYSIS_SERVICE_NOT_EXISTING = "FABRIC_E_FAULT_ANALYSIS_SERVICE_NOT_EXISTING"
    FABRIC_E_IMAGEBUILDER_RESERVED_DIRECTORY_ERROR = "FABRIC_E_IMAGEBUILDER_RESERVED_DIRECTORY_ERROR"
    # 409
    FABRIC_E_APPLICATION_TYPE_ALREADY_EXISTS = "FABRIC_E_APPLICATION_TYPE_ALREADY_EXISTS"
    FABRIC_E_APPLICATION_ALREADY_EXISTS = "FABRIC_E_APPLICATION_ALREADY_EXISTS"
    FABRIC_E_APPLICATION_ALREADY_IN_TARGET_VERSION = "FABRIC_E_APPLICATION_ALREADY_IN_TARGET_VERSION"
    FABRIC_E_APPLICATION_TYPE_PROVISION_IN_PROGRESS = "FABRIC_E_APPLICATION_TYPE_PROVISION_IN_PROGRESS"
    FABRIC_E_APPLICATION_UPGRADE_IN_PROGRESS = "FABRIC_E_APPLICATION_UPGRADE_IN_PROGRESS"
    FABRIC_E_SERVICE_ALREADY_EXISTS = "FABRIC_E_SERVICE_ALREADY_EXISTS"
    FABRIC_E_SERVICE_GROUP_ALREADY_EXISTS = "FABRIC_E_SERVICE_GROUP_ALREADY_EXISTS"
    FABRIC_E_APPLICATION_TYPE_IN_USE = "FABRIC_E_APPLICATION_TYPE_IN_USE"
    FABRIC_E_FABRIC_ALREADY_IN_TARGET_VERSION = "FABRIC_E_FABRIC_ALREADY_IN_TARGET_VERSION"
    FABRIC_E_FABRIC_VERSION_ALREADY_EXISTS = "FABRIC_E_FABRIC_VERSION_ALREADY_EXISTS"
    FABRIC_E_FABRIC_VERSION_IN_USE = "FABRIC_E_FABRIC_VERSION_IN_USE"
    FABRIC_E_FABRIC_UPGRADE_IN_PROGRESS = "FABRIC_E_FABRIC_UPGRADE_IN_PROGRESS"
    FABRIC_E_NAME_ALREADY_EXISTS = "FABRIC_E_NAME_ALREADY_EXISTS"
    FABRIC_E_NAME_NOT_EMPTY = "FABRIC_E_NAME_NOT_EMPTY"
    FABRIC_E_PROPERTY_CHECK_FAILED = "FABRIC_E_PROPERTY_CHECK_FAILED"
    FABRIC_E_SERVICE_METADATA_MISMATCH = "FABRIC_E_SERVICE_METADATA_MISMATCH"
    FABRIC_E_SERVICE_TYPE_MISMATCH = "FABRIC_E_SERVICE_TYPE_MISMATCH"
    FABRIC_E_HEALTH_STALE_REPORT = "FABRIC_E_HEALTH_STALE_REPORT"
    FABRIC_E_SEQUENCE_NUMBER_CHECK_FAILED = "FABRIC_E_SEQUENCE_NUMBER_CHECK_FAILED"
    FABRIC_E_NODE_HAS_NOT_STOPPED_YET = "FABRIC_E_NODE_HAS_NOT_STOPPED_YET"
    FABRIC_E_INSTANCE_ID_MISMATCH = "FABRIC_E_INSTANCE_ID_MISMATCH"
    FABRIC_E_BACKUP_IN_PROGRESS = "FABRIC_E_BACKUP_IN_PROGRESS"
    FABRIC_E_RESTORE_IN_PROGRESS = "FABRIC_E_RESTORE_IN_PROGRESS"
    FABRIC_E_BACKUP_POLICY_ALREADY_EXISTING = "FABRIC_E_BACKUP_POLICY_ALREADY_EXISTING"
    # 413
    FABRIC_E_VALUE_TOO_LARGE = "FABRIC_E_VALUE_TOO_LARGE"
    # 500
    FABRIC_E_NODE_IS_UP = "FABRIC_E_NODE_IS_UP"
    E_FAIL = "E_FAIL"
    FABRIC_E_SINGLE_INSTANCE_APPLICATION_ALREADY_EXISTS = "FABRIC_E_SINGLE_INSTANCE_APPLICATION_ALREADY_EXISTS"
    FABRIC_E_SINGLE_INSTANCE_APPLICATION_NOT_FOUND = "FABRIC_E_SINGLE_INSTANCE_APPLICATION_NOT_FOUND"
    FABRIC_E_VOLUME_ALREADY_EXISTS = "FABRIC_E_VOLUME_ALREADY_EXISTS"
    FABRIC_E_VOLUME_NOT_FOUND = "FABRIC_E_VOLUME_NOT_FOUND"
    SERIALIZATION_ERROR = "SerializationError"
    # 503
    FABRIC_E_NO_WRITE_QUORUM = "FABRIC_E_NO_WRITE_QUORUM"
    FABRIC_E_NOT_PRIMARY = "FABRIC_E_NOT_PRIMARY"
    FABRIC_E_NOT_READY = "FABRIC_E_NOT_READY"
    FABRIC_E_RECONFIGURATION_PENDING = "FABRIC_E_RECONFIGURATION_PENDING"
    FABRIC_E_SERVICE_OFFLINE = "FABRIC_E_SERVICE_OFFLINE"
    E_ABORT = "E_ABORT"
    # 504
    FABRIC_E_COMMUNICATION_ERROR = "FABRIC_E_COMMUNICATION_ERROR"
    FABRIC_E_OPERATION_NOT_COMPLETE = "FABRIC_E_OPERATION_NOT_COMPLETE"
    FABRIC_E_TIMEOUT = "FABRIC_E_TIMEOUT"


# Bitmask filters. These travel as integers and combine with ``|``.


class HealthStateFilter(IntFlag):
    DEFAULT = 0
    NONE = 1
    OK = 2
    WARNING = 4
    ERROR = 8
    ALL = 65535


class ApplicationTypeDefinitionKindFilter(IntFlag):
    DEFAULT = 0
    SERVICE_FABRIC_APPLICATION_PACKAGE = 1
    COMPOSE = 2
    MESH_APPLICATION_DESCRIPTION = 4
    ALL = 65535


class ApplicationDefinitionKindFilter(IntFlag):
    DEFAULT = 0
    SERVICE_FABRIC_APPLICATION_DESCRIPTION = 1
    COMPOSE = 2
    MESH_APPLICATION_DESCRIPTION = 4
    ALL = 65535


class RepairTaskStateFilter(IntFlag):
    DEFAULT = 0
    CREATED = 1
    CLAIMED = 2
    PREPARING = 4
    APPROVED = 8
    EXECUTING = 16
    RESTORING = 32
    COMPLETED = 64
    ALL = 127


class OperationTypeFilter(IntFlag):
    PARTITION_DATA_LOSS = 1
    PARTITION_QUORUM_LOSS = 2
    PARTITION_RESTART = 4
    NODE_TRANSITION = 8
    ALL = 65535


class OperationStateFilter(IntFlag):
    RUNNING = 1
    ROLLING_BACK = 2
    COMPLETED = 8
    FAULTED = 16
    CANCELLED = 32
    FORCE_CANCELLED = 64
    ALL = 65535