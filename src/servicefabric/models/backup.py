"""Periodic backup policies, backup storage, and partition backup/restore."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from ._base import FabricModel, PagedList
from .durations import FabricDuration
from .enums import (
    BackupPolicyScope,
    BackupScheduleFrequencyType,
    BackupState,
    BackupSuspensionScope,
    BackupType,
    DayOfWeek,
    ManagedIdentityType,
    RestoreState,
)
from .errors import FabricErrorError
from .partitions import PartitionInformationUnion
from .polymorphic import polymorphic

# Storage


class BackupStorageDescription(FabricModel):
    storage_kind: str
    friendly_name: str | None = None


class AzureBlobBackupStorageDescription(BackupStorageDescription):
    storage_kind: Literal["AzureBlobStore"] = "AzureBlobStore"
    connection_string: str
    container_name: str


class FileShareBackupStorageDescription(BackupStorageDescription):
    storage_kind: Literal["FileShare"] = "FileShare"
    path: str
    primary_user_name: str | None = None
    primary_password: str | None = None
    secondary_user_name: str | None = None
    secondary_password: str | None = None


class DsmsAzureBlobBackupStorageDescription(BackupStorageDescription):
    storage_kind: Literal["DsmsAzureBlobStore"] = "DsmsAzureBlobStore"
    storage_credentials_source_location: str
    container_name: str


class ManagedIdentityAzureBlobBackupStorageDescription(BackupStorageDescription):
    storage_kind: Literal["ManagedIdentityAzureBlobStore"] = "ManagedIdentityAzureBlobStore"
    managed_identity_type: ManagedIdentityType
    blob_service_uri: str
    container_name: str
    managed_identity_client_id: str | None = None


BackupStorageDescriptionUnion = polymorphic(
    "BackupStorageDescription",
    BackupStorageDescription,
    "storage_kind",
    AzureBlobBackupStorageDescription,
    FileShareBackupStorageDescription,
    DsmsAzureBlobBackupStorageDescription,
    ManagedIdentityAzureBlobBackupStorageDescription,
)


# Schedule and retention


class BackupScheduleDescription(FabricModel):
    schedule_kind: str


class FrequencyBasedBackupScheduleDescription(BackupScheduleDescription):
    schedule_kind: Literal["FrequencyBased"] = "FrequencyBased"
    interval: FabricDuration


class TimeBasedBackupScheduleDescription(BackupScheduleDescription):
    schedule_kind: Literal["TimeBased"] = "TimeBased"
    schedule_frequency_type: BackupScheduleFrequencyType
    run_days: list[DayOfWeek] | None = None
    run_times: list[datetime]


BackupScheduleDescriptionUnion = polymorphic(
    "BackupScheduleDescription",
    BackupScheduleDescription,
    "schedule_kind",
    FrequencyBasedBackupScheduleDescription,
    TimeBasedBackupScheduleDescription,
)


class RetentionPolicyDescription(FabricModel):
    retention_policy_type: str


class BasicRetentionPolicyDescription(RetentionPolicyDescription):
    retention_policy_type: Literal["Basic"] = "Basic"
    retention_duration: FabricDuration
    minimum_number_of_backups: int | None = None


RetentionPolicyDescriptionUnion = polymorphic(
    "RetentionPolicyDescription",
    RetentionPolicyDescription,
    "retention_policy_type",
    BasicRetentionPolicyDescription,
)


class BackupPolicyDescription(FabricModel):
    name: str
    auto_restore_on_data_loss: bool
    max_incremental_backups: int
    schedule: BackupScheduleDescriptionUnion
    storage: BackupStorageDescriptionUnion
    retention_policy: RetentionPolicyDescriptionUnion | None = None


class PagedBackupPolicyDescriptionList(PagedList[BackupPolicyDescription]):
    pass


# Backup entities and configuration


class BackupEntity(FabricModel):
    entity_kind: str


class ApplicationBackupEntity(BackupEntity):
    entity_kind: Literal["Application"] = "Application"
    application_name: str | None = None


class ServiceBackupEntity(BackupEntity):
    entity_kind: Literal["Service"] = "Service"
    service_name: str | None = None


class PartitionBackupEntity(BackupEntity):
    entity_kind: Literal["Partition"] = "Partition"
    service_name: str | None = None
    partition_id: str | None = None


BackupEntityUnion = polymorphic(
    "BackupEntity",
    BackupEntity,
    "entity_kind",
    ApplicationBackupEntity,
    ServiceBackupEntity,
    PartitionBackupEntity,
)


class PagedBackupEntityList(PagedList[BackupEntityUnion]):
    pass


class BackupSuspensionInfo(FabricModel):
    is_suspended: bool | None = None
    suspension_inherited_from: BackupSuspensionScope | None = None


class BackupConfigurationInfo(FabricModel):
    kind: str
    policy_name: str | None = None
    policy_inherited_from: BackupPolicyScope | None = None
    suspension_info: BackupSuspensionInfo | None = None


class ApplicationBackupConfigurationInfo(BackupConfigurationInfo):
    kind: Literal["Application"] = "Application"
    application_name: str | None = None


class ServiceBackupConfigurationInfo(BackupConfigurationInfo):
    kind: Literal["Service"] = "Service"
    service_name: str | None = None


class PartitionBackupConfigurationInfo(BackupConfigurationInfo):
    kind: Literal["Partition"] = "Partition"
    service_name: str | None = None
    partition_id: str | None = None


BackupConfigurationInfoUnion = polymorphic(
    "BackupConfigurationInfo",
    BackupConfigurationInfo,
    "kind",
    ApplicationBackupConfigurationInfo,
    ServiceBackupConfigurationInfo,
    PartitionBackupConfigurationInfo,
)


class PagedBackupConfigurationInfoList(PagedList[BackupConfigurationInfoUnion]):
    pass


class EnableBackupDescription(FabricModel):
    backup_policy_name: str


class DisableBackupDescription(FabricModel):
    clean_backup: bool


# Backups


class BackupEpoch(FabricModel):
    configuration_number: str | None = None
    data_loss_number: str | None = None


class BackupInfo(FabricModel):
    backup_id: str | None = None
    backup_chain_id: str | None = None
    application_name: str | None = None
    service_name: str | None = None
    partition_information: PartitionInformationUnion | None = None
    backup_location: str | None = None
    backup_type: BackupType | None = None
    epoch_of_last_backup_record: BackupEpoch | None = None
    lsn_of_last_backup_record: str | None = None
    creation_time_utc: datetime | None = None
    service_manifest_version: str | None = None
    failure_error: FabricErrorError | None = None


class PagedBackupInfoList(PagedList[BackupInfo]):
    pass


class BackupPartitionDescription(FabricModel):
    backup_storage: BackupStorageDescriptionUnion | None = None


class BackupProgressInfo(FabricModel):
    backup_state: BackupState | None = None
    time_stamp_utc: datetime | None = None
    backup_id: str | None = None
    backup_location: str | None = None
    epoch_of_last_backup_record: BackupEpoch | None = None
    lsn_of_last_backup_record: str | None = None
    failure_error: FabricErrorError | None = None


class RestorePartitionDescription(FabricModel):
    backup_id: str
    backup_location: str
    backup_storage: BackupStorageDescriptionUnion | None = None


class RestoreProgressInfo(FabricModel):
    restore_state: RestoreState | None = None
    time_stamp_utc: datetime | None = None
    restored_epoch: BackupEpoch | None = None
    restored_lsn: str | None = None
    failure_error: FabricErrorError | None = None


class GetBackupByStorageQueryDescription(FabricModel):
    start_date_time_filter: datetime | None = None
    end_date_time_filter: datetime | None = None
    latest: bool | None = None
    storage: BackupStorageDescriptionUnion
    backup_entity: BackupEntityUnion
