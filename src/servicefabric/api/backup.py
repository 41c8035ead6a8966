"""Backup policies, periodic backup configuration, on-demand backup and restore."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ._common import Body, RequestFn, _entity, _segment

BACKUP_API_VERSION = "6.4"


def _backup_list_query(
    latest: bool | None,
    start_date_time_filter: datetime | str | None,
    end_date_time_filter: datetime | str | None,
    continuation_token: str | None,
    max_results: int | None,
) -> dict[str, Any]:
    return {
        "Latest": latest,
        "StartDateTimeFilter": start_date_time_filter,
        "EndDateTimeFilter": end_date_time_filter,
        "ContinuationToken": continuation_token,
        "MaxResults": max_results,
    }


class _BackupScope:
    """Backup operations shared by applications, services and partitions."""

    def __init__(self, request: RequestFn, group: str, collection: str, encode: Any) -> None:
        self._request = request
        self._group = group
        self._collection = collection
        self._encode = encode

    def _path(self, entity: str, action: str) -> str:
        return f"/{self._collection}/{self._encode(entity)}/$/{action}"

    def enable(self, entity: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            f"{self._group}.enable",
            "POST",
            self._path(entity, "EnableBackup"),
            json_body=body,
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def disable(self, entity: str, body: Body | None = None, *, timeout: int | None = None) -> Any:
        return self._request(
            f"{self._group}.disable",
            "POST",
            self._path(entity, "DisableBackup"),
            json_body=body,
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def get_configuration_info(
        self,
        entity: str,
        *,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            f"{self._group}.get_configuration_info",
            "GET",
            self._path(entity, "GetBackupConfigurationInfo"),
            query={"ContinuationToken": continuation_token, "MaxResults": max_results},
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def list_backups(
        self,
        entity: str,
        *,
        latest: bool | None = None,
        start_date_time_filter: datetime | str | None = None,
        end_date_time_filter: datetime | str | None = None,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            f"{self._group}.list_backups",
            "GET",
            self._path(entity, "GetBackups"),
            query=_backup_list_query(
                latest, start_date_time_filter, end_date_time_filter, continuation_token, max_results
            ),
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def suspend(self, entity: str, *, timeout: int | None = None) -> Any:
        return self._request(
            f"{self._group}.suspend",
            "POST",
            self._path(entity, "SuspendBackup"),
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def resume(self, entity: str, *, timeout: int | None = None) -> Any:
        return self._request(
            f"{self._group}.resume",
            "POST",
            self._path(entity, "ResumeBackup"),
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )


class PartitionBackupApi(_BackupScope):
    def __init__(self, request: RequestFn) -> None:
        super().__init__(request, "backup.partitions", "Partitions", _segment)

    def backup(
        self,
        partition_id: str,
        body: Body | None = None,
        *,
        backup_timeout: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        """Trigger an on-demand backup; ``backup_timeout`` is in minutes."""
        return self._request(
            "backup.partitions.backup",
            "POST",
            self._path(partition_id, "Backup"),
            query={"BackupTimeout": backup_timeout},
            json_body=body,
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def get_backup_progress(self, partition_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "backup.partitions.get_backup_progress",
            "GET",
            self._path(partition_id, "GetBackupProgress"),
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def restore(
        self,
        partition_id: str,
        body: Body,
        *,
        restore_timeout: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        """Restore from a backup; ``restore_timeout`` is in minutes."""
        return self._request(
            "backup.partitions.restore",
            "POST",
            self._path(partition_id, "Restore"),
            query={"RestoreTimeout": restore_timeout},
            json_body=body,
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def get_restore_progress(self, partition_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "backup.partitions.get_restore_progress",
            "GET",
            self._path(partition_id, "GetRestoreProgress"),
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )


class BackupPoliciesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def create(self, body: Body, *, validate_connection: bool | None = None, timeout: int | None = None) -> Any:
        return self._request(
            "backup.policies.create",
            "POST",
            "/BackupRestore/BackupPolicies/$/Create",
            query={"ValidateConnection": validate_connection},
            json_body=body,
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def delete(self, backup_policy_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "backup.policies.delete",
            "POST",
            f"/BackupRestore/BackupPolicies/{_segment(backup_policy_name)}/$/Delete",
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def list(
        self,
        *,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "backup.policies.list",
            "GET",
            "/BackupRestore/BackupPolicies",
            query={"ContinuationToken": continuation_token, "MaxResults": max_results},
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def get(self, backup_policy_name: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "backup.policies.get",
            "GET",
            f"/BackupRestore/BackupPolicies/{_segment(backup_policy_name)}",
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def get_entities(
        self,
        backup_policy_name: str,
        *,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "backup.policies.get_entities",
            "GET",
            f"/BackupRestore/BackupPolicies/{_segment(backup_policy_name)}/$/GetBackupEnabledEntities",
            query={"ContinuationToken": continuation_token, "MaxResults": max_results},
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )

    def update(
        self,
        backup_policy_name: str,
        body: Body,
        *,
        validate_connection: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "backup.policies.update",
            "POST",
            f"/BackupRestore/BackupPolicies/{_segment(backup_policy_name)}/$/Update",
            query={"ValidateConnection": validate_connection},
            json_body=body,
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )


class BackupApi:
    """Backup and restore, grouped by the entity the operation targets."""

    def __init__(self, request: RequestFn) -> None:
        self._request = request
        self.policies = BackupPoliciesApi(request)
        self.applications = _BackupScope(request, "backup.applications", "Applications", _entity)
        self.services = _BackupScope(request, "backup.services", "Services", _entity)
        self.partitions = PartitionBackupApi(request)

    def get_backups_from_storage(
        self,
        body: Body,
        *,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "backup.get_backups_from_storage",
            "POST",
            "/BackupRestore/$/GetBackups",
            query={"ContinuationToken": continuation_token, "MaxResults": max_results},
            json_body=body,
            api_version=BACKUP_API_VERSION,
            timeout=timeout,
        )
