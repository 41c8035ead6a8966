"""Image store content listings, copy requests and upload sessions."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ._base import FabricModel


class FileVersion(FabricModel):
    version_number: str | None = None
    epoch_data_loss_number: str | None = None
    epoch_configuration_number: str | None = None


class FileInfo(FabricModel):
    file_size: str | None = None
    file_version: FileVersion | None = None
    modified_date: datetime | None = None
    store_relative_path: str | None = None


class FolderInfo(FabricModel):
    store_relative_path: str | None = None
    file_count: str | None = None


class ImageStoreContent(FabricModel):
    store_files: list[FileInfo] = Field(default_factory=list)
    store_folders: list[FolderInfo] = Field(default_factory=list)


class ImageStoreCopyDescription(FabricModel):
    remote_source: str
    remote_destination: str
    skip_files: list[str] | None = None
    check_mark_file: bool | None = None


class UploadChunkRange(FabricModel):
    start_position: str | None = None
    end_position: str | None = None


class UploadSessionInfo(FabricModel):
    store_relative_path: str | None = None
    session_id: str | None = None
    modified_date: datetime | None = None
    file_size: str | None = None
    expected_ranges: list[UploadChunkRange] = Field(default_factory=list)


class UploadSession(FabricModel):
    upload_sessions: list[UploadSessionInfo] = Field(default_factory=list)


class FolderSizeInfo(FabricModel):
    store_relative_path: str | None = None
    folder_size: str | None = None


class DiskInfo(FabricModel):
    capacity: str | None = None
    available_space: str | None = None


class UsageInfo(FabricModel):
    used_space: str | None = None
    file_count: str | None = None


class ImageStoreInfo(FabricModel):
    disk_info: DiskInfo | None = None
    used_by_metadata: UsageInfo | None = None
    used_by_staging: UsageInfo | None = None
    used_by_copy: UsageInfo | None = None
    used_by_register: UsageInfo | None = None
