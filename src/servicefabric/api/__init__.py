"""Operation groups. Each method maps to one Service Fabric REST operation."""

from ._common import MESH_API_VERSION, Body, RequestFn, entity_id
from .applications import ApplicationsApi, ApplicationTypesApi
from .backup import BackupApi, BackupPoliciesApi, PartitionBackupApi
from .chaos import ChaosApi
from .cluster import ClusterApi
from .compose import ComposeApi
from .deployed_applications import DeployedApplicationsApi
from .events import EventsApi
from .faults import FaultsApi
from .image_store import AsyncImageStoreApi, ImageStoreApi, chunk_ranges, content_range
from .mesh import MeshApi
from .nodes import NodesApi
from .partitions import PartitionsApi
from .properties import PropertiesApi
from .raw import RawApi
from .repair_tasks import RepairTasksApi
from .replicas import ReplicasApi
from .services import ServicesApi

__all__ = [
    "MESH_API_VERSION",
    "ApplicationTypesApi",
    "ApplicationsApi",
    "AsyncImageStoreApi",
    "BackupApi",
    "BackupPoliciesApi",
    "Body",
    "ChaosApi",
    "ClusterApi",
    "ComposeApi",
    "DeployedApplicationsApi",
    "EventsApi",
    "FaultsApi",
    "ImageStoreApi",
    "MeshApi",
    "NodesApi",
    "PartitionBackupApi",
    "PartitionsApi",
    "PropertiesApi",
    "RawApi",
    "RepairTasksApi",
    "ReplicasApi",
    "RequestFn",
    "ServicesApi",
    "chunk_ranges",
    "content_range",
    "entity_id",
]
