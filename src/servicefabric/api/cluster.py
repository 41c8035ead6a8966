"""Cluster-wide operations: manifest, health, versions, upgrades and load."""

from __future__ import annotations

from typing import Any

from ..models.enums import HealthStateFilter
from ._common import Body, RequestFn


class ClusterApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get_manifest(self, *, timeout: int | None = None) -> Any:
        return self._request("cluster.get_manifest", "GET", "/$/GetClusterManifest", timeout=timeout)

    def get_health(
        self,
        *,
        nodes_health_state_filter: HealthStateFilter | int | None = None,
        applications_health_state_filter: HealthStateFilter | int | None = None,
        events_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        include_system_application_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "cluster.get_health",
            "GET",
            "/$/GetClusterHealth",
            query={
                "NodesHealthStateFilter": nodes_health_state_filter,
                "ApplicationsHealthStateFilter": applications_health_state_filter,
                "EventsHealthStateFilter": events_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
                "IncludeSystemApplicationHealthStatistics": include_system_application_health_statistics,
            },
            timeout=timeout,
        )

    def get_health_using_policy(
        self,
        body: Body | None = None,
        *,
        nodes_health_state_filter: HealthStateFilter | int | None = None,
        applications_health_state_filter: HealthStateFilter | int | None = None,
        events_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        include_system_application_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "cluster.get_health_using_policy",
            "POST",
            "/$/GetClusterHealth",
            query={
                "NodesHealthStateFilter": nodes_health_state_filter,
                "ApplicationsHealthStateFilter": applications_health_state_filter,
                "EventsHealthStateFilter": events_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
                "IncludeSystemApplicationHealthStatistics": include_system_application_health_statistics,
            },
            json_body=body,
            timeout=timeout,
        )

    def get_health_chunk(self, *, timeout: int | None = None) -> Any:
        return self._request("cluster.get_health_chunk", "GET", "/$/GetClusterHealthChunk", timeout=timeout)

    def get_health_chunk_using_policy_and_advanced_filters(
        self, body: Body | None = None, *, timeout: int | None = None
    ) -> Any:
        return self._request(
            "cluster.get_health_chunk_using_policy_and_advanced_filters",
            "POST",
            "/$/GetClusterHealthChunk",
            json_body=body,
            timeout=timeout,
        )

    def report_health(self, body: Body, *, immediate: bool | None = None, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.report_health",
            "POST",
            "/$/ReportClusterHealth",
            query={"Immediate": immediate},
            json_body=body,
            timeout=timeout,
        )

    def get_provisioned_code_versions(self, *, code_version: str | None = None, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.get_provisioned_code_versions",
            "GET",
            "/$/GetProvisionedCodeVersions",
            query={"CodeVersion": code_version},
            timeout=timeout,
        )

    def get_provisioned_config_versions(self, *, config_version: str | None = None, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.get_provisioned_config_versions",
            "GET",
            "/$/GetProvisionedConfigVersions",
            query={"ConfigVersion": config_version},
            timeout=timeout,
        )

    def get_upgrade_progress(self, *, timeout: int | None = None) -> Any:
        return self._request("cluster.get_upgrade_progress", "GET", "/$/GetUpgradeProgress", timeout=timeout)

    def get_configuration(self, configuration_api_version: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.get_configuration",
            "GET",
            "/$/GetClusterConfiguration",
            query={"ConfigurationApiVersion": configuration_api_version},
            timeout=timeout,
        )

    def get_configuration_upgrade_status(self, *, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.get_configuration_upgrade_status",
            "GET",
            "/$/GetClusterConfigurationUpgradeStatus",
            timeout=timeout,
        )

    def get_upgrade_orchestration_service_state(self, *, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.get_upgrade_orchestration_service_state",
            "GET",
            "/$/GetUpgradeOrchestrationServiceState",
            timeout=timeout,
        )

    def set_upgrade_orchestration_service_state(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.set_upgrade_orchestration_service_state",
            "POST",
            "/$/SetUpgradeOrchestrationServiceState",
            json_body=body,
            timeout=timeout,
        )

    def provision(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request("cluster.provision", "POST", "/$/Provision", json_body=body, timeout=timeout)

    def unprovision(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request("cluster.unprovision", "POST", "/$/Unprovision", json_body=body, timeout=timeout)

    def rollback_upgrade(self, *, timeout: int | None = None) -> Any:
        return self._request("cluster.rollback_upgrade", "POST", "/$/RollbackUpgrade", timeout=timeout)

    def resume_upgrade(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.resume_upgrade", "POST", "/$/MoveToNextUpgradeDomain", json_body=body, timeout=timeout
        )

    def start_upgrade(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request("cluster.start_upgrade", "POST", "/$/Upgrade", json_body=body, timeout=timeout)

    def start_configuration_upgrade(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.start_configuration_upgrade",
            "POST",
            "/$/StartClusterConfigurationUpgrade",
            json_body=body,
            timeout=timeout,
        )

    def update_upgrade(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request("cluster.update_upgrade", "POST", "/$/UpdateUpgrade", json_body=body, timeout=timeout)

    def get_aad_metadata(self, *, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.get_aad_metadata", "GET", "/$/GetAadMetadata", api_version="1.0", timeout=timeout
        )

    def get_version(self, *, timeout: int | None = None) -> Any:
        return self._request("cluster.get_version", "GET", "/$/GetClusterVersion", api_version="6.4", timeout=timeout)

    def get_load(self, *, timeout: int | None = None) -> Any:
        return self._request("cluster.get_load", "GET", "/$/GetLoadInformation", timeout=timeout)

    def toggle_verbose_service_placement_health_reporting(self, enabled: bool, *, timeout: int | None = None) -> Any:
        return self._request(
            "cluster.toggle_verbose_service_placement_health_reporting",
            "POST",
            "/$/ToggleVerboseServicePlacementHealthReporting",
            query={"Enabled": enabled},
            api_version="6.4",
            timeout=timeout,
        )
