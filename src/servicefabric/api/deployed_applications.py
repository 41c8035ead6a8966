"""Applications, service packages and code packages as deployed on a node."""

from __future__ import annotations

from typing import Any

from ..models.enums import HealthStateFilter
from ._common import Body, RequestFn, _entity, _segment


def _app_path(node_name: str, application_id: str) -> str:
    return f"/Nodes/{_segment(node_name)}/$/GetApplications/{_entity(application_id)}"


class DeployedApplicationsApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(
        self,
        node_name: str,
        *,
        include_health_state: bool | None = None,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.list",
            "GET",
            f"/Nodes/{_segment(node_name)}/$/GetApplications",
            query={
                "IncludeHealthState": include_health_state,
                "ContinuationToken": continuation_token,
                "MaxResults": max_results,
            },
            api_version="6.1",
            timeout=timeout,
        )

    def get(
        self,
        node_name: str,
        application_id: str,
        *,
        include_health_state: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get",
            "GET",
            _app_path(node_name, application_id),
            query={"IncludeHealthState": include_health_state},
            api_version="6.1",
            timeout=timeout,
        )

    def get_health(
        self,
        node_name: str,
        application_id: str,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        deployed_service_packages_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_health",
            "GET",
            f"{_app_path(node_name, application_id)}/$/GetHealth",
            query={
                "EventsHealthStateFilter": events_health_state_filter,
                "DeployedServicePackagesHealthStateFilter": deployed_service_packages_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
            },
            timeout=timeout,
        )

    def get_health_using_policy(
        self,
        node_name: str,
        application_id: str,
        body: Body | None = None,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        deployed_service_packages_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_health_using_policy",
            "POST",
            f"{_app_path(node_name, application_id)}/$/GetHealth",
            query={
                "EventsHealthStateFilter": events_health_state_filter,
                "DeployedServicePackagesHealthStateFilter": deployed_service_packages_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
            },
            json_body=body,
            timeout=timeout,
        )

    def report_health(
        self,
        node_name: str,
        application_id: str,
        body: Body,
        *,
        immediate: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.report_health",
            "POST",
            f"{_app_path(node_name, application_id)}/$/ReportHealth",
            query={"Immediate": immediate},
            json_body=body,
            timeout=timeout,
        )

    def get_service_packages(self, node_name: str, application_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "deployed_applications.get_service_packages",
            "GET",
            f"{_app_path(node_name, application_id)}/$/GetServicePackages",
            timeout=timeout,
        )

    def get_service_package(
        self,
        node_name: str,
        application_id: str,
        service_package_name: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_service_package",
            "GET",
            f"{_app_path(node_name, application_id)}/$/GetServicePackages/{_segment(service_package_name)}",
            timeout=timeout,
        )

    def get_service_package_health(
        self,
        node_name: str,
        application_id: str,
        service_package_name: str,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_service_package_health",
            "GET",
            f"{_app_path(node_name, application_id)}/$/GetServicePackages/{_segment(service_package_name)}/$/GetHealth",
            query={"EventsHealthStateFilter": events_health_state_filter},
            timeout=timeout,
        )

    def get_service_package_health_using_policy(
        self,
        node_name: str,
        application_id: str,
        service_package_name: str,
        body: Body | None = None,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_service_package_health_using_policy",
            "POST",
            f"{_app_path(node_name, application_id)}/$/GetServicePackages/{_segment(service_package_name)}/$/GetHealth",
            query={"EventsHealthStateFilter": events_health_state_filter},
            json_body=body,
            timeout=timeout,
        )

    def report_service_package_health(
        self,
        node_name: str,
        application_id: str,
        service_package_name: str,
        body: Body,
        *,
        immediate: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.report_service_package_health",
            "POST",
            f"{_app_path(node_name, application_id)}/$/GetServicePackages/{_segment(service_package_name)}/$/ReportHealth",
            query={"Immediate": immediate},
            json_body=body,
            timeout=timeout,
        )

    def deploy_service_package(self, node_name: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "deployed_applications.deploy_service_package",
            "POST",
            f"/Nodes/{_segment(node_name)}/$/DeployServicePackage",
            json_body=body,
            timeout=timeout,
        )

    def get_service_types(
        self,
        node_name: str,
        application_id: str,
        *,
        service_manifest_name: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_service_types",
            "GET",
            f"{_app_path(node_name, application_id)}/$/GetServiceTypes",
            query={"ServiceManifestName": service_manifest_name},
            timeout=timeout,
        )

    def get_service_type(
        self,
        node_name: str,
        application_id: str,
        service_type_name: str,
        *,
        service_manifest_name: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_service_type",
            "GET",
            f"{_app_path(node_name, application_id)}/$/GetServiceTypes/{_segment(service_type_name)}",
            query={"ServiceManifestName": service_manifest_name},
            timeout=timeout,
        )

    def get_code_packages(
        self,
        node_name: str,
        application_id: str,
        *,
        service_manifest_name: str | None = None,
        code_package_name: str | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_code_packages",
            "GET",
            f"{_app_path(node_name, application_id)}/$/GetCodePackages",
            query={"ServiceManifestName": service_manifest_name, "CodePackageName": code_package_name},
            timeout=timeout,
        )

    def restart_code_package(
        self,
        node_name: str,
        application_id: str,
        body: Body,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.restart_code_package",
            "POST",
            f"{_app_path(node_name, application_id)}/$/GetCodePackages/$/Restart",
            json_body=body,
            timeout=timeout,
        )

    def get_container_logs(
        self,
        node_name: str,
        application_id: str,
        service_manifest_name: str,
        code_package_name: str,
        *,
        tail: str | None = None,
        previous: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.get_container_logs",
            "GET",
            f"{_app_path(node_name, application_id)}/$/GetCodePackages/$/ContainerLogs",
            query={
                "ServiceManifestName": service_manifest_name,
                "CodePackageName": code_package_name,
                "Tail": tail,
                "Previous": previous,
            },
            api_version="6.2",
            timeout=timeout,
        )

    def invoke_container_api(
        self,
        node_name: str,
        application_id: str,
        service_manifest_name: str,
        code_package_name: str,
        code_package_instance_id: str,
        body: Body,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "deployed_applications.invoke_container_api",
            "POST",
            f"{_app_path(node_name, application_id)}/$/GetCodePackages/$/ContainerApi",
            query={
                "ServiceManifestName": service_manifest_name,
                "CodePackageName": code_package_name,
                "CodePackageInstanceId": code_package_instance_id,
            },
            json_body=body,
            api_version="6.2",
            timeout=timeout,
        )
