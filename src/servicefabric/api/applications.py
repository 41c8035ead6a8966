"""Application types, applications and their upgrades."""

from __future__ import annotations

from typing import Any

from ..models.enums import (
    ApplicationDefinitionKindFilter,
    ApplicationTypeDefinitionKindFilter,
    HealthStateFilter,
)
from ._common import Body, RequestFn, _entity, _segment


class ApplicationTypesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def list(
        self,
        *,
        application_type_definition_kind_filter: ApplicationTypeDefinitionKindFilter | int | None = None,
        exclude_application_parameters: bool | None = None,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "application_types.list",
            "GET",
            "/ApplicationTypes",
            query={
                "ApplicationTypeDefinitionKindFilter": application_type_definition_kind_filter,
                "ExcludeApplicationParameters": exclude_application_parameters,
                "ContinuationToken": continuation_token,
                "MaxResults": max_results,
            },
            timeout=timeout,
        )

    def get(
        self,
        application_type_name: str,
        *,
        application_type_version: str | None = None,
        exclude_application_parameters: bool | None = None,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "application_types.get",
            "GET",
            f"/ApplicationTypes/{_segment(application_type_name)}",
            query={
                "ApplicationTypeVersion": application_type_version,
                "ExcludeApplicationParameters": exclude_application_parameters,
                "ContinuationToken": continuation_token,
                "MaxResults": max_results,
            },
            timeout=timeout,
        )

    def provision(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "application_types.provision",
            "POST",
            "/ApplicationTypes/$/Provision",
            json_body=body,
            api_version="6.2",
            timeout=timeout,
        )

    def unprovision(self, application_type_name: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "application_types.unprovision",
            "POST",
            f"/ApplicationTypes/{_segment(application_type_name)}/$/Unprovision",
            json_body=body,
            timeout=timeout,
        )

    def get_manifest(
        self,
        application_type_name: str,
        application_type_version: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "application_types.get_manifest",
            "GET",
            f"/ApplicationTypes/{_segment(application_type_name)}/$/GetApplicationManifest",
            query={"ApplicationTypeVersion": application_type_version},
            timeout=timeout,
        )

    def get_service_types(
        self,
        application_type_name: str,
        application_type_version: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "application_types.get_service_types",
            "GET",
            f"/ApplicationTypes/{_segment(application_type_name)}/$/GetServiceTypes",
            query={"ApplicationTypeVersion": application_type_version},
            timeout=timeout,
        )

    def get_service_type(
        self,
        application_type_name: str,
        service_type_name: str,
        application_type_version: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "application_types.get_service_type",
            "GET",
            f"/ApplicationTypes/{_segment(application_type_name)}/$/GetServiceTypes/{_segment(service_type_name)}",
            query={"ApplicationTypeVersion": application_type_version},
            timeout=timeout,
        )

    def get_service_manifest(
        self,
        application_type_name: str,
        application_type_version: str,
        service_manifest_name: str,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "application_types.get_service_manifest",
            "GET",
            f"/ApplicationTypes/{_segment(application_type_name)}/$/GetServiceManifest",
            query={
                "ApplicationTypeVersion": application_type_version,
                "ServiceManifestName": service_manifest_name,
            },
            timeout=timeout,
        )


class ApplicationsApi:
    """Application instances. ``application_id`` accepts ``App~Sub`` or ``fabric:/App/Sub``."""

    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def create(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request("applications.create", "POST", "/Applications/$/Create", json_body=body, timeout=timeout)

    def delete(self, application_id: str, *, force_remove: bool | None = None, timeout: int | None = None) -> Any:
        return self._request(
            "applications.delete",
            "POST",
            f"/Applications/{_entity(application_id)}/$/Delete",
            query={"ForceRemove": force_remove},
            timeout=timeout,
        )

    def list(
        self,
        *,
        application_definition_kind_filter: ApplicationDefinitionKindFilter | int | None = None,
        application_type_name: str | None = None,
        exclude_application_parameters: bool | None = None,
        continuation_token: str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "applications.list",
            "GET",
            "/Applications",
            query={
                "ApplicationDefinitionKindFilter": application_definition_kind_filter,
                "ApplicationTypeName": application_type_name,
                "ExcludeApplicationParameters": exclude_application_parameters,
                "ContinuationToken": continuation_token,
                "MaxResults": max_results,
            },
            timeout=timeout,
        )

    def get(
        self,
        application_id: str,
        *,
        exclude_application_parameters: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "applications.get",
            "GET",
            f"/Applications/{_entity(application_id)}",
            query={"ExcludeApplicationParameters": exclude_application_parameters},
            timeout=timeout,
        )

    def get_load(self, application_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "applications.get_load",
            "GET",
            f"/Applications/{_entity(application_id)}/$/GetLoadInformation",
            timeout=timeout,
        )

    def get_health(
        self,
        application_id: str,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        deployed_applications_health_state_filter: HealthStateFilter | int | None = None,
        services_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "applications.get_health",
            "GET",
            f"/Applications/{_entity(application_id)}/$/GetHealth",
            query={
                "EventsHealthStateFilter": events_health_state_filter,
                "DeployedApplicationsHealthStateFilter": deployed_applications_health_state_filter,
                "ServicesHealthStateFilter": services_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
            },
            timeout=timeout,
        )

    def get_health_using_policy(
        self,
        application_id: str,
        body: Body | None = None,
        *,
        events_health_state_filter: HealthStateFilter | int | None = None,
        deployed_applications_health_state_filter: HealthStateFilter | int | None = None,
        services_health_state_filter: HealthStateFilter | int | None = None,
        exclude_health_statistics: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "applications.get_health_using_policy",
            "POST",
            f"/Applications/{_entity(application_id)}/$/GetHealth",
            query={
                "EventsHealthStateFilter": events_health_state_filter,
                "DeployedApplicationsHealthStateFilter": deployed_applications_health_state_filter,
                "ServicesHealthStateFilter": services_health_state_filter,
                "ExcludeHealthStatistics": exclude_health_statistics,
            },
            json_body=body,
            timeout=timeout,
        )

    def report_health(
        self,
        application_id: str,
        body: Body,
        *,
        immediate: bool | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "applications.report_health",
            "POST",
            f"/Applications/{_entity(application_id)}/$/ReportHealth",
            query={"Immediate": immediate},
            json_body=body,
            timeout=timeout,
        )

    def update(self, application_id: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "applications.update",
            "POST",
            f"/Applications/{_entity(application_id)}/$/Update",
            json_body=body,
            timeout=timeout,
        )

    def start_upgrade(self, application_id: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "applications.start_upgrade",
            "POST",
            f"/Applications/{_entity(application_id)}/$/Upgrade",
            json_body=body,
            timeout=timeout,
        )

    def get_upgrade(self, application_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "applications.get_upgrade",
            "GET",
            f"/Applications/{_entity(application_id)}/$/GetUpgradeProgress",
            timeout=timeout,
        )

    def update_upgrade(self, application_id: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "applications.update_upgrade",
            "POST",
            f"/Applications/{_entity(application_id)}/$/UpdateUpgrade",
            json_body=body,
            timeout=timeout,
        )

    def resume_upgrade(self, application_id: str, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "applications.resume_upgrade",
            "POST",
            f"/Applications/{_entity(application_id)}/$/MoveToNextUpgradeDomain",
            json_body=body,
            timeout=timeout,
        )

    def rollback_upgrade(self, application_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "applications.rollback_upgrade",
            "POST",
            f"/Applications/{_entity(application_id)}/$/RollbackUpgrade",
            timeout=timeout,
        )
