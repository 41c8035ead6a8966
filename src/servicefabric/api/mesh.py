"""Service Fabric Mesh resources (``/Resources``).

Mesh endpoints use their own API version and do not accept the
per-operation ``timeout`` query parameter.
"""

from __future__ import annotations

from typing import Any

from ._common import MESH_API_VERSION, Body, RequestFn, _segment

_PUT_STATUSES = (200, 201, 202)
_DELETE_STATUSES = (200, 202, 204)


class _MeshResourceApi:
    def __init__(self, request: RequestFn, group: str, collection: str) -> None:
        self._request = request
        self._group = group
        self._collection = collection

    def _call(self, action: str, method: str, path: str, **kwargs: Any) -> Any:
        return self._request(
            f"{self._group}.{action}",
            method,
            path,
            api_version=MESH_API_VERSION,
            send_timeout=False,
            **kwargs,
        )

    def create_or_update(self, name: str, body: Body) -> Any:
        return self._call(
            "create_or_update",
            "PUT",
            f"/Resources/{self._collection}/{_segment(name)}",
            json_body=body,
            allow_statuses=_PUT_STATUSES,
        )

    def get(self, name: str) -> Any:
        return self._call("get", "GET", f"/Resources/{self._collection}/{_segment(name)}")

    def delete(self, name: str) -> Any:
        return self._call(
            "delete",
            "DELETE",
            f"/Resources/{self._collection}/{_segment(name)}",
            allow_statuses=_DELETE_STATUSES,
        )

    def list(self) -> Any:
        return self._call("list", "GET", f"/Resources/{self._collection}")


class MeshApplicationsApi(_MeshResourceApi):
    def __init__(self, request: RequestFn) -> None:
        super().__init__(request, "mesh.applications", "Applications")

    def get_upgrade_progress(self, application_resource_name: str) -> Any:
        return self._call(
            "get_upgrade_progress",
            "GET",
            f"/Resources/Applications/{_segment(application_resource_name)}/$/GetUpgradeProgress",
        )


class MeshSecretValuesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def _call(self, action: str, method: str, path: str, **kwargs: Any) -> Any:
        return self._request(
            f"mesh.secret_values.{action}",
            method,
            path,
            api_version=MESH_API_VERSION,
            send_timeout=False,
            **kwargs,
        )

    @staticmethod
    def _path(secret_resource_name: str, secret_value_resource_name: str | None = None) -> str:
        path = f"/Resources/Secrets/{_segment(secret_resource_name)}/values"
        if secret_value_resource_name is not None:
            path += f"/{_segment(secret_value_resource_name)}"
        return path

    def add_value(self, secret_resource_name: str, secret_value_resource_name: str, body: Body) -> Any:
        return self._call(
            "add_value",
            "PUT",
            self._path(secret_resource_name, secret_value_resource_name),
            json_body=body,
            allow_statuses=_PUT_STATUSES,
        )

    def get(self, secret_resource_name: str, secret_value_resource_name: str) -> Any:
        return self._call("get", "GET", self._path(secret_resource_name, secret_value_resource_name))

    def delete(self, secret_resource_name: str, secret_value_resource_name: str) -> Any:
        return self._call(
            "delete",
            "DELETE",
            self._path(secret_resource_name, secret_value_resource_name),
            allow_statuses=_DELETE_STATUSES,
        )

    def list(self, secret_resource_name: str) -> Any:
        return self._call("list", "GET", self._path(secret_resource_name))

    def show(self, secret_resource_name: str, secret_value_resource_name: str) -> Any:
        """Return the unencrypted value of one secret version."""
        return self._call(
            "show",
            "POST",
            f"{self._path(secret_resource_name, secret_value_resource_name)}/list_value",
        )


class MeshServicesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get(self, application_resource_name: str, service_resource_name: str) -> Any:
        return self._request(
            "mesh.services.get",
            "GET",
            f"/Resources/Applications/{_segment(application_resource_name)}"
            f"/Services/{_segment(service_resource_name)}",
            api_version=MESH_API_VERSION,
            send_timeout=False,
        )

    def list(self, application_resource_name: str) -> Any:
        return self._request(
            "mesh.services.list",
            "GET",
            f"/Resources/Applications/{_segment(application_resource_name)}/Services",
            api_version=MESH_API_VERSION,
            send_timeout=False,
        )


class MeshServiceReplicasApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get(self, application_resource_name: str, service_resource_name: str, replica_name: str) -> Any:
        return self._request(
            "mesh.service_replicas.get",
            "GET",
            f"/Resources/Applications/{_segment(application_resource_name)}"
            f"/Services/{_segment(service_resource_name)}/Replicas/{_segment(replica_name)}",
            api_version=MESH_API_VERSION,
            send_timeout=False,
        )

    def list(self, application_resource_name: str, service_resource_name: str) -> Any:
        return self._request(
            "mesh.service_replicas.list",
            "GET",
            f"/Resources/Applications/{_segment(application_resource_name)}"
            f"/Services/{_segment(service_resource_name)}/Replicas",
            api_version=MESH_API_VERSION,
            send_timeout=False,
        )


class MeshCodePackagesApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get_container_logs(
        self,
        application_resource_name: str,
        service_resource_name: str,
        replica_name: str,
        code_package_name: str,
        *,
        tail: int | None = None,
    ) -> Any:
        return self._request(
            "mesh.code_packages.get_container_logs",
            "GET",
            f"/Resources/Applications/{_segment(application_resource_name)}"
            f"/Services/{_segment(service_resource_name)}/Replicas/{_segment(replica_name)}"
            f"/CodePackages/{_segment(code_package_name)}/Logs",
            query={"Tail": tail},
            api_version=MESH_API_VERSION,
            send_timeout=False,
        )


class MeshApi:
    def __init__(self, request: RequestFn) -> None:
        self.secrets = _MeshResourceApi(request, "mesh.secrets", "Secrets")
        self.secret_values = MeshSecretValuesApi(request)
        self.volumes = _MeshResourceApi(request, "mesh.volumes", "Volumes")
        self.networks = _MeshResourceApi(request, "mesh.networks", "Networks")
        self.applications = MeshApplicationsApi(request)
        self.services = MeshServicesApi(request)
        self.service_replicas = MeshServiceReplicasApi(request)
        self.code_packages = MeshCodePackagesApi(request)
        self.gateways = _MeshResourceApi(request, "mesh.gateways", "Gateways")
