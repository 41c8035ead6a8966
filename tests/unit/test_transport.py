from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import httpx
import pytest

from servicefabric import AsyncServiceFabricClient, ServiceFabricClient
from servicefabric.errors import ClientTimeoutError, ConflictError, NotFoundError, ServiceUnavailableError, TransportError
from servicefabric.models import HealthStateFilter, NodeStatusFilter
from servicefabric.transport import SyncTransport, encode_query, encode_query_value


def _mock_client(handler: Any) -> httpx.Client:
    return httpx.Client(base_url="http://localhost:19080", transport=httpx.MockTransport(handler))


def test_encode_query_drops_none_and_renders_wire_values() -> None:
    query = encode_query(
        {
            "api-version": "6.0",
            "EventsHealthStateFilter": HealthStateFilter.WARNING | HealthStateFilter.ERROR,
            "NodeStatusFilter": NodeStatusFilter.DEFAULT,
            "ExcludeHealthStatistics": True,
            "ContinuationToken": None,
        }
    )

    assert query == "?api-version=6.0&EventsHealthStateFilter=12&NodeStatusFilter=default&ExcludeHealthStatistics=true"
    assert encode_query({"ContinuationToken": None}) == ""


def test_encode_query_value_formats_datetimes_and_uuids() -> None:
    start = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=2)))
    assert encode_query_value(start) == "2024-01-02T01:04:05Z"
    assert encode_query_value(UUID("6a7f4b47-0d0a-4c69-9d7c-1b1f1d1c1e1f")) == "6a7f4b47-0d0a-4c69-9d7c-1b1f1d1c1e1f"
    assert encode_query_value(False) == "false"


def test_sync_transport_parses_json_text_and_empty_bodies() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/$/GetClusterManifest":
            return httpx.Response(200, json={"Manifest": "<ClusterManifest/>"})
        if request.url.path == "/text":
            return httpx.Response(200, text="plain", headers={"content-type": "text/plain"})
        return httpx.Response(200)

    transport = SyncTransport(_mock_client(handler))

    assert transport.request(operation="cluster.get_manifest", method="GET", path="/$/GetClusterManifest") == {
        "Manifest": "<ClusterManifest/>"
    }
    assert transport.request(operation="raw.request", method="GET", path="/text") == "plain"
    assert transport.request(operation="raw.request", method="POST", path="/empty") is None


def test_sync_transport_raises_classified_errors_with_verbatim_body() -> None:
    body = {"Error": {"Code": "FABRIC_E_NODE_NOT_FOUND", "Message": "Node not found"}}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json=body)

    transport = SyncTransport(_mock_client(handler))
    with pytest.raises(NotFoundError) as raised:
        transport.request(operation="nodes.get", method="GET", path="/Nodes/missing")

    error = raised.value
    assert error.status_code == 404
    assert error.details.response_body == body
    assert error.code == "FABRIC_E_NODE_NOT_FOUND"
    assert error.fabric_error is not None
    assert error.fabric_error.message == "Node not found"
    assert error.retryable is False
    assert "FABRIC_E_NODE_NOT_FOUND" in str(error)


def test_allowed_statuses_return_the_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(409, json={"OperationIndex": 1, "ErrorMessage": "check failed", "Kind": "Failed"})

    transport = SyncTransport(_mock_client(handler))
    response = transport.request(
        operation="properties.submit_batch",
        method="POST",
        path="/Names/x/$/GetProperties/$/SubmitBatch",
        json_body={"Operations": []},
        allow_statuses=(200, 409),
    )
    assert response["Kind"] == "Failed"


def test_transport_maps_httpx_failures() -> None:
    def timeout_handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    def connect_handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ClientTimeoutError):
        SyncTransport(_mock_client(timeout_handler)).request(operation="x", method="GET", path="/")
    with pytest.raises(TransportError) as raised:
        SyncTransport(_mock_client(connect_handler)).request(operation="x", method="GET", path="/")
    assert not isinstance(raised.value, ClientTimeoutError)


def test_client_end_to_end_over_mock_transport() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ContinuationToken": "", "Items": []})

    client = ServiceFabricClient(http_client=_mock_client(handler), server_timeout=90)
    try:
        page = client.nodes.list(node_status_filter=NodeStatusFilter.UP)
    finally:
        client.close()

    assert page == {"ContinuationToken": "", "Items": []}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/Nodes"
    assert request.url.params["api-version"] == "6.3"
    assert request.url.params["timeout"] == "90"
    assert request.url.params["NodeStatusFilter"] == "up"


def test_upload_file_sends_octet_stream_content() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    client = ServiceFabricClient(http_client=_mock_client(handler))
    try:
        client.image_store.upload_file("VotingType/ApplicationManifest.xml", b"<ApplicationManifest/>")
    finally:
        client.close()

    request = seen[0]
    assert request.method == "PUT"
    assert request.url.path == "/ImageStore/VotingType/ApplicationManifest.xml"
    assert request.headers["content-type"] == "application/octet-stream"
    assert request.content == b"<ApplicationManifest/>"


@pytest.mark.asyncio
async def test_async_client_raises_service_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"Error": {"Code": "FABRIC_E_SERVICE_OFFLINE", "Message": "offline"}})

    http_client = httpx.AsyncClient(base_url="http://localhost:19080", transport=httpx.MockTransport(handler))
    client = AsyncServiceFabricClient(http_client=http_client)
    try:
        with pytest.raises(ServiceUnavailableError) as raised:
            await client.partitions.get_health("1d5a7d4a-8c3b-4b8e-9d49-8b1bb8a0e6a9")
    finally:
        await client.close()

    assert raised.value.retryable is True
    assert raised.value.code == "FABRIC_E_SERVICE_OFFLINE"


def test_list_query_values_are_comma_joined_and_errors_carry_the_fabric_message() -> None:
    assert encode_query({"NodeTags": ["blue", "green"]}) == "?NodeTags=blue%2Cgreen"

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(409, json={"Error": {"Code": "FABRIC_E_APPLICATION_ALREADY_EXISTS", "Message": "exists"}})

    with pytest.raises(ConflictError) as raised:
        SyncTransport(_mock_client(handler)).request(
            operation="applications.create", method="POST", path="/Applications/$/Create"
        )
    assert str(raised.value) == "applications.create returned HTTP 409 (FABRIC_E_APPLICATION_ALREADY_EXISTS): exists"
