from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from servicefabric import AsyncServiceFabricClient, ServiceFabricClient
from servicefabric.errors import NotFoundError, RequestDetails, TransportError
from servicefabric.models import DeactivationIntent, DeactivationIntentDescription
from servicefabric.retry import ExponentialBackoff


@dataclass
class _SyncExecutor:
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return {"ok": True, "attempt": len(self.calls)}


@dataclass
class _AsyncExecutor:
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return {"ok": True, "attempt": len(self.calls)}


def test_sync_executor_injection_uses_protocol_executor() -> None:
    executor = _SyncExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        response = client.nodes.get("_Node_0")
    finally:
        client.close()

    assert response["ok"] is True
    assert executor.calls and executor.calls[0]["operation"] == "nodes.get"
    assert executor.calls[0]["method"] == "GET"
    assert executor.calls[0]["path"] == "/Nodes/_Node_0"
    assert executor.calls[0]["query"] == {"api-version": "6.0", "timeout": 60}


@pytest.mark.asyncio
async def test_async_executor_injection_uses_protocol_executor() -> None:
    executor = _AsyncExecutor()
    client = AsyncServiceFabricClient(request_executor=executor)
    try:
        response = await client.applications.get("fabric:/Voting")
    finally:
        await client.close()

    assert response["ok"] is True
    assert executor.calls[0]["operation"] == "applications.get"
    assert executor.calls[0]["path"] == "/Applications/Voting"


def test_operation_api_version_pin_and_explicit_timeout() -> None:
    executor = _SyncExecutor()
    client = ServiceFabricClient(request_executor=executor, server_timeout=30)
    try:
        client.nodes.list(max_results=5)
        client.cluster.get_version(timeout=10)
    finally:
        client.close()

    assert executor.calls[0]["query"]["api-version"] == "6.3"
    assert executor.calls[0]["query"]["MaxResults"] == 5
    assert executor.calls[0]["query"]["timeout"] == 30
    assert executor.calls[1]["query"]["api-version"] == "6.4"
    assert executor.calls[1]["query"]["timeout"] == 10


def test_mesh_and_repair_operations_send_no_timeout() -> None:
    executor = _SyncExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        client.mesh.secrets.list()
        client.repair_tasks.list(task_id_filter="Azure/")
    finally:
        client.close()

    mesh_query = executor.calls[0]["query"]
    assert mesh_query == {"api-version": "8.2"}
    assert executor.calls[0]["path"] == "/Resources/Secrets"
    assert "timeout" not in executor.calls[1]["query"]
    assert executor.calls[1]["query"]["TaskIdFilter"] == "Azure/"


def test_model_bodies_are_serialized_with_wire_names() -> None:
    executor = _SyncExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        client.nodes.disable(
            "_Node_1",
            DeactivationIntentDescription(deactivation_intent=DeactivationIntent.RESTART),
        )
    finally:
        client.close()

    call = executor.calls[0]
    assert call["method"] == "POST"
    assert call["path"] == "/Nodes/_Node_1/$/Deactivate"
    assert call["json_body"] == {"DeactivationIntent": "Restart"}


def test_header_provider_merges_with_request_headers() -> None:
    executor = _SyncExecutor()

    class HeaderProvider:
        def headers(self) -> dict[str, str]:
            return {"x-provider": "provider", "x-overlap": "provider"}

    client = ServiceFabricClient(request_executor=executor, header_provider=HeaderProvider())
    try:
        client.raw.request(
            "GET",
            "/$/GetClusterManifest",
            headers={"x-overlap": "request", "x-request": "request"},
        )
    finally:
        client.close()

    headers = executor.calls[0]["headers"]
    assert headers["x-provider"] == "provider"
    assert headers["x-overlap"] == "request"
    assert headers["x-request"] == "request"


def test_retry_policy_retries_get_requests() -> None:
    class RetryOnceExecutor(_SyncExecutor):
        def request(self, **kwargs: Any) -> Any:
            self.calls.append(dict(kwargs))
            if len(self.calls) == 1:
                raise TransportError("temporary")
            return {"ok": True}

    class RetryPolicy:
        def should_retry(self, *, attempt: int, error: Exception | None, status_code: int | None) -> bool:
            assert error is not None
            assert status_code is None
            return attempt == 1

        def next_delay_seconds(self, *, attempt: int) -> float:
            assert attempt == 1
            return 0.0

    executor = RetryOnceExecutor()
    client = ServiceFabricClient(request_executor=executor, retry_policy=RetryPolicy())
    try:
        result = client.cluster.get_manifest()
    finally:
        client.close()

    assert result["ok"] is True
    assert len(executor.calls) == 2


def test_no_retry_without_a_policy() -> None:
    class AlwaysFailExecutor(_SyncExecutor):
        def request(self, **kwargs: Any) -> Any:
            self.calls.append(dict(kwargs))
            raise TransportError("temporary")

    executor = AlwaysFailExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        with pytest.raises(TransportError):
            client.cluster.get_manifest()
    finally:
        client.close()

    assert len(executor.calls) == 1


def test_retry_policy_does_not_retry_post_without_opt_in() -> None:
    class AlwaysFailExecutor(_SyncExecutor):
        def request(self, **kwargs: Any) -> Any:
            self.calls.append(dict(kwargs))
            raise TransportError("temporary")

    class RetryPolicy:
        calls = 0

        def should_retry(self, *, attempt: int, error: Exception | None, status_code: int | None) -> bool:
            self.calls += 1
            return True

        def next_delay_seconds(self, *, attempt: int) -> float:
            return 0.0

    executor = AlwaysFailExecutor()
    policy = RetryPolicy()
    client = ServiceFabricClient(request_executor=executor, retry_policy=policy)
    try:
        with pytest.raises(TransportError):
            client.nodes.restart("_Node_0", {"NodeInstanceId": "0"})
    finally:
        client.close()

    assert len(executor.calls) == 1
    assert policy.calls == 0


def test_retry_policy_retries_post_when_operation_opted_in() -> None:
    class RetryOnceExecutor(_SyncExecutor):
        def request(self, **kwargs: Any) -> Any:
            self.calls.append(dict(kwargs))
            if len(self.calls) == 1:
                raise TransportError("temporary")
            return {"ok": True}

    executor = RetryOnceExecutor()
    client = ServiceFabricClient(
        request_executor=executor,
        retry_policy=ExponentialBackoff(initial_delay_seconds=0.0),
        retryable_operations={"cluster.get_health_using_policy"},
    )
    try:
        response = client.cluster.get_health_using_policy({})
    finally:
        client.close()

    assert response["ok"] is True
    assert len(executor.calls) == 2


def test_backoff_does_not_retry_not_found() -> None:
    class NotFoundExecutor(_SyncExecutor):
        def request(self, **kwargs: Any) -> Any:
            self.calls.append(dict(kwargs))
            details = RequestDetails(
                operation=kwargs["operation"],
                method=kwargs["method"],
                path=kwargs["path"],
                status_code=404,
                response_body={"Error": {"Code": "FABRIC_E_NODE_NOT_FOUND", "Message": "missing"}},
            )
            raise NotFoundError("not found", details=details)

    executor = NotFoundExecutor()
    client = ServiceFabricClient(request_executor=executor, retry_policy=ExponentialBackoff(initial_delay_seconds=0.0))
    try:
        with pytest.raises(NotFoundError) as raised:
            client.nodes.get("missing")
    finally:
        client.close()

    assert len(executor.calls) == 1
    assert raised.value.code == "FABRIC_E_NODE_NOT_FOUND"


@pytest.mark.asyncio
async def test_async_header_provider_and_retry() -> None:
    class FlakyExecutor(_AsyncExecutor):
        async def request(self, **kwargs: Any) -> Any:
            self.calls.append(dict(kwargs))
            if len(self.calls) < 3:
                raise TransportError("reset")
            return {"ok": True}

    class HeaderProvider:
        async def headers(self) -> dict[str, str]:
            return {"Authorization": "Bearer token"}

    executor = FlakyExecutor()
    client = AsyncServiceFabricClient(
        request_executor=executor,
        header_provider=HeaderProvider(),
        retry_policy=ExponentialBackoff(initial_delay_seconds=0.0),
    )
    try:
        response = await client.cluster.get_manifest()
    finally:
        await client.close()

    assert response["ok"] is True
    assert len(executor.calls) == 3
    assert all(call["headers"]["Authorization"] == "Bearer token" for call in executor.calls)


def test_invalid_validation_mode_is_rejected() -> None:
    with pytest.raises(ValueError, match="invalid validation_mode"):
        ServiceFabricClient(request_executor=_SyncExecutor(), validation_mode="loose")  # type: ignore[arg-type]


def test_validation_mode_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SF_CLIENT_VALIDATION_MODE", "OFF")
    client = ServiceFabricClient(request_executor=_SyncExecutor())
    try:
        assert client._validation_mode == "off"
    finally:
        client.close()
