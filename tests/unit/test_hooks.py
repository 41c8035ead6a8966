from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import pytest

from servicefabric import ServiceFabricClient
from servicefabric.errors import ConflictError, RequestDetails
from servicefabric.hooks import HookRegistry, LoggingMiddleware, RequestCall


def _node_call() -> RequestCall:
    return RequestCall(operation="nodes.get", method="GET", path="/Nodes/_Node_0", api_version="6.0")


class _RecordingMiddleware:
    def __init__(self, events: list[str]) -> None:
        self.events = events

    def before(self, call: RequestCall) -> None:
        self.events.append(f"before {call.operation}")

    def after(self, call: RequestCall, response: Any) -> None:
        self.events.append(f"after {response['Name']}")

    def on_error(self, call: RequestCall, error: Exception) -> None:
        self.events.append(f"error {type(error).__name__}")


def test_call_group_is_the_leading_operation_segment() -> None:
    assert _node_call().group == "nodes"
    assert RequestCall(operation="mesh.secrets.list", method="GET", path="/Resources/Secrets").group == "mesh"


def test_sync_registry_rejects_coroutine_hooks() -> None:
    registry = HookRegistry()

    async def audit(_call: RequestCall) -> None:
        return None

    registry.add_before("nodes.*", audit)
    with pytest.raises(TypeError, match="async before hooks"):
        registry.run_before(_node_call())


@pytest.mark.asyncio
async def test_async_registry_awaits_hooks_and_accepts_plain_functions() -> None:
    registry = HookRegistry()
    events: list[str] = []

    async def before(call: RequestCall) -> None:
        await asyncio.sleep(0)
        events.append(f"before {call.path}")

    registry.add_before("*", before)
    registry.add_error("nodes.get", lambda _call, error: events.append(f"error {error}"))

    await registry.run_before_async(_node_call())
    await registry.run_error_async(_node_call(), RuntimeError("node down"))

    assert events == ["before /Nodes/_Node_0", "error node down"]


def test_registry_matches_wildcard_prefixes_and_exact_keys_in_order() -> None:
    registry = HookRegistry()
    events: list[str] = []

    registry.add_before("mesh.secrets.list", lambda _call: events.append("exact"))
    registry.add_before("mesh.*", lambda _call: events.append("mesh.*"))
    registry.add_before("*", lambda _call: events.append("*"))
    registry.add_before("mesh.secrets.*", lambda _call: events.append("mesh.secrets.*"))
    registry.add_before("nodes.*", lambda _call: events.append("nodes.*"))

    registry.run_before(RequestCall(operation="mesh.secrets.list", method="GET", path="/Resources/Secrets"))

    assert events == ["*", "mesh.*", "mesh.secrets.*", "exact"]
    assert len(registry.matching("before", "nodes.get")) == 2


def test_middleware_hooks_run_for_matching_operations_only() -> None:
    registry = HookRegistry()
    events: list[str] = []
    registry.add_middleware("nodes.*", _RecordingMiddleware(events))

    registry.run_before(_node_call())
    registry.run_after(_node_call(), {"Name": "_Node_0"})
    details = RequestDetails(operation="nodes.get", method="GET", path="/Nodes/_Node_0", status_code=409)
    registry.run_error(_node_call(), ConflictError("busy", details=details))
    registry.run_before(RequestCall(operation="applications.list", method="GET", path="/Applications"))

    assert events == ["before nodes.get", "after _Node_0", "error ConflictError"]


def test_sync_registry_rejects_async_middleware() -> None:
    class AsyncAudit:
        async def before(self, _call: RequestCall) -> None:
            return None

        async def after(self, _call: RequestCall, _response: object) -> None:
            return None

        async def on_error(self, _call: RequestCall, _error: Exception) -> None:
            return None

    registry = HookRegistry()
    registry.add_middleware("*", AsyncAudit())
    with pytest.raises(TypeError):
        registry.run_before(_node_call())


def test_middleware_requires_all_hooks() -> None:
    class BeforeOnly:
        def before(self, _call: RequestCall) -> None:
            return None

    registry = HookRegistry()
    with pytest.raises(TypeError, match="after"):
        registry.add_middleware("*", BeforeOnly())
    assert registry.matching("before", "nodes.get") == []


@dataclass
class _ConflictExecutor:
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        details = RequestDetails(
            operation=kwargs["operation"],
            method=kwargs["method"],
            path=kwargs["path"],
            status_code=409,
            response_body={"Error": {"Code": "FABRIC_E_APPLICATION_ALREADY_EXISTS", "Message": "exists"}},
        )
        raise ConflictError("conflict", details=details)


def test_client_decorators_see_calls_and_errors() -> None:
    client = ServiceFabricClient(request_executor=_ConflictExecutor())
    seen: list[tuple[str, Any]] = []

    @client.before("applications.*")
    def before(call: RequestCall) -> None:
        seen.append(("before", call.api_version))

    @client.on_error("applications.create")
    def on_error(call: RequestCall, error: Exception) -> None:
        seen.append(("error", type(error).__name__))

    try:
        with pytest.raises(ConflictError):
            client.applications.create({"Name": "fabric:/App", "TypeName": "AppType", "TypeVersion": "1.0.0"})
    finally:
        client.close()

    assert seen == [("before", "6.0"), ("error", "ConflictError")]


def test_logging_middleware_logs_calls_and_failures(caplog: pytest.LogCaptureFixture) -> None:
    client = ServiceFabricClient(request_executor=_ConflictExecutor())
    client.use_middleware(LoggingMiddleware(logging.getLogger("sf-test")))
    caplog.set_level(logging.INFO, logger="sf-test")
    try:
        with pytest.raises(ConflictError):
            client.applications.create({"Name": "fabric:/App"})
    finally:
        client.close()

    messages = [record.getMessage() for record in caplog.records if record.name == "sf-test"]
    assert messages[0] == "calling applications.create POST /Applications/$/Create"
    assert messages[1].startswith("applications.create failed:")
