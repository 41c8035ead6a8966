from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from servicefabric import AsyncServiceFabricClient, ServiceFabricClient
from servicefabric.errors import TypedModelValidationError
from servicefabric.models import (
    ClusterVersion,
    HealthInformation,
    HealthState,
    NodeInfo,
    PagedNodeInfoList,
    StatefulServiceDescription,
)
from servicefabric.retry import ExponentialBackoff
from servicefabric.typed import TYPED_OPERATION_CONTRACTS, parse_response_for_operation


@dataclass
class _ScriptedExecutor:
    response: Any = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return self.response


@dataclass
class _AsyncScriptedExecutor:
    response: Any = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return self.response


def test_typed_call_parses_response_model() -> None:
    executor = _ScriptedExecutor(response={"Name": "_Node_0", "HealthState": "Ok", "IsSeedNode": True})
    client = ServiceFabricClient(request_executor=executor)
    try:
        node = client.typed.nodes.get("_Node_0")
    finally:
        client.close()

    assert isinstance(node, NodeInfo)
    assert node.name == "_Node_0"
    assert node.health_state is HealthState.OK
    assert executor.calls[0]["path"] == "/Nodes/_Node_0"


def test_typed_list_parses_paged_model() -> None:
    executor = _ScriptedExecutor(response={"ContinuationToken": "", "Items": [{"Name": "_Node_0"}, {"Name": "_Node_1"}]})
    client = ServiceFabricClient(request_executor=executor)
    try:
        page = client.typed.nodes.list()
    finally:
        client.close()

    assert isinstance(page, PagedNodeInfoList)
    assert [node.name for node in page.items] == ["_Node_0", "_Node_1"]
    assert page.has_more is False


def test_typed_request_body_is_validated_and_serialized() -> None:
    executor = _ScriptedExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        result = client.typed.nodes.report_health(
            "_Node_0",
            {"SourceId": "watchdog", "Property": "Disk", "HealthState": "Warning"},
            immediate=True,
        )
    finally:
        client.close()

    assert result is None
    call = executor.calls[0]
    assert call["json_body"] == {"SourceId": "watchdog", "Property": "Disk", "HealthState": "Warning"}
    assert call["query"]["Immediate"] is True


def test_typed_request_body_rejects_missing_fields() -> None:
    executor = _ScriptedExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        with pytest.raises(TypedModelValidationError) as raised:
            client.typed.nodes.report_health("_Node_0", {"Property": "Disk", "HealthState": "Warning"})
    finally:
        client.close()

    error = raised.value
    assert error.boundary == "request"
    assert error.operation == "nodes.report_health"
    assert error.model_name == "HealthInformation"
    assert error.raw_sample == {"Property": "Disk", "HealthState": "Warning"}
    assert not executor.calls


def test_model_bodies_skip_request_validation() -> None:
    executor = _ScriptedExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        client.typed.nodes.report_health(
            "_Node_0",
            HealthInformation(source_id="watchdog", property="Disk", health_state=HealthState.ERROR),
        )
    finally:
        client.close()

    assert executor.calls[0]["json_body"]["HealthState"] == "Error"


def test_typed_response_validation_error_carries_sample() -> None:
    executor = _ScriptedExecutor(response={"Name": "_Node_0", "IsSeedNode": "maybe"})
    client = ServiceFabricClient(request_executor=executor)
    try:
        with pytest.raises(TypedModelValidationError) as raised:
            client.typed.nodes.get("_Node_0")
    finally:
        client.close()

    error = raised.value
    assert error.boundary == "response"
    assert error.model_name == "NodeInfo"
    assert error.raw_sample == {"Name": "_Node_0", "IsSeedNode": "maybe"}
    assert error.errors


def test_validate_false_returns_raw_payload() -> None:
    executor = _ScriptedExecutor(response={"Name": "_Node_0", "IsSeedNode": "maybe"})
    client = ServiceFabricClient(request_executor=executor)
    try:
        raw = client.typed.nodes.get("_Node_0", validate=False)
    finally:
        client.close()

    assert raw == {"Name": "_Node_0", "IsSeedNode": "maybe"}


def test_validation_mode_off_skips_typed_parsing() -> None:
    executor = _ScriptedExecutor(response={"Version": "10.1.1.0"})
    client = ServiceFabricClient(request_executor=executor, validation_mode="off")
    try:
        raw = client.typed.cluster.get_version()
        parsed = client.typed.cluster.get_version(validate=True)
    finally:
        client.close()

    assert raw == {"Version": "10.1.1.0"}
    assert isinstance(parsed, ClusterVersion)
    assert parsed.version == "10.1.1.0"


def test_strict_mode_validates_raw_calls() -> None:
    executor = _ScriptedExecutor(response={"Name": "_Node_0", "IsSeedNode": "maybe"})
    client = ServiceFabricClient(request_executor=executor, validation_mode="strict")
    try:
        with pytest.raises(TypedModelValidationError) as raised:
            client.nodes.get("_Node_0")
    finally:
        client.close()

    assert raised.value.operation == "nodes.get"


def test_strict_mode_leaves_raw_return_value_untouched() -> None:
    executor = _ScriptedExecutor(response={"Name": "_Node_0"})
    client = ServiceFabricClient(request_executor=executor, validation_mode="strict")
    try:
        raw = client.nodes.get("_Node_0")
    finally:
        client.close()

    assert raw == {"Name": "_Node_0"}


def test_typed_facade_exposes_nested_groups() -> None:
    executor = _ScriptedExecutor(response={"items": [], "continuationToken": None})
    client = ServiceFabricClient(request_executor=executor)
    try:
        page = client.typed.mesh.secrets.list()
        with pytest.raises(AttributeError):
            client.typed.nodes.not_an_operation  # noqa: B018
        with pytest.raises(AttributeError):
            client.typed.unknown_group  # noqa: B018
    finally:
        client.close()

    assert page.items == []
    assert "secrets" in dir(client.typed.mesh)


def test_parse_response_for_operation() -> None:
    payload = {
        "ServiceKind": "Stateful",
        "ServiceName": "fabric:/Voting/VotingData",
        "ServiceTypeName": "VotingDataType",
        "PartitionDescription": {"PartitionScheme": "Singleton"},
        "TargetReplicaSetSize": 3,
        "MinReplicaSetSize": 2,
        "HasPersistedState": True,
    }

    assert TYPED_OPERATION_CONTRACTS["services.get_description"].response_model is not None
    parsed = parse_response_for_operation("services.get_description", payload)

    assert isinstance(parsed, StatefulServiceDescription)
    with pytest.raises(ValueError, match="no typed contract"):
        parse_response_for_operation("nodes.teleport", {})


@pytest.mark.asyncio
async def test_async_typed_call_parses_response_model() -> None:
    executor = _AsyncScriptedExecutor(response={"Version": "10.1.1.0"})
    client = AsyncServiceFabricClient(request_executor=executor)
    try:
        version = await client.typed.cluster.get_version()
    finally:
        await client.close()

    assert isinstance(version, ClusterVersion)
    assert version.version == "10.1.1.0"


def test_strict_validation_failure_is_not_retried() -> None:
    executor = _ScriptedExecutor(response={"Name": "_Node_0", "IsSeedNode": "maybe"})
    client = ServiceFabricClient(
        request_executor=executor,
        validation_mode="strict",
        retry_policy=ExponentialBackoff(initial_delay_seconds=0.0),
    )
    try:
        with pytest.raises(TypedModelValidationError):
            client.nodes.get("_Node_0")
    finally:
        client.close()

    assert len(executor.calls) == 1
