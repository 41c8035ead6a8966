from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from servicefabric import ServiceFabricClient, entity_id
from servicefabric.models import (
    CheckExistsPropertyBatchOperation,
    FabricEventKind,
    PutPropertyBatchOperation,
    StringPropertyValue,
)


@dataclass
class _RecordingExecutor:
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return None


def _client(executor: _RecordingExecutor) -> ServiceFabricClient:
    return ServiceFabricClient(request_executor=executor)


def test_entity_id_strips_scheme_and_joins_segments() -> None:
    assert entity_id("fabric:/Voting") == "Voting"
    assert entity_id("fabric:/Voting/VotingData") == "Voting~VotingData"
    assert entity_id("Voting~VotingData") == "Voting~VotingData"


def test_hierarchical_names_are_encoded_in_paths() -> None:
    executor = _RecordingExecutor()
    client = _client(executor)
    try:
        client.services.get("fabric:/Voting", "fabric:/Voting/VotingData")
        client.properties.get("fabric:/Voting/config", "ConnectionString")
    finally:
        client.close()

    assert executor.calls[0]["path"] == "/Applications/Voting/$/GetServices/Voting~VotingData"
    assert executor.calls[1]["path"] == "/Names/Voting~config/$/GetProperty"
    assert executor.calls[1]["query"]["PropertyName"] == "ConnectionString"


def test_chaos_event_window_is_sent_as_file_time() -> None:
    executor = _RecordingExecutor()
    client = _client(executor)
    try:
        client.chaos.get_events(
            start_time_utc=datetime(1970, 1, 1, tzinfo=timezone.utc),
            end_time_utc=116444736000000001,
            max_results=10,
        )
    finally:
        client.close()

    query = executor.calls[0]["query"]
    assert query["api-version"] == "6.2"
    assert query["StartTimeUtc"] == 116444736000000000
    assert query["EndTimeUtc"] == 116444736000000001
    assert query["MaxResults"] == 10


def test_event_kinds_are_joined_into_a_filter() -> None:
    executor = _RecordingExecutor()
    client = _client(executor)
    try:
        client.events.get_node_event_list(
            "_Node_0",
            "2024-05-01T00:00:00Z",
            "2024-05-02T00:00:00Z",
            events_types_filter=[FabricEventKind.NODE_DOWN, "NodeUp"],
        )
        client.events.get_cluster_event_list(
            "2024-05-01T00:00:00Z",
            "2024-05-02T00:00:00Z",
            events_types_filter="NodeDown",
        )
    finally:
        client.close()

    first, second = executor.calls
    assert first["path"] == "/EventsStore/Nodes/_Node_0/$/Events"
    assert first["query"]["api-version"] == "6.4"
    assert first["query"]["EventsTypesFilter"] == "NodeDown,NodeUp"
    assert second["query"]["EventsTypesFilter"] == "NodeDown"


def test_property_batch_list_is_wrapped_and_conflict_is_allowed() -> None:
    executor = _RecordingExecutor()
    client = _client(executor)
    try:
        client.properties.submit_batch(
            "fabric:/Voting/config",
            [
                CheckExistsPropertyBatchOperation(property_name="Lock", exists=False),
                PutPropertyBatchOperation(property_name="Lock", value=StringPropertyValue(data="owner-1")),
            ],
        )
    finally:
        client.close()

    call = executor.calls[0]
    assert call["path"] == "/Names/Voting~config/$/GetProperties/$/SubmitBatch"
    assert call["allow_statuses"] == (200, 409)
    assert call["json_body"] == {
        "Operations": [
            {"Kind": "CheckExists", "PropertyName": "Lock", "Exists": False},
            {"Kind": "Put", "PropertyName": "Lock", "Value": {"Kind": "String", "Data": "owner-1"}},
        ]
    }
