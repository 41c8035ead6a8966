from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum

import pydantic
import pytest
from pydantic import TypeAdapter

from servicefabric.models import (
    POLYMORPHIC_TYPES,
    BackupStorageKind,
    ChaosEventKind,
    FabricEventKind,
    HealthEvaluationKind,
    HealthState,
    HealthStateFilter,
    MonitoringPolicyDescription,
    NodeInfo,
    PartitionScheme,
    PropertyBatchOperationKind,
    PropertyValueKind,
    SafetyCheckKind,
    ServiceDescription,
    ServiceDescriptionUnion,
    ServiceKind,
    ServicePlacementPolicyType,
    SingletonPartitionSchemeDescription,
    StatefulServiceDescription,
    StatelessServiceDescription,
    datetime_to_file_time,
    format_iso_duration,
    parse_fabric_duration,
    to_wire,
)

_STATEFUL_PAYLOAD = {
    "ServiceKind": "Stateful",
    "ServiceName": "fabric:/Voting/VotingData",
    "ServiceTypeName": "VotingDataType",
    "PartitionDescription": {"PartitionScheme": "Singleton"},
    "TargetReplicaSetSize": 3,
    "MinReplicaSetSize": 2,
    "HasPersistedState": True,
}


@pytest.mark.parametrize(
    ("union_name", "kind_enum"),
    [
        ("ServiceDescription", ServiceKind),
        ("HealthEvaluation", HealthEvaluationKind),
        ("PartitionSchemeDescription", PartitionScheme),
        ("BackupStorageDescription", BackupStorageKind),
        ("PropertyValue", PropertyValueKind),
        ("PropertyBatchOperation", PropertyBatchOperationKind),
        ("SafetyCheck", SafetyCheckKind),
        ("ChaosEvent", ChaosEventKind),
        ("ServicePlacementPolicyDescription", ServicePlacementPolicyType),
        ("FabricEvent", FabricEventKind),
    ],
)
def test_union_variants_cover_every_known_kind(union_name: str, kind_enum: type[Enum]) -> None:
    registered = POLYMORPHIC_TYPES[union_name]
    expected = set(kind_enum.known_values()) - {"Invalid"}  # type: ignore[attr-defined]

    assert set(registered.variants) == expected
    for literal, variant in registered.variants.items():
        assert issubclass(variant, registered.base)
        assert variant.model_fields[registered.field].default == literal


def test_union_discriminator_uses_wire_name() -> None:
    assert POLYMORPHIC_TYPES["ServiceDescription"].wire_name == "ServiceKind"
    assert POLYMORPHIC_TYPES["FabricEvent"].wire_name == "Kind"


def test_stateful_payload_selects_stateful_variant() -> None:
    parsed = TypeAdapter(ServiceDescriptionUnion).validate_python(_STATEFUL_PAYLOAD)

    assert isinstance(parsed, StatefulServiceDescription)
    assert parsed.target_replica_set_size == 3
    assert parsed.has_persisted_state is True
    assert isinstance(parsed.partition_description, SingletonPartitionSchemeDescription)


def test_stateful_payload_is_not_a_stateless_description() -> None:
    with pytest.raises(pydantic.ValidationError) as raised:
        StatelessServiceDescription.model_validate(_STATEFUL_PAYLOAD)

    locations = {error["loc"][0] for error in raised.value.errors()}
    assert "InstanceCount" in locations


def test_stateless_payload_selects_stateless_variant() -> None:
    payload = {
        "ServiceKind": "Stateless",
        "ServiceName": "fabric:/Voting/VotingWeb",
        "ServiceTypeName": "VotingWebType",
        "PartitionDescription": {"PartitionScheme": "Singleton"},
        "InstanceCount": -1,
    }

    parsed = TypeAdapter(ServiceDescriptionUnion).validate_python(payload)

    assert isinstance(parsed, StatelessServiceDescription)
    assert parsed.instance_count == -1


def test_unknown_kind_falls_back_to_base_model() -> None:
    payload = dict(_STATEFUL_PAYLOAD, ServiceKind="Preview")

    parsed = TypeAdapter(ServiceDescriptionUnion).validate_python(payload)

    assert type(parsed) is ServiceDescription
    assert parsed.service_kind == "Preview"


def test_variant_serializes_its_discriminator() -> None:
    description = StatelessServiceDescription(
        service_name="fabric:/Voting/VotingWeb",
        service_type_name="VotingWebType",
        partition_description=SingletonPartitionSchemeDescription(),
        instance_count=1,
    )

    wire = to_wire(description)

    assert wire["ServiceKind"] == "Stateless"
    assert wire["PartitionDescription"] == {"PartitionScheme": "Singleton"}
    assert wire["InstanceCount"] == 1
    assert "MinInstanceCount" not in wire


def test_open_enum_accepts_unknown_values() -> None:
    known = HealthState("Ok")
    unknown = HealthState("Degraded")

    assert known is HealthState.OK
    assert known.is_known is True
    assert unknown.is_known is False
    assert unknown.value == "Degraded"
    assert str(unknown) == "Degraded"
    assert "Degraded" not in HealthState.known_values()


def test_models_keep_unknown_enum_values() -> None:
    node = NodeInfo.model_validate({"Name": "_Node_0", "HealthState": "Degraded", "NodeStatus": "Up"})

    assert node.health_state is not None
    assert node.health_state.value == "Degraded"
    assert node.health_state.is_known is False
    assert node.node_status is not None and node.node_status.is_known


def test_health_state_filter_combines_as_bitmask() -> None:
    combined = HealthStateFilter.WARNING | HealthStateFilter.ERROR

    assert int(combined) == 12
    assert int(HealthStateFilter.DEFAULT) == 0
    assert int(HealthStateFilter.ALL) == 65535
    assert HealthStateFilter.ERROR in combined
    assert HealthStateFilter.OK not in combined


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("PT1H30M", timedelta(hours=1, minutes=30)),
        ("P1DT2H", timedelta(days=1, hours=2)),
        ("PT0.5S", timedelta(milliseconds=500)),
        ("5000", timedelta(seconds=5)),
        (250, timedelta(milliseconds=250)),
        (timedelta(minutes=2), timedelta(minutes=2)),
    ],
)
def test_parse_fabric_duration(raw: object, expected: timedelta) -> None:
    assert parse_fabric_duration(raw) == expected


@pytest.mark.parametrize("raw", ["soon", "P", "PT", True, 1.5])
def test_parse_fabric_duration_rejects_invalid_values(raw: object) -> None:
    with pytest.raises(ValueError):
        parse_fabric_duration(raw)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (timedelta(0), "PT0S"),
        (timedelta(hours=1, minutes=30), "PT1H30M"),
        (timedelta(days=1, hours=2), "P1DT2H"),
        (timedelta(seconds=1, milliseconds=500), "PT1.500S"),
        (timedelta(days=3), "P3D"),
        (-timedelta(minutes=5), "-PT5M"),
    ],
)
def test_format_iso_duration(value: timedelta, expected: str) -> None:
    assert format_iso_duration(value) == expected


def test_duration_fields_accept_milliseconds_and_emit_iso() -> None:
    policy = MonitoringPolicyDescription(
        health_check_wait_duration_in_milliseconds="30000",
        upgrade_timeout_in_milliseconds="PT2H",
    )

    assert policy.health_check_wait_duration_in_milliseconds == timedelta(seconds=30)
    assert to_wire(policy) == {
        "HealthCheckWaitDurationInMilliseconds": "PT30S",
        "UpgradeTimeoutInMilliseconds": "PT2H",
    }


def test_datetime_to_file_time() -> None:
    assert datetime_to_file_time(datetime(1601, 1, 1, tzinfo=timezone.utc)) == 0
    assert datetime_to_file_time(datetime(1970, 1, 1)) == 116444736000000000
    assert datetime_to_file_time(datetime(1970, 1, 1, 0, 0, 1, 5, tzinfo=timezone.utc)) == 116444736010000050


def test_to_wire_walks_nested_mappings_and_lists() -> None:
    body = {
        "Policy": MonitoringPolicyDescription(health_check_retry_timeout_in_milliseconds=600000),
        "Nodes": [NodeInfo(name="_Node_0")],
        "Plain": 1,
    }

    assert to_wire(body) == {
        "Policy": {"HealthCheckRetryTimeoutInMilliseconds": "PT10M"},
        "Nodes": [{"Name": "_Node_0"}],
        "Plain": 1,
    }
