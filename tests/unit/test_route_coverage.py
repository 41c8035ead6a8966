from __future__ import annotations

import inspect
from typing import Any

import pytest

from servicefabric import AsyncServiceFabricClient, ServiceFabricClient
from servicefabric.typed import OPERATION_IDS, TYPED_OPERATION_CONTRACTS

_GROUPS = (
    "cluster",
    "nodes",
    "application_types",
    "applications",
    "deployed_applications",
    "services",
    "partitions",
    "replicas",
    "faults",
    "repair_tasks",
    "compose",
    "chaos",
    "image_store",
    "backup",
    "properties",
    "events",
    "mesh",
)

# Composite helper built on image_store.upload_file / upload_chunk / commit_upload_session.
_COMPOSITE_OPERATIONS = {"image_store.upload"}


class _NullExecutor:
    def request(self, **kwargs: Any) -> Any:
        return None


def _public_operations(target: Any, prefix: str) -> set[str]:
    found: set[str] = set()
    for name in dir(target):
        if name.startswith("_"):
            continue
        value = getattr(target, name)
        if inspect.ismethod(value):
            found.add(f"{prefix}.{name}")
        elif type(value).__module__.startswith("servicefabric.api"):
            found |= _public_operations(value, f"{prefix}.{name}")
    return found


def _resolve(client: Any, key: str) -> Any:
    target = client
    for part in key.split("."):
        target = getattr(target, part)
    return target


@pytest.fixture
def client() -> Any:
    instance = ServiceFabricClient(request_executor=_NullExecutor())
    try:
        yield instance
    finally:
        instance.close()


def test_every_contract_resolves_to_a_client_method(client: ServiceFabricClient) -> None:
    unresolved = []
    for key in TYPED_OPERATION_CONTRACTS:
        try:
            target = _resolve(client, key)
        except AttributeError:
            unresolved.append(key)
            continue
        if not callable(target):
            unresolved.append(key)

    assert not unresolved, f"contracts without client methods: {sorted(unresolved)}"


def test_every_client_method_has_a_contract(client: ServiceFabricClient) -> None:
    operations: set[str] = set()
    for group in _GROUPS:
        operations |= _public_operations(getattr(client, group), group)

    missing = sorted(operations - set(TYPED_OPERATION_CONTRACTS) - _COMPOSITE_OPERATIONS)

    assert not missing, f"client methods without contracts: {missing}"
    assert _COMPOSITE_OPERATIONS <= operations


@pytest.mark.asyncio
async def test_async_client_exposes_the_same_operations() -> None:
    class _AsyncNullExecutor:
        async def request(self, **kwargs: Any) -> Any:
            return None

    async_client = AsyncServiceFabricClient(request_executor=_AsyncNullExecutor())
    try:
        for key in TYPED_OPERATION_CONTRACTS:
            assert callable(_resolve(async_client, key)), key
        assert inspect.iscoroutinefunction(async_client.image_store.upload)
    finally:
        await async_client.close()


def test_contract_keys_and_operation_ids_are_consistent() -> None:
    assert len(OPERATION_IDS) == len(TYPED_OPERATION_CONTRACTS)
    for key, contract in TYPED_OPERATION_CONTRACTS.items():
        assert contract.operation_key == key
        assert key.split(".", 1)[0] in _GROUPS


def test_operations_report_their_contract_key() -> None:
    class RecordingExecutor:
        def __init__(self) -> None:
            self.operations: list[str] = []

        def request(self, **kwargs: Any) -> Any:
            self.operations.append(kwargs["operation"])
            return None

    executor = RecordingExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        client.mesh.gateways.list()
        client.backup.services.get_configuration_info("fabric:/Voting/VotingData")
        client.backup.policies.list()
        client.image_store.get_root_content()
    finally:
        client.close()

    assert executor.operations == [
        "mesh.gateways.list",
        "backup.services.get_configuration_info",
        "backup.policies.list",
        "image_store.get_root_content",
    ]
    assert all(operation in TYPED_OPERATION_CONTRACTS for operation in executor.operations)
