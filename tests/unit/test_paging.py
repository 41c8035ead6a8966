from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import pytest

from servicefabric import AsyncServiceFabricClient, ServiceFabricClient
from servicefabric.errors import PaginationError, RequestDetails, ServerError
from servicefabric.models import PagedNodeInfoList, PagedPropertyInfoList, PagedSecretResourceDescriptionList
from servicefabric.paging import acollect_all, collect_all, iter_pages, page_items, page_token
from servicefabric.protocols import PageFetcher


@dataclass
class _PagedExecutor:
    pages: dict[str | None, Any]
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return self.pages[kwargs["query"].get("ContinuationToken")]


@dataclass
class _AsyncPagedExecutor(_PagedExecutor):
    async def request(self, **kwargs: Any) -> Any:  # type: ignore[override]
        self.calls.append(dict(kwargs))
        return self.pages[kwargs["query"].get("ContinuationToken")]


_NODE_PAGES: dict[str | None, Any] = {
    None: {"ContinuationToken": "page-2", "Items": [{"Name": "_Node_0"}, {"Name": "_Node_1"}]},
    "page-2": {"ContinuationToken": "page-3", "Items": []},
    "page-3": {"ContinuationToken": "", "Items": [{"Name": "_Node_2"}]},
}


def test_empty_paged_node_list_has_no_more_pages() -> None:
    page = PagedNodeInfoList.model_validate({"ContinuationToken": "", "Items": []})

    assert page.items == []
    assert page.has_more is False
    assert page_items(page) == []
    assert page_token(page) is None


def test_paged_lists_accept_missing_fields_and_camel_case_mesh_pages() -> None:
    assert PagedNodeInfoList.model_validate({}).items == []

    mesh = PagedSecretResourceDescriptionList.model_validate(
        {"continuationToken": "next", "items": [{"name": "pw", "properties": {"kind": "inlinedValue"}}]}
    )
    assert mesh.has_more is True
    assert page_token(mesh) == "next"
    assert len(page_items(mesh)) == 1


def test_property_pages_expose_items() -> None:
    page = PagedPropertyInfoList.model_validate(
        {"ContinuationToken": "", "IsConsistent": True, "Properties": [{"Name": "a"}]}
    )
    assert [prop.name for prop in page_items(page)] == ["a"]
    assert page_items({"IsConsistent": True, "SubNames": ["fabric:/a/b"]}) == ["fabric:/a/b"]


def test_collect_all_follows_continuation_tokens(caplog: pytest.LogCaptureFixture) -> None:
    executor = _PagedExecutor(dict(_NODE_PAGES))
    client = ServiceFabricClient(request_executor=executor)
    caplog.set_level(logging.DEBUG, logger="servicefabric.paging")
    try:
        nodes = collect_all(client.nodes.list, max_results=2)
    finally:
        client.close()

    assert [node["Name"] for node in nodes] == ["_Node_0", "_Node_1", "_Node_2"]
    assert [call["query"].get("ContinuationToken") for call in executor.calls] == [None, "page-2", "page-3"]
    assert all(call["query"]["MaxResults"] == 2 for call in executor.calls)
    assert "pagination complete after 3 pages" in caplog.text


def test_client_paginate_iterates_items() -> None:
    executor = _PagedExecutor(dict(_NODE_PAGES))
    client = ServiceFabricClient(request_executor=executor)
    try:
        names = [node["Name"] for node in client.paginate(client.nodes.list)]
    finally:
        client.close()

    assert names == ["_Node_0", "_Node_1", "_Node_2"]
    assert isinstance(client.nodes.list, PageFetcher)


def test_typed_pages_are_followed() -> None:
    executor = _PagedExecutor(dict(_NODE_PAGES))
    client = ServiceFabricClient(request_executor=executor)
    try:
        pages = list(iter_pages(client.typed.nodes.list))
    finally:
        client.close()

    assert all(isinstance(page, PagedNodeInfoList) for page in pages)
    assert [node.name for page in pages for node in page.items] == ["_Node_0", "_Node_1", "_Node_2"]


def test_failures_are_wrapped_with_the_page_number() -> None:
    def fetch_page(*, continuation_token: str | None = None) -> Any:
        if continuation_token is None:
            return {"ContinuationToken": "t1", "Items": [1]}
        raise ServerError("boom", details=RequestDetails(operation="nodes.list", method="GET", path="/Nodes", status_code=500))

    with pytest.raises(PaginationError) as raised:
        collect_all(fetch_page)

    assert raised.value.page == 2
    assert isinstance(raised.value.__cause__, ServerError)


def test_repeated_continuation_token_is_rejected() -> None:
    def fetch_page(*, continuation_token: str | None = None) -> Any:
        return {"ContinuationToken": "same", "Items": [1]}

    with pytest.raises(PaginationError, match="repeated"):
        collect_all(fetch_page)


@pytest.mark.asyncio
async def test_async_collect_all() -> None:
    executor = _AsyncPagedExecutor(dict(_NODE_PAGES))
    client = AsyncServiceFabricClient(request_executor=executor)
    try:
        nodes = await acollect_all(client.nodes.list)
        streamed = [node async for node in client.paginate(client.nodes.list)]
    finally:
        await client.close()

    assert [node["Name"] for node in nodes] == ["_Node_0", "_Node_1", "_Node_2"]
    assert streamed == nodes
