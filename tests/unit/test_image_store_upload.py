from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from servicefabric import AsyncServiceFabricClient, ServiceFabricClient
from servicefabric.api.image_store import SINGLE_REQUEST_UPLOAD_LIMIT, chunk_ranges, content_range
from servicefabric.errors import TransportError, UploadError

_MIB = 1024 * 1024


@dataclass
class _UploadExecutor:
    fail_on_chunk: int | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        chunk_calls = [call for call in self.calls if call["operation"] == "image_store.upload_chunk"]
        if kwargs["operation"] == "image_store.upload_chunk" and len(chunk_calls) == self.fail_on_chunk:
            raise TransportError("connection reset")
        return None


@dataclass
class _AsyncUploadExecutor:
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def request(self, **kwargs: Any) -> Any:
        self.calls.append(dict(kwargs))
        return None


def test_chunk_ranges_cover_payload() -> None:
    assert list(chunk_ranges(10, 4)) == [(0, 3), (4, 7), (8, 9)]
    assert list(chunk_ranges(8, 4)) == [(0, 3), (4, 7)]
    assert list(chunk_ranges(0, 4)) == []
    assert content_range(4, 7, 10) == "bytes 4-7/10"
    with pytest.raises(ValueError):
        list(chunk_ranges(10, 0))


def test_small_payload_is_uploaded_in_one_request() -> None:
    executor = _UploadExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        session = client.image_store.upload("apps/Voting/ApplicationManifest.xml", b"<manifest/>")
    finally:
        client.close()

    assert session is None
    assert len(executor.calls) == 1
    call = executor.calls[0]
    assert call["operation"] == "image_store.upload_file"
    assert call["method"] == "PUT"
    assert call["path"] == "/ImageStore/apps/Voting/ApplicationManifest.xml"
    assert call["content"] == b"<manifest/>"


def test_large_payload_is_uploaded_in_ranged_chunks(caplog: pytest.LogCaptureFixture) -> None:
    data = bytes(SINGLE_REQUEST_UPLOAD_LIMIT + 10)
    executor = _UploadExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        with caplog.at_level(logging.INFO, logger="servicefabric.api.image_store"):
            session = client.image_store.upload("apps/Voting/Code.zip", data, chunk_size=_MIB, session_id="s-1")
    finally:
        client.close()

    assert session == "s-1"
    operations = [call["operation"] for call in executor.calls]
    assert operations == [
        "image_store.upload_chunk",
        "image_store.upload_chunk",
        "image_store.upload_chunk",
        "image_store.commit_upload_session",
    ]

    chunk_calls = executor.calls[:3]
    total = len(data)
    assert [call["headers"]["Content-Range"] for call in chunk_calls] == [
        f"bytes 0-{_MIB - 1}/{total}",
        f"bytes {_MIB}-{2 * _MIB - 1}/{total}",
        f"bytes {2 * _MIB}-{total - 1}/{total}",
    ]
    assert [len(call["content"]) for call in chunk_calls] == [_MIB, _MIB, 10]
    assert all(call["path"] == "/ImageStore/apps/Voting/Code.zip/$/UploadChunk" for call in chunk_calls)
    assert all(call["query"]["session-id"] == "s-1" for call in executor.calls)
    assert executor.calls[3]["path"] == "/ImageStore/$/CommitUploadSession"
    assert "in 3 chunk(s)" in caplog.text


def test_generated_session_id_is_returned() -> None:
    executor = _UploadExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        session = client.image_store.upload("apps/Voting/Code.zip", bytes(SINGLE_REQUEST_UPLOAD_LIMIT + 1))
    finally:
        client.close()

    assert session
    assert executor.calls[0]["query"]["session-id"] == session


def test_failed_chunk_deletes_session_and_raises() -> None:
    executor = _UploadExecutor(fail_on_chunk=2)
    client = ServiceFabricClient(request_executor=executor)
    try:
        with pytest.raises(UploadError) as raised:
            client.image_store.upload(
                "apps/Voting/Code.zip",
                bytes(SINGLE_REQUEST_UPLOAD_LIMIT + 10),
                chunk_size=_MIB,
                session_id="s-2",
            )
    finally:
        client.close()

    assert raised.value.session_id == "s-2"
    assert isinstance(raised.value.__cause__, TransportError)
    assert "after 1 chunk(s)" in str(raised.value)
    operations = [call["operation"] for call in executor.calls]
    assert operations[-1] == "image_store.delete_upload_session"
    assert "image_store.commit_upload_session" not in operations
    assert executor.calls[-1]["method"] == "DELETE"
    assert executor.calls[-1]["query"]["session-id"] == "s-2"


@pytest.mark.asyncio
async def test_async_upload_commits_session() -> None:
    executor = _AsyncUploadExecutor()
    client = AsyncServiceFabricClient(request_executor=executor)
    try:
        session = await client.image_store.upload(
            "apps/Voting/Code.zip",
            bytes(SINGLE_REQUEST_UPLOAD_LIMIT + 1),
            chunk_size=_MIB,
            session_id="s-3",
        )
    finally:
        await client.close()

    assert session == "s-3"
    operations = [call["operation"] for call in executor.calls]
    assert operations == [
        "image_store.upload_chunk",
        "image_store.upload_chunk",
        "image_store.upload_chunk",
        "image_store.commit_upload_session",
    ]


def test_payload_at_the_limit_is_uploaded_in_one_request() -> None:
    executor = _UploadExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        session = client.image_store.upload("apps/Voting/Code.zip", b"x" * SINGLE_REQUEST_UPLOAD_LIMIT)
    finally:
        client.close()

    assert session is None
    assert [call["operation"] for call in executor.calls] == ["image_store.upload_file"]
    assert len(executor.calls[0]["content"]) == SINGLE_REQUEST_UPLOAD_LIMIT


def test_package_file_is_read_chunk_by_chunk(tmp_path: Path) -> None:
    package = tmp_path / "Code.zip"
    package.write_bytes(b"a" * _MIB + b"b" * _MIB + b"c" * (SINGLE_REQUEST_UPLOAD_LIMIT - 2 * _MIB + 5))
    executor = _UploadExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        client.image_store.upload("apps/Voting/Code.zip", package, chunk_size=_MIB, session_id="s-4")
        client.image_store.upload("apps/Voting/Manifest.xml", str(tmp_path / "Code.zip"), chunk_size=_MIB)
    finally:
        client.close()

    chunks = [call["content"] for call in executor.calls[:3]]
    assert chunks == [b"a" * _MIB, b"b" * _MIB, b"c" * 5]
    assert executor.calls[3]["operation"] == "image_store.commit_upload_session"
    assert executor.calls[-1]["operation"] == "image_store.commit_upload_session"


def test_file_object_is_uploaded_from_its_current_position() -> None:
    handle = io.BytesIO(b"header" + b"<ApplicationManifest/>")
    handle.seek(len(b"header"))
    executor = _UploadExecutor()
    client = ServiceFabricClient(request_executor=executor)
    try:
        client.image_store.upload("apps/Voting/ApplicationManifest.xml", handle)
    finally:
        client.close()

    assert executor.calls[0]["content"] == b"<ApplicationManifest/>"
    assert not handle.closed


def test_hook_failure_mid_upload_still_deletes_the_session() -> None:
    executor = _UploadExecutor()
    client = ServiceFabricClient(request_executor=executor)

    @client.after("image_store.upload_chunk")
    def reject_second_chunk(call: Any, _response: Any) -> None:
        if call.headers["Content-Range"].startswith(f"bytes {_MIB}-"):
            raise RuntimeError("quota exceeded")

    try:
        with pytest.raises(RuntimeError, match="quota exceeded"):
            client.image_store.upload(
                "apps/Voting/Code.zip",
                bytes(SINGLE_REQUEST_UPLOAD_LIMIT + 10),
                chunk_size=_MIB,
                session_id="s-5",
            )
    finally:
        client.close()

    operations = [call["operation"] for call in executor.calls]
    assert operations[-1] == "image_store.delete_upload_session"
    assert "image_store.commit_upload_session" not in operations
