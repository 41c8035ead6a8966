"""Image store content, copy, upload sessions and chunked uploads."""

from __future__ import annotations

import io
import logging
import os
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, BinaryIO

from ..errors import ServiceFabricError, UploadError
from ._common import Body, RequestFn, _store_path

logger = logging.getLogger(__name__)

SINGLE_REQUEST_UPLOAD_LIMIT = 2 * 1024 * 1024
UPLOAD_CHUNK_SIZE = 4 * 1024 * 1024

_OCTET_STREAM = {"Content-Type": "application/octet-stream"}


def chunk_ranges(total_size: int, chunk_size: int = UPLOAD_CHUNK_SIZE) -> Iterator[tuple[int, int]]:
    """Yield inclusive ``(start, end)`` byte offsets covering ``total_size`` bytes."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    for start in range(0, total_size, chunk_size):
        yield start, min(start + chunk_size, total_size) - 1


def content_range(start: int, end: int, total_size: int) -> str:
    return f"bytes {start}-{end}/{total_size}"


class _ImageStoreOperations:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get_root_content(self, *, timeout: int | None = None) -> Any:
        return self._request("image_store.get_root_content", "GET", "/ImageStore", timeout=timeout)

    def get_content(self, content_path: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.get_content", "GET", f"/ImageStore/{_store_path(content_path)}", timeout=timeout
        )

    def delete_content(self, content_path: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.delete_content", "DELETE", f"/ImageStore/{_store_path(content_path)}", timeout=timeout
        )

    def upload_file(self, content_path: str, data: bytes, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.upload_file",
            "PUT",
            f"/ImageStore/{_store_path(content_path)}",
            content=bytes(data),
            headers=dict(_OCTET_STREAM),
            timeout=timeout,
        )

    def copy_content(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request("image_store.copy_content", "POST", "/ImageStore/$/Copy", json_body=body, timeout=timeout)

    def get_upload_session_by_id(self, session_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.get_upload_session_by_id",
            "GET",
            "/ImageStore/$/GetUploadSession",
            query={"session-id": session_id},
            timeout=timeout,
        )

    def get_upload_session_by_path(self, content_path: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.get_upload_session_by_path",
            "GET",
            f"/ImageStore/{_store_path(content_path)}/$/GetUploadSession",
            timeout=timeout,
        )

    def upload_chunk(
        self,
        content_path: str,
        session_id: str,
        data: bytes,
        start: int,
        end: int,
        total_size: int,
        *,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "image_store.upload_chunk",
            "PUT",
            f"/ImageStore/{_store_path(content_path)}/$/UploadChunk",
            query={"session-id": session_id},
            content=bytes(data),
            headers={**_OCTET_STREAM, "Content-Range": content_range(start, end, total_size)},
            timeout=timeout,
        )

    def commit_upload_session(self, session_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.commit_upload_session",
            "POST",
            "/ImageStore/$/CommitUploadSession",
            query={"session-id": session_id},
            timeout=timeout,
        )

    def delete_upload_session(self, session_id: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.delete_upload_session",
            "DELETE",
            "/ImageStore/$/DeleteUploadSession",
            query={"session-id": session_id},
            timeout=timeout,
        )

    def get_root_folder_size(self, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.get_root_folder_size", "GET", "/ImageStore/$/FolderSize", api_version="6.5", timeout=timeout
        )

    def get_folder_size(self, content_path: str, *, timeout: int | None = None) -> Any:
        return self._request(
            "image_store.get_folder_size",
            "GET",
            f"/ImageStore/{_store_path(content_path)}/$/FolderSize",
            api_version="6.5",
            timeout=timeout,
        )

    def get_info(self, *, timeout: int | None = None) -> Any:
        return self._request("image_store.get_info", "GET", "/ImageStore/$/Info", api_version="6.5", timeout=timeout)


UploadSource = bytes | bytearray | memoryview | str | os.PathLike | BinaryIO


@contextmanager
def _open_upload_source(source: UploadSource) -> Iterator[tuple[BinaryIO, int]]:
    """Yield a binary handle positioned at the payload and the payload size.

    Paths are opened here and closed on exit. File objects are read from their
    current position and left open.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        yield io.BytesIO(source), len(source)
        return
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as handle:
            yield handle, os.fstat(handle.fileno()).st_size
        return
    origin = source.tell()
    total = source.seek(0, io.SEEK_END) - origin
    source.seek(origin)
    yield source, total


def _read_chunk(handle: BinaryIO, size: int) -> bytes:
    data = handle.read(size)
    if len(data) != size:
        raise UploadError(f"upload source ended after {len(data)} of {size} expected bytes")
    return data


class ImageStoreApi(_ImageStoreOperations):
    def upload(
        self,
        content_path: str,
        data: UploadSource,
        *,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
        session_id: str | None = None,
        timeout: int | None = None,
    ) -> str | None:
        """Upload ``data`` to ``content_path`` and return the upload session id, if one was used.

        ``data`` is bytes, a file path or a binary file object; files are read
        one chunk at a time. Payloads up to 2 MiB go up in a single PUT.
        Larger ones are sent as ranged chunks within an upload session that is
        committed at the end. If any step fails the session is deleted, and
        cluster or transport failures are raised as :class:`UploadError`.
        """
        with _open_upload_source(data) as (handle, total):
            if total <= SINGLE_REQUEST_UPLOAD_LIMIT:
                self.upload_file(content_path, _read_chunk(handle, total), timeout=timeout)
                return None

            session = session_id or str(uuid.uuid4())
            chunks = 0
            try:
                for start, end in chunk_ranges(total, chunk_size):
                    chunk = _read_chunk(handle, end - start + 1)
                    self.upload_chunk(content_path, session, chunk, start, end, total, timeout=timeout)
                    chunks += 1
                self.commit_upload_session(session, timeout=timeout)
            except Exception as error:
                try:
                    self.delete_upload_session(session, timeout=timeout)
                except Exception:
                    logger.warning("could not delete upload session %s", session, exc_info=True)
                if isinstance(error, ServiceFabricError):
                    raise UploadError(
                        f"upload to {content_path!r} failed after {chunks} chunk(s)", session_id=session
                    ) from error
                raise

        logger.info("uploaded %d bytes to %s in %d chunk(s)", total, content_path, chunks)
        return session


class AsyncImageStoreApi(_ImageStoreOperations):
    async def upload(
        self,
        content_path: str,
        data: UploadSource,
        *,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
        session_id: str | None = None,
        timeout: int | None = None,
    ) -> str | None:
        with _open_upload_source(data) as (handle, total):
            if total <= SINGLE_REQUEST_UPLOAD_LIMIT:
                await self.upload_file(content_path, _read_chunk(handle, total), timeout=timeout)
                return None

            session = session_id or str(uuid.uuid4())
            chunks = 0
            try:
                for start, end in chunk_ranges(total, chunk_size):
                    chunk = _read_chunk(handle, end - start + 1)
                    await self.upload_chunk(content_path, session, chunk, start, end, total, timeout=timeout)
                    chunks += 1
                await self.commit_upload_session(session, timeout=timeout)
            except Exception as error:
                try:
                    await self.delete_upload_session(session, timeout=timeout)
                except Exception:
                    logger.warning("could not delete upload session %s", session, exc_info=True)
                if isinstance(error, ServiceFabricError):
                    raise UploadError(
                        f"upload to {content_path!r} failed after {chunks} chunk(s)", session_id=session
                    ) from error
                raise

        logger.info("uploaded %d bytes to %s in %d chunk(s)", total, content_path, chunks)
        return session
