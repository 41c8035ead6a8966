"""Chaos: start/stop, status, schedule and the event history."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..models.durations import datetime_to_file_time
from ._common import Body, RequestFn

CHAOS_API_VERSION = "6.2"


def _file_time(value: datetime | int | str | None) -> Any:
    # Chaos event ranges are filtered by Windows file time, not ISO timestamps.
    if isinstance(value, datetime):
        return datetime_to_file_time(value)
    return value


class ChaosApi:
    def __init__(self, request: RequestFn) -> None:
        self._request = request

    def get(self, *, timeout: int | None = None) -> Any:
        return self._request("chaos.get", "GET", "/Tools/Chaos", api_version=CHAOS_API_VERSION, timeout=timeout)

    def start(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "chaos.start",
            "POST",
            "/Tools/Chaos/$/Start",
            json_body=body,
            api_version=CHAOS_API_VERSION,
            timeout=timeout,
        )

    def stop(self, *, timeout: int | None = None) -> Any:
        return self._request(
            "chaos.stop", "POST", "/Tools/Chaos/$/Stop", api_version=CHAOS_API_VERSION, timeout=timeout
        )

    def get_events(
        self,
        *,
        continuation_token: str | None = None,
        start_time_utc: datetime | int | str | None = None,
        end_time_utc: datetime | int | str | None = None,
        max_results: int | None = None,
        timeout: int | None = None,
    ) -> Any:
        return self._request(
            "chaos.get_events",
            "GET",
            "/Tools/Chaos/Events",
            query={
                "ContinuationToken": continuation_token,
                "StartTimeUtc": _file_time(start_time_utc),
                "EndTimeUtc": _file_time(end_time_utc),
                "MaxResults": max_results,
            },
            api_version=CHAOS_API_VERSION,
            timeout=timeout,
        )

    def get_schedule(self, *, timeout: int | None = None) -> Any:
        return self._request(
            "chaos.get_schedule", "GET", "/Tools/Chaos/Schedule", api_version=CHAOS_API_VERSION, timeout=timeout
        )

    def post_schedule(self, body: Body, *, timeout: int | None = None) -> Any:
        return self._request(
            "chaos.post_schedule",
            "POST",
            "/Tools/Chaos/Schedule",
            json_body=body,
            api_version=CHAOS_API_VERSION,
            timeout=timeout,
        )
