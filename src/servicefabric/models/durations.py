"""Duration values that travel either as ISO-8601 strings or as milliseconds."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

_ISO_DURATION = re.compile(
    r"^(?P<sign>-)?P"
    r"(?:(?P<years>\d+(?:\.\d+)?)Y)?"
    r"(?:(?P<months>\d+(?:\.\d+)?)M)?"
    r"(?:(?P<weeks>\d+(?:\.\d+)?)W)?"
    r"(?:(?P<days>\d+(?:\.\d+)?)D)?"
    r"(?:T"
    r"(?:(?P<hours>\d+(?:\.\d+)?)H)?"
    r"(?:(?P<minutes>\d+(?:\.\d+)?)M)?"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)S)?"
    r")?$",
    re.IGNORECASE,
)


def parse_iso_duration(value: str) -> timedelta | None:
    """Parse an ISO-8601 duration, returning ``None`` when the text is not one.

    Years and months have no fixed length; they are counted as 365 and 30 days.
    """
    text = value.strip()
    match = _ISO_DURATION.match(text)
    if match is None or text.upper() in {"P", "PT"} or text.upper().endswith("T"):
        return None

    parts = {name: float(amount) for name, amount in match.groupdict().items() if amount and name != "sign"}
    if not parts:
        return None

    duration = timedelta(
        days=parts.get("years", 0) * 365 + parts.get("months", 0) * 30 + parts.get("days", 0),
        weeks=parts.get("weeks", 0),
        hours=parts.get("hours", 0),
        minutes=parts.get("minutes", 0),
        seconds=parts.get("seconds", 0),
    )
    return -duration if match.group("sign") else duration


def parse_fabric_duration(value: Any) -> timedelta:
    """Interpret a wire duration: ISO-8601 first, then a whole count of milliseconds."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError("a boolean is not a duration")
    if isinstance(value, int):
        return timedelta(milliseconds=value)
    if isinstance(value, str):
        parsed = parse_iso_duration(value)
        if parsed is not None:
            return parsed
        try:
            return timedelta(milliseconds=int(value.strip()))
        except ValueError:
            pass
    raise ValueError(f"{value!r} is neither an ISO-8601 duration nor a millisecond count")


def format_iso_duration(value: timedelta) -> str:
    """Render a timedelta as an ISO-8601 duration such as ``PT1H30M`` or ``P1DT2H``."""
    total_ms = round(value.total_seconds() * 1000)
    sign = "-" if total_ms < 0 else ""
    total_ms = abs(total_ms)

    days, remainder = divmod(total_ms, 86_400_000)
    hours, remainder = divmod(remainder, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    seconds, millis = divmod(remainder, 1000)

    date_part = f"{days}D" if days else ""
    time_part = ""
    if hours:
        time_part += f"{hours}H"
    if minutes:
        time_part += f"{minutes}M"
    if millis:
        time_part += f"{seconds}.{millis:03d}S"
    elif seconds:
        time_part += f"{seconds}S"

    if not date_part and not time_part:
        return "PT0S"
    return f"{sign}P{date_part}" + (f"T{time_part}" if time_part else "")


FabricDuration = Annotated[
    timedelta,
    BeforeValidator(parse_fabric_duration),
    PlainSerializer(format_iso_duration, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "duration"}),
]
"""A duration accepted as ISO-8601 text or milliseconds, emitted as ISO-8601."""


_FILE_TIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)


def datetime_to_file_time(value: datetime) -> int:
    """Windows file time: 100-nanosecond intervals since 1601-01-01 UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - _FILE_TIME_EPOCH
    return (delta.days * 86_400 + delta.seconds) * 10_000_000 + delta.microseconds * 10
