"""Opt-in retry policy for transient cluster failures.

Nothing retries unless a policy is passed to the client, and even then only
idempotent methods and explicitly listed operations are retried.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ClientTimeoutError, TransportError

DEFAULT_RETRYABLE_STATUSES = frozenset({408, 429, 500, 502, 503, 504})


@dataclass(slots=True)
class ExponentialBackoff:
    max_attempts: int = 3
    initial_delay_seconds: float = 0.1
    multiplier: float = 2.0
    max_delay_seconds: float = 5.0
    retryable_statuses: frozenset[int] = field(default=DEFAULT_RETRYABLE_STATUSES)
    retry_transport_errors: bool = True

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.initial_delay_seconds < 0:
            raise ValueError("initial_delay_seconds must be >= 0")
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")

    def should_retry(self, *, attempt: int, error: Exception | None, status_code: int | None) -> bool:
        if attempt >= self.max_attempts:
            return False
        if status_code is not None:
            return status_code in self.retryable_statuses
        if isinstance(error, (TransportError, ClientTimeoutError)):
            return self.retry_transport_errors
        return False

    def next_delay_seconds(self, *, attempt: int) -> float:
        delay = self.initial_delay_seconds * (self.multiplier ** max(attempt - 1, 0))
        return min(delay, self.max_delay_seconds)
