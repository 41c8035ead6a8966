from __future__ import annotations

import pytest

from servicefabric.errors import ClientTimeoutError, TransportError, ValidationError
from servicefabric.protocols import RetryPolicy
from servicefabric.retry import ExponentialBackoff


def test_backoff_implements_retry_policy_protocol() -> None:
    assert isinstance(ExponentialBackoff(), RetryPolicy)


def test_backoff_delays_grow_and_are_capped() -> None:
    policy = ExponentialBackoff(max_attempts=10)

    assert [policy.next_delay_seconds(attempt=n) for n in (1, 2, 3)] == pytest.approx([0.1, 0.2, 0.4])
    assert policy.next_delay_seconds(attempt=9) == 5.0


@pytest.mark.parametrize("status", [408, 429, 500, 502, 503, 504])
def test_backoff_retries_transient_statuses(status: int) -> None:
    assert ExponentialBackoff().should_retry(attempt=1, error=None, status_code=status) is True


@pytest.mark.parametrize("status", [400, 401, 404, 409, 413])
def test_backoff_does_not_retry_client_errors(status: int) -> None:
    assert ExponentialBackoff().should_retry(attempt=1, error=None, status_code=status) is False


def test_backoff_retries_transport_errors_until_attempts_exhausted() -> None:
    policy = ExponentialBackoff(max_attempts=3)

    assert policy.should_retry(attempt=1, error=TransportError("reset"), status_code=None) is True
    assert policy.should_retry(attempt=2, error=ClientTimeoutError("slow"), status_code=None) is True
    assert policy.should_retry(attempt=3, error=TransportError("reset"), status_code=None) is False
    assert policy.should_retry(attempt=1, error=RuntimeError("bug"), status_code=None) is False


def test_backoff_can_skip_transport_errors() -> None:
    policy = ExponentialBackoff(retry_transport_errors=False)
    assert policy.should_retry(attempt=1, error=TransportError("reset"), status_code=None) is False


def test_backoff_rejects_invalid_settings() -> None:
    with pytest.raises(ValueError):
        ExponentialBackoff(max_attempts=0)
    with pytest.raises(ValueError):
        ExponentialBackoff(multiplier=0.5)


def test_validation_error_is_not_a_transport_error() -> None:
    assert not issubclass(ValidationError, TransportError)
