from __future__ import annotations

import pytest

from servicefabric.errors import (
    ApiError,
    AuthError,
    ConflictError,
    GatewayTimeoutError,
    NotFoundError,
    PayloadTooLargeError,
    RequestDetails,
    ServerError,
    ServiceUnavailableError,
    ValidationError,
    classify_api_error,
)
from servicefabric.models import FabricErrorCodes, expected_status


def _details(status: int, body: object = None) -> RequestDetails:
    return RequestDetails(operation="nodes.get", method="GET", path="/Nodes/n", status_code=status, response_body=body)


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (400, ValidationError),
        (401, AuthError),
        (403, AuthError),
        (404, NotFoundError),
        (409, ConflictError),
        (413, PayloadTooLargeError),
        (500, ServerError),
        (503, ServiceUnavailableError),
        (504, GatewayTimeoutError),
        (418, ApiError),
    ],
)
def test_classify_api_error_by_status(status: int, expected: type[ApiError]) -> None:
    error = classify_api_error(_details(status))
    assert type(error) is expected
    assert error.status_code == status


def test_only_unavailable_and_gateway_timeout_are_retryable() -> None:
    assert classify_api_error(_details(503)).retryable is True
    assert classify_api_error(_details(504)).retryable is True
    assert classify_api_error(_details(500)).retryable is False
    assert classify_api_error(_details(409)).retryable is False


def test_mesh_lowercase_error_envelope() -> None:
    error = classify_api_error(_details(404, {"error": {"code": "FABRIC_E_APPLICATION_NOT_FOUND", "message": "gone"}}))

    assert error.code == "FABRIC_E_APPLICATION_NOT_FOUND"
    assert error.error_message == "gone"
    assert error.fabric_error is not None
    assert error.fabric_error.code == FabricErrorCodes.FABRIC_E_APPLICATION_NOT_FOUND


def test_non_envelope_bodies_are_kept_verbatim() -> None:
    error = classify_api_error(_details(500, "<html>gateway</html>"))

    assert error.details.response_body == "<html>gateway</html>"
    assert error.code is None
    assert error.fabric_error is None


def test_unknown_error_codes_parse_as_open_values() -> None:
    error = classify_api_error(_details(400, {"Error": {"Code": "FABRIC_E_SOMETHING_NEW", "Message": "?"}}))

    assert error.fabric_error is not None
    assert error.fabric_error.code == "FABRIC_E_SOMETHING_NEW"
    assert error.fabric_error.code.is_known is False


def test_documented_error_codes_map_to_statuses() -> None:
    assert expected_status("FABRIC_E_NODE_NOT_FOUND") == 404
    assert expected_status(FabricErrorCodes.FABRIC_E_VALUE_TOO_LARGE) == 413
    assert expected_status("FABRIC_E_SERVICE_OFFLINE") == 503
    assert expected_status(FabricErrorCodes.FABRIC_E_TIMEOUT) == 504
    assert expected_status("FABRIC_E_SOMETHING_NEW") is None
