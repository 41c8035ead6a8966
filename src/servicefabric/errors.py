"""Error hierarchy for the Service Fabric Python client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

RETRYABLE_STATUSES = frozenset({503, 504})


@dataclass(slots=True)
class RequestDetails:
    operation: str
    method: str
    path: str
    status_code: int | None = None
    response_body: Any | None = None


def _error_envelope(body: Any) -> dict[str, Any]:
    # Cluster endpoints answer with {"Error": {"Code", "Message"}}; mesh
    # resources use the lowercase ARM shape {"error": {"code", "message"}}.
    if not isinstance(body, dict):
        return {}
    envelope = body.get("Error", body.get("error"))
    return envelope if isinstance(envelope, dict) else {}


class ServiceFabricError(Exception):
    """Root of every error raised by the Service Fabric clients."""


class TransportError(ServiceFabricError):
    """The gateway could not be reached or the connection broke mid-request."""


class ClientTimeoutError(TransportError):
    """No response arrived within the client-side ``timeout_seconds``."""


class ApiError(ServiceFabricError):
    """Raised when the cluster returns an unexpected HTTP status.

    The response body is kept verbatim in ``details.response_body``; when it is
    a FabricError envelope the error code and message are exposed directly.
    """

    def __init__(self, message: str, *, details: RequestDetails) -> None:
        super().__init__(message)
        self.details = details

    @property
    def status_code(self) -> int | None:
        return self.details.status_code

    @property
    def fabric_error(self) -> Any | None:
        """The parsed ``FabricErrorError`` or ``None`` when the body is not an envelope."""
        from .models.errors import FabricError

        parsed = FabricError.from_body(self.details.response_body)
        return parsed.error if parsed is not None else None

    @property
    def code(self) -> str | None:
        envelope = _error_envelope(self.details.response_body)
        code = envelope.get("Code", envelope.get("code"))
        return code if isinstance(code, str) else None

    @property
    def error_message(self) -> str | None:
        envelope = _error_envelope(self.details.response_body)
        message = envelope.get("Message", envelope.get("message"))
        return message if isinstance(message, str) else None

    @property
    def retryable(self) -> bool:
        """True when the status marks the failure as safe to retry by the caller."""
        return self.details.status_code in RETRYABLE_STATUSES


class ValidationError(ApiError):
    """Raised for invalid arguments or request payloads (400)."""


class AuthError(ApiError):
    """401/403: the client certificate or bearer token was rejected."""


class NotFoundError(ApiError):
    """404: the node, application, service or partition does not exist."""


class ConflictError(ApiError):
    """409: the entity already exists or an upgrade is already in progress."""


class PayloadTooLargeError(ApiError):
    """Raised when a property or upload value exceeds the allowed size."""


class ServerError(ApiError):
    """5xx responses from the cluster."""


class ServiceUnavailableError(ServerError):
    """Raised when the target service is not ready or lost quorum (503)."""


class GatewayTimeoutError(ServerError):
    """Raised when the gateway timed out waiting for the operation (504)."""


class TypedModelValidationError(ServiceFabricError):
    """A typed call saw a request body or response that does not fit its model."""

    def __init__(
        self,
        *,
        operation: str,
        model_name: str,
        errors: Any,
        boundary: str | None = None,
        status_code: int | None = None,
        raw_sample: Any | None = None,
    ) -> None:
        location = boundary or "boundary"
        super().__init__(f"{operation} {location} validation failed for {model_name}")
        self.operation = operation
        self.model_name = model_name
        self.errors = errors
        self.boundary = boundary
        self.status_code = status_code
        self.raw_sample = raw_sample


class PaginationError(ServiceFabricError):
    """Raised when fetching a page of a continuation-token listing fails."""

    def __init__(self, message: str, *, page: int) -> None:
        super().__init__(message)
        self.page = page


class UploadError(ServiceFabricError):
    """Raised when a chunked image store upload cannot be completed."""

    def __init__(self, message: str, *, session_id: str | None = None) -> None:
        super().__init__(message)
        self.session_id = session_id


class WaitTimeoutError(ServiceFabricError):
    """Polling gave up before the cluster reached the awaited state."""


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    400: ValidationError,
    401: AuthError,
    403: AuthError,
    404: NotFoundError,
    409: ConflictError,
    413: PayloadTooLargeError,
    503: ServiceUnavailableError,
    504: GatewayTimeoutError,
}


def classify_api_error(details: RequestDetails) -> ApiError:
    """Map a failed gateway response to the matching :class:`ApiError` subclass.

    The message names the operation, the status and, when the body carries a
    FabricError envelope, its code and text.
    """
    status = details.status_code or 0
    envelope = _error_envelope(details.response_body)
    code = envelope.get("Code", envelope.get("code"))
    text = envelope.get("Message", envelope.get("message"))

    message = f"{details.operation} returned HTTP {status}"
    if isinstance(code, str) and code:
        message += f" ({code})"
    if isinstance(text, str) and text:
        message += f": {text}"

    error_cls = _STATUS_ERRORS.get(status, ServerError if status >= 500 else ApiError)
    return error_cls(message, details=details)
