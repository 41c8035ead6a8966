"""The FabricError envelope returned with non-2xx responses."""

from __future__ import annotations

from typing import Any

from ._base import FabricModel
from .enums import FabricErrorCodes


class FabricErrorError(FabricModel):
    code: FabricErrorCodes
    message: str | None = None


class FabricError(FabricModel):
    error: FabricErrorError

    @classmethod
    def from_body(cls, body: Any) -> "FabricError | None":
        """Parse a response body, accepting the PascalCase and lowercase envelopes."""
        if not isinstance(body, dict):
            return None
        envelope = body.get("Error", body.get("error"))
        if not isinstance(envelope, dict):
            return None
        code = envelope.get("Code", envelope.get("code"))
        if not isinstance(code, str):
            return None
        return cls(error=FabricErrorError(code=code, message=envelope.get("Message", envelope.get("message"))))


_CODES_BY_STATUS: dict[int, tuple[FabricErrorCodes, ...]] = {
    400: (
        FabricErrorCodes.FABRIC_E_INVALID_PARTITION_KEY,
        FabricErrorCodes.FABRIC_E_IMAGEBUILDER_VALIDATION_ERROR,
        FabricErrorCodes.FABRIC_E_INVALID_ADDRESS,
        FabricErrorCodes.FABRIC_E_APPLICATION_NOT_UPGRADING,
        FabricErrorCodes.FABRIC_E_APPLICATION_UPGRADE_VALIDATION_ERROR,
        FabricErrorCodes.FABRIC_E_FABRIC_NOT_UPGRADING,
        FabricErrorCodes.FABRIC_E_FABRIC_UPGRADE_VALIDATION_ERROR,
        FabricErrorCodes.FABRIC_E_INVALID_CONFIGURATION,
        FabricErrorCodes.FABRIC_E_INVALID_NAME_URI,
        FabricErrorCodes.FABRIC_E_PATH_TOO_LONG,
        FabricErrorCodes.FABRIC_E_KEY_TOO_LARGE,
        FabricErrorCodes.FABRIC_E_SERVICE_AFFINITY_CHAIN_NOT_SUPPORTED,
        FabricErrorCodes.FABRIC_E_INVALID_ATOMIC_GROUP,
        FabricErrorCodes.FABRIC_E_VALUE_EMPTY,
        FabricErrorCodes.FABRIC_E_BACKUP_IS_ENABLED,
        FabricErrorCodes.FABRIC_E_RESTORE_SOURCE_TARGET_PARTITION_MISMATCH,
        FabricErrorCodes.FABRIC_E_INVALID_FOR_STATELESS_SERVICES,
        FabricErrorCodes.FABRIC_E_INVALID_SERVICE_SCALING_POLICY,
        FabricErrorCodes.E_INVALIDARG,
    ),
    404: (
        FabricErrorCodes.FABRIC_E_NODE_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_APPLICATION_TYPE_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_APPLICATION_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_SERVICE_TYPE_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_SERVICE_DOES_NOT_EXIST,
        FabricErrorCodes.FABRIC_E_SERVICE_TYPE_TEMPLATE_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_CONFIGURATION_SECTION_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_PARTITION_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_REPLICA_DOES_NOT_EXIST,
        FabricErrorCodes.FABRIC_E_SERVICE_GROUP_DOES_NOT_EXIST,
        FabricErrorCodes.FABRIC_E_CONFIGURATION_PARAMETER_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_DIRECTORY_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_FABRIC_VERSION_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_FILE_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_NAME_DOES_NOT_EXIST,
        FabricErrorCodes.FABRIC_E_PROPERTY_DOES_NOT_EXIST,
        FabricErrorCodes.FABRIC_E_ENUMERATION_COMPLETED,
        FabricErrorCodes.FABRIC_E_SERVICE_MANIFEST_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_KEY_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_HEALTH_ENTITY_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_BACKUP_NOT_ENABLED,
        FabricErrorCodes.FABRIC_E_BACKUP_POLICY_NOT_EXISTING,
        FabricErrorCodes.FABRIC_E_FAULT_ANALYSIS_SERVICE_NOT_EXISTING,
        FabricErrorCodes.FABRIC_E_IMAGEBUILDER_RESERVED_DIRECTORY_ERROR,
    ),
    409: (
        FabricErrorCodes.FABRIC_E_APPLICATION_TYPE_ALREADY_EXISTS,
        FabricErrorCodes.FABRIC_E_APPLICATION_ALREADY_EXISTS,
        FabricErrorCodes.FABRIC_E_APPLICATION_ALREADY_IN_TARGET_VERSION,
        FabricErrorCodes.FABRIC_E_APPLICATION_TYPE_PROVISION_IN_PROGRESS,
        FabricErrorCodes.FABRIC_E_APPLICATION_UPGRADE_IN_PROGRESS,
        FabricErrorCodes.FABRIC_E_SERVICE_ALREADY_EXISTS,
        FabricErrorCodes.FABRIC_E_SERVICE_GROUP_ALREADY_EXISTS,
        FabricErrorCodes.FABRIC_E_APPLICATION_TYPE_IN_USE,
        FabricErrorCodes.FABRIC_E_FABRIC_ALREADY_IN_TARGET_VERSION,
        FabricErrorCodes.FABRIC_E_FABRIC_VERSION_ALREADY_EXISTS,
        FabricErrorCodes.FABRIC_E_FABRIC_VERSION_IN_USE,
        FabricErrorCodes.FABRIC_E_FABRIC_UPGRADE_IN_PROGRESS,
        FabricErrorCodes.FABRIC_E_NAME_ALREADY_EXISTS,
        FabricErrorCodes.FABRIC_E_NAME_NOT_EMPTY,
        FabricErrorCodes.FABRIC_E_PROPERTY_CHECK_FAILED,
        FabricErrorCodes.FABRIC_E_SERVICE_METADATA_MISMATCH,
        FabricErrorCodes.FABRIC_E_SERVICE_TYPE_MISMATCH,
        FabricErrorCodes.FABRIC_E_HEALTH_STALE_REPORT,
        FabricErrorCodes.FABRIC_E_SEQUENCE_NUMBER_CHECK_FAILED,
        FabricErrorCodes.FABRIC_E_NODE_HAS_NOT_STOPPED_YET,
        FabricErrorCodes.FABRIC_E_INSTANCE_ID_MISMATCH,
        FabricErrorCodes.FABRIC_E_BACKUP_IN_PROGRESS,
        FabricErrorCodes.FABRIC_E_RESTORE_IN_PROGRESS,
        FabricErrorCodes.FABRIC_E_BACKUP_POLICY_ALREADY_EXISTING,
    ),
    413: (FabricErrorCodes.FABRIC_E_VALUE_TOO_LARGE,),
    500: (
        FabricErrorCodes.FABRIC_E_NODE_IS_UP,
        FabricErrorCodes.E_FAIL,
        FabricErrorCodes.FABRIC_E_SINGLE_INSTANCE_APPLICATION_ALREADY_EXISTS,
        FabricErrorCodes.FABRIC_E_SINGLE_INSTANCE_APPLICATION_NOT_FOUND,
        FabricErrorCodes.FABRIC_E_VOLUME_ALREADY_EXISTS,
        FabricErrorCodes.FABRIC_E_VOLUME_NOT_FOUND,
        FabricErrorCodes.SERIALIZATION_ERROR,
    ),
    503: (
        FabricErrorCodes.FABRIC_E_NO_WRITE_QUORUM,
        FabricErrorCodes.FABRIC_E_NOT_PRIMARY,
        FabricErrorCodes.FABRIC_E_NOT_READY,
        FabricErrorCodes.FABRIC_E_RECONFIGURATION_PENDING,
        FabricErrorCodes.FABRIC_E_SERVICE_OFFLINE,
        FabricErrorCodes.E_ABORT,
    ),
    504: (
        FabricErrorCodes.FABRIC_E_COMMUNICATION_ERROR,
        FabricErrorCodes.FABRIC_E_OPERATION_NOT_COMPLETE,
        FabricErrorCodes.FABRIC_E_TIMEOUT,
    ),
}

FABRIC_ERROR_STATUS: dict[FabricErrorCodes, int] = {
    code: status for status, codes in _CODES_BY_STATUS.items() for code in codes
}
"""HTTP status each documented error code is returned with."""


def expected_status(code: str | FabricErrorCodes) -> int | None:
    return FABRIC_ERROR_STATUS.get(FabricErrorCodes(code))
