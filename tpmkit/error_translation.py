"""Translation of TPM2 TSS return codes into domain errors with structured logging."""

from __future__ import annotations

import enum
from typing import Callable, Mapping, Optional, Union

from tpmkit import log_events as events
from tpmkit import return_codes as codes
from tpmkit.log_events import EventDescriptor
from tpmkit.log_record import Logger, emit_failure_record

TssErrorDecoder = Callable[[int], Optional[Union[str, bytes]]]

UNAVAILABLE_DESCRIPTION = "unavailable"
MAX_BACKEND_DESCRIPTION_SIZE = 128


class ErrorCategory(enum.Enum):
    """Domain category of a failed TPM operation."""

    INPUT_ERROR = events.VALUE_INPUT_ERROR
    SECURITY_FAILURE = events.VALUE_SECURITY_FAILURE
    RESOURCE_ERROR = events.VALUE_RESOURCE_ERROR
    BACKEND_ERROR = events.VALUE_BACKEND_ERROR


class TpmkitError(Exception):
    """A TPM operation failed; carries a category and a sanitized message."""

    def __init__(self, category: ErrorCategory, message: str) -> None:
        super().__init__(message)
        self.category = category
        self.message = message

    def __repr__(self) -> str:
        return f"TpmkitError({self.category.value!r}, {self.message!r})"


_MESSAGES: Mapping[ErrorCategory, str] = {
    ErrorCategory.INPUT_ERROR: "input rejected by TPM",
    ErrorCategory.SECURITY_FAILURE: "TPM verification failed",
    ErrorCategory.RESOURCE_ERROR: "TPM operation cannot be completed",
    ErrorCategory.BACKEND_ERROR: "TPM backend reported an error",
}

_INPUT = ErrorCategory.INPUT_ERROR
_SECURITY = ErrorCategory.SECURITY_FAILURE
_RESOURCE = ErrorCategory.RESOURCE_ERROR
_BACKEND = ErrorCategory.BACKEND_ERROR

_TPM = codes.TPM_RC_LAYER
_ESAPI = codes.ESAPI_RC_LAYER
_TCTI = codes.TCTI_RC_LAYER

_DOCUMENTED_MAPPINGS: Mapping[tuple[int, int], ErrorCategory] = {
    (_TPM, codes.TPM2_RC_AUTH_FAIL): _SECURITY,
    (_TPM, codes.TPM2_RC_BAD_AUTH): _SECURITY,
    (_TPM, codes.TPM2_RC_HASH): _INPUT,
    (_TPM, codes.TPM2_RC_HANDLE): _INPUT,
    (_TPM, codes.TPM2_RC_LOCALITY): _RESOURCE,
    (_TPM, codes.TPM2_RC_LOCKOUT): _SECURITY,
    (_TPM, codes.TPM2_RC_MEMORY): _RESOURCE,
    (_TPM, codes.TPM2_RC_POLICY_FAIL): _SECURITY,
    (_TPM, codes.TPM2_RC_RANGE): _INPUT,
    (_TPM, codes.TPM2_RC_SIZE): _INPUT,
    (_TPM, codes.TPM2_RC_VALUE): _INPUT,
    (_ESAPI, codes.BASE_RC_GENERAL_FAILURE): _BACKEND,
    (_ESAPI, codes.BASE_RC_NOT_IMPLEMENTED): _BACKEND,
    (_ESAPI, codes.BASE_RC_ABI_MISMATCH): _BACKEND,
    (_ESAPI, codes.BASE_RC_BAD_REFERENCE): _INPUT,
    (_ESAPI, codes.BASE_RC_INSUFFICIENT_BUFFER): _INPUT,
    (_ESAPI, codes.BASE_RC_BAD_SEQUENCE): _BACKEND,
    (_ESAPI, codes.BASE_RC_INVALID_SESSIONS): _INPUT,
    (_ESAPI, codes.BASE_RC_TRY_AGAIN): _RESOURCE,
    (_ESAPI, codes.BASE_RC_IO_ERROR): _RESOURCE,
    (_ESAPI, codes.BASE_RC_BAD_VALUE): _INPUT,
    (_ESAPI, codes.BASE_RC_NO_DECRYPT_PARAM): _INPUT,
    (_ESAPI, codes.BASE_RC_NO_ENCRYPT_PARAM): _INPUT,
    (_ESAPI, codes.BASE_RC_BAD_SIZE): _INPUT,
    (_ESAPI, codes.BASE_RC_MALFORMED_RESPONSE): _BACKEND,
    (_ESAPI, codes.BASE_RC_INSUFFICIENT_CONTEXT): _BACKEND,
    (_ESAPI, codes.BASE_RC_INSUFFICIENT_RESPONSE): _BACKEND,
    (_ESAPI, codes.BASE_RC_INCOMPATIBLE_TCTI): _RESOURCE,
    (_ESAPI, codes.BASE_RC_BAD_TCTI_STRUCTURE): _BACKEND,
    (_ESAPI, codes.BASE_RC_MEMORY): _RESOURCE,
    (_ESAPI, codes.BASE_RC_BAD_TR): _INPUT,
    (_ESAPI, codes.BASE_RC_MULTIPLE_DECRYPT_SESSIONS): _INPUT,
    (_ESAPI, codes.BASE_RC_MULTIPLE_ENCRYPT_SESSIONS): _INPUT,
    (_ESAPI, codes.BASE_RC_NOT_SUPPORTED): _BACKEND,
    (_ESAPI, codes.BASE_RC_RSP_AUTH_FAILED): _SECURITY,
    (_ESAPI, codes.BASE_RC_CALLBACK_NULL): _BACKEND,
    (_TCTI, codes.BASE_RC_GENERAL_FAILURE): _BACKEND,
    (_TCTI, codes.BASE_RC_NOT_IMPLEMENTED): _BACKEND,
    (_TCTI, codes.BASE_RC_BAD_CONTEXT): _BACKEND,
    (_TCTI, codes.BASE_RC_ABI_MISMATCH): _BACKEND,
    (_TCTI, codes.BASE_RC_BAD_REFERENCE): _INPUT,
    (_TCTI, codes.BASE_RC_INSUFFICIENT_BUFFER): _INPUT,
    (_TCTI, codes.BASE_RC_BAD_SEQUENCE): _BACKEND,
    (_TCTI, codes.BASE_RC_NO_CONNECTION): _RESOURCE,
    (_TCTI, codes.BASE_RC_TRY_AGAIN): _RESOURCE,
    (_TCTI, codes.BASE_RC_IO_ERROR): _RESOURCE,
    (_TCTI, codes.BASE_RC_BAD_VALUE): _INPUT,
    (_TCTI, codes.BASE_RC_NOT_PERMITTED): _BACKEND,
    (_TCTI, codes.BASE_RC_MALFORMED_RESPONSE): _BACKEND,
    (_TCTI, codes.BASE_RC_NOT_SUPPORTED): _BACKEND,
}


def _describe_rc(rc: int) -> str:
    """Describe a return code by layer and base-code name."""
    layer = codes.rc_layer(rc)
    base = codes.rc_base(rc, layer)
    names = codes.TPM_RC_NAMES if layer == codes.TPM_RC_LAYER else codes.BASE_RC_NAMES
    return f"{codes.layer_name(layer)}:{names.get(base, codes.format_rc(rc))}"


def _is_printable_ascii(char: str) -> bool:
    return 0x20 <= ord(char) < 0x7F


def sanitize_backend_description(decoded: str | bytes | None) -> str:
    """Bound a backend error description to printable ASCII of limited length."""
    if not decoded:
        return UNAVAILABLE_DESCRIPTION
    if isinstance(decoded, bytes):
        decoded = decoded.split(b"\0", 1)[0].decode("latin-1")
    else:
        decoded = decoded.split("\0", 1)[0]
    description = "".join(
        char if _is_printable_ascii(char) else "_"
        for char in decoded[:MAX_BACKEND_DESCRIPTION_SIZE]
    )
    return description or UNAVAILABLE_DESCRIPTION


def _decode_description(rc: int, decoder: TssErrorDecoder | None) -> str:
    if decoder is None:
        return UNAVAILABLE_DESCRIPTION
    return sanitize_backend_description(decoder(rc))


def translate_tss_rc(
    rc: int,
    operation: str,
    log: Logger | None = None,
    error_event: EventDescriptor = events.TSS_ERROR,
    decoder: TssErrorDecoder | None = _describe_rc,
) -> None:
    """Return quietly on success; otherwise log the failure and raise TpmkitError."""
    layer = codes.rc_layer(rc)
    if rc == codes.RC_SUCCESS:
        return

    category = _DOCUMENTED_MAPPINGS.get((layer, codes.rc_base(rc, layer)), _BACKEND)
    if log is not None:
        emit_failure_record(
            log,
            error_event,
            (
                (events.FIELD_ERROR_CATEGORY, category.value),
                (events.FIELD_ERROR_CODE, codes.format_rc(rc)),
                (events.FIELD_BACKEND_ERROR_DESCRIPTION, _decode_description(rc, decoder)),
                (events.FIELD_OPERATION, operation),
                (events.FIELD_TSS_LAYER, codes.layer_name(layer)),
            ),
        )
    raise TpmkitError(category, _MESSAGES[category])