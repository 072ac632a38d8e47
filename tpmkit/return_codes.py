"""TPM2 TSS return-code constants and helpers for splitting codes into layer and base."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

RC_MAX = 0xFFFFFFFF
RC_SUCCESS = 0

RC_LAYER_SHIFT = 16
RC_LAYER_MASK = 0xFF << RC_LAYER_SHIFT

TPM_RC_LAYER = 0 << RC_LAYER_SHIFT
ESAPI_RC_LAYER = 7 << RC_LAYER_SHIFT
SYS_RC_LAYER = 8 << RC_LAYER_SHIFT
MU_RC_LAYER = 9 << RC_LAYER_SHIFT
TCTI_RC_LAYER = 10 << RC_LAYER_SHIFT

BASE_RC_GENERAL_FAILURE = 1
BASE_RC_NOT_IMPLEMENTED = 2
BASE_RC_BAD_CONTEXT = 3
BASE_RC_ABI_MISMATCH = 4
BASE_RC_BAD_REFERENCE = 5
BASE_RC_INSUFFICIENT_BUFFER = 6
BASE_RC_BAD_SEQUENCE = 7
BASE_RC_NO_CONNECTION = 8
BASE_RC_TRY_AGAIN = 9
BASE_RC_IO_ERROR = 10
BASE_RC_BAD_VALUE = 11
BASE_RC_NOT_PERMITTED = 12
BASE_RC_INVALID_SESSIONS = 13
BASE_RC_NO_DECRYPT_PARAM = 14
BASE_RC_NO_ENCRYPT_PARAM = 15
BASE_RC_BAD_SIZE = 16
BASE_RC_MALFORMED_RESPONSE = 17
BASE_RC_INSUFFICIENT_CONTEXT = 18
BASE_RC_INSUFFICIENT_RESPONSE = 19
BASE_RC_INCOMPATIBLE_TCTI = 20
BASE_RC_NOT_SUPPORTED = 21
BASE_RC_BAD_TCTI_STRUCTURE = 22
BASE_RC_MEMORY = 23
BASE_RC_BAD_TR = 24
BASE_RC_MULTIPLE_DECRYPT_SESSIONS = 25
BASE_RC_MULTIPLE_ENCRYPT_SESSIONS = 26
BASE_RC_RSP_AUTH_FAILED = 27
BASE_RC_CALLBACK_NULL = 54

TPM2_RC_VER1 = 0x100
TPM2_RC_FMT1 = 0x080
TPM2_RC_WARN = 0x900

TPM2_RC_INITIALIZE = TPM2_RC_VER1 + 0x000

TPM2_RC_HASH = TPM2_RC_FMT1 + 0x003
TPM2_RC_VALUE = TPM2_RC_FMT1 + 0x004
TPM2_RC_HANDLE = TPM2_RC_FMT1 + 0x00B
TPM2_RC_RANGE = TPM2_RC_FMT1 + 0x00D
TPM2_RC_AUTH_FAIL = TPM2_RC_FMT1 + 0x00E
TPM2_RC_SIZE = TPM2_RC_FMT1 + 0x015
TPM2_RC_POLICY_FAIL = TPM2_RC_FMT1 + 0x01D
TPM2_RC_BAD_AUTH = TPM2_RC_FMT1 + 0x022

TPM2_RC_MEMORY = TPM2_RC_WARN + 0x004
TPM2_RC_LOCALITY = TPM2_RC_WARN + 0x007
TPM2_RC_LOCKOUT = TPM2_RC_WARN + 0x021

# Format-one selector bits: which handle, parameter or session a code refers to.
TPM2_RC_H = 0x000
TPM2_RC_P = 0x040
TPM2_RC_S = 0x800
TPM2_RC_1 = 0x100
TPM2_RC_2 = 0x200
TPM2_RC_3 = 0x300

_BASE_CODE_MASK = 0xFFFF
_FORMAT_ONE_BASE_MASK = TPM2_RC_FMT1 | 0x3F

_LAYER_NAMES: Mapping[int, str] = MappingProxyType(
    {
        TPM_RC_LAYER: "tpm",
        TCTI_RC_LAYER: "tcti",
        ESAPI_RC_LAYER: "esapi",
        SYS_RC_LAYER: "sys",
        MU_RC_LAYER: "mu",
    }
)

BASE_RC_NAMES: Mapping[int, str] = MappingProxyType(
    {
        BASE_RC_GENERAL_FAILURE: "general_failure",
        BASE_RC_NOT_IMPLEMENTED: "not_implemented",
        BASE_RC_BAD_CONTEXT: "bad_context",
        BASE_RC_ABI_MISMATCH: "abi_mismatch",
        BASE_RC_BAD_REFERENCE: "bad_reference",
        BASE_RC_INSUFFICIENT_BUFFER: "insufficient_buffer",
        BASE_RC_BAD_SEQUENCE: "bad_sequence",
        BASE_RC_NO_CONNECTION: "no_connection",
        BASE_RC_TRY_AGAIN: "try_again",
        BASE_RC_IO_ERROR: "io_error",
        BASE_RC_BAD_VALUE: "bad_value",
        BASE_RC_NOT_PERMITTED: "not_permitted",
        BASE_RC_INVALID_SESSIONS: "invalid_sessions",
        BASE_RC_NO_DECRYPT_PARAM: "no_decrypt_param",
        BASE_RC_NO_ENCRYPT_PARAM: "no_encrypt_param",
        BASE_RC_BAD_SIZE: "bad_size",
        BASE_RC_MALFORMED_RESPONSE: "malformed_response",
        BASE_RC_INSUFFICIENT_CONTEXT: "insufficient_context",
        BASE_RC_INSUFFICIENT_RESPONSE: "insufficient_response",
        BASE_RC_INCOMPATIBLE_TCTI: "incompatible_tcti",
        BASE_RC_NOT_SUPPORTED: "not_supported",
        BASE_RC_BAD_TCTI_STRUCTURE: "bad_tcti_structure",
        BASE_RC_MEMORY: "memory",
        BASE_RC_BAD_TR: "bad_tr",
        BASE_RC_MULTIPLE_DECRYPT_SESSIONS: "multiple_decrypt_sessions",
        BASE_RC_MULTIPLE_ENCRYPT_SESSIONS: "multiple_encrypt_sessions",
        BASE_RC_RSP_AUTH_FAILED: "rsp_auth_failed",
        BASE_RC_CALLBACK_NULL: "callback_null",
    }
)

TPM_RC_NAMES: Mapping[int, str] = MappingProxyType(
    {
        TPM2_RC_INITIALIZE: "initialize",
        TPM2_RC_HASH: "hash",
        TPM2_RC_VALUE: "value",
        TPM2_RC_HANDLE: "handle",
        TPM2_RC_RANGE: "range",
        TPM2_RC_AUTH_FAIL: "auth_fail",
        TPM2_RC_SIZE: "size",
        TPM2_RC_POLICY_FAIL: "policy_fail",
        TPM2_RC_BAD_AUTH: "bad_auth",
        TPM2_RC_MEMORY: "memory",
        TPM2_RC_LOCALITY: "locality",
        TPM2_RC_LOCKOUT: "lockout",
    }
)


def _checked(rc: int) -> int:
    if isinstance(rc, bool) or not isinstance(rc, int):
        raise TypeError("return code must be an integer")
    if not 0 <= rc <= RC_MAX:
        raise ValueError(f"return code out of 32-bit range: {rc}")
    return rc


def rc_layer(rc: int) -> int:
    """Return the layer bits of a TSS return code."""
    return _checked(rc) & RC_LAYER_MASK


def rc_base(rc: int, layer: int) -> int:
    """Return the base code, dropping TPM format-one selector bits."""
    base = _checked(rc) & _BASE_CODE_MASK
    if layer != TPM_RC_LAYER or not base & TPM2_RC_FMT1:
        return base
    return base & _FORMAT_ONE_BASE_MASK


def layer_name(layer: int) -> str:
    """Return the stable name of a TSS layer, or ``unknown``."""
    return _LAYER_NAMES.get(layer, "unknown")


def format_rc(rc: int) -> str:
    """Format a return code as eight lower-case hex digits with a ``0x`` prefix."""
    return f"0x{_checked(rc):08x}"