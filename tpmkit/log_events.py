"""Structured logging schema for the ESYS backend: event names, field keys and values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EventDescriptor:
    """Stable event name paired with its human-readable message."""

    name: str
    message: str


ESYS_INITIALIZED = EventDescriptor("tpm.context.esys_initialized", "ESYS context initialized")
FINALIZED = EventDescriptor("tpm.context.finalized", "TPM context finalized")
PCR_ALLOCATE_COMPLETED = EventDescriptor("tpm.pcr.allocate_completed", "PCR allocation completed")
PCR_AUTH_POLICY_SET = EventDescriptor("tpm.pcr.auth_policy_set", "PCR authorization policy set")
PCR_AUTH_VALUE_SET = EventDescriptor("tpm.pcr.auth_value_set", "PCR authorization value set")
PCR_EVENT_COMPLETED = EventDescriptor("tpm.pcr.event_completed", "PCR event completed")
PCR_EXTEND_COMPLETED = EventDescriptor("tpm.pcr.extend_completed", "PCR extend completed")
PCR_READ_COMPLETED = EventDescriptor("tpm.pcr.read_completed", "PCR read completed")
PCR_RESET_COMPLETED = EventDescriptor("tpm.pcr.reset_completed", "PCR reset completed")
PCR_TSS_ERROR = EventDescriptor("tpm.pcr.tss_error", "TPM backend call failed")
STARTUP_COMPLETED = EventDescriptor("tpm.context.startup_completed", "TPM startup completed")
STARTUP_INVOKED = EventDescriptor("tpm.context.startup_invoked", "TPM startup invoked")
TCTI_CONFIGURED = EventDescriptor("tpm.context.tcti_configured", "TCTI configured")
TCTI_CONFIGURING = EventDescriptor("tpm.context.tcti_configuring", "TCTI configuring")
TSS_ERROR = EventDescriptor("tpm.context.tss_error", "TPM backend call failed")

COMPONENT_TPM2_ESYS = "tpm2_esys"

FIELD_ABI_VERSION = "abi_version"
FIELD_ALLOCATION_SUCCESS = "allocation_success"
FIELD_BANK = "bank"
FIELD_BANK_COUNT = "bank_count"
FIELD_COMPONENT = "component"
FIELD_BACKEND_ERROR_DESCRIPTION = "backend_error_description"
FIELD_ERROR_CATEGORY = "error_category"
FIELD_ERROR_CODE = "error_code"
FIELD_EVENT = "event"
FIELD_EVENT_SIZE = "event_size"
FIELD_OPERATION = "operation"
FIELD_OUTCOME = "outcome"
FIELD_POLICY_ALGORITHM = "policy_algorithm"
FIELD_PCR_COUNT = "pcr_count"
FIELD_PCR_INDEX = "pcr_index"
FIELD_RESULT = "result"
FIELD_SOURCE = "source"
FIELD_STARTUP_MODE = "startup_mode"
FIELD_TCTI_KIND = "tcti_kind"
FIELD_TCTI_NAME = "tcti_name"
FIELD_TSS_LAYER = "tss_layer"

VALUE_BACKEND_ERROR = "backend_error"
VALUE_FAILURE = "failure"
VALUE_INPUT_ERROR = "input_error"
VALUE_RESOURCE_ERROR = "resource_error"
VALUE_SECURITY_FAILURE = "security_failure"
VALUE_SUCCESS = "success"