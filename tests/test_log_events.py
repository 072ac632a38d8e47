import dataclasses

import pytest

from tpmkit import log_events as events


@pytest.mark.parametrize(
    ("actual", "expected"),
    [
        (events.TCTI_CONFIGURED.name, "tpm.context.tcti_configured"),
        (events.TCTI_CONFIGURING.name, "tpm.context.tcti_configuring"),
        (events.ESYS_INITIALIZED.name, "tpm.context.esys_initialized"),
        (events.PCR_ALLOCATE_COMPLETED.name, "tpm.pcr.allocate_completed"),
        (events.PCR_AUTH_POLICY_SET.name, "tpm.pcr.auth_policy_set"),
        (events.PCR_AUTH_VALUE_SET.name, "tpm.pcr.auth_value_set"),
        (events.PCR_EVENT_COMPLETED.name, "tpm.pcr.event_completed"),
        (events.PCR_EXTEND_COMPLETED.name, "tpm.pcr.extend_completed"),
        (events.PCR_READ_COMPLETED.name, "tpm.pcr.read_completed"),
        (events.PCR_RESET_COMPLETED.name, "tpm.pcr.reset_completed"),
        (events.PCR_TSS_ERROR.name, "tpm.pcr.tss_error"),
        (events.STARTUP_INVOKED.name, "tpm.context.startup_invoked"),
        (events.STARTUP_COMPLETED.name, "tpm.context.startup_completed"),
        (events.FINALIZED.name, "tpm.context.finalized"),
        (events.TSS_ERROR.name, "tpm.context.tss_error"),
    ],
)
def test_event_names_match_documented_schema(actual, expected):
    assert actual == expected


@pytest.mark.parametrize(
    ("actual", "expected"),
    [
        (events.FIELD_EVENT, "event"),
        (events.FIELD_COMPONENT, "component"),
        (events.FIELD_OUTCOME, "outcome"),
        (events.FIELD_BACKEND_ERROR_DESCRIPTION, "backend_error_description"),
        (events.FIELD_ERROR_CATEGORY, "error_category"),
        (events.FIELD_ERROR_CODE, "error_code"),
        (events.FIELD_TCTI_KIND, "tcti_kind"),
        (events.FIELD_TCTI_NAME, "tcti_name"),
        (events.FIELD_ABI_VERSION, "abi_version"),
        (events.FIELD_ALLOCATION_SUCCESS, "allocation_success"),
        (events.FIELD_BANK, "bank"),
        (events.FIELD_BANK_COUNT, "bank_count"),
        (events.FIELD_EVENT_SIZE, "event_size"),
        (events.FIELD_STARTUP_MODE, "startup_mode"),
        (events.FIELD_PCR_COUNT, "pcr_count"),
        (events.FIELD_PCR_INDEX, "pcr_index"),
        (events.FIELD_RESULT, "result"),
        (events.FIELD_POLICY_ALGORITHM, "policy_algorithm"),
        (events.FIELD_OPERATION, "operation"),
        (events.FIELD_SOURCE, "source"),
        (events.FIELD_TSS_LAYER, "tss_layer"),
    ],
)
def test_field_keys_match_documented_schema(actual, expected):
    assert actual == expected


@pytest.mark.parametrize(
    ("actual", "expected"),
    [
        (events.COMPONENT_TPM2_ESYS, "tpm2_esys"),
        (events.VALUE_BACKEND_ERROR, "backend_error"),
        (events.VALUE_FAILURE, "failure"),
        (events.VALUE_INPUT_ERROR, "input_error"),
        (events.VALUE_RESOURCE_ERROR, "resource_error"),
        (events.VALUE_SECURITY_FAILURE, "security_failure"),
        (events.VALUE_SUCCESS, "success"),
    ],
)
def test_standard_values_match_documented_schema(actual, expected):
    assert actual == expected


def test_event_descriptor_is_immutable():
    descriptor = events.EventDescriptor("tpm.context.custom", "Custom event")
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.name = "changed"  # type: ignore[misc]
    assert descriptor.name == "tpm.context.custom"


def test_event_descriptors_compare_by_value():
    copy = events.EventDescriptor("tpm.context.tss_error", "TPM backend call failed")
    assert copy == events.TSS_ERROR
    assert copy != events.PCR_TSS_ERROR
    assert events.TSS_ERROR.message == events.PCR_TSS_ERROR.message