import pytest

from tpmkit import log_events as events
from tpmkit.log_record import (
    Logger,
    LogLevel,
    emit_failure_record,
    emit_outcome_record,
    emit_success_record,
)


class RecordingLogger(Logger):
    def __init__(self):
        self.records = []

    def log(self, level, message, fields):
        self.records.append((level, message, list(fields)))


def test_logger_is_abstract():
    with pytest.raises(TypeError):
        Logger()


def test_outcome_record_prefixes_standard_fields_in_order():
    log = RecordingLogger()
    emit_outcome_record(
        log,
        LogLevel.WARNING,
        events.STARTUP_COMPLETED,
        "custom",
        [("startup_mode", "clear"), ("result", "ok")],
    )
    assert len(log.records) == 1
    level, message, fields = log.records[0]
    assert level is LogLevel.WARNING
    assert message == events.STARTUP_COMPLETED.message
    assert fields == [
        ("event", "tpm.context.startup_completed"),
        ("component", "tpm2_esys"),
        ("outcome", "custom"),
        ("startup_mode", "clear"),
        ("result", "ok"),
    ]


def test_success_record_uses_info_level_and_success_outcome():
    log = RecordingLogger()
    emit_success_record(log, events.FINALIZED, [])
    level, message, fields = log.records[0]
    assert level is LogLevel.INFO
    assert message == "TPM context finalized"
    assert dict(fields)[events.FIELD_OUTCOME] == "success"
    assert len(fields) == 3


def test_failure_record_uses_error_level_and_failure_outcome():
    log = RecordingLogger()
    emit_failure_record(log, events.TSS_ERROR, [(events.FIELD_OPERATION, "tcti_init")])
    level, message, fields = log.records[0]
    assert level is LogLevel.ERROR
    assert message == "TPM backend call failed"
    as_dict = dict(fields)
    assert as_dict[events.FIELD_OUTCOME] == "failure"
    assert as_dict[events.FIELD_EVENT] == "tpm.context.tss_error"
    assert as_dict[events.FIELD_OPERATION] == "tcti_init"


def test_missing_logger_is_a_no_op():
    assert emit_success_record(None, events.FINALIZED, [("a", "b")]) is None
    assert emit_failure_record(None, events.TSS_ERROR, [("a", "b")]) is None


def test_caller_fields_are_preserved_after_prefix():
    log = RecordingLogger()
    supplied = [("k1", "v1"), ("k2", "v2"), ("k3", "v3")]
    emit_success_record(log, events.PCR_READ_COMPLETED, supplied)
    _, _, fields = log.records[0]
    assert fields[3:] == supplied
    assert len(fields) == len(supplied) + 3