"""Logger port and helpers that emit structured outcome records."""

from __future__ import annotations

import abc
import enum
from typing import Iterable, Sequence, Tuple

from tpmkit import log_events as events
from tpmkit.log_events import EventDescriptor

LogField = Tuple[str, str]


class LogLevel(enum.Enum):
    """Severity of a log record."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class Logger(abc.ABC):
    """Port receiving structured log records."""

    @abc.abstractmethod
    def log(self, level: LogLevel, message: str, fields: Sequence[LogField]) -> None:
        """Record one message with its ordered key/value fields."""


def emit_outcome_record(
    log: Logger,
    level: LogLevel,
    event: EventDescriptor,
    outcome: str,
    fields: Iterable[LogField],
) -> None:
    """Log an event, prefixing the event, component and outcome fields."""
    merged: list[LogField] = [
        (events.FIELD_EVENT, event.name),
        (events.FIELD_COMPONENT, events.COMPONENT_TPM2_ESYS),
        (events.FIELD_OUTCOME, outcome),
    ]
    merged.extend((str(key), str(value)) for key, value in fields)
    log.log(level, event.message, tuple(merged))


def emit_failure_record(
    log: Logger | None, event: EventDescriptor, fields: Iterable[LogField]
) -> None:
    """Log a failure record at error level; does nothing without a logger."""
    if log is None:
        return
    emit_outcome_record(log, LogLevel.ERROR, event, events.VALUE_FAILURE, fields)


def emit_success_record(
    log: Logger | None, event: EventDescriptor, fields: Iterable[LogField]
) -> None:
    """Log a success record at info level; does nothing without a logger."""
    if log is None:
        return
    emit_outcome_record(log, LogLevel.INFO, event, events.VALUE_SUCCESS, fields)