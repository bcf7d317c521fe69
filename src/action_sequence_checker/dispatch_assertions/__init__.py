"""Dispatch assertion domain exports."""

from .assertion_failures import DispatchAssertionError, render_diff
from .dispatch_assertion_adapter import (
    assert_dispatched_actions,
    assert_dispatched_types,
    describe_expectations,
    normalize_expectations,
    signal_comparison,
)
from .fluent_expectations import DispatchExpectation, expect
from .recording_subject import (
    NotRecordableError,
    RecordingSubject,
    require_recording_subject,
    snapshot_recorded_events,
)

__all__ = [
    "DispatchAssertionError",
    "DispatchExpectation",
    "NotRecordableError",
    "RecordingSubject",
    "assert_dispatched_actions",
    "assert_dispatched_types",
    "describe_expectations",
    "expect",
    "normalize_expectations",
    "render_diff",
    "require_recording_subject",
    "signal_comparison",
    "snapshot_recorded_events",
]
