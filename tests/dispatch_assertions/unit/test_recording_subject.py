"""Recording subject contract tests."""

from __future__ import annotations

import pytest
from action_sequence_checker.dispatch_assertions import (
    NotRecordableError,
    RecordingSubject,
    require_recording_subject,
    snapshot_recorded_events,
)


class _Recorder:
    def __init__(self) -> None:
        self.actions = [{"type": "A"}]

    def get_recorded_events(self) -> list[dict[str, object]]:
        return self.actions


class _NotCallable:
    get_recorded_events = [{"type": "A"}]


def test_recorder_satisfies_protocol() -> None:
    recorder = _Recorder()

    assert isinstance(recorder, RecordingSubject)
    assert require_recording_subject(recorder) is recorder


def test_non_callable_accessor_is_rejected() -> None:
    with pytest.raises(NotRecordableError, match="get_recorded_events"):
        require_recording_subject(_NotCallable())


def test_precondition_error_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        snapshot_recorded_events(None)


def test_snapshot_is_immutable_copy() -> None:
    recorder = _Recorder()

    snapshot = snapshot_recorded_events(recorder)
    recorder.actions.append({"type": "B"})

    assert snapshot == ({"type": "A"},)
