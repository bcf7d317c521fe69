"""Contract for subjects that record dispatched actions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from action_sequence_checker.action_matching import Action

RECORDED_EVENTS_ACCESSOR = "get_recorded_events"


@runtime_checkable
class RecordingSubject(Protocol):
    """Anything exposing the actions it recorded, oldest first."""

    def get_recorded_events(self) -> Sequence[Action]:
        """Return the recorded actions without side effects."""
        ...


class NotRecordableError(TypeError):
    """Raised when the assertion subject cannot report recorded events."""


def require_recording_subject(subject: object) -> RecordingSubject:
    """Return the subject when it exposes a callable recorded-events accessor."""
    accessor = getattr(subject, RECORDED_EVENTS_ACCESSOR, None)
    if not callable(accessor):
        raise NotRecordableError(
            f"expected {subject!r} to respond to '{RECORDED_EVENTS_ACCESSOR}'"
        )
    return subject  # type: ignore[return-value]


def snapshot_recorded_events(subject: object) -> tuple[Action, ...]:
    """Take an immutable snapshot of the subject's recorded actions."""
    return tuple(require_recording_subject(subject).get_recorded_events())
