"""Check execution entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from action_sequence_checker.configuration.runtime_settings import CheckSettings


@dataclass(frozen=True)
class CheckRequest:
    """Input contract for executing one check."""

    config_path: str
    events_path: str | None = None


@dataclass(frozen=True)
class CheckOutcome:
    """Output contract for one completed check."""

    passed: bool
    report: str
    settings: CheckSettings
    event_count: int


@dataclass(frozen=True)
class RecordedEventLog:
    """Recorded actions loaded from a file, exposed as a recording subject."""

    events: tuple[Mapping[str, object], ...]

    def get_recorded_events(self) -> Sequence[Mapping[str, object]]:
        return self.events
