"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CheckTarget(str, Enum):
    """What the recorded sequence is compared on."""

    ACTIONS = "actions"
    TYPES = "types"


class CheckMode(str, Enum):
    """Matching discipline applied to the sequence."""

    EXACT = "exact"
    CONTAINS = "contains"


@dataclass(frozen=True)
class RecordedEventsConfig:
    """Where the recorded actions come from: a file or inline entries."""

    source_path: Path | None
    inline: tuple[Mapping[str, object], ...] | None


@dataclass(frozen=True)
class CheckSettings:
    """One assertion over the recorded actions."""

    target: CheckTarget
    mode: CheckMode
    negate: bool
    discriminant_field: str
    expected: tuple[object, ...]


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    recorded_events: RecordedEventsConfig | None
    check: CheckSettings
