"""Sequence comparison result entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class LengthMismatchKind(str, Enum):
    """Which side of the comparison holds surplus elements."""

    SURPLUS_ACTUAL = "surplus_actual"
    SURPLUS_EXPECTED = "surplus_expected"


@dataclass(frozen=True)
class LengthMismatch:
    """Count difference detected after the ordering check."""

    kind: LengthMismatchKind
    message: str
    expected: object
    actual: object


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing an expectation sequence with a recorded sequence.

    ``matched`` is the ordering verdict only; count differences are carried
    separately in ``length_mismatch`` so they are never absorbed by it.
    """

    matched: bool
    message: str
    expected: object = None
    actual: object = None
    diffable: bool = False
    length_mismatch: LengthMismatch | None = None

    @property
    def verdict(self) -> bool:
        """Return True when ordering matched and counts agree."""
        return self.matched and self.length_mismatch is None


def check_lengths(
    expected: Sequence[object],
    actual: Sequence[object],
    *,
    noun: str,
) -> LengthMismatch | None:
    """Detect surplus actual or surplus expected elements beyond the shared prefix."""
    shared = min(len(expected), len(actual))
    surplus_actual = list(actual[shared:])
    if surplus_actual:
        return LengthMismatch(
            kind=LengthMismatchKind.SURPLUS_ACTUAL,
            message=f"more {noun} were dispatched than expected",
            expected=[],
            actual=surplus_actual,
        )
    if len(expected) != shared:
        return LengthMismatch(
            kind=LengthMismatchKind.SURPLUS_EXPECTED,
            message=f"expected {len(expected)} {noun}, got {shared} dispatched",
            expected=len(expected),
            actual=shared,
        )
    return None
