"""Chainable assertion API over recording subjects.

Example:
    expect(store).to.have.dispatched_actions([{"type": "Saved"}])
    expect(store).to.contain.dispatched_type("Saved")
    expect(store).not_.to.have.dispatched_types(["Saved", "Closed"])
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from action_sequence_checker.sequence_comparison import (
    DEFAULT_DISCRIMINANT_FIELD,
    ComparisonResult,
)

from .dispatch_assertion_adapter import assert_dispatched_actions, assert_dispatched_types
from .recording_subject import require_recording_subject


@dataclass(frozen=True)
class DispatchExpectation:
    """Immutable assertion chain; each flag property returns a new chain."""

    subject: object
    negate: bool = False
    contains: bool = False
    discriminant_field: str = DEFAULT_DISCRIMINANT_FIELD

    @property
    def to(self) -> DispatchExpectation:
        return self

    @property
    def have(self) -> DispatchExpectation:
        return self

    @property
    def be(self) -> DispatchExpectation:
        return self

    @property
    def not_(self) -> DispatchExpectation:
        return replace(self, negate=not self.negate)

    @property
    def contain(self) -> DispatchExpectation:
        return replace(self, contains=True)

    include = contain

    def with_discriminant(self, field_name: str) -> DispatchExpectation:
        """Use another field than ``type`` as the action discriminant."""
        return replace(self, discriminant_field=field_name)

    def dispatched_actions(self, expectations: object) -> ComparisonResult:
        return assert_dispatched_actions(
            self.subject,
            expectations,
            negate=self.negate,
            contains=self.contains,
        )

    def dispatched_types(self, expected_types: object) -> ComparisonResult:
        return assert_dispatched_types(
            self.subject,
            expected_types,
            negate=self.negate,
            contains=self.contains,
            discriminant_field=self.discriminant_field,
        )

    dispatched_action = dispatched_actions
    dispatched_type = dispatched_types


def expect(subject: object) -> DispatchExpectation:
    """Start an assertion chain; fails fast when the subject records nothing."""
    require_recording_subject(subject)
    return DispatchExpectation(subject=subject)
