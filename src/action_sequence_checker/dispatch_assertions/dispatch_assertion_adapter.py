"""Assertion entry points over recorded actions and their types."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from action_sequence_checker.sequence_comparison import (
    DEFAULT_DISCRIMINANT_FIELD,
    ComparisonResult,
    compare_contains,
    compare_contains_types,
    compare_exact,
    compare_exact_types,
    project_types,
)

from .assertion_failures import DispatchAssertionError
from .recording_subject import snapshot_recorded_events

_LOGGER = logging.getLogger(__name__)


def assert_dispatched_actions(
    subject: object,
    expectations: object,
    *,
    negate: bool = False,
    contains: bool = False,
) -> ComparisonResult:
    """Assert the subject dispatched actions matching the expectations.

    Args:
      subject: Object exposing ``get_recorded_events()``.
      expectations: One pattern/predicate or a list of them.
      negate: Invert the ordering verdict.
      contains: Match as an ordered subsequence instead of exactly.

    Returns:
      The comparison result when the assertion holds.

    Raises:
      NotRecordableError: If the subject does not record events.
      DispatchAssertionError: If the assertion does not hold.
    """
    actions = snapshot_recorded_events(subject)
    expected = normalize_expectations(expectations)
    comparator = compare_contains if contains else compare_exact
    result = comparator(expected, actions)
    signal_comparison(result, negate=negate, noun="actions")
    return result


def assert_dispatched_types(
    subject: object,
    expected_types: object,
    *,
    negate: bool = False,
    contains: bool = False,
    discriminant_field: str = DEFAULT_DISCRIMINANT_FIELD,
) -> ComparisonResult:
    """Assert the subject dispatched actions whose types match the expected types."""
    actions = snapshot_recorded_events(subject)
    types = project_types(actions, discriminant_field)
    expected = normalize_expectations(expected_types)
    comparator = compare_contains_types if contains else compare_exact_types
    result = comparator(expected, types)
    signal_comparison(result, negate=negate, noun="types")
    return result


def normalize_expectations(value: object) -> list[object]:
    """Wrap a single expectation into a one-element list."""
    if isinstance(value, list | tuple):
        return list(value)
    return [value]


def signal_comparison(result: ComparisonResult, *, negate: bool, noun: str) -> None:
    """Raise DispatchAssertionError when the (possibly negated) result does not hold.

    Negation applies to the ordering verdict only. A length mismatch is an
    independent assertion and fails regardless of ``negate``.
    """
    if result.matched == negate:
        if negate:
            message = f"expected dispatched {noun} not to match, but {result.message}"
        else:
            message = f"dispatched {noun} do not match: {result.message}"
        _LOGGER.debug("assertion failed: %s", message)
        raise DispatchAssertionError(
            message,
            expected=result.expected,
            actual=result.actual,
            show_diff=result.diffable,
        )

    mismatch = result.length_mismatch
    if mismatch is not None:
        _LOGGER.debug("length assertion failed: %s", mismatch.message)
        raise DispatchAssertionError(
            mismatch.message,
            expected=mismatch.expected,
            actual=mismatch.actual,
            show_diff=True,
        )


def describe_expectations(expectations: Sequence[object]) -> str:
    """Return a short label for logging and CLI output."""
    count = len(expectations)
    return f"{count} expectation" if count == 1 else f"{count} expectations"
