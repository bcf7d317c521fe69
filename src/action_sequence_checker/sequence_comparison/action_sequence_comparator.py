"""Exact and contains comparison of expectation sequences against recorded actions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from action_sequence_checker.action_matching import (
    Action,
    Expectation,
    Predicate,
    match_action,
    to_expectation,
)

from .comparison_outcomes import ComparisonResult, check_lengths

_LOGGER = logging.getLogger(__name__)


def compare_exact(
    expected: Sequence[Expectation | object],
    actual: Sequence[Action],
) -> ComparisonResult:
    """Compare position by position, then require both sequences to have the same length."""
    expectations = tuple(to_expectation(item) for item in expected)
    actions = tuple(actual)
    length_mismatch = check_lengths(expectations, actions, noun="actions")

    for position in range(min(len(expectations), len(actions))):
        expectation = expectations[position]
        match = match_action(expectation, actions[position])
        if match.matched:
            continue
        _LOGGER.debug("exact comparison diverged at position %d: %s", position, match.reason)
        return ComparisonResult(
            matched=False,
            message=f"at position {position}: {match.reason}",
            expected=(
                match.expected if match.expected is not None else expectation.display_value
            ),
            actual=match.actual if match.actual is not None else actions[position],
            diffable=match.diffable,
            length_mismatch=length_mismatch,
        )

    return ComparisonResult(
        matched=True,
        message="all expected actions were dispatched in order",
        expected=[expectation.display_value for expectation in expectations],
        actual=list(actions),
        diffable=False,
        length_mismatch=length_mismatch,
    )


def compare_contains(
    expected: Sequence[Expectation | object],
    actual: Sequence[Action],
) -> ComparisonResult:
    """Greedily find every expectation, in order, among the recorded actions."""
    expectations = tuple(to_expectation(item) for item in expected)
    actions = tuple(actual)
    matched_positions: set[int] = set()
    expected_index = 0

    for actual_index, action in enumerate(actions):
        if expected_index >= len(expectations):
            break
        if match_action(expectations[expected_index], action).matched:
            matched_positions.add(actual_index)
            expected_index += 1

    if expected_index >= len(expectations):
        return ComparisonResult(
            matched=True,
            message="all expected actions have been found",
            expected=[expectation.display_value for expectation in expectations],
            actual=list(actions),
        )

    missing = expectations[expected_index]
    _LOGGER.debug("expectation at position %d was not found", expected_index)
    return ComparisonResult(
        matched=False,
        message=f"unable to find expected action at position {expected_index}",
        expected=missing.display_value,
        actual=[
            action for index, action in enumerate(actions) if index not in matched_positions
        ],
        diffable=not isinstance(missing, Predicate),
    )
