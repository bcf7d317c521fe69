"""Exact and contains comparison over discriminant (type) values."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from action_sequence_checker.action_matching import Action

from .comparison_outcomes import ComparisonResult, check_lengths

DEFAULT_DISCRIMINANT_FIELD = "type"

_LOGGER = logging.getLogger(__name__)


def project_types(
    actions: Sequence[Action],
    discriminant_field: str = DEFAULT_DISCRIMINANT_FIELD,
) -> tuple[object, ...]:
    """Project recorded actions to their discriminant values."""
    return tuple(action.get(discriminant_field) for action in actions)


def compare_exact_types(
    expected: Sequence[object],
    actual: Sequence[object],
) -> ComparisonResult:
    """Compare the shared prefix as a whole, then require equal lengths."""
    expected_types = list(expected)
    actual_types = list(actual)
    shared = min(len(expected_types), len(actual_types))
    expected_prefix = expected_types[:shared]
    actual_prefix = actual_types[:shared]
    length_mismatch = check_lengths(expected_types, actual_types, noun="types")

    if expected_prefix != actual_prefix:
        _LOGGER.debug("type prefixes differ: %r != %r", expected_prefix, actual_prefix)
        return ComparisonResult(
            matched=False,
            message="dispatched types do not match",
            expected=expected_prefix,
            actual=actual_prefix,
            diffable=True,
            length_mismatch=length_mismatch,
        )
    return ComparisonResult(
        matched=True,
        message="dispatched types match",
        expected=expected_prefix,
        actual=actual_prefix,
        diffable=True,
        length_mismatch=length_mismatch,
    )


def compare_contains_types(
    expected: Sequence[object],
    actual: Sequence[object],
) -> ComparisonResult:
    """Greedily find every expected type, in order, among the dispatched types."""
    expected_types = tuple(expected)
    actual_types = tuple(actual)
    matched_positions: set[int] = set()
    expected_index = 0

    for actual_index, value in enumerate(actual_types):
        if expected_index >= len(expected_types):
            break
        if value == expected_types[expected_index]:
            matched_positions.add(actual_index)
            expected_index += 1

    if expected_index >= len(expected_types):
        return ComparisonResult(
            matched=True,
            message="all types have been found",
            expected=list(expected_types),
            actual=list(actual_types),
            diffable=True,
        )

    _LOGGER.debug("type at position %d was not found", expected_index)
    return ComparisonResult(
        matched=False,
        message=f"unable to find expected type at position {expected_index}",
        expected=expected_types[expected_index],
        actual=[
            value for index, value in enumerate(actual_types) if index not in matched_positions
        ],
        diffable=True,
    )
