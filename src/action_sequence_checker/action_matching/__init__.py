"""Action matching domain exports."""

from .action_matcher import match_action
from .expectation_models import (
    Action,
    Expectation,
    MatchResult,
    Pattern,
    Predicate,
    PredicateFailure,
    assert_deep_equal,
    to_expectation,
)

__all__ = [
    "Action",
    "Expectation",
    "Pattern",
    "Predicate",
    "MatchResult",
    "PredicateFailure",
    "assert_deep_equal",
    "to_expectation",
    "match_action",
]
