"""Single expectation versus single action matching."""

from __future__ import annotations

from .expectation_models import (
    Action,
    Expectation,
    MatchResult,
    Pattern,
    Predicate,
    failure_payload,
    to_expectation,
)


def match_action(expectation: Expectation | object, action: Action) -> MatchResult:
    """Evaluate one expectation against one recorded action."""
    resolved = to_expectation(expectation)
    if isinstance(resolved, Predicate):
        return _match_predicate(resolved, action)
    return _match_pattern(resolved, action)


def _match_predicate(predicate: Predicate, action: Action) -> MatchResult:
    try:
        predicate.check(action)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        expected, actual, diffable = failure_payload(exc, action)
        return MatchResult(
            matched=False,
            expected=expected,
            actual=actual,
            diffable=diffable,
            reason=_describe_failure(exc),
        )
    return MatchResult(matched=True, actual=action)


def _match_pattern(pattern: Pattern, action: Action) -> MatchResult:
    if action == pattern.value:
        return MatchResult(matched=True, expected=pattern.value, actual=action)
    return MatchResult(
        matched=False,
        expected=pattern.value,
        actual=action,
        diffable=True,
        reason=f"expected {action!r} to deeply equal {pattern.value!r}",
    )


def _describe_failure(exc: BaseException) -> str:
    text = str(exc)
    if text:
        return text
    return f"predicate raised {type(exc).__name__}"
