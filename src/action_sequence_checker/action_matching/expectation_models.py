"""Expectation and per-action match entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Action = Mapping[str, Any]

_MISSING = object()


@dataclass(frozen=True)
class Pattern:
    """Structural value compared for deep equality against an action."""

    value: object

    @property
    def display_value(self) -> object:
        return self.value


@dataclass(frozen=True)
class Predicate:
    """Callable that raises when the action does not satisfy it."""

    check: Callable[[Action], object]

    @property
    def display_value(self) -> object:
        # A function has no structural value worth showing in a diff.
        return None


Expectation = Pattern | Predicate


def to_expectation(raw: object) -> Expectation:
    """Resolve raw user input into an explicit expectation variant."""
    if isinstance(raw, Pattern | Predicate):
        return raw
    if callable(raw):
        return Predicate(check=raw)
    return Pattern(value=raw)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one expectation evaluated against one action."""

    matched: bool
    expected: object | None = None
    actual: object | None = None
    diffable: bool = False
    reason: str = ""


class PredicateFailure(AssertionError):
    """Predicate failure carrying the structures it compared."""

    def __init__(self, message: str, *, expected: object, actual: object) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


def assert_deep_equal(actual: object, expected: object, message: str | None = None) -> None:
    """Raise PredicateFailure when actual and expected are not deeply equal.

    Intended for use inside predicate expectations so that a failure keeps the
    compared structures and can be rendered as a diff.
    """
    if actual == expected:
        return
    raise PredicateFailure(
        message or f"expected {actual!r} to deeply equal {expected!r}",
        expected=expected,
        actual=actual,
    )


def failure_payload(exc: BaseException, action: Action) -> tuple[object, object, bool]:
    """Return the (expected, actual, diffable) triple attached to a failure.

    Each field is read on its own: a missing ``expected`` becomes ``None`` and a
    missing ``actual`` falls back to the action under test. The failure is
    diffable when it supplies at least one of them.
    """
    expected = getattr(exc, "expected", _MISSING)
    actual = getattr(exc, "actual", _MISSING)
    diffable = expected is not _MISSING or actual is not _MISSING
    return (
        None if expected is _MISSING else expected,
        action if actual is _MISSING else actual,
        diffable,
    )
