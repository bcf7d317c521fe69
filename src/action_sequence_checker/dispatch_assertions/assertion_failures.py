"""User-visible assertion failure raised for dispatched action checks."""

from __future__ import annotations

import difflib
import json


class DispatchAssertionError(AssertionError):
    """Assertion failure carrying the compared structures.

    ``show_diff`` tells report renderers whether a structural diff between
    ``expected`` and ``actual`` is meaningful. It is false when the expectation
    was a predicate that did not expose what it compared.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: object = None,
        actual: object = None,
        show_diff: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual
        self.show_diff = show_diff

    def __str__(self) -> str:
        if not self.show_diff:
            return self.message
        diff = render_diff(self.expected, self.actual)
        if not diff:
            return self.message
        return f"{self.message}\n{diff}"


def render_diff(expected: object, actual: object) -> str:
    """Render a unified diff between pretty-printed expected and actual values."""
    expected_lines = _pretty(expected).splitlines()
    actual_lines = _pretty(actual).splitlines()
    return "\n".join(
        difflib.unified_diff(
            expected_lines,
            actual_lines,
            fromfile="expected",
            tofile="actual",
            lineterm="",
        )
    )


def _pretty(value: object) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, indent=2, sort_keys=True, default=repr)
    except (TypeError, ValueError):
        # Mixed-type keys cannot be sorted.
        return repr(value)
